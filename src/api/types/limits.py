"""Limites documentados da Bot API."""

from __future__ import annotations

from typing import Final


class Limits:
    """Limites de tamanho aplicados pela API remota."""

    TEXT_LENGTH: Final = 4096
    CAPTION_LENGTH: Final = 1024
    CALLBACK_DATA_LENGTH: Final = 64
    MEDIA_GROUP_MAX_SIZE: Final = 10
    STICKER_SET_INITIAL_MAX: Final = 50
    STICKER_EMOJI_MAX: Final = 20
