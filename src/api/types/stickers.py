"""Tipos de stickers: Sticker, StickerSet, MaskPosition e InputSticker."""

from __future__ import annotations

from dataclasses import dataclass

from api.hydration.shapes import (
    BOOL,
    FLOAT,
    INT,
    STR,
    array_of,
    enum_of,
    optional,
    register_object,
    required,
)
from api.payload_builders.botapi.input_file import InputFile
from api.types.common import FILE, PHOTO_SIZE, File, PhotoSize
from api.types.enums import MaskPositionPoint, StickerType


@dataclass(frozen=True, slots=True, kw_only=True)
class MaskPosition:
    point: MaskPositionPoint
    x_shift: float
    y_shift: float
    scale: float


MASK_POSITION = register_object(
    MaskPosition,
    required("point", enum_of(MaskPositionPoint)),
    required("x_shift", FLOAT),
    required("y_shift", FLOAT),
    required("scale", FLOAT),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class Sticker:
    file_id: str
    file_unique_id: str
    type: StickerType
    width: int
    height: int
    is_animated: bool
    is_video: bool
    thumbnail: PhotoSize | None = None
    emoji: str | None = None
    set_name: str | None = None
    mask_position: MaskPosition | None = None
    custom_emoji_id: str | None = None
    needs_repainting: bool | None = None
    file_size: int | None = None
    premium_animation: File | None = None


STICKER = register_object(
    Sticker,
    required("file_id", STR),
    required("file_unique_id", STR),
    required("type", enum_of(StickerType)),
    required("width", INT),
    required("height", INT),
    required("is_animated", BOOL),
    required("is_video", BOOL),
    optional("thumbnail", PHOTO_SIZE),
    optional("emoji", STR),
    optional("set_name", STR),
    optional("mask_position", MASK_POSITION),
    optional("custom_emoji_id", STR),
    optional("needs_repainting", BOOL),
    optional("file_size", INT),
    optional("premium_animation", FILE),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class StickerSet:
    name: str
    title: str
    sticker_type: StickerType
    stickers: list[Sticker]
    is_animated: bool | None = None
    is_video: bool | None = None
    thumbnail: PhotoSize | None = None


STICKER_SET = register_object(
    StickerSet,
    required("name", STR),
    required("title", STR),
    required("sticker_type", enum_of(StickerType)),
    required("stickers", array_of(STICKER)),
    optional("is_animated", BOOL),
    optional("is_video", BOOL),
    optional("thumbnail", PHOTO_SIZE),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class InputSticker:
    """Sticker a adicionar em um set.

    `sticker` aceita file_id/URL (str) ou InputFile para upload, que o
    AttachmentResolver troca por `attach://<nome>`.
    """

    sticker: InputFile | str
    emoji_list: list[str]
    mask_position: MaskPosition | None = None
    keywords: list[str] | None = None


# Tipo apenas de saída: o shape serve à serialização
INPUT_STICKER = register_object(
    InputSticker,
    required("sticker", STR),
    required("emoji_list", array_of(STR)),
    optional("mask_position", MASK_POSITION),
    optional("keywords", array_of(STR)),
)
