"""Wrappers de stickers e sticker sets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.hydration.shapes import BOOL
from api.types.common import FILE, MESSAGE
from api.types.stickers import STICKER_SET

if TYPE_CHECKING:
    from api.connectors.botapi.client import BotApiClient
    from api.payload_builders.botapi.input_file import InputFile
    from api.payload_builders.botapi.params import RequestContext
    from api.types.common import File, Message
    from api.types.enums import StickerFormat, StickerType
    from api.types.keyboards import ReplyMarkup
    from api.types.stickers import InputSticker, StickerSet


def send_sticker(
    client: BotApiClient,
    sticker: InputFile | str,
    *,
    chat_id: int | str | None = None,
    message_thread_id: int | None = None,
    emoji: str | None = None,
    disable_notification: bool | None = None,
    reply_markup: ReplyMarkup | None = None,
    context: RequestContext | None = None,
) -> Message | None:
    return client.invoke_with_attachments(
        "sendSticker",
        {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "sticker": sticker,
            "emoji": emoji,
            "disable_notification": disable_notification,
            "reply_markup": reply_markup,
        },
        MESSAGE,
        context=context,
    )


def get_sticker_set(client: BotApiClient, name: str) -> StickerSet | None:
    return client.invoke("getStickerSet", {"name": name}, STICKER_SET)


def upload_sticker_file(
    client: BotApiClient,
    sticker: InputFile,
    sticker_format: StickerFormat,
    *,
    user_id: int | None = None,
    context: RequestContext | None = None,
) -> File | None:
    """Sobe arquivo de sticker para uso posterior em sets."""
    return client.invoke_with_attachments(
        "uploadStickerFile",
        {"user_id": user_id, "sticker": sticker, "sticker_format": sticker_format},
        FILE,
        context=context,
    )


def create_new_sticker_set(
    client: BotApiClient,
    name: str,
    title: str,
    stickers: list[InputSticker],
    *,
    user_id: int | None = None,
    sticker_type: StickerType | None = None,
    needs_repainting: bool | None = None,
    context: RequestContext | None = None,
) -> bool | None:
    """Cria sticker set; InputSticker com InputFile vira attach://."""
    return client.invoke_with_attachments(
        "createNewStickerSet",
        {
            "user_id": user_id,
            "name": name,
            "title": title,
            "stickers": stickers,
            "sticker_type": sticker_type,
            "needs_repainting": needs_repainting,
        },
        BOOL,
        context=context,
    )


def add_sticker_to_set(
    client: BotApiClient,
    name: str,
    sticker: InputSticker,
    *,
    user_id: int | None = None,
    context: RequestContext | None = None,
) -> bool | None:
    return client.invoke_with_attachments(
        "addStickerToSet",
        {"user_id": user_id, "name": name, "sticker": sticker},
        BOOL,
        context=context,
    )


def set_sticker_position_in_set(client: BotApiClient, sticker: str, position: int) -> bool | None:
    return client.invoke("setStickerPositionInSet", {"sticker": sticker, "position": position}, BOOL)


def delete_sticker_from_set(client: BotApiClient, sticker: str) -> bool | None:
    return client.invoke("deleteStickerFromSet", {"sticker": sticker}, BOOL)


def set_sticker_emoji_list(client: BotApiClient, sticker: str, emoji_list: list[str]) -> bool | None:
    return client.invoke(
        "setStickerEmojiList",
        {"sticker": sticker, "emoji_list": emoji_list},
        BOOL,
    )
