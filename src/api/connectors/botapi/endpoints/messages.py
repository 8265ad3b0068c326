"""Wrappers de mensagens: sendMessage, sendPhoto, editMessageMedia, getFile, getChatMember."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.hydration.shapes import BOOL
from api.types.chat_member import CHAT_MEMBER
from api.types.common import FILE, MESSAGE

if TYPE_CHECKING:
    from api.connectors.botapi.client import BotApiClient
    from api.payload_builders.botapi.input_file import InputFile
    from api.payload_builders.botapi.params import RequestContext
    from api.types.chat_member import ChatMember
    from api.types.common import File, Message, MessageEntity
    from api.types.enums import ParseMode
    from api.types.input_media import InputMedia
    from api.types.keyboards import InlineKeyboardMarkup, ReplyMarkup


def send_message(
    client: BotApiClient,
    text: str,
    *,
    chat_id: int | str | None = None,
    message_thread_id: int | None = None,
    parse_mode: ParseMode | None = None,
    entities: list[MessageEntity] | None = None,
    disable_notification: bool | None = None,
    protect_content: bool | None = None,
    reply_to_message_id: int | None = None,
    reply_markup: ReplyMarkup | None = None,
    context: RequestContext | None = None,
) -> Message | None:
    """Envia mensagem de texto.

    chat_id/message_thread_id None são preenchidos pelo RequestContext.
    """
    return client.invoke(
        "sendMessage",
        {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "text": text,
            "parse_mode": parse_mode,
            "entities": entities,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_to_message_id": reply_to_message_id,
            "reply_markup": reply_markup,
        },
        MESSAGE,
        context=context,
    )


def send_photo(
    client: BotApiClient,
    photo: InputFile | str,
    *,
    chat_id: int | str | None = None,
    message_thread_id: int | None = None,
    caption: str | None = None,
    parse_mode: ParseMode | None = None,
    has_spoiler: bool | None = None,
    disable_notification: bool | None = None,
    reply_markup: ReplyMarkup | None = None,
    context: RequestContext | None = None,
) -> Message | None:
    """Envia foto (file_id, URL ou upload)."""
    return client.invoke_with_attachments(
        "sendPhoto",
        {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "photo": photo,
            "caption": caption,
            "parse_mode": parse_mode,
            "has_spoiler": has_spoiler,
            "disable_notification": disable_notification,
            "reply_markup": reply_markup,
        },
        MESSAGE,
        context=context,
    )


def edit_message_media(
    client: BotApiClient,
    media: InputMedia,
    *,
    chat_id: int | str | None = None,
    message_id: int | None = None,
    inline_message_id: str | None = None,
    reply_markup: InlineKeyboardMarkup | None = None,
    context: RequestContext | None = None,
) -> Message | bool | None:
    """Troca a mídia de uma mensagem.

    Mensagens inline (inline_message_id) retornam True em vez de Message.
    """
    return client.invoke_with_attachments(
        "editMessageMedia",
        {
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
            "media": media,
            "reply_markup": reply_markup,
        },
        BOOL if inline_message_id is not None else MESSAGE,
        context=context,
    )


def get_file(client: BotApiClient, file_id: str) -> File | None:
    return client.invoke("getFile", {"file_id": file_id}, FILE)


def get_chat_member(
    client: BotApiClient,
    *,
    chat_id: int | str | None = None,
    user_id: int | None = None,
    context: RequestContext | None = None,
) -> ChatMember | None:
    return client.invoke(
        "getChatMember",
        {"chat_id": chat_id, "user_id": user_id},
        CHAT_MEMBER,
        context=context,
    )
