"""Tipos comuns da Bot API: usuários, chats, mensagens, updates, arquivos.

Cada tipo é um dataclass imutável e tem seu ObjectShape registrado logo
abaixo da definição. O shape é a única fonte usada pela hidratação.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.hydration.shapes import (
    BOOL,
    INT,
    STR,
    array_of,
    enum_of,
    optional,
    ref,
    register_object,
    required,
)
from api.types.enums import ChatType, MessageEntityType

if TYPE_CHECKING:
    from api.types.keyboards import InlineKeyboardMarkup
    from api.types.stickers import Sticker


@dataclass(frozen=True, slots=True, kw_only=True)
class User:
    id: int
    is_bot: bool
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None


USER = register_object(
    User,
    required("id", INT),
    required("is_bot", BOOL),
    required("first_name", STR),
    optional("last_name", STR),
    optional("username", STR),
    optional("language_code", STR),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class Chat:
    id: int
    type: ChatType
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_forum: bool | None = None


CHAT = register_object(
    Chat,
    required("id", INT),
    required("type", enum_of(ChatType)),
    optional("title", STR),
    optional("username", STR),
    optional("first_name", STR),
    optional("last_name", STR),
    optional("is_forum", BOOL),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class MessageEntity:
    type: MessageEntityType
    offset: int
    length: int
    url: str | None = None
    user: User | None = None
    language: str | None = None
    custom_emoji_id: str | None = None


MESSAGE_ENTITY = register_object(
    MessageEntity,
    required("type", enum_of(MessageEntityType)),
    required("offset", INT),
    required("length", INT),
    optional("url", STR),
    optional("user", USER),
    optional("language", STR),
    optional("custom_emoji_id", STR),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class PhotoSize:
    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: int | None = None


PHOTO_SIZE = register_object(
    PhotoSize,
    required("file_id", STR),
    required("file_unique_id", STR),
    required("width", INT),
    required("height", INT),
    optional("file_size", INT),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class Document:
    file_id: str
    file_unique_id: str
    thumbnail: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


DOCUMENT = register_object(
    Document,
    required("file_id", STR),
    required("file_unique_id", STR),
    optional("thumbnail", PHOTO_SIZE),
    optional("file_name", STR),
    optional("mime_type", STR),
    optional("file_size", INT),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class File:
    """Arquivo pronto para download (getFile)."""

    file_id: str
    file_unique_id: str
    file_size: int | None = None
    file_path: str | None = None


FILE = register_object(
    File,
    required("file_id", STR),
    required("file_unique_id", STR),
    optional("file_size", INT),
    optional("file_path", STR),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class Message:
    """Mensagem recebida ou enviada.

    O campo JSON `from` é exposto como `from_user`.
    """

    message_id: int
    date: int
    chat: Chat
    from_user: User | None = None
    message_thread_id: int | None = None
    text: str | None = None
    caption: str | None = None
    entities: list[MessageEntity] | None = None
    caption_entities: list[MessageEntity] | None = None
    photo: list[PhotoSize] | None = None
    document: Document | None = None
    sticker: Sticker | None = None
    reply_to_message: Message | None = None
    reply_markup: InlineKeyboardMarkup | None = None


MESSAGE = register_object(
    Message,
    required("message_id", INT),
    required("date", INT),
    required("chat", CHAT),
    optional("from", USER, attr="from_user"),
    optional("message_thread_id", INT),
    optional("text", STR),
    optional("caption", STR),
    optional("entities", array_of(MESSAGE_ENTITY)),
    optional("caption_entities", array_of(MESSAGE_ENTITY)),
    optional("photo", array_of(PHOTO_SIZE)),
    optional("document", DOCUMENT),
    optional("sticker", ref("Sticker")),
    optional("reply_to_message", ref("Message")),
    optional("reply_markup", ref("InlineKeyboardMarkup")),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class CallbackQuery:
    id: str
    from_user: User
    chat_instance: str
    message: Message | None = None
    data: str | None = None


CALLBACK_QUERY = register_object(
    CallbackQuery,
    required("id", STR),
    required("from", USER, attr="from_user"),
    required("chat_instance", STR),
    optional("message", MESSAGE),
    optional("data", STR),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class Update:
    """Evento recebido via getUpdates ou webhook."""

    update_id: int
    message: Message | None = None
    edited_message: Message | None = None
    callback_query: CallbackQuery | None = None

    @property
    def effective_message(self) -> Message | None:
        if self.message is not None:
            return self.message
        if self.edited_message is not None:
            return self.edited_message
        if self.callback_query is not None:
            return self.callback_query.message
        return None

    @property
    def effective_chat_id(self) -> int | None:
        message = self.effective_message
        return message.chat.id if message is not None else None

    @property
    def effective_user_id(self) -> int | None:
        if self.callback_query is not None:
            return self.callback_query.from_user.id
        message = self.effective_message
        if message is not None and message.from_user is not None:
            return message.from_user.id
        return None


UPDATE = register_object(
    Update,
    required("update_id", INT),
    optional("message", MESSAGE),
    optional("edited_message", MESSAGE),
    optional("callback_query", CALLBACK_QUERY),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class WebhookInfo:
    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: str | None = None
    last_error_date: int | None = None
    last_error_message: str | None = None
    last_synchronization_error_date: int | None = None
    max_connections: int | None = None
    allowed_updates: list[str] | None = None


WEBHOOK_INFO = register_object(
    WebhookInfo,
    required("url", STR),
    required("has_custom_certificate", BOOL),
    required("pending_update_count", INT),
    optional("ip_address", STR),
    optional("last_error_date", INT),
    optional("last_error_message", STR),
    optional("last_synchronization_error_date", INT),
    optional("max_connections", INT),
    optional("allowed_updates", array_of(STR)),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ResponseParameters:
    """Parâmetros auxiliares de erros (envelope ok=false)."""

    migrate_to_chat_id: int | None = None
    retry_after: int | None = None


RESPONSE_PARAMETERS = register_object(
    ResponseParameters,
    optional("migrate_to_chat_id", INT),
    optional("retry_after", INT),
)
