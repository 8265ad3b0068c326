"""Tipos de domínio da Bot API.

Importar este pacote registra todos os shapes na tabela estática
(api.hydration.shapes), incluindo os alvos de referências tardias
(ex: Message.reply_to_message, Message.sticker).
"""

from api.types.chat_member import (
    CHAT_MEMBER,
    ChatMember,
    ChatMemberAdministrator,
    ChatMemberBanned,
    ChatMemberLeft,
    ChatMemberMember,
    ChatMemberOwner,
    ChatMemberRestricted,
)
from api.types.common import (
    CALLBACK_QUERY,
    CHAT,
    DOCUMENT,
    FILE,
    MESSAGE,
    MESSAGE_ENTITY,
    PHOTO_SIZE,
    RESPONSE_PARAMETERS,
    UPDATE,
    USER,
    WEBHOOK_INFO,
    CallbackQuery,
    Chat,
    Document,
    File,
    Message,
    MessageEntity,
    PhotoSize,
    ResponseParameters,
    Update,
    User,
    WebhookInfo,
)
from api.types.enums import (
    ChatMemberStatus,
    ChatType,
    InlineQueryResultType,
    InputMediaType,
    MaskPositionPoint,
    MessageEntityType,
    ParseMode,
    StickerFormat,
    StickerType,
)
from api.types.inline import (
    INLINE_QUERY_RESULT,
    InlineQueryResult,
    InlineQueryResultArticle,
    InlineQueryResultCachedPhoto,
    InputTextMessageContent,
)
from api.types.input_media import (
    INPUT_MEDIA,
    InputMedia,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
)
from api.types.keyboards import (
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
)
from api.types.limits import Limits
from api.types.stickers import (
    STICKER,
    STICKER_SET,
    InputSticker,
    MaskPosition,
    Sticker,
    StickerSet,
)

__all__ = [
    "CALLBACK_QUERY",
    "CHAT",
    "CHAT_MEMBER",
    "DOCUMENT",
    "FILE",
    "INLINE_QUERY_RESULT",
    "INPUT_MEDIA",
    "MESSAGE",
    "MESSAGE_ENTITY",
    "PHOTO_SIZE",
    "RESPONSE_PARAMETERS",
    "STICKER",
    "STICKER_SET",
    "UPDATE",
    "USER",
    "WEBHOOK_INFO",
    "CallbackQuery",
    "Chat",
    "ChatMember",
    "ChatMemberAdministrator",
    "ChatMemberBanned",
    "ChatMemberLeft",
    "ChatMemberMember",
    "ChatMemberOwner",
    "ChatMemberRestricted",
    "ChatMemberStatus",
    "ChatType",
    "Document",
    "File",
    "ForceReply",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "InlineQueryResult",
    "InlineQueryResultArticle",
    "InlineQueryResultCachedPhoto",
    "InlineQueryResultType",
    "InputMedia",
    "InputMediaDocument",
    "InputMediaPhoto",
    "InputMediaType",
    "InputMediaVideo",
    "InputSticker",
    "InputTextMessageContent",
    "KeyboardButton",
    "Limits",
    "MaskPosition",
    "MaskPositionPoint",
    "Message",
    "MessageEntity",
    "MessageEntityType",
    "ParseMode",
    "PhotoSize",
    "ReplyKeyboardMarkup",
    "ReplyKeyboardRemove",
    "ReplyMarkup",
    "ResponseParameters",
    "Sticker",
    "StickerFormat",
    "StickerSet",
    "StickerType",
    "Update",
    "User",
    "WebhookInfo",
]
