"""Resultados de inline query (união discriminada por `type`)."""

from __future__ import annotations

from dataclasses import dataclass

from api.hydration.shapes import (
    BOOL,
    STR,
    array_of,
    enum_of,
    optional,
    register_object,
    register_union,
    required,
)
from api.types.common import MESSAGE_ENTITY, MessageEntity
from api.types.enums import InlineQueryResultType, ParseMode
from api.types.keyboards import INLINE_KEYBOARD_MARKUP, InlineKeyboardMarkup


@dataclass(frozen=True, slots=True, kw_only=True)
class InputTextMessageContent:
    message_text: str
    parse_mode: ParseMode | None = None
    entities: list[MessageEntity] | None = None
    disable_web_page_preview: bool | None = None


INPUT_TEXT_MESSAGE_CONTENT = register_object(
    InputTextMessageContent,
    required("message_text", STR),
    optional("parse_mode", enum_of(ParseMode)),
    optional("entities", array_of(MESSAGE_ENTITY)),
    optional("disable_web_page_preview", BOOL),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class InlineQueryResultCachedPhoto:
    """Foto já armazenada nos servidores da API."""

    id: str
    photo_file_id: str
    type: InlineQueryResultType = InlineQueryResultType.PHOTO
    title: str | None = None
    description: str | None = None
    caption: str | None = None
    parse_mode: ParseMode | None = None
    caption_entities: list[MessageEntity] | None = None
    reply_markup: InlineKeyboardMarkup | None = None
    input_message_content: InputTextMessageContent | None = None


INLINE_QUERY_RESULT_CACHED_PHOTO = register_object(
    InlineQueryResultCachedPhoto,
    required("type", enum_of(InlineQueryResultType)),
    required("id", STR),
    required("photo_file_id", STR),
    optional("title", STR),
    optional("description", STR),
    optional("caption", STR),
    optional("parse_mode", enum_of(ParseMode)),
    optional("caption_entities", array_of(MESSAGE_ENTITY)),
    optional("reply_markup", INLINE_KEYBOARD_MARKUP),
    optional("input_message_content", INPUT_TEXT_MESSAGE_CONTENT),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class InlineQueryResultArticle:
    id: str
    title: str
    input_message_content: InputTextMessageContent
    type: InlineQueryResultType = InlineQueryResultType.ARTICLE
    reply_markup: InlineKeyboardMarkup | None = None
    url: str | None = None
    description: str | None = None


INLINE_QUERY_RESULT_ARTICLE = register_object(
    InlineQueryResultArticle,
    required("type", enum_of(InlineQueryResultType)),
    required("id", STR),
    required("title", STR),
    required("input_message_content", INPUT_TEXT_MESSAGE_CONTENT),
    optional("reply_markup", INLINE_KEYBOARD_MARKUP),
    optional("url", STR),
    optional("description", STR),
)

INLINE_QUERY_RESULT = register_union(
    "InlineQueryResult",
    "type",
    {
        InlineQueryResultType.PHOTO.value: INLINE_QUERY_RESULT_CACHED_PHOTO,
        InlineQueryResultType.ARTICLE.value: INLINE_QUERY_RESULT_ARTICLE,
    },
)

InlineQueryResult = InlineQueryResultCachedPhoto | InlineQueryResultArticle
