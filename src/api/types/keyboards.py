"""Markups de teclado (reply_markup).

As quatro variantes de reply_markup não têm discriminante no protocolo;
como parâmetro de saída elas são apenas serializadas. Na entrada, a API
só devolve InlineKeyboardMarkup.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from api.hydration.shapes import BOOL, STR, array_of, optional, register_object, required


@dataclass(frozen=True, slots=True, kw_only=True)
class InlineKeyboardButton:
    text: str
    url: str | None = None
    callback_data: str | None = None
    switch_inline_query: str | None = None


INLINE_KEYBOARD_BUTTON = register_object(
    InlineKeyboardButton,
    required("text", STR),
    optional("url", STR),
    optional("callback_data", STR),
    optional("switch_inline_query", STR),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class InlineKeyboardMarkup:
    inline_keyboard: list[list[InlineKeyboardButton]] = field(default_factory=list)

    def add_row(self, *buttons: InlineKeyboardButton) -> InlineKeyboardMarkup:
        """Retorna novo markup com uma linha adicional."""
        return InlineKeyboardMarkup(inline_keyboard=[*self.inline_keyboard, list(buttons)])


INLINE_KEYBOARD_MARKUP = register_object(
    InlineKeyboardMarkup,
    required("inline_keyboard", array_of(array_of(INLINE_KEYBOARD_BUTTON))),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyboardButton:
    text: str
    request_contact: bool | None = None
    request_location: bool | None = None


KEYBOARD_BUTTON = register_object(
    KeyboardButton,
    required("text", STR),
    optional("request_contact", BOOL),
    optional("request_location", BOOL),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ReplyKeyboardMarkup:
    keyboard: list[list[KeyboardButton]] = field(default_factory=list)
    is_persistent: bool | None = None
    resize_keyboard: bool | None = None
    one_time_keyboard: bool | None = None
    input_field_placeholder: str | None = None
    selective: bool | None = None


REPLY_KEYBOARD_MARKUP = register_object(
    ReplyKeyboardMarkup,
    required("keyboard", array_of(array_of(KEYBOARD_BUTTON))),
    optional("is_persistent", BOOL),
    optional("resize_keyboard", BOOL),
    optional("one_time_keyboard", BOOL),
    optional("input_field_placeholder", STR),
    optional("selective", BOOL),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ReplyKeyboardRemove:
    remove_keyboard: bool = True
    selective: bool | None = None


REPLY_KEYBOARD_REMOVE = register_object(
    ReplyKeyboardRemove,
    required("remove_keyboard", BOOL),
    optional("selective", BOOL),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ForceReply:
    force_reply: bool = True
    input_field_placeholder: str | None = None
    selective: bool | None = None


FORCE_REPLY = register_object(
    ForceReply,
    required("force_reply", BOOL),
    optional("input_field_placeholder", STR),
    optional("selective", BOOL),
)

ReplyMarkup = InlineKeyboardMarkup | ReplyKeyboardMarkup | ReplyKeyboardRemove | ForceReply
