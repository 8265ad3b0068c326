"""Testes de normalize_parameters e RequestContext."""

from __future__ import annotations

import json

from api.payload_builders.botapi import InputFile, RequestContext, normalize_parameters
from api.types import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InputMediaPhoto,
    ParseMode,
)


class TestNormalizeParameters:
    """Normalização pura do ParameterBag."""

    def test_none_values_are_dropped(self) -> None:
        result = normalize_parameters({"chat_id": 1, "parse_mode": None, "text": "oi"})
        assert result == {"chat_id": 1, "text": "oi"}

    def test_scalars_pass_through(self) -> None:
        result = normalize_parameters({"a": 1, "b": 1.5, "c": True, "d": "x"})
        assert result == {"a": 1, "b": 1.5, "c": True, "d": "x"}

    def test_enum_becomes_backing_value(self) -> None:
        result = normalize_parameters({"parse_mode": ParseMode.MARKDOWN_V2})
        assert result["parse_mode"] == "MarkdownV2"

    def test_structured_value_becomes_compact_json(self) -> None:
        markup = InlineKeyboardMarkup().add_row(InlineKeyboardButton(text="Ok", callback_data="ok"))
        result = normalize_parameters({"reply_markup": markup})
        assert result["reply_markup"] == '{"inline_keyboard":[[{"text":"Ok","callback_data":"ok"}]]}'

    def test_lists_and_dicts_become_json(self) -> None:
        result = normalize_parameters({"allowed_updates": ["message", "callback_query"]})
        assert json.loads(result["allowed_updates"]) == ["message", "callback_query"]

    def test_input_file_is_kept(self) -> None:
        upload = InputFile(b"abc", name="a.txt")
        result = normalize_parameters({"document": upload})
        assert result["document"] is upload

    def test_structure_with_input_file_stays_as_tree(self) -> None:
        """Ancestrais de InputFile não são serializados antes da tokenização."""
        upload = InputFile(b"abc", name="b.jpg")
        result = normalize_parameters({"media": InputMediaPhoto(media=upload, caption="B")})
        assert result["media"] == {"type": "photo", "media": upload, "caption": "B"}

    def test_empty_bag(self) -> None:
        assert normalize_parameters({}) == {}


class TestRequestContext:
    """Defaults de identidade."""

    def test_fills_declared_none_keys(self) -> None:
        context = RequestContext(chat_id=10, user_id=20)
        assert context.apply({"chat_id": None, "user_id": None}) == {"chat_id": 10, "user_id": 20}

    def test_explicit_value_wins(self) -> None:
        context = RequestContext(chat_id=10)
        assert context.apply({"chat_id": 99}) == {"chat_id": 99}

    def test_undeclared_keys_are_not_added(self) -> None:
        context = RequestContext(chat_id=10, user_id=20)
        assert context.apply({"name": "set"}) == {"name": "set"}
