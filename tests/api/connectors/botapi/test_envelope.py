"""Testes do envelope de resposta."""

from __future__ import annotations

import httpx
import pytest
from pydantic import ValidationError

from api.connectors.botapi import ApiEnvelope, parse_envelope
from api.connectors.botapi.envelope import looks_like_envelope
from utils.errors import ApiError, MalformedResponseError


class TestApiEnvelope:
    """Contrato ok/result/error_code."""

    def test_success_with_null_result(self) -> None:
        envelope = ApiEnvelope.model_validate({"ok": True, "result": None})
        assert envelope.ok is True
        assert envelope.result is None

    def test_success_without_result_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            ApiEnvelope.model_validate({"ok": True})

    def test_success_tolerates_description(self) -> None:
        envelope = ApiEnvelope.model_validate({"ok": True, "result": True, "description": "Webhook was set"})
        assert envelope.description == "Webhook was set"

    def test_success_with_error_code_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            ApiEnvelope.model_validate({"ok": True, "result": 1, "error_code": 400})

    def test_failure_requires_error_code(self) -> None:
        with pytest.raises(ValidationError):
            ApiEnvelope.model_validate({"ok": False, "description": "x"})

    def test_ok_must_be_boolean(self) -> None:
        with pytest.raises(ValidationError):
            ApiEnvelope.model_validate({"ok": "true", "result": 1})

    def test_unknown_keys_are_ignored(self) -> None:
        envelope = ApiEnvelope.model_validate({"ok": True, "result": 1, "new_field": 2})
        assert envelope.result == 1

    def test_to_error(self) -> None:
        envelope = ApiEnvelope.model_validate(
            {
                "ok": False,
                "error_code": 429,
                "description": "Too Many Requests: retry after 7",
                "parameters": {"retry_after": 7},
            }
        )
        error = envelope.to_error("sendMessage")
        assert isinstance(error, ApiError)
        assert error.error_code == 429
        assert error.method == "sendMessage"
        assert error.retry_after == 7
        assert error.migrate_to_chat_id is None


class TestParseEnvelope:
    """Decodificação a partir de httpx.Response."""

    def test_non_json_body(self) -> None:
        response = httpx.Response(502, content=b"<html>")
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_envelope(response, "getMe")
        assert exc_info.value.status_code == 502
        assert exc_info.value.method == "getMe"

    def test_json_outside_contract(self) -> None:
        response = httpx.Response(200, json={"result": 1})
        with pytest.raises(MalformedResponseError, match="fora do envelope"):
            parse_envelope(response, "getMe")

    def test_any_status_with_envelope(self) -> None:
        response = httpx.Response(403, json={"ok": False, "error_code": 403, "description": "Forbidden"})
        envelope = parse_envelope(response, "sendMessage")
        assert envelope.ok is False

    def test_looks_like_envelope(self) -> None:
        assert looks_like_envelope(httpx.Response(500, json={"ok": False, "error_code": 500}))
        assert not looks_like_envelope(httpx.Response(500, json=[1]))
        assert not looks_like_envelope(httpx.Response(500, content=b"boom"))
