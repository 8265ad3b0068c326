"""Testes do transporte da Bot API (BotApiHttpClient)."""

from __future__ import annotations

import io

import httpx
import pytest

from api.connectors.botapi.http_client import BotApiHttpClient, form_fields
from api.payload_builders.botapi import AttachmentResolver, InputFile, normalize_parameters
from tests.fakes.fake_bot_api import TEST_TOKEN, FakeBotApi, json_body, make_settings, method_of
from tests.fakes.form_data import parse_form_data
from utils.errors import (
    ApiConnectionError,
    ApiTimeoutError,
    AttachmentError,
    MalformedResponseError,
    TransportError,
)


class NonSeekableStream(io.BytesIO):
    def seekable(self) -> bool:
        return False


def _http(fake: FakeBotApi, **overrides: object) -> BotApiHttpClient:
    return BotApiHttpClient(make_settings(**overrides), transport=fake.transport)


def _resolve(params: dict) -> object:
    return AttachmentResolver().resolve(normalize_parameters(params))


class TestJsonCalls:
    """Chamadas sem anexos."""

    def test_posts_json_to_method_url(self) -> None:
        fake = FakeBotApi().reply(True)
        envelope = _http(fake).call("deleteWebhook", _resolve({"drop_pending_updates": True}))

        assert envelope.ok is True
        assert envelope.result is True
        request = fake.last_request
        assert request.method == "POST"
        assert request.url.path == f"/bot{TEST_TOKEN}/deleteWebhook"
        assert json_body(request) == {"drop_pending_updates": True}

    def test_default_timeout_from_settings(self) -> None:
        fake = FakeBotApi().reply(True)
        _http(fake, request_timeout_seconds=7.0).call("getMe", _resolve({}))
        assert fake.last_request.extensions["timeout"]["read"] == 7.0

    def test_explicit_zero_timeout_is_respected(self) -> None:
        """timeout=0 explícito não cai no default das settings."""
        fake = FakeBotApi().reply(True).reply_raw(200, b"data")
        http = _http(fake, request_timeout_seconds=7.0)

        http.call("getMe", _resolve({}), timeout=0.0)
        assert fake.last_request.extensions["timeout"]["read"] == 0.0

        http.download_file("docs/a.pdf", timeout=0)
        assert fake.last_request.extensions["timeout"]["read"] == 0

    def test_test_environment_suffix(self) -> None:
        fake = FakeBotApi().reply(True)
        _http(fake, test_environment=True).call("close", _resolve({}))
        assert fake.last_request.url.path == f"/bot{TEST_TOKEN}/test/close"

    def test_api_error_envelope_with_4xx_is_returned(self) -> None:
        fake = FakeBotApi().reply_error(400, "Bad Request: chat not found")
        envelope = _http(fake).call("sendMessage", _resolve({"chat_id": 1, "text": "x"}))
        assert envelope.ok is False
        assert envelope.error_code == 400
        assert len(fake.requests) == 1

    def test_api_error_envelope_with_5xx_is_not_retried(self) -> None:
        fake = FakeBotApi().reply_error(502, "Bad Gateway")
        envelope = _http(fake).call("getMe", _resolve({}))
        assert envelope.error_code == 502
        assert len(fake.requests) == 1


class TestRetryPolicy:
    """Retry de falhas transitórias."""

    def test_transient_network_error_is_retried(self) -> None:
        fake = FakeBotApi().fail(httpx.ConnectError("recusado")).reply({"id": 1})
        envelope = _http(fake).call("getMe", _resolve({}))
        assert envelope.result == {"id": 1}
        assert len(fake.requests) == 2

    def test_timeout_after_retries_is_distinct_error(self) -> None:
        fake = FakeBotApi()
        for _ in range(3):
            fake.fail(httpx.ReadTimeout("lento"))
        with pytest.raises(ApiTimeoutError) as exc_info:
            _http(fake, max_retries=2).call("getMe", _resolve({}))
        assert exc_info.value.method == "getMe"
        assert len(fake.requests) == 3

    def test_connection_failure_after_retries(self) -> None:
        fake = FakeBotApi().fail(httpx.ConnectError("a")).fail(httpx.ConnectError("b"))
        with pytest.raises(ApiConnectionError):
            _http(fake, max_retries=1).call("getMe", _resolve({}))

    def test_timeout_is_not_a_malformed_response(self) -> None:
        fake = FakeBotApi().fail(httpx.ConnectTimeout("t"))
        with pytest.raises(TransportError) as exc_info:
            _http(fake, max_retries=0).call("getMe", _resolve({}))
        assert not isinstance(exc_info.value, MalformedResponseError)
        assert isinstance(exc_info.value, ApiTimeoutError)

    def test_server_error_without_envelope_is_retried(self) -> None:
        fake = FakeBotApi().reply_raw(503, b"<html>down</html>").reply(True)
        envelope = _http(fake).call("getMe", _resolve({}))
        assert envelope.ok is True
        assert len(fake.requests) == 2

    def test_server_error_without_envelope_after_retries_is_malformed(self) -> None:
        fake = FakeBotApi().reply_raw(500, b"oops").reply_raw(500, b"oops")
        with pytest.raises(MalformedResponseError) as exc_info:
            _http(fake, max_retries=1).call("getMe", _resolve({}))
        assert exc_info.value.status_code == 500

    def test_non_json_2xx_is_malformed(self) -> None:
        fake = FakeBotApi().reply_raw(200, b"not json")
        with pytest.raises(MalformedResponseError):
            _http(fake).call("getMe", _resolve({}))
        assert len(fake.requests) == 1


class TestMultipartCalls:
    """Uploads multipart."""

    def test_multipart_body(self) -> None:
        fake = FakeBotApi().reply(True)
        resolved = _resolve(
            {
                "url": "https://example.org/hook",
                "drop_pending_updates": False,
                "certificate": InputFile(b"PEM", name="cert.pem", mime_hint="application/x-pem-file"),
            }
        )
        _http(fake).call("setWebhook", resolved)

        form = parse_form_data(fake.last_request)
        assert form.fields == {
            "url": "https://example.org/hook",
            "drop_pending_updates": "false",
            "certificate": "attach://cert.pem",
        }
        part = form.files["cert.pem"]
        assert part.filename == "cert.pem"
        assert part.content == b"PEM"
        assert part.content_type == "application/x-pem-file"

    def test_reopenable_upload_is_retried(self) -> None:
        fake = FakeBotApi().fail(httpx.ConnectError("x")).reply(True)
        resolved = _resolve({"photo": InputFile(b"jpeg-bytes", name="p.jpg")})
        _http(fake).call("sendPhoto", resolved)

        assert len(fake.requests) == 2
        assert parse_form_data(fake.last_request).files["p.jpg"].content == b"jpeg-bytes"

    def test_non_reopenable_upload_is_not_retried(self) -> None:
        fake = FakeBotApi().fail(httpx.ConnectError("x")).reply(True)
        resolved = _resolve({"photo": InputFile(NonSeekableStream(b"once"), name="p.jpg")})
        with pytest.raises(ApiConnectionError):
            _http(fake).call("sendPhoto", resolved)
        assert len(fake.requests) == 1

    def test_streams_are_closed_after_call(self) -> None:
        stream = io.BytesIO(b"abc")
        fake = FakeBotApi().reply(True)
        _http(fake).call("sendDocument", _resolve({"document": InputFile(stream, name="d.txt")}))
        assert stream.closed

    def test_streams_are_closed_after_failure(self) -> None:
        stream = io.BytesIO(b"abc")
        fake = FakeBotApi().fail(httpx.ConnectError("x"))
        with pytest.raises(ApiConnectionError):
            _http(fake, max_retries=0).call("sendDocument", _resolve({"document": InputFile(stream)}))
        assert stream.closed

    def test_unreadable_path_raises_attachment_error(self, tmp_path) -> None:
        fake = FakeBotApi()
        resolved = _resolve({"document": InputFile(tmp_path / "sumiu.pdf")})
        with pytest.raises(AttachmentError):
            _http(fake).call("sendDocument", resolved)
        assert fake.requests == []

    def test_form_fields_stringify(self) -> None:
        assert form_fields({"a": True, "b": 3, "c": "x"}) == {"a": "true", "b": "3", "c": "x"}


class TestDownloadFile:
    """Download por file_path."""

    def test_downloads_from_file_endpoint(self) -> None:
        fake = FakeBotApi()
        fake.reply_raw(200, b"binary")
        content = _http(fake).download_file("photos/file_1.jpg")
        assert content == b"binary"
        assert fake.last_request.method == "GET"
        assert fake.last_request.url.path == f"/file/bot{TEST_TOKEN}/photos/file_1.jpg"

    def test_not_found_raises_transport_error(self) -> None:
        fake = FakeBotApi().reply_raw(404, b"")
        with pytest.raises(TransportError) as exc_info:
            _http(fake).download_file("x.jpg")
        assert exc_info.value.status_code == 404
        assert method_of(fake.last_request) == "x.jpg"
