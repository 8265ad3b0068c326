"""Fake da Bot API sobre httpx.MockTransport.

Respostas são enfileiradas antes da chamada; cada requisição recebida é
registrada (corpo já lido) para asserts.
"""

from __future__ import annotations

import json
from collections import deque
from typing import Any

import httpx

from api.connectors.botapi.client import BotApiClient
from api.connectors.botapi.http_client import BotApiHttpClient
from config.settings import BotApiSettings

TEST_TOKEN = "123456:TEST-token_abc"


class FakeBotApi:
    """Servidor fake: fila de respostas (ou exceções) e histórico."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._queue: deque[httpx.Response | Exception] = deque()

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def reply(self, result: Any, *, status_code: int = 200, **extra: Any) -> FakeBotApi:
        self._queue.append(httpx.Response(status_code, json={"ok": True, "result": result, **extra}))
        return self

    def reply_error(
        self,
        error_code: int,
        description: str,
        *,
        parameters: dict[str, Any] | None = None,
    ) -> FakeBotApi:
        body: dict[str, Any] = {"ok": False, "error_code": error_code, "description": description}
        if parameters is not None:
            body["parameters"] = parameters
        self._queue.append(httpx.Response(error_code, json=body))
        return self

    def reply_raw(self, status_code: int, content: bytes = b"") -> FakeBotApi:
        self._queue.append(httpx.Response(status_code, content=content))
        return self

    def fail(self, exc: Exception) -> FakeBotApi:
        self._queue.append(exc)
        return self

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if not self._queue:
            raise AssertionError(f"Requisição inesperada: {method_of(request)}")
        item = self._queue.popleft()
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def make_settings(**overrides: Any) -> BotApiSettings:
    """Settings de teste: sem backoff real."""
    values: dict[str, Any] = {
        "bot_token": TEST_TOKEN,
        "max_retries": 2,
        "backoff_base_seconds": 0.0,
        "backoff_max_seconds": 0.0,
        "request_timeout_seconds": 5.0,
    }
    values.update(overrides)
    return BotApiSettings(**values)


def make_client(fake: FakeBotApi, **overrides: Any) -> BotApiClient:
    http_client = BotApiHttpClient(make_settings(**overrides), transport=fake.transport)
    return BotApiClient(http_client)


def method_of(request: httpx.Request) -> str:
    return request.url.path.rsplit("/", 1)[-1]


def json_body(request: httpx.Request) -> dict[str, Any]:
    return json.loads(request.content)
