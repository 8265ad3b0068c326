"""Cliente HTTP base (síncrono) com timeout e retry exponencial.

Falhas transitórias (timeout, rede, status retentável) são repetidas até
`max_retries` quando a requisição é marcada como retentável. Esgotadas as
tentativas, timeouts viram ApiTimeoutError e falhas de rede viram
ApiConnectionError; respostas com status retentável são devolvidas para
o chamador decidir.
"""

from __future__ import annotations

import logging
import time
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.botapi.api_logging import log_retry
from utils.errors import ApiConnectionError, ApiTimeoutError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP com retry para chamadas externas.

    Args:
        config: Timeouts e política de retry
        transport: Transport httpx alternativo (ex: httpx.MockTransport)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = httpx.Client(
            transport=transport,
            verify=self._config.verify_ssl,
            headers=self._config.default_headers,
            timeout=self._config.timeout_seconds,
        )

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def post(
        self,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        data: dict[str, str] | None = None,
        open_files: Callable[[ExitStack], list[tuple[str, tuple[str, Any, str]]]] | None = None,
        timeout: float | None = None,
        retryable: bool = True,
        operation: str = "",
    ) -> httpx.Response:
        """POST com retry.

        Args:
            url: URL completa
            json: Corpo JSON (exclusivo com data/open_files)
            data: Campos de formulário multipart
            open_files: Abre os parts binários a cada tentativa
            timeout: Timeout desta chamada (default: config)
            retryable: Se False, a primeira falha é propagada
            operation: Nome lógico para logs (nunca a URL)

        Raises:
            ApiTimeoutError: Timeout após esgotar tentativas
            ApiConnectionError: Falha de rede após esgotar tentativas
        """

        def send() -> httpx.Response:
            with ExitStack() as stack:
                files = open_files(stack) if open_files is not None else None
                return self._client.post(
                    url,
                    json=json,
                    data=data,
                    files=files,
                    timeout=self._resolve_timeout(timeout),
                )

        return self._with_retry(send, retryable=retryable, operation=operation)

    def get(
        self,
        url: str,
        *,
        timeout: float | None = None,
        operation: str = "",
    ) -> httpx.Response:
        """GET com retry (sempre idempotente)."""

        def send() -> httpx.Response:
            return self._client.get(url, timeout=self._resolve_timeout(timeout))

        return self._with_retry(send, retryable=True, operation=operation)

    def _resolve_timeout(self, timeout: float | None) -> float:
        return self._config.timeout_seconds if timeout is None else timeout

    def should_retry_response(self, response: httpx.Response) -> bool:
        """Status que justificam nova tentativa (5xx por padrão)."""
        return response.status_code >= 500

    def _with_retry(
        self,
        send: Callable[[], httpx.Response],
        *,
        retryable: bool,
        operation: str,
    ) -> httpx.Response:
        max_retries = self._config.max_retries if retryable else 0
        for attempt in range(max_retries + 1):
            last_attempt = attempt >= max_retries
            try:
                response = send()
            except httpx.TimeoutException as exc:
                if last_attempt:
                    raise ApiTimeoutError("Timeout na chamada à API", method=operation) from exc
                log_retry(operation, attempt + 1, "timeout")
            except httpx.TransportError as exc:
                if last_attempt:
                    raise ApiConnectionError("Falha de conexão com a API", method=operation) from exc
                log_retry(operation, attempt + 1, type(exc).__name__)
            else:
                if last_attempt or not self.should_retry_response(response):
                    return response
                log_retry(operation, attempt + 1, f"status_{response.status_code}")
            _backoff_sleep(
                attempt,
                self._config.backoff_base_seconds,
                self._config.backoff_max_seconds,
            )
        raise ApiConnectionError("Tentativas esgotadas", method=operation)


def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    time.sleep(backoff)
