"""TransportClient da Bot API.

Estende HttpClient com o contrato da Bot API:
- POST {api_endpoint}/{method}, corpo JSON ou multipart
- anexos abertos a cada tentativa e liberados ao fim da chamada
- multipart só é repetido se todo InputFile é reabrível
- 5xx sem envelope é transitório; qualquer envelope é resposta final
- download de arquivos por file_path
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.botapi.api_logging import log_success
from api.connectors.botapi.envelope import ApiEnvelope, looks_like_envelope, parse_envelope
from api.connectors.botapi.http_base import HttpClient, HttpClientConfig
from utils.errors import TransportError

if TYPE_CHECKING:
    from contextlib import ExitStack

    import httpx

    from api.payload_builders.botapi.attachments import ResolvedRequest
    from config.settings import BotApiSettings

logger = logging.getLogger(__name__)


class BotApiHttpClient(HttpClient):
    """Transporte HTTP para métodos da Bot API.

    Args:
        settings: Token, URL base e política de retry
        config: Sobrescreve a configuração HTTP derivada de settings
        transport: Transport httpx alternativo (testes)
    """

    def __init__(
        self,
        settings: BotApiSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(config or http_config_from_settings(settings), transport=transport)
        self._api_endpoint = settings.api_endpoint
        self._file_endpoint = settings.file_endpoint

    def should_retry_response(self, response: httpx.Response) -> bool:
        return response.status_code >= 500 and not looks_like_envelope(response)

    def call(
        self,
        method: str,
        resolved: ResolvedRequest,
        *,
        timeout: float | None = None,
    ) -> ApiEnvelope:
        """Executa um método remoto e devolve o envelope decodificado.

        Os streams dos anexos são liberados em qualquer saída.

        Raises:
            ApiTimeoutError: Timeout (após retries, quando permitidos)
            ApiConnectionError: Falha de rede
            MalformedResponseError: Corpo fora do envelope
            AttachmentError: Anexo não pôde ser (re)aberto
        """
        url = f"{self._api_endpoint}/{method}"
        try:
            if resolved.is_multipart:
                response = self.post(
                    url,
                    data=form_fields(resolved.fields),
                    open_files=lambda stack: open_parts(resolved, stack),
                    timeout=timeout,
                    retryable=resolved.is_retry_safe,
                    operation=method,
                )
            else:
                response = self.post(url, json=resolved.fields, timeout=timeout, operation=method)
        finally:
            resolved.close()

        envelope = parse_envelope(response, method)
        if envelope.ok:
            log_success(method, response.status_code, multipart=resolved.is_multipart)
        return envelope

    def download_file(self, file_path: str, *, timeout: float | None = None) -> bytes:
        """Baixa o conteúdo de um arquivo obtido via getFile.

        Raises:
            TransportError: Status diferente de 200
        """
        response = self.get(
            f"{self._file_endpoint}/{file_path.lstrip('/')}",
            timeout=timeout,
            operation="download_file",
        )
        if response.status_code != 200:
            raise TransportError(
                "Falha ao baixar arquivo",
                method="download_file",
                status_code=response.status_code,
            )
        return response.content


def http_config_from_settings(settings: BotApiSettings) -> HttpClientConfig:
    return HttpClientConfig(
        timeout_seconds=settings.request_timeout_seconds,
        max_retries=settings.max_retries,
        backoff_base_seconds=settings.backoff_base_seconds,
        backoff_max_seconds=settings.backoff_max_seconds,
    )


def form_fields(fields: dict[str, Any]) -> dict[str, str]:
    """Campos de formulário multipart (booleanos em minúsculas)."""
    out: dict[str, str] = {}
    for key, value in fields.items():
        if isinstance(value, bool):
            out[key] = "true" if value else "false"
        else:
            out[key] = str(value)
    return out


def open_parts(resolved: ResolvedRequest, stack: ExitStack) -> list[tuple[str, tuple[str, Any, str]]]:
    """Abre os parts binários de uma tentativa dentro do ExitStack."""
    return [
        (
            attachment.name,
            (attachment.filename, stack.enter_context(attachment.payload.open()), attachment.content_type),
        )
        for attachment in resolved.attachments
    ]
