"""BotApiClient — fachada do pipeline de requisição/resposta.

Composição (sem herança):
    params -> RequestContext.apply -> normalize_parameters
    -> AttachmentResolver -> BotApiHttpClient -> ApiErrorMapper | hydrate

Wrappers por método (api.connectors.botapi.endpoints) recebem o cliente
explicitamente e chamam `invoke` ou `invoke_with_attachments`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.botapi.api_errors import ApiErrorMapper
from api.hydration.hydrator import hydrate
from api.payload_builders.botapi.attachments import AttachmentResolver
from api.payload_builders.botapi.params import close_input_files, normalize_parameters
from utils.errors import AttachmentError

if TYPE_CHECKING:
    import re
    from collections.abc import Mapping

    from api.connectors.botapi.api_errors import ApiErrorHandler
    from api.connectors.botapi.http_client import BotApiHttpClient
    from api.hydration.shapes import Shape
    from api.payload_builders.botapi.attachments import ResolvedRequest
    from api.payload_builders.botapi.params import RequestContext


class BotApiClient:
    """Ponto único de invocação de métodos remotos.

    Args:
        http_client: Transporte da Bot API
        resolver: AttachmentResolver (default: novo)
        error_mapper: ApiErrorMapper compartilhado (default: novo)
    """

    def __init__(
        self,
        http_client: BotApiHttpClient,
        *,
        resolver: AttachmentResolver | None = None,
        error_mapper: ApiErrorMapper | None = None,
    ) -> None:
        self._http = http_client
        self._resolver = resolver or AttachmentResolver()
        self._errors = error_mapper or ApiErrorMapper()

    @property
    def errors(self) -> ApiErrorMapper:
        return self._errors

    def on_api_error(
        self,
        handler: ApiErrorHandler,
        pattern: str | re.Pattern[str] | None = None,
    ) -> ApiErrorHandler:
        return self._errors.on_api_error(handler, pattern)

    def on_exception(self, handler: ApiErrorHandler) -> ApiErrorHandler:
        return self._errors.on_exception(handler)

    def invoke(
        self,
        method: str,
        params: Mapping[str, Any],
        shape: Shape,
        *,
        context: RequestContext | None = None,
        timeout: float | None = None,
    ) -> Any | None:
        """Invoca método sem upload (corpo JSON).

        Returns:
            Resultado hidratado, ou None se a API rejeitou a chamada

        Raises:
            AttachmentError: Parâmetros contêm InputFile
            TransportError: Falha de rede, timeout ou resposta mal-formada
            HydrationError: result incompatível com o shape
        """
        resolved = self._prepare(params, context)
        if resolved.is_multipart:
            resolved.close()
            raise AttachmentError(
                f"{method} recebeu InputFile; use invoke_with_attachments",
                name=resolved.attachments[0].name,
            )
        return self._execute(method, resolved, shape, timeout)

    def invoke_with_attachments(
        self,
        method: str,
        params: Mapping[str, Any],
        shape: Shape,
        *,
        context: RequestContext | None = None,
        timeout: float | None = None,
    ) -> Any | None:
        """Invoca método que aceita upload (multipart quando há InputFile)."""
        resolved = self._prepare(params, context)
        return self._execute(method, resolved, shape, timeout)

    def download_file(self, file_path: str, *, timeout: float | None = None) -> bytes:
        return self._http.download_file(file_path, timeout=timeout)

    def close(self) -> None:
        self._http.close()

    def _prepare(self, params: Mapping[str, Any], context: RequestContext | None) -> ResolvedRequest:
        try:
            bag = context.apply(params) if context is not None else params
            return self._resolver.resolve(normalize_parameters(bag))
        except BaseException:
            close_input_files(params)
            raise

    def _execute(
        self,
        method: str,
        resolved: ResolvedRequest,
        shape: Shape,
        timeout: float | None,
    ) -> Any | None:
        envelope = self._http.call(method, resolved, timeout=timeout)
        if not envelope.ok:
            self._errors.dispatch(envelope.to_error(method))
            return None
        return hydrate(envelope.result, shape)
