"""ErrorMapper: roteia rejeições da API (ok=false) para handlers.

Ordem de despacho:
    1. handlers de ApiError com padrão casando a description
    2. handlers de ApiError globais (sem padrão), em ordem de registro
    3. se nenhum handler de ApiError rodou, handlers catch-all
    4. sem catch-all, apenas um warning é logado

A chamada de origem sempre retorna None; ok=false nunca é repetido.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.connectors.botapi.api_logging import log_api_error, log_unhandled_api_error

if TYPE_CHECKING:
    from collections.abc import Callable

    from utils.errors import ApiError

    ApiErrorHandler = Callable[[ApiError], object]


@dataclass(frozen=True, slots=True)
class _Registration:
    handler: ApiErrorHandler
    pattern: re.Pattern[str] | None = None

    def matches(self, error: ApiError) -> bool:
        return self.pattern is None or self.pattern.search(error.description) is not None


class ApiErrorMapper:
    """Registro e despacho de handlers de erro da API."""

    def __init__(self) -> None:
        self._api_handlers: list[_Registration] = []
        self._catch_all: list[ApiErrorHandler] = []

    def on_api_error(
        self,
        handler: ApiErrorHandler,
        pattern: str | re.Pattern[str] | None = None,
    ) -> ApiErrorHandler:
        """Registra handler de ApiError.

        Args:
            handler: Recebe o ApiError
            pattern: Regex aplicada à description; None = global

        Returns:
            O próprio handler (uso como decorator)
        """
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        self._api_handlers.append(_Registration(handler=handler, pattern=compiled))
        return handler

    def on_exception(self, handler: ApiErrorHandler) -> ApiErrorHandler:
        """Registra handler catch-all para erros não tratados."""
        self._catch_all.append(handler)
        return handler

    def dispatch(self, error: ApiError) -> None:
        """Entrega o erro aos handlers. Exceções dos handlers propagam."""
        log_api_error(error)

        specific = [r for r in self._api_handlers if r.pattern is not None and r.matches(error)]
        global_ = [r for r in self._api_handlers if r.pattern is None]
        for registration in (*specific, *global_):
            registration.handler(error)
        if specific or global_:
            return

        for handler in self._catch_all:
            handler(error)
        if not self._catch_all:
            log_unhandled_api_error(error)
