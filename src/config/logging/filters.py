"""Filters de logging: contexto e redação de segredos.

- CorrelationIdFilter: injeta service e correlation_id
- BotTokenRedactionFilter: remove tokens de bot de mensagens formatadas
  (ex: URLs logadas por bibliotecas de terceiros)
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# /bot<id>:<segredo> em URLs da Bot API
_BOT_TOKEN_PATTERN = re.compile(r"/bot\d+:[A-Za-z0-9_-]+")
_REDACTED = "/bot<redacted>"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id passado via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class BotTokenRedactionFilter(logging.Filter):
    """Substitui `/bot<token>` por `/bot<redacted>` na mensagem final."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if "/bot" in message:
            redacted = _BOT_TOKEN_PATTERN.sub(_REDACTED, message)
            if redacted != message:
                record.msg = redacted
                record.args = None
        return True


def redact_bot_token(text: str) -> str:
    """Aplica a mesma redação a um texto arbitrário."""
    return _BOT_TOKEN_PATTERN.sub(_REDACTED, text)
