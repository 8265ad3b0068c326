"""Helpers de logging da Bot API (sem token e sem conteúdo de mensagens)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utils.errors import ApiError

logger = logging.getLogger(__name__)


def log_api_error(error: ApiError) -> None:
    """Loga rejeição da API (ok=false)."""
    logger.warning(
        "bot_api_error",
        extra={
            "method": error.method,
            "error_code": error.error_code,
            "retry_after": error.retry_after,
        },
    )


def log_unhandled_api_error(error: ApiError) -> None:
    """Loga ApiError que nenhum handler tratou."""
    logger.warning(
        "bot_api_error_unhandled",
        extra={"method": error.method, "error_code": error.error_code},
    )


def log_success(method: str, status_code: int, *, multipart: bool) -> None:
    logger.debug(
        "bot_api_call_succeeded",
        extra={"method": method, "status_code": status_code, "multipart": multipart},
    )


def log_retry(operation: str, attempt: int, reason: str) -> None:
    """Loga nova tentativa agendada após falha transitória."""
    logger.warning(
        "http_retry_scheduled",
        extra={"operation": operation, "attempt": attempt, "reason": reason},
    )
