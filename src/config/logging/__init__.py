"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="pyloto-botkit")
    logger = get_logger(__name__)
    logger.info("conversation_step_dispatched", extra={"step": "ask_name"})

Campos em todo log: asctime, level, logger, message, service,
correlation_id. Nunca logar token do bot ou texto de mensagens.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import (
    BotTokenRedactionFilter,
    CorrelationIdFilter,
    redact_bot_token,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "BotTokenRedactionFilter",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_bot_token",
]
