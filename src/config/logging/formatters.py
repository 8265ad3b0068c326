"""Formatter JSON dos logs do SDK.

Campos presentes em todo record:
- asctime, level, logger, message
- service e correlation_id (injetados por CorrelationIdFilter)

Campos de `extra={...}` são anexados ao JSON pelo python-json-logger.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável no JSON de saída
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "correlation_id",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "INFO",
            "logger": "api.connectors.botapi.http_client",
            "message": "bot_api_call_succeeded",
            "service": "pyloto-botkit",
            "correlation_id": "update:812736",
            "method": "sendMessage"
        }
    """
    format_string = " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
