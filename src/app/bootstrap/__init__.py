"""Bootstrap do BotKit: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas (cliente, store, engine).

Uso:
    from app.bootstrap import initialize_app, get_bot_client, get_conversation_engine

    initialize_app()
    validate_runtime_settings()

    client = get_bot_client()
    engine = get_conversation_engine()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_bot_api_settings,
    get_conversation_settings,
)

if TYPE_CHECKING:
    from api.connectors.botapi.client import BotApiClient
    from app.protocols.conversation_store import ConversationStoreProtocol
    from conversations.engine import ConversationEngine

SERVICE_NAME = "pyloto-botkit"

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level.upper(),
        service_name=base.service_name or SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"bot_api: {error}" for error in get_bot_api_settings().validate())
    errors.extend(
        f"conversation: {error}" for error in get_conversation_settings().validate(base)
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_bot_client() -> BotApiClient:
    """Obtém BotApiClient configurado por env (singleton)."""
    from app.bootstrap.clients import create_bot_client

    return create_bot_client()


@lru_cache(maxsize=1)
def get_conversation_store() -> ConversationStoreProtocol:
    """Obtém store de conversas (singleton)."""
    from app.bootstrap.dependencies import create_conversation_store

    return create_conversation_store()


@lru_cache(maxsize=1)
def get_conversation_engine() -> ConversationEngine:
    """Obtém engine de conversas ligado ao client e store singletons."""
    from app.bootstrap.dependencies import create_conversation_engine

    return create_conversation_engine(get_bot_client(), store=get_conversation_store())


__all__ = [
    "SERVICE_NAME",
    "get_bot_client",
    "get_conversation_engine",
    "get_conversation_store",
    "initialize_app",
    "validate_runtime_settings",
]
