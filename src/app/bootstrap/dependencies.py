"""Factories do store e do engine de conversas baseadas em configuração."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.stores import MemoryConversationStore, RedisConversationStore
from config.settings import get_base_settings, get_conversation_settings
from conversations.engine import ConversationEngine

if TYPE_CHECKING:
    from redis import Redis

    from api.connectors.botapi.client import BotApiClient
    from app.protocols.conversation_store import ConversationStoreProtocol
    from config.settings import ConversationSettings

logger = logging.getLogger(__name__)


def create_conversation_store(
    settings: ConversationSettings | None = None,
    *,
    redis_client: Redis[bytes] | None = None,
) -> ConversationStoreProtocol:
    """Cria store de conversas conforme CONVERSATION_STORE_BACKEND.

    Raises:
        ValueError: Backend inválido
    """
    conversation = settings or get_conversation_settings()
    backend = conversation.store_backend

    if backend == "redis":
        if redis_client is None:
            from app.bootstrap.clients import create_redis_client

            redis_client = create_redis_client()
        store: ConversationStoreProtocol = RedisConversationStore(
            redis_client,
            lock_timeout_seconds=conversation.lock_timeout_seconds,
            lock_blocking_timeout_seconds=conversation.lock_blocking_timeout_seconds,
        )
        logger.info("conversation_store_created", extra={"backend": "redis"})
        return store

    if backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("conversation_store_created", extra={"backend": "memory"})
        return MemoryConversationStore()

    msg = f"CONVERSATION_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_conversation_engine(
    client: BotApiClient | None = None,
    *,
    store: ConversationStoreProtocol | None = None,
    settings: ConversationSettings | None = None,
) -> ConversationEngine:
    """Cria ConversationEngine com store e TTL configurados."""
    conversation = settings or get_conversation_settings()
    return ConversationEngine(
        store or create_conversation_store(conversation),
        client=client,
        ttl_seconds=conversation.ttl_seconds,
    )

