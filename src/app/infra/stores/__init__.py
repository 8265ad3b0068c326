"""Stores — implementações concretas de persistência de conversas.

Módulos disponíveis:
    - redis_conversation_store: estado + lock distribuído em Redis
    - memory_stores: store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryConversationStore
from app.infra.stores.redis_conversation_store import RedisConversationStore

__all__ = [
    "MemoryConversationStore",
    "RedisConversationStore",
]
