"""Settings do engine de conversas.

Backend de persistência do ConversationState, TTL e lock por chave.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

ConversationStoreBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class ConversationSettings:
    """Configurações de persistência de conversas.

    Attributes:
        store_backend: Backend do store (memory|redis)
        ttl_seconds: TTL do estado de uma conversa inativa
        lock_timeout_seconds: Validade do lock por chave (Redis)
        lock_blocking_timeout_seconds: Espera máxima para adquirir o lock
    """

    store_backend: ConversationStoreBackend = "memory"
    ttl_seconds: int = 86400  # 24h
    lock_timeout_seconds: float = 30.0
    lock_blocking_timeout_seconds: float = 10.0

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de conversa.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.store_backend not in {"memory", "redis"}:
            errors.append(f"CONVERSATION_STORE_BACKEND inválido: {self.store_backend}")

        if self.store_backend == "memory" and not base.is_development:
            errors.append("CONVERSATION_STORE_BACKEND=memory proibido em staging/production")

        if self.store_backend == "redis" and not base.redis_url:
            errors.append("CONVERSATION_STORE_BACKEND=redis requer REDIS_URL configurado")

        if self.ttl_seconds <= 0:
            errors.append("CONVERSATION_TTL_SECONDS deve ser > 0")

        if self.lock_timeout_seconds <= 0:
            errors.append("CONVERSATION_LOCK_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_conversation_from_env() -> ConversationSettings:
    """Carrega ConversationSettings de variáveis de ambiente."""
    backend_str = os.getenv("CONVERSATION_STORE_BACKEND", "memory").lower()
    backend: ConversationStoreBackend = backend_str if backend_str in ("memory", "redis") else "memory"
    return ConversationSettings(
        store_backend=backend,
        ttl_seconds=int(os.getenv("CONVERSATION_TTL_SECONDS", "86400")),
        lock_timeout_seconds=float(os.getenv("CONVERSATION_LOCK_TIMEOUT_SECONDS", "30")),
        lock_blocking_timeout_seconds=float(
            os.getenv("CONVERSATION_LOCK_BLOCKING_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_conversation_settings() -> ConversationSettings:
    """Retorna instância cacheada de ConversationSettings."""
    return _load_conversation_from_env()
