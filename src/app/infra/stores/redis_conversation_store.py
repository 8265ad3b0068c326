"""Redis Conversation Store — estado de conversas com lock distribuído.

Cada ciclo do engine roda sob um redis-py Lock (`<chave>:lock`), o que
torna load -> step -> save atômico por chave entre workers.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from redis.exceptions import LockError, RedisError

from app.protocols.conversation_store import ConversationStoreProtocol
from conversations.state import dump_state, load_state
from utils.errors import ConversationStoreError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from redis import Redis

    from conversations.state import ConversationState

logger = logging.getLogger(__name__)

LOCK_SUFFIX = ":lock"


class RedisConversationStore(ConversationStoreProtocol):
    """Store de ConversationState usando Redis (SETEX + Lock).

    Args:
        redis_client: Cliente Redis síncrono
        lock_timeout_seconds: Expiração do lock (protege contra worker morto)
        lock_blocking_timeout_seconds: Espera máxima para adquirir o lock
    """

    def __init__(
        self,
        redis_client: Redis[bytes],
        *,
        lock_timeout_seconds: float = 30.0,
        lock_blocking_timeout_seconds: float = 10.0,
    ) -> None:
        self._redis = redis_client
        self._lock_timeout = lock_timeout_seconds
        self._blocking_timeout = lock_blocking_timeout_seconds

    @contextmanager
    def lock(self, key: str) -> Iterator[None]:
        redis_lock = self._redis.lock(
            f"{key}{LOCK_SUFFIX}",
            timeout=self._lock_timeout,
            blocking_timeout=self._blocking_timeout,
        )
        try:
            acquired = redis_lock.acquire()
        except RedisError as exc:
            raise ConversationStoreError("Falha ao adquirir lock da conversa") from exc
        if not acquired:
            raise ConversationStoreError("Timeout ao adquirir lock da conversa")
        try:
            yield
        finally:
            try:
                redis_lock.release()
            except LockError:
                # Lock expirou durante o ciclo; outro worker pode tê-lo adquirido
                logger.warning("conversation_lock_expired", extra={"lock_timeout": self._lock_timeout})

    def load(self, key: str) -> ConversationState | None:
        try:
            data = self._redis.get(key)
        except RedisError as exc:
            raise ConversationStoreError("Falha ao carregar conversa") from exc
        if data is None:
            return None
        try:
            return load_state(data)
        except ConversationStoreError as exc:
            logger.warning("conversation_load_error", extra={"error": str(exc)})
            return None

    def save(self, key: str, state: ConversationState, ttl_seconds: int = 86400) -> None:
        payload = dump_state(state)
        try:
            self._redis.setex(key, ttl_seconds, payload)
        except RedisError as exc:
            raise ConversationStoreError("Falha ao salvar conversa") from exc
        logger.debug(
            "conversation_saved",
            extra={"conversation": state.conversation, "step": state.step, "ttl": ttl_seconds},
        )

    def delete(self, key: str) -> bool:
        try:
            return bool(self._redis.delete(key))
        except RedisError as exc:
            raise ConversationStoreError("Falha ao remover conversa") from exc
