"""Store de conversas em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios
e lock válido apenas dentro do processo.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from app.protocols.conversation_store import ConversationStoreProtocol
from conversations.state import dump_state, load_state

if TYPE_CHECKING:
    from collections.abc import Iterator

    from conversations.state import ConversationState


class MemoryConversationStore(ConversationStoreProtocol):
    """Store de ConversationState em memória (registro serializado em JSON)."""

    def __init__(self) -> None:
        self._store: dict[str, tuple[str, float]] = {}  # key -> (json, expires_at)
        self._locks: dict[str, threading.RLock] = {}
        self._lock_users: dict[str, int] = {}  # key -> detentores + aguardando
        self._guard = threading.Lock()

    @contextmanager
    def lock(self, key: str) -> Iterator[None]:
        with self._guard:
            key_lock = self._locks.setdefault(key, threading.RLock())
            self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            with key_lock:
                yield
        finally:
            with self._guard:
                remaining = self._lock_users[key] - 1
                if remaining:
                    self._lock_users[key] = remaining
                else:
                    del self._lock_users[key]
                    del self._locks[key]

    def load(self, key: str) -> ConversationState | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        data, expires_at = entry
        if time.time() > expires_at:
            del self._store[key]
            return None
        return load_state(data)

    def save(self, key: str, state: ConversationState, ttl_seconds: int = 86400) -> None:
        self._store[key] = (dump_state(state), time.time() + ttl_seconds)

    def delete(self, key: str) -> bool:
        return self._store.pop(key, None) is not None

    def keys(self) -> list[str]:
        """Chaves não expiradas (apenas para testes)."""
        now = time.time()
        return [key for key, (_, expires_at) in self._store.items() if expires_at >= now]
