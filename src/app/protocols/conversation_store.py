"""Protocolo de persistência do estado de conversas.

O engine executa load -> step -> save/delete dentro de `lock(key)`:
o store garante atomicidade por chave entre workers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from conversations.state import ConversationState


class ConversationStoreProtocol(ABC):
    """Contrato síncrono para armazenamento de ConversationState.

    Invariantes:
        - load após delete retorna None
        - save substitui o registro inteiro (nunca merge parcial)
        - falhas de backend viram ConversationStoreError
    """

    @abstractmethod
    def lock(self, key: str) -> AbstractContextManager[None]:
        """Exclusão mútua por chave durante um ciclo do engine.

        Raises:
            ConversationStoreError: Lock não adquirido no tempo limite
        """

    @abstractmethod
    def load(self, key: str) -> ConversationState | None: ...

    @abstractmethod
    def save(self, key: str, state: ConversationState, ttl_seconds: int = 86400) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> bool: ...
