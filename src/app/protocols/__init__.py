"""Protocolos e contratos do core da aplicação."""

from .conversation_store import ConversationStoreProtocol

__all__ = [
    "ConversationStoreProtocol",
]
