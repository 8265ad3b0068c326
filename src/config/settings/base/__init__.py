"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.conversation import (
    ConversationSettings,
    ConversationStoreBackend,
    get_conversation_settings,
)
from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    # Conversation
    "ConversationSettings",
    "ConversationStoreBackend",
    # Types
    "Environment",
    "get_base_settings",
    "get_conversation_settings",
]
