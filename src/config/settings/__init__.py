"""Agregador de settings do Pyloto BotKit.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    ConversationSettings,
    ConversationStoreBackend,
    Environment,
    get_base_settings,
    get_conversation_settings,
)
from config.settings.bot_api import (
    BOT_API_BASE_URL,
    BotApiSettings,
    get_bot_api_settings,
)

__all__ = [
    # Constants
    "BOT_API_BASE_URL",
    # Base
    "BaseSettings",
    # Bot API
    "BotApiSettings",
    "ConversationSettings",
    "ConversationStoreBackend",
    "Environment",
    "get_base_settings",
    "get_bot_api_settings",
    "get_conversation_settings",
]
