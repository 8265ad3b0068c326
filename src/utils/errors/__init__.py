"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ApiConnectionError,
    ApiError,
    ApiTimeoutError,
    AttachmentError,
    BotKitError,
    ConversationError,
    ConversationStoreError,
    HydrationError,
    InfrastructureError,
    MalformedResponseError,
    RedisConnectionError,
    TransportError,
)

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "ApiTimeoutError",
    "AttachmentError",
    "BotKitError",
    "ConversationError",
    "ConversationStoreError",
    "HydrationError",
    "InfrastructureError",
    "MalformedResponseError",
    "RedisConnectionError",
    "TransportError",
]
