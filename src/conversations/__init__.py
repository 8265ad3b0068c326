"""
Conversas persistidas e retomáveis.

Estrutura:
    - state: ConversationState, ConversationData e chave de persistência
    - definition: ConversationDefinition (steps nomeados)
    - engine: ConversationEngine, StepContext e DispatchResult
"""

from conversations.definition import ConversationDefinition, is_command
from conversations.engine import (
    ConversationEngine,
    DispatchResult,
    StepContext,
    resolve_update_identity,
)
from conversations.state import (
    CONVERSATION_KEY_PREFIX,
    ConversationData,
    ConversationState,
    conversation_key,
    dump_state,
    load_state,
)

__all__ = [
    "CONVERSATION_KEY_PREFIX",
    "ConversationData",
    "ConversationDefinition",
    "ConversationEngine",
    "ConversationState",
    "DispatchResult",
    "StepContext",
    "conversation_key",
    "dump_state",
    "is_command",
    "load_state",
    "resolve_update_identity",
]
