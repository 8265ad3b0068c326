"""Estado persistido de uma conversa.

Registro no store:
    chave  conversation:<chat_id>:<user_id>
    valor  {"conversation": str, "step": str | null, "data": {...}}

`step=None` é o estado terminal: equivale a não haver conversa ativa.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from typing import Any

from utils.errors import ConversationError, ConversationStoreError

CONVERSATION_KEY_PREFIX = "conversation:"

_MISSING = object()


def conversation_key(chat_id: int | str, user_id: int | str) -> str:
    """Chave determinística da conversa de um usuário em um chat."""
    return f"{CONVERSATION_KEY_PREFIX}{chat_id}:{user_id}"


@dataclass(frozen=True, slots=True)
class ConversationState:
    """Snapshot imutável do estado de uma conversa.

    Attributes:
        conversation: Nome da ConversationDefinition dona do estado
        step: Step atual (None = encerrada)
        data: Dados compartilhados entre steps (JSON)
    """

    conversation: str
    step: str | None
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        return self.step is not None

    def to_dict(self) -> dict[str, Any]:
        return {"conversation": self.conversation, "step": self.step, "data": self.data}

    @classmethod
    def from_dict(cls, raw: Any) -> ConversationState:
        """Reconstrói o estado a partir do registro.

        Raises:
            ConversationStoreError: Registro fora do formato esperado
        """
        if not isinstance(raw, dict):
            raise ConversationStoreError("Registro de conversa não é objeto")
        conversation = raw.get("conversation")
        step = raw.get("step")
        data = raw.get("data", {})
        if not isinstance(conversation, str) or not conversation:
            raise ConversationStoreError("Registro sem campo conversation")
        if step is not None and not isinstance(step, str):
            raise ConversationStoreError("Campo step inválido")
        if not isinstance(data, dict):
            raise ConversationStoreError("Campo data inválido")
        return cls(conversation=conversation, step=step, data=data)


def dump_state(state: ConversationState) -> str:
    """Serializa o estado para o store.

    Raises:
        ConversationError: data contém valores não serializáveis em JSON
    """
    try:
        return json.dumps(state.to_dict(), ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise ConversationError(
            f"Dados da conversa {state.conversation} não são serializáveis em JSON"
        ) from exc


def load_state(raw: str | bytes) -> ConversationState:
    """Desserializa o registro do store.

    Raises:
        ConversationStoreError: JSON inválido ou formato inesperado
    """
    try:
        decoded = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConversationStoreError("Registro de conversa com JSON inválido") from exc
    return ConversationState.from_dict(decoded)


class ConversationData:
    """Bag mutável de dados exposto aos steps.

    Trabalha sobre uma cópia profunda: mutações só chegam ao store se o
    step terminar sem exceção.
    """

    __slots__ = ("_values",)

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = copy.deepcopy(values) if values else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def default(self, key: str, value: Any) -> Any:
        """Define `key` apenas se ausente; retorna o valor vigente."""
        return self._values.setdefault(key, value)

    def delete(self, key: str) -> bool:
        return self._values.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        self._values.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._values)

    def __repr__(self) -> str:
        return f"ConversationData(keys={sorted(self._values)!r})"
