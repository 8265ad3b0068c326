"""Normalização de parâmetros de chamadas da Bot API.

Transformação pura:
    - remove parâmetros None (ausência = chave inexistente)
    - enums viram seu valor de backing
    - objetos de domínio, listas e dicts viram JSON compacto (string)
    - estruturas que ainda contêm InputFile ficam como árvore para o
      AttachmentResolver (tokenizar antes de serializar)
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import Any

from api.hydration.shapes import dump_value
from api.payload_builders.botapi.input_file import InputFile

# Parâmetros preenchidos a partir do contexto quando declarados como None
CONTEXT_PARAMETERS = ("chat_id", "user_id", "message_thread_id")


def to_json(value: Any) -> str:
    """Serialização JSON compacta usada em campos estruturados."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def is_input_file(value: Any) -> bool:
    return isinstance(value, InputFile)


def contains_input_file(value: Any) -> bool:
    """Verifica se a árvore (já convertida) contém algum InputFile."""
    if isinstance(value, InputFile):
        return True
    if isinstance(value, dict):
        return any(contains_input_file(v) for v in value.values())
    if isinstance(value, list):
        return any(contains_input_file(v) for v in value)
    return False


def close_input_files(value: Any) -> None:
    """Fecha todo InputFile encontrado na árvore de parâmetros original."""
    if isinstance(value, InputFile):
        value.close()
    elif isinstance(value, Mapping):
        for item in value.values():
            close_input_files(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            close_input_files(item)
    elif is_dataclass(value) and not isinstance(value, type):
        for field in fields(value):
            close_input_files(getattr(value, field.name))


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Contexto explícito para defaults de identidade (chat/usuário atual).

    Resolvido antes da normalização: apenas chaves declaradas pelo chamador
    com valor None são preenchidas.
    """

    chat_id: int | str | None = None
    user_id: int | None = None
    message_thread_id: int | None = None

    def apply(self, params: Mapping[str, Any]) -> dict[str, Any]:
        resolved = dict(params)
        for key in CONTEXT_PARAMETERS:
            if key in resolved and resolved[key] is None:
                resolved[key] = getattr(self, key)
        return resolved


def normalize_parameters(params: Mapping[str, Any]) -> dict[str, Any]:
    """Normaliza o ParameterBag para envio.

    Args:
        params: Nome do parâmetro -> valor (None para opcionais não usados)

    Returns:
        Dict sem None; escalares e strings JSON, ou árvores com InputFile
    """
    normalized: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, InputFile):
            normalized[key] = value
            continue
        if isinstance(value, Enum):
            normalized[key] = value.value
            continue
        if isinstance(value, (str, bool, int, float)):
            normalized[key] = value
            continue
        tree = dump_value(value, keep=is_input_file)
        normalized[key] = tree if contains_input_file(tree) else to_json(tree)
    return normalized
