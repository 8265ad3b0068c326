"""correlation_id do contexto atual, injetado nos logs.

Usa ContextVar: cada thread/task vê o próprio valor. O engine de
conversas abre um escopo `update:<update_id>` por evento processado.

Uso:
    from app.observability import correlation_scope, get_correlation_id

    with correlation_scope("update:812736"):
        ...  # logs deste bloco carregam o correlation_id
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id atual (string vazia se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera UUID se None.

    Returns:
        Token para reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def correlation_id_for_update(update_id: int | None) -> str:
    """correlation_id derivado de um Update (ou UUID, sem update_id)."""
    if update_id is None:
        return generate_correlation_id()
    return f"update:{update_id}"


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior."""
    token = set_correlation_id(correlation_id)
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)
