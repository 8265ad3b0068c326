"""AttachmentResolver — extração de payloads binários do ParameterBag.

Percorre cada valor em profundidade. Toda folha InputFile é trocada por
`attach://<nome>` e o payload vai para a lista de anexos. Só depois da
tokenização os ancestrais estruturados são serializados em JSON.

Invariantes:
    - nomes de anexo únicos por requisição
    - colisão de nomes nunca descarta payload (sufixo numérico)
    - o mesmo InputFile referenciado duas vezes gera um único anexo
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from api.payload_builders.botapi.input_file import InputFile
from api.payload_builders.botapi.params import to_json

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

ATTACH_SCHEME = "attach://"

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


def attach_token(name: str) -> str:
    """Retorna a referência `attach://<name>`."""
    return f"{ATTACH_SCHEME}{name}"


@dataclass(frozen=True, slots=True)
class Attachment:
    """Part binário nomeado de uma requisição multipart."""

    name: str
    payload: InputFile

    @property
    def filename(self) -> str:
        return self.payload.name or self.name

    @property
    def content_type(self) -> str:
        return self.payload.content_type


@dataclass(frozen=True, slots=True)
class ResolvedRequest:
    """Corpo pronto para transporte.

    Attributes:
        fields: Escalares e strings JSON
        attachments: Parts binários (vazio = corpo JSON)
    """

    fields: dict[str, Any] = field(default_factory=dict)
    attachments: tuple[Attachment, ...] = ()

    @property
    def is_multipart(self) -> bool:
        return bool(self.attachments)

    @property
    def is_retry_safe(self) -> bool:
        """JSON sempre; multipart apenas se todo payload é reabrível."""
        return all(a.payload.is_reopenable for a in self.attachments)

    def close(self) -> None:
        """Libera os streams de todos os anexos."""
        for attachment in self.attachments:
            attachment.payload.close()


class _NameAllocator:
    """Aloca nomes únicos dentro de uma requisição."""

    def __init__(self) -> None:
        self._used: set[str] = set()

    def allocate(self, preferred: str) -> str:
        base = _UNSAFE_NAME_CHARS.sub("_", preferred).strip("_") or "file"
        if base not in self._used:
            self._used.add(base)
            return base
        stem, dot, ext = base.rpartition(".")
        if not dot or not stem:
            stem, ext = base, ""
        counter = 1
        while True:
            candidate = f"{stem}_{counter}.{ext}" if ext else f"{stem}_{counter}"
            if candidate not in self._used:
                self._used.add(candidate)
                return candidate
            counter += 1


class AttachmentResolver:
    """Resolve InputFile aninhados em tokens attach:// e parts nomeados."""

    def resolve(self, fields: Mapping[str, Any]) -> ResolvedRequest:
        """Tokeniza payloads binários e serializa ancestrais estruturados.

        Args:
            fields: Saída de normalize_parameters

        Returns:
            ResolvedRequest com campos planos e anexos em ordem de descoberta
        """
        allocator = _NameAllocator()
        seen: dict[int, Attachment] = {}
        attachments: list[Attachment] = []

        def visit(value: Any, path: tuple[str, ...]) -> Any:
            if isinstance(value, InputFile):
                existing = seen.get(id(value))
                if existing is not None:
                    return attach_token(existing.name)
                name = allocator.allocate(value.name or "_".join(path))
                attachment = Attachment(name=name, payload=value)
                seen[id(value)] = attachment
                attachments.append(attachment)
                return attach_token(name)
            if isinstance(value, dict):
                return {k: visit(v, (*path, str(k))) for k, v in value.items()}
            if isinstance(value, list):
                return [visit(v, (*path, str(i))) for i, v in enumerate(value)]
            return value

        resolved: dict[str, Any] = {}
        for key, value in fields.items():
            tokenized = visit(value, (key,))
            if isinstance(tokenized, (dict, list)):
                tokenized = to_json(tokenized)
            resolved[key] = tokenized

        if attachments:
            logger.debug(
                "attachments_resolved",
                extra={"attachment_count": len(attachments)},
            )
        return ResolvedRequest(fields=resolved, attachments=tuple(attachments))
