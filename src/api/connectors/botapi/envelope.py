"""Envelope universal de resposta da Bot API.

Sucesso: {"ok": true, "result": ...}
Falha:   {"ok": false, "error_code": 400, "description": "...",
          "parameters": {"retry_after": 5}}

A API também envia `description` em alguns sucessos (ex: setWebhook),
tolerado aqui.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from utils.errors import ApiError, MalformedResponseError

if TYPE_CHECKING:
    import httpx


class ApiEnvelope(BaseModel):
    """Resposta decodificada de uma chamada."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    ok: bool = Field(strict=True)
    result: Any = None
    error_code: int | None = None
    description: str | None = None
    parameters: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _check_contract(self) -> ApiEnvelope:
        if self.ok:
            if "result" not in self.model_fields_set:
                raise ValueError("ok=true sem result")
            if self.error_code is not None:
                raise ValueError("ok=true com error_code")
        elif self.error_code is None:
            raise ValueError("ok=false sem error_code")
        return self

    def to_error(self, method: str) -> ApiError:
        """Constrói o ApiError de um envelope com ok=false."""
        return ApiError(
            self.error_code or 0,
            self.description or "",
            method=method,
            parameters=self.parameters,
        )


def parse_envelope(response: httpx.Response, method: str) -> ApiEnvelope:
    """Decodifica e valida o envelope de uma resposta HTTP.

    Qualquer status HTTP é aceito desde que o corpo seja um envelope:
    a API responde ok=false com 4xx.

    Raises:
        MalformedResponseError: Corpo não é JSON ou não segue o contrato
    """
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedResponseError(
            "Resposta da API não é JSON",
            method=method,
            status_code=response.status_code,
        ) from exc
    try:
        return ApiEnvelope.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponseError(
            "Resposta da API fora do envelope esperado",
            method=method,
            status_code=response.status_code,
        ) from exc


def looks_like_envelope(response: httpx.Response) -> bool:
    """True se o corpo é JSON com campo booleano `ok`."""
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return False
    return isinstance(payload, dict) and isinstance(payload.get("ok"), bool)
