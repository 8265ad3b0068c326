"""Exceções do SDK e de infraestrutura.

Taxonomia:
    - TransportError: falhas de rede, timeout ou resposta HTTP mal-formada
    - ApiError: envelope bem-formado com ok=false (rejeição da API)
    - HydrationError: result não corresponde ao shape declarado
    - AttachmentError: payload binário não pode ser (re)aberto ou lido
    - ConversationError: falhas do engine de conversas e seus stores

Nenhuma mensagem carrega token do bot ou conteúdo de mensagens.
"""

from __future__ import annotations

from typing import Any


class BotKitError(Exception):
    """Base de todas as falhas levantadas pelo SDK."""


class TransportError(BotKitError):
    """Falha de transporte HTTP."""

    def __init__(self, message: str, *, method: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.status_code = status_code


class ApiConnectionError(TransportError):
    """Falha de conexão com a API remota."""


class ApiTimeoutError(TransportError):
    """Timeout ao aguardar a API remota."""


class MalformedResponseError(TransportError):
    """Resposta sem envelope válido (JSON inválido ou fora do contrato)."""


class ApiError(BotKitError):
    """Rejeição autoritativa da API (envelope com ok=false).

    Attributes:
        error_code: Código numérico retornado pela API
        description: Descrição legível do erro
        method: Método remoto que originou o erro
        parameters: Campos auxiliares (retry_after, migrate_to_chat_id)
    """

    def __init__(
        self,
        error_code: int,
        description: str,
        *,
        method: str = "",
        parameters: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(description)
        self.error_code = error_code
        self.description = description
        self.method = method
        self.parameters = parameters or {}

    @property
    def retry_after(self) -> int | None:
        """Segundos sugeridos pela API antes de nova tentativa (429)."""
        value = self.parameters.get("retry_after")
        return value if isinstance(value, int) else None

    @property
    def migrate_to_chat_id(self) -> int | None:
        """Novo chat_id quando o grupo migrou para supergrupo."""
        value = self.parameters.get("migrate_to_chat_id")
        return value if isinstance(value, int) else None

    def __repr__(self) -> str:
        return f"ApiError(error_code={self.error_code!r}, description={self.description!r})"


class HydrationError(BotKitError):
    """JSON de resposta incompatível com o shape declarado."""

    def __init__(self, message: str, *, path: str = "result") -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class AttachmentError(BotKitError):
    """Payload binário inválido, já consumido ou ilegível."""

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class ConversationError(BotKitError):
    """Uso inválido do engine de conversas (step desconhecido, dados inválidos)."""


class ConversationStoreError(ConversationError):
    """Falha ao ler, gravar ou travar estado de conversa."""


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""
