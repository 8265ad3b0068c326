"""Settings do cliente da Bot API.

URL base, token do bot e política de timeout/retry do transporte.
O token nunca é logado: aparece apenas dentro da URL montada aqui.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Bot API
BOT_API_BASE_URL: str = "https://api.telegram.org"


@dataclass(frozen=True)
class BotApiSettings:
    """Configurações do cliente da Bot API.

    Attributes:
        bot_token: Token do bot (obtido via @BotFather)
        api_base_url: URL base da API
        test_environment: Usa o ambiente de testes (sufixo /test)
        request_timeout_seconds: Timeout por requisição HTTP
        max_retries: Tentativas extras em falhas transitórias
        backoff_base_seconds: Base do backoff exponencial
        backoff_max_seconds: Teto do backoff
    """

    bot_token: str = ""
    api_base_url: str = BOT_API_BASE_URL
    test_environment: bool = False

    request_timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 10.0

    @property
    def api_endpoint(self) -> str:
        """URL base dos métodos: {base}/bot{token}[/test]."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        suffix = "/test" if self.test_environment else ""
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}{suffix}"

    @property
    def file_endpoint(self) -> str:
        """URL base de download de arquivos: {base}/file/bot{token}[/test]."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        suffix = "/test" if self.test_environment else ""
        return f"{self.api_base_url.rstrip('/')}/file/bot{self.bot_token}{suffix}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas da Bot API.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.bot_token:
            errors.append("BOT_API_TOKEN não configurado")

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("BOT_API_BASE_URL deve ser http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("BOT_API_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("BOT_API_MAX_RETRIES deve ser >= 0")

        if self.backoff_base_seconds < 0 or self.backoff_max_seconds < self.backoff_base_seconds:
            errors.append("BOT_API_BACKOFF_* inválido (0 <= base <= max)")

        return errors


def _load_from_env() -> BotApiSettings:
    """Carrega BotApiSettings a partir de variáveis de ambiente."""
    return BotApiSettings(
        bot_token=os.getenv("BOT_API_TOKEN", ""),
        api_base_url=os.getenv("BOT_API_BASE_URL", BOT_API_BASE_URL),
        test_environment=os.getenv("BOT_API_TEST_ENVIRONMENT", "").lower() in ("true", "1", "yes"),
        request_timeout_seconds=float(os.getenv("BOT_API_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("BOT_API_MAX_RETRIES", "3")),
        backoff_base_seconds=float(os.getenv("BOT_API_BACKOFF_BASE_SECONDS", "0.5")),
        backoff_max_seconds=float(os.getenv("BOT_API_BACKOFF_MAX_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_bot_api_settings() -> BotApiSettings:
    """Retorna instância cacheada de BotApiSettings."""
    return _load_from_env()
