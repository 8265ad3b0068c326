"""Factories de clientes externos: Redis e Bot API."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

import redis
from redis.exceptions import RedisError

from api.connectors.botapi.client import BotApiClient
from api.connectors.botapi.http_client import BotApiHttpClient
from config.settings import get_base_settings, get_bot_api_settings
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    import httpx
    from redis import Redis

    from config.settings import BotApiSettings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def create_redis_client() -> Redis[bytes]:
    """Cria cliente Redis síncrono (singleton).

    Raises:
        ValueError: Se REDIS_URL não configurado
        RedisConnectionError: Se o Redis não responde ao PING
    """
    redis_url = get_base_settings().redis_url
    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    client: Redis[bytes] = redis.from_url(
        redis_url,
        decode_responses=False,
        socket_timeout=5.0,
        socket_connect_timeout=5.0,
        retry_on_timeout=True,
    )
    try:
        client.ping()
    except RedisError as exc:
        raise RedisConnectionError("Redis indisponível") from exc

    host = client.connection_pool.connection_kwargs.get("host", "unknown")
    logger.info("redis_client_created", extra={"host": host})
    return client


def create_bot_client(
    settings: BotApiSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> BotApiClient:
    """Cria BotApiClient a partir das settings (env por padrão).

    Args:
        settings: BotApiSettings opcional
        transport: Transport httpx alternativo (testes)

    Raises:
        ValueError: Settings inválidas (ex: BOT_API_TOKEN ausente)
    """
    bot_settings = settings or get_bot_api_settings()
    errors = bot_settings.validate()
    if errors:
        raise ValueError("Configuração da Bot API inválida: " + "; ".join(errors))

    client = BotApiClient(BotApiHttpClient(bot_settings, transport=transport))
    logger.info(
        "bot_client_created",
        extra={
            "test_environment": bot_settings.test_environment,
            "max_retries": bot_settings.max_retries,
        },
    )
    return client
