"""Testes do composition root (app.bootstrap)."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from api.hydration import BOOL
from app.bootstrap import validate_runtime_settings
from app.bootstrap.clients import create_bot_client
from app.bootstrap.dependencies import create_conversation_engine, create_conversation_store
from app.infra.stores import MemoryConversationStore, RedisConversationStore
from config.settings import (
    BotApiSettings,
    ConversationSettings,
    get_base_settings,
    get_bot_api_settings,
    get_conversation_settings,
)
from tests.fakes.fake_bot_api import FakeBotApi, make_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    for getter in (get_base_settings, get_bot_api_settings, get_conversation_settings):
        getter.cache_clear()
    yield
    for getter in (get_base_settings, get_bot_api_settings, get_conversation_settings):
        getter.cache_clear()


class TestValidateRuntimeSettings:
    """Validação no startup."""

    def test_development_only_warns(
        self,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("BOT_API_TOKEN", raising=False)
        with caplog.at_level(logging.WARNING):
            validate_runtime_settings()
        assert "settings_validation_failed" in [r.getMessage() for r in caplog.records]

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("BOT_API_TOKEN", raising=False)
        monkeypatch.setenv("CONVERSATION_STORE_BACKEND", "memory")
        with pytest.raises(RuntimeError) as exc_info:
            validate_runtime_settings()
        message = str(exc_info.value)
        assert "bot_api: BOT_API_TOKEN não configurado" in message
        assert "conversation:" in message

    def test_valid_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("BOT_API_TOKEN", "1:abc")
        monkeypatch.setenv("CONVERSATION_STORE_BACKEND", "redis")
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")
        validate_runtime_settings()


class TestFactories:
    """Factories de cliente, store e engine."""

    def test_create_bot_client_requires_token(self) -> None:
        with pytest.raises(ValueError, match="BOT_API_TOKEN"):
            create_bot_client(BotApiSettings())

    def test_create_bot_client_with_transport(self) -> None:
        fake = FakeBotApi().reply(True)
        client = create_bot_client(make_settings(), transport=fake.transport)
        assert client.invoke("deleteWebhook", {}, BOOL) is True

    def test_memory_store(self) -> None:
        store = create_conversation_store(ConversationSettings(store_backend="memory"))
        assert isinstance(store, MemoryConversationStore)

    def test_redis_store_uses_given_client(self) -> None:
        settings = ConversationSettings(store_backend="redis", lock_timeout_seconds=12)
        store = create_conversation_store(settings, redis_client=MagicMock())
        assert isinstance(store, RedisConversationStore)

    def test_invalid_backend(self) -> None:
        with pytest.raises(ValueError, match="inválido"):
            create_conversation_store(ConversationSettings(store_backend="sqlite"))  # type: ignore[arg-type]

    def test_engine_uses_configured_store(self) -> None:
        store = MemoryConversationStore()
        engine = create_conversation_engine(store=store, settings=ConversationSettings(ttl_seconds=30))
        assert engine.current_state(1, 2) is None
