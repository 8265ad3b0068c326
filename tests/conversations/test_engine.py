"""Testes do ConversationEngine sobre o store em memória."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from api.hydration import hydrate
from api.types import UPDATE, Update
from app.infra.stores import MemoryConversationStore
from app.observability import get_correlation_id
from conversations import (
    ConversationDefinition,
    ConversationEngine,
    StepContext,
    conversation_key,
    is_command,
)
from utils.errors import ConversationError

CHAT_ID = 12345
USER_ID = 678


def make_update(update_id: int, text: str, *, chat_id: int = CHAT_ID, user_id: int = USER_ID) -> Update:
    return hydrate(
        {
            "update_id": update_id,
            "message": {
                "message_id": update_id,
                "date": 1700000000,
                "chat": {"id": chat_id, "type": "private"},
                "from": {"id": user_id, "is_bot": False, "first_name": "Ana"},
                "text": text,
            },
        },
        UPDATE,
    )


def survey_definition(calls: list[str]) -> ConversationDefinition:
    survey = ConversationDefinition("survey", "ask_name", starts_when=is_command("/survey"))

    @survey.step("ask_name")
    def ask_name(ctx: StepContext) -> None:
        calls.append(ctx.step)
        ctx.data.set("asked", True)
        ctx.next_step("ask_age")

    @survey.step("ask_age")
    def ask_age(ctx: StepContext) -> None:
        calls.append(ctx.step)
        ctx.data.set("age", ctx.event.message.text)
        ctx.end()

    return survey


@pytest.fixture
def store() -> MemoryConversationStore:
    return MemoryConversationStore()


class TestConversationFlow:
    """Início, transição, retomada e término."""

    def test_two_steps_then_cleared(self, store: MemoryConversationStore) -> None:
        calls: list[str] = []
        engine = ConversationEngine(store)
        engine.register(survey_definition(calls))

        first = engine.process(make_update(1, "/survey"))
        assert first.dispatched
        assert first.next_step == "ask_age"
        assert engine.current_state(CHAT_ID, USER_ID).data == {"asked": True}

        second = engine.process(make_update(2, "30"))
        assert second.step == "ask_age"
        assert second.ended

        assert calls == ["ask_name", "ask_age"]
        assert engine.current_state(CHAT_ID, USER_ID) is None
        assert store.keys() == []

    def test_event_without_start_condition_is_ignored(self, store: MemoryConversationStore) -> None:
        engine = ConversationEngine(store)
        engine.register(survey_definition([]))

        result = engine.process(make_update(1, "oi"))

        assert not result.dispatched
        assert result.key == conversation_key(CHAT_ID, USER_ID)
        assert store.keys() == []

    def test_step_without_transition_is_reinvoked(self, store: MemoryConversationStore) -> None:
        """Step que nunca transiciona acumula estado a cada evento."""
        counter = ConversationDefinition("counter", "count", starts_when=lambda event: True)

        @counter.step("count")
        def count(ctx: StepContext) -> None:
            ctx.data.set("hits", ctx.data.get("hits", 0) + 1)

        engine = ConversationEngine(store)
        engine.register(counter)
        for update_id in range(1, 4):
            result = engine.process(make_update(update_id, "qualquer"))
            assert result.next_step == "count"

        assert engine.current_state(CHAT_ID, USER_ID).data == {"hits": 3}

    def test_conversations_are_keyed_by_chat_and_user(self, store: MemoryConversationStore) -> None:
        engine = ConversationEngine(store)
        engine.register(survey_definition([]))

        engine.process(make_update(1, "/survey", user_id=1))
        engine.process(make_update(2, "/survey", user_id=2))
        engine.process(make_update(3, "40", user_id=1))

        assert engine.current_state(CHAT_ID, 1) is None
        assert engine.current_state(CHAT_ID, 2).step == "ask_age"

    def test_finished_conversations_leave_no_locks(self, store: MemoryConversationStore) -> None:
        """Muitas conversas de um step não acumulam locks nem registros."""
        quick = ConversationDefinition("quick", "only", starts_when=is_command("/quick"))

        @quick.step("only")
        def only(ctx: StepContext) -> None:
            ctx.end()

        engine = ConversationEngine(store)
        engine.register(quick)
        for user_id in range(1, 501):
            engine.process(make_update(user_id, "/quick", user_id=user_id))

        assert store.keys() == []
        assert store._locks == {}

    def test_first_registered_matching_definition_starts(self, store: MemoryConversationStore) -> None:
        engine = ConversationEngine(store)
        first = ConversationDefinition("first", "a", starts_when=lambda event: True)
        second = ConversationDefinition("second", "b", starts_when=lambda event: True)
        first.add_step("a", lambda ctx: None)
        second.add_step("b", lambda ctx: None)
        engine.register(first)
        engine.register(second)

        assert engine.process(make_update(1, "x")).conversation == "first"

    def test_event_without_identity_is_skipped(self, store: MemoryConversationStore) -> None:
        engine = ConversationEngine(store)
        engine.register(survey_definition([]))
        result = engine.process(Update(update_id=9))
        assert result.key is None
        assert not result.dispatched

    def test_custom_key_resolver(self, store: MemoryConversationStore) -> None:
        calls: list[str] = []
        engine = ConversationEngine(store, key_resolver=lambda event: (event["chat"], event["user"]))
        definition = ConversationDefinition("raw", "only", starts_when=lambda event: True)
        definition.add_step("only", lambda ctx: calls.append(ctx.key))
        engine.register(definition)

        engine.process({"chat": "c", "user": "u"})

        assert calls == ["conversation:c:u"]

    def test_correlation_id_scoped_to_update(self, store: MemoryConversationStore) -> None:
        seen: list[str] = []
        definition = ConversationDefinition("corr", "s", starts_when=lambda event: True)
        definition.add_step("s", lambda ctx: seen.append(get_correlation_id()))
        engine = ConversationEngine(store)
        engine.register(definition)

        engine.process(make_update(812736, "x"))

        assert seen == ["update:812736"]
        assert get_correlation_id() == ""

    def test_client_is_exposed_to_steps(self, store: MemoryConversationStore) -> None:
        sentinel = object()
        seen: list[Any] = []
        definition = ConversationDefinition("c", "s", starts_when=lambda event: True)
        definition.add_step("s", lambda ctx: seen.append(ctx.client))
        engine = ConversationEngine(store, client=sentinel)  # type: ignore[arg-type]
        engine.register(definition)

        engine.process(make_update(1, "x"))

        assert seen == [sentinel]


class TestFailures:
    """Falhas em handlers e estados inválidos."""

    def test_handler_failure_discards_mutations(
        self,
        store: MemoryConversationStore,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Exceção no step: nada é gravado e o próximo evento reentra no step."""
        definition = ConversationDefinition("fragile", "collect")
        attempts: list[str] = []

        @definition.step("collect")
        def collect(ctx: StepContext) -> None:
            ctx.data.set("partial", ctx.event.message.text)
            ctx.next_step("done")
            attempts.append(ctx.event.message.text)
            if ctx.event.message.text == "quebra":
                raise RuntimeError("falha no meio do step")

        definition.add_step("done", lambda ctx: ctx.end())
        engine = ConversationEngine(store)
        engine.register(definition)
        engine.begin("fragile", CHAT_ID, USER_ID, data={"kept": 1})

        with caplog.at_level(logging.WARNING), pytest.raises(RuntimeError):
            engine.process(make_update(1, "quebra"))

        state = engine.current_state(CHAT_ID, USER_ID)
        assert state.step == "collect"
        assert state.data == {"kept": 1}
        assert "conversation_step_failed" in [r.getMessage() for r in caplog.records]

        result = engine.process(make_update(2, "ok"))
        assert result.step == "collect"
        assert engine.current_state(CHAT_ID, USER_ID).data == {"kept": 1, "partial": "ok"}
        assert attempts == ["quebra", "ok"]

    def test_transition_to_unknown_step_raises(self, store: MemoryConversationStore) -> None:
        definition = ConversationDefinition("bad", "s", starts_when=lambda event: True)
        definition.add_step("s", lambda ctx: ctx.next_step("nao_existe"))
        engine = ConversationEngine(store)
        engine.register(definition)

        with pytest.raises(ConversationError, match="Step desconhecido"):
            engine.process(make_update(1, "x"))
        assert store.keys() == []

    def test_state_of_unregistered_conversation_raises(self, store: MemoryConversationStore) -> None:
        other = ConversationEngine(store)
        legacy = ConversationDefinition("legacy", "s")
        legacy.add_step("s", lambda ctx: None)
        other.register(legacy)
        other.begin("legacy", CHAT_ID, USER_ID)

        engine = ConversationEngine(store)
        with pytest.raises(ConversationError, match="não registrada"):
            engine.process(make_update(1, "x"))

    def test_duplicate_registration_raises(self) -> None:
        engine = ConversationEngine(MemoryConversationStore())
        engine.register(ConversationDefinition("dup", "s"))
        with pytest.raises(ConversationError, match="já registrada"):
            engine.register(ConversationDefinition("dup", "s"))


class TestExplicitControl:
    """begin, clear e current_state."""

    def test_begin_without_start_condition(self, store: MemoryConversationStore) -> None:
        calls: list[str] = []
        definition = ConversationDefinition("manual", "first")

        @definition.step("first")
        def first(ctx: StepContext) -> None:
            calls.append(ctx.data.get("origin"))
            ctx.end()

        engine = ConversationEngine(store)
        engine.register(definition)

        assert not engine.process(make_update(1, "oi")).dispatched
        state = engine.begin("manual", CHAT_ID, USER_ID, data={"origin": "admin"})
        assert state.step == "first"

        assert engine.process(make_update(2, "oi")).ended
        assert calls == ["admin"]

    def test_begin_unknown_step_raises(self, store: MemoryConversationStore) -> None:
        engine = ConversationEngine(store)
        engine.register(survey_definition([]))
        with pytest.raises(ConversationError):
            engine.begin("survey", CHAT_ID, USER_ID, step="fim")

    def test_begin_unknown_conversation_raises(self, store: MemoryConversationStore) -> None:
        with pytest.raises(ConversationError):
            ConversationEngine(store).begin("nada", CHAT_ID, USER_ID)

    def test_clear(self, store: MemoryConversationStore) -> None:
        engine = ConversationEngine(store)
        engine.register(survey_definition([]))
        engine.process(make_update(1, "/survey"))

        assert engine.clear(CHAT_ID, USER_ID) is True
        assert engine.clear(CHAT_ID, USER_ID) is False
        assert engine.current_state(CHAT_ID, USER_ID) is None

    def test_saved_with_ttl(self) -> None:
        saved: list[int] = []

        class RecordingStore(MemoryConversationStore):
            def save(self, key, state, ttl_seconds=86400):  # type: ignore[no-untyped-def]
                saved.append(ttl_seconds)
                super().save(key, state, ttl_seconds)

        engine = ConversationEngine(RecordingStore(), ttl_seconds=600)
        engine.register(survey_definition([]))
        engine.process(make_update(1, "/survey"))

        assert saved == [600]
