"""ConversationEngine — máquina de estados persistida e retomável.

Ciclo por evento:
    1. resolve (chat_id, user_id) e a chave da conversa
    2. trava a chave no store e carrega o estado
    3. sem estado ativo, inicia a primeira definição cujo starts_when casa
    4. executa o handler do step atual com um StepContext
    5. persiste o novo estado (ou remove, se o step virou None)

Falha no handler: as mutações de data são descartadas, nada é gravado e a
exceção propaga. O registro anterior fica intacto e o próximo evento
reentra no mesmo step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.observability import correlation_id_for_update, correlation_scope
from conversations.state import ConversationData, ConversationState, conversation_key
from utils.errors import ConversationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from api.connectors.botapi.client import BotApiClient
    from app.protocols.conversation_store import ConversationStoreProtocol
    from conversations.definition import ConversationDefinition

    KeyResolver = Callable[[Any], tuple[int | str | None, int | str | None]]

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 86400

_KEEP = object()


def resolve_update_identity(event: Any) -> tuple[int | None, int | None]:
    """Resolver padrão: (chat_id, user_id) de um Update."""
    return (
        getattr(event, "effective_chat_id", None),
        getattr(event, "effective_user_id", None),
    )


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Resultado de um ciclo do engine.

    Attributes:
        key: Chave da conversa (None se o evento não tem identidade)
        dispatched: Se algum handler foi executado
        conversation: Definição que tratou o evento
        step: Step executado
        next_step: Step persistido após o handler (None = encerrada)
    """

    key: str | None
    dispatched: bool
    conversation: str | None = None
    step: str | None = None
    next_step: str | None = None

    @property
    def ended(self) -> bool:
        return self.dispatched and self.next_step is None


class StepContext:
    """Contexto entregue ao handler de um step."""

    __slots__ = ("_definition", "_next", "client", "data", "event", "key", "step")

    def __init__(
        self,
        *,
        event: Any,
        key: str,
        step: str,
        data: ConversationData,
        definition: ConversationDefinition,
        client: BotApiClient | None,
    ) -> None:
        self.event = event
        self.key = key
        self.step = step
        self.data = data
        self.client = client
        self._definition = definition
        self._next: object = _KEEP

    @property
    def conversation(self) -> str:
        return self._definition.name

    def next_step(self, name: str) -> None:
        """Agenda a transição para `name` ao fim do handler.

        Raises:
            ConversationError: Step não declarado na definição
        """
        if not self._definition.has_step(name):
            raise ConversationError(f"Step desconhecido em {self._definition.name}: {name}")
        self._next = name

    def end(self) -> None:
        """Encerra a conversa ao fim do handler."""
        self._next = None

    @property
    def resolved_step(self) -> str | None:
        """Step após o handler (inalterado se não houve transição)."""
        return self.step if self._next is _KEEP else self._next  # type: ignore[return-value]


class ConversationEngine:
    """Despacha eventos para steps de conversas persistidas.

    Args:
        store: Persistência do estado (com lock por chave)
        client: BotApiClient exposto aos steps (opcional)
        key_resolver: Extrai (chat_id, user_id) do evento
        ttl_seconds: TTL do estado salvo
    """

    def __init__(
        self,
        store: ConversationStoreProtocol,
        *,
        client: BotApiClient | None = None,
        key_resolver: KeyResolver | None = None,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ) -> None:
        self._store = store
        self._client = client
        self._resolve_identity = key_resolver or resolve_update_identity
        self._ttl_seconds = ttl_seconds
        self._definitions: dict[str, ConversationDefinition] = {}

    def register(self, definition: ConversationDefinition) -> ConversationDefinition:
        """Registra definição; a ordem de registro decide quem inicia."""
        if definition.name in self._definitions:
            raise ConversationError(f"Conversa já registrada: {definition.name}")
        self._definitions[definition.name] = definition
        return definition

    def process(self, event: Any) -> DispatchResult:
        """Processa um evento de ponta a ponta.

        Raises:
            ConversationError: Estado aponta para definição/step desconhecido
            ConversationStoreError: Falha do store
            Exception: Qualquer exceção do handler (nada é persistido)
        """
        chat_id, user_id = self._resolve_identity(event)
        if chat_id is None or user_id is None:
            logger.debug("conversation_event_without_identity")
            return DispatchResult(key=None, dispatched=False)

        key = conversation_key(chat_id, user_id)
        with correlation_scope(correlation_id_for_update(getattr(event, "update_id", None))):
            with self._store.lock(key):
                return self._process_locked(event, key)

    def begin(
        self,
        name: str,
        chat_id: int | str,
        user_id: int | str,
        *,
        data: dict[str, Any] | None = None,
        step: str | None = None,
    ) -> ConversationState:
        """Inicia (ou reinicia) explicitamente uma conversa.

        O handler roda no próximo evento recebido para a chave.
        """
        definition = self._definition(name)
        target = step or definition.entry_step
        if not definition.has_step(target):
            raise ConversationError(f"Step desconhecido em {name}: {target}")
        state = ConversationState(conversation=name, step=target, data=ConversationData(data).to_dict())
        self._store.save(conversation_key(chat_id, user_id), state, self._ttl_seconds)
        logger.info("conversation_started", extra={"conversation": name, "step": target})
        return state

    def clear(self, chat_id: int | str, user_id: int | str) -> bool:
        """Remove o estado da conversa; True se havia registro."""
        return self._store.delete(conversation_key(chat_id, user_id))

    def current_state(self, chat_id: int | str, user_id: int | str) -> ConversationState | None:
        """Estado ativo da conversa, ou None."""
        state = self._store.load(conversation_key(chat_id, user_id))
        if state is None or not state.is_active:
            return None
        return state

    def _process_locked(self, event: Any, key: str) -> DispatchResult:
        state = self._store.load(key)
        if state is None or not state.is_active:
            definition = self._starting_definition(event)
            if definition is None:
                return DispatchResult(key=key, dispatched=False)
            state = ConversationState(conversation=definition.name, step=definition.entry_step, data={})
        else:
            definition = self._definition(state.conversation)

        step = state.step or definition.entry_step
        handler = definition.handler_for(step)
        context = StepContext(
            event=event,
            key=key,
            step=step,
            data=ConversationData(state.data),
            definition=definition,
            client=self._client,
        )

        try:
            handler(context)
        except Exception:
            logger.warning(
                "conversation_step_failed",
                extra={"conversation": definition.name, "step": step},
            )
            raise

        next_step = context.resolved_step
        if next_step is None:
            self._store.delete(key)
        else:
            self._store.save(
                key,
                ConversationState(conversation=definition.name, step=next_step, data=context.data.to_dict()),
                self._ttl_seconds,
            )

        logger.info(
            "conversation_step_dispatched",
            extra={
                "conversation": definition.name,
                "step": step,
                "next_step": next_step,
            },
        )
        return DispatchResult(
            key=key,
            dispatched=True,
            conversation=definition.name,
            step=step,
            next_step=next_step,
        )

    def _starting_definition(self, event: Any) -> ConversationDefinition | None:
        for definition in self._definitions.values():
            if definition.should_start(event):
                return definition
        return None

    def _definition(self, name: str) -> ConversationDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise ConversationError(f"Conversa não registrada: {name}") from None
