"""Definição declarativa de uma conversa: nome, step de entrada e handlers.

Uso:
    survey = ConversationDefinition("survey", "ask_name", starts_when=is_command("/survey"))

    @survey.step("ask_name")
    def ask_name(ctx: StepContext) -> None:
        ctx.data.set("name", ctx.event.message.text)
        ctx.next_step("ask_age")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utils.errors import ConversationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from conversations.engine import StepContext

    StepHandler = Callable[[StepContext], None]
    StartCondition = Callable[[Any], bool]


class ConversationDefinition:
    """Conjunto de steps nomeados de uma conversa.

    Args:
        name: Nome único no engine (gravado no estado persistido)
        entry_step: Step inicial de uma conversa nova
        starts_when: Condição que inicia a conversa a partir de um evento.
            None = nunca inicia sozinha (apenas via engine.begin).
    """

    __slots__ = ("_entry_step", "_name", "_starts_when", "_steps")

    def __init__(
        self,
        name: str,
        entry_step: str,
        *,
        starts_when: StartCondition | None = None,
    ) -> None:
        if not name:
            raise ConversationError("Nome de conversa não pode ser vazio")
        if not entry_step:
            raise ConversationError("entry_step não pode ser vazio")
        self._name = name
        self._entry_step = entry_step
        self._starts_when = starts_when
        self._steps: dict[str, StepHandler] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def entry_step(self) -> str:
        return self._entry_step

    @property
    def steps(self) -> frozenset[str]:
        return frozenset(self._steps)

    def step(self, name: str) -> Callable[[StepHandler], StepHandler]:
        """Decorator que registra o handler de um step."""

        def register(handler: StepHandler) -> StepHandler:
            self.add_step(name, handler)
            return handler

        return register

    def add_step(self, name: str, handler: StepHandler) -> None:
        if name in self._steps:
            raise ConversationError(f"Step duplicado em {self._name}: {name}")
        self._steps[name] = handler

    def has_step(self, name: str) -> bool:
        return name in self._steps

    def handler_for(self, name: str) -> StepHandler:
        """Handler do step.

        Raises:
            ConversationError: Step não declarado
        """
        try:
            return self._steps[name]
        except KeyError:
            raise ConversationError(f"Step desconhecido em {self._name}: {name}") from None

    def should_start(self, event: Any) -> bool:
        return self._starts_when is not None and bool(self._starts_when(event))

    def __repr__(self) -> str:
        return f"ConversationDefinition(name={self._name!r}, entry_step={self._entry_step!r})"


def is_command(command: str) -> StartCondition:
    """Condição de início: texto da mensagem é o comando (ex: "/survey").

    Aceita o sufixo @nome_do_bot e argumentos após o comando.
    """
    expected = command if command.startswith("/") else f"/{command}"

    def matches(event: Any) -> bool:
        message = getattr(event, "effective_message", None)
        text = getattr(message, "text", None)
        if not text:
            return False
        head = text.split(maxsplit=1)[0]
        return head.split("@", 1)[0] == expected

    return matches
