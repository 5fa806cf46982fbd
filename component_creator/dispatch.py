"""Pure dispatch from editor events to actions.

Host registration glue feeds events in here and acts on what comes back;
nothing in this module performs side effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from .editor import Diagnostic, TextDocument, TextRange
from .suggest import CodeAction, ComponentQuickFixProvider


@dataclass(frozen=True)
class CommandInvoked:
    """The create command was run, optionally with a component name."""

    name: str | None = None


@dataclass(frozen=True)
class QuickFixRequested:
    """The editor asked for code actions at a range."""

    document: TextDocument
    range: TextRange
    diagnostics: Sequence[Diagnostic] = field(default_factory=tuple)


@dataclass(frozen=True)
class PromptForName:
    pass


@dataclass(frozen=True)
class CreateComponent:
    name: str


@dataclass(frozen=True)
class OfferQuickFix:
    action: CodeAction


EditorEvent = Union[CommandInvoked, QuickFixRequested]
Action = Union[PromptForName, CreateComponent, OfferQuickFix]

_provider = ComponentQuickFixProvider()


def dispatch(event: EditorEvent) -> Action | None:
    """Map an editor event to the action it calls for.

    Args:
        event: CommandInvoked or QuickFixRequested.

    Returns:
        The action to take, or None when there is nothing to do.
    """
    if isinstance(event, CommandInvoked):
        if event.name:
            return CreateComponent(event.name)
        return PromptForName()

    if isinstance(event, QuickFixRequested):
        actions = _provider.provide_code_actions(
            event.document, event.range, event.diagnostics
        )
        return OfferQuickFix(actions[0]) if actions else None

    raise TypeError(f"Unknown editor event: {type(event).__name__}")
