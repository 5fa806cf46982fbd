"""Quick-fix suggestions for undefined component names.

Decides, from diagnostics and the text under the cursor, whether a
"create component" action should be offered and for which name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Sequence

from .codegen.naming import is_candidate_name, is_valid_component_name
from .editor import CancellationToken, Diagnostic, TextDocument, TextRange
from .logging_config import get_logger

logger = get_logger(__name__)

UNDEFINED_NAME_MARKERS = ("Cannot find name", "is not defined")
USAGE_PATTERN = re.compile(r"<([A-Z]\w+)(\s|/|>)", re.ASCII)

CREATE_COMPONENT_COMMAND = "extension.createReactComponent"
QUICK_FIX_KIND = "quickfix"
CREATE_COMPONENT_KIND = f"{QUICK_FIX_KIND}.create"
DOCUMENT_SELECTOR = {"language": "typescriptreact", "scheme": "file"}


@dataclass
class Command:
    command: str
    title: str
    arguments: list[Any] = field(default_factory=list)


@dataclass
class CodeAction:
    """An action offered to the user in the quick-fix menu."""

    title: str
    kind: str
    command: Command | None = None
    is_preferred: bool = False
    diagnostics: list[Diagnostic] = field(default_factory=list)


def is_undefined_name_message(message: str) -> bool:
    """True when a diagnostic message reports an unknown identifier."""
    return any(marker in message for marker in UNDEFINED_NAME_MARKERS)


def name_from_diagnostics(
    diagnostics: Sequence[Diagnostic], document: TextDocument
) -> str | None:
    """Return the first undefined-name diagnostic whose text is a component name.

    Every diagnostic is examined in order; one whose range text does not look
    like a component name is skipped rather than ending the search.
    """
    for diagnostic in diagnostics:
        if not is_undefined_name_message(diagnostic.message):
            continue
        text = document.get_text(diagnostic.range)
        if is_candidate_name(text):
            return text
        logger.debug("Skipping diagnostic range text %r", text)
    return None


def name_from_line(line: str) -> str | None:
    """Return the first capitalized tag name opened on the line."""
    match = USAGE_PATTERN.search(line)
    return match.group(1) if match else None


def select_component_name(
    diagnostics: Sequence[Diagnostic],
    document: TextDocument,
    cursor_range: TextRange,
) -> str | None:
    """Choose the component name to offer, if any.

    Args:
        diagnostics: Diagnostics attached to the request.
        document: Document the request is for.
        cursor_range: Current selection; only its start line is inspected.

    Returns:
        Component name, or None when no action should be offered.
    """
    name = name_from_diagnostics(diagnostics, document)
    if name:
        return name

    line = document.line_at(cursor_range.start.line).text
    return name_from_line(line)


def create_component_action(component_name: str) -> CodeAction:
    """Build the quick-fix action that runs the create command."""
    return CodeAction(
        title=f"Create new React component '{component_name}'",
        kind=CREATE_COMPONENT_KIND,
        command=Command(
            command=CREATE_COMPONENT_COMMAND,
            title="Create React Component",
            arguments=[component_name],
        ),
        is_preferred=True,
    )


def matches_selector(
    document: TextDocument, selector: dict[str, str] = DOCUMENT_SELECTOR
) -> bool:
    return (
        document.language_id == selector["language"]
        and document.scheme == selector["scheme"]
    )


class ComponentQuickFixProvider:
    """Offers "create component" for undefined capitalized identifiers."""

    provided_code_action_kinds = [QUICK_FIX_KIND]

    def provide_code_actions(
        self,
        document: TextDocument,
        range: TextRange,
        diagnostics: Sequence[Diagnostic],
        token: CancellationToken | None = None,
    ) -> list[CodeAction]:
        """Return zero or one quick-fix action for the request."""
        if token is not None and token.is_cancellation_requested:
            return []
        if not matches_selector(document):
            return []

        name = select_component_name(diagnostics, document, range)
        if name is None:
            return []
        # The create command only accepts alphanumeric names
        if not is_valid_component_name(name):
            logger.debug("Not offering creation for %s", name)
            return []

        logger.debug("Offering component creation for %s", name)
        return [create_component_action(name)]
