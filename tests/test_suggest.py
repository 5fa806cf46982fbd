"""
Tests for quick-fix suggestion selection.
"""

from pathlib import Path

from component_creator.editor import (
    CancellationToken,
    Diagnostic,
    Position,
    TextDocument,
    TextRange,
)
from component_creator.suggest import (
    CREATE_COMPONENT_COMMAND,
    ComponentQuickFixProvider,
    name_from_line,
    select_component_name,
)

SOURCE = """\
export default function App() {
  return <Foo value={1} />;
}
<Bar className="x">
const lower = thing;
"""


def doc(text=SOURCE, path="/src/App.tsx"):
    return TextDocument(path=Path(path), text=text)


def diag(message, line, start, end):
    return Diagnostic(message=message, range=TextRange.on_line(line, start, end))


CURSOR_ON_FOO = TextRange.on_line(1, 10, 10)
CURSOR_ON_BAR = TextRange.on_line(3, 0, 0)
CURSOR_ON_PLAIN = TextRange.on_line(4, 0, 0)


# ═══════════════════════════════════════════════════════════════════
#  select_component_name
# ═══════════════════════════════════════════════════════════════════


class TestSelectFromDiagnostics:
    def test_cannot_find_name(self):
        diagnostics = [diag("Cannot find name 'Foo'.", 1, 10, 13)]
        assert select_component_name(diagnostics, doc(), CURSOR_ON_PLAIN) == "Foo"

    def test_is_not_defined(self):
        diagnostics = [diag("'Foo' is not defined.", 1, 10, 13)]
        assert select_component_name(diagnostics, doc(), CURSOR_ON_PLAIN) == "Foo"

    def test_diagnostic_beats_cursor_line(self):
        diagnostics = [diag("Cannot find name 'Foo'.", 1, 10, 13)]
        assert select_component_name(diagnostics, doc(), CURSOR_ON_BAR) == "Foo"

    def test_first_valid_diagnostic_wins(self):
        """An invalid range is skipped, not treated as the end of the search."""
        diagnostics = [
            diag("Cannot find name 'thing'.", 4, 14, 19),
            diag("Cannot find name 'Bar'.", 3, 1, 4),
            diag("Cannot find name 'Foo'.", 1, 10, 13),
        ]
        assert select_component_name(diagnostics, doc(), CURSOR_ON_PLAIN) == "Bar"

    def test_unrelated_message_ignored(self):
        diagnostics = [diag("Type 'string' is not assignable.", 1, 10, 13)]
        assert select_component_name(diagnostics, doc(), CURSOR_ON_PLAIN) is None

    def test_single_letter_range_not_a_candidate(self):
        text = "<A />\n"
        diagnostics = [diag("Cannot find name 'A'.", 0, 1, 2)]
        assert select_component_name(diagnostics, doc(text), TextRange.on_line(0, 0, 0)) is None

    def test_invalid_ranges_fall_through_to_cursor_line(self):
        diagnostics = [diag("Cannot find name 'thing'.", 4, 14, 19)]
        assert select_component_name(diagnostics, doc(), CURSOR_ON_BAR) == "Bar"

    def test_range_ending_on_next_line_not_a_candidate(self):
        text = "  Foo\n<Bar />\n"
        spanning = TextRange(Position(0, 2), Position(1, 0))
        diagnostics = [Diagnostic(message="Cannot find name 'Foo'.", range=spanning)]
        assert select_component_name(diagnostics, doc(text), TextRange.on_line(0, 0, 0)) is None
        assert select_component_name(diagnostics, doc(text), TextRange.on_line(1, 0, 0)) == "Bar"


class TestSelectFromLine:
    def test_cursor_line_open_tag(self):
        assert select_component_name([], doc(), CURSOR_ON_BAR) == "Bar"

    def test_cursor_line_self_closing(self):
        assert select_component_name([], doc(), CURSOR_ON_FOO) == "Foo"

    def test_nothing_on_line(self):
        assert select_component_name([], doc(), CURSOR_ON_PLAIN) is None

    def test_name_from_line_requires_terminator(self):
        assert name_from_line("<Foo") is None
        assert name_from_line("<Foo/>") == "Foo"
        assert name_from_line("<Foo>") == "Foo"

    def test_lowercase_tags_ignored(self):
        assert name_from_line("<div><span>") is None

    def test_first_tag_on_line(self):
        assert name_from_line("<Outer><Inner /></Outer>") == "Outer"


# ═══════════════════════════════════════════════════════════════════
#  ComponentQuickFixProvider
# ═══════════════════════════════════════════════════════════════════


class TestQuickFixProvider:
    def test_offers_single_action(self):
        actions = ComponentQuickFixProvider().provide_code_actions(doc(), CURSOR_ON_BAR, [])
        assert len(actions) == 1
        action = actions[0]
        assert action.title == "Create new React component 'Bar'"
        assert action.kind == "quickfix.create"
        assert action.is_preferred
        assert action.diagnostics == []
        assert action.command.command == CREATE_COMPONENT_COMMAND
        assert action.command.arguments == ["Bar"]

    def test_no_action_without_candidate(self):
        assert ComponentQuickFixProvider().provide_code_actions(doc(), CURSOR_ON_PLAIN, []) == []

    def test_no_action_for_name_the_command_rejects(self):
        underscored = doc("<Foo_Bar />\n")
        cursor = TextRange.on_line(0, 0, 0)
        assert select_component_name([], underscored, cursor) == "Foo_Bar"
        assert ComponentQuickFixProvider().provide_code_actions(underscored, cursor, []) == []

    def test_only_tsx_documents(self):
        plain = doc(path="/src/notes.txt")
        assert ComponentQuickFixProvider().provide_code_actions(plain, CURSOR_ON_BAR, []) == []

    def test_cancelled_token(self):
        token = CancellationToken()
        token.cancel()
        provider = ComponentQuickFixProvider()
        assert provider.provide_code_actions(doc(), CURSOR_ON_BAR, [], token) == []
