"""
Editor-side types.

A small model of what the editor hands to the creator: positions, ranges,
diagnostics and documents, plus the EditorHost boundary through which all
side effects (prompts, messages, file writes, buffer edits) go.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

LANGUAGE_IDS = {
    ".tsx": "typescriptreact",
    ".ts": "typescript",
    ".jsx": "javascriptreact",
    ".js": "javascript",
}

_LINE_PATTERN = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line/character position."""

    line: int
    character: int = 0


@dataclass(frozen=True)
class TextRange:
    """Half-open range between two positions."""

    start: Position
    end: Position

    @classmethod
    def on_line(cls, line: int, start: int, end: int) -> "TextRange":
        return cls(Position(line, start), Position(line, end))


@dataclass(frozen=True)
class Diagnostic:
    """A problem reported by the language service."""

    message: str
    range: TextRange


@dataclass
class TextLine:
    line_number: int
    text: str


@dataclass
class CancellationToken:
    is_cancellation_requested: bool = False

    def cancel(self) -> None:
        self.is_cancellation_requested = True


@dataclass
class TextDocument:
    """In-memory view of a source document."""

    path: Path
    text: str = ""
    language_id: Optional[str] = None
    scheme: str = "file"
    _lines: List[str] = field(init=False, repr=False)

    def __post_init__(self):
        self.path = Path(self.path)
        if self.language_id is None:
            self.language_id = LANGUAGE_IDS.get(self.path.suffix.lower(), "plaintext")
        self._lines = _LINE_PATTERN.findall(self.text)
        # An empty document, or one ending in a line break, has an empty last line
        if not self._lines or self._lines[-1].endswith(("\n", "\r")):
            self._lines.append("")

    @classmethod
    def from_file(cls, path: Path) -> "TextDocument":
        path = Path(path)
        return cls(path=path, text=path.read_text(encoding="utf-8"))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> List[str]:
        """Line texts without line breaks."""
        return [line.rstrip("\r\n") for line in self._lines]

    @property
    def directory(self) -> Path:
        return self.path.parent

    def line_at(self, line: int) -> TextLine:
        if not 0 <= line < self.line_count:
            raise IndexError(f"Illegal line number {line}, document has {self.line_count}")
        return TextLine(line_number=line, text=self._lines[line].rstrip("\r\n"))

    def offset_at(self, position: Position) -> int:
        """Character offset of a position, clamped to the document."""
        if position.line >= self.line_count:
            return len(self.text)
        line = max(position.line, 0)
        offset = sum(len(text) for text in self._lines[:line])
        line_length = len(self._lines[line].rstrip("\r\n"))
        return offset + min(max(position.character, 0), line_length)

    def get_text(self, text_range: Optional[TextRange] = None) -> str:
        if text_range is None:
            return self.text
        return self.text[self.offset_at(text_range.start) : self.offset_at(text_range.end)]

    def with_insertion(self, position: Position, text: str) -> "TextDocument":
        """
        Return a copy of this document with text inserted.

        Inserting past the last line appends, adding a line break first when
        the document does not end with one.
        """
        offset = self.offset_at(position)
        prefix = self.text[:offset]
        if position.line >= self.line_count and prefix and not prefix.endswith("\n"):
            prefix += "\n"
        return TextDocument(
            path=self.path,
            text=prefix + text + self.text[offset:],
            language_id=self.language_id,
            scheme=self.scheme,
        )


class EditorHost(ABC):
    """Everything the creator needs from the surrounding editor."""

    @abstractmethod
    def active_document(self) -> Optional[TextDocument]:
        """Document in the active editor, or None when nothing is open."""

    @abstractmethod
    def cursor_line(self) -> int:
        """Line of the active selection's start."""

    @abstractmethod
    def prompt_component_name(self) -> Optional[str]:
        """
        Ask the user for a component name.

        Implementations re-prompt until the input passes validate_name_input()
        and return None when the user dismisses the prompt.
        """

    @abstractmethod
    def file_exists(self, path: Path) -> bool:
        pass

    @abstractmethod
    def write_file(self, path: Path, content: str) -> bool:
        """
        Create a file with the given content.

        Returns False when the host declines the edit; raises on failure.
        """

    @abstractmethod
    def insert_text(self, document: TextDocument, position: Position, text: str) -> None:
        """Insert text into a document buffer; raises on failure."""

    @abstractmethod
    def show_info(self, message: str) -> None:
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        pass
