"""Filesystem-backed editor host.

Treats one file on disk as the active document and the terminal as the
editor UI: messages go to a rich console, the name prompt uses rich's
Prompt, and buffer edits are written straight back to the file.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .codegen.naming import validate_name_input
from .editor import EditorHost, Position, TextDocument
from .logging_config import get_logger

logger = get_logger(__name__)


class LocalEditorHost(EditorHost):
    """EditorHost over the local filesystem and a terminal."""

    def __init__(
        self,
        document_path: str | Path | None = None,
        cursor_line: int = 0,
        console: Console | None = None,
    ) -> None:
        """Initialize the host.

        Args:
            document_path: File acting as the active document (None: no editor).
            cursor_line: Zero-based line of the cursor in that file.
            console: Rich console for messages and prompts.
        """
        self.document_path = Path(document_path) if document_path else None
        self._cursor_line = cursor_line
        self.console = console or Console()

    def active_document(self) -> TextDocument | None:
        if self.document_path is None or not self.document_path.is_file():
            return None
        return TextDocument.from_file(self.document_path)

    def cursor_line(self) -> int:
        return self._cursor_line

    def prompt_component_name(self) -> str | None:
        """Prompt until the input is a valid component name.

        Returns:
            The name, or None when the user aborts with Ctrl-C or EOF.
        """
        while True:
            try:
                value = Prompt.ask(
                    "Enter the name of the new React component",
                    console=self.console,
                )
            except (KeyboardInterrupt, EOFError):
                self.console.print()
                logger.info("Name prompt dismissed")
                return None

            value = value or ""
            problem = validate_name_input(value)
            if problem is None:
                return value
            self.console.print(f"[red]{escape(problem)}[/red]")

    def file_exists(self, path: Path) -> bool:
        return Path(path).exists()

    def write_file(self, path: Path, content: str) -> bool:
        path = Path(path)
        # Mirrors a create edit that ignores an existing file
        if path.exists():
            logger.warning("File appeared before write, leaving it alone: %s", path)
            return False
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d characters to %s", len(content), path)
        return True

    def insert_text(self, document: TextDocument, position: Position, text: str) -> None:
        updated = document.with_insertion(position, text)
        document.path.write_text(updated.text, encoding="utf-8")
        logger.debug("Inserted %r into %s at %s", text, document.path, position)

    def show_info(self, message: str) -> None:
        self.console.print(f"ℹ️  [cyan]{escape(message)}[/cyan]")

    def show_error(self, message: str) -> None:
        self.console.print(f"❌ [red]{escape(message)}[/red]")
