"""Create-component command.

Runs one invocation end to end against an EditorHost: resolve the name,
check for an existing file, write the generated module, then insert the
import into the referencing document. The write and the import edit are
independent steps; each is attempted once and reported on its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .codegen.config import GeneratorConfig
from .codegen.generator import ComponentGenerator
from .codegen.naming import is_valid_component_name
from .dispatch import Action, CreateComponent, EditorEvent, PromptForName, dispatch
from .editor import EditorHost, Position
from .logging_config import get_logger

logger = get_logger(__name__)


class CreationStatus(Enum):
    """Terminal state of one invocation."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"
    INVALID_NAME = "invalid_name"
    NO_ACTIVE_EDITOR = "no_active_editor"
    ALREADY_EXISTS = "already_exists"


@dataclass
class CreationReport:
    """Outcome of a create-component invocation."""

    status: CreationStatus
    component_name: str | None = None
    path: Path | None = None
    file_created: bool = False
    import_inserted: bool = False
    messages: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True unless a step failed; an existing file counts as success."""
        if self.status == CreationStatus.ALREADY_EXISTS:
            return True
        return (
            self.status == CreationStatus.COMPLETED
            and self.file_created
            and self.import_inserted
        )


class ComponentCreator:
    """Executes create-component actions through an EditorHost."""

    def __init__(self, host: EditorHost, config: GeneratorConfig | None = None):
        self.host = host
        self.generator = ComponentGenerator(config)

    def _info(self, report: CreationReport, message: str) -> None:
        report.messages.append(message)
        self.host.show_info(message)

    def _error(self, report: CreationReport, message: str) -> None:
        report.errors.append(message)
        self.host.show_error(message)

    def handle(self, event: EditorEvent) -> CreationReport | Action | None:
        """Dispatch an event and run it when it asks for a component.

        Quick-fix requests only produce an offer; they never create anything
        until the offered command is invoked.
        """
        action = dispatch(event)
        if isinstance(action, PromptForName):
            return self.run()
        if isinstance(action, CreateComponent):
            return self.run(action.name)
        return action

    def run(self, component_name: str | None = None) -> CreationReport:
        """Create a component module and import it.

        Args:
            component_name: Name to create; the user is prompted when omitted.

        Returns:
            CreationReport describing what happened.
        """
        if not component_name:
            component_name = self.host.prompt_component_name()

        if not component_name:
            logger.info("Component creation cancelled")
            return CreationReport(status=CreationStatus.CANCELLED)

        if not is_valid_component_name(component_name):
            logger.warning("Refusing invalid component name: %r", component_name)
            return CreationReport(
                status=CreationStatus.INVALID_NAME, component_name=component_name
            )

        report = CreationReport(
            status=CreationStatus.COMPLETED, component_name=component_name
        )

        document = self.host.active_document()
        if document is None:
            report.status = CreationStatus.NO_ACTIVE_EDITOR
            self._error(report, "No active editor!")
            return report

        report.path = self.generator.target_path(document.directory, component_name)
        if self.host.file_exists(report.path):
            report.status = CreationStatus.ALREADY_EXISTS
            self._info(
                report, f"Component {component_name} already exists. No changes made."
            )
            return report

        line = document.line_at(self.host.cursor_line()).text
        generated, insertion = self.generator.synthesize(
            component_name, line, document.lines, document.directory
        )

        try:
            if self.host.write_file(generated.path, generated.content):
                report.file_created = True
                logger.info("Created %s", generated.path)
                self._info(report, f"Component {component_name} created successfully!")
            else:
                self._error(report, f"Failed to create component {component_name}.")
        except Exception as e:
            logger.error("Writing %s failed: %s", generated.path, e)
            self._error(report, f"Error creating component: {e}")

        try:
            self.host.insert_text(document, Position(insertion.line, 0), insertion.text)
            report.import_inserted = True
            logger.info("Inserted import of %s at line %d", component_name, insertion.line)
        except Exception as e:
            logger.error("Inserting import into %s failed: %s", document.path, e)
            self._error(report, f"Error adding import statement: {e}")

        return report
