"""
Component file generator.

Turns a component name and the line that references it into the text of a
new component module and the import that pulls it into the caller.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..logging_config import get_logger
from .config import GeneratorConfig
from .imports import ImportInsertion, plan_import
from .naming import ensure_component_name, props_type_name
from .parser import parse_usage
from .schema import ComponentSchema, convert_usage
from .templates import (
    COMPONENT_TEMPLATE_NAME,
    TemplateEngine,
    TemplateError,
    create_template_engine,
)
from .types import InferredType

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for component generation errors."""

    pass


@dataclass(frozen=True)
class GeneratedFile:
    """A component module waiting to be written."""

    path: Path
    content: str


class ComponentGenerator:
    """Renders function component modules from a ComponentSchema."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        template_dir: Optional[Path] = None,
    ):
        """
        Initialize generator.

        Args:
            config: Generator settings (defaults when omitted)
            template_dir: Directory that may override the built-in template
        """
        self.config = config or GeneratorConfig()
        self._template_engine = create_template_engine(template_dir)

    @property
    def template_engine(self) -> TemplateEngine:
        return self._template_engine

    @property
    def file_extension(self) -> str:
        return self.config.file_extension

    def build_schema(self, name: str, referencing_line: str) -> ComponentSchema:
        """Parse the referencing line into a schema for ``name``."""
        ensure_component_name(name)
        usage = parse_usage(name, referencing_line)
        if usage is None:
            logger.debug("No usage of %s on the line; generating a bare component", name)
        return convert_usage(name, usage)

    def build_context(self, schema: ComponentSchema) -> Dict[str, Any]:
        """Template variables for a schema."""
        has_props_type = schema.has_props or schema.wraps_children
        return {
            "name": schema.name,
            "library_import": self.config.library_import,
            "props_type": (
                props_type_name(schema.name, self.config.props_suffix)
                if has_props_type
                else None
            ),
            "props": [
                {"name": prop.name, "type": prop.type.value} for prop in schema.props
            ],
            "wraps_children": schema.wraps_children,
            "children_type": self.config.children_type,
            "parameters": schema.parameter_names(),
            "wrapper": self.config.wrapper_element,
            "body": "{children}" if schema.wraps_children else schema.name,
            "indent": self.config.indent,
        }

    def generate(self, schema: ComponentSchema) -> str:
        """
        Generate the component module source.

        Args:
            schema: Component to render

        Returns:
            Module text ending with a newline
        """
        try:
            return self.template_engine.render_template(
                COMPONENT_TEMPLATE_NAME, self.build_context(schema)
            )
        except TemplateError as e:
            raise GeneratorError(f"Failed to render component {schema.name}: {e}") from e

    def target_path(self, directory: Path, name: str) -> Path:
        """Sibling path of the referencing file for the new module."""
        return Path(directory) / f"{name}{self.file_extension}"

    def synthesize(
        self,
        name: str,
        referencing_line: str,
        document_lines: Sequence[str],
        directory: Path,
    ) -> Tuple[GeneratedFile, ImportInsertion]:
        """
        Produce the new file and the import for the referencing document.

        Args:
            name: Component name
            referencing_line: Line the component is used on
            document_lines: Lines of the referencing document
            directory: Directory of the referencing document

        Returns:
            (GeneratedFile, ImportInsertion)
        """
        schema = self.build_schema(name, referencing_line)
        content = self.generate(schema)
        generated = GeneratedFile(path=self.target_path(directory, name), content=content)
        return generated, plan_import(name, document_lines)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_component(
    name: str,
    referencing_line: str = "",
    config: Optional[GeneratorConfig] = None,
) -> GenerationResult:
    """
    Generate a component module with error handling.

    Args:
        name: Component name
        referencing_line: Line the component is used on
        config: Generator settings

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        generator = ComponentGenerator(config)
        schema = generator.build_schema(name, referencing_line)
        code = generator.generate(schema)

        warnings = [
            f"Could not infer a type for {name}.{prop.name}: {prop.raw_value!r}"
            for prop in schema.props
            if prop.type == InferredType.ANY
        ]
        metadata = {
            "component": name,
            "file_extension": generator.file_extension,
            "shape": schema.shape.value,
            "prop_count": len(schema.props),
            "wraps_children": schema.wraps_children,
        }
        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Component generation failed for %s: %s", name, e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
