"""
React Component Creator

Generates a function component module from one line of JSX usage and
imports it into the referencing file. Also offers the generation as a
quick fix for undefined capitalized identifiers.
"""

from .codegen import (
    ComponentGenerator,
    GeneratedFile,
    GeneratorConfig,
    ImportInsertion,
    InferredType,
    TagShape,
    generate_component,
    infer_type,
    load_config,
    parse_usage,
)
from .creator import ComponentCreator, CreationReport, CreationStatus
from .dispatch import (
    CommandInvoked,
    CreateComponent,
    OfferQuickFix,
    PromptForName,
    QuickFixRequested,
    dispatch,
)
from .editor import (
    CancellationToken,
    Diagnostic,
    EditorHost,
    Position,
    TextDocument,
    TextRange,
)
from .host import LocalEditorHost
from .logging_config import configure_logging, get_logger
from .suggest import (
    CREATE_COMPONENT_COMMAND,
    CodeAction,
    ComponentQuickFixProvider,
    select_component_name,
)

__version__ = "0.1.0"

logger = get_logger(__name__)


def activate(host: EditorHost, config=None):
    """
    Wire the command and quick-fix provider for a host.

    Args:
        host: Editor host the command acts through
        config: Generator configuration (GeneratorConfig or None)

    Returns:
        Mapping of command id to callable, and the quick-fix provider
    """
    creator = ComponentCreator(host, config)
    logger.info("React Component Creator extension is now active!")
    return {CREATE_COMPONENT_COMMAND: creator.run}, ComponentQuickFixProvider()


__all__ = [
    "activate",
    "CREATE_COMPONENT_COMMAND",
    # Creation flow
    "ComponentCreator",
    "CreationReport",
    "CreationStatus",
    "LocalEditorHost",
    # Suggestions and dispatch
    "ComponentQuickFixProvider",
    "CodeAction",
    "select_component_name",
    "CommandInvoked",
    "QuickFixRequested",
    "PromptForName",
    "CreateComponent",
    "OfferQuickFix",
    "dispatch",
    # Editor model
    "EditorHost",
    "TextDocument",
    "Position",
    "TextRange",
    "Diagnostic",
    "CancellationToken",
    # Generation
    "ComponentGenerator",
    "GeneratedFile",
    "GeneratorConfig",
    "ImportInsertion",
    "InferredType",
    "TagShape",
    "generate_component",
    "infer_type",
    "load_config",
    "parse_usage",
    # Logging
    "configure_logging",
    "get_logger",
]
