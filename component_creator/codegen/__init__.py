"""
Component code generation.

Parses one line of component usage and renders a new function component
module plus the import that references it.
"""

from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .generator import (
    ComponentGenerator,
    GeneratedFile,
    GenerationResult,
    GeneratorError,
    generate_component,
)
from .imports import (
    ImportInsertion,
    build_import_statement,
    find_import_line,
    is_use_directive,
    plan_import,
)
from .naming import (
    INVALID_NAME_MESSAGE,
    InvalidComponentNameError,
    is_candidate_name,
    is_valid_component_name,
    validate_name_input,
)
from .parser import (
    ComponentUsage,
    TagMatch,
    TagShape,
    extract_attributes,
    match_tag,
    parse_usage,
)
from .schema import ComponentSchema, Prop, convert_usage
from .templates import TemplateEngine, TemplateError, create_template_engine
from .types import InferredType, infer_type

__all__ = [
    # Generator
    "ComponentGenerator",
    "GeneratedFile",
    "GenerationResult",
    "GeneratorError",
    "generate_component",
    # Parsing and inference
    "ComponentUsage",
    "TagMatch",
    "TagShape",
    "extract_attributes",
    "match_tag",
    "parse_usage",
    "InferredType",
    "infer_type",
    # Schema
    "ComponentSchema",
    "Prop",
    "convert_usage",
    # Imports
    "ImportInsertion",
    "build_import_statement",
    "find_import_line",
    "is_use_directive",
    "plan_import",
    # Naming
    "INVALID_NAME_MESSAGE",
    "InvalidComponentNameError",
    "is_candidate_name",
    "is_valid_component_name",
    "validate_name_input",
    # Configuration
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Templates
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
