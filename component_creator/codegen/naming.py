"""
Naming rules for generated components.

Component names double as the generated symbol and the generated file's
base name, so they are validated before anything touches the disk.
"""

import re
from typing import Optional

# Names accepted from the user or from a command argument. Both patterns
# must cover the whole text, so they are applied with fullmatch().
COMPONENT_NAME_PATTERN = re.compile(r"[A-Z][a-zA-Z0-9]*")

# Names accepted when extracted from diagnostic ranges.
CANDIDATE_NAME_PATTERN = re.compile(r"[A-Z]\w+", re.ASCII)

INVALID_NAME_MESSAGE = (
    "Component name must start with a capital letter "
    "and contain only alphanumeric characters"
)


class InvalidComponentNameError(ValueError):
    """Raised when a component name fails the naming pattern."""

    pass


def is_valid_component_name(name: Optional[str]) -> bool:
    """Check a name against the component naming pattern."""
    return bool(name) and COMPONENT_NAME_PATTERN.fullmatch(name) is not None


def is_candidate_name(text: Optional[str]) -> bool:
    """Check whether text pulled from a diagnostic looks like a component."""
    return bool(text) and CANDIDATE_NAME_PATTERN.fullmatch(text) is not None


def validate_name_input(value: Optional[str]) -> Optional[str]:
    """
    Validate interactive input.

    Args:
        value: Raw text typed by the user

    Returns:
        None if the value is acceptable, otherwise the message to show
    """
    if is_valid_component_name(value):
        return None
    return INVALID_NAME_MESSAGE


def ensure_component_name(name: Optional[str]) -> str:
    """Return the name unchanged or raise InvalidComponentNameError."""
    if not is_valid_component_name(name):
        raise InvalidComponentNameError(f"Invalid component name: {name!r}")
    return name


def props_type_name(component_name: str, suffix: str = "Props") -> str:
    """Name of the generated props type (``FooProps``)."""
    return f"{component_name}{suffix}"
