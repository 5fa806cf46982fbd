"""
Single-line tag scanner.

Finds the first usage of a component on one line of markup and pulls out
its attributes and whether it wraps any children. This is deliberately a
two-stage regular expression scan rather than a parser:

1. the tag matcher locates ``<Name ...>content</Name>`` or ``<Name ... />``
2. the attribute matcher collects ``key={literal}`` pairs from the tag text

Only the first tag match on the line is considered.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from ..logging_config import get_logger

logger = get_logger(__name__)

ATTRIBUTE_PATTERN = re.compile(r"(\w+)=\{([^}]*)\}", re.ASCII)


class TagShape(Enum):
    """How the component was written on the line."""

    SELF_CLOSING = "self_closing"
    PAIRED_EMPTY = "paired_empty"
    PAIRED_WITH_CONTENT = "paired_with_content"


@dataclass(frozen=True)
class TagMatch:
    """Raw captures from the tag matcher."""

    paired_attributes: Optional[str]
    content: Optional[str]
    self_closing_attributes: Optional[str]

    @property
    def attribute_text(self) -> str:
        """Attribute source of whichever alternative matched."""
        return self.paired_attributes or self.self_closing_attributes or ""

    @property
    def shape(self) -> TagShape:
        if self.content is None:
            return TagShape.SELF_CLOSING
        if self.content.strip():
            return TagShape.PAIRED_WITH_CONTENT
        return TagShape.PAIRED_EMPTY


@dataclass
class ComponentUsage:
    """What one line says about a component."""

    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    shape: TagShape = TagShape.SELF_CLOSING

    @property
    def wraps_children(self) -> bool:
        """True when the tag has non-blank content between open and close."""
        return self.shape == TagShape.PAIRED_WITH_CONTENT


def build_tag_pattern(name: str) -> re.Pattern:
    """
    Build the tag matcher for a component name.

    The first alternative matches an open tag with optional inline content
    and a close tag; the second matches a self-closing tag.

    Args:
        name: Component name

    Returns:
        Compiled pattern with groups (attributes, content, self-closing attributes)
    """
    tag = re.escape(name)
    return re.compile(rf"<{tag}([^>]*)>?(.*?)</{tag}>?|<{tag}([^>]*)/>")


def match_tag(name: str, line: str) -> Optional[TagMatch]:
    """Return the first tag match for ``name`` on the line, if any."""
    match = build_tag_pattern(name).search(line)
    if match is None:
        logger.debug("No <%s> tag found on line: %r", name, line)
        return None

    return TagMatch(
        paired_attributes=match.group(1),
        content=match.group(2),
        self_closing_attributes=match.group(3),
    )


def extract_attributes(text: str) -> Dict[str, str]:
    """
    Collect ``key={literal}`` pairs from tag text.

    Pairs are scanned left to right. A repeated key keeps its first position
    but takes the last value seen.

    Args:
        text: Attribute source of a tag

    Returns:
        Ordered mapping of attribute name to raw literal text
    """
    attributes: Dict[str, str] = {}
    for match in ATTRIBUTE_PATTERN.finditer(text):
        attributes[match.group(1)] = match.group(2)
    return attributes


def parse_usage(name: str, line: str) -> Optional[ComponentUsage]:
    """
    Parse how ``name`` is used on a line.

    Args:
        name: Component name
        line: Text of the referencing line

    Returns:
        ComponentUsage, or None when the line has no tag for the component
    """
    tag = match_tag(name, line)
    if tag is None:
        return None

    attributes = extract_attributes(tag.attribute_text)
    logger.debug(
        "Parsed <%s>: shape=%s, attributes=%s", name, tag.shape.value, list(attributes)
    )
    return ComponentUsage(name=name, attributes=attributes, shape=tag.shape)
