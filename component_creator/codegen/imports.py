"""
Import statement placement in the referencing document.

Module-boundary directives such as ``"use client"`` must stay at the very top
of a file, so the import goes below them.
"""

import re
from dataclasses import dataclass
from typing import Sequence

DIRECTIVE_PATTERN = re.compile(r"""(['"])use (?:client|server)\1;?""")


@dataclass(frozen=True)
class ImportInsertion:
    """Where and what to insert into the referencing document."""

    line: int
    text: str


def is_use_directive(line: str) -> bool:
    """True for a ``'use client'`` / ``"use server";`` style statement."""
    return DIRECTIVE_PATTERN.fullmatch(line.strip()) is not None


def find_import_line(lines: Sequence[str]) -> int:
    """
    Pick the line index for a new import.

    Only the first two lines are inspected.

    Args:
        lines: Lines of the referencing document

    Returns:
        0, 1 or 2
    """
    if not lines or not is_use_directive(lines[0]):
        return 0
    if len(lines) > 1 and is_use_directive(lines[1]):
        return 2
    return 1


def build_import_statement(component_name: str) -> str:
    """Default import of a sibling component module."""
    return f"import {component_name} from './{component_name}';\n"


def plan_import(component_name: str, lines: Sequence[str]) -> ImportInsertion:
    """Combine placement and statement text."""
    return ImportInsertion(
        line=find_import_line(lines), text=build_import_statement(component_name)
    )
