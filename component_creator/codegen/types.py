"""
Prop type inference for generated components.

Types are guessed from the literal text of an attribute value. There is no
type checker involved, only the shape of the value.
"""

import re
from enum import Enum


class InferredType(Enum):
    """Types a prop can be declared with."""

    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    ANY = "any"


BOOLEAN_LITERALS = {"true", "false"}
STRING_QUOTES = ('"', "'")

# Text accepted by JavaScript's Number() once surrounding whitespace is gone.
_DECIMAL_NUMBER = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)
_PREFIXED_INTEGER = re.compile(
    r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+", re.ASCII
)

# Whitespace that Number() trims (ECMAScript WhiteSpace + LineTerminator).
_JS_WHITESPACE = (
    " \t\n\r\v\f\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def is_numeric_literal(value: str) -> bool:
    """Return True when Number(value) would not be NaN."""
    stripped = value.strip(_JS_WHITESPACE)
    if not stripped:
        # Number("") is 0
        return True
    return bool(
        _DECIMAL_NUMBER.fullmatch(stripped) or _PREFIXED_INTEGER.fullmatch(stripped)
    )


def infer_type(value: str) -> InferredType:
    """
    Infer a prop type from raw attribute text.

    Rules are checked in order and the first match wins:
    boolean literal, quoted string, numeric literal, anything else.

    Args:
        value: Text found between the braces of ``key={...}``

    Returns:
        The inferred type
    """
    if value in BOOLEAN_LITERALS:
        return InferredType.BOOLEAN
    if value.startswith(STRING_QUOTES):
        return InferredType.STRING
    if is_numeric_literal(value):
        return InferredType.NUMBER
    return InferredType.ANY
