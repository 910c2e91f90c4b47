"""
String Manipulation Utilities for tsemit.

This module provides the small text helpers shared by the builders and the
emitter: line splitting, indentation, and semicolon handling.
"""

from __future__ import annotations

from typing import List

from .constants import STATEMENT_TERMINATORS
from .exceptions import BuilderError


# =============================================================================
# Text Formatting and Indentation
# =============================================================================

def split_lines(text: str) -> List[str]:
    """
    Split text on line feeds, dropping carriage returns.

    Args:
        text: Text to split

    Returns:
        List of lines without line terminators
    """
    return text.replace("\r", "").split("\n")


def prefix_lines(text: str, prefix: str) -> List[str]:
    """
    Prefix every line of text, blank ones included.

    Args:
        text: Possibly multi-line text
        prefix: String placed in front of each line

    Returns:
        List of prefixed lines
    """
    return [f"{prefix}{line}" for line in split_lines(text)]


def is_blank(value) -> bool:
    """Return True for None or whitespace-only strings."""
    return value is None or not str(value).strip()


def require_text(value, message: str, argument: str) -> str:
    """
    Coerce a builder argument to text, rejecting blank values.

    Args:
        value: String or reference object
        message: Error message used when the value is blank
        argument: Argument name reported on the error

    Returns:
        The value as a string

    Raises:
        BuilderError: If the value is None or whitespace
    """
    if is_blank(value):
        raise BuilderError(message, argument)
    return str(value)


# =============================================================================
# Statement Helpers
# =============================================================================

def normalize_statement(statement: str) -> str:
    """
    Right-trim a statement and terminate it with a semicolon when needed.

    Statements already ending in ``;``, ``}`` or ``{`` are kept as they are.

    Args:
        statement: Raw statement text

    Returns:
        Normalised statement
    """
    trimmed = statement.rstrip()
    if trimmed.endswith(STATEMENT_TERMINATORS):
        return trimmed
    return f"{trimmed};"

