"""
CELL grammar validation.

The grammar is the published CELL v1.0.0 regular expression. Python's ``$``
also matches just before a trailing newline, so line breaks are rejected
separately before the pattern is applied.
"""

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

CELL_PATTERN = r"^[a-z]+(?:[1-9][0-9]*[A-Z]+[a-z]+)*(?:[1-9][0-9]*[A-Z]*)?$"

CELL_REGEX = re.compile(CELL_PATTERN)


def regex() -> re.Pattern:
    """
    Return the compiled CELL grammar.

    The pattern alone does not guarantee compliance: is_valid() also rejects
    strings containing line breaks.

    Examples:
        >>> regex().pattern
        '^[a-z]+(?:[1-9][0-9]*[A-Z]+[a-z]+)*(?:[1-9][0-9]*[A-Z]*)?$'
    """
    return CELL_REGEX


def is_valid(value: Any) -> bool:
    """
    Check whether a value is a valid CELL coordinate string.

    Examples:
        >>> is_valid("a1")
        True
        >>> is_valid("a1A")
        True
        >>> is_valid("a0")
        False
        >>> is_valid("1a")
        False
        >>> is_valid("a1\\n")
        False
        >>> is_valid(None)
        False

    Args:
        value: Candidate coordinate; non-string values are never valid

    Returns:
        True if value is a non-empty string matching the CELL grammar
    """
    if not isinstance(value, str) or not value:
        return False

    if "\r" in value or "\n" in value:
        logger.debug(f"Rejected coordinate with line break: {value!r}")
        return False

    return CELL_REGEX.match(value) is not None
