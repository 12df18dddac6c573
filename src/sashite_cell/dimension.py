"""
Dimension classes of the CELL cyclical character system.

Every dimension of a CELL coordinate is written with one of three character
sets, chosen by the 1-based dimension index:

    n % 3 == 1 -> lowercase letters (a-z)
    n % 3 == 2 -> positive integers (1, 2, ..., no leading zero)
    n % 3 == 0 -> uppercase letters (A-Z)
"""

import re
import string
from enum import Enum


class DimensionType(Enum):
    """Character class of a single CELL dimension."""

    LOWERCASE = "lowercase"
    NUMERIC = "numeric"
    UPPERCASE = "uppercase"

    @property
    def alphabet(self) -> str:
        """Characters allowed inside a component of this class."""
        return _ALPHABETS[self]

    def matches(self, component: str) -> bool:
        """
        Check whether a whole component belongs to this class.

        Examples:
            >>> DimensionType.NUMERIC.matches("12")
            True
            >>> DimensionType.NUMERIC.matches("012")
            False
            >>> DimensionType.UPPERCASE.matches("Ab")
            False
        """
        if not isinstance(component, str):
            return False
        return _COMPONENT_PATTERNS[self].fullmatch(component) is not None


_ALPHABETS = {
    DimensionType.LOWERCASE: string.ascii_lowercase,
    DimensionType.NUMERIC: string.digits,
    DimensionType.UPPERCASE: string.ascii_uppercase,
}

_COMPONENT_PATTERNS = {
    DimensionType.LOWERCASE: re.compile(r"[a-z]+"),
    DimensionType.NUMERIC: re.compile(r"[1-9][0-9]*"),
    DimensionType.UPPERCASE: re.compile(r"[A-Z]+"),
}


def dimension_type(dimension: int) -> DimensionType:
    """
    Return the character class used by a 1-based dimension index.

    Examples:
        >>> dimension_type(1)
        <DimensionType.LOWERCASE: 'lowercase'>
        >>> dimension_type(5)
        <DimensionType.NUMERIC: 'numeric'>
        >>> dimension_type(6)
        <DimensionType.UPPERCASE: 'uppercase'>

    Args:
        dimension: Dimension index, starting at 1

    Returns:
        DimensionType for that position in the cycle

    Raises:
        ValueError: If dimension is not a positive integer
    """
    if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension < 1:
        raise ValueError(f"Dimension index must be a positive integer, got: {dimension!r}")

    remainder = dimension % 3
    if remainder == 1:
        return DimensionType.LOWERCASE
    if remainder == 2:
        return DimensionType.NUMERIC
    return DimensionType.UPPERCASE
