"""
Splitting CELL coordinates into per-dimension components.
"""

import logging
from typing import Any, List

from sashite_cell.dimension import dimension_type
from sashite_cell.errors import CellResult, InvalidCoordinateError, safe_repr
from sashite_cell.validator import is_valid

logger = logging.getLogger(__name__)


def parse(value: Any) -> CellResult[List[str]]:
    """
    Parse a CELL coordinate into its dimensional components.

    Components are extracted greedily: for dimension n the longest run of
    characters from the class of n is taken from the front of the string.

    Examples:
        >>> parse("a1A").value
        ['a', '1', 'A']
        >>> parse("h8Hh8").value
        ['h', '8', 'H', 'h', '8']
        >>> parse("foobar").value
        ['foobar']
        >>> parse("invalid!").reason
        'Invalid CELL coordinate: invalid!'

    Args:
        value: Coordinate string

    Returns:
        CellResult with the list of components, or an InvalidCoordinateError
    """
    if not is_valid(value):
        logger.debug(f"Cannot parse invalid coordinate: {safe_repr(value)}")
        return CellResult.failure(InvalidCoordinateError(value))

    return CellResult.success(_split_components(value))


def parse_strict(value: Any) -> List[str]:
    """
    Parse a CELL coordinate, raising on invalid input.

    Raises:
        InvalidCoordinateError: If value is not a valid CELL coordinate
    """
    return parse(value).unwrap()


def _split_components(coordinate: str) -> List[str]:
    # Assumes coordinate already passed is_valid()
    components = []
    position = 0
    dimension = 1
    while position < len(coordinate):
        alphabet = dimension_type(dimension).alphabet
        end = position
        while end < len(coordinate) and coordinate[end] in alphabet:
            end += 1
        components.append(coordinate[position:end])
        position = end
        dimension += 1
    return components
