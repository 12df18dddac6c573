"""
Conversion between CELL coordinates and tuples of 0-based indices.

Each conversion comes in two flavours:

- ``to_indices`` / ``from_indices`` return a CellResult and never raise
- ``to_indices_strict`` / ``from_indices_strict`` return the bare value and
  raise the carried CellError on failure
"""

import logging
from typing import Any, Tuple

from sashite_cell.dimension import dimension_type
from sashite_cell.errors import (
    CellResult,
    EmptyIndexTupleError,
    GeneratedInvalidError,
    InvalidIndexInputError,
    safe_repr,
)
from sashite_cell.index_mapper import component_to_index, index_to_component
from sashite_cell.segmenter import parse
from sashite_cell.validator import is_valid

logger = logging.getLogger(__name__)


def dimensions(value: Any) -> int:
    """
    Return the number of dimensions of a CELL coordinate, or 0 if invalid.

    Examples:
        >>> dimensions("a")
        1
        >>> dimensions("a1A")
        3
        >>> dimensions("h8Hh8")
        5
        >>> dimensions("1nvalid")
        0
    """
    result = parse(value)
    if not result.ok:
        return 0
    return len(result.value)


def to_indices(value: Any) -> CellResult[Tuple[int, ...]]:
    """
    Convert a CELL coordinate to a tuple of 0-based indices.

    Examples:
        >>> to_indices("e4").value
        (4, 3)
        >>> to_indices("aa1AA").value
        (26, 0, 26)
        >>> to_indices("1nvalid").reason
        'Invalid CELL coordinate: 1nvalid'

    Args:
        value: Coordinate string

    Returns:
        CellResult with one index per dimension, or an InvalidCoordinateError
    """
    parsed = parse(value)
    if not parsed.ok:
        return CellResult.failure(parsed.error)

    indices = tuple(
        component_to_index(component, dimension_type(dimension))
        for dimension, component in enumerate(parsed.value, start=1)
    )
    logger.debug(f"Converted {value} to {len(indices)} indices")
    return CellResult.success(indices)


def to_indices_strict(value: Any) -> Tuple[int, ...]:
    """
    Convert a CELL coordinate to indices, raising on invalid input.

    Raises:
        InvalidCoordinateError: If value is not a valid CELL coordinate
    """
    return to_indices(value).unwrap()


def from_indices(indices: Any) -> CellResult[str]:
    """
    Convert a tuple of 0-based indices to a CELL coordinate.

    Examples:
        >>> from_indices((4, 3)).value
        'e4'
        >>> from_indices((26, 0, 26)).value
        'aa1AA'
        >>> from_indices(()).reason
        'Cannot convert empty tuple to CELL coordinate'
        >>> from_indices([0, 0]).reason
        'Expected tuple, got: [0, 0]'

    Args:
        indices: Non-empty tuple of non-negative integers, one per dimension

    Returns:
        CellResult with the coordinate string, or one of EmptyIndexTupleError,
        InvalidIndexInputError, GeneratedInvalidError
    """
    if not isinstance(indices, tuple):
        logger.debug(f"Rejected non-tuple indices: {safe_repr(indices)}")
        return CellResult.failure(InvalidIndexInputError(indices))

    if len(indices) == 0:
        return CellResult.failure(EmptyIndexTupleError())

    for position, index in enumerate(indices):
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            logger.debug(f"Rejected index {safe_repr(index)} at position {position}")
            return CellResult.failure(
                InvalidIndexInputError(
                    indices,
                    f"Expected tuple of non-negative integers, got: {safe_repr(indices)}",
                )
            )

    coordinate = "".join(
        index_to_component(index, dimension_type(dimension))
        for dimension, index in enumerate(indices, start=1)
    )

    if not is_valid(coordinate):
        logger.error(f"Encoding {len(indices)} indices produced invalid coordinate {coordinate!r}")
        return CellResult.failure(GeneratedInvalidError(coordinate))

    logger.debug(f"Converted {len(indices)} indices to {coordinate}")
    return CellResult.success(coordinate)


def from_indices_strict(indices: Any) -> str:
    """
    Convert indices to a CELL coordinate, raising on invalid input.

    Raises:
        EmptyIndexTupleError: If indices is an empty tuple
        InvalidIndexInputError: If indices is not a tuple of non-negative integers
        GeneratedInvalidError: If the encoder produced an invalid coordinate
    """
    return from_indices(indices).unwrap()
