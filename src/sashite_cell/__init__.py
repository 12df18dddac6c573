"""
sashite_cell - CELL (Coordinate Encoding for Layered Locations) for Python.

CELL encodes coordinates on multi-dimensional game boards with a cyclical
character system: lowercase letters, then positive integers, then uppercase
letters, repeating every three dimensions ("e4", "a1A", "h8Hh8").

This package validates and parses CELL strings and converts them to and from
tuples of 0-based indices.
"""

from sashite_cell.converter import (
    dimensions,
    from_indices,
    from_indices_strict,
    to_indices,
    to_indices_strict,
)
from sashite_cell.coordinate import Coordinate
from sashite_cell.dimension import DimensionType, dimension_type
from sashite_cell.errors import (
    CellError,
    CellResult,
    EmptyIndexTupleError,
    GeneratedInvalidError,
    InvalidCoordinateError,
    InvalidIndexInputError,
)
from sashite_cell.index_mapper import (
    component_to_index,
    index_to_component,
    index_to_letters,
    letters_to_index,
)
from sashite_cell.logging_config import setup_logging
from sashite_cell.segmenter import parse, parse_strict
from sashite_cell.validator import CELL_PATTERN, CELL_REGEX, is_valid, regex

__version__ = "1.0.0"

__all__ = [
    "is_valid",
    "regex",
    "CELL_PATTERN",
    "CELL_REGEX",
    "parse",
    "parse_strict",
    "dimensions",
    "to_indices",
    "to_indices_strict",
    "from_indices",
    "from_indices_strict",
    "Coordinate",
    "DimensionType",
    "dimension_type",
    "letters_to_index",
    "index_to_letters",
    "component_to_index",
    "index_to_component",
    "CellResult",
    "CellError",
    "InvalidCoordinateError",
    "EmptyIndexTupleError",
    "InvalidIndexInputError",
    "GeneratedInvalidError",
    "setup_logging",
]
