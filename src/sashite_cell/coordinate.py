"""
Validated CELL coordinate value object.

Coordinate wraps a CELL string in a frozen pydantic model so that a coordinate
can be passed around, hashed, compared and serialized knowing it is valid.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sashite_cell import converter
from sashite_cell.dimension import DimensionType, dimension_type
from sashite_cell.errors import InvalidCoordinateError
from sashite_cell.segmenter import parse_strict
from sashite_cell.validator import is_valid


class Coordinate(BaseModel):
    """A valid CELL coordinate such as 'e4' or 'a1A'."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(description="CELL coordinate string (e.g., 'e4', 'h8Hh8')")

    @field_validator("value")
    @classmethod
    def check_cell(cls, value: str) -> str:
        if not is_valid(value):
            raise InvalidCoordinateError(value)
        return value

    @classmethod
    def parse(cls, value: str) -> "Coordinate":
        """Build a Coordinate from its string form."""
        return cls(value=value)

    @classmethod
    def from_indices(cls, indices: Tuple[int, ...]) -> "Coordinate":
        """
        Build a Coordinate from a tuple of 0-based indices.

        Examples:
            >>> Coordinate.from_indices((4, 3))
            Coordinate(value='e4')

        Raises:
            CellError: Same errors as from_indices_strict()
        """
        return cls(value=converter.from_indices_strict(indices))

    @property
    def components(self) -> Tuple[str, ...]:
        return tuple(parse_strict(self.value))

    @property
    def indices(self) -> Tuple[int, ...]:
        return converter.to_indices_strict(self.value)

    @property
    def dimensions(self) -> int:
        return converter.dimensions(self.value)

    @property
    def dimension_types(self) -> Tuple[DimensionType, ...]:
        return tuple(dimension_type(n) for n in range(1, self.dimensions + 1))

    def __str__(self) -> str:
        return self.value
