"""Test the pydantic Coordinate value object."""

import pytest
from pydantic import ValidationError

from sashite_cell.coordinate import Coordinate
from sashite_cell.dimension import DimensionType
from sashite_cell.errors import EmptyIndexTupleError


class TestCoordinate:
    """Test Coordinate construction and derived properties."""

    def test_valid_coordinate(self):
        coord = Coordinate(value="h8Hh8")
        assert coord.components == ("h", "8", "H", "h", "8")
        assert coord.indices == (7, 7, 7, 7, 7)
        assert coord.dimensions == 5
        assert str(coord) == "h8Hh8"

    def test_dimension_types(self):
        assert Coordinate.parse("a1Aa").dimension_types == (
            DimensionType.LOWERCASE,
            DimensionType.NUMERIC,
            DimensionType.UPPERCASE,
            DimensionType.LOWERCASE,
        )

    @pytest.mark.parametrize("bad", ["", "a0", "1a", "a1\n"])
    def test_invalid_coordinate_raises_validation_error(self, bad):
        with pytest.raises(ValidationError, match="Invalid CELL coordinate"):
            Coordinate(value=bad)

    def test_non_string_value_rejected(self):
        with pytest.raises(ValidationError):
            Coordinate(value=42)

    def test_from_indices(self):
        assert Coordinate.from_indices((26, 0, 26)) == Coordinate(value="aa1AA")

    def test_from_indices_propagates_strict_error(self):
        with pytest.raises(EmptyIndexTupleError):
            Coordinate.from_indices(())

    def test_frozen_and_hashable(self):
        coord = Coordinate(value="e4")
        with pytest.raises(ValidationError):
            coord.value = "e5"
        assert {coord, Coordinate(value="e4")} == {coord}

    def test_serialization(self):
        coord = Coordinate(value="a1A")
        assert coord.model_dump() == {"value": "a1A"}
        assert Coordinate.model_validate_json('{"value": "a1A"}') == coord
