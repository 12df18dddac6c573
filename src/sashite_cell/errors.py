"""
Error kinds and the result type shared by the CELL conversion functions.

The non-strict API never raises: it returns a CellResult carrying either a
value or one of the CellError subclasses below. The strict API unwraps the
result and raises the carried error.
"""

from typing import Any, Generic, NamedTuple, Optional, TypeVar

T = TypeVar("T")


def safe_repr(value: Any) -> str:
    """repr() that survives ints beyond the int-to-str digit limit."""
    try:
        return repr(value)
    except ValueError:
        return f"<{type(value).__name__} too large to display>"


class CellError(ValueError):
    """Base class for every CELL conversion error."""


class InvalidCoordinateError(CellError):
    """Input is not a string matching the CELL grammar."""

    def __init__(self, coordinate: Any):
        self.coordinate = coordinate
        # Strings are shown verbatim, anything else by its repr
        shown = coordinate if isinstance(coordinate, str) else safe_repr(coordinate)
        super().__init__(f"Invalid CELL coordinate: {shown}")


class EmptyIndexTupleError(CellError):
    """from_indices was called with an empty tuple."""

    def __init__(self):
        super().__init__("Cannot convert empty tuple to CELL coordinate")


class InvalidIndexInputError(CellError):
    """from_indices was called with something other than a tuple of indices."""

    def __init__(self, value: Any, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Expected tuple, got: {safe_repr(value)}")


class GeneratedInvalidError(CellError):
    """Encoding produced a string that fails validation."""

    def __init__(self, coordinate: str):
        self.coordinate = coordinate
        super().__init__(f"Generated invalid CELL coordinate: {coordinate}")


class CellResult(NamedTuple, Generic[T]):
    """Outcome of a non-strict CELL operation: a value or an error, never both."""

    value: Optional[T]
    error: Optional[CellError] = None

    @classmethod
    def success(cls, value: T) -> "CellResult[T]":
        return cls(value, None)

    @classmethod
    def failure(cls, error: CellError) -> "CellResult[T]":
        return cls(None, error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> Optional[str]:
        """Human-readable error message, or None on success."""
        return None if self.error is None else str(self.error)

    def unwrap(self) -> T:
        """
        Return the value, or raise the carried error.

        Raises:
            CellError: The error this result was built with
        """
        if self.error is not None:
            raise self.error
        return self.value
