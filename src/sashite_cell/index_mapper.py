"""
Conversion between single CELL components and 0-based indices.

Letter dimensions use the extended alphabet, a bijective base-26 numbering
over a-z where the length of a sequence is part of its value:

    a=0, b=1, ..., z=25, aa=26, ab=27, ..., zz=701, aaa=702, ...

Unlike spreadsheet columns, every length block is offset by the sizes of all
shorter blocks and then rendered as fixed-width base-26 with ``a`` as zero.
Numeric dimensions are 1-based decimal integers.
"""

import string
from decimal import MAX_EMAX, MAX_PREC, Context, Decimal, localcontext

from sashite_cell.dimension import DimensionType
from sashite_cell.errors import safe_repr

ALPHABET_SIZE = 26


def letters_to_index(letters: str) -> int:
    """
    Convert an extended-alphabet letter sequence to a 0-based index.

    Examples:
        >>> letters_to_index("a")
        0
        >>> letters_to_index("z")
        25
        >>> letters_to_index("aa")
        26
        >>> letters_to_index("zz")
        701
        >>> letters_to_index("aaa")
        702

    Args:
        letters: One or more lowercase letters

    Returns:
        0-based index

    Raises:
        ValueError: If letters is empty or contains anything but a-z
    """
    if not letters or not DimensionType.LOWERCASE.matches(letters):
        raise ValueError(f"Expected lowercase letters a-z, got: {letters!r}")

    length = len(letters)

    # Skip every sequence shorter than this one
    base = 0
    block = 1
    for _ in range(length - 1):
        block *= ALPHABET_SIZE
        base += block

    # Position within the block of same-length sequences
    position = 0
    for char in letters:
        position = position * ALPHABET_SIZE + (ord(char) - ord("a"))

    return base + position


def index_to_letters(index: int) -> str:
    """
    Convert a 0-based index to its extended-alphabet letter sequence.

    Examples:
        >>> index_to_letters(0)
        'a'
        >>> index_to_letters(25)
        'z'
        >>> index_to_letters(26)
        'aa'
        >>> index_to_letters(701)
        'zz'
        >>> index_to_letters(702)
        'aaa'

    Args:
        index: Non-negative integer

    Returns:
        Lowercase letter sequence

    Raises:
        ValueError: If index is negative or not an integer
    """
    _check_index(index)

    # Find the shortest length whose block contains the index
    length = 1
    base = 0
    block = ALPHABET_SIZE
    while index >= base + block:
        base += block
        block *= ALPHABET_SIZE
        length += 1

    # Render the offset inside the block as exactly `length` base-26 digits
    offset = index - base
    chars = []
    for _ in range(length):
        offset, digit = divmod(offset, ALPHABET_SIZE)
        chars.append(string.ascii_lowercase[digit])
    return "".join(reversed(chars))


def component_to_index(component: str, dim_type: DimensionType) -> int:
    """
    Convert one component to its 0-based index.

    Examples:
        >>> component_to_index("e", DimensionType.LOWERCASE)
        4
        >>> component_to_index("4", DimensionType.NUMERIC)
        3
        >>> component_to_index("AA", DimensionType.UPPERCASE)
        26

    Raises:
        ValueError: If component does not belong to dim_type
    """
    if not dim_type.matches(component):
        raise ValueError(f"Component {component!r} is not a valid {dim_type.value} component")

    if dim_type is DimensionType.NUMERIC:
        # Numerals are 1-based
        return _numeral_to_int(component) - 1
    if dim_type is DimensionType.UPPERCASE:
        return letters_to_index(component.lower())
    return letters_to_index(component)


def index_to_component(index: int, dim_type: DimensionType) -> str:
    """
    Convert a 0-based index to the component text for a dimension class.

    Examples:
        >>> index_to_component(4, DimensionType.LOWERCASE)
        'e'
        >>> index_to_component(3, DimensionType.NUMERIC)
        '4'
        >>> index_to_component(26, DimensionType.UPPERCASE)
        'AA'

    Raises:
        ValueError: If index is negative or not an integer
    """
    _check_index(index)

    if dim_type is DimensionType.NUMERIC:
        return _int_to_numeral(index + 1)
    if dim_type is DimensionType.UPPERCASE:
        return index_to_letters(index).upper()
    return index_to_letters(index)


def _check_index(index) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise ValueError(f"Index must be a non-negative integer, got: {safe_repr(index)}")


# int <-> str conversion is capped at 4300 digits since Python 3.11; Decimal is not
def _numeral_to_int(numeral: str) -> int:
    with localcontext(Context(prec=MAX_PREC, Emax=MAX_EMAX)):
        return int(Decimal(numeral))


def _int_to_numeral(value: int) -> str:
    with localcontext(Context(prec=MAX_PREC, Emax=MAX_EMAX)):
        return str(Decimal(value))
