"""Square value type and coordinate helpers.

Board layout (row = rank, col = file, White at the bottom):
    row 0 is White's back rank (a1..h1), row 7 is Black's (a8..h8).
    col 0 is the a-file, col 7 the h-file.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


class InvalidSquare(ValueError):
    """Raised for coordinates outside the 8x8 board.

    Always a programming error: callers are expected to hand the core
    valid board coordinates.
    """


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """A board cell identified by ``(row, col)``, both in ``[0, 7]``."""

    row: int
    col: int

    def __post_init__(self) -> None:
        for value in (self.row, self.col):
            if type(value) is not int or not 0 <= value < BOARD_SIZE:
                raise InvalidSquare(f"Square out of range: ({self.row!r}, {self.col!r})")

    def offset(self, d_row: int, d_col: int) -> Square | None:
        """Square shifted by ``(d_row, d_col)``, or ``None`` when off the board."""
        row, col = self.row + d_row, self.col + d_col
        if is_valid_coord(row, col):
            return Square(row, col)
        return None

    def __str__(self) -> str:
        return square_name(self)


def ensure_square(sq: object) -> Square:
    """Return *sq* if it is a Square, else raise :class:`InvalidSquare`."""
    if not isinstance(sq, Square):
        raise InvalidSquare(f"Expected a Square, got {sq!r}")
    return sq


def is_valid_coord(row: int, col: int) -> bool:
    """Check whether ``(row, col)`` lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(0, 0)`` -> ``'a1'``."""
    return _FILES[sq.col] + _RANKS[sq.row]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e2'`` -> ``Square(1, 4)``."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise InvalidSquare(f"Invalid square name: {name!r}")
    return Square(_RANKS.index(name[1]), _FILES.index(name[0]))


def all_squares() -> Iterator[Square]:
    """All 64 squares in row-major order (a1, b1, ..., h8)."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Square(row, col)
