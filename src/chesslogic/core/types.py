"""Square type and coordinate helpers.

Board layout (row-major, white at the bottom):
    row 0 = rank 8 (black's back rank), row 7 = rank 1
    col 0 = file 'a', col 7 = file 'h'

So ``a8 == Square(0, 0)``, ``h1 == Square(7, 7)`` and ``e4 == Square(4, 4)``.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8
FILES = "abcdefgh"
RANKS = "12345678"


class Square(NamedTuple):
    """A board coordinate. Compares equal to a plain ``(row, col)`` tuple."""

    row: int
    col: int

    @property
    def name(self) -> str:
        return square_name(self)

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)


def is_on_board(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def file_of(sq: tuple[int, int]) -> str:
    """File letter of *sq*, e.g. ``(4, 4)`` -> ``'e'``."""
    return FILES[sq[1]]


def rank_of(sq: tuple[int, int]) -> str:
    """Rank digit of *sq*, e.g. ``(4, 4)`` -> ``'4'``."""
    return str(BOARD_SIZE - sq[0])


def square_name(sq: tuple[int, int]) -> str:
    """Human-readable name, e.g. ``(0, 0)`` -> ``'a8'``, ``(7, 7)`` -> ``'h1'``."""
    return file_of(sq) + rank_of(sq)


def describe_square(sq: tuple[int, int]) -> str:
    """Square name when on the board, raw coordinates otherwise."""
    if is_on_board(*sq):
        return square_name(sq)
    return f"({sq[0]}, {sq[1]})"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` -> ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
