"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_row(self) -> int:
        """Row of this side's back rank (row 0 is rank 8)."""
        return 7 if self == Color.WHITE else 0

    @property
    def promotion_row(self) -> int:
        """Row a pawn of this side promotes on."""
        return 0 if self == Color.WHITE else 7

    @property
    def forward(self) -> int:
        """Row delta of a pawn step."""
        return -1 if self == Color.WHITE else 1

    @classmethod
    def from_name(cls, name: str) -> Color:
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Invalid color: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @classmethod
    def from_name(cls, name: str) -> PieceType:
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece type: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class GameStatus(IntEnum):
    """Classification of a position for the side to move."""

    PLAYING = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)

    def __str__(self) -> str:
        return self.name.lower()
