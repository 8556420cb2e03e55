"""Move record and move-execution results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, NoReturn, Union

from chesslogic.core.enums import PieceType
from chesslogic.core.piece import Piece
from chesslogic.core.types import Square, describe_square, square_name
from chesslogic.errors import IllegalMoveError, InvalidSourceError

if TYPE_CHECKING:
    from chesslogic.core.board import Board

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of an executed move.

    ``piece`` is the mover as it stood before the move.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured_piece: Piece | None = None
    promoted_piece: Piece | None = None

    def __post_init__(self) -> None:
        # Accept plain (row, col) tuples from callers.
        object.__setattr__(self, "from_sq", Square(*self.from_sq))
        object.__setattr__(self, "to_sq", Square(*self.to_sq))

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    @property
    def is_promotion(self) -> bool:
        return self.promoted_piece is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promoted_piece is not None:
            base += _PROMO_CHARS.get(self.promoted_piece.piece_type, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)


# ── Execution results ───────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveApplied:
    """Successful move execution."""

    board: Board
    move: Move
    needs_promotion: bool = False

    ok: Literal[True] = True

    @property
    def captured_piece(self) -> Piece | None:
        return self.move.captured_piece

    @property
    def promoted_piece(self) -> Piece | None:
        return self.move.promoted_piece

    def unwrap(self) -> MoveApplied:
        return self


@dataclass(frozen=True, slots=True)
class InvalidSource:
    """Rejected: there is no piece on the origin square."""

    from_sq: Square
    to_sq: Square

    ok: Literal[False] = False

    @property
    def reason(self) -> str:
        return f"No piece at source square {describe_square(self.from_sq)}"

    def unwrap(self) -> NoReturn:
        raise InvalidSourceError(self.reason)


@dataclass(frozen=True, slots=True)
class IllegalMove:
    """Rejected: the destination is not among the legal moves."""

    from_sq: Square
    to_sq: Square
    detail: str = ""

    ok: Literal[False] = False

    @property
    def reason(self) -> str:
        text = (
            f"Illegal move {describe_square(self.from_sq)}"
            f"-{describe_square(self.to_sq)}"
        )
        return f"{text}: {self.detail}" if self.detail else text

    def unwrap(self) -> NoReturn:
        raise IllegalMoveError(self.reason)


MoveOutcome = Union[MoveApplied, InvalidSource, IllegalMove]
MoveRejection = Union[InvalidSource, IllegalMove]
