"""Move execution: capture, relocation and pawn promotion."""

from __future__ import annotations

import logging

from chesslogic.core.board import Board
from chesslogic.core.enums import PROMOTION_TYPES, PieceType
from chesslogic.core.legality import legal_moves
from chesslogic.core.move import (
    IllegalMove,
    InvalidSource,
    Move,
    MoveApplied,
    MoveOutcome,
    MoveRejection,
)
from chesslogic.core.piece import Piece
from chesslogic.core.types import Square

_LOGGER = logging.getLogger(__name__)


def is_capture(board: Board, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> bool:
    """Would moving *from_sq* -> *to_sq* take an opposing piece?"""
    mover = board.get(from_sq)
    return mover is not None and mover.is_enemy_of(board.get(to_sq))


def is_promotion(
    board: Board, from_sq: tuple[int, int], to_sq: tuple[int, int]
) -> bool:
    """Would moving *from_sq* -> *to_sq* bring a pawn to its last rank?"""
    mover = board.get(from_sq)
    if mover is None or mover.piece_type != PieceType.PAWN:
        return False
    return to_sq[0] == mover.color.promotion_row


def execute_move(
    board: Board,
    from_sq: tuple[int, int],
    to_sq: tuple[int, int],
    promotion: PieceType | None = None,
) -> MoveOutcome:
    """Apply a legal move and return the resulting board and move record.

    The input *board* is never modified. Rejections come back as
    :class:`InvalidSource` or :class:`IllegalMove` values; call
    ``unwrap()`` on the outcome to turn them into exceptions instead.

    A pawn reaching its last rank without a *promotion* choice becomes a
    provisional queen and the result carries ``needs_promotion=True`` so the
    caller can ask for the real choice and execute the move again.
    """
    origin = Square(*from_sq)
    target = Square(*to_sq)

    mover = board.get(origin)
    if mover is None:
        rejected: MoveRejection = InvalidSource(origin, target)
    elif target not in legal_moves(board, origin):
        rejected = IllegalMove(origin, target)
    elif promotion is not None and promotion not in PROMOTION_TYPES:
        rejected = IllegalMove(origin, target, f"cannot promote to {promotion}")
    else:
        return _apply(board, origin, target, mover, promotion)

    _LOGGER.warning("Move rejected: %s", rejected.reason)
    return rejected


def _apply(
    board: Board,
    origin: Square,
    target: Square,
    mover: Piece,
    promotion: PieceType | None,
) -> MoveApplied:
    captured = board[target]
    placed = mover.moved()
    promoted: Piece | None = None
    needs_promotion = False

    if mover.piece_type == PieceType.PAWN and target.row == mover.color.promotion_row:
        if promotion is None:
            promoted = Piece(mover.color, PieceType.QUEEN, True)
            needs_promotion = True
        else:
            promoted = Piece(mover.color, promotion, True)
        placed = promoted

    new_board = board.replace({origin: None, target: placed})
    move = Move(
        from_sq=origin,
        to_sq=target,
        piece=mover,
        captured_piece=captured,
        promoted_piece=promoted,
    )
    return MoveApplied(new_board, move, needs_promotion)
