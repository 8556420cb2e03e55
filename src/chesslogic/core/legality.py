"""Check detection and legal-move filtering.

Check detection only ever consults :class:`MoveGenerator` (the pseudo-legal
tier); the filtered functions here are never called from inside it.
"""

from __future__ import annotations

from chesslogic.core.board import Board
from chesslogic.core.enums import Color
from chesslogic.core.move_generator import MoveGenerator
from chesslogic.core.types import Square


def is_king_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king a pseudo-legal target of any opposing piece?

    A board without a *color* king is never in check.
    """
    king_sq = board.find_king(color)
    if king_sq is None:
        return False
    return MoveGenerator(board).is_square_attacked(king_sq, color.opposite)


def would_expose_king(
    board: Board, from_sq: tuple[int, int], to_sq: tuple[int, int]
) -> bool:
    """Would relocating the piece on *from_sq* leave its own king in check?"""
    piece = board.get(from_sq)
    if piece is None:
        return False
    return is_king_in_check(board.relocate(from_sq, to_sq), piece.color)


def legal_moves(board: Board, sq: tuple[int, int]) -> list[Square]:
    """Pseudo-legal destinations of *sq* that keep the mover's king safe."""
    return [
        to_sq
        for to_sq in MoveGenerator(board).pseudo_legal_moves(sq)
        if not would_expose_king(board, sq, to_sq)
    ]


def is_legal_move(
    board: Board, from_sq: tuple[int, int], to_sq: tuple[int, int]
) -> bool:
    return tuple(to_sq) in legal_moves(board, from_sq)


def all_legal_moves(board: Board, color: Color) -> list[tuple[Square, Square]]:
    """Every legal ``(from, to)`` pair for *color*, in board order."""
    pairs: list[tuple[Square, Square]] = []
    for sq in board.all_pieces(color):
        pairs.extend((sq, to_sq) for to_sq in legal_moves(board, sq))
    return pairs


def has_legal_move(board: Board, color: Color) -> bool:
    """Short-circuiting variant of ``bool(all_legal_moves(...))``."""
    return any(legal_moves(board, sq) for sq in board.all_pieces(color))


def legal_move_count(board: Board, color: Color) -> int:
    return len(all_legal_moves(board, color))
