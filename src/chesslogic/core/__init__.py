"""Core domain layer: pure chess logic with no external dependencies.

Quick start::

    from chesslogic.core import Board, Color, execute_move, game_status, legal_moves

    board = Board.initial()
    legal_moves(board, (6, 4))          # e2 pawn -> [(5, 4), (4, 4)]
    result = execute_move(board, (6, 4), (4, 4)).unwrap()
    game_status(result.board, Color.BLACK)
"""

from chesslogic.core.board import Board
from chesslogic.core.enums import PROMOTION_TYPES, Color, GameStatus, PieceType
from chesslogic.core.executor import execute_move, is_capture, is_promotion
from chesslogic.core.legality import (
    all_legal_moves,
    has_legal_move,
    is_king_in_check,
    is_legal_move,
    legal_move_count,
    legal_moves,
    would_expose_king,
)
from chesslogic.core.move import (
    IllegalMove,
    InvalidSource,
    Move,
    MoveApplied,
    MoveOutcome,
    MoveRejection,
)
from chesslogic.core.move_generator import MoveGenerator, pseudo_legal_moves
from chesslogic.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    game_to_fen,
    move_to_algebraic,
    parse_fen,
    parse_san,
)
from chesslogic.core.piece import Piece
from chesslogic.core.rules import Rules, game_status
from chesslogic.core.types import Square, is_on_board, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    "PROMOTION_TYPES",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Move results
    "IllegalMove",
    "InvalidSource",
    "MoveApplied",
    "MoveOutcome",
    "MoveRejection",
    # Engine functions
    "all_legal_moves",
    "execute_move",
    "game_status",
    "has_legal_move",
    "is_capture",
    "is_king_in_check",
    "is_legal_move",
    "is_promotion",
    "legal_move_count",
    "legal_moves",
    "pseudo_legal_moves",
    "would_expose_king",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "game_to_fen",
    "move_to_algebraic",
    "parse_fen",
    "parse_san",
]
