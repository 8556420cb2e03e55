"""chesslogic: a chess rules engine with an optional Qt game session."""

from chesslogic.core import (
    Board,
    Color,
    GameStatus,
    Move,
    Piece,
    PieceType,
    Square,
    execute_move,
    game_status,
    is_king_in_check,
    legal_moves,
    move_to_algebraic,
    pseudo_legal_moves,
)
from chesslogic.errors import (
    ChessError,
    IllegalMoveError,
    InvalidSourceError,
    MoveError,
    NotationError,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "ChessError",
    "Color",
    "GameStatus",
    "IllegalMoveError",
    "InvalidSourceError",
    "Move",
    "MoveError",
    "NotationError",
    "Piece",
    "PieceType",
    "Square",
    "execute_move",
    "game_status",
    "is_king_in_check",
    "legal_moves",
    "move_to_algebraic",
    "pseudo_legal_moves",
]
