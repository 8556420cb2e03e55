"""High-level chess rules: check, checkmate and stalemate classification."""

from __future__ import annotations

from chesslogic.core.board import Board
from chesslogic.core.enums import Color, GameStatus
from chesslogic.core.legality import has_legal_move, is_king_in_check
from chesslogic.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return is_king_in_check(board, color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not is_king_in_check(board, color):
            return False
        return not has_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if is_king_in_check(board, color):
            return False
        return not has_legal_move(board, color)

    @staticmethod
    def king_in_check_square(board: Board, color: Color) -> Square | None:
        """Square of *color*'s king when it is in check, else None."""
        if is_king_in_check(board, color):
            return board.find_king(color)
        return None

    @staticmethod
    def game_status(board: Board, color_to_move: Color) -> GameStatus:
        """Classify the position from *color_to_move*'s point of view."""
        in_check = is_king_in_check(board, color_to_move)
        can_move = has_legal_move(board, color_to_move)

        if not can_move:
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        if in_check:
            return GameStatus.CHECK
        return GameStatus.PLAYING


def game_status(board: Board, color_to_move: Color) -> GameStatus:
    """Functional form of :meth:`Rules.game_status`."""
    return Rules.game_status(board, color_to_move)
