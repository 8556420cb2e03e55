"""Tests for move execution and its tagged results."""

import copy
import logging

import pytest

from chesslogic.core.board import Board
from chesslogic.core.enums import Color, PieceType
from chesslogic.core.executor import execute_move, is_capture, is_promotion
from chesslogic.core.move import IllegalMove, InvalidSource, MoveApplied
from chesslogic.core.piece import Piece
from chesslogic.core.types import parse_square
from chesslogic.errors import ChessError, IllegalMoveError, InvalidSourceError

W = Color.WHITE
B = Color.BLACK


def _sq(name: str) -> tuple[int, int]:
    return parse_square(name)


def _promotion_board() -> Board:
    return Board.from_pieces(
        {
            (1, 4): Piece(W, PieceType.PAWN, True),
            (7, 7): Piece(W, PieceType.KING, True),
            (2, 0): Piece(B, PieceType.KING, True),
            (0, 3): Piece(B, PieceType.ROOK, True),
        }
    )


class TestExecuteMove:
    def test_pawn_double_step(self, initial_board: Board) -> None:
        result = execute_move(initial_board, (6, 4), (4, 4))
        assert isinstance(result, MoveApplied)
        assert result.ok
        assert result.board[(4, 4)] == Piece(W, PieceType.PAWN, has_moved=True)
        assert result.board[(6, 4)] is None
        assert not result.needs_promotion

    def test_move_record(self, initial_board: Board) -> None:
        result = execute_move(initial_board, _sq("g1"), _sq("f3")).unwrap()
        assert result.move.from_sq == _sq("g1")
        assert result.move.to_sq == _sq("f3")
        assert result.move.piece == Piece(W, PieceType.KNIGHT)
        assert result.captured_piece is None
        assert result.promoted_piece is None
        assert result.move.uci == "g1f3"

    def test_input_board_not_mutated(self, initial_board: Board) -> None:
        snapshot = copy.deepcopy(initial_board.to_dicts())
        execute_move(initial_board, (6, 4), (4, 4))
        assert initial_board.to_dicts() == snapshot
        assert initial_board == Board.initial()

    def test_capture(self) -> None:
        board = Board.from_pieces(
            {
                _sq("e4"): Piece(W, PieceType.PAWN, True),
                _sq("d5"): Piece(B, PieceType.KNIGHT, True),
            }
        )
        assert is_capture(board, _sq("e4"), _sq("d5"))
        result = execute_move(board, _sq("e4"), _sq("d5")).unwrap()
        assert result.captured_piece == Piece(B, PieceType.KNIGHT, True)
        assert result.move.is_capture
        assert result.board.count(B, PieceType.KNIGHT) == 0

    def test_is_capture_on_empty_target(self, initial_board: Board) -> None:
        assert not is_capture(initial_board, (6, 4), (4, 4))
        assert not is_capture(initial_board, (4, 4), (3, 4))


class TestRejections:
    def test_empty_source(self, initial_board: Board) -> None:
        result = execute_move(initial_board, (4, 4), (3, 4))
        assert isinstance(result, InvalidSource)
        assert not result.ok
        assert "e4" in result.reason

    def test_empty_source_unwrap_raises(self, initial_board: Board) -> None:
        with pytest.raises(InvalidSourceError, match="No piece at source square"):
            execute_move(initial_board, (4, 4), (3, 4)).unwrap()

    def test_off_board_source(self, initial_board: Board) -> None:
        result = execute_move(initial_board, (8, 8), (4, 4))
        assert isinstance(result, InvalidSource)
        assert "(8, 8)" in result.reason

    def test_illegal_destination(self, initial_board: Board) -> None:
        result = execute_move(initial_board, (6, 4), (3, 4))
        assert isinstance(result, IllegalMove)
        assert result.reason == "Illegal move e2-e5"

    def test_illegal_unwrap_raises(self, initial_board: Board) -> None:
        with pytest.raises(IllegalMoveError):
            execute_move(initial_board, (7, 0), (5, 0)).unwrap()

    def test_errors_share_base_class(self, initial_board: Board) -> None:
        with pytest.raises(ChessError):
            execute_move(initial_board, (4, 4), (3, 4)).unwrap()
        with pytest.raises(ValueError):
            execute_move(initial_board, (6, 4), (2, 4)).unwrap()

    def test_pinned_piece_rejected(self) -> None:
        board = Board.from_pieces(
            {
                _sq("e1"): Piece(W, PieceType.KING, True),
                _sq("e2"): Piece(W, PieceType.BISHOP, True),
                _sq("e8"): Piece(B, PieceType.ROOK, True),
            }
        )
        assert isinstance(execute_move(board, _sq("e2"), _sq("d3")), IllegalMove)

    def test_rejection_is_logged(
        self, initial_board: Board, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="chesslogic.core.executor"):
            execute_move(initial_board, (4, 4), (3, 4))
        assert "Move rejected" in caplog.text


class TestPromotion:
    def test_default_queen_needs_choice(self) -> None:
        result = execute_move(_promotion_board(), (1, 4), (0, 4))
        assert isinstance(result, MoveApplied)
        assert result.needs_promotion
        assert result.promoted_piece is not None
        assert result.promoted_piece.piece_type == PieceType.QUEEN
        assert result.board[(0, 4)] == Piece(W, PieceType.QUEEN, True)

    def test_is_promotion(self) -> None:
        board = _promotion_board()
        assert is_promotion(board, (1, 4), (0, 4))
        assert not is_promotion(board, (7, 7), (6, 7))

    @pytest.mark.parametrize(
        "choice",
        [PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT],
    )
    def test_explicit_choice(self, choice: PieceType) -> None:
        result = execute_move(_promotion_board(), (1, 4), (0, 4), choice).unwrap()
        assert not result.needs_promotion
        assert result.board[(0, 4)] == Piece(W, choice, True)
        assert result.move.piece.piece_type == PieceType.PAWN

    def test_capture_promotion(self) -> None:
        result = execute_move(
            _promotion_board(), (1, 4), (0, 3), PieceType.KNIGHT
        ).unwrap()
        assert result.captured_piece == Piece(B, PieceType.ROOK, True)
        assert result.board[(0, 3)] == Piece(W, PieceType.KNIGHT, True)
        assert str(result.move) == "e7d8n"

    @pytest.mark.parametrize("choice", [PieceType.KING, PieceType.PAWN])
    def test_invalid_choice_rejected(self, choice: PieceType) -> None:
        result = execute_move(_promotion_board(), (1, 4), (0, 4), choice)
        assert isinstance(result, IllegalMove)
        assert "cannot promote" in result.reason

    def test_black_promotes_on_first_rank(self) -> None:
        board = Board.from_pieces({(6, 2): Piece(B, PieceType.PAWN, True)})
        result = execute_move(board, (6, 2), (7, 2), PieceType.ROOK).unwrap()
        assert result.board[(7, 2)] == Piece(B, PieceType.ROOK, True)
