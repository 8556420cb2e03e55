"""Tests for check detection and legal-move filtering."""

import pytest

from chesslogic.core.board import Board
from chesslogic.core.enums import Color, PieceType
from chesslogic.core.legality import (
    all_legal_moves,
    has_legal_move,
    is_king_in_check,
    is_legal_move,
    legal_move_count,
    legal_moves,
    would_expose_king,
)
from chesslogic.core.move_generator import pseudo_legal_moves
from chesslogic.core.notation import board_from_fen
from chesslogic.core.piece import Piece
from chesslogic.core.types import ALL_SQUARES, parse_square

W = Color.WHITE
B = Color.BLACK

# White bishop on e2 pinned against the king by a rook on e8.
_PINNED = board_from_fen("4r1k1/8/8/8/8/8/4B3/4K3")
# Fool's mate final position.
_FOOLS_MATE = board_from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")


def _sq(name: str) -> tuple[int, int]:
    return parse_square(name)


class TestCheckDetection:
    def test_initial_not_in_check(self, initial_board: Board) -> None:
        assert not is_king_in_check(initial_board, W)
        assert not is_king_in_check(initial_board, B)

    def test_fools_mate_in_check(self) -> None:
        assert is_king_in_check(_FOOLS_MATE, W)
        assert not is_king_in_check(_FOOLS_MATE, B)

    def test_missing_king_is_never_in_check(self) -> None:
        board = Board.from_pieces({_sq("e4"): Piece(B, PieceType.QUEEN)})
        assert not is_king_in_check(board, W)

    def test_pawn_gives_check_diagonally(self) -> None:
        board = Board.from_pieces(
            {
                _sq("e4"): Piece(W, PieceType.KING, True),
                _sq("d5"): Piece(B, PieceType.PAWN, True),
            }
        )
        assert is_king_in_check(board, W)

    def test_pawn_does_not_check_straight_ahead(self) -> None:
        board = Board.from_pieces(
            {
                _sq("e4"): Piece(W, PieceType.KING, True),
                _sq("e5"): Piece(B, PieceType.PAWN, True),
            }
        )
        assert not is_king_in_check(board, W)


class TestLegalMoves:
    @pytest.mark.parametrize("board", [Board.initial(), _PINNED, _FOOLS_MATE])
    def test_legal_subset_of_pseudo_legal(self, board: Board) -> None:
        for sq in ALL_SQUARES:
            assert set(legal_moves(board, sq)) <= set(pseudo_legal_moves(board, sq))

    def test_initial_move_count(self, initial_board: Board) -> None:
        assert legal_move_count(initial_board, W) == 20
        assert legal_move_count(initial_board, B) == 20

    def test_pinned_piece_cannot_leave_file(self) -> None:
        assert legal_moves(_PINNED, _sq("e2")) == []
        assert would_expose_king(_PINNED, _sq("e2"), _sq("d3"))

    def test_king_cannot_step_into_attack(self) -> None:
        names = {sq.name for sq in legal_moves(_PINNED, _sq("e1"))}
        assert names == {"d1", "f1", "d2", "f2"}

    def test_king_cannot_capture_defended_piece(self) -> None:
        board = Board.from_pieces(
            {
                _sq("e1"): Piece(W, PieceType.KING, True),
                _sq("e2"): Piece(B, PieceType.QUEEN, True),
                _sq("e3"): Piece(B, PieceType.ROOK, True),
            }
        )
        assert _sq("e2") not in legal_moves(board, _sq("e1"))

    def test_must_resolve_check(self) -> None:
        board = Board.from_pieces(
            {
                _sq("e1"): Piece(W, PieceType.KING, True),
                _sq("a2"): Piece(W, PieceType.ROOK, True),
                _sq("e8"): Piece(B, PieceType.ROOK, True),
            }
        )
        # The only rook move that helps is blocking on e2.
        assert legal_moves(board, _sq("a2")) == [_sq("e2")]

    def test_would_expose_king_on_empty_source(self, initial_board: Board) -> None:
        assert not would_expose_king(initial_board, _sq("e4"), _sq("e5"))

    def test_is_legal_move(self, initial_board: Board) -> None:
        assert is_legal_move(initial_board, (6, 4), (4, 4))
        assert not is_legal_move(initial_board, (6, 4), (3, 4))

    def test_all_legal_moves_pairs(self) -> None:
        pairs = all_legal_moves(_PINNED, W)
        assert all(from_sq == _sq("e1") for from_sq, _ in pairs)
        assert len(pairs) == 4

    def test_has_legal_move(self, initial_board: Board) -> None:
        assert has_legal_move(initial_board, W)
        assert not has_legal_move(_FOOLS_MATE, W)
