"""Tests for Board, Piece and square helpers."""

import pytest

from chesslogic.core.board import Board
from chesslogic.core.enums import Color, PieceType
from chesslogic.core.piece import Piece
from chesslogic.core.types import Square, describe_square, parse_square, square_name


class TestSquare:
    def test_parse_square(self) -> None:
        assert parse_square("e4") == Square(4, 4)
        assert parse_square("a8") == Square(0, 0)
        assert parse_square("h1") == Square(7, 7)

    def test_square_name(self) -> None:
        assert square_name((6, 4)) == "e2"
        assert Square(0, 7).name == "h8"

    def test_equals_plain_tuple(self) -> None:
        assert Square(3, 2) == (3, 2)

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_describe_off_board(self) -> None:
        assert describe_square((4, 4)) == "e4"
        assert describe_square((-1, 9)) == "(-1, 9)"


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_str_is_fen_char(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KING)) == "K"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    def test_moved_returns_copy(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        moved = piece.moved()
        assert moved.has_moved
        assert not piece.has_moved

    def test_dict_round_trip(self) -> None:
        data = {"type": "knight", "color": "black", "hasMoved": True}
        piece = Piece.from_dict(data)
        assert piece == Piece(Color.BLACK, PieceType.KNIGHT, True)
        assert piece.to_dict() == data

    def test_from_dict_missing_field(self) -> None:
        with pytest.raises(ValueError, match="type"):
            Piece.from_dict({"color": "white"})

    def test_is_enemy_of(self) -> None:
        white = Piece(Color.WHITE, PieceType.PAWN)
        assert white.is_enemy_of(Piece(Color.BLACK, PieceType.PAWN))
        assert not white.is_enemy_of(Piece(Color.WHITE, PieceType.KING))
        assert not white.is_enemy_of(None)


class TestBoard:
    def test_initial_layout(self, initial_board: Board) -> None:
        assert initial_board[(0, 4)] == Piece(Color.BLACK, PieceType.KING)
        assert initial_board[(7, 3)] == Piece(Color.WHITE, PieceType.QUEEN)
        assert initial_board[(6, 0)] == Piece(Color.WHITE, PieceType.PAWN)
        assert initial_board[(1, 7)] == Piece(Color.BLACK, PieceType.PAWN)
        assert initial_board.is_empty((4, 4))

    def test_initial_piece_counts(self, initial_board: Board) -> None:
        assert len(initial_board.all_pieces(Color.WHITE)) == 16
        assert len(initial_board.all_pieces(Color.BLACK)) == 16
        assert initial_board.count(Color.WHITE, PieceType.PAWN) == 8
        assert initial_board.count(Color.BLACK, PieceType.KNIGHT) == 2

    def test_find_king(self, initial_board: Board) -> None:
        assert initial_board.find_king(Color.WHITE) == Square(7, 4)
        assert initial_board.find_king(Color.BLACK) == Square(0, 4)
        assert Board.empty().find_king(Color.WHITE) is None

    def test_getitem_off_board_raises(self, initial_board: Board) -> None:
        with pytest.raises(IndexError):
            initial_board[(8, 0)]

    def test_get_off_board_is_none(self, initial_board: Board) -> None:
        assert initial_board.get((-1, 3)) is None

    def test_replace_leaves_original(self, initial_board: Board) -> None:
        edited = initial_board.replace({(6, 4): None})
        assert edited.is_empty((6, 4))
        assert initial_board[(6, 4)] is not None

    def test_relocate(self, initial_board: Board) -> None:
        edited = initial_board.relocate((7, 6), (5, 5))
        assert edited[(5, 5)] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert edited.is_empty((7, 6))

    def test_equality_and_hash(self) -> None:
        assert Board.initial() == Board.initial()
        assert hash(Board.initial()) == hash(Board.initial())
        assert Board.initial() != Board.empty()

    def test_wrong_cell_count(self) -> None:
        with pytest.raises(ValueError):
            Board([None] * 10)

    def test_rows_round_trip(self, initial_board: Board) -> None:
        assert Board.from_rows(initial_board.to_rows()) == initial_board

    def test_dicts_round_trip(self, initial_board: Board) -> None:
        rows = initial_board.to_dicts()
        assert rows[0][4] == {"type": "king", "color": "black", "hasMoved": False}
        assert rows[4][4] is None
        assert Board.from_dicts(rows) == initial_board

    def test_from_rows_rejects_bad_shape(self) -> None:
        with pytest.raises(ValueError):
            Board.from_rows([[None] * 8] * 7)

    def test_iter_yields_occupied_squares(self) -> None:
        knight = Piece(Color.WHITE, PieceType.KNIGHT)
        board = Board.from_pieces({(3, 3): knight})
        assert list(board) == [(Square(3, 3), knight)]

    def test_repr_starts_at_rank_eight(self, initial_board: Board) -> None:
        lines = repr(initial_board).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[-1] == "  a b c d e f g h"
