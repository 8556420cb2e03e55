"""Pseudo-legal move generation and attack detection.

This is the check-agnostic tier: nothing in this module knows about king
safety, so :mod:`chesslogic.core.legality` can build check detection on top
of it without recursing into itself.
"""

from __future__ import annotations

from chesslogic.core.board import Board
from chesslogic.core.enums import Color, PieceType
from chesslogic.core.piece import Piece
from chesslogic.core.types import ALL_SQUARES, Square, is_on_board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves: list[Square] = []
        for dr, dc in offsets:
            ar = sq.row + dr
            ac = sq.col + dc
            if is_on_board(ar, ac):
                moves.append(Square(ar, ac))
        targets[sq] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ar = sq.row + dr
            ac = sq.col + dc
            ray: list[Square] = []
            while is_on_board(ar, ac):
                ray.append(Square(ar, ac))
                ar += dr
                ac += dc
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Generates pseudo-legal destinations on a given :class:`Board`.

    Pseudo-legal moves follow each piece's movement pattern but ignore
    whether the mover's own king is left in check. No castling and no
    en passant.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, sq: tuple[int, int]) -> list[Square]:
        """Destinations for the piece on *sq* (empty or off-board -> [])."""
        piece = self._board.get(sq)
        if piece is None:
            return []
        origin = Square(*sq)
        moves: list[Square] = []

        pt = piece.piece_type
        if pt == PieceType.PAWN:
            self._gen_pawn(origin, piece, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_stepper(piece, _KNIGHT_TARGETS[origin], moves)
        elif pt == PieceType.BISHOP:
            self._gen_sliding(piece, _BISHOP_RAYS[origin], moves)
        elif pt == PieceType.ROOK:
            self._gen_sliding(piece, _ROOK_RAYS[origin], moves)
        elif pt == PieceType.QUEEN:
            self._gen_sliding(piece, _QUEEN_RAYS[origin], moves)
        elif pt == PieceType.KING:
            self._gen_stepper(piece, _KING_TARGETS[origin], moves)
        return moves

    def pseudo_legal_moves_for(self, color: Color) -> list[tuple[Square, Square]]:
        """Every ``(from, to)`` pair available to *color*'s pieces."""
        pairs: list[tuple[Square, Square]] = []
        for sq in self._board.all_pieces(color):
            pairs.extend((sq, to_sq) for to_sq in self.pseudo_legal_moves(sq))
        return pairs

    # -- Attack detection ---------------------------------------------------

    def attacked_squares(self, by_color: Color) -> set[Square]:
        """Squares any *by_color* piece could move to pseudo-legally."""
        attacked: set[Square] = set()
        for sq in self._board.all_pieces(by_color):
            attacked.update(self.pseudo_legal_moves(sq))
        return attacked

    def is_square_attacked(self, sq: tuple[int, int], by_color: Color) -> bool:
        """Is *sq* a pseudo-legal destination of any *by_color* piece?"""
        for from_sq in self._board.all_pieces(by_color):
            if sq in self.pseudo_legal_moves(from_sq):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        step = piece.color.forward

        one_step = sq.offset(step, 0)
        if is_on_board(*one_step) and board[one_step] is None:
            moves.append(one_step)
            if sq.row == _PAWN_START_ROW[piece.color]:
                two_step = sq.offset(2 * step, 0)
                if board[two_step] is None:
                    moves.append(two_step)

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if not is_on_board(*cap_sq):
                continue
            if piece.is_enemy_of(board[cap_sq]):
                moves.append(cap_sq)

    def _gen_stepper(
        self,
        piece: Piece,
        targets: tuple[Square, ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != piece.color:
                    moves.append(to_sq)
                break


def pseudo_legal_moves(board: Board, sq: tuple[int, int]) -> list[Square]:
    """Functional form of :meth:`MoveGenerator.pseudo_legal_moves`."""
    return MoveGenerator(board).pseudo_legal_moves(sq)
