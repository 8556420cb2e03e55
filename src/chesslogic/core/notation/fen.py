"""FEN parsing and serialization."""

from __future__ import annotations

from chesslogic.core.board import Board
from chesslogic.core.enums import Color, PieceType
from chesslogic.core.move import Move
from chesslogic.core.notation.models import FenRecord
from chesslogic.core.piece import Piece
from chesslogic.core.types import BOARD_SIZE, FILES, RANKS, Square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_KING_HOME_COL = 4
# castling letter -> rook home column
_ROOK_HOME_COLS: tuple[tuple[str, int], ...] = (("K", 7), ("Q", 0))


def _is_home_square(piece: Piece, sq: Square) -> bool:
    """Whether *piece* still stands where the initial setup puts it."""
    pt = piece.piece_type
    if pt == PieceType.PAWN:
        return sq.row == _PAWN_START_ROW[piece.color]
    if sq.row != piece.color.home_row:
        return False
    if pt == PieceType.KING:
        return sq.col == _KING_HOME_COL
    if pt == PieceType.ROOK:
        return sq.col in (0, 7)
    return True


# ── Board placement ─────────────────────────────────────────────────────────


def board_to_fen(board: Board) -> str:
    """Piece-placement field for *board* (row 0 first, i.e. rank 8)."""
    fen_rows: list[str] = []
    for row in board.to_rows():
        text = ""
        empty = 0
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        fen_rows.append(text)
    return "/".join(fen_rows)


def board_from_fen(placement: str) -> Board:
    """Parse a FEN piece-placement field into a :class:`Board`.

    FEN carries no move history, so pieces off their initial squares are
    marked ``has_moved``; pieces on them are not.
    """
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

    changes: dict[tuple[int, int], Piece | None] = {}
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                sq = Square(row, col)
                piece = Piece.from_char(ch)
                if not _is_home_square(piece, sq):
                    piece = piece.moved()
                changes[sq] = piece
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return Board.from_pieces(changes)


def castling_field(board: Board) -> str:
    """Castling availability derived from unmoved kings and rooks.

    Informational only: the engine does not generate castling moves.
    """
    text = ""
    for color in (Color.WHITE, Color.BLACK):
        row = color.home_row
        king = board[(row, _KING_HOME_COL)]
        if (
            king is None
            or king.color != color
            or king.piece_type != PieceType.KING
            or king.has_moved
        ):
            continue
        for letter, col in _ROOK_HOME_COLS:
            rook = board[(row, col)]
            if (
                rook is not None
                and rook.color == color
                and rook.piece_type == PieceType.ROOK
                and not rook.has_moved
            ):
                text += letter if color == Color.WHITE else letter.lower()
    return text or "-"


# ── Full FEN ────────────────────────────────────────────────────────────────


def en_passant_target(last_move: Move | None) -> str:
    """Square a pawn double step skipped over, or ``-``.

    Informational only: the engine does not generate en-passant captures.
    """
    if last_move is None or last_move.piece.piece_type != PieceType.PAWN:
        return "-"
    if abs(last_move.to_sq.row - last_move.from_sq.row) != 2:
        return "-"
    row = (last_move.from_sq.row + last_move.to_sq.row) // 2
    return square_name((row, last_move.to_sq.col))


def game_to_fen(
    board: Board,
    side_to_move: Color,
    halfmove_clock: int = 0,
    fullmove_number: int = 1,
    en_passant: str = "-",
) -> str:
    """Six-field FEN for *board* with the given move counters."""
    side = "w" if side_to_move == Color.WHITE else "b"
    return (
        f"{board_to_fen(board)} {side} {castling_field(board)} {en_passant} "
        f"{halfmove_clock} {fullmove_number}"
    )


def parse_fen(fen: str) -> FenRecord:
    """Parse and validate a full six-field FEN string."""
    parts = fen.split()
    if len(parts) != 6:
        raise ValueError(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    board = board_from_fen(placement)

    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    if castling_part != "-" and (
        not castling_part or any(ch not in "KQkq" for ch in castling_part)
    ):
        raise ValueError(f"Invalid FEN castling field: {castling_part!r}")

    if ep_part != "-" and not (
        len(ep_part) == 2 and ep_part[0] in FILES and ep_part[1] in RANKS
    ):
        raise ValueError(f"Invalid FEN en-passant field: {ep_part!r}")

    try:
        halfmove = int(half_part)
        fullmove = int(full_part)
    except ValueError:
        raise ValueError(f"Invalid FEN move counters: {fen!r}") from None
    if halfmove < 0 or fullmove < 1:
        raise ValueError(f"Invalid FEN move counters: {fen!r}")

    return FenRecord(
        board=board,
        side_to_move=side,
        castling=castling_part,
        en_passant=ep_part,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )


def is_valid_fen(fen: str) -> bool:
    try:
        parse_fen(fen)
    except ValueError:
        return False
    return True
