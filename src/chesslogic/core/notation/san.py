"""SAN (Standard Algebraic Notation) conversion and parsing."""

from __future__ import annotations

import re
from collections.abc import Iterable

from chesslogic.core.board import Board
from chesslogic.core.enums import Color, PieceType
from chesslogic.core.executor import execute_move, is_promotion
from chesslogic.core.legality import is_king_in_check, legal_moves
from chesslogic.core.move import Move, MoveApplied
from chesslogic.core.notation.models import ReplayResult, ResolvedSan, SanComponents
from chesslogic.core.rules import Rules
from chesslogic.core.types import Square, file_of, parse_square, rank_of, square_name
from chesslogic.errors import ChessError, NotationError

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}

_SAN_RE = re.compile(
    r"^(?P<piece>[KQRBN])?(?P<file>[a-h])?(?P<rank>[1-8])?(?P<capture>x)?"
    r"(?P<dest>[a-h][1-8])(?:=(?P<promo>[QRBN]))?$"
)
_MOVE_NUMBER_RE = re.compile(r"\d+\.(?:\.\.)?")
_KINGSIDE = ("O-O", "0-0")
_QUEENSIDE = ("O-O-O", "0-0-0")


def piece_letter(piece_type: PieceType) -> str:
    """SAN letter for *piece_type* (empty for pawns)."""
    return _SAN_PIECE.get(piece_type, "")


def piece_type_from_letter(letter: str) -> PieceType:
    """Inverse of :func:`piece_letter`; unknown or empty letters mean pawn."""
    return _SAN_PIECE_REV.get(letter, PieceType.PAWN)


# ── Encoding ────────────────────────────────────────────────────────────────


def _could_reach(piece_type: PieceType, from_sq: Square, to_sq: Square) -> bool:
    """Movement-pattern test that ignores blockers and pins."""
    d_row = abs(to_sq.row - from_sq.row)
    d_col = abs(to_sq.col - from_sq.col)
    straight = from_sq.row == to_sq.row or from_sq.col == to_sq.col
    diagonal = d_row == d_col

    if piece_type == PieceType.ROOK:
        return straight
    if piece_type == PieceType.BISHOP:
        return diagonal
    if piece_type == PieceType.QUEEN:
        return straight or diagonal
    if piece_type == PieceType.KNIGHT:
        return (d_row, d_col) in ((1, 2), (2, 1))
    return False


def _disambiguation(board: Board, move: Move) -> str:
    piece = move.piece
    if piece.piece_type in (PieceType.PAWN, PieceType.KING):
        return ""

    rivals = [
        sq
        for sq in board.pieces(piece.color, piece.piece_type)
        if sq != move.from_sq and _could_reach(piece.piece_type, sq, move.to_sq)
    ]
    if not rivals:
        return ""

    same_file = any(sq.col == move.from_sq.col for sq in rivals)
    same_rank = any(sq.row == move.from_sq.row for sq in rivals)

    text = ""
    if same_rank or not same_file:
        text += file_of(move.from_sq)
    if same_file:
        text += rank_of(move.from_sq)
    return text


def move_to_algebraic(
    move: Move,
    board_before: Board,
    board_after: Board,
    mover_color: Color,
) -> str:
    """Render an executed *move* in SAN.

    *board_before* is used for disambiguation and *board_after* for the
    check (``+``) / checkmate (``#``) suffix.
    """
    piece = move.piece
    if (
        piece.piece_type == PieceType.KING
        and abs(move.to_sq.col - move.from_sq.col) == 2
    ):
        return "O-O" if move.to_sq.col > move.from_sq.col else "O-O-O"

    san = ""
    if piece.piece_type == PieceType.PAWN:
        if move.is_capture:
            san += file_of(move.from_sq)
    else:
        san += piece_letter(piece.piece_type)
        san += _disambiguation(board_before, move)

    if move.is_capture:
        san += "x"

    san += square_name(move.to_sq)

    if move.promoted_piece is not None:
        san += "=" + piece_letter(move.promoted_piece.piece_type)

    return san + _check_suffix(board_after, mover_color.opposite)


def _check_suffix(board_after: Board, opponent: Color) -> str:
    if Rules.is_checkmate(board_after, opponent):
        return "#"
    if is_king_in_check(board_after, opponent):
        return "+"
    return ""


def format_move_for_display(san: str, move_number: int, color: Color) -> str:
    """Move-history label, e.g. ``"1. e4"`` or ``"1... e5"``."""
    if color == Color.WHITE:
        return f"{move_number}. {san}"
    return f"{move_number}... {san}"


# ── Parsing ─────────────────────────────────────────────────────────────────


def parse_algebraic(text: str) -> SanComponents | None:
    """Split a SAN token into its parts; None if it is not well-formed."""
    if not text:
        return None

    token = text.strip().rstrip("!?")
    is_checkmate = token.endswith("#")
    is_check = token.endswith("+")
    clean = token.rstrip("+#")

    if clean in _QUEENSIDE or clean in _KINGSIDE:
        return SanComponents(
            piece_type=PieceType.KING,
            destination=None,
            is_check=is_check,
            is_checkmate=is_checkmate,
            castle="queenside" if clean in _QUEENSIDE else "kingside",
        )

    match = _SAN_RE.match(clean)
    if match is None:
        return None

    promo = match.group("promo")
    return SanComponents(
        piece_type=piece_type_from_letter(match.group("piece") or ""),
        destination=parse_square(match.group("dest")),
        from_file=match.group("file"),
        from_rank=match.group("rank"),
        is_capture=match.group("capture") is not None,
        promotion=piece_type_from_letter(promo) if promo else None,
        is_check=is_check,
        is_checkmate=is_checkmate,
    )


def is_valid_algebraic(text: str) -> bool:
    return parse_algebraic(text) is not None


def move_kind(text: str) -> str:
    """Coarse label for a SAN token used by move-history displays."""
    if not text:
        return "unknown"
    if "O-O" in text:
        return "castling"
    if "x" in text:
        return "capture"
    if "=" in text:
        return "promotion"
    if "#" in text:
        return "checkmate"
    if "+" in text:
        return "check"
    return "normal"


def parse_san(board: Board, san: str, color: Color) -> ResolvedSan:
    """Resolve *san* to a legal move of *color* on *board*.

    Raises :class:`NotationError` for malformed, illegal, ambiguous or
    inconsistent (wrong capture or promotion marker) tokens. The ``+``/``#``
    suffix is recorded but only checked by :func:`play_san`.
    """
    parts = parse_algebraic(san)
    if parts is None:
        raise NotationError(f"Malformed SAN: {san!r}")
    if parts.castle is not None:
        raise NotationError(f"Castling is not supported: {san!r}")

    to_sq = parts.destination
    assert to_sq is not None

    candidates = [
        sq
        for sq in board.pieces(color, parts.piece_type)
        if (parts.from_file is None or file_of(sq) == parts.from_file)
        and (parts.from_rank is None or rank_of(sq) == parts.from_rank)
        and to_sq in legal_moves(board, sq)
    ]

    if not candidates:
        raise NotationError(f"Illegal move: {san}")
    if len(candidates) > 1:
        names = ", ".join(square_name(sq) for sq in candidates)
        raise NotationError(f"Ambiguous move: {san} ({names})")

    from_sq = candidates[0]
    target = board[to_sq]
    if parts.is_capture != (target is not None):
        raise NotationError(f"Capture marker mismatch in move: {san}")
    if parts.promotion is not None and not is_promotion(board, from_sq, to_sq):
        raise NotationError(f"Promotion marker on non-promotion move: {san}")

    if parts.is_checkmate:
        suffix = "#"
    elif parts.is_check:
        suffix = "+"
    else:
        suffix = ""
    return ResolvedSan(
        san=san.strip(),
        from_sq=from_sq,
        to_sq=to_sq,
        promotion=parts.promotion,
        check_suffix=suffix,
    )


def play_san(
    board: Board, san: str, color: Color
) -> tuple[ResolvedSan, MoveApplied]:
    """Resolve and execute *san*, checking it against the resulting position.

    On top of :func:`parse_san` this rejects a missing promotion piece and a
    ``+``/``#`` suffix (or its absence) that does not match the position
    after the move.
    """
    resolved = parse_san(board, san, color)
    applied = execute_move(
        board, resolved.from_sq, resolved.to_sq, resolved.promotion
    ).unwrap()
    if applied.needs_promotion:
        raise NotationError(f"Missing promotion piece in move: {san}")
    if _check_suffix(applied.board, color.opposite) != resolved.check_suffix:
        raise NotationError(f"Check marker mismatch in move: {san}")
    return resolved, applied


def validate_san(board: Board, san: str, color: Color) -> bool:
    """Whether *san* is a legal, consistently annotated move on *board*."""
    try:
        play_san(board, san, color)
    except ChessError:
        return False
    return True


def split_move_list(text: str) -> list[str]:
    """Tokenise movetext like ``"1. e4 e5 2. Nf3"``, dropping move numbers."""
    if not text:
        return []
    return _MOVE_NUMBER_RE.sub(" ", text).split()


def replay_san(
    sans: Iterable[str],
    board: Board,
    color: Color = Color.WHITE,
) -> ReplayResult:
    """Apply *sans* in order, stopping at the first bad token."""
    result = ReplayResult(success=True, board=board, side_to_move=color)

    for index, san in enumerate(sans, start=1):
        try:
            resolved, applied = play_san(result.board, san, result.side_to_move)
        except ChessError as exc:
            result.success = False
            result.error = f"Invalid move at position {index}: {exc}"
            return result

        result.moves.append(resolved)
        result.board = applied.board
        result.side_to_move = result.side_to_move.opposite

    return result
