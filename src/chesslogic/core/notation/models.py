"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesslogic.core.board import Board
from chesslogic.core.enums import Color, PieceType
from chesslogic.core.types import Square


@dataclass(frozen=True, slots=True)
class SanComponents:
    """Structural pieces of a SAN token, before it is resolved on a board."""

    piece_type: PieceType
    destination: Square | None
    from_file: str | None = None
    from_rank: str | None = None
    is_capture: bool = False
    promotion: PieceType | None = None
    is_check: bool = False
    is_checkmate: bool = False
    castle: str | None = None  # "kingside" / "queenside"


@dataclass(frozen=True, slots=True)
class ResolvedSan:
    """A SAN token matched to a legal move on a concrete board."""

    san: str
    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    check_suffix: str = ""  # "", "+" or "#" as written


@dataclass(slots=True)
class ReplayResult:
    """Outcome of replaying a SAN move list from a starting board."""

    success: bool
    board: Board
    side_to_move: Color
    moves: list[ResolvedSan] = field(default_factory=list)
    error: str = ""


@dataclass(frozen=True, slots=True)
class FenRecord:
    """The six fields of a FEN string."""

    board: Board
    side_to_move: Color
    castling: str
    en_passant: str
    halfmove_clock: int
    fullmove_number: int
