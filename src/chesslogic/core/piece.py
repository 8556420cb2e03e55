"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from chesslogic.core.enums import Color, PieceType

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType
    has_moved: bool = False

    def moved(self) -> Piece:
        """Copy of this piece flagged as having moved."""
        if self.has_moved:
            return self
        return replace(self, has_moved=True)

    def is_enemy_of(self, other: Piece | None) -> bool:
        return other is not None and other.color != self.color

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, *, has_moved: bool = False) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, has_moved)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Piece:
        """Create piece from ``{"type", "color", "hasMoved"}`` mapping."""
        try:
            ptype = PieceType.from_name(str(data["type"]))
            color = Color.from_name(str(data["color"]))
        except KeyError as exc:
            raise ValueError(f"Piece mapping missing field {exc.args[0]!r}") from None
        return cls(color, ptype, bool(data.get("hasMoved", False)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": str(self.piece_type),
            "color": str(self.color),
            "hasMoved": self.has_moved,
        }
