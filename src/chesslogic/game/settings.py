"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chesslogic.core.notation.fen import STARTING_FEN


@dataclass(frozen=True)
class GameSettings:
    """User-configurable game options."""

    # Position a new game (and ResetGame) starts from.
    start_fen: str = STARTING_FEN

    # Promote straight to a queen instead of parking the move until the
    # player picks a piece.
    auto_queen: bool = False
