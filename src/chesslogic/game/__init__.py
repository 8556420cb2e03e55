"""Game management layer: immutable state machine and settings.

Quick start::

    from chesslogic.game import MakeMove, new_game, transition

    state = new_game()
    state = transition(state, MakeMove((6, 4), (4, 4)))
    state.sans()                        # ['e4']

The Qt adapter lives in :mod:`chesslogic.game.qt_bridge` and is imported
explicitly so PyQt6 stays optional.
"""

from chesslogic.game.settings import GameSettings
from chesslogic.game.state import (
    CancelPromotion,
    CompletePromotion,
    GameEvent,
    GameState,
    LoadPosition,
    MakeMove,
    MoveRecord,
    PendingPromotion,
    ResetGame,
    SelectSquare,
    from_fen,
    new_game,
    transition,
)

__all__ = [
    # State
    "GameSettings",
    "GameState",
    "MoveRecord",
    "PendingPromotion",
    # Events
    "CancelPromotion",
    "CompletePromotion",
    "GameEvent",
    "LoadPosition",
    "MakeMove",
    "ResetGame",
    "SelectSquare",
    # Functions
    "from_fen",
    "new_game",
    "transition",
]
