"""Qt bridge exposing the game state machine through signals."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesslogic.core.enums import PieceType
from chesslogic.core.types import Square
from chesslogic.game.settings import GameSettings
from chesslogic.game.state import (
    CancelPromotion,
    CompletePromotion,
    GameEvent,
    GameState,
    LoadPosition,
    MakeMove,
    ResetGame,
    SelectSquare,
    new_game,
    transition,
)

_LOGGER = logging.getLogger(__name__)


class GameSession(QObject):
    """Owns the current :class:`GameState` for a UI running on the Qt loop.

    The session is a thin adapter: every slot builds an event, runs
    :func:`transition` and announces what changed.
    """

    state_changed = pyqtSignal(object)  # GameState
    move_made = pyqtSignal(object)  # MoveRecord
    promotion_requested = pyqtSignal(object, object)  # from Square, to Square
    game_over = pyqtSignal(object)  # GameStatus
    move_rejected = pyqtSignal(object, object)  # from, to as given
    load_failed = pyqtSignal(str)
    promotion_failed = pyqtSignal(str)

    def __init__(
        self,
        settings: GameSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._state = new_game(settings)

    @property
    def state(self) -> GameState:
        return self._state

    # -- Slots --------------------------------------------------------------

    @pyqtSlot(int, int)
    def select_square(self, row: int, col: int) -> None:
        self.dispatch(SelectSquare((row, col)))

    @pyqtSlot(object, object)
    def make_move(self, from_sq: object, to_sq: object) -> None:
        """Attempt ``from_sq -> to_sq`` given as ``(row, col)`` pairs."""
        if not (_is_pair(from_sq) and _is_pair(to_sq)):
            _LOGGER.error(
                "make_move expects (row, col) pairs: %r, %r", from_sq, to_sq
            )
            self.move_rejected.emit(from_sq, to_sq)
            return

        before = self._state
        origin = Square(*from_sq)  # type: ignore[misc]
        target = Square(*to_sq)  # type: ignore[misc]
        if self.dispatch(MakeMove(origin, target)) is before:
            self.move_rejected.emit(origin, target)

    @pyqtSlot(int)
    def complete_promotion(self, piece_type: int) -> None:
        try:
            choice = PieceType(piece_type)
        except ValueError as exc:
            _LOGGER.warning("Invalid promotion choice %r: %s", piece_type, exc)
            self.promotion_failed.emit(str(exc))
            return

        before = self._state
        if self.dispatch(CompletePromotion(choice)) is before:
            reason = (
                f"Cannot promote to {choice!s}"
                if before.pending_promotion is not None
                else "No promotion pending"
            )
            _LOGGER.warning("Promotion rejected: %s", reason)
            self.promotion_failed.emit(reason)

    @pyqtSlot()
    def cancel_promotion(self) -> None:
        self.dispatch(CancelPromotion())

    @pyqtSlot()
    def reset(self) -> None:
        self.dispatch(ResetGame())

    @pyqtSlot(str)
    def load_fen(self, fen: str) -> None:
        try:
            self.dispatch(LoadPosition(fen))
        except ValueError as exc:
            _LOGGER.warning("Could not load FEN %r: %s", fen, exc)
            self.load_failed.emit(str(exc))

    # -- Dispatch -----------------------------------------------------------

    def dispatch(self, event: GameEvent) -> GameState:
        """Run *event* through the state machine and emit the consequences."""
        before = self._state
        after = transition(before, event)
        if after is before:
            return before

        self._state = after
        self.state_changed.emit(after)

        if len(after.history) > len(before.history) and after.last_move is not None:
            self.move_made.emit(after.last_move)
        pending = after.pending_promotion
        if pending is not None and before.pending_promotion is None:
            self.promotion_requested.emit(pending.from_sq, pending.to_sq)
        if after.is_game_over and not before.is_game_over:
            _LOGGER.info("Game over: %s", after.status)
            self.game_over.emit(after.status)
        return after


def _is_pair(value: object) -> bool:
    return (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and all(isinstance(v, int) for v in value)
    )
