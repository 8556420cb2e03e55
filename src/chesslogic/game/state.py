"""Game state machine: immutable state plus a pure transition function.

The engine in :mod:`chesslogic.core` is stateless; this module owns turn
order, square selection, pending promotions and move history. Every event
produces a new :class:`GameState`; the previous one is left untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Union

from chesslogic.core.board import Board
from chesslogic.core.enums import Color, GameStatus, PieceType
from chesslogic.core.executor import execute_move, is_promotion
from chesslogic.core.legality import legal_moves
from chesslogic.core.move import Move
from chesslogic.core.notation.fen import en_passant_target, game_to_fen, parse_fen
from chesslogic.core.notation.san import format_move_for_display, move_to_algebraic
from chesslogic.core.rules import game_status
from chesslogic.core.types import Square, is_on_board
from chesslogic.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    san: str
    move_number: int
    color: Color

    @property
    def display_text(self) -> str:
        return format_move_for_display(self.san, self.move_number, self.color)


@dataclass(frozen=True)
class PendingPromotion:
    """A pawn move waiting for the player's promotion choice."""

    from_sq: Square
    to_sq: Square
    color: Color


@dataclass(frozen=True)
class GameState:
    """Snapshot of a game: board, turn, selection, history and status."""

    board: Board
    side_to_move: Color = Color.WHITE
    status: GameStatus = GameStatus.PLAYING
    selected: Square | None = None
    valid_moves: tuple[Square, ...] = ()
    history: tuple[MoveRecord, ...] = ()
    pending_promotion: PendingPromotion | None = None
    # Half-moves since the last pawn move or capture.
    halfmove_clock: int = 0
    fullmove_number: int = 1
    # En-passant field of the FEN the game was loaded from; replaced by the
    # last move once one is played.
    start_en_passant: str = "-"
    settings: GameSettings = field(default_factory=GameSettings)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    @property
    def last_move(self) -> MoveRecord | None:
        return self.history[-1] if self.history else None

    @property
    def king_in_check(self) -> Square | None:
        """King square to highlight, if the side to move is in check."""
        if self.status in (GameStatus.CHECK, GameStatus.CHECKMATE):
            return self.board.find_king(self.side_to_move)
        return None

    def sans(self) -> list[str]:
        return [record.san for record in self.history]

    def fen(self) -> str:
        if self.history:
            en_passant = en_passant_target(self.history[-1].move)
        else:
            en_passant = self.start_en_passant
        return game_to_fen(
            self.board,
            self.side_to_move,
            self.halfmove_clock,
            self.fullmove_number,
            en_passant,
        )


# ── Events ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SelectSquare:
    square: tuple[int, int]


@dataclass(frozen=True)
class MakeMove:
    from_sq: tuple[int, int]
    to_sq: tuple[int, int]
    promotion: PieceType | None = None


@dataclass(frozen=True)
class CompletePromotion:
    piece_type: PieceType


@dataclass(frozen=True)
class CancelPromotion:
    pass


@dataclass(frozen=True)
class ResetGame:
    pass


@dataclass(frozen=True)
class LoadPosition:
    fen: str


GameEvent = Union[
    SelectSquare, MakeMove, CompletePromotion, CancelPromotion, ResetGame, LoadPosition
]


# ── Construction ─────────────────────────────────────────────────────────────


def new_game(settings: GameSettings | None = None) -> GameState:
    """Fresh game starting from ``settings.start_fen``."""
    settings = settings or GameSettings()
    return from_fen(settings.start_fen, settings)


def from_fen(fen: str, settings: GameSettings | None = None) -> GameState:
    """Game state for an arbitrary FEN (raises ``ValueError`` if malformed)."""
    record = parse_fen(fen)
    return GameState(
        board=record.board,
        side_to_move=record.side_to_move,
        status=game_status(record.board, record.side_to_move),
        halfmove_clock=record.halfmove_clock,
        fullmove_number=record.fullmove_number,
        start_en_passant=record.en_passant,
        settings=settings or GameSettings(),
    )


# ── Transition ───────────────────────────────────────────────────────────────


def _clear_selection(state: GameState) -> GameState:
    if state.selected is None and not state.valid_moves:
        return state
    return replace(state, selected=None, valid_moves=())


def _select(state: GameState, sq: Square) -> GameState:
    return replace(state, selected=sq, valid_moves=tuple(legal_moves(state.board, sq)))


def _on_select(state: GameState, event: SelectSquare) -> GameState:
    if state.is_game_over or state.pending_promotion is not None:
        return state

    row, col = event.square
    if not is_on_board(row, col):
        return _clear_selection(state)

    sq = Square(row, col)
    piece = state.board[sq]
    own_piece = piece is not None and piece.color == state.side_to_move

    if state.selected is None:
        return _select(state, sq) if own_piece else state
    if sq == state.selected:
        return _clear_selection(state)
    if own_piece:
        return _select(state, sq)
    # A legal destination is executed separately through MakeMove.
    return _clear_selection(state)


def _apply(
    state: GameState,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None,
) -> GameState:
    outcome = execute_move(state.board, from_sq, to_sq, promotion)
    if not outcome.ok:
        return state

    mover = state.side_to_move
    after = outcome.board
    san = move_to_algebraic(outcome.move, state.board, after, mover)
    record = MoveRecord(
        move=outcome.move,
        san=san,
        move_number=state.fullmove_number,
        color=mover,
    )
    next_side = mover.opposite
    status = game_status(after, next_side)
    _LOGGER.debug("%s played %s, status %s", mover, san, status)

    return replace(
        state,
        board=after,
        side_to_move=next_side,
        status=status,
        selected=None,
        valid_moves=(),
        history=state.history + (record,),
        halfmove_clock=_next_halfmove_clock(state.halfmove_clock, outcome.move),
        fullmove_number=state.fullmove_number + (1 if mover == Color.BLACK else 0),
        pending_promotion=None,
    )


def _next_halfmove_clock(clock: int, move: Move) -> int:
    if move.piece.piece_type == PieceType.PAWN or move.is_capture:
        return 0
    return clock + 1


def _on_make_move(state: GameState, event: MakeMove) -> GameState:
    if state.is_game_over or state.pending_promotion is not None:
        _LOGGER.debug(
            "Ignoring move %s->%s: game not awaiting a move", event.from_sq, event.to_sq
        )
        return state

    from_sq = Square(*event.from_sq)
    to_sq = Square(*event.to_sq)
    piece = state.board.get(from_sq)
    if piece is None or piece.color != state.side_to_move:
        _LOGGER.debug(
            "Ignoring move %s->%s: not a %s piece", from_sq, to_sq, state.side_to_move
        )
        return state
    if to_sq not in legal_moves(state.board, from_sq):
        _LOGGER.debug("Ignoring illegal move %s->%s", from_sq, to_sq)
        return state

    promotion = event.promotion
    if promotion is None and is_promotion(state.board, from_sq, to_sq):
        if not state.settings.auto_queen:
            pending = PendingPromotion(from_sq, to_sq, state.side_to_move)
            return replace(
                state, pending_promotion=pending, selected=None, valid_moves=()
            )
        promotion = PieceType.QUEEN

    return _apply(state, from_sq, to_sq, promotion)


def _on_complete_promotion(state: GameState, event: CompletePromotion) -> GameState:
    pending = state.pending_promotion
    if pending is None:
        return state
    return _apply(state, pending.from_sq, pending.to_sq, event.piece_type)


def _on_cancel_promotion(state: GameState, event: CancelPromotion) -> GameState:
    if state.pending_promotion is None:
        return state
    return replace(state, pending_promotion=None)


def _on_reset(state: GameState, event: ResetGame) -> GameState:
    return new_game(state.settings)


def _on_load(state: GameState, event: LoadPosition) -> GameState:
    return from_fen(event.fen, state.settings)


_HANDLERS: dict[type, Callable[[GameState, object], GameState]] = {
    SelectSquare: _on_select,  # type: ignore[dict-item]
    MakeMove: _on_make_move,  # type: ignore[dict-item]
    CompletePromotion: _on_complete_promotion,  # type: ignore[dict-item]
    CancelPromotion: _on_cancel_promotion,  # type: ignore[dict-item]
    ResetGame: _on_reset,  # type: ignore[dict-item]
    LoadPosition: _on_load,  # type: ignore[dict-item]
}


def transition(state: GameState, event: GameEvent) -> GameState:
    """Return the state that follows *state* after *event*.

    Events that do not apply (illegal moves, selections during a pending
    promotion, moves after the game ended) return *state* unchanged.
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unknown game event: {event!r}")
    return handler(state, event)
