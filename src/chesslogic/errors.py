"""Exception hierarchy for the rules engine."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by :mod:`chesslogic`."""


class MoveError(ChessError, ValueError):
    """A move could not be executed."""


class InvalidSourceError(MoveError):
    """No piece stands on the requested origin square."""


class IllegalMoveError(MoveError):
    """The requested destination is not a legal move for the piece."""


class NotationError(ChessError, ValueError):
    """Algebraic notation could not be parsed or resolved on the board."""
