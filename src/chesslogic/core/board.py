"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from chesslogic.core.enums import Color, PieceType
from chesslogic.core.piece import Piece
from chesslogic.core.types import ALL_SQUARES, BOARD_SIZE, FILES, Square, is_on_board

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


class Board:
    """Immutable 64-square board.

    Every editing operation returns a new :class:`Board`; an instance can be
    shared freely between callers and threads.
    """

    __slots__ = ("_cells", "_king_squares")

    def __init__(self, cells: Iterable[Piece | None] | None = None) -> None:
        squares = tuple(cells) if cells is not None else (None,) * _CELL_COUNT
        if len(squares) != _CELL_COUNT:
            raise ValueError(f"Board needs {_CELL_COUNT} cells, got {len(squares)}")
        self._cells: tuple[Piece | None, ...] = squares
        # [color] -> first king square found (None if king missing).
        kings: list[Square | None] = [None, None]
        for sq, piece in zip(ALL_SQUARES, squares):
            if piece is not None and piece.piece_type == PieceType.KING:
                if kings[int(piece.color)] is None:
                    kings[int(piece.color)] = sq
        self._king_squares: tuple[Square | None, ...] = tuple(kings)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        row, col = sq
        if not is_on_board(row, col):
            raise IndexError(f"Square off the board: {sq!r}")
        return self._cells[_index(row, col)]

    def get(self, sq: tuple[int, int]) -> Piece | None:
        """Piece on *sq*, or None when empty or off the board."""
        row, col = sq
        if not is_on_board(row, col):
            return None
        return self._cells[_index(row, col)]

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self[sq] is None

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in row-major order."""
        for sq, piece in zip(ALL_SQUARES, self._cells):
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self
            if piece.color == color and piece.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None when it is missing."""
        return self._king_squares[int(color)]

    def count(self, color: Color, piece_type: PieceType) -> int:
        return len(self.pieces(color, piece_type))

    # -- Copy-on-write editing ---------------------------------------------

    def replace(self, changes: Mapping[tuple[int, int], Piece | None]) -> Board:
        """New board with *changes* applied (``None`` clears a square)."""
        cells = list(self._cells)
        for sq, piece in changes.items():
            row, col = sq
            if not is_on_board(row, col):
                raise IndexError(f"Square off the board: {sq!r}")
            cells[_index(row, col)] = piece
        return Board(cells)

    def relocate(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> Board:
        """Raw placement: move whatever stands on *from_sq* onto *to_sq*."""
        return self.replace({to_sq: self[from_sq], from_sq: None})

    # -- Factories / conversion ---------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        changes: dict[tuple[int, int], Piece | None] = {}
        for col, pt in enumerate(_BACK_RANK):
            changes[(0, col)] = Piece(Color.BLACK, pt)
            changes[(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            changes[(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            changes[(7, col)] = Piece(Color.WHITE, pt)
        return cls().replace(changes)

    @classmethod
    def from_pieces(cls, placement: Mapping[tuple[int, int], Piece]) -> Board:
        """Board holding only the pieces in *placement*."""
        return cls().replace(placement)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece | None]]) -> Board:
        """Build from a row-major 8x8 grid (row 0 = rank 8)."""
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError("Board rows must form an 8x8 grid")
        return cls(piece for row in rows for piece in row)

    def to_rows(self) -> list[list[Piece | None]]:
        return [
            list(self._cells[r * BOARD_SIZE : (r + 1) * BOARD_SIZE])
            for r in range(BOARD_SIZE)
        ]

    @classmethod
    def from_dicts(cls, rows: Sequence[Sequence[dict[str, Any] | None]]) -> Board:
        """Build from the external ``{"type", "color", "hasMoved"}`` grid."""
        return cls.from_rows(
            [[Piece.from_dict(cell) if cell else None for cell in row] for row in rows]
        )

    def to_dicts(self) -> list[list[dict[str, Any] | None]]:
        return [
            [piece.to_dict() if piece else None for piece in row]
            for row in self.to_rows()
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._cells[_index(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  " + " ".join(FILES))
        return "\n".join(rows)
