"""Notation package: FEN / SAN parsing and serialization."""

from chesslogic.core.notation.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    castling_field,
    en_passant_target,
    game_to_fen,
    is_valid_fen,
    parse_fen,
)
from chesslogic.core.notation.models import (
    FenRecord,
    ReplayResult,
    ResolvedSan,
    SanComponents,
)
from chesslogic.core.notation.san import (
    format_move_for_display,
    is_valid_algebraic,
    move_kind,
    move_to_algebraic,
    parse_algebraic,
    parse_san,
    piece_letter,
    piece_type_from_letter,
    play_san,
    replay_san,
    split_move_list,
    validate_san,
)

__all__ = [
    "STARTING_FEN",
    "FenRecord",
    "ReplayResult",
    "ResolvedSan",
    "SanComponents",
    "board_from_fen",
    "board_to_fen",
    "castling_field",
    "en_passant_target",
    "game_to_fen",
    "is_valid_fen",
    "parse_fen",
    "format_move_for_display",
    "is_valid_algebraic",
    "move_kind",
    "move_to_algebraic",
    "parse_algebraic",
    "parse_san",
    "piece_letter",
    "piece_type_from_letter",
    "play_san",
    "replay_san",
    "split_move_list",
    "validate_san",
]
