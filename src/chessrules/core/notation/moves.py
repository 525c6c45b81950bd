"""Move text form: ``e2e4``, ``O-O``, ``O-O-O``, ``e7e8=Q``."""

from __future__ import annotations

from chessrules.core.enums import PROMOTION_TYPES
from chessrules.core.move import (
    LONG_CASTLE,
    SHORT_CASTLE,
    Move,
    NormalMove,
    PromotionMove,
)
from chessrules.core.piece import piece_type_from_letter
from chessrules.core.types import parse_square
from chessrules.errors import ChessError

_SHORT_TOKENS = frozenset({"O-O", "0-0"})
_LONG_TOKENS = frozenset({"O-O-O", "0-0-0"})


def move_to_text(move: Move) -> str:
    """Display form of *move*."""
    return str(move)


def parse_move_text(text: str) -> Move:
    """Parse the display form back into a move.

    Castling is accepted as ``O-O``/``0-0`` in any letter case; the
    promotion letter may be lowercase.
    """
    token = text.strip()
    upper = token.upper()
    if upper in _SHORT_TOKENS:
        return SHORT_CASTLE
    if upper in _LONG_TOKENS:
        return LONG_CASTLE

    if len(token) == 4:
        return NormalMove(parse_square(token[:2]), parse_square(token[2:]))
    if len(token) == 6 and token[4] == "=":
        target = piece_type_from_letter(token[5].upper())
        if target not in PROMOTION_TYPES:
            raise ChessError(f"Cannot promote to {target.name.lower()}: {text!r}")
        return PromotionMove(parse_square(token[:2]), parse_square(token[2:4]), target)
    raise ChessError(f"Unrecognised move text: {text!r}")
