"""Move value objects.

A move is one of exactly three shapes, see :data:`Move`. Castling carries
no squares of its own; its endpoints follow from the mover's color and the
castling side (:func:`move_from` / :func:`move_to`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessrules.core.enums import PROMOTION_TYPES, CastlingSide, Color, PieceType
from chessrules.core.types import Square

_KING_START_FILE = 4


@dataclass(frozen=True, slots=True)
class NormalMove:
    """Any non-castling, non-promoting move, en passant included."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


@dataclass(frozen=True, slots=True)
class CastlingMove:
    """King and rook move together on the mover's home rank."""

    side: CastlingSide

    def __str__(self) -> str:
        return "O-O" if self.side is CastlingSide.SHORT else "O-O-O"


@dataclass(frozen=True, slots=True)
class PromotionMove:
    """A pawn reaching the far rank and becoming *target*."""

    from_sq: Square
    to_sq: Square
    target: PieceType

    def __post_init__(self) -> None:
        if self.target not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {self.target.name}")

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}={self.target.letter}"


Move: TypeAlias = NormalMove | CastlingMove | PromotionMove

SHORT_CASTLE = CastlingMove(CastlingSide.SHORT)
LONG_CASTLE = CastlingMove(CastlingSide.LONG)


def move_from(move: Move, color: Color) -> Square:
    """Origin square of *move* when played by *color*."""
    if isinstance(move, (NormalMove, PromotionMove)):
        return move.from_sq
    if isinstance(move, CastlingMove):
        return Square(color.home_rank, _KING_START_FILE)
    raise TypeError(f"Unknown move type: {type(move).__name__}")


def move_to(move: Move, color: Color) -> Square:
    """Destination square of *move* (the king's, for castling)."""
    if isinstance(move, (NormalMove, PromotionMove)):
        return move.to_sq
    if isinstance(move, CastlingMove):
        return Square(color.home_rank, move.side.king_file)
    raise TypeError(f"Unknown move type: {type(move).__name__}")
