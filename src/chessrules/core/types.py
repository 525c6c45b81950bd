"""Square and SquareDelta value types plus coordinate helpers.

Board layout: ``Square(rank, file)`` with both components in 0-7, where
rank 0 is the first rank and file 0 is the a-file::

    a1 = Square(0, 0), h1 = Square(0, 7), a8 = Square(7, 0), h8 = Square(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.errors import InvalidSquareToken

_FILES = "abcdefgh"
_RANKS = "12345678"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, slots=True)
class SquareDelta:
    """Relative offset between two squares; unbounded in magnitude."""

    d_rank: int
    d_file: int

    def __add__(self, other: SquareDelta) -> SquareDelta:
        if not isinstance(other, SquareDelta):
            return NotImplemented
        return SquareDelta(self.d_rank + other.d_rank, self.d_file + other.d_file)

    def __abs__(self) -> SquareDelta:
        return SquareDelta(abs(self.d_rank), abs(self.d_file))

    @property
    def is_diagonal(self) -> bool:
        return abs(self.d_rank) == abs(self.d_file)

    def as_unit(self) -> SquareDelta | None:
        """Single-step direction vector, or ``None`` for non-line deltas.

        Only purely vertical, purely horizontal and exactly diagonal deltas
        reduce to a unit step; ``(2, 1)`` does not.
        """
        if self.is_diagonal or self.d_rank == 0 or self.d_file == 0:
            return SquareDelta(_sign(self.d_rank), _sign(self.d_file))
        return None


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """A single board cell addressed by ``(rank, file)``."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not (0 <= self.rank < 8 and 0 <= self.file < 8):
            raise ValueError(f"Square out of range: ({self.rank}, {self.file})")

    def checked_add(self, delta: SquareDelta) -> Square | None:
        """``self + delta``, or ``None`` if the result leaves the board."""
        rank = self.rank + delta.d_rank
        file = self.file + delta.d_file
        if 0 <= rank < 8 and 0 <= file < 8:
            return Square(rank, file)
        return None

    def __sub__(self, other: Square) -> SquareDelta:
        if not isinstance(other, Square):
            return NotImplemented
        return SquareDelta(self.rank - other.rank, self.file - other.file)

    @property
    def name(self) -> str:
        return _FILES[self.file] + _RANKS[self.rank]

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, token: str) -> Square:
        return parse_square(token)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(0, 0)`` -> ``'a1'``."""
    return sq.name


def parse_square(token: str) -> Square:
    """Parse a two-character square token, e.g. ``'e4'``."""
    if len(token) != 2 or token[0] not in _FILES or token[1] not in _RANKS:
        raise InvalidSquareToken(token)
    return Square(_RANKS.index(token[1]), _FILES.index(token[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(rank, file) for rank in range(8) for file in range(8)
)

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
