"""Error hierarchy shared by the core and game layers.

Every error is a :class:`ValueError` so callers that only care about
"bad input" can keep catching the builtin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.move import Move


class ChessError(ValueError):
    """Base class for all rule-engine errors."""


class InvalidSquareToken(ChessError):
    """A square token was not a file letter followed by a rank digit."""

    def __init__(self, token: str) -> None:
        super().__init__(f"{token!r} is not a valid square coordinate")
        self.token = token


class InvalidPieceLetter(ChessError):
    """A piece letter outside the fixed P/N/B/R/Q/K table."""

    def __init__(self, letter: str) -> None:
        super().__init__(f"{letter!r} is not a valid piece designator")
        self.letter = letter


class InvalidPositionNotation(ChessError):
    """Structural violation anywhere in a six-field FEN string."""

    def __init__(self, fen: str, reason: str) -> None:
        super().__init__(f"Invalid FEN ({reason}): {fen!r}")
        self.fen = fen
        self.reason = reason


class IllegalMove(ChessError):
    """A move was rejected by legality checking."""

    def __init__(self, move: Move, fen: str) -> None:
        super().__init__(f"The move {move} is illegal for the position {fen}")
        self.move = move
        self.fen = fen
