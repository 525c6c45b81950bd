"""Abstract interfaces and configuration for the game layer.

Collaborators (UI, network glue) depend on :class:`IGame`, not on the
concrete history-keeping :class:`~chessrules.game.game.Game`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameStatus
from chessrules.core.notation import STARTING_FEN
from chessrules.core.rules import DEFAULT_DRAW_HALFMOVE_LIMIT

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.position import Position


# ── Configuration ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GameOptions:
    """Settings a game is created with.

    Args:
        start_fen: Position the history starts from.
        draw_halfmove_limit: Half-move clock value that ends the game in a draw.
    """

    start_fen: str = STARTING_FEN
    draw_halfmove_limit: int = DEFAULT_DRAW_HALFMOVE_LIMIT

    def __post_init__(self) -> None:
        if self.draw_halfmove_limit < 1:
            raise ValueError(
                f"draw_halfmove_limit must be positive, got {self.draw_halfmove_limit}"
            )


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGame(ABC):
    """Interface for a game history with a status state machine."""

    @property
    @abstractmethod
    def status(self) -> GameStatus: ...

    @property
    @abstractmethod
    def current_position(self) -> Position: ...

    @property
    @abstractmethod
    def next_player(self) -> Color: ...

    @abstractmethod
    def make_move(self, move: Move) -> Position | None:
        """Apply *move* if legal; return the new position or ``None``."""

    @abstractmethod
    def undo_move(self) -> tuple[Position, Move] | None:
        """Drop the latest position/move pair, ``None`` if there is none."""

