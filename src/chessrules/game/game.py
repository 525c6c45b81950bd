"""Game — ordered history of positions and moves plus the status machine.

The game is the only component that mutates shared state: it appends to
(and pops from) its history lists in place. Callers sharing one Game
between threads must serialise ``make_move`` / ``undo_move`` themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import Color, GameStatus
from chessrules.core.move import CastlingMove, Move
from chessrules.core.notation import position_from_fen
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.errors import IllegalMove
from chessrules.game.interfaces import GameOptions, IGame

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Position], None]  # move, position after
StatusCallback = Callable[[GameStatus], None]
UndoCallback = Callable[[Move, Position], None]  # undone move, position now current


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)


# ── Game ─────────────────────────────────────────────────────────────────────


class Game(IGame):
    """A chess game from its first position to the current one.

    ``boards`` always holds one more entry than ``moves``: the starting
    position followed by the position after each accepted move.
    """

    __slots__ = ("_options", "_boards", "_moves", "_status", "events")

    def __init__(self, options: GameOptions | None = None) -> None:
        self._options = options if options is not None else GameOptions()
        start = position_from_fen(self._options.start_fen)
        self._boards: list[Position] = [start]
        self._moves: list[Move] = []
        self._status = Rules.status(start, self._options.draw_halfmove_limit)
        self.events = GameEvents()

    @classmethod
    def from_fen(cls, fen: str, draw_halfmove_limit: int | None = None) -> Game:
        """Start a game from an arbitrary position."""
        if draw_halfmove_limit is None:
            options = GameOptions(start_fen=fen)
        else:
            options = GameOptions(start_fen=fen, draw_halfmove_limit=draw_halfmove_limit)
        game = cls(options)
        _LOGGER.info("Loaded game from FEN %s (status %s)", fen, game.status)
        return game

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def options(self) -> GameOptions:
        return self._options

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def boards(self) -> tuple[Position, ...]:
        return tuple(self._boards)

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def current_position(self) -> Position:
        return self._boards[-1]

    @property
    def next_player(self) -> Color:
        return self.current_position.turn

    @property
    def history_length(self) -> int:
        """Number of moves that can be undone."""
        return len(self._moves)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return self.current_position.all_legal_moves()

    # ── Move application ─────────────────────────────────────────────────

    def make_move(self, move: Move) -> Position | None:
        """Apply *move* if legal and return the new current position.

        Returns ``None`` (history untouched) for an illegal move and for any
        move once the game has ended.
        """
        if self._status.is_terminal:
            _LOGGER.debug("Rejected %s: game already ended (%s)", move, self._status)
            return None

        current = self.current_position
        if isinstance(move, CastlingMove) and not self._castling_offered(current, move):
            _LOGGER.debug("Rejected %s: castling not available", move)
            return None

        next_position = current.perform_move(move)
        if next_position is None:
            _LOGGER.debug("Rejected illegal move %s in %s", move, current)
            return None

        self._boards.append(next_position)
        self._moves.append(move)
        _LOGGER.debug("Played %s -> %s", move, next_position)

        for cb in self.events.on_move:
            cb(move, next_position)
        self._refresh_status()
        return next_position

    def play(self, move: Move) -> Position:
        """Like :meth:`make_move` but raises :class:`IllegalMove` on rejection."""
        next_position = self.make_move(move)
        if next_position is None:
            raise IllegalMove(move, self.current_position.fen())
        return next_position

    def undo_move(self) -> tuple[Position, Move] | None:
        """Drop the latest position/move pair and return it.

        The status is recomputed for the position that becomes current, so
        undoing out of a mate or draw reopens the game.
        """
        if not self._moves:
            _LOGGER.debug("Nothing to undo")
            return None

        move = self._moves.pop()
        board = self._boards.pop()
        _LOGGER.debug("Undid %s", move)

        for cb in self.events.on_undo:
            cb(move, self.current_position)
        self._refresh_status()
        return board, move

    # ── Internal helpers ─────────────────────────────────────────────────

    @staticmethod
    def _castling_offered(position: Position, move: CastlingMove) -> bool:
        king_sq = position.king(position.turn)
        return king_sq is not None and move in position.legal_moves(king_sq)

    def _refresh_status(self) -> None:
        status = Rules.status(self.current_position, self._options.draw_halfmove_limit)
        if status == self._status:
            return
        _LOGGER.debug("Status %s -> %s", self._status, status)
        self._status = status
        for cb in self.events.on_status_changed:
            cb(status)
