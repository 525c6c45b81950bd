"""GameController — text-in / text-out surface for UI and network glue.

Everything that crosses this boundary is a string (square tokens, move
text, FEN) so collaborators never need the core types. Bad input is turned
into a rejected :class:`Outcome` with a readable reason instead of an
exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessrules.core.enums import GameStatus
from chessrules.core.move import CastlingMove, Move, NormalMove, move_from, move_to
from chessrules.core.notation import move_to_text, parse_move_text
from chessrules.core.types import parse_square
from chessrules.errors import ChessError, IllegalMove
from chessrules.game.game import Game
from chessrules.game.interfaces import GameOptions

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of a request that may be rejected."""

    accepted: bool
    fen: str
    reason: str = ""
    move: str = ""


class GameController:
    """Owns one :class:`Game` and answers collaborator queries about it."""

    __slots__ = ("_game", "_options")

    def __init__(self, options: GameOptions | None = None) -> None:
        self._options = options if options is not None else GameOptions()
        self._game = Game(self._options)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def status(self) -> GameStatus:
        return self._game.status

    @property
    def fen(self) -> str:
        return self._game.current_position.fen()

    @property
    def history_length(self) -> int:
        return self._game.history_length

    # ── Setup ────────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Restart from the configured starting position."""
        self._game = Game(self._options)

    def load_fen(self, fen: str) -> Outcome:
        """Replace the game with one starting from *fen*."""
        try:
            game = Game.from_fen(fen, self._options.draw_halfmove_limit)
        except ChessError as exc:
            _LOGGER.warning("Rejected position: %s", exc)
            return Outcome(False, self.fen, str(exc))
        self._game = game
        return Outcome(True, self.fen)

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_destinations(self, square: str) -> list[str]:
        """Squares the piece on *square* may move to (king square for castling)."""
        try:
            sq = parse_square(square)
        except ChessError as exc:
            _LOGGER.warning("Legal-move query for bad square: %s", exc)
            return []
        position = self._game.current_position
        targets = {move_to(m, position.turn) for m in position.legal_moves(sq)}
        return [str(t) for t in sorted(targets)]

    def legal_moves(self) -> list[str]:
        """All legal moves for the side to move, in move text form."""
        return sorted(move_to_text(m) for m in self._game.legal_moves())

    # ── Commands ─────────────────────────────────────────────────────────

    def submit(self, move_text: str) -> Outcome:
        """Play the move written as *move_text* (``e2e4``, ``O-O``, ``e7e8=Q``)."""
        try:
            move = self._resolve(parse_move_text(move_text))
        except ChessError as exc:
            _LOGGER.warning("Rejected move text %r: %s", move_text, exc)
            return Outcome(False, self.fen, str(exc), move_text)

        if self._game.is_over:
            reason = f"The game is over ({self._game.status})"
            _LOGGER.warning("Rejected %s: %s", move, reason)
            return Outcome(False, self.fen, reason, move_to_text(move))

        try:
            position = self._game.play(move)
        except IllegalMove as exc:
            _LOGGER.warning("%s", exc)
            return Outcome(False, self.fen, str(exc), move_to_text(move))
        return Outcome(True, position.fen(), "", move_to_text(move))

    def undo(self) -> bool:
        """Take back the latest move; ``False`` when there is nothing to undo."""
        return self._game.undo_move() is not None

    # ── Internal helpers ─────────────────────────────────────────────────

    def _resolve(self, move: Move) -> Move:
        """Map a king move written as squares (``e1g1``) onto castling."""
        if not isinstance(move, NormalMove):
            return move
        position = self._game.current_position
        for candidate in position.legal_moves(move.from_sq):
            if (
                isinstance(candidate, CastlingMove)
                and move_from(candidate, position.turn) == move.from_sq
                and move_to(candidate, position.turn) == move.to_sq
            ):
                return candidate
        return move
