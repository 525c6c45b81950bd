"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import GameStatus
from chessrules.core.move_generator import all_legal_moves

if TYPE_CHECKING:
    from chessrules.core.position import Position

DEFAULT_DRAW_HALFMOVE_LIMIT = 50


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return position.in_check()

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not position.in_check():
            return False
        return not all_legal_moves(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if position.in_check():
            return False
        return not all_legal_moves(position)

    @staticmethod
    def is_halfmove_draw(
        position: Position, limit: int = DEFAULT_DRAW_HALFMOVE_LIMIT
    ) -> bool:
        """The half-move clock has reached *limit*."""
        return position.halfmove_clock >= limit

    @staticmethod
    def status(
        position: Position, draw_halfmove_limit: int = DEFAULT_DRAW_HALFMOVE_LIMIT
    ) -> GameStatus:
        """Status of the side to move in *position*.

        Mate and stalemate take precedence over the half-move draw, which
        in turn overrides a plain check.
        """
        in_check = position.in_check()
        if not all_legal_moves(position):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        if Rules.is_halfmove_draw(position, draw_halfmove_limit):
            return GameStatus.DRAW
        if in_check:
            return GameStatus.CHECK
        return GameStatus.NORMAL
