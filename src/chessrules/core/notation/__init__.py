"""Notation package: FEN and move text parsing and serialization."""

from chessrules.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.notation.moves import move_to_text, parse_move_text

__all__ = [
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "move_to_text",
    "parse_move_text",
]
