"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessrules.core import Position, STARTING_FEN, position_from_fen

    pos = position_from_fen(STARTING_FEN)
    for move in pos.legal_moves("g1"):
        print(move)
"""

from chessrules.core.enums import (
    CastlingRights,
    CastlingSide,
    Color,
    GameStatus,
    PieceType,
)
from chessrules.core.move import (
    LONG_CASTLE,
    SHORT_CASTLE,
    CastlingMove,
    Move,
    NormalMove,
    PromotionMove,
    move_from,
    move_to,
)
from chessrules.core.move_generator import (
    MoveGenerator,
    all_legal_moves,
    enumerate_moves,
    is_attacked,
)
from chessrules.core.notation import (
    STARTING_FEN,
    move_to_text,
    parse_move_text,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import Square, SquareDelta, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "CastlingSide",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "SquareDelta",
    "parse_square",
    "square_name",
    # Moves
    "CastlingMove",
    "LONG_CASTLE",
    "Move",
    "NormalMove",
    "PromotionMove",
    "SHORT_CASTLE",
    "move_from",
    "move_to",
    # Domain objects
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "all_legal_moves",
    "enumerate_moves",
    "is_attacked",
    # Notation
    "STARTING_FEN",
    "move_to_text",
    "parse_move_text",
    "position_from_fen",
    "position_to_fen",
]
