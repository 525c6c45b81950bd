"""Chess rules engine: positions, legal moves, move application, game status."""

from chessrules.core import (
    STARTING_FEN,
    CastlingMove,
    CastlingSide,
    Color,
    GameStatus,
    Move,
    NormalMove,
    Piece,
    PieceType,
    Position,
    PromotionMove,
    Square,
    SquareDelta,
    parse_square,
    position_from_fen,
    position_to_fen,
)
from chessrules.errors import (
    ChessError,
    IllegalMove,
    InvalidPieceLetter,
    InvalidPositionNotation,
    InvalidSquareToken,
)
from chessrules.game import Game, GameController, GameOptions, Outcome

__version__ = "0.1.0"

__all__ = [
    "STARTING_FEN",
    "CastlingMove",
    "CastlingSide",
    "ChessError",
    "Color",
    "Game",
    "GameController",
    "GameOptions",
    "GameStatus",
    "IllegalMove",
    "InvalidPieceLetter",
    "InvalidPositionNotation",
    "InvalidSquareToken",
    "Move",
    "NormalMove",
    "Outcome",
    "Piece",
    "PieceType",
    "Position",
    "PromotionMove",
    "Square",
    "SquareDelta",
    "parse_square",
    "position_from_fen",
    "position_to_fen",
]
