"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_rank(self) -> int:
        """Rank index of the back rank: 0 for white, 7 for black."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_home_rank(self) -> int:
        """Rank index pawns start on: 1 for white, 6 for black."""
        return 1 if self == Color.WHITE else 6

    @property
    def forward(self) -> int:
        """Rank step a pawn of this color advances by."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Uppercase piece letter, e.g. ``N`` for a knight."""
        return _PIECE_LETTERS[self]

    def __str__(self) -> str:
        return self.letter


_PIECE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class CastlingSide(Enum):
    """The two ways to castle."""

    SHORT = "short"  # king-side
    LONG = "long"  # queen-side

    @property
    def king_file(self) -> int:
        return 6 if self is CastlingSide.SHORT else 2

    @property
    def rook_from_file(self) -> int:
        return 7 if self is CastlingSide.SHORT else 0

    @property
    def rook_to_file(self) -> int:
        return 5 if self is CastlingSide.SHORT else 3


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_color(cls, color: Color) -> CastlingRights:
        """Both rights belonging to *color*."""
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, side: CastlingSide) -> CastlingRights:
        """The single right for *color* castling on *side*."""
        if color == Color.WHITE:
            return (
                cls.WHITE_KINGSIDE
                if side is CastlingSide.SHORT
                else cls.WHITE_QUEENSIDE
            )
        return cls.BLACK_KINGSIDE if side is CastlingSide.SHORT else cls.BLACK_QUEENSIDE


class GameStatus(IntEnum):
    """Per-turn status of a game; the last three are terminal."""

    NORMAL = 0
    CHECK = 1
    CHECKMATE = 2
    DRAW = 3
    STALEMATE = 4

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.DRAW, GameStatus.STALEMATE)

    def __str__(self) -> str:
        return self.name.lower()
