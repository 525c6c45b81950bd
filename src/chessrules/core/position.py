"""Position — complete, immutable game state (board + metadata).

Applying a move never mutates a Position; :meth:`Position.perform_move`
returns a fresh value, which keeps undo a matter of dropping the latest
value and lets any number of readers share a Position without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import (
    CastlingMove,
    Move,
    NormalMove,
    PromotionMove,
)
from chessrules.core.move_generator import all_legal_moves, enumerate_moves, is_attacked
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square, parse_square

Cells: TypeAlias = tuple[tuple[Piece | None, ...], ...]
_Grid: TypeAlias = list[list[Piece | None]]

_KING_START_FILE = 4

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    Square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    Square(0, 7): CastlingRights.WHITE_KINGSIDE,
    Square(7, 0): CastlingRights.BLACK_QUEENSIDE,
    Square(7, 7): CastlingRights.BLACK_KINGSIDE,
}

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _initial_cells() -> Cells:
    empty: tuple[Piece | None, ...] = (None,) * 8
    return (
        tuple(Piece(Color.WHITE, pt) for pt in _BACK_RANK),
        (Piece(Color.WHITE, PieceType.PAWN),) * 8,
        empty,
        empty,
        empty,
        empty,
        (Piece(Color.BLACK, PieceType.PAWN),) * 8,
        tuple(Piece(Color.BLACK, pt) for pt in _BACK_RANK),
    )


def empty_cells() -> Cells:
    """An 8x8 grid with no pieces on it."""
    return ((None,) * 8,) * 8


def _freeze(grid: _Grid) -> Cells:
    return tuple(tuple(row) for row in grid)


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    ``cells[rank][file]`` holds the occupant of each square, rank 0 being
    White's back rank.
    """

    cells: Cells = field(default_factory=_initial_cells)
    turn: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        if len(self.cells) != 8 or any(len(row) != 8 for row in self.cells):
            raise ValueError("Position cells must be an 8x8 grid")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position."""
        return cls()

    @classmethod
    def from_fen(cls, fen: str) -> Position:
        from chessrules.core.notation.fen import position_from_fen

        return position_from_fen(fen)

    def fen(self) -> str:
        from chessrules.core.notation.fen import position_to_fen

        return position_to_fen(self)

    # ── Element access ───────────────────────────────────────────────────

    def __getitem__(self, key: Square | str) -> Piece | None:
        sq = parse_square(key) if isinstance(key, str) else key
        return self.cells[sq.rank][sq.file]

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """``(square, piece)`` for every piece of *color*, a1 to h8."""
        found: list[tuple[Square, Piece]] = []
        for sq in ALL_SQUARES:
            piece = self.cells[sq.rank][sq.file]
            if piece is not None and piece.color == color:
                found.append((sq, piece))
        return found

    def king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it has none."""
        target = Piece(color, PieceType.KING)
        for sq in ALL_SQUARES:
            if self.cells[sq.rank][sq.file] == target:
                return sq
        return None

    # ── Attack queries ───────────────────────────────────────────────────

    def is_threatened(self, color: Color, square: Square) -> bool:
        """Whether *color*'s opponent attacks *square*."""
        return is_attacked(self, square, color.opposite)

    def in_check(self) -> bool:
        """Whether the side to move's king is attacked; ``False`` without a king."""
        king_sq = self.king(self.turn)
        if king_sq is None:
            return False
        return self.is_threatened(self.turn, king_sq)

    # ── Move queries ─────────────────────────────────────────────────────

    def legal_moves(self, square: Square | str) -> list[Move]:
        """Legal moves of the piece on *square*.

        Empty for an empty square or a piece of the side not to move.
        """
        sq = parse_square(square) if isinstance(square, str) else square
        piece = self[sq]
        if piece is None or piece.color != self.turn:
            return []
        return enumerate_moves(piece, sq, self, True)

    def all_legal_moves(self) -> list[Move]:
        return all_legal_moves(self)

    def can_castle(self, move: CastlingMove, side: Color) -> bool:
        """Whether *side* still holds the right for *move*'s castling side."""
        return bool(self.castling & CastlingRights.for_side(side, move.side))

    def is_legal(self, move: Move, side: Color) -> bool:
        """Whether *side* may play *move* here.

        Castling is judged on the castling right alone. Path and attack
        safety for castling is enforced when the generator builds the
        candidate, so castling moves from untrusted input must be matched
        against :meth:`legal_moves` first.
        """
        if isinstance(move, (NormalMove, PromotionMove)):
            piece = self[move.from_sq]
            if piece is None or piece.color != side:
                return False
            return move in enumerate_moves(piece, move.from_sq, self, True)
        if isinstance(move, CastlingMove):
            return self.can_castle(move, side)
        raise TypeError(f"Unknown move type: {type(move).__name__}")

    # ── Move application ─────────────────────────────────────────────────

    def perform_move(self, move: Move) -> Position | None:
        """Play *move* for the side to move; ``None`` if it is illegal."""
        if not self.is_legal(move, self.turn):
            return None

        mover = self.turn
        castling = self.castling
        next_en_passant: Square | None = None
        reset_halfmove = False

        if isinstance(move, CastlingMove):
            rank = mover.home_rank
            king = self[Square(rank, _KING_START_FILE)]
            rook = self[Square(rank, move.side.rook_from_file)]
            if king != Piece(mover, PieceType.KING) or rook != Piece(
                mover, PieceType.ROOK
            ):
                return None
            castling &= ~CastlingRights.for_color(mover)
        else:
            piece = self[move.from_sq]
            assert piece is not None, "legal move without a piece on its origin"
            captured = self[move.to_sq]
            if piece.kind == PieceType.PAWN:
                reset_halfmove = True
                if self._is_en_passant(move):
                    victim = self[Square(move.from_sq.rank, move.to_sq.file)]
                    assert victim == Piece(mover.opposite, PieceType.PAWN), (
                        "en passant captured something other than a pawn"
                    )
                elif abs(move.to_sq.rank - move.from_sq.rank) == 2:
                    next_en_passant = Square(
                        (move.from_sq.rank + move.to_sq.rank) // 2, move.from_sq.file
                    )
            if captured is not None:
                reset_halfmove = True
            if piece.kind == PieceType.KING:
                castling &= ~CastlingRights.for_color(mover)
            for sq in (move.from_sq, move.to_sq):
                corner = _ROOK_CORNERS.get(sq)
                if corner is not None:
                    castling &= ~corner

        grid = self._grid()
        self._relocate(grid, move)

        return Position(
            cells=_freeze(grid),
            turn=mover.opposite,
            castling=castling,
            en_passant=next_en_passant,
            halfmove_clock=0 if reset_halfmove else self.halfmove_clock + 1,
            fullmove_number=self.fullmove_number + (1 if mover == Color.BLACK else 0),
        )

    def unchecked_perform_move(self, move: Move) -> Position:
        """Relocate pieces for *move* without any legality checking.

        Only the turn is flipped (and the mover's castling rights dropped
        for a castling move). Moving from an empty square silently clears
        the destination. Meant for building hypothetical positions inside
        the move generator, never for playing a game.
        """
        grid = self._grid()
        self._relocate(grid, move)
        castling = self.castling
        if isinstance(move, CastlingMove):
            castling &= ~CastlingRights.for_color(self.turn)
        return Position(
            cells=_freeze(grid),
            turn=self.turn.opposite,
            castling=castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _grid(self) -> _Grid:
        return [list(row) for row in self.cells]

    def _is_en_passant(self, move: NormalMove | PromotionMove) -> bool:
        piece = self[move.from_sq]
        return (
            isinstance(move, NormalMove)
            and piece is not None
            and piece.kind == PieceType.PAWN
            and move.to_sq == self.en_passant
            and move.to_sq.file != move.from_sq.file
            and self[move.to_sq] is None
        )

    def _relocate(self, grid: _Grid, move: Move) -> None:
        if isinstance(move, CastlingMove):
            rank = self.turn.home_rank
            row = grid[rank]
            king = row[_KING_START_FILE]
            rook = row[move.side.rook_from_file]
            row[_KING_START_FILE] = None
            row[move.side.rook_from_file] = None
            row[move.side.king_file] = king
            row[move.side.rook_to_file] = rook
            return

        src, dst = move.from_sq, move.to_sq
        piece = grid[src.rank][src.file]
        if self._is_en_passant(move):
            grid[src.rank][dst.file] = None
        if isinstance(move, PromotionMove) and piece is not None:
            piece = Piece(piece.color, move.target)
        grid[src.rank][src.file] = None
        grid[dst.rank][dst.file] = piece

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.fen()

    def __repr__(self) -> str:
        return f"Position({self.fen()!r})"

    def diagram(self) -> str:
        """ASCII board, rank 8 on top."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.cells[rank][file]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
