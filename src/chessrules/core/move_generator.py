"""Legal and pseudo-legal move generation + attack detection.

Everything here is a pure function of a :class:`Position`. King safety is
tested by playing each candidate on a hypothetical position and asking
whether any enemy piece could then land on the king. That inner question is
always answered with ``filter_checks=False``, so the recursion is exactly
two levels deep.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    CastlingSide,
    Color,
    PieceType,
)
from chessrules.core.move import CastlingMove, Move, NormalMove, PromotionMove
from chessrules.core.piece import Piece
from chessrules.core.types import Square, SquareDelta

if TYPE_CHECKING:
    from chessrules.core.position import Position


def _deltas(pairs: tuple[tuple[int, int], ...]) -> tuple[SquareDelta, ...]:
    return tuple(SquareDelta(d_rank, d_file) for d_rank, d_file in pairs)


DIAGONALS: tuple[SquareDelta, ...] = _deltas(((1, 1), (1, -1), (-1, 1), (-1, -1)))
AXES: tuple[SquareDelta, ...] = _deltas(((0, 1), (1, 0), (0, -1), (-1, 0)))
KING_DELTAS: tuple[SquareDelta, ...] = AXES + DIAGONALS
KNIGHT_DELTAS: tuple[SquareDelta, ...] = _deltas(
    (
        (2, 1),
        (2, -1),
        (-2, 1),
        (-2, -1),
        (1, 2),
        (1, -2),
        (-1, 2),
        (-1, -2),
    )
)

_SLIDING_DIRS: dict[PieceType, tuple[SquareDelta, ...]] = {
    PieceType.BISHOP: DIAGONALS,
    PieceType.ROOK: AXES,
    PieceType.QUEEN: AXES + DIAGONALS,
}

_KING_START_FILE = 4
# Rank a pawn of the given color lands on when capturing en passant.
_EN_PASSANT_RANK: dict[Color, int] = {Color.WHITE: 5, Color.BLACK: 2}


# -- Public API -------------------------------------------------------------


def enumerate_moves(
    piece: Piece,
    origin: Square,
    position: Position,
    filter_checks: bool,
) -> list[Move]:
    """Moves of *piece* standing on *origin* in *position*.

    With *filter_checks* the result holds only fully legal moves and may
    include castling; without it the result is pseudo-legal.
    """
    kind = piece.kind
    color = piece.color

    moves: list[Move]
    if kind == PieceType.PAWN:
        moves = _pawn_moves(color, origin, position)
    elif kind == PieceType.KNIGHT:
        moves = [
            NormalMove(origin, to_sq)
            for to_sq in _step_targets(color, origin, position, KNIGHT_DELTAS)
        ]
    elif kind == PieceType.KING:
        moves = [
            NormalMove(origin, to_sq)
            for to_sq in _step_targets(color, origin, position, KING_DELTAS)
        ]
        if filter_checks:
            moves.extend(_castling_moves(color, origin, position))
    else:
        moves = [
            NormalMove(origin, to_sq)
            for to_sq in _slide_targets(color, origin, position, _SLIDING_DIRS[kind])
        ]

    if filter_checks:
        moves = [m for m in moves if not _leaves_king_attacked(m, color, position)]
    return moves


def all_legal_moves(position: Position) -> list[Move]:
    """Every legal move for the side to move."""
    moves: list[Move] = []
    for origin, piece in position.pieces(position.turn):
        moves.extend(enumerate_moves(piece, origin, position, True))
    return moves


def pawn_attacks(color: Color, origin: Square) -> list[Square]:
    """The (up to two) forward diagonals a pawn of *color* attacks."""
    targets: list[Square] = []
    for d_file in (-1, 1):
        sq = origin.checked_add(SquareDelta(color.forward, d_file))
        if sq is not None:
            targets.append(sq)
    return targets


def is_attacked(position: Position, square: Square, by_color: Color) -> bool:
    """Could any piece of *by_color* land on *square*?

    Uses unfiltered move sets, so an attacker's own king safety is ignored.
    Pawns count their diagonals even when *square* is empty.
    """
    for origin, piece in position.pieces(by_color):
        if piece.kind == PieceType.PAWN:
            if square in pawn_attacks(by_color, origin):
                return True
            continue
        for move in enumerate_moves(piece, origin, position, False):
            if isinstance(move, NormalMove) and move.to_sq == square:
                return True
    return False


class MoveGenerator:
    """Convenience wrapper binding the generator functions to a position."""

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        return all_legal_moves(self._pos)

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check, no castling)."""
        moves: list[Move] = []
        for origin, piece in self._pos.pieces(self._pos.turn):
            moves.extend(enumerate_moves(piece, origin, self._pos, False))
        return moves

    def legal_moves_from(self, square: Square) -> list[Move]:
        return self._pos.legal_moves(square)

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._pos.king(color)
        if king_sq is None:
            return False
        return is_attacked(self._pos, king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_attacked(self._pos, sq, by_color)


# -- Piece-specific generators (private) -----------------------------------


def _step_targets(
    color: Color,
    origin: Square,
    position: Position,
    deltas: tuple[SquareDelta, ...],
) -> list[Square]:
    targets: list[Square] = []
    for delta in deltas:
        to_sq = origin.checked_add(delta)
        if to_sq is None:
            continue
        occupant = position[to_sq]
        if occupant is None or occupant.color != color:
            targets.append(to_sq)
    return targets


def _slide_targets(
    color: Color,
    origin: Square,
    position: Position,
    directions: tuple[SquareDelta, ...],
) -> list[Square]:
    # directions are unit steps
    targets: list[Square] = []
    for direction in directions:
        to_sq = origin.checked_add(direction)
        while to_sq is not None:
            occupant = position[to_sq]
            if occupant is None:
                targets.append(to_sq)
                to_sq = to_sq.checked_add(direction)
                continue
            if occupant.color != color:
                targets.append(to_sq)
            break
    return targets


def _pawn_moves(color: Color, origin: Square, position: Position) -> list[Move]:
    moves: list[Move] = []
    last_rank = color.opposite.home_rank

    def add(to_sq: Square) -> None:
        if to_sq.rank == last_rank:
            moves.extend(PromotionMove(origin, to_sq, pt) for pt in PROMOTION_TYPES)
        else:
            moves.append(NormalMove(origin, to_sq))

    forward = SquareDelta(color.forward, 0)
    one_step = origin.checked_add(forward)
    if one_step is not None and position[one_step] is None:
        add(one_step)
        if origin.rank == color.pawn_home_rank:
            two_step = one_step.checked_add(forward)
            if two_step is not None and position[two_step] is None:
                moves.append(NormalMove(origin, two_step))

    for to_sq in pawn_attacks(color, origin):
        target = position[to_sq]
        if target is not None:
            if target.color != color:
                add(to_sq)
        elif _is_en_passant_capture(color, origin, to_sq, position):
            moves.append(NormalMove(origin, to_sq))
    return moves


def _is_en_passant_capture(
    color: Color, origin: Square, to_sq: Square, position: Position
) -> bool:
    if to_sq != position.en_passant or to_sq.rank != _EN_PASSANT_RANK[color]:
        return False
    # The double-stepped pawn sits beside the capturer, behind the target.
    victim = position[Square(origin.rank, to_sq.file)]
    return victim == Piece(color.opposite, PieceType.PAWN)


def _castling_moves(color: Color, king_sq: Square, position: Position) -> list[Move]:
    # Castling moves carry no color, so only the side to move may castle.
    rank = color.home_rank
    if color != position.turn or king_sq != Square(rank, _KING_START_FILE):
        return []
    if not position.castling & CastlingRights.for_color(color):
        return []
    if is_attacked(position, king_sq, color.opposite):
        return []

    moves: list[Move] = []
    own_rook = Piece(color, PieceType.ROOK)
    for side in (CastlingSide.SHORT, CastlingSide.LONG):
        if not position.castling & CastlingRights.for_side(color, side):
            continue
        rook_file = side.rook_from_file
        if position[Square(rank, rook_file)] != own_rook:
            continue
        low, high = sorted((_KING_START_FILE, rook_file))
        if any(position[Square(rank, f)] is not None for f in range(low + 1, high)):
            continue
        # The destination square is covered by the general check filter.
        step = 1 if side is CastlingSide.SHORT else -1
        crossed = Square(rank, _KING_START_FILE + step)
        if is_attacked(position, crossed, color.opposite):
            continue
        moves.append(CastlingMove(side))
    return moves


def _leaves_king_attacked(move: Move, color: Color, position: Position) -> bool:
    hypothetical = position.unchecked_perform_move(move)
    king_sq = hypothetical.king(color)
    if king_sq is None:
        return False
    return is_attacked(hypothetical, king_sq, color.opposite)
