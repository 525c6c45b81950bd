"""FEN parsing and serialization."""

from __future__ import annotations

from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square, parse_square
from chessrules.errors import (
    InvalidPieceLetter,
    InvalidPositionNotation,
    InvalidSquareToken,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_LETTERS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def position_from_fen(fen: str) -> Position:
    """Parse a six-field FEN string into a :class:`Position`.

    Raises :class:`InvalidPositionNotation` on any structural problem; a
    partially parsed position is never returned.
    """
    parts = fen.split()
    if len(parts) != 6:
        raise InvalidPositionNotation(fen, f"need 6 fields, got {len(parts)}")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidPositionNotation(fen, "board must contain 8 ranks")
    grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise InvalidPositionNotation(fen, f"bad digit {ch!r}")
                file += step
            else:
                if file >= 8:
                    raise InvalidPositionNotation(fen, f"rank {rank + 1} is too wide")
                try:
                    grid[rank][file] = Piece.from_char(ch)
                except InvalidPieceLetter as exc:
                    raise InvalidPositionNotation(fen, f"bad piece {ch!r}") from exc
                file += 1
            if file > 8:
                raise InvalidPositionNotation(fen, f"rank {rank + 1} is too wide")
        if file != 8:
            raise InvalidPositionNotation(fen, f"rank {rank + 1} is not 8 squares")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise InvalidPositionNotation(fen, f"bad side-to-move field {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        rights = dict(_CASTLING_LETTERS)
        seen: set[str] = set()
        for ch in castling_part:
            right = rights.get(ch)
            if right is None or ch in seen:
                raise InvalidPositionNotation(
                    fen, f"bad castling field {castling_part!r}"
                )
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except InvalidSquareToken as exc:
            raise InvalidPositionNotation(
                fen, f"bad en-passant square {ep_part!r}"
            ) from exc
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if ep.rank != expected_ep_rank:
            raise InvalidPositionNotation(
                fen, f"en-passant square {ep_part!r} does not fit the side to move"
            )

    # 5–6. Clocks
    if not half_part.isdecimal():
        raise InvalidPositionNotation(fen, f"bad halfmove clock {half_part!r}")
    if not full_part.isdecimal() or int(full_part) < 1:
        raise InvalidPositionNotation(fen, f"bad fullmove number {full_part!r}")

    return Position(
        cells=tuple(tuple(row) for row in grid),
        turn=side,
        castling=castling,
        en_passant=ep,
        halfmove_clock=int(half_part),
        fullmove_number=int(full_part),
    )


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for piece in pos.cells[rank]:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.turn == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        letter for letter, right in _CASTLING_LETTERS if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = str(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
