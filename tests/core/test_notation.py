"""Tests for FEN and move text notation."""

import pytest

from chessrules.core.enums import CastlingRights, CastlingSide, Color, PieceType
from chessrules.core.move import (
    LONG_CASTLE,
    SHORT_CASTLE,
    CastlingMove,
    NormalMove,
    PromotionMove,
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
from chessrules.core.types import E1, E2, E3, E4, E7, E8, G6, parse_square
from chessrules.errors import ChessError, InvalidPieceLetter, InvalidPositionNotation


class TestFenParsing:
    def test_starting_side(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.turn == Color.WHITE

    def test_starting_castling(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.castling == CastlingRights.ALL

    def test_starting_en_passant(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.en_passant is None

    def test_starting_clocks(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    def test_starting_kings(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos[E1] == Piece(Color.WHITE, PieceType.KING)
        assert pos[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_matches_default_position(self) -> None:
        assert position_from_fen(STARTING_FEN) == Position.initial()

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        pos = position_from_fen(fen)
        assert pos.en_passant == E3

    def test_en_passant_for_white(self) -> None:
        pos = position_from_fen("8/8/8/5Pp1/8/8/8/8 w - g6 0 1")
        assert pos.en_passant == G6

    def test_no_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"
        pos = position_from_fen(fen)
        assert pos.castling == CastlingRights.NONE

    def test_partial_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1"
        pos = position_from_fen(fen)
        assert pos.castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    def test_counters(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/4K2k b - - 37 112")
        assert pos.halfmove_clock == 37
        assert pos.fullmove_number == 112


class TestFenRejection:
    def test_garbage(self) -> None:
        with pytest.raises(InvalidPositionNotation):
            position_from_fen("invalid")

    def test_missing_field(self) -> None:
        with pytest.raises(InvalidPositionNotation, match="6 fields"):
            position_from_fen("8/8/8/8/8/8/8/8 w - - 0")

    def test_extra_field(self) -> None:
        with pytest.raises(InvalidPositionNotation, match="6 fields"):
            position_from_fen("8/8/8/8/8/8/8/8 w - - 0 1 x")

    def test_rank_count(self) -> None:
        with pytest.raises(InvalidPositionNotation, match="8 ranks"):
            position_from_fen("8/8/8/8/8/8/8 w - - 0 1")

    @pytest.mark.parametrize(
        "placement",
        ["9/8/8/8/8/8/8/8", "7/8/8/8/8/8/8/8", "ppppppppp/8/8/8/8/8/8/8", "44p/8/8/8/8/8/8/8"],
    )
    def test_rank_width(self, placement: str) -> None:
        with pytest.raises(InvalidPositionNotation):
            position_from_fen(f"{placement} w - - 0 1")

    def test_zero_digit(self) -> None:
        with pytest.raises(InvalidPositionNotation, match="bad digit"):
            position_from_fen("08/8/8/8/8/8/8/8 w - - 0 1")

    def test_unknown_piece_letter(self) -> None:
        with pytest.raises(InvalidPositionNotation, match="bad piece") as info:
            position_from_fen("7x/8/8/8/8/8/8/8 w - - 0 1")
        assert isinstance(info.value.__cause__, InvalidPieceLetter)

    @pytest.mark.parametrize("side", ["x", "W", "wb", "white"])
    def test_side_to_move(self, side: str) -> None:
        with pytest.raises(InvalidPositionNotation, match="side-to-move"):
            position_from_fen(f"8/8/8/8/8/8/8/8 {side} - - 0 1")

    @pytest.mark.parametrize("castling", ["KX", "KK", "kqKQx", "--"])
    def test_castling_field(self, castling: str) -> None:
        with pytest.raises(InvalidPositionNotation, match="castling"):
            position_from_fen(f"8/8/8/8/8/8/8/8 w {castling} - 0 1")

    @pytest.mark.parametrize("ep", ["e9", "e", "e33", "x3"])
    def test_en_passant_token(self, ep: str) -> None:
        with pytest.raises(InvalidPositionNotation, match="en-passant"):
            position_from_fen(f"8/8/8/8/8/8/8/8 b - {ep} 0 1")

    def test_en_passant_wrong_rank(self) -> None:
        with pytest.raises(InvalidPositionNotation, match="en-passant"):
            position_from_fen("8/8/8/8/8/8/8/8 w - e3 0 1")

    @pytest.mark.parametrize(("half", "full"), [("x", "1"), ("-1", "1"), ("0", "0"), ("0", "y")])
    def test_counters(self, half: str, full: str) -> None:
        with pytest.raises(InvalidPositionNotation):
            position_from_fen(f"8/8/8/8/8/8/8/8 w - - {half} {full}")

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            position_from_fen("8/8/8/8/8/8/8/8 w - - 0")


class TestFenSerialization:
    def test_default_board(self) -> None:
        assert position_to_fen(Position.initial()) == STARTING_FEN

    def test_str_is_fen(self) -> None:
        assert str(Position.initial()) == STARTING_FEN

    def test_castling_order_is_fixed(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w qkQK - 0 1")
        assert position_to_fen(pos) == "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"

    def test_withdrawn_rights_omitted(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Qk - 0 1")
        assert position_to_fen(pos).split()[2] == "Qk"

    def test_black_queenside_only(self) -> None:
        pos = position_from_fen("r3k3/8/8/8/8/8/8/4K3 b q - 0 1")
        assert position_to_fen(pos).split()[2] == "q"

    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
            "8/8/4p3/5Pp1/8/8/8/8 w - g6 13 40",
            "8/8/8/8/8/8/8/8 b - - 0 1",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        pos = position_from_fen(fen)
        assert position_to_fen(pos) == fen
        assert position_from_fen(position_to_fen(pos)) == pos


class TestMoveText:
    def test_normal(self) -> None:
        assert move_to_text(NormalMove(E2, E4)) == "e2e4"

    def test_castling(self) -> None:
        assert move_to_text(SHORT_CASTLE) == "O-O"
        assert move_to_text(LONG_CASTLE) == "O-O-O"

    def test_promotion(self) -> None:
        assert move_to_text(PromotionMove(E7, E8, PieceType.QUEEN)) == "e7e8=Q"
        assert str(PromotionMove(E7, E8, PieceType.KNIGHT)) == "e7e8=N"

    def test_parse_normal(self) -> None:
        assert parse_move_text("e2e4") == NormalMove(E2, E4)

    @pytest.mark.parametrize("text", ["O-O", "o-o", "0-0"])
    def test_parse_short_castle(self, text: str) -> None:
        assert parse_move_text(text) == CastlingMove(CastlingSide.SHORT)

    @pytest.mark.parametrize("text", ["O-O-O", "o-o-o", "0-0-0"])
    def test_parse_long_castle(self, text: str) -> None:
        assert parse_move_text(text) == CastlingMove(CastlingSide.LONG)

    def test_parse_promotion(self) -> None:
        assert parse_move_text("a2a1=r") == PromotionMove(
            parse_square("a2"), parse_square("a1"), PieceType.ROOK
        )

    @pytest.mark.parametrize("text", ["", "e2", "e2e9", "e7e8=K", "e7e8=P", "e7e8=X", "e7e8Q"])
    def test_parse_rejects(self, text: str) -> None:
        with pytest.raises(ChessError):
            parse_move_text(text)
