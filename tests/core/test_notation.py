"""Tests for the combined position string and shadow-board rendering."""

import chess
import pytest

from halfblind.core.board import HalfBlindBoard
from halfblind.core.notation import (
    STARTING_FEN,
    GhostToken,
    InvalidPositionError,
    ParsedPosition,
    format_position,
    parse_position,
)
from halfblind.core.render import half_blind_ascii

AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"


class TestGhostToken:
    def test_simple(self) -> None:
        token = GhostToken.parse("e7e5")
        assert token == GhostToken("e7", "e5")
        assert str(token) == "e7e5"

    def test_capture_suffix(self) -> None:
        token = GhostToken.parse("d4e5xp")
        assert token.captured == chess.PAWN
        assert str(token) == "d4e5xp"

    def test_promotion_with_capture(self) -> None:
        token = GhostToken.parse("b7a8qxr")
        assert token.promotion == chess.QUEEN
        assert token.captured == chess.ROOK
        assert str(token) == "b7a8qxr"

    @pytest.mark.parametrize("text", ["e7", "e7e9", "e7e5k", "e7e5x", "2", "E7E5"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidPositionError, match="ghost token"):
            GhostToken.parse(text)


class TestParsePosition:
    def test_zero_marker(self) -> None:
        parsed = parse_position(f"0 {STARTING_FEN}")
        assert parsed == ParsedPosition(STARTING_FEN)
        assert parsed.marker == "0"

    def test_one_marker(self) -> None:
        parsed = parse_position(f"1 {AFTER_E4}")
        assert parsed.half_blind
        assert parsed.ghost is None
        assert parsed.fen == AFTER_E4

    def test_ghost_marker(self) -> None:
        parsed = parse_position(f"e2e4 {AFTER_E4}")
        assert parsed.ghost == GhostToken("e2", "e4")
        assert parsed.marker == "e2e4"

    def test_bare_fen_accepted(self) -> None:
        assert parse_position(STARTING_FEN) == ParsedPosition(STARTING_FEN)

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidPositionError, match="Empty"):
            parse_position("   ")

    def test_marker_without_fen_raises(self) -> None:
        with pytest.raises(InvalidPositionError, match="Missing FEN"):
            parse_position("1")

    def test_bad_marker_raises(self) -> None:
        with pytest.raises(InvalidPositionError):
            parse_position(f"7 {STARTING_FEN}")

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_position("bogus")


class TestFormatPosition:
    def test_markers(self) -> None:
        assert format_position(STARTING_FEN) == f"0 {STARTING_FEN}"
        assert format_position(AFTER_E4, half_blind=True) == f"1 {AFTER_E4}"
        assert (
            format_position(AFTER_E4, half_blind=True, ghost=GhostToken("e2", "e4"))
            == f"e2e4 {AFTER_E4}"
        )

    def test_parse_inverts_format(self) -> None:
        text = format_position(AFTER_E4, ghost=GhostToken("e2", "e4"))
        assert format_position(**_kwargs(parse_position(text))) == text


def _kwargs(parsed: ParsedPosition) -> dict:
    return {"fen": parsed.fen, "half_blind": parsed.half_blind, "ghost": parsed.ghost}


class TestHalfBlindAscii:
    def test_starting_position(self) -> None:
        text = half_blind_ascii(HalfBlindBoard.from_board(chess.Board()))
        assert text == (
            "   +------------------------+\n"
            " 8 | r  n  b  q  k  b  n  r |\n"
            " 7 | p  p  p  p  p  p  p  p |\n"
            " 6 | .  .  .  .  .  .  .  . |\n"
            " 5 | .  .  .  .  .  .  .  . |\n"
            " 4 | .  .  .  .  .  .  .  . |\n"
            " 3 | .  .  .  .  .  .  .  . |\n"
            " 2 | P  P  P  P  P  P  P  P |\n"
            " 1 | R  N  B  Q  K  B  N  R |\n"
            "   +------------------------+\n"
            "     a  b  c  d  e  f  g  h\n"
        )

    def test_ghost_in_parentheses(self) -> None:
        hb = HalfBlindBoard.from_board(chess.Board())
        hb.mark_half_blind("g1")
        lines = half_blind_ascii(hb).splitlines()
        assert lines[8] == " 1 | R  N  B  Q  K  B (N) R |"

    def test_empty_board(self) -> None:
        lines = half_blind_ascii(HalfBlindBoard()).splitlines()
        assert len(lines) == 11
        assert all(line.endswith("| .  .  .  .  .  .  .  . |") for line in lines[1:9])

    def test_rendering_does_not_mutate(self) -> None:
        hb = HalfBlindBoard.from_board(chess.Board())
        before = hb.copy()
        half_blind_ascii(hb)
        assert hb == before
