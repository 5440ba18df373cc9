"""Tests for HalfBlindMove, HalfBlindPiece and MoveFlag."""

import chess
import pytest

from halfblind.core.enums import MoveFlag
from halfblind.core.move import HalfBlindMove
from halfblind.core.piece import HalfBlindPiece


def _describe(fen: str, uci: str) -> HalfBlindMove:
    board = chess.Board(fen)
    return HalfBlindMove.from_board(board, chess.Move.from_uci(uci))


class TestHalfBlindPiece:
    def test_from_piece_defaults_to_visible(self) -> None:
        piece = HalfBlindPiece.from_piece(chess.Piece(chess.KNIGHT, chess.WHITE))
        assert piece.half_blind is False
        assert piece.symbol() == "N"

    def test_as_half_blind_keeps_identity(self) -> None:
        piece = HalfBlindPiece(chess.PAWN, chess.BLACK).as_half_blind()
        assert piece.half_blind
        assert piece.piece == chess.Piece(chess.PAWN, chess.BLACK)
        assert str(piece) == "(p)"

    def test_flag_is_part_of_equality(self) -> None:
        visible = HalfBlindPiece(chess.ROOK, chess.WHITE)
        assert visible != visible.as_half_blind()


class TestHalfBlindMoveFromBoard:
    def test_double_pawn_push(self) -> None:
        move = HalfBlindMove.from_board(chess.Board(), chess.Move.from_uci("e2e4"))
        assert move.color == chess.WHITE
        assert move.piece_symbol == "p"
        assert move.san == "e4"
        assert move.flags == MoveFlag.BIG_PAWN
        assert move.flags.code == "b"
        assert move.captured is None
        assert move.half_blind is False

    def test_quiet_knight_move(self) -> None:
        move = HalfBlindMove.from_board(chess.Board(), chess.Move.from_uci("g1f3"))
        assert move.san == "Nf3"
        assert move.flags.code == "n"

    def test_capture(self) -> None:
        move = _describe(
            "rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 2", "e4d5"
        )
        assert move.captured == chess.PAWN
        assert move.flags == MoveFlag.CAPTURE
        assert move.is_capture

    def test_en_passant(self) -> None:
        move = _describe("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1", "e5d6")
        assert move.flags == MoveFlag.EN_PASSANT
        assert move.flags.code == "e"
        assert move.captured == chess.PAWN

    def test_capturing_promotion(self) -> None:
        move = _describe("rn2k3/1P6/8/8/8/8/8/4K3 w - - 0 1", "b7a8q")
        assert move.flags == MoveFlag.CAPTURE | MoveFlag.PROMOTION
        assert move.flags.code == "cp"
        assert move.promotion == chess.QUEEN
        assert move.captured == chess.ROOK

    def test_castling(self) -> None:
        move = _describe("4k3/8/8/8/8/8/8/4K2R w K - 0 1", "e1g1")
        assert move.san == "O-O"
        assert move.flags == MoveFlag.KINGSIDE_CASTLE

    def test_empty_origin_raises(self) -> None:
        with pytest.raises(ValueError, match="No piece"):
            HalfBlindMove.from_board(chess.Board(), chess.Move.from_uci("e4e5"))

    def test_half_blind_str(self) -> None:
        move = HalfBlindMove.from_board(
            chess.Board(), chess.Move.from_uci("b1c3"), half_blind=True
        )
        assert move.uci == "b1c3"
        assert str(move) == "Nc3 (half-blind)"
