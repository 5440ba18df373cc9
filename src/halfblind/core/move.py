"""HalfBlindMove value object."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from halfblind.core.enums import MoveFlag
from halfblind.core.types import Square


@dataclass(frozen=True, slots=True)
class HalfBlindMove:
    """Immutable record of one applied ply.

    Flat composition of the rules engine's move details and the half-blind
    classification computed for that ply.
    """

    color: chess.Color
    from_square: Square
    to_square: Square
    piece: chess.PieceType
    san: str
    uci: str
    flags: MoveFlag = MoveFlag.NORMAL
    captured: chess.PieceType | None = None
    promotion: chess.PieceType | None = None
    half_blind: bool = False

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_board(
        cls, board: chess.Board, move: chess.Move, *, half_blind: bool = False
    ) -> HalfBlindMove:
        """Describe *move* as played from *board*.

        Must be called **before** the move is pushed; the board is only read.
        """
        piece_type = board.piece_type_at(move.from_square)
        if piece_type is None:
            raise ValueError(f"No piece on {chess.square_name(move.from_square)}")

        flags = MoveFlag.NORMAL
        captured: chess.PieceType | None = None
        if board.is_en_passant(move):
            flags |= MoveFlag.EN_PASSANT
            captured = chess.PAWN
        elif board.is_capture(move):
            flags |= MoveFlag.CAPTURE
            captured = board.piece_type_at(move.to_square)
        if piece_type == chess.PAWN and chess.square_distance(
            move.from_square, move.to_square
        ) == 2 and chess.square_file(move.from_square) == chess.square_file(
            move.to_square
        ):
            flags |= MoveFlag.BIG_PAWN
        if move.promotion is not None:
            flags |= MoveFlag.PROMOTION
        if board.is_kingside_castling(move):
            flags |= MoveFlag.KINGSIDE_CASTLE
        elif board.is_queenside_castling(move):
            flags |= MoveFlag.QUEENSIDE_CASTLE

        return cls(
            color=board.turn,
            from_square=chess.square_name(move.from_square),
            to_square=chess.square_name(move.to_square),
            piece=piece_type,
            san=board.san(move),
            uci=move.uci(),
            flags=flags,
            captured=captured,
            promotion=move.promotion,
            half_blind=half_blind,
        )

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def piece_symbol(self) -> str:
        """Lowercase letter of the moved piece, e.g. ``'p'``."""
        return chess.piece_symbol(self.piece)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        return f"{self.san} (half-blind)" if self.half_blind else self.san
