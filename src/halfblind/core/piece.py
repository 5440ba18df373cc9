"""HalfBlindPiece value object."""

from __future__ import annotations

from dataclasses import dataclass

import chess


@dataclass(frozen=True, slots=True)
class HalfBlindPiece:
    """A piece as seen on the shadow board.

    Carries the same type and color as the rules-engine piece plus a flag
    telling whether the piece is currently half-blind (a ghost left on the
    square it moved away from).
    """

    piece_type: chess.PieceType
    color: chess.Color
    half_blind: bool = False

    @classmethod
    def from_piece(cls, piece: chess.Piece, *, half_blind: bool = False) -> HalfBlindPiece:
        return cls(piece.piece_type, piece.color, half_blind)

    @property
    def piece(self) -> chess.Piece:
        """The plain rules-engine piece, without visibility information."""
        return chess.Piece(self.piece_type, self.color)

    def symbol(self) -> str:
        """FEN letter: uppercase for white, lowercase for black."""
        return self.piece.symbol()

    def as_half_blind(self) -> HalfBlindPiece:
        return HalfBlindPiece(self.piece_type, self.color, True)

    def __str__(self) -> str:
        return f"({self.symbol()})" if self.half_blind else self.symbol()
