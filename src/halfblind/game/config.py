"""Tracker configuration."""

from __future__ import annotations

from dataclasses import dataclass

import chess


@dataclass(frozen=True, slots=True)
class TrackerConfig:
    """Rule switches for :class:`~halfblind.game.tracker.HalfBlindChess`.

    Args:
        advance_on_illegal: Count rejected move attempts as plies. Each
            rejected attempt then shifts which later plies are half-blind.
        default_promotion: Piece a pawn becomes when a move is given as a
            bare ``(from, to)`` pair reaching the last rank.
    """

    advance_on_illegal: bool = True
    default_promotion: chess.PieceType = chess.QUEEN

    @classmethod
    def strict(cls) -> TrackerConfig:
        """Only legal plies move the half-blind cycle forward."""
        return cls(advance_on_illegal=False)
