"""Core enumerations and flags for the half-blind domain."""

from __future__ import annotations

from enum import IntFlag, auto


class MoveFlag(IntFlag):
    """Classification of a single ply.

    Several flags can combine, e.g. a capturing promotion is
    ``CAPTURE | PROMOTION``.
    """

    NORMAL = 0
    CAPTURE = auto()
    BIG_PAWN = auto()  # pawn double step
    EN_PASSANT = auto()
    PROMOTION = auto()
    KINGSIDE_CASTLE = auto()
    QUEENSIDE_CASTLE = auto()

    @property
    def code(self) -> str:
        """Compact letter code, e.g. ``'b'`` for a double pawn push, ``'cp'``
        for a capturing promotion, ``'n'`` for a quiet move."""
        letters = "".join(
            letter for flag, letter in _FLAG_LETTERS.items() if self & flag
        )
        return letters or "n"


_FLAG_LETTERS: dict[MoveFlag, str] = {
    MoveFlag.BIG_PAWN: "b",
    MoveFlag.EN_PASSANT: "e",
    MoveFlag.CAPTURE: "c",
    MoveFlag.PROMOTION: "p",
    MoveFlag.KINGSIDE_CASTLE: "k",
    MoveFlag.QUEENSIDE_CASTLE: "q",
}
