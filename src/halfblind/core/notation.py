"""Combined position string: ply marker + FEN.

A plain FEN cannot say which piece is currently shown as a half-blind ghost,
so the tracker serialises its state as::

    <marker> <fen>

where the marker is one of

* ``0``: the last ply was not half-blind,
* ``1``: the last ply was half-blind but there is no ghost to restore,
* a ghost token ``<from><to>[<promotion>][x<captured>]`` naming the
  half-blind ply whose ghost is still pending, e.g. ``e7e5`` or ``d4e5xp``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import chess

from halfblind.core.types import Square

STARTING_FEN = chess.STARTING_FEN

_GHOST_RE = re.compile(
    r"^(?P<from>[a-h][1-8])(?P<to>[a-h][1-8])(?P<promo>[nbrq])?(?:x(?P<cap>[pnbrq]))?$"
)


class InvalidPositionError(ValueError):
    """Raised when a combined position string cannot be loaded."""


@dataclass(frozen=True, slots=True)
class GhostToken:
    """Endpoints of the half-blind ply whose ghost is still shown."""

    from_square: Square
    to_square: Square
    promotion: chess.PieceType | None = None
    captured: chess.PieceType | None = None  # piece taken on the destination

    def __str__(self) -> str:
        text = f"{self.from_square}{self.to_square}"
        if self.promotion is not None:
            text += chess.piece_symbol(self.promotion)
        if self.captured is not None:
            text += "x" + chess.piece_symbol(self.captured)
        return text

    @classmethod
    def parse(cls, text: str) -> GhostToken:
        match = _GHOST_RE.match(text)
        if match is None:
            raise InvalidPositionError(f"Invalid ghost token: {text!r}")
        promo = match.group("promo")
        cap = match.group("cap")
        return cls(
            match.group("from"),
            match.group("to"),
            chess.PIECE_SYMBOLS.index(promo) if promo else None,
            chess.PIECE_SYMBOLS.index(cap) if cap else None,
        )


@dataclass(frozen=True, slots=True)
class ParsedPosition:
    """Result of splitting a combined position string."""

    fen: str
    half_blind: bool = False
    ghost: GhostToken | None = None

    @property
    def marker(self) -> str:
        if self.ghost is not None:
            return str(self.ghost)
        return "1" if self.half_blind else "0"


def parse_position(text: str) -> ParsedPosition:
    """Split *text* into marker and FEN.

    A bare FEN (first field is a piece placement) is accepted with marker ``0``.
    The FEN itself is not validated here; that is the rules engine's job.
    """
    parts = text.split(maxsplit=1)
    if not parts:
        raise InvalidPositionError("Empty position string")

    head = parts[0]
    if "/" in head:
        return ParsedPosition(text.strip())
    if len(parts) < 2:
        raise InvalidPositionError(f"Missing FEN after marker: {text!r}")

    fen = parts[1].strip()
    if head == "0":
        return ParsedPosition(fen)
    if head == "1":
        return ParsedPosition(fen, half_blind=True)
    return ParsedPosition(fen, half_blind=True, ghost=GhostToken.parse(head))


def format_position(
    fen: str, *, half_blind: bool = False, ghost: GhostToken | None = None
) -> str:
    """Inverse of :func:`parse_position`."""
    return f"{ParsedPosition(fen, half_blind, ghost).marker} {fen}"
