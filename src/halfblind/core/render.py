"""Plain-text rendering of the shadow board."""

from __future__ import annotations

from halfblind.core.board import HalfBlindBoard
from halfblind.core.piece import HalfBlindPiece

_BORDER = "   +------------------------+\n"
_FILES_LEGEND = "     a  b  c  d  e  f  g  h\n"


def _cell(piece: HalfBlindPiece | None) -> str:
    if piece is None:
        return " . "
    if piece.half_blind:
        return f"({piece.symbol()})"
    return f" {piece.symbol()} "


def half_blind_ascii(board: HalfBlindBoard) -> str:
    """Render *board* as an ASCII diagram, ghosts in parentheses.

    Example (after 1. e4 e5, the second ply being half-blind)::

           +------------------------+
         8 | r  n  b  q  k  b  n  r |
         7 | p  p  p  p (p) p  p  p |
         ...
    """
    lines = [_BORDER]
    for rank, row in zip("87654321", board):
        lines.append(f" {rank} |{''.join(_cell(p) for p in row)}|\n")
    lines.append(_BORDER)
    lines.append(_FILES_LEGEND)
    return "".join(lines)
