"""Square addressing helpers.

Two layouts are in use:

* python-chess square indexes (Little-Endian Rank-File): a1=0, h1=7, ..., h8=63
* grid coordinates ``(row, col)`` as drawn on screen: row 0 is rank 8,
  col 0 is file a, so ``(0, 0)`` is a8 and ``(7, 7)`` is h1
"""

from __future__ import annotations

from typing import TypeAlias

import chess

Square: TypeAlias = str  # "a1" … "h8"
Coords: TypeAlias = tuple[int, int]  # (row, col)

FILES = "abcdefgh"
RANKS_TOP_DOWN = "87654321"


def is_valid_square(name: str) -> bool:
    """Check whether *name* is an algebraic square such as ``'e4'``."""
    return len(name) == 2 and name[0] in FILES and name[1] in RANKS_TOP_DOWN


def square_to_coords(name: Square) -> Coords:
    """Grid coordinates of a square, e.g. 'a8' → (0, 0), 'e4' → (4, 4)."""
    if not is_valid_square(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return RANKS_TOP_DOWN.index(name[1]), FILES.index(name[0])


def coords_to_square(row: int, col: int) -> Square:
    """Square name for grid coordinates, e.g. (7, 0) → 'a1'."""
    if not (0 <= row < 8 and 0 <= col < 8):
        raise ValueError(f"Invalid board coordinates: {(row, col)!r}")
    return FILES[col] + RANKS_TOP_DOWN[row]


def square_index(name: Square) -> chess.Square:
    """python-chess square index, e.g. 'e4' → 28."""
    if not is_valid_square(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return chess.parse_square(name)


def square_name(sq: chess.Square) -> Square:
    """Inverse of :func:`square_index`."""
    return chess.square_name(sq)


def index_to_coords(sq: chess.Square) -> Coords:
    """Grid coordinates of a python-chess square index."""
    return 7 - chess.square_rank(sq), chess.square_file(sq)


def coords_to_index(row: int, col: int) -> chess.Square:
    """python-chess square index for grid coordinates."""
    return square_index(coords_to_square(row, col))
