"""Core domain layer — half-blind value types on top of python-chess.

Quick start::

    import chess
    from halfblind.core import HalfBlindBoard, half_blind_ascii

    shadow = HalfBlindBoard.from_board(chess.Board())
    shadow.mark_half_blind("e2")
    print(half_blind_ascii(shadow))
"""

from halfblind.core.board import HalfBlindBoard, board_grid
from halfblind.core.enums import MoveFlag
from halfblind.core.move import HalfBlindMove
from halfblind.core.notation import (
    STARTING_FEN,
    GhostToken,
    InvalidPositionError,
    ParsedPosition,
    format_position,
    parse_position,
)
from halfblind.core.piece import HalfBlindPiece
from halfblind.core.render import half_blind_ascii
from halfblind.core.types import (
    Coords,
    Square,
    coords_to_square,
    is_valid_square,
    square_index,
    square_name,
    square_to_coords,
)

__all__ = [
    # Enums / flags
    "MoveFlag",
    # Types / helpers
    "Coords",
    "Square",
    "coords_to_square",
    "is_valid_square",
    "square_index",
    "square_name",
    "square_to_coords",
    # Domain objects
    "HalfBlindBoard",
    "HalfBlindMove",
    "HalfBlindPiece",
    "board_grid",
    # Rendering
    "half_blind_ascii",
    # Notation
    "STARTING_FEN",
    "GhostToken",
    "InvalidPositionError",
    "ParsedPosition",
    "format_position",
    "parse_position",
]
