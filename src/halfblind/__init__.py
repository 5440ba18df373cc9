"""Half-blind chess: every third ply is only half visible."""

from halfblind.core import (
    HalfBlindBoard,
    HalfBlindMove,
    HalfBlindPiece,
    InvalidPositionError,
    MoveFlag,
    half_blind_ascii,
)
from halfblind.game import FenValidation, HalfBlindChess, TrackerConfig

__all__ = [
    "FenValidation",
    "HalfBlindBoard",
    "HalfBlindChess",
    "HalfBlindMove",
    "HalfBlindPiece",
    "InvalidPositionError",
    "MoveFlag",
    "TrackerConfig",
    "half_blind_ascii",
]

__version__ = "0.1.0"
