"""Game layer — the half-blind tracker and its configuration.

Quick start::

    from halfblind.game import HalfBlindChess

    game = HalfBlindChess()
    game.move("e4")
    result = game.move("e5")
    assert result is not None and result.half_blind
    print(game.half_blind_ascii())
"""

from halfblind.game.config import TrackerConfig
from halfblind.game.tracker import FenValidation, HalfBlindChess, MoveInput

__all__ = [
    "FenValidation",
    "HalfBlindChess",
    "MoveInput",
    "TrackerConfig",
]
