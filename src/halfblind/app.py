"""Application entry point.

Usage:
    halfblind                                   # standard start
    halfblind --position "e7e5 <fen>"           # resume a saved position
    halfblind --strict                          # illegal attempts do not count as plies
    halfblind --theme slate                     # grey board
"""

from __future__ import annotations

import argparse
import logging
import sys

from halfblind.core.notation import STARTING_FEN
from halfblind.game.config import TrackerConfig


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play half-blind chess.")
    parser.add_argument(
        "--position",
        default=STARTING_FEN,
        help="combined position string (<marker> <fen>) or a plain FEN",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="do not advance the half-blind cycle on illegal move attempts",
    )
    parser.add_argument(
        "--theme",
        choices=("default", "slate"),
        default="default",
        help="board colour scheme",
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Launch the Half-Blind Chess window."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from halfblind.ui.bootstrap import run_application

    config = TrackerConfig.strict() if args.strict else TrackerConfig()
    sys.exit(
        run_application(
            sys.argv[:1], position=args.position, config=config, theme=args.theme
        )
    )


if __name__ == "__main__":
    main()
