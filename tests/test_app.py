"""Tests for command-line parsing of the application entry point."""

from __future__ import annotations

from halfblind.app import _parse_args
from halfblind.core.notation import STARTING_FEN


def test_defaults() -> None:
    args = _parse_args([])
    assert args.position == STARTING_FEN
    assert args.strict is False
    assert args.log_level == "WARNING"


def test_options() -> None:
    args = _parse_args(
        ["--position", f"0 {STARTING_FEN}", "--strict", "--log-level", "debug"]
    )
    assert args.position == f"0 {STARTING_FEN}"
    assert args.strict is True
    assert args.log_level == "debug"


def test_theme_choice() -> None:
    assert _parse_args(["--theme", "slate"]).theme == "slate"
    assert _parse_args([]).theme == "default"
