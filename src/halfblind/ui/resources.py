"""Piece rendering helpers backed by python-chess SVG drawings."""

from __future__ import annotations

import chess
import chess.svg
from PyQt6.QtCore import QByteArray
from PyQt6.QtSvg import QSvgRenderer

# Cache SVG renderers (one per piece/color)
_renderers: dict[tuple[chess.Color, chess.PieceType], QSvgRenderer] = {}


def _get_renderer(color: chess.Color, piece_type: chess.PieceType) -> QSvgRenderer:
    """Build and cache the QSvgRenderer for a piece."""
    key = (color, piece_type)
    if key not in _renderers:
        svg = chess.svg.piece(chess.Piece(piece_type, color))
        renderer = QSvgRenderer(QByteArray(svg.encode("utf-8")))
        if not renderer.isValid():
            raise ValueError(f"Invalid SVG drawing for {chess.Piece(piece_type, color)}")
        _renderers[key] = renderer
    return _renderers[key]


def piece_renderer(piece_type: chess.PieceType, color: chess.Color) -> QSvgRenderer:
    """Return a cached SVG renderer for a piece."""
    return _get_renderer(color, piece_type)
