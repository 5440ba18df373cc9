"""PieceItem — a shadow-board piece on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtSvgWidgets import QGraphicsSvgItem
from PyQt6.QtWidgets import QGraphicsItem

from halfblind.core.piece import HalfBlindPiece
from halfblind.core.types import Square
from halfblind.ui.resources import piece_renderer


class PieceItem(QGraphicsSvgItem):
    """A single piece as the half-blind viewer sees it.

    Ghost pieces (``piece.half_blind``) are drawn translucent.
    """

    _MARGIN_RATIO = 0.03

    def __init__(
        self,
        piece: HalfBlindPiece,
        square: Square,
        tile_size: int,
        *,
        ghost_opacity: float = 0.35,
    ) -> None:
        super().__init__()
        self.piece = piece
        self.square = square
        self._tile_size = tile_size
        self._margin = 0.0

        self.setSharedRenderer(piece_renderer(piece.piece_type, piece.color))
        self.setTransformOriginPoint(0.0, 0.0)
        self.setCacheMode(QGraphicsItem.CacheMode.NoCache)
        self._update_size(tile_size)

        self.setOpacity(ghost_opacity if piece.half_blind else 1.0)
        self.setZValue(1)

    @property
    def is_ghost(self) -> bool:
        return self.piece.half_blind

    @property
    def margin(self) -> float:
        """Inner margin to keep the piece away from tile edges."""
        return self._margin

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        self._margin = float(size) * self._MARGIN_RATIO
        draw_size = max(float(size) - 2.0 * self._margin, 1.0)

        renderer = self.renderer()
        if renderer is None:
            return
        bounds = self.boundingRect()
        width = float(bounds.width()) or float(renderer.defaultSize().width()) or 1.0
        height = float(bounds.height()) or float(renderer.defaultSize().height()) or 1.0
        scale = min(draw_size / width, draw_size / height)
        self.setScale(scale)
