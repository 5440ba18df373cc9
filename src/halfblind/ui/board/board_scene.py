"""BoardScene — QGraphicsScene that draws the half-blind shadow board."""

from __future__ import annotations

import chess
from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from halfblind.core.board import HalfBlindBoard
from halfblind.core.move import HalfBlindMove
from halfblind.core.types import Square, coords_to_square, square_to_coords
from halfblind.ui.board.piece_item import PieceItem
from halfblind.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the squares, coordinates, ghost tints and piece items.

    The scene only knows the shadow board, never the real position, so it
    cannot leak where a half-blind piece went.

    Signals:
        move_made(str, str): origin and destination squares picked by two clicks.
    """

    move_made = pyqtSignal(str, str)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._shadow: HalfBlindBoard | None = None
        self._turn: chess.Color = chess.WHITE
        self._flipped = False

        # Interaction state
        self._selected_sq: Square | None = None
        self._interactive = True
        self._show_coordinates = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._ghost_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, shadow: HalfBlindBoard, turn: chess.Color) -> None:
        """Show *shadow* with *turn* to move (full redraw of pieces)."""
        self._shadow = shadow
        self._turn = turn
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click-to-move."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        if self._shadow is not None:
            self._sync_pieces()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._shadow is not None:
            self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def highlight_last_move(self, move: HalfBlindMove | None) -> None:
        """Highlight origin/destination of a visible move.

        Half-blind moves are not highlighted: their destination is hidden.
        """
        self._clear_items(self._last_move_highlights)
        if move is None or move.half_blind:
            return
        for sq, color in [
            (move.from_square, self._theme.last_move_from),
            (move.to_square, self._theme.last_move_to),
        ]:
            rect = self._make_highlight(sq, color)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    def ghost_items(self) -> list[PieceItem]:
        return [item for item in self._piece_items.values() if item.is_ghost]

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for row in range(8):
            for col in range(8):
                sq = coords_to_square(row, col)
                vc, vr = self._visual_coords(row, col)
                is_light = (row + col) % 2 == 0
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(vc * t, vr * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[sq] = rect

                text_color = self._theme.coord_light if is_light else self._theme.coord_dark
                # Rank digits on the left edge, file letters on the bottom edge
                if vc == 0:
                    self._add_coord(sq[1], vc * t + 2, vr * t + 1, font, text_color)
                if vr == 7:
                    self._add_coord(
                        sq[0], vc * t + t - 12, vr * t + t - 16, font, text_color
                    )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items and ghost tints from the shadow board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self._clear_items(self._ghost_items)

        if self._shadow is None:
            return

        t = self.TILE
        for row, pieces in enumerate(self._shadow):
            for col, piece in enumerate(pieces):
                if piece is None:
                    continue
                sq = coords_to_square(row, col)
                item = PieceItem(
                    piece, sq, t, ghost_opacity=self._theme.ghost_opacity
                )
                vc, vr = self._visual_coords(row, col)
                item.setPos(vc * t + item.margin, vr * t + item.margin)
                self.addItem(item)
                self._piece_items[sq] = item
                if piece.half_blind:
                    tint = self._make_highlight(sq, self._theme.ghost_square)
                    tint.setZValue(0.4)
                    self._ghost_items.append(tint)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._shadow is None or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
            return super().mousePressEvent(event)

        piece = self._shadow[sq]
        if piece is not None and piece.color == self._turn and not piece.half_blind:
            self._select_square(sq)
        elif self._selected_sq is not None:
            origin = self._selected_sq
            self._clear_selection()
            self.move_made.emit(origin, sq)
            return
        else:
            self._clear_selection()

        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()
        self._selected_sq = sq
        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._clear_items(self._highlight_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, row: int, col: int) -> tuple[int, int]:
        """Convert grid row/col to visual column/row."""
        if self._flipped:
            return 7 - col, 7 - row
        return col, row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → square name."""
        t = self.TILE
        vc = int(pos.x() // t)
        vr = int(pos.y() // t)
        if not (0 <= vc < 8 and 0 <= vr < 8):
            return None
        if self._flipped:
            return coords_to_square(7 - vr, 7 - vc)
        return coords_to_square(vr, vc)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(*square_to_coords(sq))
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
