"""Tests for BoardScene rendering of the shadow board."""

from __future__ import annotations

import chess
import pytest
from PyQt6.QtCore import QPointF

from halfblind.core.board import HalfBlindBoard
from halfblind.core.move import HalfBlindMove
from halfblind.ui.board.board_scene import BoardScene
from halfblind.ui.board.board_view import BoardView
from halfblind.ui.styles.theme import BoardTheme


def _shadow_after_e4_e5() -> HalfBlindBoard:
    board = chess.Board()
    board.push_san("e4")
    shadow = HalfBlindBoard.from_board(board)
    shadow.mark_half_blind("e7")
    return shadow


def test_pos_to_square_respects_orientation() -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == "a8"

    scene.set_flipped(True)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == "h1"
    assert scene.is_flipped()


def test_pos_outside_board_is_none() -> None:
    scene = BoardScene()
    assert scene._pos_to_square(QPointF(8 * scene.TILE + 1, 0)) is None
    assert scene._pos_to_square(QPointF(-1, -1)) is None


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert scene._coord_items

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_set_board_creates_one_item_per_piece() -> None:
    scene = BoardScene()
    scene.set_board(HalfBlindBoard.from_board(chess.Board()), chess.WHITE)
    assert len(scene._piece_items) == 32
    assert scene.ghost_items() == []


def test_ghost_is_translucent_and_tinted() -> None:
    scene = BoardScene()
    scene.set_board(_shadow_after_e4_e5(), chess.WHITE)

    ghosts = scene.ghost_items()
    assert [item.square for item in ghosts] == ["e7"]
    assert ghosts[0].opacity() == pytest.approx(BoardTheme.default().ghost_opacity)
    assert scene._piece_items["e4"].opacity() == pytest.approx(1.0)
    assert len(scene._ghost_items) == 1
    # Nothing is drawn on the hidden destination.
    assert "e5" not in scene._piece_items


def test_redraw_clears_previous_ghosts() -> None:
    scene = BoardScene()
    scene.set_board(_shadow_after_e4_e5(), chess.WHITE)
    scene.set_board(HalfBlindBoard.from_board(chess.Board()), chess.WHITE)
    assert scene._ghost_items == []
    assert scene.ghost_items() == []


def test_flip_keeps_pieces() -> None:
    scene = BoardScene()
    scene.set_board(_shadow_after_e4_e5(), chess.WHITE)
    scene.set_flipped(True)
    assert len(scene._piece_items) == 32
    assert [item.square for item in scene.ghost_items()] == ["e7"]


def test_highlight_skips_half_blind_moves() -> None:
    scene = BoardScene()
    board = chess.Board()
    visible = HalfBlindMove.from_board(board, chess.Move.from_uci("e2e4"))
    hidden = HalfBlindMove.from_board(
        board, chess.Move.from_uci("e2e4"), half_blind=True
    )

    scene.highlight_last_move(visible)
    assert len(scene._last_move_highlights) == 2

    scene.highlight_last_move(hidden)
    assert scene._last_move_highlights == []

    scene.highlight_last_move(None)
    assert scene._last_move_highlights == []


def test_selection_cleared_when_not_interactive() -> None:
    scene = BoardScene()
    scene.set_board(HalfBlindBoard.from_board(chess.Board()), chess.WHITE)
    scene._select_square("e2")
    assert scene._highlight_items

    scene.set_interactive(False)
    assert scene._selected_sq is None
    assert scene._highlight_items == []


def test_theme_change_redraws_squares() -> None:
    scene = BoardScene()
    theme = BoardTheme.slate()
    scene.set_theme(theme)
    assert scene._square_items["a8"].brush().color() == theme.light_square
    assert scene._square_items["a1"].brush().color() == theme.dark_square


def test_view_flip_and_click_forwarding() -> None:
    view = BoardView()
    received: list[tuple[str, str]] = []
    view.move_made.connect(lambda origin, target: received.append((origin, target)))

    view.flip()
    assert view.board_scene.is_flipped()

    view.board_scene.move_made.emit("g1", "f3")
    assert received == [("g1", "f3")]
