"""MainWindow — shadow board plus move entry and position controls."""

from __future__ import annotations

import logging

import chess
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from halfblind.core.move import HalfBlindMove
from halfblind.core.notation import STARTING_FEN
from halfblind.game.config import TrackerConfig
from halfblind.game.tracker import HalfBlindChess, MoveInput
from halfblind.ui.board.board_view import BoardView
from halfblind.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window.

    Owns one :class:`HalfBlindChess` game; the board only ever shows its
    shadow board.
    """

    def __init__(
        self,
        position: str = STARTING_FEN,
        *,
        config: TrackerConfig | None = None,
        theme: BoardTheme | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Half-Blind Chess")
        self.setMinimumSize(760, 520)

        self._game = HalfBlindChess(position, config=config)
        self._last_move: HalfBlindMove | None = None

        self._setup_ui()
        if theme is not None:
            self._board_view.board_scene.set_theme(theme)
        self._connect_signals()
        self._refresh()

    @property
    def game(self) -> HalfBlindChess:
        return self._game

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)

        self._status_label = QLabel()
        self._status_label.setWordWrap(True)
        right.addWidget(self._status_label)

        self._move_edit = QLineEdit()
        self._move_edit.setPlaceholderText("Move (e.g. Nf3)")
        right.addWidget(self._move_edit)

        self._history_view = QPlainTextEdit()
        self._history_view.setReadOnly(True)
        right.addWidget(self._history_view, stretch=1)

        self._position_edit = QLineEdit()
        self._position_edit.setPlaceholderText("Position: <marker> <fen>")
        right.addWidget(self._position_edit)

        buttons = QHBoxLayout()
        self._load_button = QPushButton("Load")
        self._undo_button = QPushButton("Undo")
        self._new_button = QPushButton("New")
        self._flip_button = QPushButton("Flip")
        for button in (
            self._load_button,
            self._undo_button,
            self._new_button,
            self._flip_button,
        ):
            buttons.addWidget(button)
        right.addLayout(buttons)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(280)
        root.addWidget(right_widget)

    def _connect_signals(self) -> None:
        self._board_view.move_made.connect(self._on_board_move)
        self._move_edit.returnPressed.connect(self._on_move_entered)
        self._load_button.clicked.connect(
            lambda: self.load_position(self._position_edit.text())
        )
        self._undo_button.clicked.connect(self.undo_move)
        self._new_button.clicked.connect(self.new_game)
        self._flip_button.clicked.connect(self._board_view.flip)

    # ── Actions ──────────────────────────────────────────────────────────

    def submit_move(self, move: MoveInput) -> HalfBlindMove | None:
        """Play *move*; the board refreshes only from the shadow board."""
        result = self._game.move(move)
        if result is None:
            self._refresh(message=f"Illegal move: {self._describe(move)}")
            return None
        self._last_move = result
        self._refresh()
        return result

    def load_position(self, text: str) -> bool:
        """Load a combined position string; report errors in the status line."""
        try:
            self._game.load(text)
        except ValueError as exc:
            _LOGGER.warning("Could not load position %r: %s", text, exc)
            self._refresh(message=f"Invalid position: {exc}")
            return False
        self._last_move = None
        self._refresh()
        return True

    def undo_move(self) -> None:
        self._game.undo()
        records = self._game.move_records
        self._last_move = records[-1] if records else None
        self._refresh()

    def new_game(self) -> None:
        self._game.reset()
        self._last_move = None
        self._refresh()

    # ── Internal ─────────────────────────────────────────────────────────

    def _on_move_entered(self) -> None:
        text = self._move_edit.text().strip()
        if not text:
            return
        if self.submit_move(text) is not None:
            self._move_edit.clear()

    def _on_board_move(self, origin: str, target: str) -> None:
        # A misclick is not a move attempt.
        if not self._game.is_legal((origin, target)):
            self._refresh(message=f"Not a legal destination: {origin}-{target}")
            return
        self.submit_move((origin, target))

    @staticmethod
    def _describe(move: MoveInput) -> str:
        if isinstance(move, tuple):
            return "-".join(str(part) for part in move if part)
        return str(move)

    def _status_text(self) -> str:
        game = self._game
        side = "White" if game.turn == chess.WHITE else "Black"
        if game.is_checkmate():
            return f"Checkmate. {side} is mated."
        if game.is_draw():
            return "Draw."
        text = f"{side} to move."
        if game.is_check():
            text += " Check!"
        if game.last_move_half_blind():
            text += " Last move was half-blind."
        return text

    def _refresh(self, message: str | None = None) -> None:
        scene = self._board_view.board_scene
        scene.set_board(self._game.half_blind_board(), self._game.turn)
        scene.highlight_last_move(self._last_move)
        scene.set_interactive(not self._game.is_game_over())

        self._status_label.setText(message or self._status_text())
        self._history_view.setPlainText(
            " ".join(
                f"{record.from_square}-??" if record.half_blind else record.san
                for record in self._game.move_records
            )
        )
        self._position_edit.setText(self._game.position())
        self._undo_button.setEnabled(bool(self._game.move_records))
