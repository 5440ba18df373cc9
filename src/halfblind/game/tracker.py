"""HalfBlindChess — python-chess game with half-blind ply tracking.

Every third ply (the 2nd, 5th, 8th, …) is *half-blind*: the rules engine
plays it normally, but the shadow board keeps showing the moved piece on
its origin square, flagged, until the next visible ply reveals the board.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import TypeAlias

import chess
import chess.pgn

from halfblind.core.board import Grid, HalfBlindBoard, board_grid
from halfblind.core.enums import MoveFlag
from halfblind.core.move import HalfBlindMove
from halfblind.core.notation import (
    STARTING_FEN,
    GhostToken,
    InvalidPositionError,
    format_position,
    parse_position,
)
from halfblind.core.render import half_blind_ascii
from halfblind.core.types import Square, square_index
from halfblind.game.config import TrackerConfig

_LOGGER = logging.getLogger(__name__)

MoveInput: TypeAlias = (
    str | chess.Move | tuple[Square, Square] | tuple[Square, Square, str | None]
)


@dataclass(frozen=True, slots=True)
class FenValidation:
    """Outcome of :meth:`HalfBlindChess.validate_fen`."""

    valid: bool
    error: str = "No errors."


@dataclass(slots=True)
class _Snapshot:
    """Tracker state right before a ply, for undo."""

    shadow: HalfBlindBoard
    ghosts: list[GhostToken]
    ply: int
    last_half_blind: bool


def _ply_from_board(board: chess.Board) -> int:
    ply = board.fullmove_number * 2 - 1
    if board.turn == chess.BLACK:
        ply += 1
    return ply


class HalfBlindChess:
    """Half-blind chess game.

    Wraps a :class:`chess.Board` (the authoritative position) and keeps a
    :class:`HalfBlindBoard` showing what a half-blind viewer may see.

    This is a pure logic class, owned and driven by a single caller.
    """

    __slots__ = (
        "_config",
        "_board",
        "_shadow",
        "_ply",
        "_last_half_blind",
        "_ghosts",
        "_records",
        "_undo_stack",
        "_headers",
        "_comments",
    )

    def __init__(
        self, position: str = STARTING_FEN, *, config: TrackerConfig | None = None
    ) -> None:
        self._config = config or TrackerConfig()
        self._board = chess.Board()
        self._shadow = HalfBlindBoard.from_board(self._board)
        self._ply = 1
        self._last_half_blind = False
        self._ghosts: list[GhostToken] = []
        self._records: list[HalfBlindMove] = []
        self._undo_stack: list[_Snapshot] = []
        self._headers: dict[str, str] = {}
        self._comments: dict[str, str] = {}
        self.load(position)

    # ── Position loading / export ────────────────────────────────────────

    def load(self, position: str) -> None:
        """Load a combined position string (``<marker> <fen>``) or a bare FEN.

        Raises:
            InvalidPositionError: bad marker, bad FEN, or a ghost token that
                does not fit the position. The game is left untouched.
        """
        parsed = parse_position(position)
        try:
            board = chess.Board(parsed.fen)
        except ValueError as exc:
            raise InvalidPositionError(f"Invalid FEN {parsed.fen!r}: {exc}") from exc

        if parsed.ghost is not None:
            shadow = HalfBlindBoard.with_ghost(board, parsed.ghost)
            ghosts = [parsed.ghost]
        else:
            shadow = HalfBlindBoard.from_board(board)
            ghosts = []

        self._board = board
        self._shadow = shadow
        self._ghosts = ghosts
        self._ply = _ply_from_board(board)
        self._last_half_blind = parsed.half_blind
        self._records.clear()
        self._undo_stack.clear()
        self._comments.clear()
        _LOGGER.debug("Loaded position %r at ply %d", position, self._ply)

    def position(self) -> str:
        """Combined position string; round-trips through :meth:`load`."""
        ghost = self._ghosts[0] if len(self._ghosts) == 1 else None
        return format_position(
            self._board.fen(), half_blind=self.last_move_half_blind(), ghost=ghost
        )

    def fen(self) -> str:
        """Authoritative position in plain FEN."""
        return self._board.fen()

    def reset(self) -> None:
        """Back to the standard starting position, ply 1."""
        self.load(STARTING_FEN)
        self._headers.clear()

    @staticmethod
    def validate_fen(fen: str) -> FenValidation:
        try:
            chess.Board(fen)
        except ValueError as exc:
            return FenValidation(False, str(exc))
        return FenValidation(True)

    # ── Moves ────────────────────────────────────────────────────────────

    def move(self, move: MoveInput) -> HalfBlindMove | None:
        """Play *move* and classify it.

        *move* is SAN (``"Nf3"``), a ``(from, to[, promotion])`` tuple of
        square names, or a :class:`chess.Move`.

        Returns ``None`` if the rules engine rejects the move; the shadow
        board is then untouched.
        """
        candidate = self._resolve(move)
        if candidate is None:
            _LOGGER.debug("Rejected move %r in %s", move, self._board.fen())
            if self._config.advance_on_illegal:
                self._ply += 1
            return None

        record = HalfBlindMove.from_board(
            self._board, candidate, half_blind=self._ply % 3 == 2
        )
        self._undo_stack.append(
            _Snapshot(
                self._shadow.copy(), list(self._ghosts), self._ply, self._last_half_blind
            )
        )
        self._board.push(candidate)
        self._records.append(record)
        self._ply += 1
        self._last_half_blind = record.half_blind
        self._update_shadow(record)
        return record

    def undo(self) -> HalfBlindMove | None:
        """Take back the last ply, restoring the shadow board and ply counter
        exactly as they were before it. Returns ``None`` if nothing to undo."""
        if not self._records:
            return None
        snapshot = self._undo_stack.pop()
        self._board.pop()
        self._shadow = snapshot.shadow
        self._ghosts = snapshot.ghosts
        self._ply = snapshot.ply
        self._last_half_blind = snapshot.last_half_blind
        return self._records.pop()

    def is_legal(self, move: MoveInput) -> bool:
        """Whether :meth:`move` would accept *move*. Does not count as an attempt."""
        return self._resolve(move) is not None

    def moves(self, square: Square | None = None) -> list[str]:
        """Legal moves in SAN, optionally only those starting on *square*."""
        legal = list(self._board.legal_moves)
        if square is not None:
            origin = square_index(square)
            legal = [m for m in legal if m.from_square == origin]
        return [self._board.san(m) for m in legal]

    def history(self) -> list[str]:
        """SAN of every ply played since the last load."""
        return [record.san for record in self._records]

    @property
    def move_records(self) -> tuple[HalfBlindMove, ...]:
        return tuple(self._records)

    def _resolve(self, move: MoveInput) -> chess.Move | None:
        try:
            if isinstance(move, chess.Move):
                candidate = move
            elif isinstance(move, str):
                candidate = self._board.parse_san(move.strip())
            else:
                candidate = self._move_from_endpoints(*move)
        except (ValueError, TypeError):
            return None
        # Null moves are falsy.
        if not candidate or not self._board.is_legal(candidate):
            return None
        return candidate

    def _move_from_endpoints(
        self,
        from_square: Square,
        to_square: Square,
        promotion: str | chess.PieceType | None = None,
    ) -> chess.Move:
        origin = square_index(from_square)
        target = square_index(to_square)
        if isinstance(promotion, str):
            promotion = chess.PIECE_SYMBOLS.index(promotion.lower())
        if (
            promotion is None
            and self._board.piece_type_at(origin) == chess.PAWN
            and chess.square_rank(target) in (0, 7)
        ):
            promotion = self._config.default_promotion
        return chess.Move(origin, target, promotion)

    def _update_shadow(self, record: HalfBlindMove) -> None:
        if not record.half_blind:
            self._shadow = HalfBlindBoard.from_board(self._board)
            self._ghosts = []
            return

        if self._shadow.mark_half_blind(record.from_square) is None:
            return
        captured = None if record.flags & MoveFlag.EN_PASSANT else record.captured
        self._ghosts.append(
            GhostToken(record.from_square, record.to_square, record.promotion, captured)
        )

    # ── Half-blind queries ───────────────────────────────────────────────

    def last_move_half_blind(self) -> bool:
        """Whether the most recent ply was half-blind.

        Restored from the position marker on load; a bare FEN counts as ``0``.
        """
        return self._last_half_blind

    def half_blind_board(self) -> HalfBlindBoard:
        """Copy of the shadow board."""
        return self._shadow.copy()

    def half_blind_ascii(self) -> str:
        return half_blind_ascii(self._shadow)

    @property
    def ghosts(self) -> tuple[GhostToken, ...]:
        """Half-blind plies whose ghost is still on the shadow board."""
        return tuple(self._ghosts)

    @property
    def ply_number(self) -> int:
        """Ply counter: the number the next ply will be classified with."""
        return self._ply

    @property
    def config(self) -> TrackerConfig:
        return self._config

    # ── Authoritative board (pass-through) ───────────────────────────────

    def board(self) -> Grid:
        """8×8 snapshot of the real position, rank 8 first."""
        return board_grid(self._board)

    def chess_board(self) -> chess.Board:
        """Copy of the underlying rules-engine board, move stack included."""
        return self._board.copy()

    def ascii(self) -> str:
        return str(self._board)

    @property
    def turn(self) -> chess.Color:
        return self._board.turn

    def is_check(self) -> bool:
        return self._board.is_check()

    def is_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def is_stalemate(self) -> bool:
        return self._board.is_stalemate()

    def is_insufficient_material(self) -> bool:
        return self._board.is_insufficient_material()

    def is_threefold_repetition(self) -> bool:
        return self._board.is_repetition(3)

    def is_draw(self) -> bool:
        """Fifty-move rule, stalemate, insufficient material or threefold."""
        return (
            self._board.halfmove_clock >= 100
            or self.is_stalemate()
            or self.is_insufficient_material()
            or self.is_threefold_repetition()
        )

    def is_game_over(self) -> bool:
        return self.is_checkmate() or self.is_draw()

    def outcome(self) -> chess.Outcome | None:
        return self._board.outcome(claim_draw=True)

    # ── Position editing ─────────────────────────────────────────────────

    def get(self, square: Square) -> chess.Piece | None:
        return self._board.piece_at(square_index(square))

    def put(self, piece: chess.Piece | str, square: Square) -> bool:
        """Place *piece* (or its FEN letter) on *square*.

        Fails, leaving the board unchanged, on a bad piece or square or when
        it would add a second king of one color.
        """
        try:
            if isinstance(piece, str):
                piece = chess.Piece.from_symbol(piece)
            target = square_index(square)
        except ValueError:
            return False
        if piece.piece_type == chess.KING:
            king = self._board.king(piece.color)
            if king is not None and king != target:
                return False
        self._board.set_piece_at(target, piece)
        self._new_setup()
        return True

    def remove(self, square: Square) -> chess.Piece | None:
        piece = self._board.remove_piece_at(square_index(square))
        if piece is not None:
            self._new_setup()
        return piece

    def clear(self) -> None:
        """Empty board, white to move."""
        self._board.clear()
        self._new_setup()

    @staticmethod
    def square_color(square: Square) -> str:
        """``'light'`` or ``'dark'``."""
        if chess.BB_LIGHT_SQUARES & chess.BB_SQUARES[square_index(square)]:
            return "light"
        return "dark"

    def _new_setup(self) -> None:
        """An edited position starts over: no history, shadow fully revealed."""
        self._board.clear_stack()
        self._records.clear()
        self._undo_stack.clear()
        self._shadow = HalfBlindBoard.from_board(self._board)
        self._ghosts = []
        self._ply = _ply_from_board(self._board)
        self._last_half_blind = False

    # ── PGN ──────────────────────────────────────────────────────────────

    def header(self, **fields: str) -> dict[str, str]:
        """Set PGN header fields; returns all headers."""
        self._headers.update(fields)
        return dict(self._headers)

    def pgn(self, max_width: int | None = None) -> str:
        """The game in PGN, with headers and position comments."""
        game = chess.pgn.Game.from_board(self._board)
        for key, value in self._headers.items():
            game.headers[key] = value
        for node in (game, *game.mainline()):
            comment = self._comments.get(node.board().fen())
            if comment:
                node.comment = comment
        exporter = chess.pgn.StringExporter(
            headers=True, variations=True, comments=True, columns=max_width
        )
        return game.accept(exporter)

    def load_pgn(self, text: str) -> None:
        """Replay the mainline of a PGN game, classifying each ply.

        Raises:
            ValueError: no game found or the PGN contains errors. The
                current game is left untouched.
        """
        game = chess.pgn.read_game(io.StringIO(text))
        if game is None:
            raise ValueError("No game found in PGN")
        if game.errors:
            raise ValueError(f"Invalid PGN: {game.errors[0]}")

        replay = HalfBlindChess(game.board().fen(), config=self._config)
        if game.comment:
            replay.set_comment(game.comment)
        for node in game.mainline():
            if replay.move(node.move) is None:
                raise ValueError(f"Illegal move in PGN: {node.move}")
            if node.comment:
                replay.set_comment(node.comment)
        replay._headers = dict(game.headers)

        for name in self.__slots__:
            setattr(self, name, getattr(replay, name))

    # ── Comments ─────────────────────────────────────────────────────────

    def get_comment(self) -> str | None:
        return self._comments.get(self._board.fen())

    def set_comment(self, comment: str) -> None:
        self._comments[self._board.fen()] = comment

    def delete_comment(self) -> str | None:
        return self._comments.pop(self._board.fen(), None)

    def get_comments(self) -> list[tuple[str, str]]:
        """``(fen, comment)`` pairs in the order they were set."""
        return list(self._comments.items())

    def delete_comments(self) -> list[tuple[str, str]]:
        removed = self.get_comments()
        self._comments.clear()
        return removed

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"HalfBlindChess({self.position()!r})"
