"""Board snapshots and the half-blind shadow board."""

from __future__ import annotations

from collections.abc import Iterator

import chess

from halfblind.core.notation import GhostToken, InvalidPositionError
from halfblind.core.piece import HalfBlindPiece
from halfblind.core.types import (
    Coords,
    Square,
    coords_to_index,
    coords_to_square,
    index_to_coords,
    square_index,
    square_to_coords,
)

Grid = list[list[chess.Piece | None]]


def board_grid(board: chess.Board) -> Grid:
    """8×8 snapshot of *board*, row 0 = rank 8, col 0 = file a."""
    return [
        [board.piece_at(coords_to_index(row, col)) for col in range(8)]
        for row in range(8)
    ]


class HalfBlindBoard:
    """Mutable 8×8 grid of :class:`HalfBlindPiece`.

    Indexable by square name (``'e4'``) or grid coordinates (``(4, 4)``).
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[HalfBlindPiece | None]] = [
            [None] * 8 for _ in range(8)
        ]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_board(cls, board: chess.Board) -> HalfBlindBoard:
        """Fully revealed copy of *board*: every piece has ``half_blind=False``."""
        hb = cls()
        for sq, piece in board.piece_map().items():
            row, col = index_to_coords(sq)
            hb._grid[row][col] = HalfBlindPiece.from_piece(piece)
        return hb

    @classmethod
    def with_ghost(cls, board: chess.Board, ghost: GhostToken) -> HalfBlindBoard:
        """Rebuild the shadow board that was shown right after a half-blind ply.

        *board* is the live position after that ply. The moved piece is put
        back on its origin square, flagged half-blind, and whatever the ply
        removed (captured piece, en-passant victim, castling rook) is put
        back where it stood before.
        """
        from_sq = square_index(ghost.from_square)
        to_sq = square_index(ghost.to_square)
        moved = board.piece_at(to_sq)
        if moved is None or board.piece_at(from_sq) is not None:
            raise InvalidPositionError(
                f"Ghost {ghost} does not match position {board.fen()!r}"
            )
        if moved.color == board.turn:
            raise InvalidPositionError(
                f"Ghost {ghost} names a piece of the side to move in {board.fen()!r}"
            )
        if ghost.promotion is not None and moved.piece_type != ghost.promotion:
            raise InvalidPositionError(
                f"Ghost {ghost} promotes to a piece not found on {ghost.to_square}"
            )

        hb = cls.from_board(board)
        origin = (
            chess.Piece(chess.PAWN, moved.color)
            if ghost.promotion is not None
            else moved
        )
        opponent = not moved.color

        if ghost.captured is not None:
            hb[ghost.to_square] = HalfBlindPiece(ghost.captured, opponent)
        else:
            hb[ghost.to_square] = None

        file_delta = chess.square_file(to_sq) - chess.square_file(from_sq)
        if origin.piece_type == chess.PAWN and file_delta and ghost.captured is None:
            victim = chess.square(chess.square_file(to_sq), chess.square_rank(from_sq))
            hb[victim] = HalfBlindPiece(chess.PAWN, opponent)
        elif origin.piece_type == chess.KING and abs(file_delta) == 2:
            rank = chess.square_rank(from_sq)
            rook_from, rook_to = (7, 5) if file_delta > 0 else (0, 3)
            rook = hb[chess.square(rook_to, rank)]
            hb[chess.square(rook_to, rank)] = None
            hb[chess.square(rook_from, rank)] = rook

        hb[ghost.from_square] = HalfBlindPiece.from_piece(origin, half_blind=True)
        return hb

    # -- Element access -----------------------------------------------------

    def _coords(self, key: Square | Coords | chess.Square) -> Coords:
        if isinstance(key, str):
            return square_to_coords(key)
        if isinstance(key, tuple):
            row, col = key
            coords_to_square(row, col)  # bounds check
            return row, col
        return index_to_coords(key)

    def __getitem__(self, key: Square | Coords | chess.Square) -> HalfBlindPiece | None:
        row, col = self._coords(key)
        return self._grid[row][col]

    def __setitem__(
        self, key: Square | Coords | chess.Square, piece: HalfBlindPiece | None
    ) -> None:
        row, col = self._coords(key)
        self._grid[row][col] = piece

    def __iter__(self) -> Iterator[list[HalfBlindPiece | None]]:
        """Rows from rank 8 down to rank 1 (copies)."""
        return (row.copy() for row in self._grid)

    # -- Half-blind helpers -------------------------------------------------

    def mark_half_blind(self, key: Square | Coords | chess.Square) -> HalfBlindPiece | None:
        """Flag the piece on *key* as half-blind, leaving it where it is.

        Returns the flagged piece, or ``None`` if the square is empty.
        """
        piece = self[key]
        if piece is None:
            return None
        flagged = piece.as_half_blind()
        self[key] = flagged
        return flagged

    def ghost_squares(self) -> list[Square]:
        """Squares holding a half-blind piece, in reading order (a8 … h1)."""
        return [
            coords_to_square(row, col)
            for row in range(8)
            for col in range(8)
            if (p := self._grid[row][col]) is not None and p.half_blind
        ]

    def occupied_squares(self) -> list[Square]:
        return [
            coords_to_square(row, col)
            for row in range(8)
            for col in range(8)
            if self._grid[row][col] is not None
        ]

    def matches(self, board: chess.Board) -> bool:
        """True when the grid shows exactly *board* with no ghosts."""
        return self == HalfBlindBoard.from_board(board)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> HalfBlindBoard:
        hb = HalfBlindBoard()
        hb._grid = [row.copy() for row in self._grid]
        return hb

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HalfBlindBoard):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
