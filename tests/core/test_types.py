"""Tests for square addressing helpers."""

import chess
import pytest

from halfblind.core.types import (
    coords_to_index,
    coords_to_square,
    index_to_coords,
    is_valid_square,
    square_index,
    square_name,
    square_to_coords,
)


class TestSquareCoords:
    def test_corners(self) -> None:
        assert square_to_coords("a8") == (0, 0)
        assert square_to_coords("h8") == (0, 7)
        assert square_to_coords("a1") == (7, 0)
        assert square_to_coords("h1") == (7, 7)

    def test_center(self) -> None:
        assert square_to_coords("e4") == (4, 4)
        assert square_to_coords("d5") == (3, 3)

    def test_inverse_on_every_square(self) -> None:
        for row in range(8):
            for col in range(8):
                assert square_to_coords(coords_to_square(row, col)) == (row, col)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E4", "e44"])
    def test_invalid_name_raises(self, name: str) -> None:
        assert not is_valid_square(name)
        with pytest.raises(ValueError, match="Invalid square"):
            square_to_coords(name)

    def test_out_of_range_coords_raise(self) -> None:
        with pytest.raises(ValueError):
            coords_to_square(8, 0)
        with pytest.raises(ValueError):
            coords_to_square(0, -1)


class TestSquareIndex:
    def test_matches_python_chess(self) -> None:
        assert square_index("e4") == chess.E4
        assert square_name(chess.H8) == "h8"

    def test_index_to_coords(self) -> None:
        assert index_to_coords(chess.A1) == (7, 0)
        assert index_to_coords(chess.H8) == (0, 7)
        assert coords_to_index(4, 4) == chess.E4

    def test_invalid_name_raises(self) -> None:
        with pytest.raises(ValueError):
            square_index("z0")
