"""Tests for the Board."""

import numpy as np
import pytest

from reversi.board import Board
from reversi.constants import BOARD_DIM, EMPTY, Player, Point, RuleVariant


class TestCreate:
    """Test board creation per rule variant."""

    def test_modern_seed(self, modern_board: Board) -> None:
        """SECOND on (3,3),(4,4); FIRST on (3,4),(4,3)."""
        assert modern_board.occupant_at(Point(3, 3)) is Player.SECOND
        assert modern_board.occupant_at(Point(4, 4)) is Player.SECOND
        assert modern_board.occupant_at(Point(3, 4)) is Player.FIRST
        assert modern_board.occupant_at(Point(4, 3)) is Player.FIRST
        assert modern_board.disk_count() == 4

    def test_historical_empty(self, historical_board: Board) -> None:
        """Historical board starts with no disks."""
        assert historical_board.disk_count() == 0
        assert np.all(historical_board.grid == EMPTY)

    def test_grid_layout(self, modern_board: Board) -> None:
        """Grid is indexed [row, col]."""
        assert modern_board.grid.shape == (BOARD_DIM, BOARD_DIM)
        # Point(3, 4) is column 3, row 4
        assert modern_board.grid[4, 3] == Player.FIRST

    def test_wrong_shape_rejected(self) -> None:
        """A non-8x8 grid raises."""
        with pytest.raises(ValueError, match="8x8"):
            Board(np.zeros((4, 4)))


class TestOccupancy:
    """Test reading and writing cells."""

    def test_occupant_empty(self, modern_board: Board) -> None:
        """Empty cells report EMPTY."""
        assert modern_board.occupant_at(Point(0, 0)) == EMPTY

    @pytest.mark.parametrize("point", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_out_of_range(self, modern_board: Board, point: tuple[int, int]) -> None:
        """Points off the board are contract violations."""
        with pytest.raises(ValueError, match="outside"):
            modern_board.occupant_at(Point(*point))

    def test_place(self, historical_board: Board) -> None:
        """Placing writes the player's disk."""
        historical_board.place(Point(0, 7), Player.FIRST)
        assert historical_board.occupant_at(Point(0, 7)) is Player.FIRST
        assert historical_board.grid[7, 0] == Player.FIRST

    def test_place_occupied_raises(self, modern_board: Board) -> None:
        """A cell can only be placed once."""
        with pytest.raises(ValueError, match="occupied"):
            modern_board.place(Point(3, 3), Player.FIRST)

    def test_flip_empty_raises(self, modern_board: Board) -> None:
        """Flipping never fills an empty cell."""
        with pytest.raises(ValueError, match="empty"):
            modern_board.flip(Point(0, 0), Player.FIRST)

    def test_flip_changes_owner(self, modern_board: Board) -> None:
        """Flipping turns a disk over."""
        modern_board.flip(Point(3, 3), Player.FIRST)
        assert modern_board.occupant_at(Point(3, 3)) is Player.FIRST

    def test_anchors_row_major(self, modern_board: Board) -> None:
        """Occupied points in row-major order."""
        assert modern_board.anchors() == [(3, 3), (4, 3), (3, 4), (4, 4)]


class TestScore:
    """Test score tally."""

    def test_initial_tally(self, modern_board: Board) -> None:
        """Two disks each at the start."""
        assert modern_board.score_tally() == {Player.FIRST: 2, Player.SECOND: 2}

    def test_tally_sums_to_disks(self, modern_board: Board) -> None:
        """Tally total equals occupied cells."""
        modern_board.place(Point(0, 0), Player.FIRST)
        tally = modern_board.score_tally()
        assert sum(tally.values()) == modern_board.disk_count() == 5

    def test_full_board(self) -> None:
        """A full board of one colour tallies 64 to nil."""
        board = Board(np.full((BOARD_DIM, BOARD_DIM), Player.SECOND.value))
        assert board.disk_count() == 64
        assert board.score_tally() == {Player.FIRST: 0, Player.SECOND: 64}


class TestCopyAndSnapshot:
    """Test copies and read-only snapshots."""

    def test_copy_independent(self, modern_board: Board) -> None:
        """Mutating a copy leaves the original alone."""
        clone = modern_board.copy()
        assert clone == modern_board
        clone.place(Point(0, 0), Player.FIRST)
        assert clone != modern_board
        assert modern_board.occupant_at(Point(0, 0)) == EMPTY

    def test_snapshot_read_only(self, modern_board: Board) -> None:
        """Snapshot cannot be written."""
        snap = modern_board.snapshot()
        with pytest.raises(ValueError):
            snap[0, 0] = Player.FIRST
        assert np.array_equal(snap, modern_board.grid)


class TestRenderText:
    """Test text rendering."""

    def test_render_symbols(self, modern_board: Board) -> None:
        """Header, row labels and disk symbols are drawn."""
        text = modern_board.render_text()
        lines = text.splitlines()
        assert len(lines) == BOARD_DIM + 1
        assert "A" in lines[0] and "H" in lines[0]
        assert lines[4].startswith(" 4")
        assert lines[4].count("X") == 1 and lines[4].count("O") == 1

    def test_render_markers(self, modern_board: Board) -> None:
        """Selected, highlighted and flipped cells are marked."""
        text = modern_board.render_text(
            selected=Point(0, 0), highlight=[Point(2, 3)], flipped=[Point(3, 3)]
        )
        lines = text.splitlines()
        assert "[.]" in lines[1]
        assert "+" in lines[4]
        assert "(O)" in lines[4]
