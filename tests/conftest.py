"""Pytest configuration and fixtures for reversi tests."""

from collections.abc import Callable

import pytest

from reversi.board import Board
from reversi.constants import Player, RuleVariant
from reversi.games import HistoricalReversi, ModernOthello


@pytest.fixture
def modern_board() -> Board:
    """Fresh board with the modern seeded center."""
    return Board.create(RuleVariant.MODERN)


@pytest.fixture
def historical_board() -> Board:
    """Fresh, empty historical board."""
    return Board.create(RuleVariant.HISTORICAL)


@pytest.fixture
def modern_rules() -> ModernOthello:
    """Modern Othello rule set."""
    return ModernOthello()


@pytest.fixture
def historical_rules() -> HistoricalReversi:
    """Historical Reversi rule set."""
    return HistoricalReversi()


@pytest.fixture
def make_board() -> Callable[[dict[tuple[int, int], Player]], Board]:
    """Factory building a board from a {(col, row): player} mapping."""

    def _make(disks: dict[tuple[int, int], Player]) -> Board:
        board = Board()
        for point, player in disks.items():
            board.place(point, player)
        return board

    return _make


@pytest.fixture
def second_stuck_board(make_board: Callable) -> Board:
    """Four disks where FIRST can play (2,0) but SECOND has no legal point."""
    return make_board(
        {
            (0, 0): Player.FIRST,
            (1, 0): Player.SECOND,
            (6, 7): Player.FIRST,
            (7, 7): Player.FIRST,
        }
    )
