"""Flip resolution: the sandwich rule and its application."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..constants import DIRECTIONS, EMPTY, Player, Point
from .base import UpdateRule, is_in_board

if TYPE_CHECKING:
    from ..board import Board


def flips_for(board: "Board", point: Point, player: Player) -> frozenset[Point]:
    """Return the opposing disks a disk of ``player`` at ``point`` would capture.

    Walks outward in each direction collecting opponent disks; the run is
    captured only if it ends on one of ``player``'s own disks before a gap or
    the board edge. The board is not modified.
    """
    grid = board.grid
    captured: set[Point] = set()
    for dc, dr in DIRECTIONS:
        c, r = point[0] + dc, point[1] + dr
        run = []
        while True:
            if not is_in_board(c, r) or grid[r, c] == EMPTY:
                run = []
                break
            if grid[r, c] == player:
                break
            run.append(Point(c, r))
            c, r = c + dc, r + dr
        captured.update(run)
    return frozenset(captured)


def apply_flips(board: "Board", points: Iterable[Point], player: Player) -> None:
    """Turn every given point over to ``player``. Does not place the origin disk."""
    for point in points:
        board.flip(point, player)


class StandardFlankingUpdateRule(UpdateRule):
    """Place a disk and flip all flanked opponent disks to its color."""

    @staticmethod
    def update(board: "Board", point: Point, player: Player) -> frozenset[Point]:
        """Place ``player``'s disk at ``point``, flip, and return the flipped points."""
        flipped = flips_for(board, point, player)
        board.place(point, player)
        apply_flips(board, flipped, player)
        return flipped
