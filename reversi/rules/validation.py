from typing import TYPE_CHECKING

from ..constants import CENTER_POINTS, DIRECTIONS, EMPTY, Player, Point
from .base import LegalityRule, is_in_board
from .update import flips_for

if TYPE_CHECKING:
    from ..board import Board

# Number of disks the historical opening places on the center cells.
BOOTSTRAP_DISKS = 4


def neighbor_candidates(board: "Board") -> set[Point]:
    """Empty in-board cells adjacent to at least one occupied cell."""
    candidates: set[Point] = set()
    for col, row in board.anchors():
        for dc, dr in DIRECTIONS:
            nc, nr = col + dc, row + dr
            if is_in_board(nc, nr) and board.grid[nr, nc] == EMPTY:
                candidates.add(Point(nc, nr))
    return candidates


class FlankingLegalityRule(LegalityRule):
    """A point is legal if it touches a disk and captures at least one opposing disk."""

    @staticmethod
    def legal_points(board: "Board", player: Player) -> frozenset[Point]:
        """Check every neighbor of an anchor for a non-empty flip set."""
        return frozenset(p for p in neighbor_candidates(board) if flips_for(board, p, player))


class CenterBootstrapLegalityRule(LegalityRule):
    """Historical opening: the first four disks go on the empty center cells.

    No capture is required while fewer than four disks are on the board; after
    that the standard flanking rule applies.
    """

    @staticmethod
    def legal_points(board: "Board", player: Player) -> frozenset[Point]:
        """Return the empty center cells during the opening, else flanking points."""
        if board.disk_count() < BOOTSTRAP_DISKS:
            return frozenset(p for p in CENTER_POINTS if board.grid[p.row, p.col] == EMPTY)
        return FlankingLegalityRule.legal_points(board, player)
