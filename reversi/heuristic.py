"""One-ply greedy move selection for the computer player."""

from __future__ import annotations

from collections.abc import Iterable

from .board import Board
from .constants import Player, Point
from .rules.update import flips_for


def row_major(points: Iterable[Point]) -> list[Point]:
    """Order points top to bottom, then left to right."""
    return sorted((Point(*p) for p in points), key=lambda p: (p.row, p.col))


def select_point(board: Board, player: Player, legal_points: Iterable[Point]) -> Point:
    """Return the legal point that flips the most disks.

    Candidates are scanned in row-major order and only a strictly greater
    count replaces the current best, so ties go to the first point scanned.
    """
    candidates = row_major(legal_points)
    if not candidates:
        raise ValueError(f"No legal points to choose from for {player.label}.")

    best = candidates[0]
    best_count = len(flips_for(board, best, player))
    for point in candidates[1:]:
        count = len(flips_for(board, point, player))
        if count > best_count:
            best, best_count = point, count
    return best
