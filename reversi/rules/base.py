"""Abstract base classes for Reversi game rules."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..constants import BOARD_DIM, Player, Point

if TYPE_CHECKING:
    from ..board import Board


class InitializeBoard(ABC):
    """Abstract base class for board initialization rules."""

    @staticmethod
    @abstractmethod
    def init_board(board: "Board") -> None:
        """Write the starting disks onto an empty board."""
        pass


class LegalityRule(ABC):
    """Abstract base class for legal-point rules."""

    @staticmethod
    @abstractmethod
    def legal_points(board: "Board", player: Player) -> frozenset[Point]:
        """Return every point where ``player`` may place a disk."""
        pass


class UpdateRule(ABC):
    """Abstract base class for board update rules."""

    @staticmethod
    @abstractmethod
    def update(board: "Board", point: Point, player: Player) -> frozenset[Point]:
        """Place ``player``'s disk at ``point`` and return the flipped points."""
        pass


def is_in_board(col: int, row: int) -> bool:
    """Check if coordinates are within the board boundaries."""
    return 0 <= col < BOARD_DIM and 0 <= row < BOARD_DIM
