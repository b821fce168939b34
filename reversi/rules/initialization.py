from typing import TYPE_CHECKING

from ..constants import Player, Point, RuleVariant
from .base import InitializeBoard

if TYPE_CHECKING:
    from ..board import Board


class EmptyInitialization(InitializeBoard):
    """Historical Reversi: the board starts with no disks at all.

    The first four disks are placed by the players on the center cells.
    """

    @staticmethod
    def init_board(board: "Board") -> None:
        """Leave the board empty."""
        board.grid[:, :] = 0


class CenterSeedInitialization(InitializeBoard):
    """Modern Othello initialization with 4 disks in the center.

    Starting position: SECOND on (3,3) and (4,4), FIRST on (3,4) and (4,3).
    """

    @staticmethod
    def init_board(board: "Board") -> None:
        """Initialize board with the crossed center pattern."""
        board.grid[:, :] = 0
        board.place(Point(3, 3), Player.SECOND)
        board.place(Point(4, 4), Player.SECOND)
        board.place(Point(3, 4), Player.FIRST)
        board.place(Point(4, 3), Player.FIRST)


INITIALIZATION_RULES: dict[RuleVariant, type[InitializeBoard]] = {
    RuleVariant.HISTORICAL: EmptyInitialization,
    RuleVariant.MODERN: CenterSeedInitialization,
}
