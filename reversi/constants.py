"""Constants and closed enumerations for the Reversi engine."""

from enum import Enum, IntEnum
from typing import NamedTuple

### Board
BOARD_DIM = 8
EMPTY = 0
# Explicit compass offsets as (dcol, drow), never (0, 0).
DIRECTIONS = [
    (0, 1),
    (1, 0),
    (1, 1),
    (0, -1),
    (-1, 0),
    (-1, -1),
    (1, -1),
    (-1, 1),
]


class Point(NamedTuple):
    """A board coordinate, 0-indexed."""

    col: int
    row: int


CENTER_POINTS = frozenset({Point(3, 3), Point(4, 4), Point(3, 4), Point(4, 3)})
START_POINT = Point(3, 3)

letters = "abcdefgh"
number = "12345678"

point2square = {
    Point(c, r): letters[c] + number[r] for r in range(BOARD_DIM) for c in range(BOARD_DIM)
}


### Players and settings
class Player(IntEnum):
    """The two sides. Values are the cell markers stored on the board."""

    FIRST = -1
    SECOND = 1

    @property
    def opponent(self) -> "Player":
        return Player(-self.value)

    @property
    def label(self) -> str:
        return {Player.FIRST: "Dark Player", Player.SECOND: "Light Player"}[self]

    @property
    def symbol(self) -> str:
        return {Player.FIRST: "X", Player.SECOND: "O"}[self]

    def __str__(self) -> str:
        return self.label


class RuleVariant(Enum):
    """Historical Reversi starts empty; Modern Othello starts with a seeded center."""

    HISTORICAL = "historical"
    MODERN = "modern"

    def toggled(self) -> "RuleVariant":
        return RuleVariant.MODERN if self is RuleVariant.HISTORICAL else RuleVariant.HISTORICAL


class PlayerMode(Enum):
    """Whether the second player is a human or the heuristic computer player."""

    TWO_PLAYER = "two-player"
    VERSUS_COMPUTER = "computer"

    def toggled(self) -> "PlayerMode":
        if self is PlayerMode.TWO_PLAYER:
            return PlayerMode.VERSUS_COMPUTER
        return PlayerMode.TWO_PLAYER


# The computer always takes the second seat.
COMPUTER_PLAYER = Player.SECOND


class Direction(Enum):
    """Cursor movement directions, as (dcol, drow)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
