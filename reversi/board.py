from __future__ import annotations

from collections.abc import Iterable

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from .constants import BOARD_DIM, EMPTY, Player, Point, RuleVariant
from .rules.base import is_in_board
from .rules.initialization import INITIALIZATION_RULES


class Board:
    """Fixed 8x8 grid of cells, each EMPTY or owned by one Player.

    Cells are stored row-major in ``grid[row, col]``. A cell that has been
    placed is never emptied again: ``place`` only writes empty cells and
    ``flip`` only rewrites occupied ones.
    """

    def __init__(self, grid: np.ndarray | None = None) -> None:
        """Create an empty board, or wrap a copy of ``grid``."""
        if grid is None:
            self.grid = np.zeros((BOARD_DIM, BOARD_DIM), dtype=np.int8)
        else:
            if grid.shape != (BOARD_DIM, BOARD_DIM):
                raise ValueError(f"Board grid must be {BOARD_DIM}x{BOARD_DIM}, got {grid.shape}")
            self.grid = np.array(grid, dtype=np.int8)

    @classmethod
    def create(cls, variant: RuleVariant) -> Board:
        """Return a fresh board initialized for ``variant``."""
        board = cls()
        INITIALIZATION_RULES[variant].init_board(board)
        return board

    def _check(self, point: Point) -> None:
        if not is_in_board(*point):
            raise ValueError(f"Point {tuple(point)} is outside the {BOARD_DIM}x{BOARD_DIM} board.")

    def occupant_at(self, point: Point) -> Player | int:
        """Return the owner of ``point``, or EMPTY."""
        self._check(point)
        value = int(self.grid[point[1], point[0]])
        return EMPTY if value == EMPTY else Player(value)

    def place(self, point: Point, player: Player) -> None:
        """Put ``player``'s disk on an empty cell."""
        self._check(point)
        if self.grid[point[1], point[0]] != EMPTY:
            raise ValueError(f"Cannot place on occupied point {tuple(point)}.")
        self.grid[point[1], point[0]] = player

    def flip(self, point: Point, player: Player) -> None:
        """Turn an occupied cell over to ``player``."""
        self._check(point)
        if self.grid[point[1], point[0]] == EMPTY:
            raise ValueError(f"Cannot flip empty point {tuple(point)}.")
        self.grid[point[1], point[0]] = player

    def anchors(self) -> list[Point]:
        """All occupied points, in row-major order."""
        return [Point(int(c), int(r)) for r, c in np.argwhere(self.grid != EMPTY)]

    def disk_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def score_tally(self) -> dict[Player, int]:
        """Number of disks each player owns."""
        return {player: int(np.sum(self.grid == player)) for player in Player}

    def copy(self) -> Board:
        return Board(self.grid)

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the grid for presentation."""
        view = self.grid.copy()
        view.setflags(write=False)
        return view

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(disks={self.disk_count()})"

    def render_text(
        self,
        selected: Point | None = None,
        highlight: Iterable[Point] = (),
        flipped: Iterable[Point] = (),
    ) -> str:
        """Render the board as text.

        Empty cells are ``.``, highlighted empty cells ``+``, the selected cell is
        wrapped in brackets and flipped disks in parentheses.
        """
        highlight = set(highlight)
        flipped = set(flipped)
        lines = ["   " + " ".join(f" {chr(ord('A') + c)} " for c in range(BOARD_DIM))]
        for r in range(BOARD_DIM):
            cells = []
            for c in range(BOARD_DIM):
                point = Point(c, r)
                value = int(self.grid[r, c])
                if value == EMPTY:
                    mark = "+" if point in highlight else "."
                else:
                    mark = Player(value).symbol
                if point == selected:
                    cells.append(f"[{mark}]")
                elif point in flipped:
                    cells.append(f"({mark})")
                else:
                    cells.append(f" {mark} ")
            lines.append(f"{r + 1:>2} " + " ".join(cells))
        return "\n".join(lines)

    def plot_board(
        self,
        ax: Axes | None = None,
        highlight: Iterable[Point] = (),
        selected: Point | None = None,
        flipped: Iterable[Point] = (),
    ) -> Axes:
        """Plot the board.

        ``highlight`` points (e.g. the legal points) are shaded green, the
        selected point is drawn in blue and flipped disks get a red outline.
        """
        if ax is None:
            _fig, ax = plt.subplots()

        ax.set_aspect("equal")
        ax.set_xlim(0, BOARD_DIM)
        ax.set_ylim(0, BOARD_DIM)

        for c, r in highlight:
            rect = plt.Rectangle((c, r), 1, 1, fill=True, color="mediumseagreen", alpha=0.5)
            ax.add_artist(rect)

        if selected is not None:
            move_rect = plt.Rectangle(
                (selected[0], selected[1]), 1, 1, fill=True, color="cornflowerblue", alpha=0.7
            )
            ax.add_artist(move_rect)

        flipped = set(flipped)
        for r, c in np.ndindex(BOARD_DIM, BOARD_DIM):
            value = self.grid[r, c]
            if value == EMPTY:
                continue
            edge = "red" if (c, r) in flipped else "black"
            face = "black" if value == Player.FIRST else "white"
            circle = plt.Circle((c + 0.5, r + 0.5), 0.35, color=face, ec=edge, lw=1.5)
            ax.add_artist(circle)

        ax.invert_yaxis()
        ax.axis("off")
        outline = plt.Rectangle((0, 0), BOARD_DIM, BOARD_DIM, edgecolor="black", facecolor="none")
        ax.add_artist(outline)

        for i in range(1, BOARD_DIM):
            ax.axhline(i, color="black", lw=0.5)
            ax.axvline(i, color="black", lw=0.5)

        for i in range(BOARD_DIM):
            ax.text(i + 0.5, -0.5, chr(ord("A") + i), ha="center", va="center", fontsize=12)
            ax.text(-0.5, i + 0.5, str(i + 1), ha="center", va="center", fontsize=12)

        return ax
