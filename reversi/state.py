"""Immutable session state, phases, input intents and presentation snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import numpy as np

from .board import Board
from .constants import COMPUTER_PLAYER, Direction, Player, PlayerMode, Point, RuleVariant

### Intents


@dataclass(frozen=True)
class Move:
    """Move the selection cursor one cell, wrapping at the edges."""

    direction: Direction


@dataclass(frozen=True)
class Select:
    """Place a disk at the selected point (also confirms prompts)."""


@dataclass(frozen=True)
class Quit:
    """Ask to leave the game."""


@dataclass(frozen=True)
class ToggleRuleVariant:
    pass


@dataclass(frozen=True)
class TogglePlayerMode:
    pass


@dataclass(frozen=True)
class Acknowledge:
    """Confirm or continue."""


Intent = Union[Move, Select, Quit, ToggleRuleVariant, TogglePlayerMode, Acknowledge]

### Phases


@dataclass(frozen=True)
class TitleScreen:
    pass


@dataclass(frozen=True)
class AwaitingPlacement:
    """The current player is choosing a point.

    ``legal`` is always recomputed against the board it was entered with.
    When ``computer`` is set the point comes from the heuristic selector.
    """

    selected: Point
    legal: frozenset[Point]
    computer: bool = False


@dataclass(frozen=True)
class PlacementConfirmed:
    """A disk was placed at ``point`` and ``flipped`` disks changed color."""

    point: Point
    flipped: frozenset[Point]


@dataclass(frozen=True)
class ForcedPass:
    """``skipped`` has no legal point and must pass (modern rules only)."""

    skipped: Player


@dataclass(frozen=True)
class ConfirmingQuit:
    """Waiting for the player to confirm leaving; ``resume`` is restored on cancel."""

    resume: AwaitingPlacement


@dataclass(frozen=True)
class GameOver:
    pass


@dataclass(frozen=True)
class Terminated:
    """The session has ended and the shell should exit."""


Phase = Union[
    TitleScreen,
    AwaitingPlacement,
    PlacementConfirmed,
    ForcedPass,
    ConfirmingQuit,
    GameOver,
    Terminated,
]

### State


@dataclass(frozen=True)
class GameState:
    """One immutable step of a session.

    The board held here is never mutated; a placement produces a new state
    with a new board.
    """

    board: Board
    current: Player
    variant: RuleVariant
    mode: PlayerMode
    phase: Phase = field(default_factory=TitleScreen)
    # Where the most recent disk went; None before the first placement.
    last_point: Point | None = None

    def is_computer(self, player: Player) -> bool:
        return self.mode is PlayerMode.VERSUS_COMPUTER and player == COMPUTER_PLAYER

    def snapshot(self) -> Snapshot:
        """Read-only view of this state for presentation."""
        phase = self.phase
        selected: Point | None = None
        legal: frozenset[Point] = frozenset()
        last_flips: frozenset[Point] = frozenset()
        if isinstance(phase, AwaitingPlacement):
            selected, legal = phase.selected, phase.legal
        elif isinstance(phase, ConfirmingQuit):
            selected, legal = phase.resume.selected, phase.resume.legal
        elif isinstance(phase, PlacementConfirmed):
            selected, last_flips = phase.point, phase.flipped

        return Snapshot(
            board=self.board.snapshot(),
            selected=selected,
            phase=type(phase).__name__,
            current=self.current,
            last_flips=last_flips,
            score=self.board.score_tally(),
            variant=self.variant,
            mode=self.mode,
            legal=legal,
        )


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Everything the presentation layer needs to draw one frame."""

    board: np.ndarray
    selected: Point | None
    phase: str
    current: Player
    last_flips: frozenset[Point]
    score: dict[Player, int]
    variant: RuleVariant
    mode: PlayerMode
    legal: frozenset[Point]

    @property
    def winner(self) -> Player | None:
        """The player with more disks, or None when tied."""
        first, second = self.score[Player.FIRST], self.score[Player.SECOND]
        if first == second:
            return None
        return Player.FIRST if first > second else Player.SECOND
