from __future__ import annotations

import logging

from .board import Board
from .constants import Player, Point, RuleVariant, point2square
from .rules.base import InitializeBoard, LegalityRule, UpdateRule
from .rules.initialization import CenterSeedInitialization, EmptyInitialization
from .rules.update import StandardFlankingUpdateRule
from .rules.validation import CenterBootstrapLegalityRule, FlankingLegalityRule

logger = logging.getLogger(__name__)


class RuleSet:
    """Bundle of rules that defines one Reversi variant.

    A rule set holds no game state; it answers questions about a board and
    applies placements to it.
    """

    alias: str = "base"
    variant: RuleVariant
    # When the side to move is stuck but the opponent is not, the modern rules
    # skip the turn; the historical rules end the game.
    allows_forced_pass: bool = True

    def __init__(
        self,
        initialization_rule: type[InitializeBoard],
        legality_rule: type[LegalityRule],
        update_rules: list[type[UpdateRule]],
    ) -> None:
        """Initialize a rule set from its component rules."""
        self.initialization_rule = initialization_rule
        self.legality_rule = legality_rule
        self.update_rules = update_rules

    def new_board(self) -> Board:
        board = Board()
        self.initialization_rule.init_board(board)
        return board

    def legal_points(self, board: Board, player: Player) -> frozenset[Point]:
        """Recompute the legal points of ``player`` on ``board``."""
        return self.legality_rule.legal_points(board, player)

    def play(self, board: Board, point: Point, player: Player) -> frozenset[Point]:
        """Place ``player``'s disk at ``point`` on ``board`` and return what flipped."""
        if point not in self.legal_points(board, player):
            msg = (
                f"Point {tuple(point)} is not legal for {player.label} "
                f"(game {self.alias}, legal points {sorted(self.legal_points(board, player))})."
            )
            raise ValueError(msg)

        flipped: frozenset[Point] = frozenset()
        for rule in self.update_rules:
            flipped |= rule.update(board, point, player)
        logger.debug(
            "%s plays %s in %s, flipping %d disk(s).",
            player.label,
            point2square[Point(*point)],
            self.alias,
            len(flipped),
        )
        return flipped


class HistoricalReversi(RuleSet):
    """Reversi as first published: empty start, free center opening, no passing."""

    alias = "historical"
    variant = RuleVariant.HISTORICAL
    allows_forced_pass = False

    def __init__(self) -> None:
        """Initialize historical Reversi rules."""
        super().__init__(
            initialization_rule=EmptyInitialization,
            legality_rule=CenterBootstrapLegalityRule,
            update_rules=[StandardFlankingUpdateRule],
        )


class ModernOthello(RuleSet):
    """Othello with the seeded center and forced passes."""

    alias = "modern"
    variant = RuleVariant.MODERN
    allows_forced_pass = True

    def __init__(self) -> None:
        """Initialize modern Othello rules."""
        super().__init__(
            initialization_rule=CenterSeedInitialization,
            legality_rule=FlankingLegalityRule,
            update_rules=[StandardFlankingUpdateRule],
        )


GAME_REGISTRY: dict[RuleVariant, type[RuleSet]] = {
    cls.variant: cls for cls in [HistoricalReversi, ModernOthello]
}


def rules_for(variant: RuleVariant) -> RuleSet:
    """Return the rule set for ``variant``."""
    return GAME_REGISTRY[variant]()
