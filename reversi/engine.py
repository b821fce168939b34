"""Turn and game state machine.

``transition`` is a pure function from a state and one input intent to the
next state. It never mutates its input; placements are made on a copy of the
board. Intents that mean nothing in the current phase return the state
unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from .constants import (
    BOARD_DIM,
    START_POINT,
    Player,
    PlayerMode,
    Point,
    RuleVariant,
    point2square,
)
from .games import rules_for
from .heuristic import select_point
from .state import (
    Acknowledge,
    AwaitingPlacement,
    ConfirmingQuit,
    ForcedPass,
    GameOver,
    GameState,
    Intent,
    Move,
    PlacementConfirmed,
    Quit,
    Select,
    Terminated,
    TitleScreen,
    TogglePlayerMode,
    ToggleRuleVariant,
)

logger = logging.getLogger(__name__)

MAX_AUTOPLAY_STEPS = 1000


def new_session(
    variant: RuleVariant = RuleVariant.MODERN,
    mode: PlayerMode = PlayerMode.TWO_PLAYER,
) -> GameState:
    """Return the title screen for a fresh session."""
    return GameState(
        board=rules_for(variant).new_board(),
        current=Player.FIRST,
        variant=variant,
        mode=mode,
        phase=TitleScreen(),
    )


def start_game(
    variant: RuleVariant = RuleVariant.MODERN,
    mode: PlayerMode = PlayerMode.TWO_PLAYER,
) -> GameState:
    """Return a new game with the first player to move."""
    board = rules_for(variant).new_board()
    state = GameState(board=board, current=Player.FIRST, variant=variant, mode=mode)
    logger.debug("New %s game (%s).", variant.value, mode.value)
    return _awaiting(state, Player.FIRST, START_POINT)


def _awaiting(state: GameState, player: Player, selected: Point) -> GameState:
    legal = rules_for(state.variant).legal_points(state.board, player)
    phase = AwaitingPlacement(selected=selected, legal=legal, computer=state.is_computer(player))
    return replace(state, current=player, phase=phase)


def _is_confirm(intent: Intent) -> bool:
    return isinstance(intent, (Acknowledge, Select))


def _place(state: GameState, point: Point) -> GameState:
    board = state.board.copy()
    flipped = rules_for(state.variant).play(board, point, state.current)
    return replace(
        state,
        board=board,
        phase=PlacementConfirmed(point=point, flipped=flipped),
        last_point=point,
    )


def _on_title(state: GameState, intent: Intent) -> GameState:
    if isinstance(intent, ToggleRuleVariant):
        return new_session(state.variant.toggled(), state.mode)
    if isinstance(intent, TogglePlayerMode):
        return replace(state, mode=state.mode.toggled())
    return start_game(state.variant, state.mode)


def _on_awaiting(state: GameState, phase: AwaitingPlacement, intent: Intent) -> GameState:
    if isinstance(intent, Quit):
        return replace(state, phase=ConfirmingQuit(resume=phase))

    if phase.computer:
        if _is_confirm(intent) and phase.legal:
            return _place(state, select_point(state.board, state.current, phase.legal))
        return state

    if isinstance(intent, Move):
        dc, dr = intent.direction.value
        selected = Point(
            (phase.selected.col + dc) % BOARD_DIM, (phase.selected.row + dr) % BOARD_DIM
        )
        return replace(state, phase=replace(phase, selected=selected))
    if isinstance(intent, Select) and phase.selected in phase.legal:
        return _place(state, phase.selected)
    return state


def _on_confirmed(state: GameState, phase: PlacementConfirmed) -> GameState:
    rules = rules_for(state.variant)
    mover, upcoming = state.current, state.current.opponent
    upcoming_legal = rules.legal_points(state.board, upcoming)
    mover_legal = rules.legal_points(state.board, mover)

    if not upcoming_legal and not mover_legal:
        logger.debug("Neither player can move; game over.")
        return replace(state, current=upcoming, phase=GameOver())
    if not upcoming_legal:
        if not rules.allows_forced_pass:
            logger.debug("%s cannot move under %s rules; game over.", upcoming.label, rules.alias)
            return replace(state, current=upcoming, phase=GameOver())
        logger.debug("%s has no legal point and passes.", upcoming.label)
        return replace(state, current=upcoming, phase=ForcedPass(skipped=upcoming))
    return _awaiting(state, upcoming, phase.point)


def _on_game_over(state: GameState, intent: Intent) -> GameState:
    if _is_confirm(intent):
        return new_session(state.variant, state.mode)
    return replace(state, phase=Terminated())


def transition(state: GameState, intent: Intent) -> GameState:
    """Return the state that follows ``state`` after ``intent``."""
    phase = state.phase
    if isinstance(phase, TitleScreen):
        return _on_title(state, intent)
    if isinstance(phase, AwaitingPlacement):
        return _on_awaiting(state, phase, intent)
    if isinstance(phase, PlacementConfirmed):
        return _on_confirmed(state, phase)
    if isinstance(phase, ForcedPass):
        return _awaiting(state, state.current.opponent, state.last_point or START_POINT)
    if isinstance(phase, ConfirmingQuit):
        if _is_confirm(intent):
            return replace(state, phase=Terminated())
        return replace(state, phase=phase.resume)
    if isinstance(phase, GameOver):
        return _on_game_over(state, intent)
    return state


def autoplay(state: GameState, max_steps: int = MAX_AUTOPLAY_STEPS) -> list[GameState]:
    """Drive both sides with the heuristic selector until the game ends.

    Returns every state visited, starting with ``state`` and ending at the
    GameOver state (or after ``max_steps`` transitions).
    """
    trajectory = [state]
    for _ in range(max_steps):
        phase = state.phase
        if isinstance(phase, (GameOver, Terminated)):
            break
        if isinstance(phase, AwaitingPlacement) and not phase.computer:
            point = select_point(state.board, state.current, phase.legal)
            state = replace(state, phase=replace(phase, selected=point))
            state = transition(state, Select())
        else:
            state = transition(state, Acknowledge())
        if isinstance(state.phase, PlacementConfirmed):
            logger.debug(
                "Autoplay: %s -> %s", state.current.label, point2square[state.phase.point]
            )
        trajectory.append(state)
    return trajectory
