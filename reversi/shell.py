"""Interactive text shell: reads keys, feeds intents to the engine, prints frames."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import replace
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import matplotlib.pyplot as plt

from .constants import Direction, PlayerMode, RuleVariant
from .engine import autoplay, new_session, start_game, transition
from .state import (
    Acknowledge,
    GameOver,
    GameState,
    Intent,
    Move,
    Quit,
    Select,
    Snapshot,
    Terminated,
    TogglePlayerMode,
    ToggleRuleVariant,
)

logger = logging.getLogger(__name__)

KEYMAP: dict[str, Intent] = {
    "w": Move(Direction.UP),
    "up": Move(Direction.UP),
    "s": Move(Direction.DOWN),
    "down": Move(Direction.DOWN),
    "a": Move(Direction.LEFT),
    "left": Move(Direction.LEFT),
    "d": Move(Direction.RIGHT),
    "right": Move(Direction.RIGHT),
    "": Select(),
    "enter": Select(),
    "c": Acknowledge(),
    "q": Quit(),
    "v": ToggleRuleVariant(),
    "m": TogglePlayerMode(),
}

BANNER = """\
 ____
|  _ \\ _____   _____ _ __ ___(_)
| |_) / _ \\ \\ / / _ \\ '__/ __| |
|  _ <  __/\\ V /  __/ |  \\__ \\ |
|_| \\_\\___| \\_/ \\___|_|  |___/_|"""


def get_version() -> str:
    try:
        return version("reversi")
    except PackageNotFoundError:
        return "unknown"


def parse_keys(line: str) -> list[Intent]:
    """Map one line of input to intents.

    Words are looked up in ``KEYMAP``; a run of movement letters such as
    ``ddw`` expands to one move per letter. Unknown words are skipped.
    """
    words = line.strip().lower().split()
    if not words:
        return [KEYMAP[""]]

    intents: list[Intent] = []
    for word in words:
        if word in KEYMAP:
            intents.append(KEYMAP[word])
        elif set(word) <= set("wasd"):
            intents.extend(KEYMAP[ch] for ch in word)
        else:
            logger.warning("Ignoring unrecognized key %r.", word)
    return intents


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def _score_line(snap: Snapshot) -> str:
    first, second = sorted(snap.score)
    return f"{first.label}: {snap.score[first]}; {second.label}: {snap.score[second]}"


def info_lines(snap: Snapshot) -> list[str]:
    """The text panel that accompanies the board."""
    settings = f"Rules: {snap.variant.value} • Mode: {snap.mode.value}"
    if snap.phase == "TitleScreen":
        return [
            BANNER,
            "",
            settings,
            "",
            "Press enter to start...",
            "v: toggle rules • m: toggle mode • enter: start",
        ]
    if snap.phase == "ConfirmingQuit":
        return [
            "Are you sure you want to quit? Any game progress will be lost.",
            "",
            "enter: quit • q: cancel",
        ]
    if snap.phase == "GameOver":
        winner = snap.winner
        result = "Draw!" if winner is None else f"{winner} won!"
        return ["Game over!", "", result, _score_line(snap), "", "enter: play again • q: quit"]

    lines = [f"{snap.current} ({snap.current.symbol})'s turn"]
    winner = snap.winner
    standing = "Draw" if winner is None else f"{winner} winning!"
    lines.append(f"{standing} - {_score_line(snap)}")

    if snap.phase == "AwaitingPlacement":
        if snap.selected is None:
            lines += ["", f"{snap.current} is thinking...", "", "enter: continue • q: exit"]
        elif snap.selected in snap.legal:
            lines += ["", "Choose where to place your disk", "Can place disk here"]
            lines += ["", "wasd: move • enter: place disk • q: exit"]
        else:
            lines += ["", "Choose where to place your disk", "Cannot place disk here"]
            lines += ["", "wasd: move • q: exit"]
    elif snap.phase == "PlacementConfirmed":
        if snap.last_flips:
            lines += ["", f"{snap.current} flipped {_plural(len(snap.last_flips), 'disk')}!"]
        else:
            lines += ["", "No disks flipped this time"]
        lines += ["", "enter: continue"]
    elif snap.phase == "ForcedPass":
        lines += ["", f"{snap.current} has no legal move and must pass.", "", "enter: continue"]
    return lines


def render(state: GameState) -> str:
    """Draw the board and text panel for ``state``."""
    snap = state.snapshot()
    computer_turn = snap.phase == "AwaitingPlacement" and state.is_computer(snap.current)
    if computer_turn:
        snap = replace(snap, selected=None)
    grid = state.board.render_text(
        selected=snap.selected if snap.phase == "AwaitingPlacement" else None,
        highlight=() if computer_turn else snap.legal,
        flipped=snap.last_flips,
    )
    return grid + "\n\n" + "\n".join(info_lines(snap))


def save_board_image(state: GameState, path: Path) -> None:
    """Write the board of ``state`` to an image file, marking the last disk placed."""
    snap = state.snapshot()
    fig, ax = plt.subplots()
    state.board.plot_board(
        ax=ax, highlight=snap.legal, selected=state.last_point, flipped=snap.last_flips
    )
    ax.set_title(" • ".join(info_lines(snap)[2:4]))
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path)
    plt.close(fig)
    logger.info("Saved final board to %s", path)


def run_session(
    state: GameState,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
    save_final: Path | None = None,
) -> GameState:
    """Run the interactive loop until the session terminates."""
    read = read or input
    write = write or print
    while not isinstance(state.phase, Terminated):
        write(render(state))
        for intent in parse_keys(read("> ")):
            finished = isinstance(state.phase, GameOver)
            state = transition(state, intent)
            if isinstance(state.phase, GameOver) and not finished and save_final is not None:
                save_board_image(state, save_final)
            if isinstance(state.phase, Terminated):
                break
    return state


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Reversi in the terminal.")
    parser.add_argument(
        "--variant",
        type=str,
        default=RuleVariant.MODERN.value,
        choices=[v.value for v in RuleVariant],
        help="Rule variant (default: modern)",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default=PlayerMode.TWO_PLAYER.value,
        choices=[m.value for m in PlayerMode],
        help="Play against a second human or the computer (default: two-player)",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Let the computer play both sides and print the final position",
    )
    parser.add_argument(
        "--save-final",
        type=Path,
        default=None,
        help="Save an image of the final board to this path when a game ends",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug-level logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    variant = RuleVariant(args.variant)
    mode = PlayerMode(args.mode)
    logger.info("Rules: %s, mode: %s", variant.value, mode.value)

    try:
        if args.demo:
            final = autoplay(start_game(variant, mode))[-1]
            print(render(final))
            if args.save_final is not None:
                save_board_image(final, args.save_final)
        else:
            run_session(new_session(variant, mode), save_final=args.save_final)
    except (EOFError, KeyboardInterrupt):
        return 0
    except Exception:
        logger.exception("Reversi session failed.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
