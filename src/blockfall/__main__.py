"""Command line entry point.

Run with: `python -m blockfall`

Without options this opens the pygame window.  ``--ascii`` instead runs a
number of ticks headlessly and prints a single frame composed of the board plus
the active tetromino, useful as a smoke test that needs no display.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional, Sequence

from .config import CELL_SIZE, GRID_HEIGHT, GRID_WIDTH, UPDATES_PER_SECOND, GameConfig
from .game_state import GameState
from .utils import render_grid


LOGGER = logging.getLogger(__name__)


def _print_grid(grid: List[List[int]]) -> None:
    for row in grid:
        print("".join("#" if cell else "." for cell in row))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game")
    parser.add_argument("--width", type=int, default=GRID_WIDTH, help="grid columns")
    parser.add_argument("--height", type=int, default=GRID_HEIGHT, help="grid rows")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="cell size in pixels")
    parser.add_argument(
        "--updates-per-second",
        type=float,
        default=UPDATES_PER_SECOND,
        help="automatic descents per second",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for piece selection")
    parser.add_argument(
        "--ascii", action="store_true", help="print one frame to stdout instead of opening a window"
    )
    parser.add_argument(
        "--ticks", type=int, default=0, help="ticks to simulate before printing the ASCII frame"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    args = parser.parse_args(argv)
    try:
        args.config = GameConfig(
            grid_width=args.width,
            grid_height=args.height,
            cell_width=args.cell_size,
            cell_height=args.cell_size,
            updates_per_second=args.updates_per_second,
        )
    except ValueError as exc:
        parser.error(str(exc))
    if args.ticks < 0:
        parser.error("--ticks must not be negative")
    return args


def run_ascii(config: GameConfig, rng: random.Random, ticks: int) -> None:
    state = GameState(config=config, rng=rng)
    # Tick n is due at n * period, so this timestamp runs exactly ``ticks`` ticks.
    if ticks:
        state.advance((ticks - 1) * config.period_ms)
    LOGGER.info("Simulated %d tick(s), %d piece(s) locked", state.tick_count, state.pieces)
    _print_grid(render_grid(state.board, state.active))


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    rng = random.Random(args.seed)
    if args.ascii:
        run_ascii(args.config, rng, args.ticks)
        return

    from .run_pygame import main as run_window

    run_window(args.config, rng)


if __name__ == "__main__":
    main()
