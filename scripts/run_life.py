#!/usr/bin/env python3
"""
Run the Game of Life in the terminal.

Seeds a random viewport (or a named pattern), advances one generation per
interval and redraws the viewport on every pass. Each advance is logged as
"Iter #n: m live cells".
"""

import sys
import os
import logging
import argparse

# Add repo root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sparselife.config import load_config, SimulationConfig
from sparselife.core.life_state import LifeState
from sparselife.driver import LifeRunner
from sparselife.patterns import PATTERNS
from sparselife.render import render_text

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[H\033[2J"


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Apply command line overrides on top of the environment config."""
    config = load_config()
    return SimulationConfig(
        width=args.width if args.width is not None else config.width,
        height=args.height if args.height is not None else config.height,
        cell_size=args.cell_size if args.cell_size is not None else config.cell_size,
        interval=args.interval if args.interval is not None else config.interval,
        seed=args.seed if args.seed is not None else config.seed,
    )


def build_state(pattern: str, config: SimulationConfig) -> LifeState:
    """Create the initial state for the chosen pattern."""
    columns, rows = config.viewport
    if pattern == "random":
        return LifeState.random(columns, rows, seed=config.seed)

    shape = PATTERNS[pattern]()
    pattern_height, pattern_width = shape.shape
    return LifeState.from_pattern(shape, (columns - pattern_width) // 2, (rows - pattern_height) // 2)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Sparse Conway's Game of Life")
    parser.add_argument("--width", type=int, default=None, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Window height in pixels")
    parser.add_argument("--cell-size", type=int, default=None, help="Pixels per cell")
    parser.add_argument("--interval", type=float, default=None, help="Seconds between generations")
    parser.add_argument("--generations", type=int, default=20, help="Generations to run")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the initial state")
    parser.add_argument("--pattern", choices=["random"] + sorted(PATTERNS), default="random",
                        help="Initial configuration")
    parser.add_argument("--render", action=argparse.BooleanOptionalAction, default=True,
                        help="Draw the viewport in the terminal")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = build_config(args)
        columns, rows = config.viewport
        logger.info(f"Viewport: {columns}x{rows} cells, interval {config.interval}s")

        def draw(state: LifeState) -> None:
            sys.stdout.write(CLEAR_SCREEN + render_text(state, columns, rows) + "\n")
            sys.stdout.flush()

        runner = LifeRunner(build_state(args.pattern, config), interval=config.interval)
        final_state = runner.run(args.generations, render=draw if args.render else None)

        logger.info(f"Finished at generation {runner.generation}: "
                    f"{final_state.live_count()} alive, {final_state.size()} recorded")
        return 0

    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except Exception as e:
        logger.error(f"Simulation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
