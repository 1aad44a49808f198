from __future__ import annotations

import argparse
import logging

from . import config


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="snake-arcade", add_help=True)
    parser.add_argument("--grid-size", type=int, default=config.GRID_SIZE, help="Cells per side of the square board.")
    parser.add_argument("--cell-size", type=int, default=config.CELL_SIZE, help="Pixel size of one cell.")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS, help="Milliseconds between snake moves.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)

    if args.grid_size < 3:
        parser.error("--grid-size must be at least 3")
    if args.cell_size <= 0:
        parser.error("--cell-size must be positive")
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Imported late so argument errors surface before pygame loads.
    from .game import main as run_game

    run_game(args.grid_size, args.cell_size, args.tick_ms, args.seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
