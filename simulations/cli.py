# simulations/cli.py

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from numeric_demos.errors import NumericDemosError
from numeric_demos.ground_state import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_NUMEROV_ITERATIONS,
    DEFAULT_TOLERANCE,
    SearchConfig,
)
from numeric_demos.logging_config import get_logger, set_log_level

from .common import format_ground_state_line, format_stats_line
from .run import run_bean_machine, run_ground_state

logger = get_logger("simulations.cli")

# Defaults of the original playground run.
DEFAULT_SIZE = 50
DEFAULT_DEPTH = 50
DEFAULT_TRIALS = 100_000
DEFAULT_SEED = 42


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m simulations.cli",
        description="Bean machine Monte Carlo and Numerov ground state search.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for the per-iteration trace)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    bean = sub.add_parser("bean", help="drop balls through a Galton board")
    bean.add_argument("--size", type=int, default=DEFAULT_SIZE, help="number of bins")
    bean.add_argument("--depth", type=int, default=DEFAULT_DEPTH, help="number of peg rows")
    bean.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="number of balls")
    bean.add_argument("--seed", type=int, default=DEFAULT_SEED, help="RNG seed")

    gs = sub.add_parser("ground-state", help="harmonic oscillator ground state energy")
    gs.add_argument(
        "--iterations",
        type=int,
        default=DEFAULT_NUMEROV_ITERATIONS,
        help="Numerov grid intervals per energy trial (>= 2)",
    )
    gs.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE, help="stop when |psi| <= tolerance")
    gs.add_argument(
        "--max-iterations",
        type=int,
        default=DEFAULT_MAX_ITERATIONS,
        help="give up after this many energy trials",
    )

    return parser.parse_args(argv)


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        set_log_level(logging.DEBUG)
    elif verbosity == 1:
        set_log_level(logging.INFO)


def main(argv: List[str]) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "bean":
            result = run_bean_machine(
                size=args.size,
                depth=args.depth,
                trials=args.trials,
                seed=args.seed,
            )
            print(format_stats_line(result))
        else:
            config = SearchConfig(
                tolerance=args.tolerance,
                numerov_iterations=args.iterations,
                max_iterations=args.max_iterations,
            )
            print(format_ground_state_line(run_ground_state(config)))
    except NumericDemosError as e:
        logger.error("%s failed: %s", args.command, e)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
