from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .app import run_console
from .config import load_config
from .errors import ConfigError

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="epic-adventure",
        description="Epic Text Adventure - a menu-driven console adventure",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--name", default=None, help="Player name (skips the name prompt)")
    parser.add_argument("--config", default=None, help="Path to an adventure.yaml config file")
    parser.add_argument("--results-file", default=None, help="Where to write the end-of-game summary")
    parser.add_argument("--seed", type=int, default=None, help="Seed for encounter variance (if enabled)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    # Honor CLI over config file and env vars
    if args.seed is not None:
        config.seed = args.seed
    if args.results_file:
        config.results_file = args.results_file

    try:
        return run_console(config, player_name=args.name)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
