"""Entry point for ``python -m whiteout``.

Loads the default YAML config, snows in a fresh field, and opens a
pygame window to play in.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from whiteout.simulation.config import GameConfig
from whiteout.simulation.session import Session
from whiteout.ui.pygame_client import PygameTerminal

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main() -> None:
    """Parse CLI args, build the session, and play until the window closes."""
    parser = argparse.ArgumentParser(
        prog="whiteout",
        description="Whiteout - plow and shovel your way through the snow",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed for the snowfall (overrides the config file)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.config is not None:
        config = GameConfig.from_yaml(args.config)
    elif _DEFAULT_CONFIG.exists():
        config = GameConfig.from_yaml(_DEFAULT_CONFIG)
    else:
        config = GameConfig()
    if args.seed is not None:
        config.seed = args.seed

    terminal = PygameTerminal(
        cell_width=config.cell_width,
        cell_height=config.cell_height,
        font_size=config.font_size,
    )
    session = Session.create(config, display=terminal, events=terminal)
    session.run()


if __name__ == "__main__":
    main()
