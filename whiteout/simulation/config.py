"""Config — load game tunables from YAML files.

The grid size is fixed; everything else that shapes a session (seed,
snowfall rates, plow strength, window cell metrics) lives in YAML and
is parsed into a typed dataclass here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from whiteout.player.push import PLOW_STRENGTH
from whiteout.world.flurry import FLURRIES_PER_UPDATE, FLURRY_TRIES, INITIAL_FLURRIES

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Top-level game configuration.

    Attributes:
        seed: RNG seed for a reproducible field.  ``None`` seeds from
            OS entropy.
        initial_flurries: Flurry steps used to fill the starting field.
        flurries_per_update: Flurry steps applied after every input event.
        flurry_tries: Random draws a flurry makes before scanning.
        plow_strength: Number of blocked cells a full pile can be
            plowed through.
        cell_width: Pixel width of one display cell.
        cell_height: Pixel height of one display cell.
        font_size: Point size of the monospace display font.
    """

    seed: int | None = None
    initial_flurries: int = INITIAL_FLURRIES
    flurries_per_update: int = FLURRIES_PER_UPDATE
    flurry_tries: int = FLURRY_TRIES
    plow_strength: int = PLOW_STRENGTH

    # Display
    cell_width: int = 10
    cell_height: int = 18
    font_size: int = 16

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}
        logger.debug("loaded config from %s", path)

        return cls(
            seed=data.get("seed", cls.seed),
            initial_flurries=data.get("initial_flurries", cls.initial_flurries),
            flurries_per_update=data.get(
                "flurries_per_update",
                cls.flurries_per_update,
            ),
            flurry_tries=data.get("flurry_tries", cls.flurry_tries),
            plow_strength=data.get("plow_strength", cls.plow_strength),
            cell_width=data.get("cell_width", cls.cell_width),
            cell_height=data.get("cell_height", cls.cell_height),
            font_size=data.get("font_size", cls.font_size),
        )
