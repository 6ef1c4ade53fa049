"""World — the single mutable root of game state.

Owns the snow field and the player.  Everything that changes during a
session changes through a ``World``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from whiteout.player.player import Player
from whiteout.world.field import SnowField
from whiteout.world.flurry import INITIAL_FLURRIES, Flurry


@dataclass
class World:
    """Snow field plus player.

    Attributes:
        snow_field: The grid of snow piles.
        player: The player avatar.
    """

    snow_field: SnowField = field(default_factory=SnowField)
    player: Player = field(default_factory=Player)

    @classmethod
    def randomized(
        cls,
        flurry: Flurry,
        initial_flurries: int = INITIAL_FLURRIES,
    ) -> World:
        """Build a world whose field has been filled by repeated flurries.

        Args:
            flurry: Snowfall process to fill the field with.
            initial_flurries: Number of flurry steps to apply.

        Returns:
            A new World with the player at the centre in plow mode.
        """
        world = cls()
        flurry.run(world.snow_field, initial_flurries)
        return world
