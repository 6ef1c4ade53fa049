"""Flurry — snowfall that replenishes the field one unit at a time.

A flurry first tries a handful of uniformly random cells; once the field
is crowded enough that those all land on full piles it falls back to a
row-major scan so progress is still guaranteed.  A saturated field is
left untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from whiteout.world.field import HEIGHT, WIDTH

if TYPE_CHECKING:
    from numpy.random import Generator

    from whiteout.world.field import SnowField

FLURRY_TRIES = 60
FLURRIES_PER_UPDATE = 20
INITIAL_FLURRIES = 5000


@dataclass
class Flurry:
    """Randomised single-unit snowfall.

    Attributes:
        rng: Random source for picking cells.
        tries: Random draws attempted before scanning the field.
    """

    rng: Generator
    tries: int = FLURRY_TRIES

    def step(self, snow_field: SnowField) -> bool:
        """Add one unit of snow somewhere with room for it.

        Args:
            snow_field: Field to snow on.

        Returns:
            True if a unit was placed, False if the field is saturated.
        """
        for _ in range(self.tries):
            x = int(self.rng.integers(0, WIDTH))
            y = int(self.rng.integers(0, HEIGHT))
            cell = snow_field.get_mut(x, y)
            if not cell.is_full():
                cell.pile_one()
                return True

        for row in snow_field.cells:
            for cell in row:
                if not cell.is_full():
                    cell.pile_one()
                    return True
        return False

    def run(self, snow_field: SnowField, steps: int) -> int:
        """Apply ``steps`` flurries and return how many placed snow."""
        placed = 0
        for _ in range(steps):
            if self.step(snow_field):
                placed += 1
        return placed
