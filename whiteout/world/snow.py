"""SnowCell — a single bounded snow pile.

Every cell of the snow field, and the snow the player carries on the
shovel, is a ``SnowCell``.  Heights are integers in ``0..MAX_SNOW_PILE``;
the transfer helpers never let a pile go negative or overflow.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_SNOW_PILE = 6


@dataclass
class SnowCell:
    """A pile of snow with integer height.

    Attributes:
        height: Current pile height (0-6).
    """

    height: int = 0

    def is_clear(self) -> bool:
        """Return True if there is no snow here."""
        return self.height == 0

    def is_full(self) -> bool:
        """Return True if the pile is at maximum height."""
        return self.height == MAX_SNOW_PILE

    def pile_one(self) -> None:
        """Add a single unit of snow.

        Raises:
            ValueError: If the pile is already full.
        """
        if self.height + 1 > MAX_SNOW_PILE:
            msg = f"cannot pile onto a full cell (height {self.height})"
            raise ValueError(msg)
        self.height += 1

    def take_all(self) -> SnowCell:
        """Empty this pile and return the removed snow as a new cell."""
        taken = SnowCell(self.height)
        self.height = 0
        return taken

    def take_needed(self, source: SnowCell) -> int:
        """Move as much snow from ``source`` as this pile can hold.

        Args:
            source: Snow to draw from.  Reduced in-place by the amount
                moved.

        Returns:
            Number of units transferred (0 if this pile is full or
            ``source`` is empty).
        """
        amount = min(source.height, MAX_SNOW_PILE - self.height)
        self.height += amount
        source.height -= amount
        return amount
