"""SnowField — the fixed-size grid of snow piles.

The field is always ``WIDTH`` x ``HEIGHT`` cells.  One extra display row
(``STATUS_HEIGHT``) sits below it for the status line; it is not part of
the field.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from whiteout.world.snow import SnowCell

WIDTH = 80
HEIGHT = 24
STATUS_HEIGHT = 1


def out_of_bounds(x: int, y: int) -> bool:
    """Return True if ``(x, y)`` lies outside the playing field."""
    return x < 0 or x >= WIDTH or y < 0 or y >= HEIGHT


@dataclass
class SnowField:
    """A WIDTH x HEIGHT grid of snow piles.

    Attributes:
        cells: 2D list of SnowCell objects indexed as ``cells[y][x]``.
    """

    cells: list[list[SnowCell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Start with every pile clear."""
        self.cells = [[SnowCell() for _ in range(WIDTH)] for _ in range(HEIGHT)]

    def get(self, x: int, y: int) -> SnowCell:
        """Return a copy of the pile at ``(x, y)``.

        Mutating the returned cell does not affect the field; use
        :meth:`get_mut` for that.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        return SnowCell(self.get_mut(x, y).height)

    def get_mut(self, x: int, y: int) -> SnowCell:
        """Return the live pile at ``(x, y)``.

        Args:
            x: Column index.
            y: Row index.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if out_of_bounds(x, y):
            msg = f"({x}, {y}) out of bounds for {WIDTH}x{HEIGHT}"
            raise IndexError(msg)
        return self.cells[y][x]

    def total_snow(self) -> int:
        """Return the sum of all pile heights."""
        return sum(cell.height for row in self.cells for cell in row)

    def is_saturated(self) -> bool:
        """Return True if every pile is full."""
        return all(cell.is_full() for row in self.cells for cell in row)
