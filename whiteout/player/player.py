"""Player — avatar position, active tool, and carried snow."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from whiteout.world.field import HEIGHT, WIDTH
from whiteout.world.snow import SnowCell

Point = tuple[int, int]


class ToolMode(Enum):
    """Which tool the player is holding."""

    PLOW = auto()
    SHOVEL = auto()

    def toggled(self) -> ToolMode:
        """Return the other tool."""
        return ToolMode.SHOVEL if self is ToolMode.PLOW else ToolMode.PLOW


@dataclass
class Player:
    """The player avatar.

    Attributes:
        x: Current column.
        y: Current row.
        tool: Active tool mode.
        carrying: Snow lifted on the shovel.  Only non-empty in
            shovel mode.
    """

    x: int = WIDTH // 2
    y: int = HEIGHT // 2
    tool: ToolMode = ToolMode.PLOW
    carrying: SnowCell = field(default_factory=SnowCell)

    @property
    def position(self) -> Point:
        """Return ``(x, y)``."""
        return (self.x, self.y)

    @property
    def is_carrying(self) -> bool:
        """Return True if there is snow on the shovel."""
        return not self.carrying.is_clear()
