"""PlayerController — turns a step or tool toggle into world changes.

Plow mode pushes snow ahead and walks into the freed cell.  Shovel mode
walks only onto clear cells; bumping into a pile either lifts it onto
the shovel or, if already carrying, tops the pile up from the shovel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from whiteout.player.player import ToolMode
from whiteout.player.push import PLOW_STRENGTH, can_push, push
from whiteout.world.field import out_of_bounds
from whiteout.world.snow import SnowCell

if TYPE_CHECKING:
    from whiteout.player.player import Point
    from whiteout.world.world import World


@dataclass
class PlayerController:
    """Applies player actions to a world.

    Attributes:
        world: The world to mutate.
        strength: Strength budget for plow pushes.
    """

    world: World
    strength: int = PLOW_STRENGTH

    def flip_shovel(self) -> None:
        """Drop any carried snow where the player stands and switch tools.

        Carried snow that does not fit on the player's cell is lost.
        """
        player = self.world.player
        if player.is_carrying:
            cell = self.world.snow_field.get_mut(player.x, player.y)
            cell.take_needed(player.carrying)
            player.carrying = SnowCell()
        player.tool = player.tool.toggled()

    def move_player(self, delta: Point) -> None:
        """Try to step the player one cell in ``delta`` direction.

        Args:
            delta: Unit step, one of ``(+-1, 0)`` or ``(0, +-1)``.
        """
        player = self.world.player
        tx, ty = player.x + delta[0], player.y + delta[1]
        if out_of_bounds(tx, ty):
            return

        if player.tool is ToolMode.PLOW:
            self._plow(delta, tx, ty)
        else:
            self._shovel(tx, ty)

    def _plow(self, delta: Point, tx: int, ty: int) -> None:
        player = self.world.player
        snow_field = self.world.snow_field
        if can_push(snow_field, player.position, delta, self.strength):
            push(snow_field, player.position, delta)
            player.x, player.y = tx, ty

    def _shovel(self, tx: int, ty: int) -> None:
        player = self.world.player
        target = self.world.snow_field.get_mut(tx, ty)
        if target.is_clear():
            player.x, player.y = tx, ty
        elif not player.is_carrying:
            player.carrying = target.take_all()
        elif not target.is_full():
            target.take_needed(player.carrying)
