"""Plow cascade — pushing a line of snow ahead of the player.

The pile directly in front of the player is lifted and spilled into the
cells beyond it, each taking as much as it has room for, until all of
it has settled.  Pushing a full pile into more full piles costs
strength: every blocked cell along the way costs one unit, but only
until some cell accepts snow.  After that the pushed pile is breaking
up and no further strength is consumed.

``can_push`` and ``push`` walk the same ray.  They are kept as two
separate loops; ``can_push`` works on copies and never mutates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from whiteout.world.field import out_of_bounds

if TYPE_CHECKING:
    from whiteout.player.player import Point
    from whiteout.world.field import SnowField

PLOW_STRENGTH = 4


def can_push(
    snow_field: SnowField,
    origin: Point,
    delta: Point,
    strength: int = PLOW_STRENGTH,
) -> bool:
    """Return True if the snow in front of ``origin`` can be pushed.

    Args:
        snow_field: Field to inspect (not modified).
        origin: Position of the player doing the pushing.
        delta: Unit step direction, e.g. ``(1, 0)``.
        strength: How many blocked cells a full pile may be pushed
            through before it finds room.

    Returns:
        False if the source cell is off the field, the spill would run
        off the edge, or the strength budget is exceeded.
    """
    ox, oy = origin
    dx, dy = delta
    sx, sy = ox + dx, oy + dy
    if out_of_bounds(sx, sy):
        return False

    carry = snow_field.get(sx, sy)
    pushing_max = carry.is_full()
    required = 1 if pushing_max else 0
    mult = 2

    while True:
        tx, ty = ox + dx * mult, oy + dy * mult
        if out_of_bounds(tx, ty):
            return False
        if carry.is_clear():
            return True
        if pushing_max and required > strength:
            return False

        target = snow_field.get(tx, ty)
        if target.take_needed(carry) == 0:
            required += 1
        else:
            pushing_max = False

        mult += 1


def push(snow_field: SnowField, origin: Point, delta: Point) -> None:
    """Lift the pile in front of ``origin`` and spill it along ``delta``.

    Only call this after :func:`can_push` has returned True; otherwise
    the spill may run off the field and raise ``IndexError``.

    Args:
        snow_field: Field to modify in-place.
        origin: Position of the player doing the pushing.
        delta: Unit step direction.
    """
    ox, oy = origin
    dx, dy = delta
    carry = snow_field.get_mut(ox + dx, oy + dy).take_all()
    mult = 2

    while True:
        snow_field.get_mut(ox + dx * mult, oy + dy * mult).take_needed(carry)
        if carry.is_clear():
            break
        mult += 1
