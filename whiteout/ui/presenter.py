"""Presenter — draws a World onto a character-cell display.

The presenter only reads the world.  It talks to the screen through the
small ``Display`` protocol so any cell-addressable backend (the pygame
window, or a recording fake in tests) can be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from whiteout.player.player import ToolMode
from whiteout.world.field import HEIGHT, WIDTH

if TYPE_CHECKING:
    from whiteout.simulation.events import Event
    from whiteout.world.snow import SnowCell
    from whiteout.world.world import World

Colour = tuple[int, int, int]

WHITE: Colour = (255, 255, 255)
BLACK: Colour = (0, 0, 0)
RED: Colour = (255, 0, 0)

PLAYER_GLYPH = "@"

_GLYPHS = {
    0: " ",
    1: ".",
    2: "-",
    3: ":",
    4: "+",
    5: "*",
    6: "#",
}

_TOOL_LABELS = {
    ToolMode.PLOW: "\\_",
    ToolMode.SHOVEL: "->",
}


class Display(Protocol):
    """A grid of coloured character cells."""

    def open(self, title: str, width: int, height: int) -> None: ...

    def set_colors(self, fg: Colour, bg: Colour) -> None: ...

    def put_at(self, x: int, y: int, glyph: str) -> None: ...

    def print_at(self, x: int, y: int, text: str) -> None: ...

    def refresh(self) -> None: ...

    def close(self) -> None: ...


class EventSource(Protocol):
    """Blocking source of input events."""

    def next_event(self) -> Event: ...


def glyph_for(snow: SnowCell) -> str:
    """Return the character drawn for a pile.

    Raises:
        ValueError: If the pile height is outside 0-6.
    """
    try:
        return _GLYPHS[snow.height]
    except KeyError:
        msg = f"no glyph for snow height {snow.height}"
        raise ValueError(msg) from None


def colour_for(snow: SnowCell) -> Colour:
    """Return the foreground colour for a pile (black when clear)."""
    glyph_for(snow)
    return BLACK if snow.is_clear() else WHITE


class Presenter:
    """Renders the field, the avatar, and the status line.

    Attributes:
        display: Where to draw.
    """

    def __init__(self, display: Display) -> None:
        self.display = display

    def status_text(self, world: World) -> str:
        """Return the status line, e.g. ``"shovel: ->*"``."""
        player = world.player
        marker = "*" if player.is_carrying else " "
        return f"shovel: {_TOOL_LABELS[player.tool]}{marker}"

    def render(self, world: World) -> None:
        """Draw one full frame and commit it."""
        display = self.display
        for y in range(HEIGHT):
            for x in range(WIDTH):
                snow = world.snow_field.cells[y][x]
                display.set_colors(colour_for(snow), BLACK)
                display.put_at(x, y, glyph_for(snow))

        player = world.player
        display.set_colors(WHITE if player.is_carrying else RED, BLACK)
        display.put_at(player.x, player.y, PLAYER_GLYPH)

        display.set_colors(WHITE, BLACK)
        display.print_at(0, HEIGHT, self.status_text(world))
        display.refresh()
