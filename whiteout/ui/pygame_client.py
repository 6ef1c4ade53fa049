"""Pygame character-cell terminal for Whiteout.

Provides both halves of the outside world the session needs: a window
of fixed-size character cells that can be written one glyph at a time,
and a blocking stream of input events.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from whiteout.simulation.events import Close, Key, KeyCode
from whiteout.ui.presenter import BLACK, WHITE

if TYPE_CHECKING:
    from whiteout.simulation.events import Event
    from whiteout.ui.presenter import Colour

_KEYMAP: dict[int, KeyCode] = {
    pygame.K_SPACE: KeyCode.SPACE,
    pygame.K_h: KeyCode.H,
    pygame.K_j: KeyCode.J,
    pygame.K_k: KeyCode.K,
    pygame.K_l: KeyCode.L,
}


def translate_event(event: pygame.event.Event) -> Event | None:
    """Convert a pygame event into a game event.

    Returns:
        ``Close`` for window close, ``Key`` for any key press, and
        ``None`` for everything else (mouse motion, focus changes...).
    """
    if event.type == pygame.QUIT:
        return Close()
    if event.type == pygame.KEYDOWN:
        return Key(_KEYMAP.get(event.key, KeyCode.OTHER))
    return None


class PygameTerminal:
    """A pygame window laid out as a grid of character cells.

    Attributes:
        cell_width: Pixel width of one cell.
        cell_height: Pixel height of one cell.
        font_size: Monospace font point size.
        screen: The window surface, or None until :meth:`open`.
    """

    def __init__(
        self,
        cell_width: int = 10,
        cell_height: int = 18,
        font_size: int = 16,
    ) -> None:
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.font_size = font_size
        self.screen: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None
        self._fg: Colour = WHITE
        self._bg: Colour = BLACK
        self._glyphs: dict[tuple[str, Colour], pygame.Surface] = {}

    def open(self, title: str, width: int, height: int) -> None:
        """Create the window sized to ``width`` x ``height`` cells."""
        pygame.init()
        self.screen = pygame.display.set_mode(
            (width * self.cell_width, height * self.cell_height),
        )
        pygame.display.set_caption(title)
        self.font = pygame.font.SysFont("monospace", self.font_size)

    def set_colors(self, fg: Colour, bg: Colour) -> None:
        self._fg = fg
        self._bg = bg

    def put_at(self, x: int, y: int, glyph: str) -> None:
        """Paint one cell with the current colours."""
        screen = self._require_screen()
        left, top = x * self.cell_width, y * self.cell_height
        screen.fill(self._bg, (left, top, self.cell_width, self.cell_height))
        if glyph != " ":
            screen.blit(self._render_glyph(glyph), (left, top))

    def print_at(self, x: int, y: int, text: str) -> None:
        for i, glyph in enumerate(text):
            self.put_at(x + i, y, glyph)

    def refresh(self) -> None:
        pygame.display.flip()

    def close(self) -> None:
        """Tear down the window.  Safe to call more than once."""
        self.screen = None
        self.font = None
        self._glyphs.clear()
        pygame.quit()

    def next_event(self) -> Event:
        """Block until the player closes the window or presses a key."""
        while True:
            event = translate_event(pygame.event.wait())
            if event is not None:
                return event

    def _require_screen(self) -> pygame.Surface:
        if self.screen is None:
            msg = "display is not open"
            raise RuntimeError(msg)
        return self.screen

    def _render_glyph(self, glyph: str) -> pygame.Surface:
        key = (glyph, self._fg)
        surf = self._glyphs.get(key)
        if surf is None:
            assert self.font is not None
            surf = self.font.render(glyph, True, self._fg)
            self._glyphs[key] = surf
        return surf
