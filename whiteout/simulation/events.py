"""Input events consumed by the session.

Events are small tagged values: either the window was closed, or a key
was pressed.  Keys the game does not use arrive as ``KeyCode.OTHER``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from whiteout.player.player import Point


class KeyCode(Enum):
    """Keys the game distinguishes."""

    SPACE = auto()
    H = auto()
    J = auto()
    K = auto()
    L = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Close:
    """The display window was closed."""


@dataclass(frozen=True)
class Key:
    """A key press.

    Attributes:
        code: Which key was pressed.
    """

    code: KeyCode


Event = Union[Close, Key]

# vi-style movement: left, down, up, right
DIRECTIONS: dict[KeyCode, Point] = {
    KeyCode.H: (-1, 0),
    KeyCode.J: (0, 1),
    KeyCode.K: (0, -1),
    KeyCode.L: (1, 0),
}
