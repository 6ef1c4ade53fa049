"""Session — the input -> update -> render loop.

Each input event is handled in a fixed order:

1. Dispatch the event to the player controller (or ignore it)
2. Apply one update tick of flurries
3. Redraw the whole world

A close event ends the loop without a final update.  The display is
opened when the loop starts and closed on every way out of it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

import numpy as np

from whiteout.player.controller import PlayerController
from whiteout.simulation.config import GameConfig
from whiteout.simulation.events import DIRECTIONS, Close, Key, KeyCode
from whiteout.ui.presenter import Presenter
from whiteout.world.field import HEIGHT, STATUS_HEIGHT, WIDTH
from whiteout.world.flurry import Flurry
from whiteout.world.world import World

if TYPE_CHECKING:
    from whiteout.simulation.events import Event
    from whiteout.ui.presenter import Display, EventSource

logger = logging.getLogger(__name__)

TITLE = "Whiteout"


class SessionState(Enum):
    """Lifecycle of a session."""

    RUNNING = auto()
    CLOSED = auto()


@dataclass
class Session:
    """Drives one game from first frame to window close.

    Attributes:
        world: Game state.
        flurry: Snowfall process shared by init and updates.
        display: Where frames are drawn.
        events: Where input comes from.
        config: Tunables for this session.
        state: Whether the loop is still running.
    """

    world: World
    flurry: Flurry
    display: Display
    events: EventSource
    config: GameConfig = field(default_factory=GameConfig)
    state: SessionState = SessionState.RUNNING
    controller: PlayerController = field(init=False)
    presenter: Presenter = field(init=False)

    def __post_init__(self) -> None:
        """Wire up the controller and presenter."""
        self.controller = PlayerController(
            world=self.world,
            strength=self.config.plow_strength,
        )
        self.presenter = Presenter(self.display)

    @classmethod
    def create(
        cls,
        config: GameConfig,
        display: Display,
        events: EventSource,
    ) -> Session:
        """Build a session with a freshly snowed-in world.

        Args:
            config: Game configuration (seed, flurry rates, strength).
            display: Display backend to draw on.
            events: Input backend.

        Returns:
            A session ready to :meth:`run`.
        """
        rng = np.random.default_rng(config.seed)
        flurry = Flurry(rng=rng, tries=config.flurry_tries)
        world = World.randomized(flurry, config.initial_flurries)
        return cls(
            world=world,
            flurry=flurry,
            display=display,
            events=events,
            config=config,
        )

    @property
    def is_running(self) -> bool:
        return self.state is SessionState.RUNNING

    def handle(self, event: Event) -> None:
        """Apply one input event, then update and redraw.

        Args:
            event: The event to process.  Unrecognised keys still
                advance the snowfall.
        """
        if isinstance(event, Close):
            logger.info("session closed")
            self.state = SessionState.CLOSED
            return

        logger.debug("event %s", event)
        if isinstance(event, Key):
            if event.code is KeyCode.SPACE:
                self.controller.flip_shovel()
            elif event.code in DIRECTIONS:
                self.controller.move_player(DIRECTIONS[event.code])

        self.update()
        self.presenter.render(self.world)

    def update(self) -> None:
        """Apply one tick of flurries."""
        self.flurry.run(self.world.snow_field, self.config.flurries_per_update)

    def run(self) -> None:
        """Open the display and process events until it is closed."""
        self.display.open(TITLE, WIDTH, HEIGHT + STATUS_HEIGHT)
        try:
            logger.info("session started")
            self.presenter.render(self.world)
            while self.is_running:
                self.handle(self.events.next_event())
        finally:
            self.display.close()
