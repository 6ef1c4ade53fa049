"""Shared fixtures for the Whiteout test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from fakes import RecordingDisplay
from whiteout.world.flurry import Flurry
from whiteout.world.world import World


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def flurry(rng: Generator) -> Flurry:
    """A flurry process on the seeded generator."""
    return Flurry(rng=rng)


@pytest.fixture
def empty_world() -> World:
    """A world with no snow and the player at the centre in plow mode."""
    return World()


@pytest.fixture
def display() -> RecordingDisplay:
    """A display that records what was drawn."""
    return RecordingDisplay()
