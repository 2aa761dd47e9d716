import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from vectoroids.entities import Obstacle, SizeTier
from vectoroids.geometry import Vector
from vectoroids.simulation import Simulation


@pytest.fixture
def rng():
    """Seeded RNG so obstacle shapes and drift are reproducible."""
    return random.Random(1234)


@pytest.fixture
def anchor():
    """A motionless obstacle in a corner, keeping the field non-empty."""
    return Obstacle(position=Vector(50, 50), velocity=Vector(0, 0), tier=SizeTier.SMALL)


@pytest.fixture
def sim(rng, anchor):
    """Simulation with the opening wave replaced by a single parked obstacle."""
    simulation = Simulation(rng=rng)
    simulation.obstacles = [anchor]
    return simulation


@pytest.fixture
def parked():
    """Factory for motionless obstacles at a given spot."""
    def _parked(x, y, tier=SizeTier.LARGE, velocity=(0, 0)):
        return Obstacle(position=Vector(x, y), velocity=Vector(velocity), tier=tier)
    return _parked
