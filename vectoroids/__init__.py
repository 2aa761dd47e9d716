"""Vectoroids - a vector-drawn asteroid field arcade game."""

from .controls import ControlState, read_controls
from .entities import Craft, Obstacle, Projectile, SizeTier, collides, integrate
from .simulation import Simulation

__all__ = [
    "ControlState",
    "Craft",
    "Obstacle",
    "Projectile",
    "Simulation",
    "SizeTier",
    "collides",
    "integrate",
    "read_controls",
]
