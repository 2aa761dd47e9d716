"""Craft, projectile and obstacle bodies.

The three kinds share ``position``, ``velocity`` and ``radius`` but no base
class; ``integrate`` and ``collides`` work over any of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from . import settings
from .geometry import Vector, distance, facing_vector, in_bounds, make_outline


def integrate(body):
    body.position = body.position + body.velocity


def collides(a, b) -> bool:
    return distance(a.position, b.position) < a.radius + b.radius


class SizeTier(Enum):
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"

    @property
    def radius(self):
        return settings.OBSTACLE_RADII[self.value]

    @property
    def score(self):
        return settings.OBSTACLE_SCORES[self.value]

    @property
    def smaller(self) -> Optional["SizeTier"]:
        if self is SizeTier.LARGE:
            return SizeTier.MEDIUM
        if self is SizeTier.MEDIUM:
            return SizeTier.SMALL
        return None


@dataclass
class Projectile:
    position: Vector
    velocity: Vector
    radius: float = settings.PROJECTILE_RADIUS
    life: int = settings.PROJECTILE_LIFESPAN
    expired: bool = False
    bounds: tuple = (settings.VIRTUAL_WIDTH, settings.VIRTUAL_HEIGHT)

    def tick(self):
        integrate(self)
        self.life -= 1
        if self.life <= 0 or not in_bounds(self.position, *self.bounds):
            self.expired = True

    def collides_with(self, other):
        return collides(self, other)


@dataclass
class Craft:
    position: Vector
    velocity: Vector = field(default_factory=Vector)
    radius: float = settings.CRAFT_RADIUS
    angle: float = 0.0
    thrusting: bool = False
    cooldown: int = 0

    def rotate_left(self):
        self.angle -= settings.ROTATION_SPEED

    def rotate_right(self):
        self.angle += settings.ROTATION_SPEED

    def thrust(self):
        self.thrusting = True
        self.velocity = self.velocity + facing_vector(self.angle) * settings.THRUST_POWER

    def try_shoot(self, bounds=(settings.VIRTUAL_WIDTH, settings.VIRTUAL_HEIGHT)) -> Optional[Projectile]:
        """Fire a projectile along the facing vector, or return None while cooling down."""
        if self.cooldown > 0:
            return None
        self.cooldown = settings.SHOOT_INTERVAL
        return Projectile(
            position=Vector(self.position),
            velocity=facing_vector(self.angle) * settings.PROJECTILE_SPEED,
            bounds=tuple(bounds),
        )

    def tick(self):
        integrate(self)
        self.thrusting = False
        if self.cooldown > 0:
            self.cooldown -= 1

    def respawn(self, center):
        self.position = Vector(center)
        self.velocity = Vector(0, 0)
        self.angle = 0.0

    def collides_with(self, other):
        return collides(self, other)


@dataclass(eq=False)
class Obstacle:
    position: Vector
    velocity: Vector
    tier: SizeTier
    outline: tuple = ()

    @classmethod
    def spawn(cls, rng, position, tier, drift=settings.WAVE_DRIFT):
        velocity = Vector(rng.uniform(-drift, drift), rng.uniform(-drift, drift))
        outline = make_outline(rng, tier.radius, settings.OBSTACLE_POINTS, settings.OBSTACLE_JITTER)
        return cls(position=Vector(position), velocity=velocity, tier=tier, outline=outline)

    @property
    def radius(self):
        return self.tier.radius

    @property
    def score(self):
        return self.tier.score

    def tick(self):
        integrate(self)

    def fragment(self, rng):
        """Split into two pieces of the next tier down; small obstacles leave nothing."""
        child = self.tier.smaller
        if child is None:
            return []
        return [
            Obstacle.spawn(rng, self.position, child, drift=settings.FRAGMENT_DRIFT)
            for _ in range(2)
        ]

    def collides_with(self, other):
        return collides(self, other)
