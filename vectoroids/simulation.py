"""Fixed-step game controller.

One call to ``Simulation.step`` is one tick:
input -> integration -> wrapping -> craft hits -> projectile hits -> pruning -> waves.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from . import settings
from .controls import ControlState
from .entities import Craft, Obstacle, Projectile, SizeTier, collides
from .geometry import Vector, distance, wrap_position

LOGGER = logging.getLogger(__name__)


class Simulation:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        width: float = settings.VIRTUAL_WIDTH,
        height: float = settings.VIRTUAL_HEIGHT,
        lives: int = settings.STARTING_LIVES,
    ):
        self.rng = rng or random.Random()
        self.width = width
        self.height = height

        self.craft = Craft(position=self.center)
        self.obstacles: List[Obstacle] = []
        self.projectiles: List[Projectile] = []
        self.score = 0
        self.lives = lives
        self.level = 1
        self.is_over = False
        self.frame = 0
        self.events: Dict[str, int] = {}
        self._reset_events()

        self.spawn_wave()
        LOGGER.info("New game: %d obstacles, %d lives", len(self.obstacles), self.lives)

    @property
    def center(self):
        return Vector(self.width / 2, self.height / 2)

    def _reset_events(self):
        self.events = {"shots": 0, "hits": 0, "lives_lost": 0, "waves": 0}

    # ----------------------------
    # Tick
    # ----------------------------

    def step(self, controls: ControlState = ControlState()):
        if self.is_over:
            return
        self._reset_events()
        self.frame += 1

        self._apply_controls(controls)

        self.craft.tick()
        for obstacle in self.obstacles:
            obstacle.tick()
        for projectile in self.projectiles:
            projectile.tick()

        self.craft.position = wrap_position(self.craft.position, self.width, self.height)
        for obstacle in self.obstacles:
            obstacle.position = wrap_position(obstacle.position, self.width, self.height)

        self._handle_craft_collisions()
        self._handle_projectile_collisions()

        self.projectiles = [p for p in self.projectiles if not p.expired]

        if not self.obstacles:
            self.level += 1
            self.spawn_wave()
            self.events["waves"] += 1
            LOGGER.info("Level %d: %d obstacles", self.level, len(self.obstacles))

    def _apply_controls(self, controls):
        if controls.left:
            self.craft.rotate_left()
        if controls.right:
            self.craft.rotate_right()
        if controls.thrust:
            self.craft.thrust()
        if controls.fire:
            projectile = self.craft.try_shoot(bounds=(self.width, self.height))
            if projectile is not None:
                self.projectiles.append(projectile)
                self.events["shots"] += 1

    def _handle_craft_collisions(self):
        if not any(collides(self.craft, o) for o in self.obstacles):
            return
        self.lives -= 1
        self.events["lives_lost"] += 1
        if self.lives <= 0:
            self.is_over = True
            LOGGER.info("Game over: score %d, level %d", self.score, self.level)
        else:
            self.craft.respawn(self.center)
            LOGGER.info("Craft destroyed, %d lives left", self.lives)

    def _handle_projectile_collisions(self):
        # fragments spawned during this pass are not targets until the next tick
        # projectiles that expired during integration still hit until pruned
        targets = list(self.obstacles)
        for projectile in self.projectiles:
            for obstacle in targets:
                if collides(projectile, obstacle):
                    targets.remove(obstacle)
                    projectile.expired = True
                    self.destroy(obstacle)
                    break

    # ----------------------------
    # Obstacles
    # ----------------------------

    def destroy(self, obstacle: Obstacle) -> List[Obstacle]:
        """Replace ``obstacle`` with its fragments and award its score."""
        fragments = obstacle.fragment(self.rng)
        index = self.obstacles.index(obstacle)
        self.obstacles[index:index + 1] = fragments
        self.score += obstacle.score
        self.events["hits"] += 1
        LOGGER.debug("Destroyed %s obstacle (+%d)", obstacle.tier.value, obstacle.score)
        return fragments

    def spawn_wave(self):
        count = self.level + settings.WAVE_BASE_COUNT
        for _ in range(count):
            position = self._safe_position()
            self.obstacles.append(Obstacle.spawn(self.rng, position, SizeTier.LARGE))

    def _safe_position(self):
        pos = None
        for _ in range(settings.SPAWN_ATTEMPTS):
            pos = Vector(self.rng.uniform(0, self.width), self.rng.uniform(0, self.height))
            if distance(pos, self.craft.position) > settings.SPAWN_SAFE_RADIUS:
                return pos
        LOGGER.warning(
            "No spawn point clear of the craft after %d attempts, using %s",
            settings.SPAWN_ATTEMPTS,
            pos,
        )
        return pos

    def info(self):
        return {
            "score": self.score,
            "lives": self.lives,
            "level": self.level,
            "is_over": self.is_over,
            "frame": self.frame,
            "num_obstacles": len(self.obstacles),
            "num_projectiles": len(self.projectiles),
        }
