import logging
import random
import sys
import time

import pygame

from vectoroids import settings
from vectoroids.controls import read_controls
from vectoroids.render import Renderer
from vectoroids.simulation import Simulation

LOGGER = logging.getLogger("vectoroids")


def setup_logging(level=logging.INFO):
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[logging.StreamHandler(sys.stdout)],
        )
    return LOGGER


def seed_from_time():
    return int(time.time()) & 0xFFFFFFFF


def new_game(seed):
    LOGGER.info("Seed: %d", seed)
    return Simulation(rng=random.Random(seed))


def main(seed=None):
    setup_logging()
    pygame.init()
    pygame.joystick.init()
    try:
        screen = pygame.display.set_mode((settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Vectoroids")
        clock = pygame.time.Clock()
        font = pygame.font.SysFont("Arial", 20)
        renderer = Renderer(screen, font)

        joystick = None
        if pygame.joystick.get_count() > 0:
            joystick = pygame.joystick.Joystick(0)
            joystick.init()
            LOGGER.info("Gamepad: %s", joystick.get_name())

        sim = new_game(seed if seed is not None else seed_from_time())

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    renderer.resize(pygame.display.get_surface())
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_n:
                        sim = new_game(seed_from_time())
            if not running:
                break

            controls = read_controls(pygame.key.get_pressed(), joystick)
            sim.step(controls)

            renderer.draw(sim)
            pygame.display.flip()
            clock.tick(settings.FPS)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
