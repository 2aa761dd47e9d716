"""Draws a simulation snapshot onto a pygame surface.

World geometry is scaled from the virtual playfield to the surface size; HUD
text is drawn in actual pixels.
"""

import pygame

from . import settings
from .geometry import Vector

HELP_TEXT = "Arrows/WASD steer  Space shoot  N new game  Esc quit"


def hud_lines(sim):
    lines = {
        "score": f"Score: {sim.score}",
        "lives": f"Lives: {sim.lives}",
        "level": f"Level: {sim.level}",
        "help": HELP_TEXT,
    }
    if sim.is_over:
        lines["banner"] = "Game Over"
        lines["final"] = f"Final Score: {sim.score}"
    return lines


class Renderer:
    def __init__(self, surface, font=None):
        self.surface = surface
        self.font = font
        self.scale = (1.0, 1.0)
        self.resize(surface)

    def resize(self, surface):
        self.surface = surface
        width, height = surface.get_size()
        self.scale = (width / settings.VIRTUAL_WIDTH, height / settings.VIRTUAL_HEIGHT)

    def to_screen(self, pos):
        sx, sy = self.scale
        return (pos.x * sx, pos.y * sy)

    def _shape_points(self, origin, points, angle=0.0):
        return [self.to_screen(origin + Vector(x, y).rotate_rad(angle)) for x, y in points]

    def draw(self, sim):
        self.surface.fill(settings.COLORS["bg"])
        for obstacle in sim.obstacles:
            self.draw_obstacle(obstacle)
        for projectile in sim.projectiles:
            self.draw_projectile(projectile)
        self.draw_craft(sim.craft, sim.is_over)
        if self.font is not None:
            self.draw_hud(sim)

    def draw_obstacle(self, obstacle):
        points = self._shape_points(obstacle.position, obstacle.outline)
        pygame.draw.lines(self.surface, settings.COLORS["obstacle"], True, points, 1)

    def draw_craft(self, craft, game_over=False):
        color = settings.COLORS["warning"] if game_over else settings.COLORS["craft"]
        points = self._shape_points(craft.position, settings.CRAFT_SHAPE, craft.angle)
        pygame.draw.lines(self.surface, color, True, points, 1)
        if craft.thrusting:
            exhaust = self._shape_points(craft.position, settings.EXHAUST_SHAPE, craft.angle)
            pygame.draw.lines(self.surface, settings.COLORS["exhaust"], False, exhaust, 1)

    def draw_projectile(self, projectile):
        radius = max(1, int(round(projectile.radius * min(self.scale))))
        center = self.to_screen(projectile.position)
        pygame.draw.circle(self.surface, settings.COLORS["projectile"], (int(center[0]), int(center[1])), radius)

    def draw_hud(self, sim):
        width, height = self.surface.get_size()
        lines = hud_lines(sim)
        color = settings.COLORS["ui"]

        self.surface.blit(self.font.render(lines["score"], True, color), (10, 10))
        self.surface.blit(self.font.render(lines["level"], True, color), (10, 34))
        text = self.font.render(lines["lives"], True, color)
        self.surface.blit(text, (width - text.get_width() - 10, 10))
        text = self.font.render(lines["help"], True, color)
        self.surface.blit(text, (10, height - text.get_height() - 8))

        if sim.is_over:
            banner = self.font.render(lines["banner"], True, settings.COLORS["warning"])
            final = self.font.render(lines["final"], True, settings.COLORS["warning"])
            self.surface.blit(banner, (width / 2 - banner.get_width() / 2, height / 2))
            self.surface.blit(final, (width / 2 - final.get_width() / 2, height / 2 + 30))
