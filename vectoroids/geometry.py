"""Vector helpers for the virtual playfield.

Positions and velocities are ``pygame.Vector2`` values. They are treated as
immutable: callers rebind (``pos = pos + vel``) rather than using in-place
operators, and copy a vector before handing it to another entity.
"""

import math

import pygame

Vector = pygame.Vector2


def facing_vector(angle):
    # angle 0 points up on a y-down screen
    return Vector(math.sin(angle), -math.cos(angle))


def wrap_position(pos, width, height):
    x, y = pos.x, pos.y
    if x < 0:
        x += width
    elif x > width:
        x -= width
    if y < 0:
        y += height
    elif y > height:
        y -= height
    return Vector(x, y)


def distance(a, b):
    return (a - b).length()


def in_bounds(pos, width, height):
    return 0 <= pos.x <= width and 0 <= pos.y <= height


def make_outline(rng, radius, count, jitter):
    points = []
    for i in range(count):
        angle = (math.tau / count) * i
        r = radius * rng.uniform(1 - jitter, 1 + jitter)
        points.append((math.cos(angle) * r, math.sin(angle) * r))
    return tuple(points)
