"""Per-frame input snapshot built from pygame key and joystick state."""

from dataclasses import dataclass

import pygame

from . import settings

KEY_BINDINGS = {
    "left": (pygame.K_LEFT, pygame.K_a),
    "right": (pygame.K_RIGHT, pygame.K_d),
    "thrust": (pygame.K_UP, pygame.K_w),
    "fire": (pygame.K_SPACE,),
}


@dataclass(frozen=True)
class ControlState:
    left: bool = False
    right: bool = False
    thrust: bool = False
    fire: bool = False


def _held(keys, control):
    return any(keys[key] for key in KEY_BINDINGS[control])


def read_controls(keys, joystick=None):
    """Build a ControlState from ``pygame.key.get_pressed()`` and an optional joystick."""
    left = _held(keys, "left")
    right = _held(keys, "right")
    thrust = _held(keys, "thrust")
    fire = _held(keys, "fire")

    if joystick is not None:
        hat_x = hat_y = 0
        if joystick.get_numhats() > 0:
            hat_x, hat_y = joystick.get_hat(0)
        if hat_x < 0:
            left = True
        if hat_x > 0:
            right = True
        if hat_y > 0:
            thrust = True
        if hat_x == 0 and hat_y == 0:
            axes = joystick.get_numaxes()
            axis_x = joystick.get_axis(settings.JOY_AXIS_X) if axes > settings.JOY_AXIS_X else 0.0
            axis_y = joystick.get_axis(settings.JOY_AXIS_Y) if axes > settings.JOY_AXIS_Y else 0.0
            if axis_x < -settings.JOY_AXIS_DEADZONE:
                left = True
            if axis_x > settings.JOY_AXIS_DEADZONE:
                right = True
            if axis_y < -settings.JOY_AXIS_DEADZONE:
                thrust = True
        if joystick.get_numbuttons() > settings.JOY_FIRE_BUTTON and joystick.get_button(settings.JOY_FIRE_BUTTON):
            fire = True

    return ControlState(left=left, right=right, thrust=thrust, fire=fire)
