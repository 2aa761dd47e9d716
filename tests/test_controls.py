"""
Tests for mapping raw key and joystick state onto the four logical controls.
"""

from collections import defaultdict

import pygame
import pytest

from vectoroids.controls import ControlState, read_controls


class FakeJoystick:
    def __init__(self, hat=(0, 0), axes=(0.0, 0.0), buttons=(False,)):
        self.hat = hat
        self.axes = list(axes)
        self.buttons = list(buttons)

    def get_numhats(self):
        return 1

    def get_hat(self, index):
        return self.hat

    def get_numaxes(self):
        return len(self.axes)

    def get_axis(self, index):
        return self.axes[index]

    def get_numbuttons(self):
        return len(self.buttons)

    def get_button(self, index):
        return self.buttons[index]


def pressed(*keys):
    state = defaultdict(bool)
    for key in keys:
        state[key] = True
    return state


class TestKeyboard:
    def test_nothing_held(self):
        assert read_controls(pressed()) == ControlState()

    @pytest.mark.parametrize(
        "key,expected",
        [
            (pygame.K_LEFT, ControlState(left=True)),
            (pygame.K_a, ControlState(left=True)),
            (pygame.K_RIGHT, ControlState(right=True)),
            (pygame.K_d, ControlState(right=True)),
            (pygame.K_UP, ControlState(thrust=True)),
            (pygame.K_w, ControlState(thrust=True)),
            (pygame.K_SPACE, ControlState(fire=True)),
        ],
        ids=["left", "a", "right", "d", "up", "w", "space"],
    )
    def test_single_key(self, key, expected):
        assert read_controls(pressed(key)) == expected

    def test_combined_keys(self):
        controls = read_controls(pressed(pygame.K_LEFT, pygame.K_UP, pygame.K_SPACE))
        assert controls == ControlState(left=True, thrust=True, fire=True)

    def test_snapshot_is_frozen(self):
        controls = ControlState()
        with pytest.raises(AttributeError):
            controls.fire = True


class TestJoystick:
    def test_hat_steers_and_thrusts(self):
        assert read_controls(pressed(), FakeJoystick(hat=(-1, 1))) == ControlState(left=True, thrust=True)
        assert read_controls(pressed(), FakeJoystick(hat=(1, 0))) == ControlState(right=True)

    def test_axes_used_when_hat_centred(self):
        joystick = FakeJoystick(axes=(0.9, -0.8))
        assert read_controls(pressed(), joystick) == ControlState(right=True, thrust=True)

    def test_axes_inside_deadzone_ignored(self):
        joystick = FakeJoystick(axes=(0.3, -0.2))
        assert read_controls(pressed(), joystick) == ControlState()

    def test_axes_ignored_when_hat_active(self):
        joystick = FakeJoystick(hat=(1, 0), axes=(-0.9, 0.0))
        assert read_controls(pressed(), joystick) == ControlState(right=True)

    def test_fire_button(self):
        joystick = FakeJoystick(buttons=(True,))
        assert read_controls(pressed(), joystick) == ControlState(fire=True)
