"""The player's position, facing and movement."""

import math
from dataclasses import dataclass

from .settings import SPEED, UNIT, Key, facing_angle, normalise_angle

TURN_STEP = 7

_FORWARD = frozenset({Key.UP, Key.ARROW_UP})
_BACKWARD = frozenset({Key.DOWN, Key.ARROW_DOWN})
_SIDEWAYS = frozenset({Key.LEFT, Key.RIGHT})
_TURNS = frozenset({Key.ARROW_LEFT, Key.ARROW_RIGHT})


def can_move(grid, row, col):
    """Return True if the cell at row, col is neither a wall nor a closed door."""
    if row < 0 or col < 0:
        return False
    try:
        cell = grid[row][col]
    except IndexError:
        return False
    return cell not in ("1", "D")


def _scaled(func, degrees):
    return int(func(degrees * math.pi / 180) * SPEED)


@dataclass
class Player:
    """Position in map pixels and view angle in degrees."""

    x: float
    y: float
    angle: float = 0.0

    @classmethod
    def from_start(cls, start):
        """Place the player in the centre of its start cell, facing its start letter."""
        return cls(
            x=float(start.x * UNIT + UNIT // 2),
            y=float(start.y * UNIT + UNIT // 2),
            angle=facing_angle(start.facing),
        )

    def _slide(self, grid, dx, dy):
        if can_move(grid, int(self.y / UNIT), int((self.x + dx) / UNIT)):
            self.x += dx
        if can_move(grid, int((self.y + dy) / UNIT), int(self.x / UNIT)):
            self.y += dy

    def turn(self, key):
        """Turn left or right for an arrow key."""
        if key == Key.ARROW_LEFT:
            self.angle = normalise_angle(self.angle + TURN_STEP)
        elif key == Key.ARROW_RIGHT:
            self.angle = normalise_angle(self.angle - TURN_STEP)

    def move_up_down(self, grid, key, distance):
        """Step forward (only with room ahead) or backward along the view."""
        sin_value = _scaled(math.sin, self.angle)
        cos_value = _scaled(math.cos, self.angle)
        if key in _FORWARD and distance > 0:
            self._slide(grid, cos_value, -sin_value)
        if key in _BACKWARD:
            self._slide(grid, -cos_value, sin_value)

    def move_left_right(self, grid, key):
        """Strafe left or right of the view."""
        sin_value = _scaled(math.sin, 90 - self.angle)
        cos_value = _scaled(math.cos, 90 - self.angle)
        if key == Key.LEFT:
            self._slide(grid, -cos_value, -sin_value)
        if key == Key.RIGHT:
            self._slide(grid, cos_value, sin_value)

    def handle_key(self, grid, key, distance):
        """Apply a movement or turning key; return True if the key was one."""
        handled = False
        if key in _SIDEWAYS:
            self.move_left_right(grid, key)
            handled = True
        if key in _FORWARD or key in _BACKWARD:
            self.move_up_down(grid, key, distance)
            handled = True
        if key in _TURNS:
            self.turn(key)
            handled = True
        return handled