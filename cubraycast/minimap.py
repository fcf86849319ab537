"""The minimap drawn in the corner of the view."""

import math
from array import array

from .raycast import CellKind
from .settings import BLACK, MINI_UNIT, PURPLE, UNIT, YELLOW, normalise_angle

CIRCLE_COLOR = 0xFF777777
PLAYER_RADIUS = 5
VIEW_LINE_SCALE = MINI_UNIT // UNIT


def draw_square(buffer, color, x, y):
    """Fill a MINI_UNIT square whose top-left corner is (x, y)."""
    for dy in range(MINI_UNIT):
        for dx in range(MINI_UNIT):
            buffer.put(x + dx, y + dy, color)


def draw_circle(buffer, x, y, radius):
    """Draw a filled disc of the given radius centred on (x, y)."""
    r = radius
    while r > 0:
        degrees = 0.0
        while degrees < 360:
            rad = degrees * math.pi / 180
            buffer.put(int(x + r * math.cos(rad)), int(y + r * math.sin(rad)), CIRCLE_COLOR)
            degrees += 0.1
        r -= 1


def draw_view_line(buffer, angle, distance):
    """Draw the view direction from the centre; return the number of steps drawn."""
    steps = distance * VIEW_LINE_SCALE
    if not math.isfinite(steps) or steps <= 0:
        return 0
    x = float(buffer.width // 2 + MINI_UNIT // 2)
    y = float(buffer.height // 2 + MINI_UNIT // 2)
    rad = normalise_angle(angle) * math.pi / 180
    dx, dy = math.cos(rad), -math.sin(rad)
    count = 0
    while steps > 0:
        buffer.put(int(x), int(y), BLACK)
        buffer.put(int(x + 1), int(y), BLACK)
        x += dx
        y += dy
        steps -= 1
        count += 1
    return count


def draw_minimap(buffer, raycaster, px, py, angle, distance):
    """Draw the map around the player at (px, py), centred in buffer."""
    buffer.pixels[:] = array(buffer.pixels.typecode, [PURPLE]) * len(buffer.pixels)
    width, height = buffer.width, buffer.height
    mini_x = px / UNIT * MINI_UNIT
    mini_y = py / UNIT * MINI_UNIT
    top = math.floor(mini_y - height // 2)
    left = math.floor(mini_x - width // 2)
    for y_mov in range(height):
        map_y = (top + y_mov) / MINI_UNIT
        for x_mov in range(width):
            kind = raycaster.cell_kind((left + x_mov) / MINI_UNIT, map_y)
            if kind is CellKind.WALL:
                buffer.put(x_mov, y_mov, BLACK)
            elif kind is CellKind.DOOR:
                buffer.put(x_mov, y_mov, YELLOW)
    draw_view_line(buffer, angle, distance)
    draw_circle(buffer, width // 2, height // 2, PLAYER_RADIUS)
    return buffer