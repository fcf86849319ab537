"""Casting rays through the grid to find walls and doors."""

import math
from dataclasses import dataclass
from enum import IntEnum

from .settings import PP_WIDTH, UNIT, VIEW_D, normalise_angle

_PROJECTION = (PP_WIDTH // 2) / math.tan((VIEW_D // 2) * (math.pi / 180))
_BLOCKING = frozenset("1D")


class CellKind(IntEnum):
    """What a map cell holds, as seen by a ray."""

    EMPTY = 0
    WALL = 1
    DOOR = 2


@dataclass(frozen=True)
class Hit:
    """Where a ray stopped and what it hit."""

    distance: float
    cast_angle: float
    vertical: bool
    hit_x: float
    hit_y: float
    content: CellKind
    door: tuple | None = None


def _div(a, b):
    """Divide with IEEE semantics for a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _trunc(value):
    return float(int(value)) if math.isfinite(value) else value


def _index(value):
    return int(int(value) / UNIT)


def wall_height(distance):
    """Return the projected height of a wall slice at distance."""
    return _div(UNIT * _PROJECTION, distance)


class Raycaster:
    """Casts rays over a grid of map rows."""

    def __init__(self, rows, width=None, height=None):
        self.grid = [list(row) for row in rows]
        self.width = width if width is not None else max((len(row) for row in self.grid), default=0)
        self.height = height if height is not None else len(self.grid)
        self.door = None

    def _at(self, row, col):
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return " "

    def _inside(self, x, y):
        return y >= 0 and x >= 0 and x / UNIT < self.width and y / UNIT < self.height

    def cell_kind(self, x, y):
        """Return what the cell at (x, y), in cell units, holds."""
        if not (x >= 0 and y >= 0):
            return CellKind.EMPTY
        if y >= self.height or x >= self.width:
            return CellKind.EMPTY
        cell = self._at(int(y), int(x))
        if cell == "1":
            return CellKind.WALL
        if cell == "D":
            return CellKind.DOOR
        return CellKind.EMPTY

    def _walk(self, x, y, step_x, step_y, cell_of):
        """Step along grid lines; return the stop point and whether it left the map."""
        while True:
            if not self._inside(x, y):
                return x, y, True
            row, col = cell_of(x, y)
            if self._at(row, col) in _BLOCKING:
                return x, y, False
            x += step_x
            y += step_y

    def cast(self, cast_angle, view_angle, px, py):
        """Cast one ray at cast_angle from (px, py) for a view facing view_angle."""
        cast_angle = normalise_angle(cast_angle)
        view_angle = normalise_angle(view_angle)
        up = 1 if 0 <= cast_angle <= 180 else 0
        left = 1 if 90 <= cast_angle <= 270 else 0

        hy = math.floor(py / UNIT) * UNIT + (0 if up else UNIT)
        vx = math.floor(px / UNIT) * UNIT + (0 if left else UNIT)
        step_y = -UNIT if up else UNIT
        step_x = -UNIT if left else UNIT
        h_step_x, h_step_y = float(step_x), float(step_y)
        v_step_x, v_step_y = float(step_x), float(step_y)

        alpha = (cast_angle - int(cast_angle / 90) * 90) * math.pi / 180
        tangent = math.tan(alpha)
        if up != left:
            hx = px + _div(py - hy, tangent)
            vy = tangent * (px - vx) + py
            h_step_x = _div(h_step_x, tangent)
            v_step_y *= tangent
        else:
            hx = px - (py - hy) * tangent
            vy = py - _div(px - vx, tangent)
            h_step_x *= tangent
            v_step_y = _div(v_step_y, tangent)

        hx, hy, h_missed = self._walk(
            hx, hy, h_step_x, h_step_y, lambda x, y: (_index(y - up), _index(x))
        )
        vx, vy, _ = self._walk(
            vx, vy, v_step_x, v_step_y, lambda x, y: (_index(y), int((int(x) - left) / UNIT))
        )

        dist_h = _trunc(math.hypot(px - hx, py - hy))
        dist_v = _trunc(math.hypot(px - vx, py - vy))
        door = None
        if h_missed or dist_h >= dist_v:
            vertical = True
            if self.cell_kind((vx - left) / UNIT, vy / UNIT) is CellKind.DOOR:
                door = (_index(vy), int((int(vx) - left) / UNIT))
            raw, hit_x, hit_y = dist_v, vx, vy
        else:
            vertical = False
            if self.cell_kind(hx / UNIT, (hy - up) / UNIT) is CellKind.DOOR:
                door = (_index(hy - up), _index(hx))
            raw, hit_x, hit_y = dist_h, hx, hy
        if door is not None:
            self.door = door

        distance = _trunc(raw * math.cos((view_angle - cast_angle) * math.pi / 180))
        return Hit(
            distance=distance,
            cast_angle=cast_angle,
            vertical=vertical,
            hit_x=hit_x,
            hit_y=hit_y,
            content=CellKind.DOOR if door is not None else CellKind.WALL,
            door=door,
        )

    def cast_frame(self, view_angle, px, py, width=PP_WIDTH):
        """Cast one ray per screen column, from left to right, and return the hits."""
        step = VIEW_D / width
        cast_angle = view_angle + VIEW_D / 2
        hits = []
        for _ in range(width):
            cast_angle = normalise_angle(cast_angle)
            hits.append(self.cast(cast_angle, view_angle, px, py))
            cast_angle -= step
        return hits