"""Screen, map and input constants, and angle helpers."""

import math
from enum import IntEnum

PP_HEIGHT = 1000
PP_WIDTH = 1600
UNIT = 64
VIEW_D = 60
SPEED = 30
MINI_UNIT = 15

PURPLE = 0x9FACB7
PINK = 0x00406C
YELLOW = 0xFAFEFD
BLACK = 0x000000

_FACING_ANGLES = {"E": 0.0, "N": 90.0, "W": 180.0, "S": 270.0}


class Key(IntEnum):
    """Key codes the game reacts to."""

    ARROW_LEFT = 65361
    ARROW_UP = 65362
    ARROW_RIGHT = 65363
    ARROW_DOWN = 65364
    LEFT = 97
    FIRE = 102
    UP = 119
    SPACE = 32
    RIGHT = 100
    DOWN = 115
    DESTROY = 65307


class Face(IntEnum):
    """Index of each wall texture."""

    NO = 0
    SO = 1
    WE = 2
    EA = 3
    DO = 4


def normalise_angle(angle):
    """Return angle in degrees brought into the range [0, 360)."""
    result = math.remainder(angle, 360)
    if result < 0:
        result += 360
    return result


def facing_angle(facing):
    """Return the view angle in degrees for a start letter N, S, E or W."""
    try:
        return _FACING_ANGLES[facing]
    except KeyError:
        raise ValueError(f"unknown facing {facing!r}") from None