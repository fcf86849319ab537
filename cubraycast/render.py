"""Frame buffers, wall textures and drawing of one screen column."""

import math
import sys
from array import array
from dataclasses import dataclass

from PIL import Image

from .raycast import CellKind
from .settings import Face
from .tools import ParseError

_TYPECODE = "I" if array("I").itemsize == 4 else "L"
_MAX_WALL = 1e9


class FrameBuffer:
    """A width x height grid of 32-bit colours, stored row by row."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.pixels = array(_TYPECODE, [0]) * (width * height)

    def put(self, x, y, color):
        """Set the pixel at (x, y); points outside the buffer are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get(self, x, y):
        """Return the colour at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def to_bytes(self):
        """Return the pixels as little-endian 32-bit words (B, G, R, X per pixel)."""
        data = array(self.pixels.typecode, self.pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()


@dataclass(frozen=True)
class Texture:
    """An image as 0xRRGGBB integers, row by row."""

    width: int
    height: int
    pixels: tuple

    def pixel(self, x, y):
        """Return the colour at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def load_texture(path):
    """Load an image file as a Texture, raising ParseError if it cannot be read."""
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
    except (OSError, ValueError):
        raise ParseError("INVALID IMAGE") from None
    width, height = rgb.size
    raw = rgb.tobytes()
    pixels = tuple(int.from_bytes(raw[i:i + 3], "big") for i in range(0, len(raw), 3))
    return Texture(width, height, pixels)


def load_textures(header):
    """Load the four wall textures and the door texture named by a scene header."""
    sources = (
        (Face.NO, header.north),
        (Face.SO, header.south),
        (Face.EA, header.east),
        (Face.WE, header.west),
        (Face.DO, header.door),
    )
    return {face: load_texture(path) for face, path in sources}


def _c_mod(value, modulus):
    if not math.isfinite(value) or modulus == 0:
        return 0
    return int(math.fmod(int(value), modulus))


def texture_column(hit, textures):
    """Return the face to texture a hit with and the texture column to sample."""
    angle = int(hit.cast_angle) % 360
    if hit.vertical:
        if hit.content == CellKind.DOOR:
            face = Face.DO
        elif 0 <= angle < 90 or 270 <= angle < 360:
            face = Face.EA
        else:
            face = Face.WE
        return face, _c_mod(hit.hit_y, textures[face].height)
    if hit.content == CellKind.DOOR:
        face = Face.DO
    elif 0 <= angle < 180:
        face = Face.NO
    else:
        face = Face.SO
    return face, _c_mod(hit.hit_x, textures[face].width)


def _clamp(value, upper):
    return min(max(value, 0), upper - 1)


def draw_column(buffer, pos, hit, wall_h, textures, ceiling, floor):
    """Draw ceiling, textured wall slice and floor in column pos of buffer."""
    row = 0
    if math.isnan(wall_h):
        for row in range(buffer.height):
            buffer.put(pos, row, floor)
        return
    if math.isinf(wall_h):
        wall_h = _MAX_WALL if wall_h > 0 else -_MAX_WALL
    half = buffer.height // 2
    top = half - wall_h / 2
    if 0 < top < buffer.height:
        while row <= top:
            buffer.put(pos, row, ceiling)
            row += 1
    slice_h = int(wall_h)
    face, offset_x = texture_column(hit, textures)
    texture = textures[face]
    ratio = texture.height / slice_h if slice_h else 0.0
    column = _clamp(offset_x, texture.width)
    remaining = wall_h
    while remaining >= 0 and row < buffer.height:
        from_top = row + int(slice_h / 2) - half
        texel_y = _clamp(int(from_top * ratio), texture.height)
        buffer.put(pos, row, texture.pixel(column, texel_y))
        row += 1
        remaining -= 1
    while row < buffer.height:
        buffer.put(pos, row, floor)
        row += 1