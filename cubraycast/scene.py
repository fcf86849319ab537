"""Reading a .cub scene: texture paths, colours and the map."""

import os
import re
from dataclasses import dataclass

from .colors import parse_rgb
from .mapgrid import PlayerStart, find_player, map_width, normalise_rows, validate_map
from .tools import ParseError

DOOR_TEXTURE = "textures/door.xpm"

_TEXTURE_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLOR_KEYS = {
    "F": ("floor", "TOO MANY F COLORS"),
    "C": ("ceiling", "TOO MANY C COLORS"),
}
_LEADING_WORD = re.compile(r"[ \t]*([^ \t]*)[ \t]*")


@dataclass
class SceneHeader:
    """Texture paths and colours given before the map."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: int | None = None
    ceiling: int | None = None
    door: str = DOOR_TEXTURE

    def check_complete(self):
        """Raise ParseError naming the first missing entry."""
        required = (
            (self.north, "NORTH TEXTURE IS MISSING"),
            (self.south, "SOUTH TEXTURE IS MISSING"),
            (self.west, "WEST TEXTURE IS MISSING"),
            (self.east, "EAST TEXTURE IS MISSING"),
            (self.ceiling, "C COLOR IS MISSING"),
            (self.floor, "F COLOR IS MISSING"),
        )
        for value, message in required:
            if value is None:
                raise ParseError(message)


@dataclass(frozen=True)
class Scene:
    """A parsed scene: its header, padded map rows and player start."""

    header: SceneHeader
    rows: tuple
    player: PlayerStart
    width: int
    height: int


def check_file_name(path):
    """Raise ParseError unless the name's first dot is followed by "cub" alone."""
    dot = path.find(".")
    if dot <= 0 or path[dot + 1:] != "cub":
        raise ParseError('FILE MUST BE ENDED BY ".cub"!')


def split_lines(text):
    """Split text into lines, with each empty line given as ";"."""
    if ";" in text:
        raise ParseError("INVALID MfAP")
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part or ";" for part in parts]


def _split_first_word(line):
    match = _LEADING_WORD.match(line)
    return match.group(1), line[match.end():]


def _starts_map(word):
    return not word or word.startswith("1")


def parse_header(lines):
    """Read the header entries; return the header and the index of the first map line."""
    header = SceneHeader()
    start = None
    for index, line in enumerate(lines):
        word, content = _split_first_word(line)
        if word in _TEXTURE_KEYS:
            attr = _TEXTURE_KEYS[word]
            if getattr(header, attr) is not None:
                raise ParseError("TOO MANY CARDINAL DIRECTIONS")
            if content:
                setattr(header, attr, content.strip(" ").strip("\t"))
        elif word in _COLOR_KEYS:
            attr, message = _COLOR_KEYS[word]
            if getattr(header, attr) is not None:
                raise ParseError(message)
            if content:
                setattr(header, attr, parse_rgb(content))
        elif start is None and _starts_map(word):
            header.check_complete()
            start = index
        elif word == ";":
            continue
        elif not _starts_map(word):
            raise ParseError("MAP NOT VALID")
    return header, (start if start is not None else 0)


def parse_scene(text):
    """Parse the whole text of a scene file."""
    lines = split_lines(text)
    header, start = parse_header(lines)
    map_lines = lines[start:]
    player = find_player(map_lines)
    width = map_width(map_lines)
    rows = validate_map(normalise_rows(map_lines))
    return Scene(header=header, rows=rows, player=player, width=width, height=len(rows))


def load_scene(path):
    """Check the file name, read the file and parse it."""
    path = os.fspath(path)
    check_file_name(path)
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        raise ParseError("NO SUCH A FILE OR DIRECTORY") from None
    return parse_scene(text)