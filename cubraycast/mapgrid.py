"""The map grid: finding the player, padding the rows and checking the walls."""

from dataclasses import dataclass

from .tools import ParseError, is_open_cell

_PLAYER_CELLS = frozenset("NSEW")
_EXPANSION = {char: char for char in "10NESW ;D"}
_EXPANSION["\t"] = "    "
_WALL_ERROR = "MAP ISN'T SURROUNDED BY WALLS"


@dataclass(frozen=True)
class PlayerStart:
    """Where the player starts (column, row) and the letter giving its facing."""

    x: int
    y: int
    facing: str


def find_player(lines):
    """Return the single player start in lines, raising if there is none or several."""
    found = [
        PlayerStart(x, y, char)
        for y, line in enumerate(lines)
        for x, char in enumerate(line)
        if char in _PLAYER_CELLS
    ]
    if not found:
        raise ParseError("WE NEED A PLAYER")
    if len(found) > 1:
        raise ParseError("TEHRE IS MORE THAN ONE PLAYER")
    return found[0]


def map_width(lines):
    """Return the width every row is padded to."""
    width = 0
    for line in lines:
        if len(line) > width:
            width = len(line) + 3 * line.count("\t") + 1
    return width


def normalise_row(row, width):
    """Expand tabs to four spaces and pad row with spaces to width."""
    try:
        expanded = "".join(_EXPANSION[char] for char in row)
    except KeyError:
        raise ParseError("INVALID CHARACTER") from None
    return expanded.ljust(width)


def normalise_rows(lines):
    """Return every line normalised to the width of the map."""
    width = map_width(lines)
    return [normalise_row(line, width) for line in lines]


def check_empty_lines(rows):
    """Raise if a row with content follows an empty one."""
    after_gap = False
    for row in rows:
        if row.startswith(";") or not row.strip(" \t"):
            after_gap = True
        elif after_gap:
            raise ParseError("THERE IS AN EMPTY LINE")


def _cell(rows, i, j):
    if i < 0 or j < 0 or i >= len(rows) or j >= len(rows[i]):
        return None
    return rows[i][j]


def _enclosed(rows, i, j):
    neighbours = (_cell(rows, i, j - 1), _cell(rows, i, j + 1),
                  _cell(rows, i - 1, j), _cell(rows, i + 1, j))
    return all(cell is not None and cell != " " for cell in neighbours)


def validate_map(rows):
    """Check that the map is closed by walls and has no gaps; return the rows."""
    rows = tuple(rows)
    if rows and any(is_open_cell(char) for char in rows[0]):
        raise ParseError(_WALL_ERROR)
    for i, row in enumerate(rows):
        for j, char in enumerate(row):
            if is_open_cell(char) and not _enclosed(rows, i, j):
                raise ParseError(_WALL_ERROR)
    check_empty_lines(rows)
    return rows