"""Character classes used by the scene parser and the error it raises."""

_BLANKS = frozenset(" \t")
_OPEN_CELLS = frozenset("NSWE0D")
_VALID_CELLS = frozenset("NSWE01 D")


class ParseError(ValueError):
    """Raised when a scene file cannot be used; the message says why."""


def is_blank(c):
    """Return True for a space or a tab."""
    return c in _BLANKS


def is_open_cell(c):
    """Return True for a cell the player can stand in: floor, door or start."""
    return c in _OPEN_CELLS


def is_valid_cell(c):
    """Return True for a character allowed in a normalised map row."""
    return c in _VALID_CELLS