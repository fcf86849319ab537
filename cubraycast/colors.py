"""Parsing of the "R,G,B" colour values of the floor and ceiling."""

import re

from .tools import ParseError, is_blank

_DIGITS = frozenset("0123456789")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([0-9]*)")


def check_rgb_syntax(text):
    """Raise ParseError unless text holds only digits, blanks and two inner commas."""
    last = len(text) - 1
    commas = 0
    for index, char in enumerate(text):
        if char == ",":
            if index == 0 or index == last or commas >= 2:
                raise ParseError("INVALID RGB")
            commas += 1
        elif not is_blank(char) and char not in _DIGITS:
            raise ParseError("INVALID RGB")


def _leading_int(text):
    digits = _LEADING_INT.match(text).group(1)
    return int(digits) if digits else 0


def parse_rgb(text):
    """Return the colour in text as a 0xRRGGBB integer."""
    check_rgb_syntax(text)
    values = []
    for piece in (part for part in text.split(",") if part):
        value = _leading_int(piece.strip(" ").strip("\t"))
        if value > 255:
            raise ParseError("INVALID RGdB")
        values.append(value)
    if len(values) != 3:
        raise ParseError("INVALID RGB")
    red, green, blue = values
    return (red << 16) | (green << 8) | blue