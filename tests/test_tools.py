import pytest

from cubraycast.tools import ParseError, is_blank, is_open_cell, is_valid_cell


@pytest.mark.parametrize("char, expected", [(" ", True), ("\t", True), ("1", False), ("\n", False)])
def test_is_blank(char, expected):
    assert is_blank(char) is expected


@pytest.mark.parametrize(
    "char, expected",
    [("N", True), ("S", True), ("W", True), ("E", True), ("0", True), ("D", True),
     ("1", False), (" ", False), (";", False)],
)
def test_is_open_cell(char, expected):
    assert is_open_cell(char) is expected


@pytest.mark.parametrize(
    "char, expected",
    [("N", True), ("0", True), ("1", True), (" ", True), ("D", True),
     ("\t", False), (";", False), ("X", False)],
)
def test_is_valid_cell(char, expected):
    assert is_valid_cell(char) is expected


def test_every_open_cell_is_valid():
    for char in "NSWE0D":
        assert is_open_cell(char) and is_valid_cell(char)


def test_parse_error_carries_message():
    error = ParseError("WE NEED A PLAYER")
    assert issubclass(ParseError, ValueError)
    assert error.args == ("WE NEED A PLAYER",)
    assert "WE NEED A PLAYER" in str(error)