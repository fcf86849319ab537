import pytest

from cubraycast.mapgrid import (
    PlayerStart,
    check_empty_lines,
    find_player,
    map_width,
    normalise_row,
    normalise_rows,
    validate_map,
)
from cubraycast.tools import ParseError

ROOM = ["111111", "100001", "10N001", "111111"]


def test_find_player():
    assert find_player(ROOM) == PlayerStart(2, 2, "N")


def test_find_player_missing():
    with pytest.raises(ParseError, match="WE NEED A PLAYER"):
        find_player(["111", "101", "111"])


def test_find_player_twice():
    with pytest.raises(ParseError, match="MORE THAN ONE PLAYER"):
        find_player(["1111", "1NS1", "1111"])


def test_map_width_plain():
    assert map_width(["1111"]) == 5


def test_map_width_counts_tabs():
    assert map_width(["1\t1"]) == 7


def test_map_width_is_at_least_longest_line():
    lines = ["11", "111111", "1"]
    assert map_width(lines) > max(len(line) for line in lines)


def test_normalise_row_expands_tab():
    assert normalise_row("1\t1", 8) == "1    1  "


def test_normalise_row_pads_to_width():
    row = normalise_row("101", 10)
    assert len(row) == 10
    assert row.startswith("101") and row[3:].strip() == ""


def test_normalise_row_rejects_unknown_character():
    with pytest.raises(ParseError, match="INVALID CHARACTER"):
        normalise_row("1X1", 5)


def test_normalise_rows_all_same_width():
    rows = normalise_rows(["1111", "11", "111111"])
    assert {len(row) for row in rows} == {map_width(["1111", "11", "111111"])}


def test_check_empty_lines_rejects_gap_in_map():
    with pytest.raises(ParseError, match="EMPTY LINE"):
        check_empty_lines(["111", ";", "111"])


def test_check_empty_lines_rejects_blank_row_then_content():
    with pytest.raises(ParseError, match="EMPTY LINE"):
        check_empty_lines(["111", "   ", "111"])


def test_validate_map_accepts_closed_room():
    rows = normalise_rows(ROOM + [";"])
    assert validate_map(rows) == tuple(rows)


def test_validate_map_open_first_row():
    with pytest.raises(ParseError, match="SURROUNDED"):
        validate_map(normalise_rows(["1011", "1001", "1111"]))


def test_validate_map_open_next_to_space():
    with pytest.raises(ParseError, match="SURROUNDED"):
        validate_map(normalise_rows(["11111", "10 01", "11111"]))


def test_validate_map_open_last_row():
    with pytest.raises(ParseError, match="SURROUNDED"):
        validate_map(normalise_rows(["1111", "1001", "1101"]))


def test_validate_map_open_at_row_end():
    with pytest.raises(ParseError, match="SURROUNDED"):
        validate_map(normalise_rows(["111", "1N0", "111"]))