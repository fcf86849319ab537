import math

import pytest

from cubraycast.raycast import CellKind, Raycaster, wall_height
from cubraycast.settings import UNIT, VIEW_D

ROOM = ("11111", "10001", "10N01", "10001", "11111")
DOOR_ROOM = ("11111", "1N0D1", "11111")
CENTRE = 2 * UNIT + UNIT // 2


def test_cast_east_hits_vertical_wall():
    hit = Raycaster(ROOM).cast(0, 0, CENTRE, CENTRE)
    assert hit.vertical
    assert hit.hit_x == 4 * UNIT
    assert hit.distance == 4 * UNIT - CENTRE
    assert hit.content is CellKind.WALL
    assert hit.door is None


def test_cast_diagonal_lands_on_corner_grid_line():
    hit = Raycaster(ROOM).cast(45, 45, CENTRE, CENTRE)
    assert hit.vertical
    assert hit.hit_x == pytest.approx(4 * UNIT)
    assert hit.hit_y == pytest.approx(UNIT)
    assert hit.hit_x % UNIT == pytest.approx(0)


def test_cast_normalises_angles():
    caster = Raycaster(ROOM)
    assert caster.cast(360, 360, CENTRE, CENTRE) == caster.cast(0, 0, CENTRE, CENTRE)


def test_off_axis_ray_is_corrected_to_shorter_distance():
    caster = Raycaster(ROOM)
    straight = caster.cast(10, 10, CENTRE, CENTRE)
    corrected = caster.cast(10, 0, CENTRE, CENTRE)
    assert corrected.distance <= straight.distance


def test_cast_records_door():
    caster = Raycaster(DOOR_ROOM)
    start = UNIT + UNIT // 2
    assert caster.door is None
    hit = caster.cast(0, 0, start, start)
    assert hit.content is CellKind.DOOR
    assert hit.door == (1, 3)
    assert caster.door == (1, 3)


@pytest.mark.parametrize(
    "x, y, kind",
    [
        (0, 0, CellKind.WALL),
        (1.5, 1.2, CellKind.EMPTY),
        (3.9, 1.0, CellKind.DOOR),
        (-1, 1, CellKind.EMPTY),
        (1, 3, CellKind.EMPTY),
        (5, 1, CellKind.EMPTY),
    ],
)
def test_cell_kind(x, y, kind):
    assert Raycaster(DOOR_ROOM).cell_kind(x, y) is kind


def test_cast_frame_covers_the_view():
    columns = 8
    hits = Raycaster(ROOM).cast_frame(0, CENTRE, CENTRE, columns)
    assert len(hits) == columns
    assert hits[0].cast_angle == pytest.approx(VIEW_D / 2)
    for hit in hits:
        assert math.isfinite(hit.distance)
        assert hit.distance > 0
    for before, after in zip(hits, hits[1:]):
        assert (before.cast_angle - after.cast_angle) % 360 == pytest.approx(VIEW_D / columns)


def test_wall_height_is_inverse_to_distance():
    assert wall_height(100) == pytest.approx(2 * wall_height(200))
    assert wall_height(50) > wall_height(500)


def test_wall_height_at_zero_distance_is_infinite():
    assert wall_height(0) == math.inf