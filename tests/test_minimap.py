from cubraycast.minimap import (
    CIRCLE_COLOR,
    draw_circle,
    draw_minimap,
    draw_square,
    draw_view_line,
)
from cubraycast.raycast import Raycaster
from cubraycast.render import FrameBuffer
from cubraycast.settings import BLACK, MINI_UNIT, PURPLE, YELLOW


def test_draw_square_fills_mini_unit_square():
    buffer = FrameBuffer(40, 40)
    draw_square(buffer, 7, 3, 4)
    painted = [(x, y) for y in range(40) for x in range(40) if buffer.get(x, y) == 7]
    assert len(painted) == MINI_UNIT * MINI_UNIT
    assert min(painted) == (3, 4)
    assert max(painted) == (3 + MINI_UNIT - 1, 4 + MINI_UNIT - 1)


def test_draw_circle_covers_centre_within_radius():
    buffer = FrameBuffer(30, 30)
    draw_circle(buffer, 15, 15, 5)
    assert buffer.get(15, 15) == CIRCLE_COLOR
    assert buffer.get(0, 0) == 0
    for y in range(30):
        for x in range(30):
            if buffer.get(x, y) == CIRCLE_COLOR:
                assert (x - 15) ** 2 + (y - 15) ** 2 <= 6 * 6


def test_draw_view_line_scale_leaves_buffer_untouched():
    buffer = FrameBuffer(20, 20)
    assert draw_view_line(buffer, 45.0, 500.0) == 0
    assert set(buffer.pixels) == {0}


def test_draw_minimap_colours_walls_floor_and_player():
    raycaster = Raycaster(["111", "1N1", "111"])
    buffer = FrameBuffer(40, 30)
    draw_minimap(buffer, raycaster, 96.0, 96.0, 90.0, 100.0)
    assert buffer.get(0, 0) == BLACK
    assert buffer.get(14, 9) == PURPLE
    assert buffer.get(20, 15) == CIRCLE_COLOR
    assert buffer.get(39, 15) == BLACK


def test_draw_minimap_shows_doors():
    raycaster = Raycaster(["111", "1N1", "1D1"])
    buffer = FrameBuffer(40, 30)
    draw_minimap(buffer, raycaster, 96.0, 96.0, 90.0, 100.0)
    assert buffer.get(20, 29) == YELLOW


def test_draw_minimap_outside_map_is_background():
    raycaster = Raycaster(["1"])
    buffer = FrameBuffer(40, 30)
    draw_minimap(buffer, raycaster, 2000.0, 2000.0, 0.0, 0.0)
    colours = set(buffer.pixels)
    assert colours == {PURPLE, CIRCLE_COLOR}