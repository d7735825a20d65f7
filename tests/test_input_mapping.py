import pytest

from dotloop.components.dot_color import DotColor
from dotloop.constants import BOARD_SIZE
from dotloop.events.bus import EVENT_MOUSE_PRESS, EVENT_DOT_CLICK, EVENT_RESET_REQUEST
from dotloop.systems.input import InputSystem
from dotloop.ui.layout import (
    board_origin_y,
    cell_at_point,
    cell_center,
    compute_board_geometry,
    point_in_rect,
    reset_button_rect,
)
from tests.helpers import make_session, record


class DummyWindow:
    def __init__(self, width=600, height=600):
        self.width = width
        self.height = height


@pytest.fixture
def setup_input():
    session, bus = make_session(fill=DotColor.YELLOW)
    window = DummyWindow()
    InputSystem(bus, window)
    return session, bus, window


def test_geometry_centres_board_above_controls():
    tile_size, start_x, start_y = compute_board_geometry(600, 600)
    assert start_y == board_origin_y()
    assert start_x == (600 - tile_size * BOARD_SIZE) / 2
    assert start_y + tile_size * BOARD_SIZE <= 600
    left, bottom, width, height = reset_button_rect(600)
    assert bottom + height < start_y


def test_cell_centres_round_trip():
    for x, y in [(0, 0), (9, 0), (0, 9), (4, 6)]:
        cx, cy = cell_center(x, y, 800, 700)
        assert cell_at_point(cx, cy, 800, 700) == (x, y)


def test_points_off_board_map_to_nothing():
    tile_size, start_x, start_y = compute_board_geometry(600, 600)
    assert cell_at_point(start_x - 1, start_y + 5, 600, 600) is None
    assert cell_at_point(start_x + 5, start_y - 1, 600, 600) is None
    assert cell_at_point(start_x + tile_size * BOARD_SIZE + 1, start_y + 5, 600, 600) is None
    assert cell_at_point(start_x + 5, start_y + tile_size * BOARD_SIZE + 1, 600, 600) is None


def test_point_in_rect():
    rect = (10, 20, 30, 40)
    assert point_in_rect(10, 20, rect)
    assert point_in_rect(40, 60, rect)
    assert not point_in_rect(41, 30, rect)


def test_click_center_first_tile_maps_correctly(setup_input):
    session, bus, window = setup_input
    clicks = record(bus, EVENT_DOT_CLICK)
    cx, cy = cell_center(0, 0, window.width, window.height)
    bus.emit(EVENT_MOUSE_PRESS, x=cx, y=cy, button=1)
    assert clicks == [{"x": 0, "y": 0}]
    assert session.trail() == ((0, 0),)


def test_click_outside_board_no_event(setup_input):
    session, bus, window = setup_input
    clicks = record(bus, EVENT_DOT_CLICK)
    tile_size, start_x, start_y = compute_board_geometry(window.width, window.height)
    bus.emit(EVENT_MOUSE_PRESS, x=start_x - 10, y=start_y + tile_size / 2, button=1)
    assert clicks == []
    assert session.trail() == ()


def test_non_left_buttons_ignored(setup_input):
    session, bus, window = setup_input
    clicks = record(bus, EVENT_DOT_CLICK)
    cx, cy = cell_center(3, 3, window.width, window.height)
    bus.emit(EVENT_MOUSE_PRESS, x=cx, y=cy, button=4)
    assert clicks == []


def test_reset_button_requests_reset(setup_input):
    session, bus, window = setup_input
    requests = record(bus, EVENT_RESET_REQUEST)
    session.click(5, 5)
    left, bottom, width, height = reset_button_rect(window.width)
    bus.emit(EVENT_MOUSE_PRESS, x=left + width / 2, y=bottom + height / 2, button=1)
    assert requests == [{}]
    assert session.trail() == ()
