from typing import Optional, Tuple

from dotloop.constants import (
    BOARD_SIZE, BOTTOM_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT,
    STATUS_BAR_HEIGHT, RESET_BUTTON_WIDTH, RESET_BUTTON_HEIGHT,
)

Rect = Tuple[float, float, float, float]  # left, bottom, width, height


def board_origin_y() -> float:
    """Bottom edge of the board; the reset button and status label sit beneath it."""
    return BOTTOM_MARGIN + RESET_BUTTON_HEIGHT + STATUS_BAR_HEIGHT


def compute_board_geometry(window_width: int, window_height: int):
    """Return (tile_size, start_x, start_y) for the board, shared by input mapping and rendering."""
    start_y = board_origin_y()
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - start_y) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / BOARD_SIZE, max_board_h / BOARD_SIZE))
    if tile_size < 20:
        tile_size = 20
    total_width = BOARD_SIZE * tile_size
    start_x = (window_width - total_width) / 2
    return tile_size, start_x, start_y


def cell_at_point(px: float, py: float, window_width: int, window_height: int) -> Optional[Tuple[int, int]]:
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height)
    if px < start_x or py < start_y:
        return None
    x = int((px - start_x) // tile_size)
    y = int((py - start_y) // tile_size)
    if x >= BOARD_SIZE or y >= BOARD_SIZE:
        return None
    return x, y


def tile_center(x: int, y: int, tile_size: int, start_x: float, start_y: float) -> Tuple[float, float]:
    return start_x + x * tile_size + tile_size / 2, start_y + y * tile_size + tile_size / 2


def cell_center(x: int, y: int, window_width: int, window_height: int) -> Tuple[float, float]:
    return tile_center(x, y, *compute_board_geometry(window_width, window_height))


def reset_button_rect(window_width: int) -> Rect:
    left = (window_width - RESET_BUTTON_WIDTH) / 2
    return left, BOTTOM_MARGIN, RESET_BUTTON_WIDTH, RESET_BUTTON_HEIGHT


def status_label_origin(window_width: int) -> Tuple[float, float]:
    return window_width / 2, BOTTOM_MARGIN + RESET_BUTTON_HEIGHT + STATUS_BAR_HEIGHT / 2


def point_in_rect(px: float, py: float, rect: Rect) -> bool:
    left, bottom, width, height = rect
    return left <= px <= left + width and bottom <= py <= bottom + height
