from typing import Optional

from catstack.constants import (
    TILE_SIZE, BOTTOM_MARGIN, TOP_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT,
)

def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int):
    """Return (tile_size, start_x, start_y) shared by rendering and input mapping.

    start_y is the bottom edge of the floor row (arcade's y axis points up).
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - TOP_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / cols, max_board_h / rows, TILE_SIZE * 2))
    if tile_size < 20:
        tile_size = 20
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_center(row: int, col: int, rows: int, tile_size: int, start_x: float, start_y: float):
    """Screen center of a cell; row 0 is drawn at the top of the board."""
    x = start_x + col * tile_size + tile_size / 2
    y = start_y + (rows - 1 - row) * tile_size + tile_size / 2
    return x, y


def column_at_point(x: float, y: float, window_width: int, window_height: int, rows: int, cols: int) -> Optional[int]:
    """Column under a pointer position, or None when it falls outside the board."""
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, rows, cols)
    if x < start_x or x >= start_x + cols * tile_size:
        return None
    if y < start_y or y >= start_y + rows * tile_size:
        return None
    return int((x - start_x) // tile_size)
