from typing import Any, Dict, List, Optional, Tuple

from esper import World

from catstack.events.bus import (
    EventBus,
    EVENT_TICK,
    EVENT_COLUMN_SELECTED,
    EVENT_COLUMN_DESELECTED,
    EVENT_COLUMN_CLEARED,
    EVENT_GAME_CLEARED,
    EVENT_BOARD_RESET,
)
from catstack.components.board import Board
from catstack.components.board_position import BoardPosition
from catstack.components.active_switch import ActiveSwitch
from catstack.components.cat import CatToken
from catstack.components.game_state import GameState
from catstack.constants import CLEAR_MESSAGE_SECONDS, TOP_MARGIN
from catstack.rendering.cat_parts import BODY, HEAD, TAIL, cat_part, has_face
from catstack.ui.layout import cell_center, compute_board_geometry
from catstack.world import get_palette

PADDING = 4
COLUMN_BG = (52, 44, 70)
SELECTED_OUTLINE = (255, 215, 0)
TEXT_COLOR = (240, 240, 240)
FACE_DETAIL = (30, 30, 30)
FACE_DETAIL_ON_DARK = (220, 220, 220)


class RenderSystem:
    """Draws the board straight from world components and keeps the message line.

    Layout is cached every frame in ``_last_tile_layout`` even when no arcade
    window exists so headless tests can inspect what would be drawn.
    """

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_COLUMN_SELECTED, self.on_column_selected)
        self.event_bus.subscribe(EVENT_COLUMN_DESELECTED, self.on_column_deselected)
        self.event_bus.subscribe(EVENT_COLUMN_CLEARED, self.on_column_cleared)
        self.event_bus.subscribe(EVENT_GAME_CLEARED, self.on_game_cleared)
        self.event_bus.subscribe(EVENT_BOARD_RESET, self.on_board_reset)
        self.selected: Optional[Tuple[int, int]] = None
        self.message = ""
        self._message_timer: Optional[float] = None
        self._last_tile_layout: Dict[Tuple[int, int], Dict[str, Any]] = {}

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        if self._message_timer is None:
            return
        self._message_timer -= dt
        if self._message_timer <= 0:
            self._message_timer = None
            self.message = ""

    def on_column_selected(self, sender, **kwargs):
        self.selected = (kwargs.get('row'), kwargs.get('column'))

    def on_column_deselected(self, sender, **kwargs):
        self.selected = None

    def on_column_cleared(self, sender, **kwargs):
        self.message = f"Cat {kwargs.get('color')} is complete!"
        self._message_timer = CLEAR_MESSAGE_SECONDS

    def on_game_cleared(self, sender, **kwargs):
        self.message = "Game Clear!"
        self._message_timer = None

    def on_board_reset(self, sender, **kwargs):
        self.selected = None
        self._message_timer = None
        if kwargs.get('degraded'):
            self.message = "No fair deal found; some cats start in long rows."
        else:
            self.message = ""

    def grid(self) -> List[List[Optional[str]]]:
        board = self._board()
        grid: List[List[Optional[str]]] = [[None] * board.cols for _ in range(board.rows)]
        for _, (pos, switch, token) in self.world.get_components(BoardPosition, ActiveSwitch, CatToken):
            if switch.active:
                grid[pos.row][pos.col] = token.color
        return grid

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        board = self._board()
        palette = get_palette(self.world)
        grid = self.grid()
        tile_size, start_x, start_y = compute_board_geometry(
            self.window.width, self.window.height, board.rows, board.cols,
        )
        radius = max(tile_size - PADDING, 4) / 2
        self._last_tile_layout = {}

        if not headless:
            for col in range(board.cols):
                arcade.draw_lbwh_rectangle_filled(
                    start_x + col * tile_size + PADDING / 2,
                    start_y,
                    tile_size - PADDING,
                    board.rows * tile_size,
                    COLUMN_BG,
                )

        for row in range(board.rows):
            for col in range(board.cols):
                color = grid[row][col]
                if color is None:
                    continue
                x, y = cell_center(row, col, board.rows, tile_size, start_x, start_y)
                part = cat_part(grid, row, col)
                self._last_tile_layout[(row, col)] = {
                    "center": (x, y),
                    "radius": radius,
                    "color": color,
                    "part": part,
                }
                if headless:
                    continue
                self._draw_cat(arcade, x, y, radius, tile_size, palette.rgb_for(color), part)
                if self.selected == (row, col):
                    arcade.draw_circle_outline(x, y, radius + 3, SELECTED_OUTLINE, 3)

        if headless:
            return
        moves = self._moves()
        top = start_y + board.rows * tile_size
        arcade.draw_text(
            f"Moves: {moves}", start_x, top + TOP_MARGIN * 0.55, TEXT_COLOR, 14,
        )
        if self.message:
            arcade.draw_text(
                self.message,
                self.window.width / 2,
                top + TOP_MARGIN * 0.15,
                TEXT_COLOR,
                18,
                anchor_x="center",
            )

    def _draw_cat(self, arcade, x, y, radius, tile_size, rgb, part):
        half = tile_size / 2
        if part == BODY:
            arcade.draw_lbwh_rectangle_filled(x - radius, y - half, radius * 2, tile_size, rgb)
            return
        if part == HEAD:
            # Bridge to the body below.
            arcade.draw_lbwh_rectangle_filled(x - radius, y - half, radius * 2, half, rgb)
        elif part == TAIL:
            arcade.draw_lbwh_rectangle_filled(x - radius, y, radius * 2, half, rgb)
        arcade.draw_circle_filled(x, y, radius, rgb)
        if not has_face(part):
            return
        ear = radius * 0.45
        arcade.draw_triangle_filled(
            x - radius * 0.85, y + radius * 0.35, x - radius * 0.25, y + radius * 0.8,
            x - radius * 0.8, y + radius + ear * 0.4, rgb,
        )
        arcade.draw_triangle_filled(
            x + radius * 0.85, y + radius * 0.35, x + radius * 0.25, y + radius * 0.8,
            x + radius * 0.8, y + radius + ear * 0.4, rgb,
        )
        detail = FACE_DETAIL_ON_DARK if sum(rgb) < 300 else FACE_DETAIL
        arcade.draw_circle_filled(x - radius * 0.35, y + radius * 0.15, radius * 0.1, detail)
        arcade.draw_circle_filled(x + radius * 0.35, y + radius * 0.15, radius * 0.1, detail)
        arcade.draw_line(x - radius * 0.2, y - radius * 0.3, x + radius * 0.2, y - radius * 0.3, detail, 2)

    def _board(self) -> Board:
        for _, board in self.world.get_component(Board):
            return board
        raise RuntimeError("Board component not found")

    def _moves(self) -> int:
        for _, state in self.world.get_component(GameState):
            return state.moves
        return 0
