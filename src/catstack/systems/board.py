from typing import Dict, Optional, Sequence, Tuple
from esper import World
from catstack.events.bus import (
    EventBus,
    EVENT_SHUFFLE_REQUEST,
    EVENT_BOARD_RESET,
    EVENT_GENERATION_DEGRADED,
)
from catstack.components.board import Board
from catstack.components.board_position import BoardPosition
from catstack.components.active_switch import ActiveSwitch
from catstack.components.cat import CatToken
from catstack.components.game_state import GameMode
from catstack.systems.board_generation import Cell, FrozenGrid, generate
from catstack.world import get_game_state, get_palette

Position = Tuple[int, int]


class BoardSystem:
    """Owns the board entity and one entity per cell; the world is the only copy of the grid."""

    def __init__(self, world: World, event_bus: EventBus, *, deal: bool = True):
        self.world = world
        self.event_bus = event_bus
        config = world.config
        self.board_entity = self.world.create_entity(Board(rows=config.rows, cols=config.cols))
        self._cells: Dict[Position, int] = {}
        for r in range(config.rows):
            for c in range(config.cols):
                self._cells[(r, c)] = self.world.create_entity(
                    BoardPosition(row=r, col=c),
                    ActiveSwitch(active=False),
                    CatToken(),
                )
        self.event_bus.subscribe(EVENT_SHUFFLE_REQUEST, self.on_shuffle_request)
        if deal:
            self.reset()

    @property
    def rows(self) -> int:
        return self.world.component_for_entity(self.board_entity, Board).rows

    @property
    def cols(self) -> int:
        return self.world.component_for_entity(self.board_entity, Board).cols

    def on_shuffle_request(self, sender, **kwargs):
        self.reset()

    def reset(self):
        """Deal a fresh board and restart the move counter."""
        result = generate(getattr(self.world, "random", None), self.world.config)
        self.load_grid(result.grid)
        state = get_game_state(self.world)
        state.mode = GameMode.IN_PROGRESS
        state.moves = 0
        state.degraded = result.degraded
        state.attempts = result.attempts
        if result.degraded:
            self.event_bus.emit(EVENT_GENERATION_DEGRADED, attempts=result.attempts)
        self.event_bus.emit(EVENT_BOARD_RESET, attempts=result.attempts, degraded=result.degraded)

    def load_grid(self, grid: Sequence[Sequence[Cell]]):
        """Overwrite every cell from a rows x cols grid (row 0 first).

        Raises ValueError for a wrong shape, a color outside the palette or a
        cat floating above an empty cell.
        """
        rows, cols = self.rows, self.cols
        if len(grid) != rows or any(len(line) != cols for line in grid):
            raise ValueError(f"grid must be {rows}x{cols}")
        palette = get_palette(self.world)
        for c in range(cols):
            seen_cat = False
            for r in range(rows):
                color = grid[r][c]
                if color is None:
                    if seen_cat:
                        raise ValueError(f"empty cell ({r}, {c}) under a cat")
                    continue
                if color not in palette:
                    raise ValueError(f"unknown cat color {color!r} at ({r}, {c})")
                seen_cat = True
        for (r, c), ent in self._cells.items():
            self._write(ent, grid[r][c])

    def in_bounds_column(self, col) -> bool:
        return isinstance(col, int) and not isinstance(col, bool) and 0 <= col < self.cols

    def get_entity_at(self, row: int, col: int) -> Optional[int]:
        return self._cells.get((row, col))

    def color_at(self, row: int, col: int) -> Cell:
        ent = self._cells.get((row, col))
        if ent is None:
            return None
        if not self.world.component_for_entity(ent, ActiveSwitch).active:
            return None
        return self.world.component_for_entity(ent, CatToken).color

    def set_cell(self, row: int, col: int, color: Cell):
        self._write(self._cells[(row, col)], color)

    def top_row(self, col: int) -> Optional[int]:
        """Row of the topmost cat in ``col`` scanning down from row 0, or None if empty."""
        for r in range(self.rows):
            if self.color_at(r, col) is not None:
                return r
        return None

    def landing_row(self, col: int) -> Optional[int]:
        """Row a cat dropped onto ``col`` would occupy, or None when the column is full."""
        top = self.top_row(col)
        if top == 0:
            return None
        if top is None:
            return self.rows - 1
        return top - 1

    def column(self, col: int) -> Tuple[Cell, ...]:
        return tuple(self.color_at(r, col) for r in range(self.rows))

    def is_empty(self) -> bool:
        return all(self.color_at(r, c) is None for (r, c) in self._cells)

    def snapshot(self) -> FrozenGrid:
        return tuple(
            tuple(self.color_at(r, c) for c in range(self.cols))
            for r in range(self.rows)
        )

    def _write(self, ent: int, color: Cell):
        switch: ActiveSwitch = self.world.component_for_entity(ent, ActiveSwitch)
        token: CatToken = self.world.component_for_entity(ent, CatToken)
        switch.active = color is not None
        token.color = color
