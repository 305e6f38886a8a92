"""Session object tying one world, one event bus and the core systems together."""
from __future__ import annotations

import random
from typing import Optional

from catstack.config import GameConfig
from catstack.components.game_state import GameMode
from catstack.events.bus import (
    EventBus,
    EVENT_BOARD_RESET,
    EVENT_COLUMN_CLICK,
    EVENT_SHUFFLE_REQUEST,
)
from catstack.systems.board import BoardSystem
from catstack.systems.board_generation import FrozenGrid
from catstack.systems.column_clear import ColumnClearSystem
from catstack.systems.move import MoveSystem
from catstack.world import create_world, get_game_state


class CatStackGame:
    """One independent game. Collaborators talk to it only through the bus.

    Each game owns its bus; handlers subscribed through ``subscribe`` or
    ``event_bus`` only ever see this game's events.

    Pass ``deal=False`` to start from an empty board and load a grid by hand.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        rng: random.Random | None = None,
        deal: bool = True,
    ):
        self.config = config or GameConfig()
        self.event_bus = EventBus()
        self.world = create_world(self.config, rng=rng)
        self.board_system = BoardSystem(self.world, self.event_bus, deal=False)
        self.move_system = MoveSystem(self.world, self.event_bus, self.board_system)
        self.column_clear_system = ColumnClearSystem(self.world, self.event_bus, self.board_system)
        if deal:
            self.board_system.reset()

    def subscribe(self, name: str, fn):
        self.event_bus.subscribe(name, fn)

    def on_column_activated(self, column: int):
        self.event_bus.emit(EVENT_COLUMN_CLICK, column=column)

    def reset(self):
        self.event_bus.emit(EVENT_SHUFFLE_REQUEST)

    def load_grid(self, grid):
        """Replace the board with ``grid`` and start a fresh, non-degraded game on it."""
        self.board_system.load_grid(grid)
        state = get_game_state(self.world)
        state.mode = GameMode.IN_PROGRESS
        state.moves = 0
        state.degraded = False
        state.attempts = 0
        self.event_bus.emit(EVENT_BOARD_RESET, attempts=0, degraded=False)

    @property
    def board(self) -> FrozenGrid:
        return self.board_system.snapshot()

    @property
    def moves(self) -> int:
        return get_game_state(self.world).moves

    @property
    def selected(self) -> Optional[int]:
        return self.move_system.selected

    @property
    def is_cleared(self) -> bool:
        return get_game_state(self.world).mode == GameMode.CLEARED

    @property
    def degraded(self) -> bool:
        return get_game_state(self.world).degraded

    def top_row(self, column: int) -> Optional[int]:
        return self.board_system.top_row(column)

    def landing_row(self, column: int) -> Optional[int]:
        return self.board_system.landing_row(column)
