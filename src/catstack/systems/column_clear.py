from typing import List, Tuple
from esper import World
from catstack.events.bus import (
    EventBus,
    EVENT_MOVE_APPLIED,
    EVENT_COLUMN_CLEARED,
    EVENT_GAME_CLEARED,
)
from catstack.components.game_state import GameMode
from catstack.systems.board import BoardSystem
from catstack.world import get_game_state


class ColumnClearSystem:
    """Win check run after every applied move.

    Every column completely filled with one color is emptied in the same
    pass; only after all of them resolve is the board checked for a full clear.
    """

    def __init__(self, world: World, event_bus: EventBus, board: BoardSystem):
        self.world = world
        self.event_bus = event_bus
        self.board = board
        self.event_bus.subscribe(EVENT_MOVE_APPLIED, self.on_move_applied)

    def on_move_applied(self, sender, **kwargs):
        self.resolve()

    def find_complete_columns(self) -> List[Tuple[int, str]]:
        complete: List[Tuple[int, str]] = []
        for col in range(self.board.cols):
            cells = self.board.column(col)
            first = cells[0]
            if first is not None and all(cell == first for cell in cells):
                complete.append((col, first))
        return complete

    def resolve(self) -> List[Tuple[int, str]]:
        cleared = self.find_complete_columns()
        for col, color in cleared:
            for row in range(self.board.rows):
                self.board.set_cell(row, col, None)
            self.event_bus.emit(EVENT_COLUMN_CLEARED, column=col, color=color)
        state = get_game_state(self.world)
        if state.mode != GameMode.CLEARED and self.board.is_empty():
            state.mode = GameMode.CLEARED
            self.event_bus.emit(EVENT_GAME_CLEARED, moves=state.moves)
        return cleared
