from typing import Optional
from esper import World
from catstack.events.bus import (
    EventBus,
    EVENT_COLUMN_CLICK,
    EVENT_COLUMN_SELECTED,
    EVENT_COLUMN_DESELECTED,
    EVENT_MOVE_APPLIED,
    EVENT_MOVE_REJECTED,
    EVENT_BOARD_RESET,
)
from catstack.components.game_state import GameMode
from catstack.systems.board import BoardSystem
from catstack.world import get_game_state


class MoveSystem:
    """Two-click column moves: the first click picks a column, the second drops its top cat.

    The selection is always consumed by the second click, whether or not a
    move results. Illegal attempts leave the board untouched.
    """

    def __init__(self, world: World, event_bus: EventBus, board: BoardSystem):
        self.world = world
        self.event_bus = event_bus
        self.board = board
        self.selected: Optional[int] = None
        self.event_bus.subscribe(EVENT_COLUMN_CLICK, self.on_column_click)
        self.event_bus.subscribe(EVENT_BOARD_RESET, self.on_board_reset)

    def on_column_click(self, sender, **kwargs):
        column = kwargs.get('column')
        if not self.board.in_bounds_column(column):
            return
        if get_game_state(self.world).mode == GameMode.CLEARED:
            return
        self.select_or_move(column)

    def on_board_reset(self, sender, **kwargs):
        self._deselect('reset')

    def select_or_move(self, column: int) -> bool:
        """Drive the selection state machine; returns True when a cat moved."""
        if self.selected is None:
            row = self.board.top_row(column)
            if row is not None:
                self.selected = column
                self.event_bus.emit(EVENT_COLUMN_SELECTED, column=column, row=row)
            return False
        from_col = self.selected
        if from_col == column:
            self._deselect('same_column')
            return False
        self._deselect('move_attempt')
        return self.try_move(from_col, column)

    def can_move(self, from_col: int, to_col: int) -> Optional[str]:
        """Return None when the move is legal, otherwise the rejection reason."""
        top_from = self.board.top_row(from_col)
        if top_from is None:
            return 'source_empty'
        if from_col == to_col:
            return 'same_column'
        if self.board.landing_row(to_col) is None:
            return 'full'
        top_to = self.board.top_row(to_col)
        if top_to is not None:
            color = self.board.color_at(top_from, from_col)
            if self.board.color_at(top_to, to_col) != color:
                return 'color_mismatch'
        return None

    def try_move(self, from_col: int, to_col: int) -> bool:
        reason = self.can_move(from_col, to_col)
        if reason is not None:
            self.event_bus.emit(EVENT_MOVE_REJECTED, from_col=from_col, to_col=to_col, reason=reason)
            return False
        from_row = self.board.top_row(from_col)
        to_row = self.board.landing_row(to_col)
        color = self.board.color_at(from_row, from_col)
        self.board.set_cell(from_row, from_col, None)
        self.board.set_cell(to_row, to_col, color)
        state = get_game_state(self.world)
        state.moves += 1
        # Column clears and the game-clear check run synchronously off this event.
        self.event_bus.emit(
            EVENT_MOVE_APPLIED,
            from_col=from_col,
            to_col=to_col,
            color=color,
            from_row=from_row,
            to_row=to_row,
            moves=state.moves,
        )
        return True

    def _deselect(self, reason: str):
        prev = self.selected
        if prev is None:
            return
        self.selected = None
        self.event_bus.emit(EVENT_COLUMN_DESELECTED, column=prev, reason=reason)
