from esper import World
from catstack.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_COLUMN_CLICK
from catstack.components.board import Board
from catstack.ui.layout import column_at_point

MOUSE_BUTTON_LEFT = 1


class InputSystem:
    """Turns raw pointer presses into column clicks; a whole column is one hit target."""

    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button', MOUSE_BUTTON_LEFT)
        if x is None or y is None:
            return
        if button != MOUSE_BUTTON_LEFT:
            return
        board = self._board()
        if board is None:
            return
        col = column_at_point(x, y, self.window.width, self.window.height, board.rows, board.cols)
        if col is not None:
            self.event_bus.emit(EVENT_COLUMN_CLICK, column=col)

    def _board(self):
        for _, board in self.world.get_component(Board):
            return board
        return None
