from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_COLUMN_CLICK = "column_click"                # payload: column=int
EVENT_SHUFFLE_REQUEST = "shuffle_request"          # payload: None


# ============================================================================
# SELECTION & MOVES
# ============================================================================
EVENT_COLUMN_SELECTED = "column_selected"          # payload: column=int, row=int
EVENT_COLUMN_DESELECTED = "column_deselected"      # payload: column=int, reason=str
EVENT_MOVE_APPLIED = "move_applied"                # payload: from_col, to_col, color, from_row, to_row, moves
EVENT_MOVE_REJECTED = "move_rejected"              # payload: from_col, to_col, reason=str


# ============================================================================
# CLEARS & GAME FLOW
# ============================================================================
EVENT_COLUMN_CLEARED = "column_cleared"            # payload: column=int, color=str
EVENT_GAME_CLEARED = "game_cleared"                # payload: moves=int
EVENT_BOARD_RESET = "board_reset"                  # payload: attempts=int, degraded=bool
EVENT_GENERATION_DEGRADED = "generation_degraded"  # payload: attempts=int
