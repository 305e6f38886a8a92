from catstack.events.bus import EVENT_TICK, EVENT_BOARD_RESET
from catstack.systems.render import RenderSystem
from catstack.constants import CLEAR_MESSAGE_SECONDS
from tests.helpers import make_game, parse_grid

class DummyWindow:
    def __init__(self):
        self.width = 800
        self.height = 600


def _setup(lines, **kwargs):
    game = make_game(lines, **kwargs)
    render = RenderSystem(game.world, game.event_bus, DummyWindow())
    return game, render


def drive_ticks(bus, n=5, dt=0.1):
    for _ in range(n):
        bus.emit(EVENT_TICK, dt=dt)


def test_grid_is_read_from_world():
    game, render = _setup([
        "A..",
        "AB.",
        "AB.",
    ])
    assert [tuple(row) for row in render.grid()] == list(game.board)


def test_selection_follows_column_events():
    game, render = _setup([
        "...",
        "AB.",
        "AB.",
    ])
    game.on_column_activated(1)
    assert render.selected == (1, 1)
    game.on_column_activated(2)
    assert render.selected is None


def test_column_clear_message_expires():
    game, render = _setup([
        ".A..",
        "AB..",
        "AB..",
    ], palette=("A", "B"))
    game.on_column_activated(1)
    game.on_column_activated(0)
    assert render.message == "Cat A is complete!"
    drive_ticks(game.event_bus, n=int(CLEAR_MESSAGE_SECONDS / 0.1) + 2)
    assert render.message == ""


def test_game_clear_message_stays():
    game, render = _setup([
        "A..",
        "ABB",
    ], palette=("A", "B"), reserved_columns=1)
    game.on_column_activated(1)
    game.on_column_activated(2)
    assert render.message == "Game Clear!"
    drive_ticks(game.event_bus, n=30)
    assert render.message == "Game Clear!"


def test_reset_clears_message_and_reports_degraded_deal():
    game, render = _setup([
        "A..",
        "ABB",
    ], palette=("A", "B"), reserved_columns=1)
    game.on_column_activated(1)
    game.on_column_activated(2)
    game.reset()
    assert render.message == ""
    game.event_bus.emit(EVENT_BOARD_RESET, attempts=100, degraded=True)
    assert render.message


def test_loading_a_grid_drops_the_highlight():
    game, render = _setup([
        "...",
        "AB.",
        "AB.",
    ])
    game.on_column_activated(0)
    assert render.selected == (1, 0)
    game.load_grid(parse_grid(["...", "BA.", "BA."]))
    assert game.selected is None
    assert render.selected is None
