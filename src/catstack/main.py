"""Entry point for the Cat Stack puzzle.

Sets up the game session, presentation systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, key
from catstack.game import CatStackGame
from catstack.events.bus import EVENT_TICK, EVENT_MOUSE_PRESS, EVENT_SHUFFLE_REQUEST
from catstack.systems.input import InputSystem
from catstack.systems.render import RenderSystem

BACKGROUND = (24, 20, 36)
SHUFFLE_KEYS = (key.S, key.R)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


class CatStackWindow(Window):
    def __init__(self, game: CatStackGame | None = None):
        super().__init__(800, 600, "Cat Stack", resizable=True)
        self.game = game or CatStackGame()
        self.event_bus = self.game.event_bus
        self.world = self.game.world
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        # The opening deal happened before the renderer subscribed.
        self.render_system.on_board_reset(self.game, degraded=self.game.degraded)
        set_background_color(BACKGROUND)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in SHUFFLE_KEYS:
            self.event_bus.emit(EVENT_SHUFFLE_REQUEST)


def main():
    configure_logging()
    CatStackWindow()
    run()

if __name__ == "__main__":
    main()
