from __future__ import annotations

import random
from typing import Sequence

from catstack.config import GameConfig
from catstack.events.bus import EventBus
from catstack.game import CatStackGame

EMPTY = "."


def parse_grid(lines: Sequence[str]) -> list[list[str | None]]:
    """Rows top to bottom, one character per cell, '.' for an empty cell."""
    return [[None if ch == EMPTY else ch for ch in line] for line in lines]


def make_game(lines: Sequence[str], *, palette: Sequence[str] = ("A", "B", "C"), **config_kwargs) -> CatStackGame:
    """Build a game whose board is exactly ``lines`` instead of a random deal."""

    grid = parse_grid(lines)
    # Narrow test boards still need one dealt column.
    rows, cols = len(grid), len(grid[0])
    config_kwargs.setdefault("reserved_columns", min(2, cols - 1))
    # Largest supply that still fits the dealt columns, so reset() deals cleanly.
    dealt_cells = rows * (cols - config_kwargs["reserved_columns"])
    config_kwargs.setdefault("cats_per_color", max(1, dealt_cells // len(palette)))
    config = GameConfig(rows=rows, cols=cols, palette=tuple(palette), **config_kwargs)
    game = CatStackGame(config, rng=random.Random(0), deal=False)
    game.load_grid(grid)
    return game


def record(bus: EventBus, name: str, sink: list | None = None) -> list[dict]:
    """Collect payloads of ``name`` events; pass ``sink`` to interleave several events."""

    received: list = [] if sink is None else sink

    def handler(sender, **payload):
        if sink is None:
            received.append(payload)
        else:
            received.append((name, payload))

    bus.subscribe(name, handler)
    return received
