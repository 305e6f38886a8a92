"""Initial deal for a cat stack board.

Boards are produced by rejection sampling: shuffle the full supply of cats,
deal it into every column except the reserved ones and accept the deal when no
column starts with more than ``MAX_RUN_LENGTH`` same-colored cats in a row.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, MutableSequence, Optional, Sequence, Tuple

from catstack.config import GameConfig
from catstack.constants import MAX_RUN_LENGTH

logger = logging.getLogger(__name__)

Cell = Optional[str]
Grid = List[List[Cell]]
FrozenGrid = Tuple[Tuple[Cell, ...], ...]


@dataclass(slots=True)
class GenerationResult:
    grid: Grid
    attempts: int
    degraded: bool


def build_supply(palette: Sequence[str], cats_per_color: int) -> List[str]:
    supply: List[str] = []
    for color in palette:
        supply.extend([color] * cats_per_color)
    return supply


def shuffle_supply(supply: MutableSequence[str], rng: random.Random) -> None:
    """Fisher-Yates shuffle in place using only ``rng.randint``."""
    for i in range(len(supply) - 1, 0, -1):
        j = rng.randint(0, i)
        supply[i], supply[j] = supply[j], supply[i]


def empty_grid(rows: int, cols: int) -> Grid:
    return [[None] * cols for _ in range(rows)]


def deal(supply: List[str], rows: int, cols: int, dealt_columns: int) -> Grid:
    """Pop cats from the end of ``supply`` into the first ``dealt_columns`` columns.

    Columns fill from the floor upward so a short supply leaves the gaps on top.
    ``GameConfig`` rejects supplies larger than the dealt area, so every cat lands.
    """
    grid = empty_grid(rows, cols)
    for col in range(dealt_columns):
        for row in range(rows - 1, -1, -1):
            if not supply:
                return grid
            grid[row][col] = supply.pop()
    return grid


def longest_run(grid: Sequence[Sequence[Cell]], col: int) -> int:
    """Longest same-color streak in ``col`` reading from the floor up; empties break streaks."""
    best = 0
    streak = 0
    last: Cell = None
    for row in range(len(grid) - 1, -1, -1):
        color = grid[row][col]
        if color is None:
            streak = 0
            last = None
            continue
        if color == last:
            streak += 1
        else:
            streak = 1
            last = color
        best = max(best, streak)
    return best


def is_fair(grid: Sequence[Sequence[Cell]], max_run: int = MAX_RUN_LENGTH) -> bool:
    if not grid:
        return True
    cols = len(grid[0])
    return all(longest_run(grid, col) <= max_run for col in range(cols))


def generate(rng: random.Random | None = None, config: GameConfig | None = None) -> GenerationResult:
    """Deal boards until one is fair or the retry cap runs out.

    When the cap is exhausted the last deal is returned anyway with
    ``degraded=True``; it is still playable but may start with long runs.
    """
    rng = rng or random.Random()
    config = config or GameConfig()
    grid: Grid = empty_grid(config.rows, config.cols)
    attempts = 0
    while attempts < config.generation_retry_cap:
        attempts += 1
        supply = build_supply(config.palette, config.cats_per_color)
        shuffle_supply(supply, rng)
        grid = deal(supply, config.rows, config.cols, config.dealt_columns)
        if is_fair(grid):
            return GenerationResult(grid=grid, attempts=attempts, degraded=False)
    logger.warning(
        "Could not generate a fair board after %d attempts; "
        "the deal may start with more than %d consecutive cats of one color.",
        attempts,
        MAX_RUN_LENGTH,
    )
    return GenerationResult(grid=grid, attempts=attempts, degraded=True)

