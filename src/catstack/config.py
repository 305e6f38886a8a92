from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from catstack.constants import (
    CAT_COLORS,
    CATS_PER_COLOR,
    GENERATION_RETRY_CAP,
    GRID_COLS,
    GRID_ROWS,
    RESERVED_COLUMNS,
)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Board dimensions, palette and generation limits for one game.

    Defaults reproduce the classic 5x6 board with four cat colors, five cats
    each, dealt into the first four columns.
    """

    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    palette: Tuple[str, ...] = field(default_factory=lambda: tuple(CAT_COLORS))
    cats_per_color: int = CATS_PER_COLOR
    generation_retry_cap: int = GENERATION_RETRY_CAP
    reserved_columns: int = RESERVED_COLUMNS

    def __post_init__(self) -> None:
        if self.rows <= 0:
            raise ValueError(f"rows must be positive, got {self.rows}")
        if self.reserved_columns < 0:
            raise ValueError(f"reserved_columns must not be negative, got {self.reserved_columns}")
        if self.cols <= self.reserved_columns:
            raise ValueError(
                f"cols ({self.cols}) must exceed reserved_columns ({self.reserved_columns})"
            )
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        if len(set(self.palette)) != len(self.palette):
            raise ValueError(f"palette contains duplicate colors: {self.palette!r}")
        if self.cats_per_color <= 0:
            raise ValueError(f"cats_per_color must be positive, got {self.cats_per_color}")
        if self.supply_size > self.rows * self.dealt_columns:
            raise ValueError(
                f"{self.supply_size} cats do not fit in {self.dealt_columns} dealt columns "
                f"of {self.rows} rows"
            )
        if self.generation_retry_cap <= 0:
            raise ValueError(f"generation_retry_cap must be positive, got {self.generation_retry_cap}")
        # Accept any iterable of names but store an immutable tuple.
        object.__setattr__(self, "palette", tuple(self.palette))

    @property
    def dealt_columns(self) -> int:
        return self.cols - self.reserved_columns

    @property
    def supply_size(self) -> int:
        return len(self.palette) * self.cats_per_color
