"""Game state resource describing progress of the current deal."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Board lifecycle: play continues until every cell is empty."""
    IN_PROGRESS = auto()
    CLEARED = auto()


@dataclass
class GameState:
    """Singleton component storing mode, move counter and last deal outcome."""
    mode: GameMode = GameMode.IN_PROGRESS
    moves: int = 0
    degraded: bool = False
    attempts: int = 0
