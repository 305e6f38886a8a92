from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from catstack.constants import UNKNOWN_CAT_COLOR

@dataclass(slots=True)
class CatPalette:
    """Cat colors in play plus their display RGB, stored on a single entity."""
    colors: List[str]
    rgb: Dict[str, Tuple[int, int, int]] = field(default_factory=dict)

    def rgb_for(self, color: str) -> Tuple[int, int, int]:
        return self.rgb.get(color, UNKNOWN_CAT_COLOR)

    def __contains__(self, color: str) -> bool:
        return color in self.colors
