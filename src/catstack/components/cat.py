from dataclasses import dataclass
from typing import Optional

@dataclass(slots=True)
class CatToken:
    """Color of the cat sitting in a cell.

    Only meaningful while the cell's ActiveSwitch is on; cleared cells keep
    ``color=None`` so stale colors never leak into comparisons.
    """
    color: Optional[str] = None
