from dataclasses import dataclass

@dataclass(slots=True)
class BoardPosition:
    """Fixed grid coordinate of a cell entity. Row 0 is the top of a column."""
    row: int
    col: int
