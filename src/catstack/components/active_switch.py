from dataclasses import dataclass

@dataclass(slots=True)
class ActiveSwitch:
    """Per-cell occupancy flag.

    active: True if the cell currently holds a cat; False if empty.
    Color information lives in a separate CatToken component.
    """
    active: bool = False
