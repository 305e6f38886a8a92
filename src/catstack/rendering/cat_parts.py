"""Which piece of a stacked cat sprite a cell shows.

Vertically adjacent cats of one color are drawn as a single long cat: the
uppermost cell is the head, the lowest the tail, anything between is body.
"""
from __future__ import annotations

from typing import Optional, Sequence

HEAD = "head"
BODY = "body"
TAIL = "tail"
SINGLE = "single"

FACE_PARTS = frozenset({HEAD, SINGLE})


def cat_part(grid: Sequence[Sequence[Optional[str]]], row: int, col: int) -> Optional[str]:
    color = grid[row][col]
    if color is None:
        return None
    connected_top = row > 0 and grid[row - 1][col] == color
    connected_bottom = row < len(grid) - 1 and grid[row + 1][col] == color
    if connected_top and connected_bottom:
        return BODY
    if connected_top:
        return TAIL
    if connected_bottom:
        return HEAD
    return SINGLE


def has_face(part: Optional[str]) -> bool:
    return part in FACE_PARTS
