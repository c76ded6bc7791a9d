from __future__ import annotations

from typing import Sequence

from .grid import GameGrid


def crosses_right_edge(old: int, new: int, width: int) -> bool:
    return (old + 1) % width == 0 and new % width == 0


def crosses_left_edge(old: int, new: int, width: int) -> bool:
    return old % width == 0 and (new + 1) % width == 0


def is_legal_move(grid: GameGrid, old: Sequence[int], new: Sequence[int]) -> bool:
    """Check a candidate position cell by cell against its current position.

    Cells are paired by order. A candidate is rejected if any cell leaves the
    top or bottom of the grid, wraps across the left or right edge, or lands
    on an occupied cell.
    """
    if len(old) != len(new):
        return False
    width = grid.width
    for old_index, new_index in zip(old, new):
        if not grid.is_inside(new_index):
            return False
        if crosses_right_edge(old_index, new_index, width):
            return False
        if crosses_left_edge(old_index, new_index, width):
            return False
        if grid.is_occupied(new_index):
            return False
    return True
