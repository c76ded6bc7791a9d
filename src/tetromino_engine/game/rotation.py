"""Candidate positions for translation and rotation.

Both transforms are pure: they take a piece position (4 grid indices) and
return the position the piece would occupy, without looking at the grid.
Results are plain signed ints and may lie outside the grid; callers must run
them through `rules.is_legal_move` before committing.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, FrozenSet, Optional, Sequence, Tuple

from .pieces import SPAWN_SHAPES, Cell, TetrominoType, cells_to_position


Shape = Tuple[Cell, Cell, Cell, Cell]
TheoreticalPosition = Tuple[int, ...]


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def direction_delta(direction: Direction, width: int) -> int:
    if direction == Direction.UP:
        return -width
    if direction == Direction.DOWN:
        return width
    if direction == Direction.LEFT:
        return -1
    return 1


def translate(position: Sequence[int], direction: Direction, width: int) -> TheoreticalPosition:
    delta = direction_delta(direction, width)
    return tuple(int(i) + delta for i in position)


# (current shape, next shape, (dcol, drow) offset) in clockwise order.
# Shapes are normalized to their bounding-box origin. The offsets keep each
# piece turning about a fixed centre; around every cycle they sum to zero.
_ROTATIONS = (
    # I
    (((0, 0), (1, 0), (2, 0), (3, 0)), ((0, 0), (0, 1), (0, 2), (0, 3)), (2, -1)),
    (((0, 0), (0, 1), (0, 2), (0, 3)), ((0, 0), (1, 0), (2, 0), (3, 0)), (-2, 1)),
    # O
    (((0, 0), (1, 0), (0, 1), (1, 1)), ((0, 0), (1, 0), (0, 1), (1, 1)), (0, 0)),
    # T
    (((1, 0), (0, 1), (1, 1), (2, 1)), ((0, 0), (0, 1), (1, 1), (0, 2)), (1, 0)),
    (((0, 0), (0, 1), (1, 1), (0, 2)), ((0, 0), (1, 0), (2, 0), (1, 1)), (-1, 1)),
    (((0, 0), (1, 0), (2, 0), (1, 1)), ((1, 0), (0, 1), (1, 1), (1, 2)), (0, -1)),
    (((1, 0), (0, 1), (1, 1), (1, 2)), ((1, 0), (0, 1), (1, 1), (2, 1)), (0, 0)),
    # S
    (((1, 0), (2, 0), (0, 1), (1, 1)), ((0, 0), (0, 1), (1, 1), (1, 2)), (1, 0)),
    (((0, 0), (0, 1), (1, 1), (1, 2)), ((1, 0), (2, 0), (0, 1), (1, 1)), (-1, 0)),
    # Z
    (((0, 0), (1, 0), (1, 1), (2, 1)), ((1, 0), (0, 1), (1, 1), (0, 2)), (1, 0)),
    (((1, 0), (0, 1), (1, 1), (0, 2)), ((0, 0), (1, 0), (1, 1), (2, 1)), (-1, 0)),
    # J
    (((0, 0), (0, 1), (1, 1), (2, 1)), ((0, 0), (1, 0), (0, 1), (0, 2)), (1, 0)),
    (((0, 0), (1, 0), (0, 1), (0, 2)), ((0, 0), (1, 0), (2, 0), (2, 1)), (-1, 1)),
    (((0, 0), (1, 0), (2, 0), (2, 1)), ((1, 0), (1, 1), (0, 2), (1, 2)), (0, -1)),
    (((1, 0), (1, 1), (0, 2), (1, 2)), ((0, 0), (0, 1), (1, 1), (2, 1)), (0, 0)),
    # L
    (((2, 0), (0, 1), (1, 1), (2, 1)), ((0, 0), (0, 1), (0, 2), (1, 2)), (1, 0)),
    (((0, 0), (0, 1), (0, 2), (1, 2)), ((0, 0), (1, 0), (2, 0), (0, 1)), (-1, 1)),
    (((0, 0), (1, 0), (2, 0), (0, 1)), ((0, 0), (1, 0), (1, 1), (1, 2)), (0, -1)),
    (((0, 0), (1, 0), (1, 1), (1, 2)), ((2, 0), (0, 1), (1, 1), (2, 1)), (0, 0)),
)


def shape_key(cells: Sequence[Cell]) -> Shape:
    """Order cells the way grid indices are ordered (row-major)."""
    return tuple(sorted(cells, key=lambda c: (c[1], c[0])))  # type: ignore[return-value]


ROTATION_TABLE: Dict[Shape, Tuple[Shape, Cell]] = {
    shape_key(current): (shape_key(following), offset) for current, following, offset in _ROTATIONS
}


def normalize(position: Sequence[int], width: int) -> Tuple[Shape, int, int]:
    """Return the shape at its bounding-box origin plus the (col, row) adjustment."""
    cols = [int(i) % width for i in position]
    rows = [int(i) // width for i in position]
    horizontal_adjust = min(cols)
    vertical_adjust = min(rows)
    cells = [(c - horizontal_adjust, r - vertical_adjust) for c, r in zip(cols, rows)]
    return shape_key(cells), horizontal_adjust, vertical_adjust


def rotate(position: Sequence[int], width: int) -> Optional[TheoreticalPosition]:
    """Clockwise rotation candidate for a piece at `position`.

    Shapes missing from the table rotate to themselves. Returns None when the
    rotated footprint would leave the grid sideways, since the flattened index
    would otherwise wrap onto a neighbouring row.
    """
    shape, horizontal_adjust, vertical_adjust = normalize(position, width)
    entry = ROTATION_TABLE.get(shape)
    if entry is None:
        return tuple(int(i) for i in position)
    following, (dcol, drow) = entry
    col = horizontal_adjust + dcol
    row = vertical_adjust + drow
    if col < 0 or col + max(c for c, _ in following) >= width:
        return None
    return cells_to_position(following, width, col=col, row=row)


def orientations(kind: TetrominoType) -> FrozenSet[Shape]:
    """Every normalized shape `kind` reaches from its spawn orientation."""
    shape = shape_key(SPAWN_SHAPES[kind])
    seen = set()
    while shape not in seen:
        seen.add(shape)
        shape = ROTATION_TABLE[shape][0]
    return frozenset(seen)


def is_valid_shape(position: Sequence[int], kind: TetrominoType, width: int) -> bool:
    """True when `position` holds 4 distinct cells forming an orientation of `kind`."""
    if len(set(position)) != 4:
        return False
    return normalize(position, width)[0] in orientations(kind)
