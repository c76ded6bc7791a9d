from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, Optional, Protocol, Sequence, Tuple


Position = Tuple[int, int, int, int]
Cell = Tuple[int, int]  # (col, row)


class Color(IntEnum):
    TURQUOISE = 1
    BLUE = 2
    ORANGE = 3
    YELLOW = 4
    GREEN = 5
    PURPLE = 6
    RED = 7


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


PIECE_COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.I: Color.TURQUOISE,
    TetrominoType.J: Color.BLUE,
    TetrominoType.L: Color.ORANGE,
    TetrominoType.O: Color.YELLOW,
    TetrominoType.S: Color.GREEN,
    TetrominoType.T: Color.PURPLE,
    TetrominoType.Z: Color.RED,
}


# Spawn orientation of each variant, normalized to its bounding-box origin.
SPAWN_SHAPES: Dict[TetrominoType, Tuple[Cell, Cell, Cell, Cell]] = {
    TetrominoType.I: ((0, 0), (1, 0), (2, 0), (3, 0)),
    TetrominoType.O: ((0, 0), (1, 0), (0, 1), (1, 1)),
    TetrominoType.T: ((1, 0), (0, 1), (1, 1), (2, 1)),
    TetrominoType.S: ((1, 0), (2, 0), (0, 1), (1, 1)),
    TetrominoType.Z: ((0, 0), (1, 0), (1, 1), (2, 1)),
    TetrominoType.J: ((0, 0), (0, 1), (1, 1), (2, 1)),
    TetrominoType.L: ((2, 0), (0, 1), (1, 1), (2, 1)),
}


def cells_to_position(cells: Iterable[Cell], width: int, col: int = 0, row: int = 0) -> Position:
    """Flatten (col, row) cells shifted by (col, row) into sorted grid indices."""
    indices = sorted((row + r) * width + (col + c) for c, r in cells)
    return tuple(indices)  # type: ignore[return-value]


def spawn_position(kind: TetrominoType, width: int) -> Position:
    shape = SPAWN_SHAPES[kind]
    shape_width = max(c for c, _ in shape) + 1
    return cells_to_position(shape, width, col=(width - shape_width) // 2)


@dataclass
class Piece:
    kind: TetrominoType
    position: Position

    @classmethod
    def spawn(cls, kind: TetrominoType, width: int) -> "Piece":
        return cls(kind, spawn_position(kind, width))

    @property
    def color(self) -> Color:
        return PIECE_COLORS[self.kind]

    def occupies_cell(self, index: int) -> bool:
        return index in self.position

    def moved_to(self, position: Sequence[int]) -> "Piece":
        return Piece(self.kind, tuple(int(i) for i in position))  # type: ignore[arg-type]


class ShapeSource(Protocol):
    """Supplies the variant of each newly spawned piece."""

    def next_shape(self) -> TetrominoType:
        ...


class RandomShapeSource:
    """Uniform choice over the seven variants."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def next_shape(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))


class CyclingShapeSource:
    """Deterministic source repeating a fixed sequence of variants."""

    def __init__(self, kinds: Sequence[TetrominoType]) -> None:
        if not kinds:
            raise ValueError("CyclingShapeSource needs at least one shape")
        self.kinds = list(kinds)
        self._next = 0

    def next_shape(self) -> TetrominoType:
        kind = self.kinds[self._next % len(self.kinds)]
        self._next += 1
        return kind
