from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import numpy as np

from .pieces import Color


class OutOfBounds(IndexError):
    """Raised when a cell index falls outside the grid."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"cell index {index} outside grid of {size} cells")
        self.index = index
        self.size = size


class GameGrid:
    """Flat row-major cell storage.

    The grid uses 0 for empty cells and a `Color` value for filled cells.
    Cells are addressed by a single index: row = index // width,
    col = index % width. Filled cells are never cleared during a session.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.size = self.width * self.height
        self.cells = np.zeros(self.size, dtype=np.int8)

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Sequence[int]) -> "GameGrid":
        grid = cls(width, height)
        values = np.asarray(cells, dtype=np.int64).reshape(-1)
        if values.size != grid.size:
            raise ValueError(f"expected {grid.size} cells, got {values.size}")
        if np.any(values < 0) or np.any(values > max(Color)):
            raise ValueError("cell values must be 0 (empty) or a color value")
        grid.cells[:] = values.astype(np.int8)
        return grid

    def reset(self) -> None:
        self.cells.fill(0)

    def is_inside(self, index: int) -> bool:
        return 0 <= index < self.size

    def row_of(self, index: int) -> int:
        return index // self.width

    def col_of(self, index: int) -> int:
        return index % self.width

    def _check(self, index: int) -> None:
        if not self.is_inside(index):
            raise OutOfBounds(index, self.size)

    def cell_at(self, index: int) -> Optional[Color]:
        self._check(index)
        value = int(self.cells[index])
        return Color(value) if value else None

    def is_occupied(self, index: int) -> bool:
        self._check(index)
        return bool(self.cells[index] != 0)

    def set_occupied(self, index: int, color: Color) -> None:
        self._check(index)
        self.cells[index] = int(color)

    def fill(self, indices: Iterable[int], color: Color) -> None:
        for index in indices:
            self.set_occupied(index, color)

    def occupied_indices(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(self.cells)]

    def clone_state(self) -> np.ndarray:
        return self.cells.reshape(self.height, self.width).copy()
