from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterator, Optional, Tuple

import numpy as np

from .grid import GameGrid, OutOfBounds
from .pieces import (
    PIECE_COLORS,
    Color,
    Piece,
    Position,
    RandomShapeSource,
    ShapeSource,
    TetrominoType,
)
from .rotation import Direction, is_valid_shape, rotate, translate
from .rules import is_legal_move


logger = logging.getLogger(__name__)


class Command(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    MOVE_UP = 2
    MOVE_DOWN = 3
    ROTATE = 4
    LOCK = 5


_MOVES = {
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
}


@dataclass
class GameConfig:
    width: int = 10
    height: int = 24
    random_seed: Optional[int] = None
    max_episode_steps: int = 1000

    def __post_init__(self) -> None:
        # The I piece needs four columns to turn and four rows to stand.
        if self.width < 4 or self.height < 4:
            raise ValueError(f"grid must be at least 4x4, got {self.width}x{self.height}")
        if self.max_episode_steps < 1:
            raise ValueError(f"max_episode_steps must be at least 1, got {self.max_episode_steps}")


@dataclass(frozen=True)
class CellView:
    occupied: Optional[Color]
    falling: Optional[Color]

    @property
    def is_empty(self) -> bool:
        return self.occupied is None and self.falling is None


@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only view of the board and falling piece for renderers."""

    width: int
    height: int
    cells: np.ndarray
    piece_kind: TetrominoType
    piece_position: Position

    @property
    def piece_color(self) -> Color:
        return PIECE_COLORS[self.piece_kind]

    def cell_at(self, index: int) -> CellView:
        if not 0 <= index < self.width * self.height:
            raise OutOfBounds(index, self.width * self.height)
        value = int(self.cells[index])
        occupied = Color(value) if value else None
        falling = self.piece_color if index in self.piece_position else None
        return CellView(occupied=occupied, falling=falling)

    def __iter__(self) -> Iterator[CellView]:
        for index in range(self.width * self.height):
            yield self.cell_at(index)

    def to_array(self) -> np.ndarray:
        # Falling piece overlaid as negative color values
        state = self.cells.reshape(self.height, self.width).copy()
        for index in self.piece_position:
            state[index // self.width, index % self.width] = -int(self.piece_color)
        return state


class TetrominoGame:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        shape_source: Optional[ShapeSource] = None,
        grid: Optional[GameGrid] = None,
        piece: Optional[Piece] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.shape_source = shape_source or RandomShapeSource(self.config.random_seed)
        if grid is not None and (grid.width, grid.height) != (self.config.width, self.config.height):
            raise ValueError("grid dimensions do not match the game config")
        self.grid = grid or GameGrid(self.config.width, self.config.height)
        self.pieces_locked = 0
        self.current_piece: Piece
        if piece is not None:
            if not all(self.grid.is_inside(i) for i in piece.position):
                raise ValueError(f"piece position {piece.position} outside the grid")
            if not is_valid_shape(piece.position, piece.kind, self.width):
                raise ValueError(f"piece position {piece.position} is not a {piece.kind.name} shape")
            self.current_piece = piece.moved_to(sorted(piece.position))
        else:
            self._spawn_piece()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def reset(self) -> None:
        self.grid.reset()
        self.pieces_locked = 0
        self._spawn_piece()

    def _spawn_piece(self) -> None:
        kind = self.shape_source.next_shape()
        self.current_piece = Piece.spawn(kind, self.width)
        logger.debug("spawned %s at %s", kind.name, self.current_piece.position)

    def _commit(self, candidate: Optional[Tuple[int, ...]]) -> bool:
        if candidate is None or candidate == self.current_piece.position:
            return False
        if not is_legal_move(self.grid, self.current_piece.position, candidate):
            return False
        self.current_piece = self.current_piece.moved_to(candidate)
        return True

    def move(self, direction: Direction) -> bool:
        return self._commit(translate(self.current_piece.position, direction, self.width))

    def rotate(self) -> bool:
        return self._commit(rotate(self.current_piece.position, self.width))

    def lock(self) -> None:
        # Cells are burned in as they stand; a spawned piece sitting on filled
        # cells overwrites them.
        piece = self.current_piece
        self.grid.fill(piece.position, piece.color)
        self.pieces_locked += 1
        logger.debug("locked %s at %s", piece.kind.name, piece.position)
        self._spawn_piece()

    def step(self, command: Any) -> bool:
        """Apply one input command. Returns True when the state changed.

        Illegal moves and unknown commands leave the state untouched.
        """
        try:
            command = Command(command)
        except ValueError:
            return False
        if command == Command.LOCK:
            self.lock()
            return True
        if command == Command.ROTATE:
            return self.rotate()
        return self.move(_MOVES[command])

    def snapshot(self) -> BoardSnapshot:
        cells = self.grid.cells.copy()
        cells.setflags(write=False)
        return BoardSnapshot(
            width=self.width,
            height=self.height,
            cells=cells,
            piece_kind=self.current_piece.kind,
            piece_position=self.current_piece.position,
        )

    def get_state(self) -> np.ndarray:
        return self.snapshot().to_array()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "cells": [int(v) for v in self.grid.cells],
            "piece": {
                "kind": self.current_piece.kind.name,
                "position": list(self.current_piece.position),
            },
            "pieces_locked": self.pieces_locked,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], shape_source: Optional[ShapeSource] = None) -> "TetrominoGame":
        try:
            config = GameConfig(width=int(data["width"]), height=int(data["height"]))
            grid = GameGrid.from_cells(config.width, config.height, data["cells"])
            piece = None
            if data.get("piece") is not None:
                kind = TetrominoType[data["piece"]["kind"]]
                position = tuple(int(i) for i in data["piece"]["position"])
                if len(position) != 4:
                    raise ValueError(f"piece needs 4 cells, got {len(position)}")
                piece = Piece(kind, tuple(sorted(position)))  # type: ignore[arg-type]
            game = cls(config, shape_source=shape_source, grid=grid, piece=piece)
            game.pieces_locked = int(data.get("pieces_locked", 0))
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed game snapshot: {exc!r}") from exc
        logger.debug("restored %dx%d game, %d cells filled", config.width, config.height,
                     len(grid.occupied_indices()))
        return game
