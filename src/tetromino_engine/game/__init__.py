"""Game module for the tetromino engine.

Exports the core game engine and supporting classes:
- GameGrid: Flat cell storage with occupancy colors
- Piece: Active tetromino and its four grid indices
- TetrominoType / Color: Shape variants and their display tags
- translate / rotate: Candidate positions for moves and turns
- is_legal_move: Bounds, wrap-around and occupancy checks
- TetrominoGame: Command handling, locking and snapshots
"""

from .grid import GameGrid, OutOfBounds
from .pieces import (
    Color,
    CyclingShapeSource,
    Piece,
    RandomShapeSource,
    ShapeSource,
    TetrominoType,
)
from .rotation import ROTATION_TABLE, Direction, rotate, translate
from .rules import is_legal_move
from .core import BoardSnapshot, CellView, Command, GameConfig, TetrominoGame
from .storage import load_game, save_game

__all__ = [
    "GameGrid",
    "OutOfBounds",
    "Color",
    "CyclingShapeSource",
    "Piece",
    "RandomShapeSource",
    "ShapeSource",
    "TetrominoType",
    "ROTATION_TABLE",
    "Direction",
    "rotate",
    "translate",
    "is_legal_move",
    "BoardSnapshot",
    "CellView",
    "Command",
    "GameConfig",
    "TetrominoGame",
    "load_game",
    "save_game",
]
