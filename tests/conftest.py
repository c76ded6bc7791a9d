from __future__ import annotations

from typing import Callable, Sequence

import pytest

from tetromino_engine.game import CyclingShapeSource, GameConfig, TetrominoGame, TetrominoType


@pytest.fixture
def make_game() -> Callable[..., TetrominoGame]:
    def _make(kinds: Sequence[TetrominoType] = (TetrominoType.O,), width: int = 10, height: int = 24) -> TetrominoGame:
        return TetrominoGame(GameConfig(width=width, height=height), shape_source=CyclingShapeSource(kinds))

    return _make
