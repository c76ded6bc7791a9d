"""Save and restore a game session as JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .core import GameConfig, TetrominoGame
from .pieces import ShapeSource


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def save_game(path: PathLike, game: TetrominoGame) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(game.to_dict()), encoding="utf-8")
    logger.debug("saved game to %s", path)


def load_game(
    path: PathLike,
    shape_source: Optional[ShapeSource] = None,
    config: Optional[GameConfig] = None,
) -> TetrominoGame:
    """Load a saved session, or start a fresh one if nothing was saved yet."""
    path = Path(path)
    if not path.exists():
        logger.debug("no saved game at %s, starting fresh", path)
        return TetrominoGame(config, shape_source=shape_source)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not a valid game snapshot") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{path} is not a valid game snapshot")
    return TetrominoGame.from_dict(data, shape_source=shape_source)
