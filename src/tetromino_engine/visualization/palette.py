from __future__ import annotations

from typing import Dict, Tuple

from tetromino_engine.game import Color


RGB = Tuple[int, int, int]

EMPTY: RGB = (255, 255, 255)

PALETTE: Dict[Color, RGB] = {
    Color.TURQUOISE: (64, 224, 208),
    Color.BLUE: (65, 105, 225),
    Color.ORANGE: (255, 165, 0),
    Color.YELLOW: (255, 255, 0),
    Color.GREEN: (0, 255, 0),
    Color.PURPLE: (128, 0, 128),
    Color.RED: (255, 0, 0),
}


def color_for_value(v: int) -> RGB:
    """RGB for a board value; negative values (falling piece) use the same color."""
    if v == 0:
        return EMPTY
    return PALETTE.get(Color(abs(v)), (200, 200, 200))
