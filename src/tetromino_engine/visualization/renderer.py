from __future__ import annotations

import pygame

from tetromino_engine.game import BoardSnapshot
from .palette import color_for_value


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin

    def window_size(self, snapshot: BoardSnapshot) -> tuple[int, int]:
        return (
            snapshot.width * self.cell_size + self.margin * 2,
            snapshot.height * self.cell_size + self.margin * 2,
        )

    def _grid_surface(self, snapshot: BoardSnapshot) -> pygame.Surface:
        state = snapshot.to_array()
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(int(state[y, x])), rect)
        return surf

    def draw(self, screen: pygame.Surface, snapshot: BoardSnapshot) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(snapshot), (self.margin, self.margin))
        pygame.display.flip()
