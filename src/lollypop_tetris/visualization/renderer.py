from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from lollypop_tetris.game import ColorTag

HINT_TEXT = "Jogue mais uma vez para liberar um easter egg"


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (0, 0, 0),
        int(ColorTag.PINK): (255, 105, 181),
        int(ColorTag.YELLOW): (255, 255, 0),
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 30) -> None:
        self.cell_size = cell_size
        self._font: Optional[pygame.font.Font] = None

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((0, 0, 0))
        for y, x in zip(*np.nonzero(state)):
            rect = pygame.Rect(
                int(x) * self.cell_size,
                int(y) * self.cell_size,
                self.cell_size,
                self.cell_size,
            )
            pygame.draw.rect(surf, _color_for_value(int(state[y, x])), rect)
        return surf

    def _draw_hint(self, screen: pygame.Surface) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 22)
        text = self._font.render(HINT_TEXT, True, (255, 255, 255))
        rect = text.get_rect(
            center=(screen.get_width() // 2, screen.get_height() // 2 + 100)
        )
        screen.blit(text, rect)

    def draw(self, screen: pygame.Surface, state: np.ndarray, show_hint: bool = False) -> None:
        screen.blit(self._grid_surface(state), (0, 0))
        if show_hint:
            self._draw_hint(screen)
        pygame.display.flip()
