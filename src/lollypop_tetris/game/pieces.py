from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, List, Tuple

import numpy as np

from .randomness import RandomSource

if TYPE_CHECKING:
    from .grid import GameGrid


class TetrominoType(IntEnum):
    I = 0
    O = 1
    T = 2
    L = 3
    J = 4
    S = 5
    Z = 6


class ColorTag(IntEnum):
    PINK = 1
    YELLOW = 2


Shape = np.ndarray


BASE_SHAPES = {
    TetrominoType.I: np.array(
        [[1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], dtype=bool
    ),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=bool),
    TetrominoType.T: np.array([[0, 1, 0], [1, 1, 1], [0, 0, 0]], dtype=bool),
    TetrominoType.L: np.array([[1, 0, 0], [1, 1, 1], [0, 0, 0]], dtype=bool),
    TetrominoType.J: np.array([[0, 0, 1], [1, 1, 1], [0, 0, 0]], dtype=bool),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0], [0, 0, 0]], dtype=bool),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1], [0, 0, 0]], dtype=bool),
}


@dataclass(eq=False)
class Piece:
    kind: TetrominoType
    shape: Shape
    x: int
    y: int
    color: ColorTag

    @staticmethod
    def spawn(board_width: int, rng: RandomSource, spawn_y: int = 0) -> "Piece":
        kind = TetrominoType(rng.pick_shape(len(TetrominoType)))
        color = list(ColorTag)[rng.pick_color(len(ColorTag))]
        shape = BASE_SHAPES[kind].copy()
        x = (board_width - shape.shape[1]) // 2
        return Piece(kind=kind, shape=shape, x=x, y=spawn_y, color=color)

    def cells(self, dx: int = 0, dy: int = 0) -> List[Tuple[int, int]]:
        rows, cols = np.nonzero(self.shape)
        return [(self.x + int(c) + dx, self.y + int(r) + dy) for r, c in zip(rows, cols)]

    def can_move(self, dx: int, dy: int, board: "GameGrid") -> bool:
        for x, y in self.cells(dx, dy):
            if x < 0 or x >= board.width or y >= board.height:
                return False
            # Rows above the board are open space
            if y >= 0 and board.is_occupied(x, y):
                return False
        return True

    def rotate(self, board: "GameGrid") -> bool:
        """Rotate clockwise in place; revert and return False on collision.

        No wall kicks are attempted: the rotated matrix keeps the same
        top-left corner and either fits there or the rotation is dropped.
        """
        old_shape = self.shape
        # axes=(1, 0) turns clockwise
        self.shape = np.rot90(old_shape, 1, axes=(1, 0)).copy()
        if not self.can_move(0, 0, board):
            self.shape = old_shape
            return False
        return True
