from __future__ import annotations

from typing import Optional

import numpy as np

from .pieces import ColorTag, Piece


class GameGrid:
    """Fixed-size board of locked cells.

    The grid uses 0 for empty cells and a ``ColorTag`` value for cells
    filled by a locked piece. Row 0 is the top (spawn) row.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        return self.grid[y, x] != 0

    def color_at(self, x: int, y: int) -> Optional[ColorTag]:
        value = int(self.grid[y, x])
        return ColorTag(value) if value else None

    def place(self, piece: Piece) -> None:
        """Write the piece's color into the board.

        Legality is not checked here; callers lock a piece only once it can
        no longer fall. Cells above or below the board are skipped.
        """
        for x, y in piece.cells():
            assert 0 <= x < self.width, f"piece cell column {x} outside board"
            if 0 <= y < self.height and 0 <= x < self.width:
                self.grid[y, x] = int(piece.color)

    def clear_full_rows(self) -> int:
        full_rows = np.where(np.all(self.grid != 0, axis=1))[0]
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        remaining = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, remaining))
        assert self.grid.shape == (self.height, self.width)
        return num

    def is_spawn_row_blocked(self) -> bool:
        return bool(np.any(self.grid[0] != 0))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
