from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

import numpy as np

from .grid import GameGrid
from .pieces import ColorTag, Piece
from .randomness import RandomSource, StdRandomSource
from .rules import ScoringRules

logger = logging.getLogger(__name__)


class Command(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    SOFT_DROP = 2
    ROTATE = 3
    HARD_DROP = 4


class Effect(Enum):
    LINE_CLEARED = "line_cleared"
    GAME_OVER = "game_over"
    RESET = "reset"
    BONUS_CONTENT = "bonus_content"


class Phase(Enum):
    PLAYING = "playing"
    FROZEN = "frozen"


_MOVES = {
    Command.MOVE_LEFT: (-1, 0),
    Command.MOVE_RIGHT: (1, 0),
    Command.SOFT_DROP: (0, 1),
}


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    cell_size: int = 30
    freeze_duration_ms: int = 5000
    spawn_y: int = 0
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        # The I piece spawns as a 4x4 matrix
        if self.width < 4 or self.height < 4:
            raise ValueError(f"board must be at least 4x4, got {self.width}x{self.height}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be > 0, got {self.cell_size}")
        if self.freeze_duration_ms < 0:
            raise ValueError(f"freeze_duration_ms must be >= 0, got {self.freeze_duration_ms}")
        if self.spawn_y >= self.height:
            raise ValueError(f"spawn_y must be above the floor, got {self.spawn_y} for height {self.height}")


class TetrisGame:
    """Single-board session driven by a monotonic millisecond clock.

    ``tick`` advances gravity and returns the effects the presentation layer
    should act on (sounds, the one-shot bonus). ``apply`` handles player
    commands. Neither raises for illegal moves; they are simply dropped.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[RandomSource] = None,
        now_ms: int = 0,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng or StdRandomSource(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.death_count = 0
        self.bonus_fired = False
        self.phase = Phase.PLAYING
        self.frozen_since_ms: Optional[int] = None
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.fall_interval_ms = self.rules.fall_interval_ms(0)
        self.last_gravity_ms = now_ms
        self.current_piece = self._spawn_piece()

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.FROZEN

    @property
    def show_hint(self) -> bool:
        return self.game_over and self.death_count == 1

    def freeze_remaining_ms(self, now_ms: int) -> int:
        if self.frozen_since_ms is None:
            return 0
        elapsed = now_ms - self.frozen_since_ms
        return max(0, self.config.freeze_duration_ms - elapsed)

    def reset(self, now_ms: int) -> None:
        """Start a fresh session; the death counter survives."""
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.fall_interval_ms = self.rules.fall_interval_ms(0)
        self.phase = Phase.PLAYING
        self.frozen_since_ms = None
        self.last_gravity_ms = now_ms
        self.current_piece = self._spawn_piece()
        logger.info("Session reset (deaths so far: %d)", self.death_count)

    def _spawn_piece(self) -> Piece:
        return Piece.spawn(self.grid.width, self.rng, spawn_y=self.config.spawn_y)

    def tick(self, now_ms: int) -> List[Effect]:
        effects: List[Effect] = []
        if self.phase is Phase.FROZEN:
            if self.freeze_remaining_ms(now_ms) > 0:
                return effects
            self.reset(now_ms)
            effects.append(Effect.RESET)
            return effects

        if now_ms - self.last_gravity_ms >= self.fall_interval_ms:
            if self.current_piece.can_move(0, 1, self.grid):
                self.current_piece.y += 1
            else:
                effects.extend(self._lock_piece(now_ms))
                self.current_piece = self._spawn_piece()
            self.last_gravity_ms = now_ms
        return effects

    def _lock_piece(self, now_ms: int) -> List[Effect]:
        effects: List[Effect] = []
        self.grid.place(self.current_piece)
        self.pieces_locked += 1
        lines = self.grid.clear_full_rows()
        if lines > 0:
            effects.extend([Effect.LINE_CLEARED] * lines)
            self.lines_cleared_total += lines
            self.score += self.rules.score_delta(lines)
            self.fall_interval_ms = self.rules.fall_interval_ms(self.score)
            logger.debug(
                "Cleared %d line(s); score=%d fall_interval_ms=%d",
                lines,
                self.score,
                self.fall_interval_ms,
            )
        if self.grid.is_spawn_row_blocked():
            effects.extend(self._enter_game_over(now_ms))
        return effects

    def _enter_game_over(self, now_ms: int) -> List[Effect]:
        self.phase = Phase.FROZEN
        self.frozen_since_ms = now_ms
        self.death_count += 1
        logger.info("Game over with score %d (death #%d)", self.score, self.death_count)
        effects = [Effect.GAME_OVER]
        if self.death_count == 1 and not self.bonus_fired:
            self.bonus_fired = True
            effects.append(Effect.BONUS_CONTENT)
        return effects

    def apply(self, command: Command) -> bool:
        """Apply a player command; returns whether the piece changed."""
        if self.phase is Phase.FROZEN:
            return False
        piece = self.current_piece
        if command == Command.ROTATE:
            return piece.rotate(self.grid)
        if command == Command.HARD_DROP:
            dropped = 0
            while piece.can_move(0, 1, self.grid):
                piece.y += 1
                dropped += 1
            return dropped > 0
        dx, dy = _MOVES[command]
        if piece.can_move(dx, dy, self.grid):
            piece.x += dx
            piece.y += dy
            return True
        return False

    def board_cells(self) -> np.ndarray:
        return self.grid.clone_state()

    def piece_cells(self) -> List[Tuple[int, int, ColorTag]]:
        piece = self.current_piece
        return [(x, y, piece.color) for x, y in piece.cells() if self.grid.is_inside(x, y)]

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for rendering
        state = self.grid.clone_state()
        for x, y, color in self.piece_cells():
            # Use negative to indicate falling piece overlay
            state[y, x] = -int(color)
        return state
