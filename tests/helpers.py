from __future__ import annotations

from itertools import cycle
from typing import Iterable, List, Tuple

from lollypop_tetris.game import Command, Effect, TetrisGame, TetrominoType


class ScriptedRandom:
    """Deterministic stand-in for the shape/color picker."""

    def __init__(self, shapes: Iterable[TetrominoType], colors: Iterable[int] = (0,)) -> None:
        self._shapes = cycle([int(s) for s in shapes])
        self._colors = cycle(list(colors))

    def pick_shape(self, count: int) -> int:
        return next(self._shapes) % count

    def pick_color(self, count: int) -> int:
        return next(self._colors) % count


def drop_and_lock(game: TetrisGame, now_ms: int) -> Tuple[int, List[Effect]]:
    """Hard-drop the current piece and advance one gravity interval to lock it."""
    game.apply(Command.HARD_DROP)
    now_ms += game.fall_interval_ms
    return now_ms, game.tick(now_ms)


def move_to_column(game: TetrisGame, column: int) -> None:
    while game.current_piece.x > column:
        assert game.apply(Command.MOVE_LEFT)
    while game.current_piece.x < column:
        assert game.apply(Command.MOVE_RIGHT)
