"""Lollypop Tetris: falling-block puzzle engine with a pygame front end."""

from .game import Command, Effect, GameConfig, ScoringRules, TetrisGame

__version__ = "0.1.0"

__all__ = ["Command", "Effect", "GameConfig", "ScoringRules", "TetrisGame", "__version__"]
