"""Game module for Lollypop Tetris.

Exports the core game engine and supporting classes:
- GameGrid: Board representation and line clearing
- Piece: Falling tetromino with collision and rotation
- TetrominoType, ColorTag: Shape and color enums
- ScoringRules: Score per line and gravity speed curve
- RandomSource, StdRandomSource: Injectable shape/color picker
- TetrisGame: Tick-driven game loop and state machine
"""

from .grid import GameGrid
from .pieces import ColorTag, Piece, TetrominoType
from .randomness import RandomSource, StdRandomSource
from .rules import ScoringRules
from .core import Command, Effect, GameConfig, Phase, TetrisGame

__all__ = [
    "GameGrid",
    "Piece",
    "TetrominoType",
    "ColorTag",
    "RandomSource",
    "StdRandomSource",
    "ScoringRules",
    "GameConfig",
    "Command",
    "Effect",
    "Phase",
    "TetrisGame",
]
