import pytest

from lollypop_tetris.game import TetrisGame, TetrominoType

from helpers import ScriptedRandom


@pytest.fixture
def o_game() -> TetrisGame:
    return TetrisGame(rng=ScriptedRandom([TetrominoType.O]))
