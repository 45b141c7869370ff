import numpy as np

from lollypop_tetris.game import ColorTag, GameGrid, Piece, StdRandomSource, TetrominoType
from lollypop_tetris.game.pieces import BASE_SHAPES

from helpers import ScriptedRandom


def _piece(kind: TetrominoType, x: int, y: int) -> Piece:
    return Piece(kind, BASE_SHAPES[kind].copy(), x, y, ColorTag.PINK)


def test_spawn_centers_piece_on_top_row():
    grid = GameGrid(10, 20)
    piece = Piece.spawn(grid.width, ScriptedRandom([TetrominoType.I], colors=[1]))
    assert piece.kind == TetrominoType.I
    assert piece.color == ColorTag.YELLOW
    assert piece.y == 0
    assert piece.x == 3  # 4-wide matrix
    o_piece = Piece.spawn(grid.width, ScriptedRandom([TetrominoType.O]))
    assert o_piece.x == 4
    assert o_piece.color == ColorTag.PINK


def test_spawn_copies_base_shape():
    piece = Piece.spawn(10, ScriptedRandom([TetrominoType.T]))
    piece.shape[0, 0] = True
    assert not BASE_SHAPES[TetrominoType.T][0, 0]


def test_std_random_source_covers_all_shapes_and_colors():
    rng = StdRandomSource(seed=1234)
    kinds = {Piece.spawn(10, rng).kind for _ in range(300)}
    colors = {Piece.spawn(10, rng).color for _ in range(100)}
    assert kinds == set(TetrominoType)
    assert colors == set(ColorTag)


def test_cells_map_through_offset():
    piece = _piece(TetrominoType.T, 2, 5)
    assert sorted(piece.cells()) == [(2, 6), (3, 5), (3, 6), (4, 6)]
    assert sorted(piece.cells(1, 1)) == [(3, 7), (4, 6), (4, 7), (5, 7)]


def test_can_move_rejects_walls_and_floor():
    grid = GameGrid(10, 20)
    piece = _piece(TetrominoType.O, 0, 18)
    assert not piece.can_move(-1, 0, grid)
    assert not piece.can_move(0, 1, grid)
    assert piece.can_move(1, 0, grid)
    piece.x = 8
    assert not piece.can_move(1, 0, grid)


def test_can_move_rejects_occupied_cells():
    grid = GameGrid(10, 20)
    grid.grid[10, 5] = int(ColorTag.YELLOW)
    piece = _piece(TetrominoType.O, 4, 8)
    assert not piece.can_move(0, 1, grid)
    assert piece.can_move(-1, 0, grid)


def test_rows_above_board_are_not_checked_for_occupancy():
    grid = GameGrid(10, 20)
    grid.grid[0, :] = int(ColorTag.PINK)
    piece = _piece(TetrominoType.O, 4, -3)
    assert piece.can_move(0, 1, grid)
    assert not piece.can_move(0, 2, grid)


def test_rotate_is_clockwise_transpose_and_reverse():
    grid = GameGrid(10, 20)
    piece = _piece(TetrominoType.T, 4, 5)
    assert piece.rotate(grid)
    expected = np.array([[0, 1, 0], [0, 1, 1], [0, 1, 0]], dtype=bool)
    assert np.array_equal(piece.shape, expected)


def test_four_rotations_restore_shape():
    grid = GameGrid(10, 20)
    for kind in TetrominoType:
        piece = _piece(kind, 3, 5)
        original = piece.shape.copy()
        for _ in range(2):
            assert piece.rotate(grid)
        assert piece.shape.shape == original.shape
        for _ in range(2):
            assert piece.rotate(grid)
        assert np.array_equal(piece.shape, original)


def test_rotation_into_block_is_reverted():
    grid = GameGrid(10, 20)
    piece = _piece(TetrominoType.I, 3, 0)
    grid.grid[2, 6] = int(ColorTag.PINK)
    original = piece.shape.copy()
    assert not piece.rotate(grid)
    assert np.array_equal(piece.shape, original)
    assert (piece.x, piece.y) == (3, 0)


def test_rotation_out_of_bounds_is_reverted_without_kick():
    grid = GameGrid(10, 20)
    piece = _piece(TetrominoType.I, 3, 17)
    # Rotated I occupies rows 17..20, one past the floor
    assert not piece.rotate(grid)
    assert np.array_equal(piece.shape, BASE_SHAPES[TetrominoType.I])


def test_pieces_compare_by_identity():
    piece = _piece(TetrominoType.O, 4, 0)
    twin = _piece(TetrominoType.O, 4, 0)
    assert piece == piece
    assert piece != twin
