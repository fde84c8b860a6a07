from blockfall.board import Board, Cell
from blockfall.tetromino import PieceKind, Tetromino
from blockfall.utils import can_occupy, render_grid


def test_can_occupy_on_empty_board():
    board = Board()
    assert can_occupy(board, PieceKind.T, (1, 0), 0)
    assert not can_occupy(board, PieceKind.T, (0, 0), 0)
    assert not can_occupy(board, PieceKind.T, (15, 0), 0)
    assert not can_occupy(board, PieceKind.T, (5, 31), 0)


def test_render_grid_overlays_active_piece_without_locking():
    board = Board()
    board.set((0, 31), Cell.Z)
    piece = Tetromino(PieceKind.O, 0, (3, 4))
    grid = render_grid(board, piece)
    assert len(grid) == 32 and all(len(row) == 16 for row in grid)
    assert grid[31][0] == Cell.Z
    for x, y in piece.blocks():
        assert grid[y][x] == Cell.O
    assert board.get((3, 4)) is Cell.EMPTY


def test_render_grid_without_piece_copies_board():
    board = Board()
    grid = render_grid(board)
    grid[0][0] = 1
    assert board.get((0, 0)) is Cell.EMPTY
