"""Utility helpers for the engine and its front-ends."""

from __future__ import annotations

from typing import List, Optional

from .board import Board, Cell
from .tetromino import PieceKind, Tetromino, Vector, cells


def can_occupy(board: Board, kind: PieceKind, origin: Vector, facing: int) -> bool:
    """Return ``True`` if ``kind`` fits on ``board`` at ``origin`` and ``facing``.

    Every cell of the candidate pose must be on the board and empty.  Movement,
    rotation and gravity are all validated through this one predicate before
    the new pose is committed.
    """

    return all(board.is_empty(coord) for coord in cells(kind, origin, facing))


def render_grid(board: Board, active: Optional[Tetromino] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece).  Values are :class:`~blockfall.board.Cell` integers, ``0`` being
    empty.
    """

    grid = board.grid.tolist()
    if active is not None:
        value = int(Cell.occupied(active.kind))
        for x, y in active.blocks():
            if board.in_bounds((x, y)):
                grid[y][x] = value
    return grid
