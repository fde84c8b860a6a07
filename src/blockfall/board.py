"""Board representation for the playfield."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import GRID_HEIGHT, GRID_WIDTH
from .tetromino import PieceKind, Tetromino, Vector


Grid = NDArray[np.uint8]


class Cell(IntEnum):
    """Content of a single board cell.

    ``EMPTY`` is stored as ``0`` in the grid; every other member marks a cell
    occupied by a locked block of the piece kind with the same name.
    """

    EMPTY = 0
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7

    @classmethod
    def occupied(cls, kind: PieceKind) -> "Cell":
        return cls[kind.value]

    @property
    def kind(self) -> Optional[PieceKind]:
        """Piece kind that coloured this cell, ``None`` when empty."""

        if self is Cell.EMPTY:
            return None
        return PieceKind(self.name)


class LockCollisionError(RuntimeError):
    """Raised when a piece is locked over an already occupied cell.

    Movement is always validated before it is committed, so reaching this
    error means the collision checks are broken or the stack has grown into
    the spawn area.
    """


def create_empty_grid(width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Fixed-size grid holding the locked cells, row 0 at the top."""

    def __init__(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> None:
        self._width = width
        self._height = height
        self.grid: Grid = create_empty_grid(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, coord: Vector) -> bool:
        x, y = coord
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, coord: Vector) -> Optional[Cell]:
        """Return the cell at ``(x, y)`` or ``None`` if it lies off the board.

        Collision checks rely on the ``None`` result: an off-board coordinate
        is never ``Cell.EMPTY`` so it is rejected like an occupied one.
        """

        if not self.in_bounds(coord):
            return None
        x, y = coord
        return Cell(int(self.grid[y, x]))

    def set(self, coord: Vector, cell: Cell) -> None:
        """Write ``cell`` at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """

        if not self.in_bounds(coord):
            raise IndexError(f"Cell {coord} out of bounds")
        x, y = coord
        self.grid[y, x] = np.uint8(cell)

    def is_empty(self, coord: Vector) -> bool:
        return self.get(coord) is Cell.EMPTY

    def _check_row(self, y: int) -> None:
        if not 0 <= y < self._height:
            raise IndexError(f"Row {y} out of bounds")

    def row_is_full(self, y: int) -> bool:
        """Return ``True`` if every cell of row ``y`` is occupied.

        Raises:
            IndexError: If ``y`` is not a row of the board.
        """

        self._check_row(y)
        return bool(np.all(self.grid[y] != Cell.EMPTY))

    def shift_rows_down(self, from_row: int) -> None:
        """Drop every row above ``from_row`` by one, overwriting ``from_row``.

        Row 0 is left empty afterwards.

        Raises:
            IndexError: If ``from_row`` is not a row of the board.
        """

        self._check_row(from_row)
        if from_row > 0:
            self.grid[1 : from_row + 1] = self.grid[0:from_row].copy()
        self.grid[0] = Cell.EMPTY

    def lock_piece(self, tetromino: Tetromino) -> None:
        """Write the tetromino's cells into the grid.

        All target cells are checked before anything is written so a failed
        lock leaves the board unchanged.

        Raises:
            IndexError: If a block lies outside the board.
            LockCollisionError: If a block lands on an occupied cell.
        """

        blocks = tetromino.blocks()
        for coord in blocks:
            current = self.get(coord)
            if current is None:
                raise IndexError(f"Block {coord} out of bounds")
            if current is not Cell.EMPTY:
                raise LockCollisionError(
                    f"Cannot lock {tetromino.kind.value} at {coord}: "
                    f"cell already holds {current.name}"
                )

        value = Cell.occupied(tetromino.kind)
        for coord in blocks:
            self.set(coord, value)

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows are scanned from the top.  After a shift the rows above the
        cleared one have already been checked, so the scan simply continues.
        """

        cleared = 0
        for y in range(self._height):
            if self.row_is_full(y):
                self.shift_rows_down(y)
                cleared += 1
        return cleared

    def occupied(self) -> Iterator[Tuple[int, int, PieceKind]]:
        """Yield ``(x, y, kind)`` for every locked block."""

        rows, cols = np.nonzero(self.grid)
        for y, x in zip(rows.tolist(), cols.tolist()):
            yield x, y, PieceKind(Cell(int(self.grid[y, x])).name)
