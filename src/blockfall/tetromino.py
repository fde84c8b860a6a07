"""Tetromino definitions and rotation math.

Every piece is described by four ``(x, y)`` offsets around a logical origin.
Rotation is applied to the offsets before translating them by the piece's grid
origin, so the origin acts as the pivot.  There are no wall kicks: a rotation
either fits around the same origin or it does not happen.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

Vector = Tuple[int, int]  # (x, y), y grows downwards
Extent = Tuple[int, int, int, int]  # (min_x, max_x, min_y, max_y)
Color = Tuple[int, int, int]


class PieceKind(str, Enum):
    """Enumeration of the seven tetromino shapes.

    The declaration order is also the index drawn by the random source when a
    new piece spawns.
    """

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"

    @property
    def color(self) -> Color:
        """RGB colour used to paint cells of this kind."""

        return COLORS[self]


# Offsets in the canonical (facing 0) orientation.
_BASE_OFFSETS: Dict[PieceKind, List[Vector]] = {
    PieceKind.I: [(0, 0), (1, 0), (2, 0), (-1, 0)],
    PieceKind.O: [(0, 0), (1, 0), (0, 1), (1, 1)],
    PieceKind.T: [(0, 0), (0, 1), (-1, 0), (1, 0)],
    PieceKind.S: [(0, 0), (0, 1), (1, 0), (-1, 1)],
    PieceKind.Z: [(0, 0), (0, 1), (-1, 0), (1, 1)],
    PieceKind.J: [(0, 0), (0, 1), (0, -1), (1, -1)],
    PieceKind.L: [(0, 0), (0, 1), (0, -1), (-1, -1)],
}

COLORS: Dict[PieceKind, Color] = {
    PieceKind.I: (66, 241, 244),
    PieceKind.O: (233, 237, 42),
    PieceKind.T: (182, 42, 237),
    PieceKind.S: (88, 237, 42),
    PieceKind.Z: (226, 50, 27),
    PieceKind.J: (22, 75, 221),
    PieceKind.L: (219, 108, 17),
}

FACINGS = 4


def offsets(kind: PieceKind) -> List[Vector]:
    """Return a copy of the canonical offsets for ``kind``."""

    return list(_BASE_OFFSETS[kind])


def rotate(vector: Vector, facing: int) -> Vector:
    """Return ``vector`` rotated by ``facing`` quarter turns about the origin.

    With the y axis pointing down the screen a single step turns the vector
    clockwise.  ``facing`` is taken modulo 4 so any integer is accepted.
    """

    x, y = vector
    step = facing % FACINGS
    if step == 0:
        return (x, y)
    if step == 1:
        return (-y, x)
    if step == 2:
        return (-x, -y)
    return (y, -x)


def cells(kind: PieceKind, origin: Vector, facing: int) -> List[Vector]:
    """Return the grid cells covered by ``kind`` at ``origin`` and ``facing``.

    This is the only definition of which cells a piece occupies; collision
    checks, locking and rendering all go through it.
    """

    ox, oy = origin
    result = []
    for offset in _BASE_OFFSETS[kind]:
        dx, dy = rotate(offset, facing)
        result.append((ox + dx, oy + dy))
    return result


def extent(kind: PieceKind, facing: int) -> Extent:
    """Return ``(min_x, max_x, min_y, max_y)`` of ``kind`` around ``(0, 0)``."""

    blocks = cells(kind, (0, 0), facing)
    xs = [x for x, _ in blocks]
    ys = [y for _, y in blocks]
    return min(xs), max(xs), min(ys), max(ys)


@dataclass
class Tetromino:
    """Active falling piece in the game."""

    kind: PieceKind
    facing: int = 0
    origin: Vector = (0, 0)  # (x, y)

    def rotate(self, direction: int = 1) -> None:
        """Turn the piece ``direction`` quarter turns, wrapping modulo 4."""

        self.facing = (self.facing + direction) % FACINGS

    def move(self, dx: int, dy: int) -> None:
        x, y = self.origin
        self.origin = (x + dx, y + dy)

    def blocks(self) -> List[Vector]:
        """Return the global cell coordinates for this piece."""

        return cells(self.kind, self.origin, self.facing)
