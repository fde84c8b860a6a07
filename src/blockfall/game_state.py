"""High level game state and the fixed-cadence update step."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Protocol, Tuple

from .board import Board
from .commands import Command
from .config import GameConfig
from .tetromino import FACINGS, PieceKind, Tetromino, Vector, extent
from .utils import can_occupy


LOGGER = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything able to draw a uniform integer from ``[start, stop)``.

    :class:`random.Random` satisfies it; tests pass scripted sequences.
    """

    def randrange(self, start: int, stop: int) -> int:
        ...


@dataclass
class GameState:
    """Mutable state for a game session.

    The board and the falling piece belong to this object; everything else
    only reads them.  Time is never read internally: the driver passes the
    current timestamp in milliseconds to :meth:`advance`, and tick ``n`` is
    due at ``start_time + n * config.period_ms``.
    """

    config: GameConfig = field(default_factory=GameConfig)
    rng: RandomSource = field(default_factory=random.Random)
    start_time: float = 0.0
    tick_count: int = 0
    pieces: int = 0
    board: Board = field(init=False)
    active: Tetromino = field(init=False)

    def __post_init__(self) -> None:
        self.board = Board(self.config.grid_width, self.config.grid_height)
        self.spawn()

    def spawn(self) -> Tetromino:
        """Spawn and return a new active tetromino.

        Kind, facing and column are drawn uniformly.  The column keeps the
        whole piece on the board horizontally and the piece's top row is
        placed on row 0.
        """

        kinds = list(PieceKind)
        kind = kinds[self.rng.randrange(0, len(kinds))]
        facing = self.rng.randrange(0, FACINGS)
        min_x, max_x, min_y, _ = extent(kind, facing)
        x = self.rng.randrange(-min_x, self.board.width - max_x)
        self.active = Tetromino(kind, facing, (x, -min_y))
        LOGGER.debug("Spawned %s facing %d at %s", kind.value, facing, self.active.origin)
        return self.active

    def can_occupy(self, origin: Vector, facing: int) -> bool:
        return can_occupy(self.board, self.active.kind, origin, facing)

    def try_move(self, dx: int, dy: int) -> bool:
        """Move the active piece by ``(dx, dy)`` if the new pose is free."""

        x, y = self.active.origin
        if not self.can_occupy((x + dx, y + dy), self.active.facing):
            return False
        self.active.move(dx, dy)
        return True

    def try_rotate(self) -> bool:
        """Rotate a quarter turn clockwise in place; no kicks are attempted."""

        if not self.can_occupy(self.active.origin, self.active.facing + 1):
            return False
        self.active.rotate()
        return True

    def hard_drop(self) -> int:
        """Drop the active piece as far as it goes and return the rows moved.

        The piece is not locked here; the next tick of :meth:`advance` does
        that once it finds the piece unable to descend.
        """

        rows = 0
        while self.try_move(0, 1):
            rows += 1
        return rows

    def lock_and_respawn(self) -> int:
        """Lock the active piece, clear full rows and spawn the next piece.

        Returns the number of rows cleared.  A
        :class:`~blockfall.board.LockCollisionError` from the board is left to
        propagate.
        """

        piece = self.active
        self.board.lock_piece(piece)
        self.pieces += 1
        LOGGER.debug(
            "Locked %s facing %d at %s", piece.kind.value, piece.facing, piece.origin
        )
        cleared = self.board.clear_full_rows()
        if cleared:
            LOGGER.info("Cleared %d row(s)", cleared)
        self.spawn()
        return cleared

    def advance(self, now: float) -> int:
        """Run every tick that is due at ``now`` and return how many ran.

        Each tick moves the active piece down one row, or locks it when it
        cannot descend.  Overdue ticks are caught up in one call, and calling
        again with the same ``now`` runs nothing.
        """

        period = self.config.period_ms
        ticks = 0
        while now - self.start_time >= self.tick_count * period:
            if not self.try_move(0, 1):
                self.lock_and_respawn()
            self.tick_count += 1
            ticks += 1
        return ticks

    def apply(self, command: Command) -> bool:
        """Apply a player command; return ``False`` if it had no effect.

        Plain command values such as ``"move_left"`` are accepted too.

        Raises:
            ValueError: If ``command`` is not a known command.
        """

        command = Command(command)
        if command is Command.MOVE_LEFT:
            return self.try_move(-1, 0)
        if command is Command.MOVE_RIGHT:
            return self.try_move(1, 0)
        if command is Command.ROTATE_CLOCKWISE:
            return self.try_rotate()
        if command is Command.SOFT_DROP:
            return self.try_move(0, 1)
        return self.hard_drop() > 0

    def reset_game(self, start_time: float = 0.0) -> None:
        """Start a fresh game whose first tick is due at ``start_time``."""

        self.board = Board(self.config.grid_width, self.config.grid_height)
        self.start_time = start_time
        self.tick_count = 0
        self.pieces = 0
        self.spawn()

    # Read-only queries for renderers ----------------------------------
    def locked_cells(self) -> Iterator[Tuple[int, int, PieceKind]]:
        return self.board.occupied()

    def active_cells(self) -> List[Vector]:
        return self.active.blocks()
