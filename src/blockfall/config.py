"""Game configuration.

The module level constants are the reference configuration.  ``GameConfig``
bundles them so front-ends and tests can run the engine with other values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Grid dimensions in cells.
GRID_WIDTH = 16
GRID_HEIGHT = 32
# Size of a single board cell in pixels
CELL_SIZE = 32
# Automatic descents per second
UPDATES_PER_SECOND = 10.0
# Frames per second to run the pygame loop at
FPS = 60


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings for one game session."""

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    cell_width: int = CELL_SIZE
    cell_height: int = CELL_SIZE
    updates_per_second: float = UPDATES_PER_SECOND

    def __post_init__(self) -> None:
        for name in ("grid_width", "grid_height", "cell_width", "cell_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.updates_per_second <= 0:
            raise ValueError(
                f"updates_per_second must be positive, got {self.updates_per_second}"
            )
        # The widest piece spans four cells in any facing.
        if self.grid_width < 4 or self.grid_height < 4:
            raise ValueError("grid must be at least 4x4 to fit every piece")

    @property
    def period_ms(self) -> float:
        """Milliseconds between two automatic descents."""

        return 1000.0 / self.updates_per_second

    @property
    def screen_size(self) -> Tuple[int, int]:
        return (self.grid_width * self.cell_width, self.grid_height * self.cell_height)
