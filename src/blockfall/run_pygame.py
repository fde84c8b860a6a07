"""pygame front-end for the engine.

This module owns the window, paints the board and the falling piece, turns
key presses into :class:`~blockfall.commands.Command` values and drives
:meth:`GameState.advance` from ``pygame.time.get_ticks()``.  All game rules
live in :mod:`blockfall.game_state`.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import pygame

from .commands import Command
from .config import FPS, GameConfig
from .game_state import GameState, RandomSource
from .tetromino import Color

LOGGER = logging.getLogger(__name__)

TITLE = "Tetris?"
BACKGROUND: Color = (25, 51, 76)

KEY_BINDINGS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE_CLOCKWISE,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
}


def command_for_key(key: int) -> Optional[Command]:
    return KEY_BINDINGS.get(key)


def cell_rect(x: int, y: int, config: GameConfig) -> pygame.Rect:
    """Return the screen rectangle covering grid cell ``(x, y)``."""

    return pygame.Rect(
        x * config.cell_width, y * config.cell_height, config.cell_width, config.cell_height
    )


def draw_board(screen: pygame.Surface, state: GameState) -> None:
    """Render the locked cells."""

    for x, y, kind in state.locked_cells():
        pygame.draw.rect(screen, kind.color, cell_rect(x, y, state.config))


def draw_tetromino(screen: pygame.Surface, state: GameState) -> None:
    """Render the currently active tetromino."""

    color = state.active.kind.color
    for x, y in state.active_cells():
        pygame.draw.rect(screen, color, cell_rect(x, y, state.config))


def handle_event(event: pygame.event.Event, state: GameState) -> bool:
    """Apply a key-down event to ``state``.

    Returns ``True`` if the event mapped to a command, whether or not the
    command could move the piece.
    """

    if event.type != pygame.KEYDOWN:
        return False
    command = command_for_key(event.key)
    if command is None:
        return False
    state.apply(command)
    return True


class GameRunner:
    """Run the window loop for one game session."""

    def __init__(
        self, config: Optional[GameConfig] = None, rng: Optional[RandomSource] = None
    ) -> None:
        self.config = config or GameConfig()
        self._rng = rng
        self._running = False
        self._state: Optional[GameState] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def state(self) -> Optional[GameState]:
        return self._state

    def _make_state(self, start_time: float) -> GameState:
        if self._rng is None:
            return GameState(config=self.config, start_time=start_time)
        return GameState(config=self.config, rng=self._rng, start_time=start_time)

    def _draw(self, screen: pygame.Surface) -> None:
        assert self._state is not None
        screen.fill(BACKGROUND)
        draw_tetromino(screen, self._state)
        draw_board(screen, self._state)
        pygame.display.flip()

    def run(self) -> None:
        pygame.init()
        try:
            # Only fresh key presses count; held keys do not repeat.
            pygame.key.set_repeat()
            screen = pygame.display.set_mode(self.config.screen_size)
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()

            self._state = self._make_state(pygame.time.get_ticks())
            LOGGER.info(
                "Game started: %dx%d grid, %.1f updates/s",
                self.config.grid_width,
                self.config.grid_height,
                self.config.updates_per_second,
            )

            self._running = True
            while self._running:
                clock.tick(FPS)
                # Commands of this frame go in before gravity acts.
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self._running = False
                    else:
                        handle_event(event, self._state)
                self._state.advance(pygame.time.get_ticks())
                self._draw(screen)
        finally:
            self._running = False
            pygame.quit()
            LOGGER.info("Game stopped")


def main(config: Optional[GameConfig] = None, rng: Optional[RandomSource] = None) -> None:
    GameRunner(config, rng).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
