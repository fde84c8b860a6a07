"""Discrete player intents accepted by :class:`blockfall.game_state.GameState`."""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    """Player intents; ``SOFT_DROP`` moves one row, ``HARD_DROP`` until blocked."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE_CLOCKWISE = "rotate_clockwise"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
