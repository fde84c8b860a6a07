"""Falling-block puzzle engine with a pygame front-end."""

from .board import Board, Cell, LockCollisionError
from .commands import Command
from .config import GameConfig
from .tetromino import PieceKind, Tetromino, cells, extent, offsets, rotate
from .game_state import GameState, RandomSource
from .utils import can_occupy, render_grid

__all__ = [
    "Board",
    "Cell",
    "LockCollisionError",
    "Command",
    "GameConfig",
    "PieceKind",
    "Tetromino",
    "GameState",
    "RandomSource",
    "can_occupy",
    "render_grid",
    "cells",
    "extent",
    "offsets",
    "rotate",
]
