"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (terminal, keyboard, command line).
"""

from .constants import (
    RIGHT, UP, LEFT, DOWN, HEADINGS,
    TURN_LEFT, TURN_RIGHT, PAUSE, EXIT, VALID_COMMANDS,
    RUNNING, PAUSED, CRASHED, EXITED, WON, TERMINAL_STATUSES,
    CellKind,
)
from .board import Board
from .snake import Snake
from .game_state import GameState
from .direction import turn, opposite, next_cell
from .food import spawn

__all__ = [
    'RIGHT', 'UP', 'LEFT', 'DOWN', 'HEADINGS',
    'TURN_LEFT', 'TURN_RIGHT', 'PAUSE', 'EXIT', 'VALID_COMMANDS',
    'RUNNING', 'PAUSED', 'CRASHED', 'EXITED', 'WON', 'TERMINAL_STATUSES',
    'CellKind',
    'Board',
    'Snake',
    'GameState',
    'turn',
    'opposite',
    'next_cell',
    'spawn',
]
