"""
Player implementations for termsnake.

This module contains the player abstractions and implementations
that feed turn commands to the engine.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'RandomPlayer',
]
