"""
Keyboard player - reads commands from the terminal.
"""

from typing import Optional

from termsnake.domain.game_state import GameState
from .base import Player


class KeyboardPlayer(Player):
    """Delegates every tick's command to the terminal's key poll."""

    def __init__(self, terminal):
        self.terminal = terminal

    def get_command(self, game_state: GameState, timeout: float) -> Optional[str]:
        return self.terminal.poll_input(timeout)
