"""
Random player implementation - picks random safe turns.
"""

import random
from typing import List, Optional

from termsnake.domain.constants import EXIT, PAUSE, TURN_LEFT, TURN_RIGHT
from termsnake.domain.direction import next_cell, turn
from termsnake.domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a turn (or none) that avoids walls and itself.

    When given a terminal it still listens to the keyboard for the tick, but
    only honours EXIT and PAUSE; steering is its own.
    """

    def __init__(self, terminal=None, rng: Optional[random.Random] = None):
        self.terminal = terminal
        self.rng = rng or random.Random()

    def get_command(self, game_state: GameState, timeout: float) -> Optional[str]:
        if self.terminal is not None:
            key = self.terminal.poll_input(timeout)
            if key in (EXIT, PAUSE):
                return key

        head = game_state.snake_positions[0]
        # The tail moves away this tick unless food is eaten, so it is not
        # treated as safe either way
        body = set(game_state.snake_positions)

        # Calculate the cell each relative move leads to and filter out moves
        # that hit the border or the snake
        safe_moves: List[Optional[str]] = []
        for command in (None, TURN_LEFT, TURN_RIGHT):
            row, col = next_cell(head, turn(game_state.heading, command))
            if not (1 <= row <= game_state.height and 1 <= col <= game_state.width):
                continue
            if (row, col) in body:
                continue
            safe_moves.append(command)

        # If no safe moves, keep going straight (we'll crash anyway)
        if not safe_moves:
            return None

        return self.rng.choice(safe_moves)
