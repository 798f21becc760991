"""
Base player interface for the game engine.
"""

from typing import Optional

from termsnake.domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player is the engine's only source of commands. Once per tick the
    engine asks for a command and allows the player up to `timeout` seconds
    to answer; that wait is what paces the game.
    """

    def get_command(self, game_state: GameState, timeout: float) -> Optional[str]:
        """
        Return a command for the coming tick.

        Args:
            game_state: Current state of the game
            timeout: Seconds the player may block before answering

        Returns:
            One of: "TURN_LEFT", "TURN_RIGHT", "PAUSE", "EXIT", or None to
            keep going straight.
        """
        raise NotImplementedError
