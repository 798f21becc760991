"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple


class GameState:
    """
    A snapshot of the game at a specific tick.

    Attributes:
        tick: how many ticks have been played (0-based)
        snake_positions: list of (row, col), head first
        heading: current heading of the snake
        food: (row, col) of the food, or None once the board is full
        status: one of the statuses in constants
        width, height: size of the playable interior
        frame: the board buffer as it would be written to the terminal
    """

    def __init__(
        self,
        tick: int,
        snake_positions: List[Tuple[int, int]],
        heading: str,
        food: Optional[Tuple[int, int]],
        status: str,
        width: int,
        height: int,
        frame: bytes,
    ):
        self.tick = tick
        self.snake_positions = snake_positions
        self.heading = heading
        self.food = food
        self.status = status
        self.width = width
        self.height = height
        self.frame = frame

    @property
    def length(self) -> int:
        return len(self.snake_positions)

    def print_board(self) -> str:
        """
        Returns the frame as plain text with:
        # = border
        * = food
        @ = snake head
        o = snake body
        """
        return self.frame.decode("ascii").replace("\r\n", "\n").rstrip("\n")

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, status={self.status}, "
            f"length={self.length}, heading={self.heading}, food={self.food}>"
        )
