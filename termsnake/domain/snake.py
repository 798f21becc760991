"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Union

from termsnake.errors import InvariantViolation

Coordinate = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (row, col) from head at index 0 to tail at the end

    The snake only tracks which cells it occupies; it never looks at the
    board. The engine decides whether a move grows it (advance only) or
    keeps its length (advance then shrink_tail).
    """

    def __init__(self, start: Union[Coordinate, List[Coordinate]]):
        # A bare (row, col) pair is a single-segment snake
        if len(start) == 2 and all(isinstance(part, int) for part in start):
            start = [start]
        self.positions = deque(start)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake length={len(self.positions)}, head={self.positions[0] if self.positions else None}>"

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        if not self.positions:
            raise InvariantViolation("snake has no segments, cannot read its head")
        return self.positions[0]

    @property
    def tail(self) -> Coordinate:
        if not self.positions:
            raise InvariantViolation("snake has no segments, cannot read its tail")
        return self.positions[-1]

    def advance(self, new_head: Coordinate) -> None:
        """Push a new head segment to the front."""
        self.positions.appendleft(new_head)

    def shrink_tail(self) -> Coordinate:
        """
        Remove and return the last segment.

        Raises:
            InvariantViolation: If the snake has no segments left.
        """
        if not self.positions:
            raise InvariantViolation("snake has no segments, cannot shrink its tail")
        return self.positions.pop()

    def occupies(self, cell: Coordinate) -> bool:
        return cell in self.positions
