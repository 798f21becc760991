"""
Heading state machine.

The player never chooses an absolute direction, only a turn relative to
the current heading. Headings sit on a cycle (RIGHT, UP, LEFT, DOWN); a left
turn moves one step forward on the cycle and a right turn one step back, so
a single command can never produce the opposite heading.
"""

from typing import Optional, Tuple

from .constants import HEADINGS, TURN_LEFT, TURN_RIGHT, UNIT_VECTORS

_STEP = {
    TURN_LEFT: 1,
    TURN_RIGHT: -1,
}


def turn(heading: str, command: Optional[str]) -> str:
    """
    Return the heading after applying a command.

    Args:
        heading: Current heading, one of HEADINGS
        command: TURN_LEFT, TURN_RIGHT, or anything else (including None)
                 for "keep going straight"

    Returns:
        The new heading.
    """
    step = _STEP.get(command, 0)
    if step == 0:
        return heading
    index = HEADINGS.index(heading)
    return HEADINGS[(index + step) % len(HEADINGS)]


def opposite(heading: str) -> str:
    index = HEADINGS.index(heading)
    return HEADINGS[(index + 2) % len(HEADINGS)]


def unit_vector(heading: str) -> Tuple[int, int]:
    return UNIT_VECTORS[heading]


def next_cell(cell: Tuple[int, int], heading: str) -> Tuple[int, int]:
    """Return the cell one step from `cell` in the given heading."""
    d_row, d_col = unit_vector(heading)
    return (cell[0] + d_row, cell[1] + d_col)
