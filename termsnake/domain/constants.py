"""
Game constants for termsnake.
"""

from enum import Enum


class CellKind(Enum):
    """Symbolic contents of a board cell, valued by the byte drawn for it."""

    EMPTY = ord(" ")
    BORDER = ord("#")
    FOOD = ord("*")
    HEAD = ord("@")
    BODY = ord("o")

    @property
    def symbol(self) -> bytes:
        return bytes([self.value])


# Raw-mode terminals need an explicit carriage return at the end of each row
LINE_TERMINATOR = b"\r\n"
BORDER_WIDTH = 1

# Headings, arranged counter-clockwise
RIGHT = "RIGHT"
UP = "UP"
LEFT = "LEFT"
DOWN = "DOWN"
HEADINGS = (RIGHT, UP, LEFT, DOWN)

# (d_row, d_col); rows grow downwards on a terminal
UNIT_VECTORS = {
    RIGHT: (0, 1),
    UP: (-1, 0),
    LEFT: (0, -1),
    DOWN: (1, 0),
}

# Player commands
TURN_LEFT = "TURN_LEFT"
TURN_RIGHT = "TURN_RIGHT"
PAUSE = "PAUSE"
EXIT = "EXIT"
VALID_COMMANDS = {TURN_LEFT, TURN_RIGHT, PAUSE, EXIT}

# Game statuses
RUNNING = "running"
PAUSED = "paused"
CRASHED = "crashed"
EXITED = "exited"
WON = "won"
TERMINAL_STATUSES = {CRASHED, EXITED, WON}
