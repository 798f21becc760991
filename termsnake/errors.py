"""
Exception hierarchy for termsnake.

Game outcomes (crashing into a wall, quitting, filling the board) are not
errors; they are statuses on the game. Everything here is a fault that
propagates to the command line entry point, which restores the terminal
before reporting it.
"""


class SnakeError(Exception):
    """Base class for all termsnake errors."""


class InvariantViolation(SnakeError):
    """
    Raised when the engine's internal invariants are broken: an empty snake,
    an unknown cell kind, an out-of-bounds coordinate.

    These indicate bugs and are never recovered from.
    """


class BoardFullError(InvariantViolation):
    """Raised when food is requested but no free cell is left."""


class TerminalError(SnakeError):
    """Raised when the terminal cannot be drawn to or switched into game mode."""


class ConfigError(SnakeError):
    """Raised for malformed configuration values."""
