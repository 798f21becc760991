"""
Terminal driver built on curses.

Provides the game with a screen it can draw raw frames on and a keyboard it
can poll with a deadline. The Terminal handle is created by the caller and
passed to whoever needs it; there is no module-level screen.

    terminal = Terminal()
    with terminal.game_mode():
        ...

game_mode() restores the terminal on every exit path, including errors
raised by the engine.
"""

import curses
import logging
import time
from contextlib import contextmanager
from typing import Generator, Optional, Tuple

from termsnake.domain.constants import EXIT, PAUSE, TURN_LEFT, TURN_RIGHT
from termsnake.errors import TerminalError
from termsnake.render import Renderer

logger = logging.getLogger(__name__)

ESCAPE = 27

KEY_COMMANDS = {
    curses.KEY_LEFT: TURN_LEFT,
    ord("a"): TURN_LEFT,
    ord("h"): TURN_LEFT,
    curses.KEY_RIGHT: TURN_RIGHT,
    ord("d"): TURN_RIGHT,
    ord("l"): TURN_RIGHT,
    ord("p"): PAUSE,
    ord(" "): PAUSE,
    ord("q"): EXIT,
    ESCAPE: EXIT,
}


class Terminal(Renderer):
    """
    Exclusive handle on the controlling terminal.

    Attributes:
        screen: the curses window while in game mode, None otherwise
        status_row: screen row of the status line, set by render_full
    """

    def __init__(self):
        self.screen = None
        self.status_row = 0

    def _require_screen(self):
        if self.screen is None:
            raise TerminalError("terminal is not in game mode")
        return self.screen

    def enter_game_mode(self) -> None:
        """Take over the terminal: alternate screen, no echo, no line buffering, hidden cursor."""
        try:
            self.screen = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self.screen.keypad(True)
            curses.curs_set(0)
        except curses.error as e:
            self.leave_game_mode()
            raise TerminalError(f"could not enter game mode: {e}") from e
        logger.debug("Entered game mode")

    def leave_game_mode(self) -> None:
        """Give the terminal back in the state we found it."""
        if self.screen is None:
            return
        try:
            self.screen.keypad(False)
            curses.nocbreak()
            curses.echo()
            curses.curs_set(1)
        except curses.error as e:
            # Restoring the cursor is not supported everywhere; endwin still runs
            logger.warning(f"Could not fully restore terminal settings: {e}")
        finally:
            self.screen = None
            curses.endwin()
        logger.debug("Left game mode")

    @contextmanager
    def game_mode(self) -> Generator["Terminal", None, None]:
        """
        Context manager for exclusive terminal control.

        Automatically handles:
        - Entering game mode on entry
        - Leaving game mode on exit, whether the body returned or raised

        Yields:
            This terminal, ready to draw on and poll.
        """
        self.enter_game_mode()
        try:
            yield self
        finally:
            self.leave_game_mode()

    def get_terminal_size(self) -> Tuple[int, int]:
        """Return the terminal size as (columns, rows)."""
        rows, columns = self._require_screen().getmaxyx()
        return columns, rows

    def poll_input(self, timeout: float) -> Optional[str]:
        """
        Listen for keys until `timeout` seconds have passed.

        Returns the last turn entered during the interval, so several quick
        presses still turn only once. EXIT and PAUSE return immediately.
        """
        screen = self._require_screen()
        deadline = time.monotonic() + timeout
        command = None
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            screen.timeout(max(1, int(remaining * 1000)))
            key = screen.getch()
            if key == -1:
                break
            key_command = KEY_COMMANDS.get(key)
            if key_command in (EXIT, PAUSE):
                return key_command
            if key_command is not None:
                command = key_command
        return command

    def render_full(self, frame: bytes) -> None:
        """Clear the screen and draw the whole frame from the top-left corner."""
        screen = self._require_screen()
        lines = frame.decode("ascii").split("\r\n")
        if lines and lines[-1] == "":
            lines.pop()

        rows, columns = screen.getmaxyx()
        width = max((len(line) for line in lines), default=0)
        if len(lines) + 1 > rows or width > columns:
            raise TerminalError(
                f"a {width}x{len(lines)} board does not fit a {columns}x{rows} terminal"
            )

        try:
            screen.erase()
            for row, line in enumerate(lines):
                screen.addstr(row, 0, line)
            screen.refresh()
        except curses.error as e:
            raise TerminalError(f"could not draw frame: {e}") from e
        self.status_row = len(lines)

    def render_cell(self, symbol: bytes, col: int, row: int) -> None:
        screen = self._require_screen()
        try:
            screen.addstr(row, col, symbol.decode("ascii"))
            screen.refresh()
        except curses.error as e:
            raise TerminalError(f"could not draw cell ({row}, {col}): {e}") from e

    def render_status(self, text: str) -> None:
        screen = self._require_screen()
        rows, columns = screen.getmaxyx()
        try:
            screen.move(self.status_row, 0)
            screen.clrtoeol()
            screen.addstr(self.status_row, 0, text[: columns - 1])
            screen.refresh()
        except curses.error as e:
            raise TerminalError(f"could not draw status line: {e}") from e
