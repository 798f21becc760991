#!/usr/bin/env python3
"""
Play Snake in the terminal.

Usage:
    termsnake [--width W] [--height H] [--tps N] [--demo]

Examples:
    # Board sized to the terminal, default speed
    termsnake

    # Small, fast board
    termsnake --width 20 --height 10 --tps 12

    # Watch the autopilot (q quits, p pauses)
    termsnake --demo

Controls: left/right arrows (or a/d, h/l) turn relative to the snake's
heading, p or space pauses, q or Esc quits.
"""

import argparse
import logging
import sys
from typing import List, Optional

from termsnake import config
from termsnake.domain.constants import CRASHED, EXITED, WON
from termsnake.engine import SnakeGame
from termsnake.errors import SnakeError
from termsnake.players import KeyboardPlayer, RandomPlayer
from termsnake.services.terminal import Terminal

logger = logging.getLogger(__name__)

OUTCOMES = {
    CRASHED: "Game over: the snake crashed.",
    EXITED: "Game over: you quit.",
    WON: "Game over: the board is full, you win!",
}


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be a positive integer")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='termsnake',
        description='Play Snake in the terminal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--width', type=positive_int, default=None,
                        help='Board width in cells (default: fit the terminal)')
    parser.add_argument('--height', type=positive_int, default=None,
                        help='Board height in cells (default: fit the terminal)')
    parser.add_argument('--tps', type=positive_int, default=None,
                        help='Ticks per second (default: derived from the board size)')
    parser.add_argument('--demo', action='store_true',
                        help='Let the autopilot steer')
    return parser


def play(args: argparse.Namespace, terminal: Terminal):
    """
    Run one game on an already-acquired terminal.

    Returns:
        The final GameState.
    """
    if args.width is None or args.height is None:
        fit_width, fit_height = config.default_board_size(*terminal.get_terminal_size())
        width = args.width or fit_width
        height = args.height or fit_height
    else:
        width, height = args.width, args.height

    ticks_per_second = args.tps or config.default_ticks_per_second(width, height)

    if args.demo:
        player = RandomPlayer(terminal=terminal)
    else:
        player = KeyboardPlayer(terminal)

    game = SnakeGame(
        width=width,
        height=height,
        renderer=terminal,
        player=player,
        ticks_per_second=ticks_per_second,
    )
    return game.run()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config.configure_logging()
        terminal = Terminal()
        with terminal.game_mode():
            final_state = play(args, terminal)
    except SnakeError as e:
        logger.exception("termsnake stopped on an error")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        print("Cancelled by user", file=sys.stderr)
        return 1

    print(OUTCOMES[final_state.status])
    print(f"Final length: {final_state.length} after {final_state.tick} ticks")
    return 0


if __name__ == "__main__":
    sys.exit(main())
