"""
Tick engine for termsnake.

SnakeGame owns the board and the snake and is their only mutator. Each
tick it asks its player for a command (the only place the game blocks),
moves the snake one cell and tells its renderer which cells changed.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from termsnake.domain import food
from termsnake.domain.board import Board
from termsnake.domain.constants import (
    CRASHED, EXIT, EXITED, PAUSE, PAUSED, RIGHT, RUNNING, TERMINAL_STATUSES,
    VALID_COMMANDS, WON, CellKind,
)
from termsnake.domain.direction import next_cell, turn
from termsnake.domain.game_state import GameState
from termsnake.domain.snake import Snake
from termsnake.errors import InvariantViolation
from termsnake.players.base import Player
from termsnake.render import CellUpdate, Renderer

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    eaten: bool = False
    crashed: bool = False
    changes: List[CellUpdate] = field(default_factory=list)


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - Snake and its heading
      - Food
      - Status (running, paused, crashed, exited, won)
      - Tick count and pacing
    """

    def __init__(
        self,
        width: int,
        height: int,
        renderer: Renderer,
        player: Player,
        ticks_per_second: int = 10,
        heading: str = RIGHT,
        rng: Optional[random.Random] = None,
    ):
        self.renderer = renderer
        self.player = player
        self.ticks_per_second = ticks_per_second
        self.heading = heading
        self.rng = rng or random.Random()
        self.tick_count = 0
        self.status = RUNNING

        self.board = Board(width, height)
        self.snake = Snake(self.board.center())
        self.board.set_cell(*self.snake.head, CellKind.HEAD)

        self.food: Optional[Tuple[int, int]] = None
        if self.board.free_count() == 0:
            # A 1x1 board is full before the first move
            self.status = WON
        else:
            self._place_food()

        logger.info(
            f"New game on a {width}x{height} board at {ticks_per_second} ticks/s, "
            f"head at {self.snake.head}, food at {self.food}"
        )

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def game_over(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def tick_interval(self) -> float:
        """Seconds per tick."""
        return 1.0 / self.ticks_per_second

    def _place_food(self) -> Tuple[int, int]:
        self.food = food.spawn(self.board, self.rng)
        self.board.set_cell(*self.food, CellKind.FOOD)
        return self.food

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick_count,
            snake_positions=list(self.snake.positions),
            heading=self.heading,
            food=self.food,
            status=self.status,
            width=self.width,
            height=self.height,
            frame=self.board.frame(),
        )

    def status_line(self) -> str:
        messages = {
            RUNNING: "arrows turn, p pauses, q quits",
            PAUSED: "PAUSED - press p to resume",
            CRASHED: "CRASHED!",
            EXITED: "Bye.",
            WON: "The board is full. You win!",
        }
        return f"length {len(self.snake)} | {messages[self.status]}"

    def tick(self, command: Optional[str]) -> TickResult:
        """
        Execute one tick with an already-polled command:
          1) EXIT ends the game without touching the board
          2) PAUSE toggles the pause; paused ticks do nothing else
          3) Turn and compute the new head
          4) Classify the target cell (food, crash, or empty)
          5) Move the snake, growing it if it ate
          6) Place new food, or win if the board is full

        Returns:
            TickResult with the cells changed this tick, in drawing order.
        """
        result = TickResult()
        if self.game_over:
            logger.warning(f"Game is already {self.status}. No more ticks.")
            return result

        if command is not None and command not in VALID_COMMANDS:
            logger.warning(f"Ignoring unknown command {command!r} at tick {self.tick_count}")
            command = None

        if command == EXIT:
            self.status = EXITED
            logger.info(f"Player exited at tick {self.tick_count}")
            return result

        if command == PAUSE:
            self.status = RUNNING if self.status == PAUSED else PAUSED
            logger.info(f"Game {self.status} at tick {self.tick_count}")
            return result

        if self.status == PAUSED:
            return result

        self.heading = turn(self.heading, command)
        old_head = self.snake.head
        new_head = next_cell(old_head, self.heading)

        target = self.board.cell_at(*new_head)
        if target == CellKind.FOOD:
            result.eaten = True
        elif target in (CellKind.BORDER, CellKind.BODY):
            result.crashed = True
        elif target != CellKind.EMPTY:
            raise InvariantViolation(
                f"snake head at {old_head} moved onto a {target.name} cell at {new_head}"
            )

        self.tick_count += 1

        if result.crashed:
            self.status = CRASHED
            logger.info(
                f"Crashed into {target.name.lower()} at {new_head} on tick "
                f"{self.tick_count} with length {len(self.snake)}"
            )
            return result

        self.board.set_cell(*old_head, CellKind.BODY)
        result.changes.append(CellUpdate(*old_head, CellKind.BODY.symbol))
        self.snake.advance(new_head)

        if not result.eaten:
            tail = self.snake.shrink_tail()
            self.board.set_cell(*tail, CellKind.EMPTY)
            result.changes.append(CellUpdate(*tail, CellKind.EMPTY.symbol))

        self.board.set_cell(*new_head, CellKind.HEAD)
        result.changes.append(CellUpdate(*new_head, CellKind.HEAD.symbol))

        if result.eaten:
            if self.board.free_count() == 0:
                self.food = None
                self.status = WON
                logger.info(f"Board filled on tick {self.tick_count}, length {len(self.snake)}")
            else:
                placed = self._place_food()
                result.changes.append(CellUpdate(*placed, CellKind.FOOD.symbol))
                logger.debug(f"Ate food at {new_head}, new food at {placed}")

        logger.debug(f"Tick {self.tick_count}: head {new_head} heading {self.heading}")
        return result

    def step(self) -> TickResult:
        """
        Poll the player for up to one tick interval, apply the command and
        render what changed.
        """
        command = self.player.get_command(self.get_current_state(), self.tick_interval)
        previous_status = self.status
        result = self.tick(command)

        self.renderer.render_changes(result.changes)
        if self.status != previous_status or result.eaten:
            self.renderer.render_status(self.status_line())
        return result

    def run(self) -> GameState:
        """
        Play until the snake crashes, the player exits or the board fills up.

        Returns:
            The final GameState.
        """
        self.renderer.render_full(self.board.frame())
        self.renderer.render_status(self.status_line())

        while not self.game_over:
            self.step()

        logger.info(f"Game over: {self.status} after {self.tick_count} ticks, length {len(self.snake)}")
        return self.get_current_state()
