"""
Tests for engine.py - the tick engine.

Games are driven through tick() with explicit commands, or through step()
and run() with a scripted player and a recording renderer.
"""

import pytest
import sys
import os
import random
from unittest.mock import Mock

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from termsnake.engine import SnakeGame, TickResult
from termsnake.domain import (
    CellKind,
    GameState,
    Snake,
    RIGHT, LEFT, DOWN,
    TURN_LEFT, TURN_RIGHT, PAUSE, EXIT,
    RUNNING, PAUSED, CRASHED, EXITED, WON,
)
from termsnake.errors import InvariantViolation
from termsnake.players.base import Player
from termsnake.render import CellUpdate, RecordingRenderer


class ScriptedPlayer(Player):
    """Plays a fixed list of commands, then keeps going straight."""

    def __init__(self, commands=None):
        self.commands = list(commands or [])
        self.calls = []

    def get_command(self, game_state, timeout):
        self.calls.append((game_state, timeout))
        if self.commands:
            return self.commands.pop(0)
        return None


def make_game(width=10, height=10, commands=None, **kwargs):
    kwargs.setdefault("rng", random.Random(0))
    return SnakeGame(
        width=width,
        height=height,
        renderer=RecordingRenderer(),
        player=ScriptedPlayer(commands),
        **kwargs
    )


def move_food(game, cell):
    """Move the food to `cell`."""
    if game.food is not None:
        game.board.set_cell(*game.food, CellKind.EMPTY)
    game.food = cell
    game.board.set_cell(*cell, CellKind.FOOD)


def place_snake(game, positions):
    """
    Replace the game's snake with one occupying `positions`, head first.

    Call move_food() first so the old food is not stamped over.
    """
    for cell in game.snake.positions:
        game.board.set_cell(*cell, CellKind.EMPTY)
    game.snake = Snake(positions)
    for cell in positions[1:]:
        game.board.set_cell(*cell, CellKind.BODY)
    game.board.set_cell(*positions[0], CellKind.HEAD)


class TestSnakeGameSetup:
    """Tests for SnakeGame construction."""

    def test_game_initialization(self):
        """A new game seeds one head at the center and one food."""
        game = make_game()

        assert game.width == 10
        assert game.height == 10
        assert game.status == RUNNING
        assert game.heading == RIGHT
        assert game.tick_count == 0
        assert list(game.snake.positions) == [(6, 6)]
        assert game.board.cell_at(6, 6) == CellKind.HEAD
        assert game.food is not None
        assert game.food != (6, 6)
        assert game.board.cell_at(*game.food) == CellKind.FOOD
        # 100 cells minus head and food
        assert game.board.free_count() == 98

    def test_interior_is_empty_except_head_and_food(self):
        """Everything inside the border is empty apart from the seeded cells."""
        game = make_game(width=6, height=4)
        for row in range(1, 5):
            for col in range(1, 7):
                kind = game.board.cell_at(row, col)
                if (row, col) == game.snake.head:
                    assert kind == CellKind.HEAD
                elif (row, col) == game.food:
                    assert kind == CellKind.FOOD
                else:
                    assert kind == CellKind.EMPTY

    def test_one_by_one_board_is_won_immediately(self):
        """The head fills a 1x1 board, so there is nowhere to put food."""
        game = make_game(width=1, height=1)
        assert game.status == WON
        assert game.food is None
        assert game.game_over is True

    def test_tick_interval(self):
        """The poll budget is one tick at the configured rate."""
        game = make_game(ticks_per_second=4)
        assert game.tick_interval == pytest.approx(0.25)

    def test_get_current_state(self):
        """get_current_state() returns a GameState snapshot."""
        game = make_game()
        state = game.get_current_state()

        assert isinstance(state, GameState)
        assert state.width == 10
        assert state.height == 10
        assert state.snake_positions == [(6, 6)]
        assert state.status == RUNNING
        assert state.frame == game.board.frame()


class TestTick:
    """Tests for a single tick of movement."""

    def test_two_plain_ticks_move_head_and_clear_tail(self):
        """Heading right, the head moves (6,6) -> (6,7) -> (6,8) and the cells behind empty out."""
        game = make_game()
        move_food(game, (1, 1))

        result = game.tick(None)
        assert result.eaten is False
        assert result.crashed is False
        assert game.snake.head == (6, 7)
        assert game.board.cell_at(6, 6) == CellKind.EMPTY
        assert result.changes == [
            CellUpdate(6, 6, b"o"),
            CellUpdate(6, 6, b" "),
            CellUpdate(6, 7, b"@"),
        ]

        game.tick(None)
        assert game.snake.head == (6, 8)
        assert game.board.cell_at(6, 7) == CellKind.EMPTY
        assert game.board.cell_at(6, 8) == CellKind.HEAD
        assert len(game.snake) == 1
        assert game.tick_count == 2

    def test_eating_grows_and_respawns_food(self):
        """A length-3 snake stepping onto food becomes length 4 and food reappears on a free cell."""
        game = make_game()
        move_food(game, (6, 7))
        place_snake(game, [(6, 6), (6, 5), (6, 4)])

        result = game.tick(None)

        assert result.eaten is True
        assert result.crashed is False
        assert len(game.snake) == 4
        assert list(game.snake.positions) == [(6, 7), (6, 6), (6, 5), (6, 4)]
        assert game.food is not None
        assert not game.snake.occupies(game.food)
        assert game.board.cell_at(*game.food) == CellKind.FOOD
        assert result.changes[-1] == CellUpdate(game.food[0], game.food[1], b"*")
        assert game.status == RUNNING

    def test_turn_changes_heading_before_moving(self):
        """A turn command is applied before the head moves."""
        game = make_game()
        move_food(game, (1, 1))

        game.tick(TURN_LEFT)
        assert game.snake.head == (5, 6)

        game.tick(TURN_LEFT)
        assert game.heading == LEFT
        assert game.snake.head == (5, 5)

    def test_crash_into_border(self):
        """Moving onto the border crashes the snake and leaves the board alone."""
        game = make_game()
        move_food(game, (1, 1))
        place_snake(game, [(6, 10)])
        before = game.board.frame()

        result = game.tick(None)

        assert result.crashed is True
        assert result.eaten is False
        assert result.changes == []
        assert game.status == CRASHED
        assert game.board.frame() == before
        assert game.snake.head == (6, 10)

    def test_crash_into_own_body_after_tight_turns(self):
        """Three right turns curl a length-5 snake into its own body."""
        game = make_game()
        move_food(game, (1, 1))
        place_snake(game, [(6, 6), (6, 5), (6, 4), (6, 3), (6, 2)])

        first = game.tick(TURN_RIGHT)
        assert first.crashed is False
        assert game.heading == DOWN
        second = game.tick(TURN_RIGHT)
        assert second.crashed is False
        assert game.heading == LEFT
        assert list(game.snake.positions) == [(7, 5), (7, 6), (6, 6), (6, 5), (6, 4)]

        before = game.board.frame()
        result = game.tick(TURN_RIGHT)

        assert result.crashed is True
        assert game.status == CRASHED
        assert game.board.frame() == before
        assert list(game.snake.positions) == [(7, 5), (7, 6), (6, 6), (6, 5), (6, 4)]

    def test_moving_onto_the_tail_cell_crashes(self):
        """The tail still occupies its cell when the target is classified."""
        game = make_game()
        move_food(game, (1, 1))
        place_snake(game, [(6, 6), (7, 6), (7, 7), (6, 7)])

        result = game.tick(None)

        assert result.crashed is True

    def test_unknown_command_goes_straight(self):
        """Commands outside VALID_COMMANDS are treated as no turn."""
        game = make_game()
        move_food(game, (1, 1))

        game.tick("SIDEWAYS")

        assert game.heading == RIGHT
        assert game.snake.head == (6, 7)
        assert game.status == RUNNING

    def test_no_ticks_after_game_over(self):
        """Ticks after a terminal status change nothing."""
        game = make_game()
        game.tick(EXIT)
        before = game.board.frame()

        result = game.tick(None)

        assert result == TickResult()
        assert game.board.frame() == before
        assert game.tick_count == 0

    def test_exit_stops_without_mutating(self):
        """EXIT ends the game before anything moves."""
        game = make_game()
        before = game.board.frame()

        game.tick(EXIT)

        assert game.status == EXITED
        assert game.board.frame() == before
        assert game.snake.head == (6, 6)

    def test_pause_and_resume(self):
        """PAUSE freezes the snake until it is pressed again."""
        game = make_game()
        move_food(game, (1, 1))

        game.tick(PAUSE)
        assert game.status == PAUSED
        game.tick(None)
        game.tick(TURN_LEFT)
        assert game.snake.head == (6, 6)
        assert game.heading == RIGHT

        game.tick(PAUSE)
        assert game.status == RUNNING
        game.tick(None)
        assert game.snake.head == (6, 7)

    def test_filling_the_board_wins(self):
        """Eating the last free cell ends the game as a win."""
        game = make_game(width=2, height=1, heading=LEFT)
        assert game.snake.head == (1, 2)
        assert game.food == (1, 1)

        result = game.tick(None)

        assert result.eaten is True
        assert game.status == WON
        assert game.food is None
        assert len(game.snake) == 2

    def test_unexpected_cell_kind_raises(self):
        """A second head on the board is an invariant violation."""
        game = make_game()
        move_food(game, (1, 1))
        game.board.set_cell(6, 7, CellKind.HEAD)

        with pytest.raises(InvariantViolation):
            game.tick(None)


class TestStepAndRun:
    """Tests for polling, rendering and the game loop."""

    def test_step_polls_player_with_tick_interval(self):
        """step() hands the player a snapshot and one tick of time."""
        game = make_game(ticks_per_second=5)
        move_food(game, (1, 1))

        game.step()

        state, timeout = game.player.calls[0]
        assert isinstance(state, GameState)
        assert state.snake_positions == [(6, 6)]
        assert timeout == pytest.approx(0.2)
        assert game.snake.head == (6, 7)

    def test_step_renders_changes(self):
        """Cell deltas from the tick reach the renderer in order."""
        game = make_game()
        move_food(game, (1, 1))

        game.step()

        assert game.renderer.cells == [
            CellUpdate(6, 6, b"o"),
            CellUpdate(6, 6, b" "),
            CellUpdate(6, 7, b"@"),
        ]

    def test_step_renders_status_on_status_change(self):
        """Pausing updates the status line."""
        game = make_game(commands=[PAUSE])

        game.step()

        assert game.renderer.statuses[-1].endswith("PAUSED - press p to resume")

    def test_run_until_crash(self):
        """run() draws the full frame once and plays until the snake hits the wall."""
        game = make_game()
        move_food(game, (1, 1))

        final_state = game.run()

        assert final_state.status == CRASHED
        assert final_state.tick == 5
        assert final_state.snake_positions == [(6, 10)]
        assert len(game.renderer.frames) == 1
        assert "CRASHED" in game.renderer.statuses[-1]

    def test_run_until_exit(self):
        """An EXIT command ends run() cleanly."""
        game = make_game(commands=[None, EXIT])
        move_food(game, (1, 1))

        final_state = game.run()

        assert final_state.status == EXITED
        assert final_state.snake_positions == [(6, 7)]

    def test_run_propagates_renderer_errors(self):
        """Faults from the renderer are not swallowed by the loop."""
        renderer = Mock()
        renderer.render_full.side_effect = RuntimeError("display gone")
        game = SnakeGame(10, 10, renderer=renderer, player=ScriptedPlayer(), rng=random.Random(0))

        with pytest.raises(RuntimeError):
            game.run()
