"""
Tests for GameController: scheduler wiring and symbolic input.
"""

from gridsnake.core.game_interface import GameListener
from gridsnake.games.snake.config import SnakeConfig
from gridsnake.games.snake.controller import GameController
from gridsnake.games.snake.engine import Direction, GameOverReason
from gridsnake.games.snake.grid import Cell
from gridsnake.scheduling import ManualScheduler


def make_controller(**overrides):
    config = SnakeConfig(seed=42, **overrides)
    scheduler = ManualScheduler()
    return GameController(scheduler, config), scheduler


class TestTimerLifecycle:
    """Tests for scheduling and cancelling the tick timer."""

    def test_nothing_scheduled_before_start(self):
        controller, scheduler = make_controller()

        assert controller.is_scheduled is False
        assert scheduler.active_tasks == 0

    def test_start_schedules_ticks(self):
        controller, scheduler = make_controller()
        controller.start()
        controller.engine.session.food = Cell(0, 0)

        scheduler.advance(100)

        assert controller.is_scheduled is True
        assert controller.snapshot.head == Cell(7, 10)

    def test_tick_interval_from_config(self):
        controller, scheduler = make_controller(tick_interval_ms=250)
        controller.start()
        controller.engine.session.food = Cell(0, 0)

        scheduler.advance(200)
        assert controller.snapshot.ticks == 0
        scheduler.advance(300)
        assert controller.snapshot.ticks == 2

    def test_game_over_cancels_timer(self):
        controller, scheduler = make_controller()
        controller.start()
        controller.engine.session.food = Cell(0, 0)

        scheduler.advance(100 * 30)

        snapshot = controller.snapshot
        assert snapshot.game_over_reason == GameOverReason.WALL
        assert controller.is_scheduled is False
        assert scheduler.active_tasks == 0
        assert snapshot.ticks == 13

    def test_restart_replaces_timer(self):
        controller, scheduler = make_controller()
        controller.start()
        scheduler.advance(300)

        controller.start()

        assert scheduler.active_tasks == 1
        assert controller.snapshot.ticks == 0

    def test_restart_after_game_over(self):
        controller, scheduler = make_controller()
        controller.start()
        controller.engine.session.food = Cell(0, 0)
        scheduler.advance(100 * 30)

        assert controller.start() is True
        assert controller.is_scheduled is True
        assert controller.snapshot.running is True

    def test_stop_cancels_timer(self):
        controller, scheduler = make_controller()
        controller.start()
        controller.stop()

        assert controller.is_scheduled is False
        assert controller.engine.running is False
        assert scheduler.advance(1000) == 0

    def test_ignore_policy_keeps_timer(self):
        controller, scheduler = make_controller(restart_policy="ignore")
        controller.start()
        task = controller._task

        assert controller.start() is False
        assert controller._task is task
        assert scheduler.active_tasks == 1


class TestInput:
    """Tests for symbolic input handling."""

    def test_direction_symbols(self):
        controller, _ = make_controller()
        controller.start()

        assert controller.handle_input("up") is True
        assert controller.engine.session.direction == Direction.UP

    def test_direction_symbols_case_insensitive(self):
        controller, _ = make_controller()
        controller.start()

        assert controller.handle_input("DOWN") is True

    def test_one_change_per_tick(self):
        controller, scheduler = make_controller()
        controller.start()
        controller.engine.session.food = Cell(0, 0)

        controller.handle_input("up")
        controller.handle_input("left")
        scheduler.advance(100)

        assert controller.snapshot.head == Cell(6, 9)

    def test_restart_symbol(self):
        controller, scheduler = make_controller()

        assert controller.handle_input("restart") is True
        assert controller.is_scheduled is True

    def test_unknown_symbol_ignored(self):
        controller, _ = make_controller()
        controller.start()

        assert controller.handle_input("jump") is False

    def test_input_ignored_before_start(self):
        controller, _ = make_controller()

        assert controller.handle_input("up") is False


class TestListenerRestart:
    """Tests for restarting the controller from inside an engine notification."""

    def test_restart_on_full_board_keeps_timer(self):
        controller, scheduler = make_controller(grid_width=3, grid_height=1, initial_length=2, start_x=1, start_y=0)

        class Restarter(GameListener):
            def on_tick(self, snapshot):
                if snapshot.food is None:
                    controller.start()

        controller.engine.add_listener(Restarter())
        controller.start()

        scheduler.advance(100)

        assert controller.snapshot.running is True
        assert controller.snapshot.score == 0
        assert controller.is_scheduled is True
        assert scheduler.active_tasks == 1
