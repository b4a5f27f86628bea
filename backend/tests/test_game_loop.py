"""
Tests for the host lifecycle: input services, text surfaces and the game loop.
"""

import io
import logging
import os
import random
import sys
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Settings
from domain import Direction, Game, KeyboardEvent, TickResult, TICK_RATE, Vector2D
from players import ScriptedPlayer
from services.game_loop import (
    GameLoop,
    GameLoopError,
    SimulatedClock,
    SnakeGameLoop,
    run_game_loop,
)
from services.input_service import (
    CursesInputService,
    PlayerInputService,
    QueuedInputService,
)
from services.text_surface import CLEAR_SCREEN, BufferSurface, StdoutSurface


def make_loop(events=()):
    game = Game(rng=random.Random(3))
    game.cherry = Vector2D(0, 0)
    return SnakeGameLoop(game, QueuedInputService(events), BufferSurface())


class TestInputServices:
    """Tests for the input services."""

    def test_queued_input_is_fifo(self):
        """Events come out in the order they were pushed."""
        service = QueuedInputService([KeyboardEvent.press("a")])
        service.push(KeyboardEvent.release("a"))

        assert service.poll() == KeyboardEvent.press("a")
        assert service.poll() == KeyboardEvent.release("a")
        assert service.poll() is None

    def test_curses_input_maps_keys_to_presses(self):
        """getch codes become press events; -1 means nothing pending."""
        window = Mock()
        window.getch.side_effect = [ord("w"), -1]
        service = CursesInputService(window)

        window.nodelay.assert_called_once_with(True)
        assert service.poll() == KeyboardEvent.press("w")
        assert service.poll() is None

    def test_player_input_asks_once_per_tick(self):
        """The player is consulted again only after the game ticks."""
        game = Game(rng=random.Random(3))
        game.cherry = Vector2D(0, 0)
        player = Mock()
        player.get_move.return_value = "d"
        service = PlayerInputService(player, game)

        assert service.poll() == KeyboardEvent.press("d")
        assert service.poll() is None
        assert player.get_move.call_count == 1

        game.update(TICK_RATE)
        assert service.poll() == KeyboardEvent.press("d")
        assert player.get_move.call_count == 2

    def test_player_input_idle_tick(self):
        """A player returning None produces no event."""
        game = Game(rng=random.Random(3))
        service = PlayerInputService(ScriptedPlayer("."), game)
        assert service.poll() is None


class TestTextSurfaces:
    """Tests for the text surfaces."""

    def test_buffer_keeps_frames(self):
        """BufferSurface remembers frames, trimmed to keep."""
        surface = BufferSurface(keep=2)
        assert surface.data == ""
        for text in ["a", "b", "c"]:
            surface.set_data(text)
        assert surface.frames == ["b", "c"]
        assert surface.data == "c"

    def test_stdout_skips_repeated_frames(self):
        """StdoutSurface writes only when the frame changes."""
        stream = io.StringIO()
        surface = StdoutSurface(stream=stream)
        surface.set_data("one")
        surface.set_data("one")
        surface.set_data("two")
        assert stream.getvalue() == f"{CLEAR_SCREEN}one\n{CLEAR_SCREEN}two\n"

    def test_stdout_without_clear(self):
        """clear=False prints frames one after another."""
        stream = io.StringIO()
        StdoutSurface(stream=stream, clear=False).set_data("frame")
        assert stream.getvalue() == "frame\n"


class TestSnakeGameLoop:
    """Tests for SnakeGameLoop frames."""

    def test_frame_applies_input_then_ticks(self):
        """Queued keys steer the tick that runs in the same frame."""
        loop = make_loop([KeyboardEvent.press("d")])

        loop.on_animation_frame(TICK_RATE)

        assert loop.game.snake.direction is Direction.RIGHT
        assert loop.game.snake.position == Vector2D(26, 25)
        assert loop.surface.data.startswith("pos: (26, 25)")
        assert loop.result == TickResult.CONTINUE
        assert loop.frames == 1
        assert loop.finished is False

    def test_frame_drains_all_pending_events(self):
        """Every queued event is handled; the last press wins."""
        loop = make_loop([KeyboardEvent.press("a"), KeyboardEvent.press("d")])
        loop.on_animation_frame(1.0)
        assert loop.input_service.poll() is None
        assert loop.game.snake.direction is Direction.RIGHT

    def test_events_are_logged(self, caplog):
        """Each polled event is logged at debug level."""
        loop = make_loop([KeyboardEvent.press("a")])
        with caplog.at_level(logging.DEBUG, logger="snake"):
            loop.on_animation_frame(1.0)
        assert "event" in caplog.text

    def test_frames_between_ticks_still_render(self):
        """Frames that do not tick still push a frame to the surface."""
        loop = make_loop()
        loop.on_animation_frame(10.0)
        loop.on_animation_frame(20.0)
        assert len(loop.surface.frames) == 2
        assert loop.game.round_number == 0

    def test_collision_finishes_loop(self):
        """An END result marks the loop finished."""
        loop = make_loop([KeyboardEvent.press("w")])
        loop.on_animation_frame(TICK_RATE)
        assert loop.result == TickResult.END
        assert loop.finished is True

    def test_create_from_settings(self):
        """create() builds a seeded game with the configured size."""
        settings = Settings(width=31, height=21, seed=4)
        loop = SnakeGameLoop.create(settings)
        again = SnakeGameLoop.create(settings)

        assert loop.game.width == 31
        assert loop.game.height == 21
        assert loop.game.cherry == again.game.cherry
        assert isinstance(loop.input_service, QueuedInputService)
        assert isinstance(loop.surface, BufferSurface)
        assert loop.game.logger.name == "snake.game"

    def test_create_with_input_factory(self):
        """input_factory receives the new game."""
        factory = Mock(return_value=QueuedInputService())
        loop = SnakeGameLoop.create(Settings(seed=1), input_factory=factory)
        factory.assert_called_once_with(loop.game)

    def test_create_rejects_tiny_board(self):
        """A board too small for the snake raises GameLoopError."""
        with pytest.raises(GameLoopError, match="Could not create game"):
            SnakeGameLoop.create(Settings(width=5, height=5))

    def test_on_init_error_formats_message(self):
        """on_init_error turns an exception into display text."""
        assert GameLoop.on_init_error(GameLoopError("no terminal")) == "no terminal"


class TestRunGameLoop:
    """Tests for start_game_loop / run_game_loop."""

    def test_simulated_clock_steps_one_frame(self):
        """Each read moves the clock forward by one frame."""
        clock = SimulatedClock(fps=50)
        assert clock() == 20.0
        assert clock() == 40.0

    def test_stops_at_max_frames(self):
        """A live game stops when the frame budget runs out."""
        loop = make_loop()
        frames = run_game_loop(loop, clock=SimulatedClock(), max_frames=30, pace=False)

        assert frames == 30
        assert loop.frames == 30
        assert loop.finished is False
        # 30 frames at 60 fps is about 7 ticks of 4 frames
        assert 6 <= loop.game.round_number <= 8

    def test_stops_when_game_ends(self):
        """Reversing into the neck ends the run on the first tick."""
        loop = make_loop([KeyboardEvent.press("w")])
        frames = run_game_loop(loop, clock=SimulatedClock(), max_frames=100, pace=False)

        assert loop.finished is True
        assert loop.game.round_number == 1
        assert frames < 10

    def test_install_is_awaited(self):
        """install() runs before the first frame."""
        loop = make_loop()
        calls = []

        async def install():
            calls.append("install")

        loop.install = install
        original = loop.on_animation_frame

        def frame(t):
            calls.append("frame")
            original(t)

        loop.on_animation_frame = frame
        run_game_loop(loop, clock=SimulatedClock(), max_frames=2, pace=False)

        assert calls == ["install", "frame", "frame"]

    def test_frame_errors_are_reported_and_raised(self):
        """An exception in a frame goes to on_error and stops the loop."""
        loop = make_loop()
        loop.game = MagicMock()
        loop.game.install_deps = AsyncMock()
        loop.game.update.side_effect = RuntimeError("boom")
        loop.on_error = Mock()

        with pytest.raises(RuntimeError, match="boom"):
            run_game_loop(loop, clock=SimulatedClock(), max_frames=5, pace=False)

        loop.on_error.assert_called_once()

    def test_on_error_logs(self, caplog):
        """The default on_error logs the failure."""
        loop = make_loop()
        with caplog.at_level(logging.ERROR):
            loop.on_error(RuntimeError("boom"))
        assert "Frame failed: boom" in caplog.text
