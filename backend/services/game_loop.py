"""
Host lifecycle for the snake: create, install, then one call per frame.

start_game_loop() plays the part of the browser's animation-frame scheduler:
it awaits install() once and then calls on_animation_frame() with a
millisecond timestamp until the game ends or the frame budget runs out.
"""

import asyncio
import logging
import random
import time
from typing import Callable, Optional

from config import Settings
from domain.constants import FRAME_RATE
from domain.game import Game, TickResult
from services.input_service import InputService, QueuedInputService
from services.text_surface import BufferSurface, TextSurface

logger = logging.getLogger(__name__)


class GameLoopError(Exception):
    """Raised when the host cannot set the game up."""


class GameLoop:
    """
    Base class/interface for a frame-driven game host.
    """

    finished = False

    @classmethod
    def create(cls, *args, **kwargs) -> "GameLoop":
        raise NotImplementedError

    async def install(self) -> None:
        return None

    def on_animation_frame(self, timestamp: float) -> None:
        raise NotImplementedError

    @staticmethod
    def on_init_error(error: BaseException) -> str:
        return f"{error}"

    def on_error(self, error: BaseException) -> None:
        logger.error("Frame failed: %s", self.on_init_error(error))


class SnakeGameLoop(GameLoop):
    """
    Wires a Game to an input service and a text surface.

    Attributes:
        result: the last TickResult from the game
        frames: number of frames handled so far
    """

    def __init__(
        self,
        game: Game,
        input_service: InputService,
        surface: TextSurface,
        logger: Optional[logging.Logger] = None,
    ):
        self.game = game
        self.input_service = input_service
        self.surface = surface
        self.logger = logger or logging.getLogger("snake")
        self.result = TickResult.CONTINUE
        self.frames = 0

    @classmethod
    def create(
        cls,
        settings: Settings,
        surface: Optional[TextSurface] = None,
        input_factory: Optional[Callable[[Game], InputService]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "SnakeGameLoop":
        """
        Build the game and its collaborators from settings.

        input_factory receives the new Game so autopilot inputs can watch it.

        Raises:
            GameLoopError: If the board cannot be set up
        """
        logger = logger or logging.getLogger("snake")
        rng = random.Random(settings.seed)

        try:
            game = Game(
                width=settings.width,
                height=settings.height,
                logger=logger.getChild("game"),
                rng=rng,
                tick_rate=settings.tick_ms,
            )
        except ValueError as e:
            raise GameLoopError(f"Could not create game: {e}") from e

        input_service = input_factory(game) if input_factory else QueuedInputService()
        return cls(game, input_service, surface or BufferSurface(), logger)

    @property
    def finished(self) -> bool:
        return self.result == TickResult.END

    async def install(self) -> None:
        await self.game.install_deps()

    def on_animation_frame(self, timestamp: float) -> None:
        while True:
            event = self.input_service.poll()
            if event is None:
                break
            self.logger.debug("event %s", event)
            self.game.on_key(event)

        self.result = self.game.update(timestamp)
        self.surface.set_data(self.game.render(timestamp))
        self.frames += 1


class SimulatedClock:
    """A clock that moves forward one frame each time it is read (ms)."""

    def __init__(self, fps: int = FRAME_RATE):
        self.step = 1000.0 / fps
        self.now = 0.0

    def __call__(self) -> float:
        self.now += self.step
        return self.now


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


async def start_game_loop(
    loop: GameLoop,
    clock: Callable[[], float] = monotonic_ms,
    fps: int = FRAME_RATE,
    max_frames: Optional[int] = None,
    pace: bool = True,
) -> int:
    """
    Drive loop until it finishes or max_frames frames have run.

    Timestamps are measured from the first frame. With pace=False frames run
    back to back, which together with a SimulatedClock gives a fast,
    reproducible headless run.

    Returns:
        The number of frames driven
    """
    await loop.install()

    frame_seconds = 1.0 / fps
    start = clock()
    frames = 0

    while not loop.finished:
        if max_frames is not None and frames >= max_frames:
            logger.info("Stopping after %d frames", frames)
            break

        try:
            loop.on_animation_frame(clock() - start)
        except Exception as e:
            loop.on_error(e)
            raise
        frames += 1

        if pace:
            await asyncio.sleep(frame_seconds)

    return frames


def run_game_loop(loop: GameLoop, **kwargs) -> int:
    """Synchronous wrapper around start_game_loop()."""
    return asyncio.run(start_game_loop(loop, **kwargs))
