"""
Tick engine for the snake.

The host calls on_key() for input, update() with a millisecond timestamp on
every animation frame and render() to get the text for the frame. update()
only advances the simulation once per TICK_RATE; calls in between are no-ops.
"""

import logging
import random
from enum import Enum
from typing import Optional

from .constants import (
    CHERRY_DRAW_LIMIT,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    GHOST_CAP,
    INITIAL_GHOST_LENGTH,
    INITIAL_TAIL_LENGTH,
    MAX_CHERRY_ATTEMPTS,
    TICK_RATE,
)
from .direction import Direction
from .events import KeyboardEvent
from .game_state import GameState
from .geometry import Vector2D
from .snake import Snake


class TickResult(str, Enum):
    CONTINUE = "continue"
    END = "end"


class Game:
    """
    Owns the snake, its ghost trail and the cherry for one play session.

    There is no reset: once update() returns END, build a new Game.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        logger: Optional[logging.Logger] = None,
        rng: Optional[random.Random] = None,
        tick_rate: float = TICK_RATE,
        tail_length: int = INITIAL_TAIL_LENGTH,
        ghost_length: int = INITIAL_GHOST_LENGTH,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}.")
        if tail_length < 0 or ghost_length < 0:
            raise ValueError("Initial tail and ghost lengths cannot be negative.")
        if ghost_length > GHOST_CAP:
            raise ValueError(f"Initial ghost trail cannot be longer than {GHOST_CAP}, got {ghost_length}.")
        if tail_length + 1 > height:
            raise ValueError(
                f"Board height {height} cannot fit a snake of length {tail_length + 1}."
            )
        if tail_length + 1 >= width * height:
            raise ValueError(f"Board {width}x{height} leaves no room for a cherry.")

        self.dimensions = Vector2D(width, height)
        self.logger = logger or logging.getLogger("snake.game")
        self.rng = rng or random.Random()
        self.tick_rate = tick_rate
        self.freshness = 0.0
        self.round_number = 0

        position = Vector2D(width // 2, height // 2)
        tail = [
            (position - Vector2D(0, 1 + i)).wrap(self.dimensions)
            for i in range(tail_length)
        ]
        ghost = [
            (position - Vector2D(0, 1 + tail_length + i)).wrap(self.dimensions)
            for i in range(ghost_length)
        ]
        self.snake = Snake(position, tail, ghost, Direction.DOWN)
        self.cherry: Optional[Vector2D] = self.create_cherry(self.snake)

        self.logger.debug(
            "Created %dx%d game: head=%s length=%d cherry=%s",
            width, height, position, len(self.snake), self.cherry,
        )

    @property
    def width(self) -> int:
        return self.dimensions.x

    @property
    def height(self) -> int:
        return self.dimensions.y

    @property
    def game_over(self) -> bool:
        return not self.snake.alive

    def on_key(self, event: KeyboardEvent) -> None:
        direction = Direction.from_keyboard_event(event)
        if direction is not None:
            self.snake.direction = direction

    def update(self, timestamp: float) -> TickResult:
        """
        Advance one tick if at least tick_rate has passed since the last one.

        Returns END when the new head lands on the tail (or the board has no
        free cell left for a cherry); the game then stays over.
        """
        if not self.snake.alive:
            return TickResult.END

        if timestamp - self.freshness < self.tick_rate:
            return TickResult.CONTINUE

        snake = self.snake

        if snake.position != self.cherry:
            if snake.tail:
                snake.ghost.appendleft(snake.tail.pop())
        else:
            snake.tail.extend(snake.ghost)
            snake.ghost.clear()
            next_head = (snake.position + snake.direction.velocity()).wrap(self.dimensions)
            self.cherry = self.create_cherry(snake, avoid=next_head)
            self.logger.debug("Cherry eaten at %s, length now %d", snake.position, len(snake))

        if len(snake.ghost) > GHOST_CAP:
            snake.ghost.pop()

        snake.tail.appendleft(snake.position)
        snake.position = (snake.position + snake.direction.velocity()).wrap(self.dimensions)
        self.freshness = timestamp
        self.round_number += 1

        if snake.position in snake.tail:
            return self._end("self")

        if self.cherry is None:
            self.cherry = self.create_cherry(snake)
            if self.cherry is None:
                return self._end("board_full")

        self.logger.debug("Tick %d: head=%s", self.round_number, snake.position)
        return TickResult.CONTINUE

    def render(self, timestamp: Optional[float] = None) -> str:
        return self.get_current_state().print_board()

    async def install_deps(self) -> None:
        """Lifecycle hook for the host; the game has nothing to install."""
        return None

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            round_number=self.round_number,
            position=self.snake.position,
            tail=list(self.snake.tail),
            ghost=list(self.snake.ghost),
            cherry=self.cherry,
            width=self.width,
            height=self.height,
            direction=self.snake.direction,
            alive=self.snake.alive,
        )

    def create_cherry(self, snake: Snake, avoid: Optional[Vector2D] = None) -> Optional[Vector2D]:
        """
        Pick a cell for the cherry that is not on the snake.

        Draws random cells first; once MAX_CHERRY_ATTEMPTS draws have all
        been rejected, picks uniformly from the remaining free cells. `avoid`
        is treated as occupied too (the cell the head enters this tick).
        Returns None if no cell is left.
        """
        occupied = set(snake.tail)
        occupied.add(snake.position)
        if avoid is not None:
            occupied.add(avoid)

        for _ in range(MAX_CHERRY_ATTEMPTS):
            candidate = Vector2D(
                self.rng.randrange(CHERRY_DRAW_LIMIT),
                self.rng.randrange(CHERRY_DRAW_LIMIT),
            ) % self.dimensions
            if candidate not in occupied:
                return candidate

        free_cells = [
            Vector2D(x, y)
            for y in range(self.height)
            for x in range(self.width)
            if Vector2D(x, y) not in occupied
        ]
        if not free_cells:
            self.logger.warning("No free cell left for a cherry")
            return None
        return self.rng.choice(free_cells)

    def _end(self, reason: str) -> TickResult:
        self.snake.alive = False
        self.snake.death_reason = reason
        self.snake.death_round = self.round_number
        self.logger.info(
            "Game over (%s) on tick %d at %s, length %d",
            reason, self.round_number, self.snake.position, len(self.snake),
        )
        return TickResult.END
