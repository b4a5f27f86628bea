#!/usr/bin/env python3
"""Play the snake in a terminal.

Steer with w/a/s/d. The board wraps at the edges and the game ends when the
snake runs into its own tail. Ctrl-C quits.

Logging goes to a file (--log-file, default snake.log) so it does not draw
over the board.

Usage (from backend/):

    python cli/play.py
    python cli/play.py --width 31 --height 21 --seed 3 --log-level DEBUG
"""

import argparse
import curses
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure backend modules are importable
BACKEND_ROOT = Path(__file__).resolve().parent.parent
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from config import Settings, configure_logging, load_settings, validate_settings  # noqa: E402
from services.game_loop import GameLoopError, SnakeGameLoop, run_game_loop  # noqa: E402
from services.input_service import CursesInputService  # noqa: E402
from services.text_surface import CursesSurface  # noqa: E402

logger = logging.getLogger(__name__)

# Header lines plus the top and bottom walls
FRAME_EXTRA_ROWS = 5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play the tick snake in a terminal.")
    parser.add_argument("--width", type=int, default=None, help="Board width")
    parser.add_argument("--height", type=int, default=None, help="Board height")
    parser.add_argument("--seed", type=int, default=None, help="Seed for cherry placement")
    parser.add_argument("--fps", type=int, default=None, help="Frames per second")
    parser.add_argument("--log-file", type=str, default="snake.log", help="Where to write logs")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")
    return parser


def check_terminal(window, settings: Settings) -> None:
    rows, cols = window.getmaxyx()
    need_rows = settings.height + FRAME_EXTRA_ROWS + 1
    need_cols = settings.width + 3
    if rows < need_rows or cols < need_cols:
        raise GameLoopError(
            f"Terminal is {cols}x{rows} but the board needs at least {need_cols}x{need_rows}"
        )


def play(window, settings: Settings) -> SnakeGameLoop:
    curses.curs_set(0)
    check_terminal(window, settings)

    loop = SnakeGameLoop.create(
        settings,
        surface=CursesSurface(window),
        input_factory=lambda game: CursesInputService(window),
    )
    run_game_loop(loop, fps=settings.fps)

    # Leave the last frame up until a key is pressed
    window.nodelay(False)
    window.getch()
    return loop


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        if args.width is not None:
            settings.width = args.width
        if args.height is not None:
            settings.height = args.height
        if args.fps is not None:
            settings.fps = args.fps
        if args.seed is not None:
            settings.seed = args.seed
        if args.log_level is not None:
            settings.log_level = args.log_level
        validate_settings(settings)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level, filename=args.log_file)

    try:
        loop = curses.wrapper(play, settings)
    except GameLoopError as e:
        print(SnakeGameLoop.on_init_error(e), file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("Goodbye!")
        return 0

    snake = loop.game.snake
    print(f"Game over after {loop.game.round_number} ticks, length {len(snake)}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
