#!/usr/bin/env python3
"""Headless snake run driven by an autopilot player.

Frames are fed from a simulated 60 fps clock without sleeping, so a run is
fast and, with --seed, fully reproducible. The final frame and a JSON summary
are printed at the end.

Usage examples (from backend/):

    python cli/simulate.py --player random --seed 7
    python cli/simulate.py --player scripted --script "..d..w" --show-frames
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Dict, List, Optional

# Ensure backend modules are importable
BACKEND_ROOT = Path(__file__).resolve().parent.parent
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from config import configure_logging, load_settings, validate_settings  # noqa: E402
from players import get_player_class, list_variants  # noqa: E402
from players.scripted_player import ScriptedPlayer  # noqa: E402
from services.game_loop import (  # noqa: E402
    GameLoopError,
    SimulatedClock,
    SnakeGameLoop,
    run_game_loop,
)
from services.input_service import PlayerInputService  # noqa: E402
from services.text_surface import BufferSurface, StdoutSurface  # noqa: E402

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    players = ", ".join(v["key"] for v in list_variants())
    parser = argparse.ArgumentParser(
        description="Run a headless snake game with an autopilot player."
    )
    parser.add_argument("--player", type=str, default="random",
                        help=f"Autopilot to use ({players})")
    parser.add_argument("--script", type=str, default="",
                        help="Keys for the scripted player, one per tick ('.' = no key)")
    parser.add_argument("--width", type=int, default=None, help="Board width")
    parser.add_argument("--height", type=int, default=None, help="Board height")
    parser.add_argument("--seed", type=int, default=None, help="Seed for cherries and the random player")
    parser.add_argument("--max-frames", type=int, default=10_000,
                        help="Stop after this many frames if the snake is still alive")
    parser.add_argument("--show-frames", action="store_true",
                        help="Print every tick's frame, not just the last one")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")
    return parser


def summarize(loop: SnakeGameLoop, frames: int) -> Dict:
    game = loop.game
    return {
        "frames": frames,
        "ticks": game.round_number,
        "result": loop.result.value,
        "death_reason": game.snake.death_reason,
        "length": len(game.snake),
        "position": list(game.snake.position.as_tuple()),
        "cherry": list(game.cherry.as_tuple()) if game.cherry is not None else None,
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        if args.width is not None:
            settings.width = args.width
        if args.height is not None:
            settings.height = args.height
        if args.seed is not None:
            settings.seed = args.seed
        if args.log_level is not None:
            settings.log_level = args.log_level
        validate_settings(settings)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        player_cls = get_player_class(args.player)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    if player_cls is ScriptedPlayer:
        player = ScriptedPlayer(args.script)
    else:
        player = player_cls(rng=random.Random(settings.seed))

    surface = StdoutSurface(clear=False) if args.show_frames else BufferSurface(keep=1)

    try:
        loop = SnakeGameLoop.create(
            settings,
            surface=surface,
            input_factory=lambda game: PlayerInputService(player, game),
        )
    except GameLoopError as e:
        print(SnakeGameLoop.on_init_error(e), file=sys.stderr)
        return 2

    frames = run_game_loop(
        loop,
        clock=SimulatedClock(settings.fps),
        fps=settings.fps,
        max_frames=args.max_frames,
        pace=False,
    )

    if not args.show_frames:
        print(surface.data)
    print(json.dumps(summarize(loop, frames), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
