"""
Entry point: python -m flappy_dragon
"""

import argparse
import logging
import sys

import pygame

from .constants import RENDER_FPS, TILE_SIZE
from .flappy_client import PygameTerminal, main_loop
from .game_state import GameState
from .physics_core import PhysicsCore


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy-dragon", description="Flappy Dragon")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle generation")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="render frame rate cap")
    parser.add_argument("--tile-size", type=int, default=TILE_SIZE, help="pixels per grid cell")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    try:
        terminal = PygameTerminal(tile_size=args.tile_size, fps=args.fps)
    except pygame.error as e:
        logger.error(f"Could not open game window: {e}")
        return 1

    state = GameState(PhysicsCore(seed=args.seed))
    main_loop(terminal, state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
