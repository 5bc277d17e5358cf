"""
physics_core.py: Deterministic physics step, obstacle generation and collision logic.
"""

import logging
import random
from typing import Callable, Optional

from .constants import (
    SCREEN_HEIGHT, GAP_Y_MIN, GAP_Y_MAX, PLAYER_START_X, PLAYER_START_Y
)
from .data_models import Player, Obstacle, gap_size_for_score

logger = logging.getLogger(__name__)

# rng(low, high) -> int in [low, high)
RandomRange = Callable[[int, int], int]


class PhysicsCore:
    """
    Physics and obstacle rules for one game.
    The random source is injected so obstacle generation can be made deterministic.
    """

    SCREEN_HEIGHT = SCREEN_HEIGHT

    def __init__(self, rng: Optional[RandomRange] = None, seed: Optional[int] = None):
        if rng is None:
            rng = random.Random(seed).randrange
        self.rng = rng

    def new_player(self) -> Player:
        return Player(x=PLAYER_START_X, y=PLAYER_START_Y, velocity=0.0)

    def spawn_obstacle(self, x: int, score: int) -> Obstacle:
        """Creates an obstacle at world column x, sized for the given score."""
        obstacle = Obstacle(
            x=x,
            gap_y=self.rng(GAP_Y_MIN, GAP_Y_MAX),
            size=gap_size_for_score(score),
        )
        logger.debug(f"Spawned obstacle at x={obstacle.x} gap_y={obstacle.gap_y} size={obstacle.size}")
        return obstacle

    def out_of_bounds(self, player: Player) -> bool:
        return int(player.y) > self.SCREEN_HEIGHT

    def check_collision(self, player: Player, obstacle: Obstacle) -> bool:
        """Checks for falling off the bottom of the screen or hitting the obstacle."""
        return self.out_of_bounds(player) or obstacle.hits(player)
