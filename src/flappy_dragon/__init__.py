"""
Flappy Dragon: a terminal-style side-scroller built on pygame.
"""

from .data_models import GameMode, Key, Player, Obstacle, gap_size_for_score
from .physics_core import PhysicsCore
from .game_state import GameState

__all__ = [
    "GameMode", "Key", "Player", "Obstacle", "gap_size_for_score",
    "PhysicsCore", "GameState",
]
