"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum, auto

from .constants import (
    PLAYER_START_X, PLAYER_START_Y, GRAVITY_STEP, MAX_FALL_VELOCITY,
    FLAP_VELOCITY, FORWARD_STEP, BASE_GAP_SIZE, MIN_GAP_SIZE,
    SCREEN_HEIGHT, OBSTACLE_GLYPH, PLAYER_GLYPH, PLAYER_GLYPH_SCALE,
    RED, BLACK, YELLOW
)


class GameMode(Enum):
    """Top-level modes of a session."""
    MENU = auto()
    PLAYING = auto()
    END = auto()


class Key(Enum):
    """Inputs the game reacts to. Anything else is reported as None."""
    FLAP = auto()
    PLAY = auto()
    QUIT = auto()


@dataclass
class Player:
    """The player glyph: world position plus vertical velocity."""
    x: float = PLAYER_START_X
    y: float = PLAYER_START_Y
    velocity: float = 0.0

    def apply_gravity_and_advance(self):
        """One physics step: accelerate down (up to the cap), fall, scroll forward."""
        if self.velocity < MAX_FALL_VELOCITY:
            self.velocity = round(self.velocity + GRAVITY_STEP, 4)
        self.y = round(self.y + self.velocity, 4)
        self.x += FORWARD_STEP
        if self.y < 0:
            self.y = 0.0

    def apply_impulse(self):
        self.velocity = FLAP_VELOCITY

    def render(self, ctx):
        # The player always sits in the first screen column; the world scrolls past it.
        ctx.draw_glyph(0, self.y, YELLOW, BLACK, PLAYER_GLYPH, scale=PLAYER_GLYPH_SCALE)


def gap_size_for_score(score: int) -> int:
    """Gaps narrow by one per point scored, never below MIN_GAP_SIZE."""
    return max(MIN_GAP_SIZE, BASE_GAP_SIZE - score)


@dataclass
class Obstacle:
    """A vertical wall with a single gap, at a fixed world column."""
    x: int
    gap_y: int              # Center row of the gap
    size: int               # Gap size

    @property
    def half_size(self) -> int:
        return self.size // 2

    def hits(self, player: Player) -> bool:
        """
        True when the player is in this obstacle's column and outside the gap.
        Only the exact column is checked, once per tick.
        """
        does_x_match = int(player.x) == self.x
        player_above_gap = player.y < self.gap_y - self.half_size
        player_below_gap = player.y > self.gap_y + self.half_size
        return does_x_match and (player_above_gap or player_below_gap)

    def render(self, ctx, player_x: float):
        """Draws the wall above and below the gap, relative to the player's column."""
        screen_x = self.x - int(player_x)
        half_size = self.half_size

        for y in range(0, self.gap_y - half_size):
            ctx.draw_glyph(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)

        for y in range(self.gap_y + half_size, SCREEN_HEIGHT):
            ctx.draw_glyph(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)
