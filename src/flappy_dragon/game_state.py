"""
game_state.py: The session state machine (menu, playing, dead) driven once per frame.
"""

import logging
from typing import Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, WALL_GLYPH, RED, BLACK, NAVY
)
from .data_models import GameMode, Key
from .physics_core import PhysicsCore
from .render_context import RenderContext

logger = logging.getLogger(__name__)


class GameState:
    """
    Owns the player, the current obstacle and the score for one session.

    tick() is the only entry point for the run loop. Menu and End screens
    only read the session; everything is mutated from play() or restart().
    """

    def __init__(self, core: Optional[PhysicsCore] = None):
        self.core = core or PhysicsCore()
        self.mode = GameMode.MENU
        self.player = self.core.new_player()
        self.frame_time = 0.0
        self.obstacle = self.core.spawn_obstacle(SCREEN_WIDTH, 0)
        self.score = 0

    def tick(self, ctx: RenderContext):
        if self.mode == GameMode.MENU:
            self.main_menu(ctx)
        elif self.mode == GameMode.END:
            self.dead(ctx)
        elif self.mode == GameMode.PLAYING:
            self.play(ctx)

    def restart(self):
        """Starts a fresh session, identical to the one built at startup."""
        self.player = self.core.new_player()
        self.frame_time = 0.0
        self.obstacle = self.core.spawn_obstacle(SCREEN_WIDTH, 0)
        self.score = 0
        self._set_mode(GameMode.PLAYING)

    def play(self, ctx: RenderContext):
        ctx.clear_screen(NAVY)

        # Physics runs on a fixed cadence regardless of frame rate
        self.frame_time += ctx.elapsed_time_ms()
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.apply_gravity_and_advance()

        # Flap input is applied immediately
        if ctx.poll_key() is Key.FLAP:
            self.player.apply_impulse()

        self._render_walls(ctx)
        ctx.print_text(0, 0, "Press SPACE to flap.")
        ctx.print_text(0, 1, f"Score: {self.score}")
        self.obstacle.render(ctx, self.player.x)
        self.player.render(ctx)

        if int(self.player.x) > self.obstacle.x:
            self.score += 1
            self.obstacle = self.core.spawn_obstacle(int(self.player.x) + SCREEN_WIDTH, self.score)

        if self.core.check_collision(self.player, self.obstacle):
            logger.info(f"Player died at x={self.player.x:.0f} y={self.player.y:.2f} with score {self.score}")
            self._set_mode(GameMode.END)

    def main_menu(self, ctx: RenderContext):
        ctx.clear_screen()
        ctx.print_centered(5, "Welcome to Flappy Dragon")
        ctx.print_centered(8, "(P) Play Game")
        ctx.print_centered(9, "(Q) Quit Game")
        self._handle_menu_key(ctx)

    def dead(self, ctx: RenderContext):
        ctx.clear_screen()
        ctx.print_centered(5, "You are dead!")
        ctx.print_centered(6, f"You earned {self.score} points")
        ctx.print_centered(8, "(P) Play Again")
        ctx.print_centered(9, "(Q) Quit Game")
        self._handle_menu_key(ctx)

    def _handle_menu_key(self, ctx: RenderContext):
        key = ctx.poll_key()
        if key is Key.PLAY:
            self.restart()
        elif key is Key.QUIT:
            logger.info("Quit requested")
            ctx.request_quit()

    def _render_walls(self, ctx: RenderContext):
        for x in range(SCREEN_WIDTH):
            ctx.draw_glyph(x, SCREEN_HEIGHT - 1, RED, BLACK, WALL_GLYPH)
        for x in range(SCREEN_WIDTH):
            ctx.draw_glyph(x, 0, RED, BLACK, WALL_GLYPH)

    def _set_mode(self, mode: GameMode):
        logger.info(f"Mode: {self.mode.name} -> {mode.name}")
        self.mode = mode
