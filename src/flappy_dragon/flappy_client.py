"""
flappy_client.py

A pygame window presented as a grid of character cells, plus the frame loop
that drives GameState.tick().
"""

import logging
from typing import Dict, Optional, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, TILE_SIZE, RENDER_FPS, WINDOW_TITLE,
    BLACK, WHITE
)
from .data_models import Key
from .game_state import GameState
from .render_context import Color, Coord

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[int, Key] = {
    pygame.K_SPACE: Key.FLAP,
    pygame.K_p: Key.PLAY,
    pygame.K_q: Key.QUIT,
    pygame.K_ESCAPE: Key.QUIT,
}


class PygameTerminal:
    """Implements RenderContext on top of a pygame display surface."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 tile_size: int = TILE_SIZE, fps: int = RENDER_FPS, title: str = WINDOW_TITLE):
        pygame.init()
        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.fps = fps
        self.screen = pygame.display.set_mode((width * tile_size, height * tile_size))
        pygame.display.set_caption(title)

        self.clock = pygame.time.Clock()
        self.quitting = False
        self.key: Optional[Key] = None
        self.frame_time_ms = 0.0

        self._fonts: Dict[int, pygame.font.Font] = {}
        self._glyph_cache: Dict[Tuple[str, Color, int], pygame.Surface] = {}

        logger.info(f"Opened {width}x{height} terminal with {tile_size}px tiles")

    # --- Frame lifecycle ---
    def begin_frame(self):
        """Advances the clock and collects this frame's input."""
        self.frame_time_ms = float(self.clock.tick(self.fps))
        self.key = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quitting = True
            elif event.type == pygame.KEYDOWN:
                # Only the latest key press of the frame is kept
                self.key = KEY_BINDINGS.get(event.key)

    def present(self):
        pygame.display.flip()

    def close(self):
        pygame.quit()

    # --- RenderContext ---
    def poll_key(self) -> Optional[Key]:
        return self.key

    def elapsed_time_ms(self) -> float:
        return self.frame_time_ms

    def request_quit(self):
        self.quitting = True

    def clear_screen(self, bg: Color = BLACK):
        self.screen.fill(bg)

    def draw_glyph(self, x: Coord, y: Coord, fg: Color, bg: Color, glyph: str, scale: float = 1.0):
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        size = max(1, int(self.tile_size * scale))
        px = int(x * self.tile_size)
        py = int(y * self.tile_size)
        # Scaled glyphs float over the grid without a cell background
        if scale == 1.0:
            pygame.draw.rect(self.screen, bg, (px, py, size, size))
        surface = self._render_glyph(glyph, fg, size)
        self.screen.blit(surface, (px + (size - surface.get_width()) // 2,
                                   py + (size - surface.get_height()) // 2))

    def print_text(self, x: int, y: int, text: str):
        for offset, char in enumerate(text):
            self.draw_glyph(x + offset, y, WHITE, BLACK, char)

    def print_centered(self, row: int, text: str):
        self.print_text((self.width - len(text)) // 2, row, text)

    # --- Internals ---
    def _render_glyph(self, glyph: str, fg: Color, size: int) -> pygame.Surface:
        cache_key = (glyph, fg, size)
        surface = self._glyph_cache.get(cache_key)
        if surface is None:
            font = self._fonts.get(size)
            if font is None:
                font = pygame.font.Font(None, size + size // 4)
                self._fonts[size] = font
            surface = font.render(glyph, True, fg)
            self._glyph_cache[cache_key] = surface
        return surface


def main_loop(terminal: PygameTerminal, state: GameState):
    """Ticks the game once per frame until quit is requested."""
    logger.info("Entering main loop")
    try:
        while not terminal.quitting:
            terminal.begin_frame()
            if terminal.quitting:
                break
            state.tick(terminal)
            terminal.present()
    finally:
        terminal.close()
        logger.info("Main loop stopped")
