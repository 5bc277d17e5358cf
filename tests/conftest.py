from typing import List, Optional

import pytest

from flappy_dragon.constants import BLACK
from flappy_dragon.game_state import GameState
from flappy_dragon.physics_core import PhysicsCore


class FakeContext:
    """Records draw calls and serves a scripted key and frame time."""

    def __init__(self, key=None, elapsed_ms: float = 0.0):
        self.key = key
        self.elapsed_ms = elapsed_ms
        self.quit_requested = False
        self.glyphs: List[tuple] = []
        self.scales: List[float] = []
        self.texts: List[tuple] = []
        self.centered: List[tuple] = []
        self.clears: List[tuple] = []

    def poll_key(self):
        return self.key

    def draw_glyph(self, x, y, fg, bg, glyph, scale=1.0):
        self.glyphs.append((x, y, fg, bg, glyph))
        self.scales.append(scale)

    def clear_screen(self, bg=BLACK):
        self.clears.append(bg)

    def print_text(self, x, y, text):
        self.texts.append((x, y, text))

    def print_centered(self, row, text):
        self.centered.append((row, text))

    def elapsed_time_ms(self) -> float:
        return self.elapsed_ms

    def request_quit(self):
        self.quit_requested = True


class FixedRng:
    """Always returns the same gap center and remembers what it was asked for."""

    def __init__(self, value: int = 25):
        self.value = value
        self.calls: List[tuple] = []

    def __call__(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


@pytest.fixture
def rng():
    return FixedRng()


@pytest.fixture
def core(rng):
    return PhysicsCore(rng=rng)


@pytest.fixture
def state(core):
    return GameState(core)


def make_ctx(key=None, elapsed_ms: float = 0.0) -> FakeContext:
    return FakeContext(key=key, elapsed_ms=elapsed_ms)


@pytest.fixture
def ctx_factory():
    return make_ctx
