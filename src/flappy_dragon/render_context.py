"""
render_context.py: The drawing and input surface the game state talks to.
"""

from typing import Optional, Protocol, Tuple, Union

from .constants import BLACK
from .data_models import Key

Color = Tuple[int, int, int]
Coord = Union[int, float]


class RenderContext(Protocol):
    """
    A character-cell display plus keyboard, driven once per frame.
    Implementations ignore writes outside the grid.
    """

    def poll_key(self) -> Optional[Key]:
        """The most recent recognised key pressed this frame, if any."""
        ...

    def draw_glyph(self, x: Coord, y: Coord, fg: Color, bg: Color, glyph: str, scale: float = 1.0) -> None:
        ...

    def clear_screen(self, bg: Color = BLACK) -> None:
        ...

    def print_text(self, x: int, y: int, text: str) -> None:
        ...

    def print_centered(self, row: int, text: str) -> None:
        ...

    def elapsed_time_ms(self) -> float:
        """Milliseconds since the previous frame."""
        ...

    def request_quit(self) -> None:
        ...
