from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from ..core.attributes import NORMAL
from ..core.geometry import Vec2
from ..core.surface import WindowHandle

if TYPE_CHECKING:
    from ..core.engine import Engine


def require_single_char(glyph: str) -> str:
    """Return glyph unchanged if it is exactly one character.

    Raises:
        ValueError: For empty or multi-character strings
    """
    if not isinstance(glyph, str) or len(glyph) != 1:
        raise ValueError(f"Glyphs must be exactly one character, got {glyph!r}")
    return glyph


class Renderable(ABC):
    """Base class for everything that can be drawn on the grid.

    A renderable has fixed geometry, a position and an attribute mask that
    may be changed between draws. Drawing only borrows the engine and the
    window; nothing is retained after draw returns.
    """

    def __init__(self, pos: Vec2):
        self.pos = pos
        self.attr = NORMAL

    @property
    def position(self) -> Vec2:
        return self.pos

    @property
    def attributes(self) -> int:
        return self.attr

    def set_position(self, pos: Vec2) -> None:
        self.pos = pos

    def set_attributes(self, attr: int) -> None:
        self.attr = attr

    @abstractmethod
    def draw(self, engine: "Engine", window: Optional[WindowHandle] = None) -> None:
        """Draw through the engine into window (None for the full grid)."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pos={self.pos!r}, attr={self.attr:#x})"
