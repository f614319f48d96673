from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.geometry import Vec2
from ..core.surface import WindowHandle
from .base import Renderable, require_single_char

if TYPE_CHECKING:
    from ..core.engine import Engine


class Glyph(Renderable):
    """A single character at a single cell."""

    def __init__(self, glyph: str, pos: Vec2):
        super().__init__(pos)
        self.glyph = require_single_char(glyph)

    def draw(self, engine: "Engine", window: Optional[WindowHandle] = None) -> None:
        engine.set_attributes(self.attr, window)
        engine.draw_char_at_point(self.glyph, self.pos, window)
        engine.unset_attributes(self.attr, window)


class Text(Renderable):
    """A run of characters anchored at a cell.

    Horizontal text advances one column per character, vertical text one
    line per character. Centered text starts half its length (truncated)
    before the anchor along the active axis.
    """

    def __init__(self, text: str, pos: Vec2, centered: bool = False, vertical: bool = False):
        super().__init__(pos)
        self.text = text
        self.half_length = len(text) // 2
        self.centered = centered
        self.vertical = vertical

    def set_text(self, text: str) -> None:
        self.text = text
        self.half_length = len(text) // 2

    def set_centered(self, centered: bool) -> None:
        self.centered = centered

    def set_vertical(self, vertical: bool) -> None:
        self.vertical = vertical

    def origin(self) -> Vec2:
        """Cell the first character is written to."""
        if not self.centered:
            return self.pos
        if self.vertical:
            return Vec2(self.pos.x, self.pos.y - self.half_length)
        return Vec2(self.pos.x - self.half_length, self.pos.y)

    def draw(self, engine: "Engine", window: Optional[WindowHandle] = None) -> None:
        engine.set_attributes(self.attr, window)

        step = Vec2(0, 1) if self.vertical else Vec2(1, 0)
        cursor = self.origin()
        for ch in self.text:
            engine.draw_char_at_point(ch, cursor, window)
            cursor = cursor + step

        engine.unset_attributes(self.attr, window)
