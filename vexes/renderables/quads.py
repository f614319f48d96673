from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.geometry import Rect, Vec2
from ..core.surface import WindowHandle
from .base import Renderable, require_single_char

if TYPE_CHECKING:
    from ..core.engine import Engine


class CustomQuad(Renderable):
    """Rectangle filled with a caller-chosen character.

    Fills the w x h cells starting at the rect's origin. A zero-area rect
    draws nothing.
    """

    def __init__(self, glyph: str, dim: Rect):
        super().__init__(dim.origin())
        self.glyph = require_single_char(glyph)
        self.dim = dim

    def center(self) -> Vec2:
        return self.dim.center()

    def draw(self, engine: "Engine", window: Optional[WindowHandle] = None) -> None:
        engine.set_attributes(self.attr, window)
        for cell in self.dim.cells():
            engine.draw_char_at_point(self.glyph, cell, window)
        engine.unset_attributes(self.attr, window)


class Quad(CustomQuad):
    """Solid block: spaces drawn in reverse video."""

    def __init__(self, dim: Rect):
        super().__init__(" ", dim)

    def draw(self, engine: "Engine", window: Optional[WindowHandle] = None) -> None:
        reverse = engine.get_attribute("reverse")
        engine.set_attributes(reverse, window)
        super().draw(engine, window)
        engine.unset_attributes(reverse, window)
