"""Rectangle outline renderables.

A border is four edge lines plus four corner glyphs. Glyphs are given as an
8-character sequence in this order:

    top, bottom, left, right, upper-left, upper-right, lower-left, lower-right

Corners sit on the rect's inclusive corner cells (x + w, y + h), so a border
around Rect(0, 0, w, h) covers w + 1 columns and h + 1 lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from ..core.config import get_theme_config
from ..core.geometry import Rect, Vec2
from ..core.surface import WindowHandle
from .base import Renderable, require_single_char
from .glyphs import Glyph
from .lines import Line

if TYPE_CHECKING:
    from ..core.engine import Engine

BORDER_GLYPH_COUNT = 8


class CustomBorder(Renderable):
    """Outline of a rect drawn with caller-supplied glyphs."""

    def __init__(self, glyphs: Sequence[str], dim: Rect):
        super().__init__(dim.origin())
        if len(glyphs) != BORDER_GLYPH_COUNT:
            raise ValueError(
                f"Borders need exactly {BORDER_GLYPH_COUNT} glyphs, got {len(glyphs)}"
            )
        self.glyphs: tuple[str, ...] = tuple(require_single_char(g) for g in glyphs)
        self.dim = dim
        self.lines: list[Line] = []
        self.corners: list[Glyph] = []
        self._construct_pieces()

    @classmethod
    def from_preset(cls, preset: str, dim: Rect) -> "CustomBorder":
        """Build a border from a named glyph set in the theme."""
        return cls(get_theme_config().get_border_preset(preset), dim)

    def _construct_pieces(self) -> None:
        top, bottom, left, right, ul, ur, ll, lr = self.glyphs
        dim = self.dim

        self.lines = [
            Line(top, dim.ul(), dim.ur()),
            Line(bottom, dim.ll(), dim.lr()),
            Line(left, dim.ul(), dim.ll()),
            Line(right, dim.ur(), dim.lr()),
        ]
        self.corners = [
            Glyph(ul, dim.ul()),
            Glyph(ur, dim.ur()),
            Glyph(ll, dim.ll()),
            Glyph(lr, dim.lr()),
        ]

    def center(self) -> Vec2:
        return self.dim.center()

    def set_dimensions(self, dim: Rect) -> None:
        """Move/resize the outline; glyphs and attributes are kept."""
        self.dim = dim
        self.pos = dim.origin()
        self._construct_pieces()

    def draw(self, engine: "Engine", window: Optional[WindowHandle] = None) -> None:
        engine.set_attributes(self.attr, window)
        for line in self.lines:
            engine.draw(line, window)
        for corner in self.corners:
            engine.draw(corner, window)
        engine.unset_attributes(self.attr, window)


class Border(CustomBorder):
    """Outline drawn with the terminal's line-drawing characters."""

    def __init__(self, dim: Rect):
        super().__init__(get_theme_config().get_border_preset("line"), dim)

    def draw(self, engine: "Engine", window: Optional[WindowHandle] = None) -> None:
        alternate = engine.get_attribute("alternate")
        engine.set_attributes(alternate, window)
        super().draw(engine, window)
        engine.unset_attributes(alternate, window)
