"""Straight line renderables.

A Line rasterizes its two endpoints into grid cells the first time it is
drawn and keeps that geometry for the rest of its life. Endpoints are fixed
at construction; moving the line's position afterwards does not invalidate
the cached cells.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.geometry import PointArray, Vec2
from ..core.surface import WindowHandle
from .base import Renderable, require_single_char
from .glyphs import Glyph

if TYPE_CHECKING:
    from ..core.engine import Engine

# Alternate charset glyphs; the terminal renders them as box-drawing lines
ACS_HLINE = "q"
ACS_VLINE = "x"


class Line(Renderable):
    """Arbitrary straight segment drawn with one fill character."""

    def __init__(self, glyph: str, a: Vec2, b: Vec2):
        super().__init__(a)
        self.glyph = require_single_char(glyph)
        self.a = a
        self.b = b
        self._points: Optional[PointArray] = None
        self._glyphs: list[Glyph] = []

    @property
    def is_constructed(self) -> bool:
        return self._points is not None

    @property
    def points(self) -> Optional[PointArray]:
        """Cached cells, or None until the first draw."""
        return self._points

    def construct_points(self, engine: "Engine") -> None:
        self._points = engine.get_points_on_line(self.a, self.b)
        self._glyphs = [Glyph(self.glyph, p) for p in self._points]

    def draw(self, engine: "Engine", window: Optional[WindowHandle] = None) -> None:
        if self._points is None:
            self.construct_points(engine)

        engine.set_attributes(self.attr, window)
        for glyph in self._glyphs:
            engine.draw(glyph, window)
        engine.unset_attributes(self.attr, window)


class HLine(Line):
    """Horizontal line; b is snapped onto a's row."""

    def __init__(self, a: Vec2, b: Vec2):
        super().__init__(ACS_HLINE, a, Vec2(b.x, a.y))

    def draw(self, engine: "Engine", window: Optional[WindowHandle] = None) -> None:
        alternate = engine.get_attribute("alternate")
        engine.set_attributes(alternate, window)
        super().draw(engine, window)
        engine.unset_attributes(alternate, window)


class VLine(Line):
    """Vertical line; b is snapped onto a's column."""

    def __init__(self, a: Vec2, b: Vec2):
        super().__init__(ACS_VLINE, a, Vec2(a.x, b.y))

    def draw(self, engine: "Engine", window: Optional[WindowHandle] = None) -> None:
        alternate = engine.get_attribute("alternate")
        engine.set_attributes(alternate, window)
        super().draw(engine, window)
        engine.unset_attributes(alternate, window)
