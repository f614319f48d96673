"""Drawable primitives.

Every class here derives from Renderable and draws itself through an Engine:
- glyphs.py: Glyph (one cell) and Text (a character run)
- lines.py: Line with cached rasterization, HLine and VLine
- quads.py: CustomQuad fill and the reverse-video Quad
- borders.py: CustomBorder outlines and the line-drawing Border
"""

from .base import Renderable
from .borders import BORDER_GLYPH_COUNT, Border, CustomBorder
from .glyphs import Glyph, Text
from .lines import ACS_HLINE, ACS_VLINE, HLine, Line, VLine
from .quads import CustomQuad, Quad

__all__ = [
    "Renderable",
    "Glyph",
    "Text",
    "Line",
    "HLine",
    "VLine",
    "ACS_HLINE",
    "ACS_VLINE",
    "CustomQuad",
    "Quad",
    "CustomBorder",
    "Border",
    "BORDER_GLYPH_COUNT",
]
