"""vexes: shapes, panels and ratio layouts for character-grid terminals."""

from .core import (
    Engine,
    InvalidRatioError,
    Rect,
    SurfaceConfig,
    TerminalSurface,
    Vec2,
    combine_attributes,
    get_attribute,
)
from .renderables import (
    Border,
    CustomBorder,
    CustomQuad,
    Glyph,
    HLine,
    Line,
    Quad,
    Renderable,
    Text,
    VLine,
)
from .renderers import BufferSurface, CursesSurface
from .ui import Layouts, Panel, parse_ratio

__version__ = "0.1.0"

__all__ = [
    "Engine",
    "InvalidRatioError",
    "Rect",
    "SurfaceConfig",
    "TerminalSurface",
    "Vec2",
    "combine_attributes",
    "get_attribute",
    "Border",
    "CustomBorder",
    "CustomQuad",
    "Glyph",
    "HLine",
    "Line",
    "Quad",
    "Renderable",
    "Text",
    "VLine",
    "BufferSurface",
    "CursesSurface",
    "Layouts",
    "Panel",
    "parse_ratio",
]
