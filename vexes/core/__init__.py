"""Core rendering primitives.

This package contains the building blocks every renderable draws with:
- geometry.py: Vec2, Rect and PointArray grid types
- attributes.py: read-only attribute/colour registry and mask combinator
- rasterize.py: line rasterization and rounding helpers
- surface.py: TerminalSurface contract and SurfaceConfig
- engine.py: Engine drawing context
- config.py: YAML theme loader
- errors.py: InvalidRatioError and its messages
"""

from .attributes import (
    ATTRIBUTES,
    COLOR_NAMES,
    COLOR_PAIRS,
    NORMAL,
    attribute_names,
    color_pair,
    combine_attributes,
    get_attribute,
)
from .clock import Clock
from .config import ThemeConfig, ThemeLoader, get_theme_config
from .engine import Engine
from .errors import InvalidRatioError, VexesError
from .geometry import PointArray, Rect, Vec2
from .rasterize import lerp, points_on_line, round_half_away, vec_distance, vec_lerp, vec_round
from .surface import SurfaceConfig, TerminalSurface, WindowHandle

__all__ = [
    "ATTRIBUTES",
    "COLOR_NAMES",
    "COLOR_PAIRS",
    "NORMAL",
    "attribute_names",
    "color_pair",
    "combine_attributes",
    "get_attribute",
    "Clock",
    "ThemeConfig",
    "ThemeLoader",
    "get_theme_config",
    "Engine",
    "InvalidRatioError",
    "VexesError",
    "PointArray",
    "Rect",
    "Vec2",
    "lerp",
    "points_on_line",
    "round_half_away",
    "vec_distance",
    "vec_lerp",
    "vec_round",
    "SurfaceConfig",
    "TerminalSurface",
    "WindowHandle",
]
