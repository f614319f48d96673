"""Ratio-driven region partitioning.

A ratio string such as "1:1:2" splits a region into adjacent boxes whose
extents along one axis follow the weights. Boxes are separated by a
one-cell seam, so a panel border drawn on each box does not overlap its
neighbour.

Ratio grammar:
- at least one colon
- no colon at either end
- no two colons in a row
- every token is a base-10 integer, optionally signed
- no token is zero, and no token is negative

Partition walk (horizontal; vertical swaps the axes):
- each box gets int(weight / total * full_width) columns
- if a box would reach full_width it is clamped to what is left, so all
  truncation slack lands on the final box(es)
- the next box starts one cell after the previous one ends

The clamp compares against the region's width, not its right edge. For a
region that does not start at column 0 that makes later boxes narrower than
their share.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..core import errors
from ..core.config import get_theme_config
from ..core.errors import InvalidRatioError
from ..core.geometry import Rect
from ..core.surface import TerminalSurface

_TOKEN_PATTERN = re.compile(r"[+-]?[0-9]+")

GridSize = tuple[int, int]


@dataclass
class RatioParseResult:
    """Result of parsing a ratio string."""

    is_valid: bool
    weights: list[int] = field(default_factory=list)
    reason: str = ""

    @classmethod
    def valid(cls, weights: list[int]) -> "RatioParseResult":
        return cls(is_valid=True, weights=weights)

    @classmethod
    def invalid(cls, reason: str) -> "RatioParseResult":
        return cls(is_valid=False, reason=reason)


def parse_ratio(ratio: str) -> RatioParseResult:
    """Validate and split a ratio string without raising.

    Checks run in a fixed order and the first failure is reported, so a
    given bad string always yields the same reason.
    """
    if ":" not in ratio:
        return RatioParseResult.invalid(errors.MISSING_COLON)

    if ratio[0] == ":" or ratio[-1] == ":":
        return RatioParseResult.invalid(errors.EDGE_COLON)

    if "::" in ratio:
        return RatioParseResult.invalid(errors.DOUBLE_COLON)

    weights = []
    for token in ratio.split(":"):
        if not _TOKEN_PATTERN.fullmatch(token):
            return RatioParseResult.invalid(errors.NON_INTEGER)
        weight = int(token)
        if weight == 0:
            return RatioParseResult.invalid(errors.ZERO_VALUE)
        if weight < 0:
            return RatioParseResult.invalid(errors.NEGATIVE_VALUE)
        weights.append(weight)

    return RatioParseResult.valid(weights)


def validate_ratio(ratio: str) -> list[int]:
    """Parse a ratio string, raising InvalidRatioError if it is malformed."""
    result = parse_ratio(ratio)
    if not result.is_valid:
        raise InvalidRatioError(result.reason, ratio)
    return result.weights


def default_region(grid_size: Optional[GridSize] = None,
                   surface: Optional[TerminalSurface] = None) -> Rect:
    """Whole grid minus the last column and line.

    The grid is, in order of preference: the explicit grid_size, the
    surface's live grid_size(), then the theme grid size.
    """
    if grid_size is None:
        grid_size = surface.grid_size() if surface is not None else get_theme_config().grid_size
    columns, lines = grid_size
    return Rect(0, 0, columns - 1, lines - 1)


def calculate_h_boxes(weights: list[int], dim: Optional[Rect] = None,
                      grid_size: Optional[GridSize] = None,
                      surface: Optional[TerminalSurface] = None) -> list[Rect]:
    """Split a region left to right by weight."""
    region = dim if dim is not None else default_region(grid_size, surface)
    base = sum(weights)
    full_width, full_height = region.w, region.h
    start_x, start_y = region.x, region.y

    boxes = []
    last_x = start_x - 1
    for weight in weights:
        rows = full_height
        columns = int(weight / base * full_width)

        # Clamp boxes that would run off the region
        if last_x + 1 + columns >= full_width:
            columns = full_width - (last_x + 1)

        boxes.append(Rect(last_x + 1, start_y, columns, rows))
        last_x += columns + 1

    return boxes


def calculate_v_boxes(weights: list[int], dim: Optional[Rect] = None,
                      grid_size: Optional[GridSize] = None,
                      surface: Optional[TerminalSurface] = None) -> list[Rect]:
    """Split a region top to bottom by weight."""
    region = dim if dim is not None else default_region(grid_size, surface)
    base = sum(weights)
    full_width = region.ur().x - region.ul().x
    full_height = region.lr().y - region.ur().y
    start_x, start_y = region.ul().x, region.ul().y

    boxes = []
    last_y = start_y - 1
    for weight in weights:
        rows = int(weight / base * full_height)
        columns = full_width

        if last_y + 1 + rows >= full_height:
            rows = full_height - (last_y + 1)

        boxes.append(Rect(start_x, last_y + 1, columns, rows))
        last_y += rows + 1

    return boxes


class Layouts:
    """Named and custom partitions of a region into panel bounds.

    Every method takes an optional bounding rect; without one the region is
    the whole grid (see default_region). Pass the surface being drawn on so
    that grid is the live terminal size rather than the theme default. Custom layouts raise
    InvalidRatioError before producing any box; the canned layouts use
    fixed valid ratios and never raise.
    """

    _debug_callback: Optional[Callable[[str], None]] = None

    @classmethod
    def set_debug_callback(cls, callback: Optional[Callable[[str], None]]) -> None:
        cls._debug_callback = callback

    @classmethod
    def _debug_log(cls, message: str) -> None:
        if cls._debug_callback:
            cls._debug_callback(f"[LAYOUT] {message}")

    @classmethod
    def custom_h_layout(cls, ratio: str, dim: Optional[Rect] = None,
                        grid_size: Optional[GridSize] = None,
                        surface: Optional[TerminalSurface] = None) -> list[Rect]:
        weights = validate_ratio(ratio)
        boxes = calculate_h_boxes(weights, dim, grid_size, surface)
        cls._debug_log(f"h {ratio!r} -> {boxes}")
        return boxes

    @classmethod
    def custom_v_layout(cls, ratio: str, dim: Optional[Rect] = None,
                        grid_size: Optional[GridSize] = None,
                        surface: Optional[TerminalSurface] = None) -> list[Rect]:
        weights = validate_ratio(ratio)
        boxes = calculate_v_boxes(weights, dim, grid_size, surface)
        cls._debug_log(f"v {ratio!r} -> {boxes}")
        return boxes

    @classmethod
    def h_split(cls, dim: Optional[Rect] = None, grid_size: Optional[GridSize] = None,
                surface: Optional[TerminalSurface] = None) -> list[Rect]:
        return cls.custom_h_layout("1:1", dim, grid_size, surface)

    @classmethod
    def h_two_thirds_left(cls, dim: Optional[Rect] = None, grid_size: Optional[GridSize] = None,
                          surface: Optional[TerminalSurface] = None) -> list[Rect]:
        return cls.custom_h_layout("2:1", dim, grid_size, surface)

    @classmethod
    def h_two_thirds_right(cls, dim: Optional[Rect] = None, grid_size: Optional[GridSize] = None,
                           surface: Optional[TerminalSurface] = None) -> list[Rect]:
        return cls.custom_h_layout("1:2", dim, grid_size, surface)

    @classmethod
    def h_thirds(cls, dim: Optional[Rect] = None, grid_size: Optional[GridSize] = None,
                 surface: Optional[TerminalSurface] = None) -> list[Rect]:
        return cls.custom_h_layout("1:1:1", dim, grid_size, surface)

    @classmethod
    def v_split(cls, dim: Optional[Rect] = None, grid_size: Optional[GridSize] = None,
                surface: Optional[TerminalSurface] = None) -> list[Rect]:
        return cls.custom_v_layout("1:1", dim, grid_size, surface)

    @classmethod
    def v_two_thirds_above(cls, dim: Optional[Rect] = None, grid_size: Optional[GridSize] = None,
                           surface: Optional[TerminalSurface] = None) -> list[Rect]:
        return cls.custom_v_layout("2:1", dim, grid_size, surface)

    @classmethod
    def v_two_thirds_below(cls, dim: Optional[Rect] = None, grid_size: Optional[GridSize] = None,
                           surface: Optional[TerminalSurface] = None) -> list[Rect]:
        return cls.custom_v_layout("1:2", dim, grid_size, surface)

    @classmethod
    def v_thirds(cls, dim: Optional[Rect] = None, grid_size: Optional[GridSize] = None,
                 surface: Optional[TerminalSurface] = None) -> list[Rect]:
        return cls.custom_v_layout("1:1:1", dim, grid_size, surface)
