"""Line rasterization.

Converts two integer grid points into the ordered sequence of cells that
approximates the straight segment between them.

Algorithm:
- n = distance(a, b) rounded to the nearest integer
- n == 0 yields the single cell a
- otherwise sample t = i / n for i in 0..n, interpolate x and y
  independently, and round each coordinate to the nearest cell

Both rounding steps round half away from zero (2.5 -> 3, -2.5 -> -3).
Python's built-in round() rounds half to even, so it is not used here.
The result always has n + 1 cells and always starts at a and ends at b.
Very shallow segments can repeat a cell; that is accepted.
"""

import math

import numpy as np
from numpy.typing import NDArray

from .geometry import PointArray, Vec2


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _round_half_away_array(values: NDArray[np.float64]) -> NDArray[np.int32]:
    return (np.sign(values) * np.floor(np.abs(values) + 0.5)).astype(np.int32)


def lerp(a: float, b: float, t: float) -> float:
    return a * (1 - t) + b * t


def vec_lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    """Interpolate each coordinate independently; returns a float Vec2."""
    return Vec2(float(lerp(a.x, b.x, t)), float(lerp(a.y, b.y, t)))


def vec_round(v: Vec2) -> Vec2:
    return Vec2(round_half_away(v.x), round_half_away(v.y))


def vec_distance(a: Vec2, b: Vec2) -> float:
    return a.distance_to(b)


def line_step_count(a: Vec2, b: Vec2) -> int:
    """Number of interpolation steps between a and b (cells minus one)."""
    return round_half_away(vec_distance(a, b))


def points_on_line(a: Vec2, b: Vec2) -> PointArray:
    """Rasterize the segment a-b into grid cells.

    Args:
        a: Start cell (always the first element)
        b: End cell (always the last element)

    Returns:
        PointArray of exactly line_step_count(a, b) + 1 cells
    """
    n = line_step_count(a, b)
    if n == 0:
        return PointArray([Vec2(int(a.x), int(a.y))])

    t = np.arange(n + 1, dtype=np.float64) / max(n, 1)
    xs = lerp(float(a.x), float(b.x), t)
    ys = lerp(float(a.y), float(b.y), t)
    cells = np.column_stack((_round_half_away_array(xs), _round_half_away_array(ys)))
    return PointArray(cells)
