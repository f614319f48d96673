"""Grid geometry primitives.

This module provides the value types used for every position and region on
the character grid:
- Vec2: a 2D point or offset (x before y, column before row)
- Rect: an axis-aligned rectangle with derived corners and center
- PointArray: a numpy-backed sequence of integer grid cells

Coordinates follow the terminal convention: x grows to the right, y grows
downward, and the origin (0, 0) is the upper-left cell.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Union
import math

import numpy as np
from numpy.typing import NDArray

Number = Union[int, float]


def _truncating_div(a: Number, b: Number) -> Number:
    if isinstance(a, int) and isinstance(b, int):
        return int(a / b)
    return a / b


@dataclass(frozen=True)
class Vec2:
    """2D vector for grid coordinates and extents.

    Uses (x, y) ordering: the first component is the column, the second is
    the row. Integer vectors stay integer under every operator, including
    division, which truncates toward zero.
    """
    x: Number
    y: Number

    def _pair(self, other: Union["Vec2", Number]) -> tuple[Number, Number]:
        if isinstance(other, Vec2):
            return other.x, other.y
        return other, other

    def __add__(self, other: Union["Vec2", Number]) -> "Vec2":
        ox, oy = self._pair(other)
        return Vec2(self.x + ox, self.y + oy)

    def __sub__(self, other: Union["Vec2", Number]) -> "Vec2":
        ox, oy = self._pair(other)
        return Vec2(self.x - ox, self.y - oy)

    def __mul__(self, other: Union["Vec2", Number]) -> "Vec2":
        ox, oy = self._pair(other)
        return Vec2(self.x * ox, self.y * oy)

    def __truediv__(self, other: Union["Vec2", Number]) -> "Vec2":
        """Component-wise division. Integer vectors truncate toward zero."""
        ox, oy = self._pair(other)
        return Vec2(_truncating_div(self.x, ox), _truncating_div(self.y, oy))

    def __floordiv__(self, other: Union["Vec2", Number]) -> "Vec2":
        ox, oy = self._pair(other)
        return Vec2(self.x // ox, self.y // oy)

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __getitem__(self, key: int) -> Number:
        """Enable indexed access like Vec2[0] for x, Vec2[1] for y."""
        if key == 0:
            return self.x
        elif key == 1:
            return self.y
        else:
            raise IndexError("Vec2 index out of range (must be 0 or 1)")

    def __repr__(self) -> str:
        return f"Vec2({self.x}, {self.y})"

    @property
    def is_integral(self) -> bool:
        return isinstance(self.x, int) and isinstance(self.y, int)

    def distance_to(self, other: "Vec2") -> float:
        """Calculate Euclidean distance to another vector."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def as_float(self) -> "Vec2":
        return Vec2(float(self.x), float(self.y))

    def truncated(self) -> "Vec2":
        """Drop the fractional part of each component (toward zero)."""
        return Vec2(int(self.x), int(self.y))

    @classmethod
    def from_tuple(cls, coords: tuple[Number, Number]) -> "Vec2":
        """Create Vec2 from an (x, y) tuple."""
        return cls(coords[0], coords[1])

    def to_tuple(self) -> tuple[Number, Number]:
        return (self.x, self.y)

    def to_numpy(self) -> NDArray[np.int32]:
        """Convert to an integer numpy array in (x, y) order."""
        return np.array([self.x, self.y], dtype=np.int32)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle: origin (x, y) plus extent (w, h).

    Corners are inclusive grid cells, so a rect of width ``w`` spans columns
    ``x`` through ``x + w``. Extents are expected to be non-negative; nothing
    enforces it here.
    """
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @classmethod
    def from_points(cls, origin: Vec2, dim: Vec2) -> "Rect":
        """Build a rect from an origin vector and a dimension vector."""
        return cls(origin.x, origin.y, dim.x, dim.y)

    def ul(self) -> Vec2:
        return Vec2(self.x, self.y)

    def ur(self) -> Vec2:
        return Vec2(self.x + self.w, self.y)

    def ll(self) -> Vec2:
        return Vec2(self.x, self.y + self.h)

    def lr(self) -> Vec2:
        return Vec2(self.x + self.w, self.y + self.h)

    def origin(self) -> Vec2:
        return Vec2(self.x, self.y)

    def dim(self) -> Vec2:
        return Vec2(self.w, self.h)

    def center(self) -> Vec2:
        """Center cell; odd extents round toward the upper-left."""
        return Vec2(self.x + self.w // 2, self.y + self.h // 2)

    @property
    def area(self) -> int:
        return max(self.w, 0) * max(self.h, 0)

    def contains(self, point: Vec2) -> bool:
        """Check whether a point lies in the half-open w x h extent."""
        return (self.x <= point.x < self.x + self.w and
                self.y <= point.y < self.y + self.h)

    def cells(self) -> "PointArray":
        """Every cell of the w x h extent, column by column."""
        if self.w <= 0 or self.h <= 0:
            return PointArray()
        xs, ys = np.mgrid[self.x:self.x + self.w, self.y:self.y + self.h]
        return PointArray(np.column_stack((xs.ravel(), ys.ravel())))


class PointArray:
    """Ordered collection of integer grid cells backed by a numpy array.

    Stores points as an (N, 2) array in (x, y) order. Used as the cached
    geometry of rasterized lines and as the cell list of filled quads.
    """

    def __init__(self, points: Optional[Union[list[Vec2], NDArray[np.int32]]] = None):
        """Initialize from a list of Vec2 or an (N, 2) numpy array.

        Args:
            points: List of Vec2 objects or numpy array of shape (N, 2).
                    If None, creates an empty PointArray.
        """
        if points is None:
            self._data = np.empty((0, 2), dtype=np.int32)
        elif isinstance(points, list):
            if not points:
                self._data = np.empty((0, 2), dtype=np.int32)
            else:
                self._data = np.array([[p.x, p.y] for p in points], dtype=np.int32)
        else:
            if points.ndim != 2 or points.shape[-1] != 2:
                raise ValueError("Numpy array must have shape (N, 2)")
            self._data = points.astype(np.int32)

    @property
    def data(self) -> NDArray[np.int32]:
        return self._data

    @property
    def x_coords(self) -> NDArray[np.int32]:
        return self._data[:, 0]

    @property
    def y_coords(self) -> NDArray[np.int32]:
        return self._data[:, 1]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Vec2:
        if index >= len(self._data) or index < -len(self._data):
            raise IndexError("PointArray index out of range")
        row = self._data[index]
        return Vec2(int(row[0]), int(row[1]))

    def __iter__(self) -> Iterator[Vec2]:
        for row in self._data:
            yield Vec2(int(row[0]), int(row[1]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointArray):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"PointArray({self.to_vector_list()!r})"

    def to_vector_list(self) -> list[Vec2]:
        return [Vec2(int(row[0]), int(row[1])) for row in self._data]

    def contains(self, point: Vec2) -> bool:
        target = np.array([point.x, point.y], dtype=np.int32)
        return bool(np.any(np.all(self._data == target, axis=1)))
