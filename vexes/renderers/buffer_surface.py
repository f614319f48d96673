"""In-memory terminal surface.

Keeps the character grid and per-cell attribute masks in numpy arrays so a
frame can be rendered and inspected without a terminal. Windows write
straight through to the shared grid at their offset; refresh only counts
flushes. Writes that fall outside their window or the grid are dropped.
"""

from dataclasses import dataclass
from itertools import count
from typing import Optional

import numpy as np

from ..core.attributes import NORMAL, get_attribute
from ..core.config import get_theme_config
from ..core.geometry import Rect, Vec2
from ..core.surface import SurfaceConfig, TerminalSurface


@dataclass
class BufferWindow:
    """A window on the buffer grid."""
    handle: int
    rect: Rect
    attr: int = NORMAL
    refresh_count: int = 0


class BufferSurface(TerminalSurface):

    def __init__(self, config: Optional[SurfaceConfig] = None):
        super().__init__(config)
        self._columns = self.config.width
        self._lines = self.config.height
        self._chars = np.full((self._lines, self._columns), " ", dtype="<U1")
        self._attrs = np.zeros((self._lines, self._columns), dtype=np.int64)
        self._screen = BufferWindow(0, Rect(0, 0, self._columns, self._lines))
        self._windows: dict[int, BufferWindow] = {}
        self._handles = count(1)
        self._box_drawing = get_theme_config().box_drawing

    def _resolve(self, window: Optional[int]) -> BufferWindow:
        if window is None:
            return self._screen
        try:
            return self._windows[window]
        except KeyError:
            raise ValueError(f"Unknown or destroyed window handle: {window}") from None

    def grid_size(self) -> tuple[int, int]:
        return (self._columns, self._lines)

    def create_window(self, rect: Rect) -> int:
        handle = next(self._handles)
        self._windows[handle] = BufferWindow(handle, rect)
        return handle

    def destroy_window(self, window: int) -> None:
        self._resolve(window)
        del self._windows[window]

    def refresh(self, window: Optional[int] = None) -> None:
        self._resolve(window).refresh_count += 1

    def write_char(self, window: Optional[int], point: Vec2, ch: str) -> None:
        target = self._resolve(window)
        rect = target.rect
        if not (0 <= point.x < rect.w and 0 <= point.y < rect.h):
            return

        gx = rect.x + point.x
        gy = rect.y + point.y
        if not (0 <= gx < self._columns and 0 <= gy < self._lines):
            return

        self._chars[gy, gx] = ch
        self._attrs[gy, gx] = target.attr

    def set_attr(self, window: Optional[int], mask: int) -> None:
        target = self._resolve(window)
        target.attr |= mask

    def unset_attr(self, window: Optional[int], mask: int) -> None:
        target = self._resolve(window)
        target.attr &= ~mask

    # Inspection helpers

    @property
    def windows(self) -> list[BufferWindow]:
        return list(self._windows.values())

    def window_rect(self, window: int) -> Rect:
        return self._resolve(window).rect

    def current_attr(self, window: Optional[int] = None) -> int:
        return self._resolve(window).attr

    def refresh_count(self, window: Optional[int] = None) -> int:
        return self._resolve(window).refresh_count

    def char_at(self, point: Vec2) -> str:
        return str(self._chars[point.y, point.x])

    def attr_at(self, point: Vec2) -> int:
        return int(self._attrs[point.y, point.x])

    def clear(self) -> None:
        self._chars.fill(" ")
        self._attrs.fill(NORMAL)

    def snapshot(self, translate: bool = True) -> list[str]:
        """Return the grid as one string per line.

        Args:
            translate: Replace alternate-charset glyphs with their printable
                       box-drawing equivalents
        """
        if not translate:
            return ["".join(row) for row in self._chars]

        alternate = get_attribute("alternate")
        lines = []
        for row_chars, row_attrs in zip(self._chars, self._attrs):
            line = []
            for ch, attr in zip(row_chars, row_attrs):
                if int(attr) & alternate:
                    line.append(self._box_drawing.get(str(ch), str(ch)))
                else:
                    line.append(str(ch))
            lines.append("".join(line))
        return lines
