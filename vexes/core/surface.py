from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from .geometry import Rect, Vec2

# Opaque window handle; None always means the full-grid surface
WindowHandle = Any


@dataclass
class SurfaceConfig:
    width: int = 80
    height: int = 24


class TerminalSurface(ABC):
    """Character-cell output device that renderables draw through.

    Implementations own the actual grid. vexes only ever writes to it; it
    never reads cells back during rendering.
    """

    def __init__(self, config: Optional[SurfaceConfig] = None):
        self.config = config or SurfaceConfig()

    @abstractmethod
    def grid_size(self) -> tuple[int, int]:
        """Return (columns, lines) of the whole grid."""
        pass

    @abstractmethod
    def create_window(self, rect: Rect) -> WindowHandle:
        """Create a window whose upper-left is (rect.x, rect.y) and whose
        size is rect.w columns by rect.h lines."""
        pass

    @abstractmethod
    def destroy_window(self, window: WindowHandle) -> None:
        pass

    @abstractmethod
    def refresh(self, window: Optional[WindowHandle] = None) -> None:
        pass

    @abstractmethod
    def write_char(self, window: Optional[WindowHandle], point: Vec2, ch: str) -> None:
        """Write one character at a window-local cell.

        Cells outside the window or the grid are dropped.
        """
        pass

    @abstractmethod
    def set_attr(self, window: Optional[WindowHandle], mask: int) -> None:
        pass

    @abstractmethod
    def unset_attr(self, window: Optional[WindowHandle], mask: int) -> None:
        pass

    def get_midpoint(self) -> Vec2:
        columns, lines = self.grid_size()
        return Vec2(columns // 2, lines // 2)
