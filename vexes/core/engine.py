"""Rendering context shared by every draw call.

The Engine wraps a TerminalSurface and gives renderables the small set of
primitives they draw with: attribute toggling, single-character writes and
line rasterization. It does not own terminal modes, input or a main loop;
the host application sets those up and calls draw between input polls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, Optional

from .attributes import combine_attributes, get_attribute
from .clock import Clock
from .geometry import PointArray, Vec2
from .rasterize import points_on_line
from .surface import TerminalSurface, WindowHandle

if TYPE_CHECKING:
    from ..renderables.base import Renderable
    from ..ui.panel import Panel


class Engine:
    """Drawing context passed to Renderable.draw and Panel.draw."""

    def __init__(self, surface: TerminalSurface, debug: bool = False):
        """Initialize the engine.

        Args:
            surface: Terminal surface all drawing goes through
            debug: Whether to report draw diagnostics to the debug callback
        """
        self.surface = surface
        self.debug = debug
        self.clock = Clock()
        self.elapsed_time = 0.0
        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set a callback function for debug logging."""
        self._debug_callback = callback

    def debug_log(self, message: str) -> None:
        if self.debug and self._debug_callback:
            self._debug_callback(f"[ENGINE] {message}")

    def tick(self) -> float:
        """Seconds since the previous tick; also stored as elapsed_time."""
        self.elapsed_time = self.clock.get_elapsed_time(reset=True)
        return self.elapsed_time

    # Utility methods

    def get_midpoint(self) -> Vec2:
        return self.surface.get_midpoint()

    def get_points_on_line(self, a: Vec2, b: Vec2) -> PointArray:
        points = points_on_line(a, b)
        self.debug_log(f"Rasterized {a} -> {b} into {len(points)} cells")
        return points

    # Drawing methods

    def draw(self, obj: "Renderable", window: Optional[WindowHandle] = None) -> None:
        obj.draw(self, window)

    def draw_panel(self, panel: "Panel") -> None:
        panel.draw(self)

    def get_attribute(self, name: str) -> int:
        return get_attribute(name)

    def combine_attributes(self, codes: Iterable[int]) -> int:
        return combine_attributes(codes)

    def set_attributes(self, attr: int, window: Optional[WindowHandle] = None) -> None:
        self.surface.set_attr(window, attr)

    def unset_attributes(self, attr: int, window: Optional[WindowHandle] = None) -> None:
        self.surface.unset_attr(window, attr)

    def draw_char_at_point(self, ch: str, point: Vec2, window: Optional[WindowHandle] = None) -> None:
        self.surface.write_char(window, point, ch)
