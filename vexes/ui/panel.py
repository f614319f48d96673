from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.geometry import Rect, Vec2
from ..core.surface import TerminalSurface, WindowHandle
from ..renderables.borders import Border
from ..renderables.glyphs import Text

if TYPE_CHECKING:
    from ..core.engine import Engine


class Panel:
    """Bordered, titled window bound to a region of the grid.

    Global bounds are relative to the full grid; local bounds are relative
    to the panel's own window and always start at (0, 0). The window is one
    cell wider and taller than the bounds so the border's far edges fit.
    """

    def __init__(self, surface: TerminalSurface, global_dim: Rect, title: str = ""):
        self.surface = surface
        self.global_dim = global_dim
        self.local_dim = Rect.from_points(Vec2(0, 0), global_dim.dim())

        self.title = Text(title, self._title_anchor(), centered=True)
        self.border = Border(self.local_dim)

        self.win: Optional[WindowHandle] = None
        self._setup_window()

    @property
    def global_bounds(self) -> Rect:
        return self.global_dim

    @property
    def local_bounds(self) -> Rect:
        return self.local_dim

    @property
    def window(self) -> Optional[WindowHandle]:
        return self.win

    def _title_anchor(self) -> Vec2:
        return Vec2(self.local_dim.w // 2, 0)

    def _setup_window(self) -> None:
        dim = self.global_dim
        self.win = self.surface.create_window(Rect(dim.x, dim.y, dim.w + 1, dim.h + 1))

    def _teardown_window(self) -> None:
        if self.win is not None:
            self.surface.destroy_window(self.win)
            self.win = None

    def _replace_window(self) -> None:
        self._teardown_window()
        self._setup_window()

    def draw(self, engine: "Engine") -> None:
        """Draw border then title, then flush the window."""
        engine.draw(self.border, self.win)
        engine.draw(self.title, self.win)
        self.surface.refresh(self.win)

    def resize(self, global_dim: Rect) -> None:
        """Move the panel to new bounds, keeping its title and glyphs."""
        self.global_dim = global_dim
        self.local_dim = Rect.from_points(Vec2(0, 0), global_dim.dim())

        self.title.set_position(self._title_anchor())
        self.border.set_dimensions(self.local_dim)

        self._replace_window()

    def set_title(self, title: str) -> None:
        self.title.set_text(title)

    def get_title(self) -> str:
        return self.title.text

    def close(self) -> None:
        """Destroy the panel's window. Calling it again does nothing."""
        self._teardown_window()

    def __enter__(self) -> "Panel":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Panel({self.global_dim!r}, title={self.title.text!r})"
