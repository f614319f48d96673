import curses
from typing import Any, Optional

from ..core.attributes import COLOR_PAIRS
from ..core.geometry import Rect, Vec2
from ..core.surface import SurfaceConfig, TerminalSurface


class CursesSurface(TerminalSurface):
    """Terminal surface backed by a curses screen.

    The caller owns terminal setup and teardown (initscr/endwin, cbreak,
    echo, cursor visibility), typically through curses.wrapper, and hands
    the resulting screen to this adapter.
    """

    def __init__(self, stdscr: Any, config: Optional[SurfaceConfig] = None):
        super().__init__(config)
        self.stdscr = stdscr
        self._windows: list[Any] = []

    def _target(self, window: Optional[Any]) -> Any:
        return self.stdscr if window is None else window

    def init_color_pairs(self) -> None:
        """Register colour pairs 1-7 on the default background.

        Pair 0 is fixed by curses and stays as the terminal default.
        """
        curses.start_color()
        curses.use_default_colors()
        for name, index in COLOR_PAIRS.items():
            if index == 0:
                continue
            curses.init_pair(index, getattr(curses, f"COLOR_{name.upper()}"), -1)

    def grid_size(self) -> tuple[int, int]:
        lines, columns = self.stdscr.getmaxyx()
        return (columns, lines)

    def create_window(self, rect: Rect) -> Any:
        window = curses.newwin(rect.h, rect.w, rect.y, rect.x)
        self._windows.append(window)
        return window

    def destroy_window(self, window: Any) -> None:
        # curses frees the window once no references remain
        self._windows.remove(window)

    def refresh(self, window: Optional[Any] = None) -> None:
        self._target(window).refresh()

    def write_char(self, window: Optional[Any], point: Vec2, ch: str) -> None:
        target = self._target(window)
        max_y, max_x = target.getmaxyx()
        if not (0 <= point.x < max_x and 0 <= point.y < max_y):
            return

        if point.x == max_x - 1 and point.y == max_y - 1:
            # addch fails in the last cell because the cursor cannot advance
            target.insch(point.y, point.x, ch)
        else:
            target.addch(point.y, point.x, ch)

    def set_attr(self, window: Optional[Any], mask: int) -> None:
        self._target(window).attron(mask)

    def unset_attr(self, window: Optional[Any], mask: int) -> None:
        self._target(window).attroff(mask)
