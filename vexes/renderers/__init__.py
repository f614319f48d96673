"""Terminal surface implementations.

- buffer_surface.py: numpy-backed in-memory grid for headless rendering
- curses_surface.py: adapter over a caller-managed curses screen
"""

from .buffer_surface import BufferSurface, BufferWindow
from .curses_surface import CursesSurface

__all__ = [
    "BufferSurface",
    "BufferWindow",
    "CursesSurface",
]
