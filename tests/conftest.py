"""
Basic test fixtures for the vexes test suite.

Provides a headless BufferSurface and an Engine bound to it so renderables,
panels and layouts can be drawn and inspected without a terminal.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from vexes.core.engine import Engine
from vexes.core.geometry import Rect, Vec2
from vexes.core.surface import SurfaceConfig
from vexes.renderers.buffer_surface import BufferSurface


@pytest.fixture
def surface():
    """Create a 40x20 in-memory surface."""
    return BufferSurface(SurfaceConfig(width=40, height=20))


@pytest.fixture
def engine(surface):
    """Create an engine drawing into the buffer surface."""
    return Engine(surface)


@pytest.fixture
def debug_messages():
    """Collect debug callback output."""
    return []


@pytest.fixture
def debug_engine(surface, debug_messages):
    """Create an engine with debug logging routed into a list."""
    engine = Engine(surface, debug=True)
    engine.set_debug_callback(debug_messages.append)
    return engine


@pytest.fixture
def sample_rect():
    return Rect(2, 3, 10, 5)


@pytest.fixture
def sample_points():
    """Point pairs covering axis-aligned, diagonal, steep and negative lines."""
    return [
        (Vec2(0, 0), Vec2(0, 0)),
        (Vec2(0, 0), Vec2(4, 0)),
        (Vec2(0, 0), Vec2(0, 7)),
        (Vec2(0, 0), Vec2(3, 3)),
        (Vec2(1, 2), Vec2(9, 5)),
        (Vec2(-3, 2), Vec2(5, -4)),
        (Vec2(10, 10), Vec2(2, 1)),
        (Vec2(0, 0), Vec2(1, 20)),
    ]
