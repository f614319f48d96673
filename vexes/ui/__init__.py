"""Window-level building blocks.

- panel.py: Panel, a bordered and titled window over a grid region
- layouts.py: ratio parsing and the Layouts region partitioner
"""

from .layouts import (
    Layouts,
    RatioParseResult,
    calculate_h_boxes,
    calculate_v_boxes,
    default_region,
    parse_ratio,
    validate_ratio,
)
from .panel import Panel

__all__ = [
    "Layouts",
    "RatioParseResult",
    "calculate_h_boxes",
    "calculate_v_boxes",
    "default_region",
    "parse_ratio",
    "validate_ratio",
    "Panel",
]
