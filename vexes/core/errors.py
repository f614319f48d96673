"""Exceptions raised by vexes.

Only ratio parsing raises a domain error. Rendering and partitioning never
raise for well-formed input; degenerate input (zero-length lines, zero-area
rects, unknown attribute names) is resolved locally instead.
"""

from typing import Optional

MISSING_COLON = "Ratios must contain at least one colon."
EDGE_COLON = "Ratios cannot begin or end with a colon."
DOUBLE_COLON = "Ratios can only be delimited by single colons."
NON_INTEGER = "Ratios can only contain valid integers."
ZERO_VALUE = "Ratios cannot contain 0 as an integer."
NEGATIVE_VALUE = "Ratios can only contain positive integers."


class VexesError(Exception):
    """Base class for vexes errors."""


class InvalidRatioError(VexesError, ValueError):
    """A layout ratio string failed validation.

    Callers that hold the terminal in a non-default mode must restore it
    before letting this propagate out of the program.
    """

    def __init__(self, message: str, ratio: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.ratio = ratio

    def __str__(self) -> str:
        if self.ratio is None:
            return self.message
        return f"{self.message} (got {self.ratio!r})"
