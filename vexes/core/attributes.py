"""Named terminal attributes and colours.

The registry maps human-readable names to the bit masks curses understands.
It is built once at import time and is read-only afterwards. Colour names
resolve to colour-pair masks for pairs 0-7; registering those pairs with the
terminal is the surface's job (see CursesSurface.init_color_pairs).
"""

import curses
from types import MappingProxyType
from typing import Iterable, Mapping

NORMAL = 0

# ncurses stores the colour pair number above the 8 character bits
_COLOR_PAIR_SHIFT = 8

COLOR_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

COLOR_PAIRS: Mapping[str, int] = MappingProxyType(
    {name: index for index, name in enumerate(COLOR_NAMES)}
)


def color_pair(index: int) -> int:
    """Attribute mask for a colour pair, equivalent to curses.color_pair()."""
    return index << _COLOR_PAIR_SHIFT


ATTRIBUTES: Mapping[str, int] = MappingProxyType({
    "standout": curses.A_STANDOUT,
    "underline": curses.A_UNDERLINE,
    "reverse": curses.A_REVERSE,
    "blink": curses.A_BLINK,
    "dim": curses.A_DIM,
    "bold": curses.A_BOLD,
    "protected": curses.A_PROTECT,
    "invisible": curses.A_INVIS,
    "alternate": curses.A_ALTCHARSET,
    "extract": curses.A_CHARTEXT,
    **{name: color_pair(index) for name, index in COLOR_PAIRS.items()},
})


def get_attribute(name: str) -> int:
    """Resolve an attribute name to its mask; unknown names give NORMAL."""
    return ATTRIBUTES.get(name, NORMAL)


def combine_attributes(codes: Iterable[int]) -> int:
    """OR an ordered collection of attribute masks into one mask."""
    attr = NORMAL
    for code in codes:
        attr |= code
    return attr


def attribute_names() -> list[str]:
    return list(ATTRIBUTES)
