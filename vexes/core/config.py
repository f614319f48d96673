"""Theme configuration loader.

Loads display settings from a YAML file so glyph sets and defaults can be
changed without touching the renderables:
- grid_size: fallback (columns, lines) when no surface is available
- border_presets: named 8-character border glyph strings
- box_drawing: alternate-charset glyph -> printable box character
- frame_timeout_ms: input poll timeout for host render loops
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml

DEFAULT_THEME_PATH = Path(__file__).resolve().parent.parent / "assets" / "theme.yaml"

# Border glyph order: top, bottom, left, right, ul, ur, ll, lr
_FALLBACK_THEME: dict[str, Any] = {
    "grid_size": {"columns": 80, "lines": 24},
    "frame_timeout_ms": 16,
    "border_presets": {
        "line": "qqxxlkmj",
        "ascii": "--||++++",
        "block": "########",
        "double": "==||++++",
    },
    "box_drawing": {
        "q": "─",
        "x": "│",
        "l": "┌",
        "k": "┐",
        "m": "└",
        "j": "┘",
        "n": "┼",
        "t": "├",
        "u": "┤",
        "v": "┴",
        "w": "┬",
    },
}


class ThemeConfig:
    """Container for theme configuration data."""

    def __init__(self, config_data: dict[str, Any]):
        grid = config_data.get("grid_size", _FALLBACK_THEME["grid_size"])
        self.grid_size: tuple[int, int] = (int(grid["columns"]), int(grid["lines"]))
        self.frame_timeout_ms: int = int(
            config_data.get("frame_timeout_ms", _FALLBACK_THEME["frame_timeout_ms"])
        )
        self.border_presets: dict[str, str] = dict(
            config_data.get("border_presets", _FALLBACK_THEME["border_presets"])
        )
        self.box_drawing: dict[str, str] = dict(
            config_data.get("box_drawing", _FALLBACK_THEME["box_drawing"])
        )

    def get_border_preset(self, name: str) -> str:
        """Get the glyph string for a named border preset.

        Raises:
            KeyError: If no preset has that name
        """
        try:
            return self.border_presets[name]
        except KeyError:
            known = ", ".join(sorted(self.border_presets))
            raise KeyError(f"Unknown border preset {name!r} (known: {known})") from None


class ThemeLoader:
    """Loader for theme files with caching and fallbacks."""

    def __init__(self, theme_path: Optional[str] = None):
        self.theme_path = theme_path or self._find_default_theme_path()
        self._cached_config: Optional[ThemeConfig] = None

    def _find_default_theme_path(self) -> str:
        """Theme shipped inside the package (vexes/assets/theme.yaml)."""
        return str(DEFAULT_THEME_PATH)

    def load_config(self, force_reload: bool = False) -> ThemeConfig:
        """Load the theme, using the cache if available."""
        if self._cached_config is not None and not force_reload:
            return self._cached_config

        if os.path.exists(self.theme_path):
            try:
                with open(self.theme_path, "r", encoding="utf-8") as file:
                    config_data = yaml.safe_load(file) or {}
                self._cached_config = ThemeConfig(config_data)
            except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError):
                self._cached_config = self._create_fallback_config()
        else:
            self._cached_config = self._create_fallback_config()

        return self._cached_config

    def _create_fallback_config(self) -> ThemeConfig:
        return ThemeConfig(_FALLBACK_THEME)


_default_loader = ThemeLoader()


def get_theme_config(force_reload: bool = False) -> ThemeConfig:
    """Get the default theme configuration."""
    return _default_loader.load_config(force_reload)
