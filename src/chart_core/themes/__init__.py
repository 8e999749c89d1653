"""Theme definitions for charts."""

from chart_core.themes.dark import DARK_THEME
from chart_core.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
