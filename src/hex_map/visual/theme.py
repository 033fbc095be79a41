"""Palette and typography constants used by Hex Map."""

from typing import Final

COLOR_CHARCOAL: Final[tuple[int, int, int]] = (45, 45, 45)
COLOR_NEAR_BLACK: Final[tuple[int, int, int]] = (18, 18, 18)
COLOR_DEEP_TEAL: Final[tuple[int, int, int]] = (30, 100, 100)
COLOR_AQUA: Final[tuple[int, int, int]] = (50, 215, 200)
COLOR_AMBER: Final[tuple[int, int, int]] = (245, 180, 60)
COLOR_SOFT_WHITE: Final[tuple[int, int, int]] = (235, 235, 235)

FONT_NAME_BAR: Final[str] = "Arial"
STATUS_SEPARATOR_SLASH: Final[str] = "   /   "
