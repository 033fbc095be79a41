"""Visual constants for Hex Map."""

from .theme import (
    COLOR_AMBER,
    COLOR_AQUA,
    COLOR_CHARCOAL,
    COLOR_DEEP_TEAL,
    COLOR_NEAR_BLACK,
    COLOR_SOFT_WHITE,
    FONT_NAME_BAR,
    STATUS_SEPARATOR_SLASH,
)

__all__ = [
    "COLOR_AMBER",
    "COLOR_AQUA",
    "COLOR_CHARCOAL",
    "COLOR_DEEP_TEAL",
    "COLOR_NEAR_BLACK",
    "COLOR_SOFT_WHITE",
    "FONT_NAME_BAR",
    "STATUS_SEPARATOR_SLASH",
]
