"""Tunable constants for hex map generation and playback."""

from typing import Final

# Coordinates
COORD_DECIMALS: Final[int] = 2
COORD_EPSILON: Final[float] = 1e-4
# Rounding moves a center by up to half a unit per axis; the sloped edge adds 2/3 of that.
BOUNDARY_SLACK: Final[float] = 10**-COORD_DECIMALS

# Boundary shape
BOUNDARY_X_STEP_SCALE: Final[float] = 0.75
BOUNDARY_Y_SLOPE: Final[float] = 2 / 3

# Map defaults
MAP_SIZE: Final[int] = 5
CELL_SIZE: Final[float] = 0.56

# Playback
REVEAL_DELAY_SECONDS: Final[float] = 0.075

# Window
SCREEN_WIDTH: Final[int] = 800
SCREEN_HEIGHT: Final[int] = 800
BB_HEIGHT: Final[int] = 36
FPS: Final[int] = 60
WINDOW_TITLE: Final[str] = "Hex Map"
MAP_MARGIN_PX: Final[int] = 24
FONT_SIZE_BAR: Final[int] = 16
