"""Hex map presets and rendering tuning."""

from dataclasses import dataclass
from typing import Final

from hex_map.config import CELL_SIZE, MAP_MARGIN_PX, MAP_SIZE, REVEAL_DELAY_SECONDS


@dataclass(frozen=True)
class HexMapSpec:
    """Configuration for a hexagon-bounded map of hexagonal cells."""

    cell_size: float
    radius: float


@dataclass(frozen=True)
class HexRenderSpec:
    """Rendering and pacing tuning for hex map playback."""

    reveal_delay_seconds: float
    map_margin_px: int
    tile_fill_scale: float
    min_line_width_px: int
    grid_line_width_px: int
    latest_line_width_extra_px: int
    rim_line_width_extra_px: int


HEX_MAP_STANDARD: Final[HexMapSpec] = HexMapSpec(
    cell_size=CELL_SIZE,
    radius=MAP_SIZE,
)

HEX_RENDER_STANDARD: Final[HexRenderSpec] = HexRenderSpec(
    reveal_delay_seconds=REVEAL_DELAY_SECONDS,
    map_margin_px=MAP_MARGIN_PX,
    tile_fill_scale=0.92,
    min_line_width_px=1,
    grid_line_width_px=2,
    latest_line_width_extra_px=1,
    rim_line_width_extra_px=1,
)

__all__ = [
    "HexMapSpec",
    "HexRenderSpec",
    "HEX_MAP_STANDARD",
    "HEX_RENDER_STANDARD",
]
