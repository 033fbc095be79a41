"""Screen-fit layout helpers for hexagon-bounded hex maps."""

from __future__ import annotations

from dataclasses import dataclass

from hex_map.boards.hex_math import Coordinate
from hex_map.config import BOUNDARY_X_STEP_SCALE


@dataclass(frozen=True)
class HexMapLayout:
    """Resolved world-to-pixel mapping for a generated map."""

    pixels_per_unit: float
    center_x_px: float
    center_y_px: float
    bottom_bar_height_px: int

    def as_tuple(self) -> tuple[float, float, float, int]:
        """Return constructor-friendly tuple ordering."""

        return (
            self.pixels_per_unit,
            self.center_x_px,
            self.center_y_px,
            self.bottom_bar_height_px,
        )


def map_width_units(cell_size: float, radius: float) -> float:
    """World-space width of the map including the outer half cells."""

    return 2 * max(0.0, radius) * BOUNDARY_X_STEP_SCALE * cell_size + cell_size


def map_height_units(cell_size: float, radius: float) -> float:
    """World-space height of the map including the outer half cells."""

    return 2 * max(0.0, radius) * cell_size + cell_size


def hex_corner_offsets(cell_size: float) -> list[tuple[float, float]]:
    """Corner offsets of a flat-top tile that meets its six neighbors edge to edge."""

    half = cell_size * 0.5
    quarter = cell_size * 0.25
    return [
        (half, 0.0),
        (quarter, half),
        (-quarter, half),
        (-half, 0.0),
        (-quarter, -half),
        (quarter, -half),
    ]


def world_to_pixel(coord: Coordinate, layout: HexMapLayout) -> tuple[float, float]:
    """Map a world coordinate to bottom-left-origin pixel coordinates."""

    x = layout.center_x_px + coord.x * layout.pixels_per_unit
    y = layout.center_y_px + coord.y * layout.pixels_per_unit
    return x, y


def hex_polygon_px(
    coord: Coordinate,
    cell_size: float,
    layout: HexMapLayout,
    scale: float = 1.0,
) -> list[tuple[float, float]]:
    """Pixel polygon of one tile, optionally shrunk toward its center."""

    x, y = world_to_pixel(coord, layout)
    ppu = layout.pixels_per_unit * scale
    return [(x + dx * ppu, y + dy * ppu) for dx, dy in hex_corner_offsets(cell_size)]


def compute_best_fit_map_layout(
    screen_width_px: int,
    screen_height_px: int,
    bottom_bar_height_px: int,
    cell_size: float,
    radius: float,
    margin_px: int = 0,
) -> HexMapLayout:
    """Scale and center the whole map inside the area above the bottom bar."""

    available_width = int(screen_width_px) - 2 * int(margin_px)
    available_height = int(screen_height_px) - int(bottom_bar_height_px) - 2 * int(margin_px)
    if available_width < 1 or available_height < 1:
        raise ValueError("screen dimensions must leave positive playable area")
    if cell_size <= 0:
        raise ValueError(f"cell size must be positive, got {cell_size}")

    pixels_per_unit = min(
        available_width / map_width_units(cell_size, radius),
        available_height / map_height_units(cell_size, radius),
    )
    center_x = int(screen_width_px) / 2
    center_y = int(bottom_bar_height_px) + (int(screen_height_px) - int(bottom_bar_height_px)) / 2

    return HexMapLayout(
        pixels_per_unit=pixels_per_unit,
        center_x_px=center_x,
        center_y_px=center_y,
        bottom_bar_height_px=int(bottom_bar_height_px),
    )


__all__ = [
    "HexMapLayout",
    "map_width_units",
    "map_height_units",
    "hex_corner_offsets",
    "world_to_pixel",
    "hex_polygon_px",
    "compute_best_fit_map_layout",
]
