"""Hex map board helpers."""

from .hex_generation import (
    HexMapGenerator,
    collect_rim_coords,
    expected_cell_count,
    generate_hex_map,
    normalize_map_config,
)
from .hex_index import VisitedIndex
from .hex_math import (
    ORIGIN,
    Coordinate,
    cell_key,
    compare_coords,
    coordinate_neighbors,
    is_inside_boundary,
    lattice_index,
    lattice_neighbors,
    lattice_position,
    neighbors_of,
    same_cell,
)
from .hex_specs import HEX_MAP_STANDARD, HEX_RENDER_STANDARD, HexMapSpec, HexRenderSpec

__all__ = [
    "HEX_MAP_STANDARD",
    "HEX_RENDER_STANDARD",
    "HexMapSpec",
    "HexRenderSpec",
    "Coordinate",
    "ORIGIN",
    "same_cell",
    "compare_coords",
    "cell_key",
    "is_inside_boundary",
    "lattice_position",
    "lattice_index",
    "lattice_neighbors",
    "neighbors_of",
    "coordinate_neighbors",
    "VisitedIndex",
    "normalize_map_config",
    "expected_cell_count",
    "generate_hex_map",
    "collect_rim_coords",
    "HexMapGenerator",
]
