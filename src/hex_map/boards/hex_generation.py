"""Flood-fill generation of hexagon-bounded hex maps."""

from __future__ import annotations

import logging
import math
from typing import Callable, Iterable, Iterator

from hex_map.boards.hex_index import VisitedIndex
from hex_map.boards.hex_math import (
    ORIGIN,
    Coordinate,
    is_inside_boundary,
    lattice_index,
    lattice_neighbors,
    round_coord,
)
from hex_map.boards.hex_specs import HexMapSpec

logger = logging.getLogger(__name__)

DiscoveredFn = Callable[[Coordinate], None]

FULL_NEIGHBOR_DEGREE = 6


def normalize_map_config(cell_size, radius):
    """Validate and normalize cell size and map radius."""

    cell_size = float(cell_size)
    radius = float(radius)
    if not math.isfinite(cell_size) or cell_size <= 0:
        raise ValueError(f"cell size must be a positive number, got {cell_size}")
    if not math.isfinite(radius):
        raise ValueError(f"map radius must be finite, got {radius}")
    return cell_size, radius


def expected_cell_count(radius) -> int:
    """Number of cells in a hexagonal map of integral ``radius`` rings."""

    if radius < 0:
        return 0
    rings = int(radius)
    if rings != radius:
        raise ValueError(f"expected cell count needs an integral radius, got {radius}")
    return 1 + 3 * rings * (rings + 1)


def generate_hex_map(
    cell_size: float,
    radius: float,
    seed: Coordinate = ORIGIN,
    on_discovered: DiscoveredFn | None = None,
) -> Iterator[Coordinate]:
    """Lazily yield every in-boundary cell reachable from ``seed``.

    Configuration is checked before this returns.  Cells come out in depth-first
    order following :func:`neighbors_of` ordering, each exactly once.  A radius
    of zero yields only the origin; a negative radius or a seed outside the
    boundary yields nothing.
    """

    cell_size, radius = normalize_map_config(cell_size, radius)
    seed = round_coord(seed.x, seed.y)
    return _flood_fill(seed, cell_size, radius, on_discovered)


def _flood_fill(
    seed: Coordinate,
    cell_size: float,
    radius: float,
    on_discovered: DiscoveredFn | None,
) -> Iterator[Coordinate]:
    if not is_inside_boundary(seed.x, seed.y, cell_size, radius):
        logger.debug("seed %s outside map of radius %s; nothing to generate", seed, radius)
        return

    visited = VisitedIndex()
    try:
        yield _discover(seed, visited, on_discovered)

        # One pending-neighbor iterator per open cell keeps the recursive visit order.
        # Positions come from lattice indices anchored at the seed, never from a rounded parent.
        stack = [iter(lattice_neighbors(0, 0, cell_size, radius, seed))]
        while stack:
            for (q, s), neighbor in stack[-1]:
                if neighbor in visited:
                    continue
                yield _discover(neighbor, visited, on_discovered)
                stack.append(iter(lattice_neighbors(q, s, cell_size, radius, seed)))
                break
            else:
                stack.pop()

        logger.debug(
            "generated %d cells (cell_size=%s, radius=%s)", len(visited), cell_size, radius
        )
    finally:
        visited.clear()


def _discover(coord: Coordinate, visited: VisitedIndex, on_discovered: DiscoveredFn | None) -> Coordinate:
    visited.insert(coord)
    if on_discovered is not None:
        on_discovered(coord)
    return coord


def collect_rim_coords(
    coords: Iterable[Coordinate],
    cell_size: float,
    radius: float,
    seed: Coordinate = ORIGIN,
) -> list[Coordinate]:
    """Return cells that have fewer than six in-boundary neighbors.

    ``seed`` must be the seed the cells were generated from.
    """

    anchor = round_coord(seed.x, seed.y)
    rim = []
    for coord in coords:
        q, s = lattice_index(coord, cell_size, anchor)
        if len(lattice_neighbors(q, s, cell_size, radius, anchor)) < FULL_NEIGHBOR_DEGREE:
            rim.append(coord)
    return rim


class HexMapGenerator:
    """Generates the cells of one map configuration."""

    def __init__(self, spec: HexMapSpec):
        cell_size, radius = normalize_map_config(spec.cell_size, spec.radius)
        self.spec = HexMapSpec(cell_size=cell_size, radius=radius)

    @property
    def cell_size(self):
        return self.spec.cell_size

    @property
    def radius(self):
        return self.spec.radius

    def generate(self, seed: Coordinate = ORIGIN, on_discovered: DiscoveredFn | None = None) -> Iterator[Coordinate]:
        return generate_hex_map(self.cell_size, self.radius, seed, on_discovered)

    def collect(self, seed: Coordinate = ORIGIN) -> list[Coordinate]:
        return list(self.generate(seed))

    def cell_count(self) -> int:
        return expected_cell_count(self.radius)

    def rim(self, coords: Iterable[Coordinate], seed: Coordinate = ORIGIN) -> list[Coordinate]:
        return collect_rim_coords(coords, self.cell_size, self.radius, seed)


__all__ = [
    "DiscoveredFn",
    "normalize_map_config",
    "expected_cell_count",
    "generate_hex_map",
    "collect_rim_coords",
    "HexMapGenerator",
]
