"""Coordinate math for hexagon-bounded maps of flat-top hex cells.

Cells are addressed by their world-space center.  Columns sit ``0.75 * cell_size``
apart and alternate columns are shifted by half a cell vertically, so every cell
has six neighbors: one above, one below and four diagonals.

Every cell also has an integer lattice index ``(q, s)`` relative to an anchor
cell: ``q`` counts columns and ``s`` counts half-cell rows.  Walks step on the
lattice and derive each position from its index, so rounding to
``COORD_DECIMALS`` never accumulates.

Two coordinates name the same cell when both axes agree within
``COORD_EPSILON``.  Use :func:`same_cell` and :func:`compare_coords` for that;
``==`` on :class:`Coordinate` is exact.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from hex_map.config import (
    BOUNDARY_SLACK,
    BOUNDARY_X_STEP_SCALE,
    BOUNDARY_Y_SLOPE,
    COORD_DECIMALS,
    COORD_EPSILON,
)

LatticeIndex = tuple[int, int]


@dataclass(frozen=True, order=True)
class Coordinate:
    """Center of one hex cell in world units."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN: Final[Coordinate] = Coordinate(0.0, 0.0)

# Top, bottom, left-top, left-bottom, right-top, right-bottom.
NEIGHBOR_STEPS: Final[tuple[LatticeIndex, ...]] = (
    (0, 2),
    (0, -2),
    (-1, 1),
    (-1, -1),
    (1, 1),
    (1, -1),
)


def same_cell(a: Coordinate, b: Coordinate, epsilon: float = COORD_EPSILON) -> bool:
    """Return whether two coordinates name the same cell."""

    return abs(a.x - b.x) < epsilon and abs(a.y - b.y) < epsilon


def compare_coords(a: Coordinate, b: Coordinate, epsilon: float = COORD_EPSILON) -> int:
    """Three-way lexicographic comparison on (x, y) with tolerance.

    Returns 0 exactly when :func:`same_cell` holds; :class:`VisitedIndex` matches with it.
    """

    dx = a.x - b.x
    if abs(dx) >= epsilon:
        return -1 if dx < 0 else 1
    dy = a.y - b.y
    if abs(dy) >= epsilon:
        return -1 if dy < 0 else 1
    return 0


def round_coord(x: float, y: float, decimals: int = COORD_DECIMALS) -> Coordinate:
    return Coordinate(round(x, decimals), round(y, decimals))


def cell_key(coord: Coordinate, decimals: int = COORD_DECIMALS) -> tuple[int, int]:
    """Quantize a coordinate into a hashable integer pair."""

    scale = 10**decimals
    return (int(round(coord.x * scale)), int(round(coord.y * scale)))


def lattice_position(q: int, s: int, cell_size: float, anchor: Coordinate = ORIGIN) -> Coordinate:
    """Rounded center of the cell ``q`` columns and ``s`` half rows from ``anchor``."""

    return round_coord(
        anchor.x + q * BOUNDARY_X_STEP_SCALE * cell_size,
        anchor.y + s * 0.5 * cell_size,
    )


def lattice_index(coord: Coordinate, cell_size: float, anchor: Coordinate = ORIGIN) -> LatticeIndex:
    """Snap a cell center back to its lattice index relative to ``anchor``."""

    q = round((coord.x - anchor.x) / (BOUNDARY_X_STEP_SCALE * cell_size))
    s = round((coord.y - anchor.y) / (0.5 * cell_size))
    return (int(q), int(s))


def is_inside_boundary(x: float, y: float, cell_size: float, radius: float) -> bool:
    """Test whether (x, y) lies inside the map hexagon centered at the origin.

    The hexagon spans ``radius * 0.75 * cell_size`` horizontally and narrows by
    ``2/3`` of ``|x|`` vertically.  Points on the edge count as inside, within
    ``BOUNDARY_SLACK`` so that rounding to ``COORD_DECIMALS`` never pushes an
    edge cell out.
    """

    max_x = radius * (BOUNDARY_X_STEP_SCALE * cell_size)
    if x < 0:
        max_y = radius * cell_size + x * BOUNDARY_Y_SLOPE
    else:
        max_y = radius * cell_size - x * BOUNDARY_Y_SLOPE
    return abs(x) <= max_x + BOUNDARY_SLACK and abs(y) <= max_y + BOUNDARY_SLACK


def lattice_neighbors(
    q: int,
    s: int,
    cell_size: float,
    radius: float,
    anchor: Coordinate = ORIGIN,
) -> list[tuple[LatticeIndex, Coordinate]]:
    """Return ``(index, position)`` for each in-boundary neighbor of cell ``(q, s)``."""

    neighbors = []
    for dq, ds in NEIGHBOR_STEPS:
        index = (q + dq, s + ds)
        coord = lattice_position(index[0], index[1], cell_size, anchor)
        if is_inside_boundary(coord.x, coord.y, cell_size, radius):
            neighbors.append((index, coord))
    return neighbors


def neighbors_of(x: float, y: float, cell_size: float, radius: float) -> list[Coordinate]:
    """Return the in-boundary neighbors of (x, y) in traversal order.

    Order: top, bottom, left-top, left-bottom, right-top, right-bottom.  Each
    component is rounded to ``COORD_DECIMALS``.
    """

    return [coord for _, coord in lattice_neighbors(0, 0, cell_size, radius, Coordinate(x, y))]


def coordinate_neighbors(coord: Coordinate, cell_size: float, radius: float) -> list[Coordinate]:
    return neighbors_of(coord.x, coord.y, cell_size, radius)


__all__ = [
    "Coordinate",
    "LatticeIndex",
    "ORIGIN",
    "NEIGHBOR_STEPS",
    "same_cell",
    "compare_coords",
    "round_coord",
    "cell_key",
    "lattice_position",
    "lattice_index",
    "is_inside_boundary",
    "lattice_neighbors",
    "neighbors_of",
    "coordinate_neighbors",
]
