"""Quadrant-partitioned lookup of visited cell coordinates."""

from __future__ import annotations

import math
from bisect import bisect_left, insort

from hex_map.boards.hex_math import Coordinate, compare_coords
from hex_map.config import COORD_EPSILON

Quadrant = tuple[bool, bool]

QUADRANTS: tuple[Quadrant, ...] = (
    (False, False),
    (True, False),
    (True, True),
    (False, True),
)


def quadrant_of(coord: Coordinate) -> Quadrant:
    """Return the (x < 0, y < 0) partition key for a coordinate."""

    return (coord.x < 0, coord.y < 0)


class VisitedIndex:
    """Set of coordinates with tolerance-based membership.

    Coordinates are split by axis sign into four buckets, each kept sorted on
    (x, y).  A lookup bisects to the x window of the candidate and only looks at
    the buckets the tolerance window can reach, which is a single bucket unless
    the candidate sits within ``epsilon`` of an axis.
    """

    def __init__(self, epsilon: float = COORD_EPSILON):
        if epsilon <= 0:
            raise ValueError("index tolerance must be positive")
        self.epsilon = epsilon
        self._buckets: dict[Quadrant, list[Coordinate]] = {key: [] for key in QUADRANTS}
        self._size = 0

    def __len__(self):
        return self._size

    def __contains__(self, coord):
        return self.contains(coord)

    def __iter__(self):
        for key in QUADRANTS:
            yield from self._buckets[key]

    def insert(self, coord: Coordinate) -> None:
        insort(self._buckets[quadrant_of(coord)], coord)
        self._size += 1

    def contains(self, coord: Coordinate) -> bool:
        for key in self._candidate_quadrants(coord):
            if self._bucket_contains(self._buckets[key], coord):
                return True
        return False

    def clear(self) -> None:
        for bucket in self._buckets.values():
            bucket.clear()
        self._size = 0

    def _candidate_quadrants(self, coord: Coordinate) -> list[Quadrant]:
        x_signs = self._reachable_signs(coord.x)
        y_signs = self._reachable_signs(coord.y)
        return [(x_neg, y_neg) for x_neg in x_signs for y_neg in y_signs]

    def _reachable_signs(self, value: float) -> tuple[bool, ...]:
        signs = []
        if value - self.epsilon < 0:
            signs.append(True)
        if value + self.epsilon > 0:
            signs.append(False)
        return tuple(signs)

    def _bucket_contains(self, bucket: list[Coordinate], coord: Coordinate) -> bool:
        start = bisect_left(bucket, Coordinate(coord.x - self.epsilon, -math.inf))
        for index in range(start, len(bucket)):
            stored = bucket[index]
            if stored.x >= coord.x + self.epsilon:
                break
            if compare_coords(stored, coord, self.epsilon) == 0:
                return True
        return False


__all__ = ["Quadrant", "QUADRANTS", "quadrant_of", "VisitedIndex"]
