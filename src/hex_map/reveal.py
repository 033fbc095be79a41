"""Time-paced reveal of generated cells."""

from __future__ import annotations

from typing import Callable, Iterable

from hex_map.boards.hex_math import Coordinate

RevealFn = Callable[[Coordinate], None]


class RevealSchedule:
    """Pulls cells from a lazy sequence one per ``delay_seconds``.

    The source is only advanced when a cell is due, so an abandoned schedule
    never computes the remainder of the map.
    """

    def __init__(self, coords: Iterable[Coordinate], delay_seconds: float, on_reveal: RevealFn | None = None):
        self._source = iter(coords)
        self.delay_seconds = float(delay_seconds)
        self.on_reveal = on_reveal
        self.revealed: list[Coordinate] = []
        self.done = False
        # The first tile also waits one full delay.
        self.reveal_timer = self.delay_seconds

    @property
    def latest(self) -> Coordinate | None:
        return self.revealed[-1] if self.revealed else None

    def update(self, dt_seconds: float) -> list[Coordinate]:
        """Advance the clock and return the cells revealed in this step."""

        if self.done:
            return []
        if self.delay_seconds <= 0.0:
            return self.reveal_all()

        self.reveal_timer -= max(0.0, dt_seconds)
        newly_revealed = []
        while self.reveal_timer <= 0.0 and not self.done:
            coord = self._reveal_next()
            if coord is None:
                break
            newly_revealed.append(coord)
            self.reveal_timer += self.delay_seconds
        return newly_revealed

    def reveal_all(self) -> list[Coordinate]:
        newly_revealed = []
        while not self.done:
            coord = self._reveal_next()
            if coord is None:
                break
            newly_revealed.append(coord)
        return newly_revealed

    def _reveal_next(self) -> Coordinate | None:
        coord = next(self._source, None)
        if coord is None:
            self.done = True
            self.reveal_timer = 0.0
            return None

        self.revealed.append(coord)
        if self.on_reveal is not None:
            self.on_reveal(coord)
        return coord


__all__ = ["RevealFn", "RevealSchedule"]
