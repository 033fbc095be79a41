"""Flood-fill generation of hexagon-bounded hex maps."""

__version__ = "0.1.0"

from .core import Coordinate, HexMapGenerator, RevealSchedule, generate_hex_map

__all__ = [
    "__version__",
    "Coordinate",
    "HexMapGenerator",
    "RevealSchedule",
    "generate_hex_map",
]
