"""Core generation modules."""

from hex_map.boards.hex_generation import HexMapGenerator, generate_hex_map
from hex_map.boards.hex_math import Coordinate
from hex_map.reveal import RevealSchedule

__all__ = ["Coordinate", "HexMapGenerator", "RevealSchedule", "generate_hex_map"]
