"""Runtime helpers for Hex Map.

The arcade wrappers live in :mod:`hex_map.runtime.arcade_runtime` and are only
imported by the interactive entry point.
"""

from .helpers import configure_logging

__all__ = ["configure_logging"]
