import logging

import pytest

from hex_map.boards import HEX_MAP_STANDARD, HexMapGenerator
from hex_map.runtime.helpers import configure_logging


def test_import_package():
    import hex_map

    assert hex_map.__version__


def test_standard_map_generates():
    generator = HexMapGenerator(HEX_MAP_STANDARD)

    assert len(generator.collect()) == generator.cell_count()


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")
