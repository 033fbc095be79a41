import pytest

from hex_map.boards import HEX_MAP_STANDARD, HEX_RENDER_STANDARD, Coordinate, HexMapGenerator
from hex_map.layout import (
    compute_best_fit_map_layout,
    hex_corner_offsets,
    hex_polygon_px,
    map_height_units,
    map_width_units,
    world_to_pixel,
)


def test_layout_fits_the_limiting_axis():
    layout = compute_best_fit_map_layout(
        screen_width_px=800,
        screen_height_px=800,
        bottom_bar_height_px=36,
        cell_size=1.0,
        radius=1,
    )

    assert map_width_units(1.0, 1) == 2.5
    assert map_height_units(1.0, 1) == 3.0
    assert layout.pixels_per_unit == pytest.approx(764 / 3)
    assert layout.center_x_px == 400
    assert layout.center_y_px == 418
    assert layout.bottom_bar_height_px == 36


def test_origin_maps_to_layout_center():
    layout = compute_best_fit_map_layout(800, 600, 40, 0.56, 5)

    assert world_to_pixel(Coordinate(0, 0), layout) == (layout.center_x_px, layout.center_y_px)


def test_every_tile_of_the_standard_map_is_on_screen():
    generator = HexMapGenerator(HEX_MAP_STANDARD)
    layout = compute_best_fit_map_layout(
        screen_width_px=800,
        screen_height_px=800,
        bottom_bar_height_px=36,
        cell_size=generator.cell_size,
        radius=generator.radius,
        margin_px=HEX_RENDER_STANDARD.map_margin_px,
    )

    for coord in generator.generate():
        for x, y in hex_polygon_px(coord, generator.cell_size, layout):
            assert 0 <= x <= 800
            assert 36 <= y <= 800


def test_neighboring_tiles_share_an_edge():
    origin = set(hex_corner_offsets(1.0))
    neighbor = {(dx + 0.75, dy + 0.5) for dx, dy in hex_corner_offsets(1.0)}
    above = {(dx, dy + 1.0) for dx, dy in hex_corner_offsets(1.0)}

    assert len(origin & neighbor) == 2
    assert len(origin & above) == 2


def test_scaled_polygon_shrinks_toward_center():
    layout = compute_best_fit_map_layout(800, 800, 36, 1.0, 1)
    full = hex_polygon_px(Coordinate(0, 0), 1.0, layout)
    shrunk = hex_polygon_px(Coordinate(0, 0), 1.0, layout, scale=0.5)

    assert shrunk[0][0] - layout.center_x_px == pytest.approx((full[0][0] - layout.center_x_px) / 2)


def test_screen_without_play_area_is_rejected():
    with pytest.raises(ValueError):
        compute_best_fit_map_layout(800, 36, 36, 1.0, 1)
