"""Arcade-based rendering for Hex Map playback."""

from __future__ import annotations

import arcade

from hex_map.boards.hex_specs import HexRenderSpec
from hex_map.config import FONT_SIZE_BAR, SCREEN_WIDTH
from hex_map.layout import hex_polygon_px
from hex_map.visual import (
    COLOR_AMBER,
    COLOR_AQUA,
    COLOR_CHARCOAL,
    COLOR_DEEP_TEAL,
    COLOR_NEAR_BLACK,
    COLOR_SOFT_WHITE,
    FONT_NAME_BAR,
    STATUS_SEPARATOR_SLASH,
)

_TEXT_CACHE: dict[tuple[str, tuple[int, int, int]], arcade.Text] = {}
_TEXT_CACHE_MAX_ENTRIES = 512


def draw_frame(window, layout, schedule, rim, cell_size, expected_count, render_spec: HexRenderSpec):
    window.clear(COLOR_CHARCOAL)
    line_width = _grid_line_width(render_spec)
    latest = schedule.latest

    for coord in schedule.revealed:
        points = hex_polygon_px(coord, cell_size, layout, render_spec.tile_fill_scale)
        arcade.draw_polygon_filled(points, COLOR_DEEP_TEAL)

    for coord in schedule.revealed:
        points = hex_polygon_px(coord, cell_size, layout)
        arcade.draw_polygon_outline(points, COLOR_NEAR_BLACK, line_width)

    if schedule.done:
        _draw_rim(rim, cell_size, layout, line_width + int(render_spec.rim_line_width_extra_px))
    elif latest is not None:
        points = hex_polygon_px(latest, cell_size, layout, render_spec.tile_fill_scale)
        arcade.draw_polygon_outline(
            points,
            COLOR_AMBER,
            line_width + int(render_spec.latest_line_width_extra_px),
        )

    draw_bottom_bar(layout, schedule, expected_count)


def draw_bottom_bar(layout, schedule, expected_count):
    bar_height = layout.bottom_bar_height_px
    arcade.draw_lbwh_rectangle_filled(0, 0, SCREEN_WIDTH, bar_height, COLOR_NEAR_BLACK)

    status = "Done" if schedule.done else "Revealing"
    segments = [
        (status, COLOR_SOFT_WHITE),
        (STATUS_SEPARATOR_SLASH, COLOR_SOFT_WHITE),
        (f"{len(schedule.revealed)}", COLOR_AQUA),
        (STATUS_SEPARATOR_SLASH, COLOR_SOFT_WHITE),
        (f"{expected_count}", COLOR_SOFT_WHITE),
    ]
    _draw_centered_status_segments(segments, bar_height)


def _draw_centered_status_segments(segments, bar_height: int):
    if not segments:
        return

    text_objects = [_get_text(text, color) for text, color in segments]
    total_width = sum(float(text_obj.content_width) for text_obj in text_objects)

    cursor_x = (SCREEN_WIDTH - total_width) / 2.0
    center_y = bar_height / 2.0
    for text_obj in text_objects:
        text_obj.x = cursor_x
        text_obj.y = center_y
        text_obj.draw()
        cursor_x += float(text_obj.content_width)


def _get_text(text, color) -> arcade.Text:
    key = (text, color)
    text_obj = _TEXT_CACHE.get(key)
    if text_obj is None:
        if len(_TEXT_CACHE) >= _TEXT_CACHE_MAX_ENTRIES:
            _TEXT_CACHE.clear()
        text_obj = arcade.Text(
            text,
            0,
            0,
            color,
            font_size=FONT_SIZE_BAR,
            font_name=FONT_NAME_BAR,
            anchor_x="left",
            anchor_y="center",
        )
        _TEXT_CACHE[key] = text_obj
    return text_obj


def _draw_rim(rim, cell_size, layout, line_width):
    for coord in rim:
        arcade.draw_polygon_outline(hex_polygon_px(coord, cell_size, layout), COLOR_AQUA, line_width)


def _grid_line_width(render_spec: HexRenderSpec):
    return max(int(render_spec.min_line_width_px), int(render_spec.grid_line_width_px))


__all__ = ["draw_frame", "draw_bottom_bar"]
