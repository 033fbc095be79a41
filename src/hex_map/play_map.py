if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import logging

import arcade

from hex_map.boards import HEX_MAP_STANDARD, HEX_RENDER_STANDARD, HexMapGenerator
from hex_map.config import BB_HEIGHT, FPS, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from hex_map.layout import compute_best_fit_map_layout
from hex_map.render import draw_frame
from hex_map.reveal import RevealSchedule
from hex_map.runtime import configure_logging
from hex_map.runtime.arcade_runtime import ArcadeFrameClock, ArcadeWindowController

logger = logging.getLogger(__name__)


def _new_schedule(generator):
    logger.info(
        "generating map (cell_size=%s, radius=%s)",
        generator.cell_size,
        generator.radius,
    )
    return RevealSchedule(generator.generate(), HEX_RENDER_STANDARD.reveal_delay_seconds)


def play_map():
    configure_logging()
    window_controller = ArcadeWindowController(
        SCREEN_WIDTH,
        SCREEN_HEIGHT,
        WINDOW_TITLE,
        enabled=True,
        queue_input_events=True,
        vsync=False,
    )
    window = window_controller.window
    if window is None:
        return

    frame_clock = ArcadeFrameClock()
    generator = HexMapGenerator(HEX_MAP_STANDARD)
    layout = compute_best_fit_map_layout(
        screen_width_px=SCREEN_WIDTH,
        screen_height_px=SCREEN_HEIGHT,
        bottom_bar_height_px=BB_HEIGHT,
        cell_size=generator.cell_size,
        radius=generator.radius,
        margin_px=HEX_RENDER_STANDARD.map_margin_px,
    )
    expected_count = generator.cell_count()
    schedule = _new_schedule(generator)
    rim = []
    rim_ready = False

    while True:
        dt_seconds = frame_clock.tick(FPS)
        if window_controller.poll_events():
            break

        quit_requested = False
        for symbol in window_controller.consume_key_presses():
            if symbol == arcade.key.ESCAPE:
                quit_requested = True
            elif symbol == arcade.key.ENTER:
                schedule.reveal_all()
            elif symbol == arcade.key.SPACE:
                schedule = _new_schedule(generator)
                rim = []
                rim_ready = False
        if quit_requested:
            break

        schedule.update(dt_seconds)
        if schedule.done and not rim_ready:
            rim_ready = True
            rim = generator.rim(schedule.revealed)
            logger.info("map complete: %d cells, %d on the rim", len(schedule.revealed), len(rim))

        draw_frame(
            window,
            layout,
            schedule,
            rim,
            generator.cell_size,
            expected_count,
            HEX_RENDER_STANDARD,
        )
        window_controller.flip()

    window_controller.close()


if __name__ == "__main__":
    play_map()
