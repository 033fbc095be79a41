"""Thin arcade window and frame pacing wrappers for a manual main loop."""

from __future__ import annotations

import time

import arcade


class ArcadeFrameClock:
    """Caps the loop at a target frame rate and reports elapsed seconds."""

    def __init__(self):
        self._last_tick = time.perf_counter()

    def tick(self, fps: int) -> float:
        if fps > 0:
            frame_budget = 1.0 / fps
            remaining = frame_budget - (time.perf_counter() - self._last_tick)
            if remaining > 0:
                time.sleep(remaining)

        now = time.perf_counter()
        dt_seconds = now - self._last_tick
        self._last_tick = now
        return dt_seconds


class ArcadeWindowController:
    """Owns one arcade window and queues key presses between frames."""

    def __init__(self, width, height, title, enabled=True, queue_input_events=True, vsync=False):
        self.window = None
        self._key_presses = []
        if not enabled:
            return

        self.window = arcade.Window(width, height, title, vsync=vsync)
        if queue_input_events:
            self.window.push_handlers(on_key_press=self._on_key_press)

    def _on_key_press(self, symbol, modifiers):
        self._key_presses.append(symbol)

    def poll_events(self) -> bool:
        """Dispatch pending window events; return True once the window should close."""

        if self.window is None:
            return True
        self.window.dispatch_events()
        return bool(self.window.has_exit)

    def consume_key_presses(self) -> list[int]:
        presses = self._key_presses
        self._key_presses = []
        return presses

    def flip(self) -> None:
        if self.window is not None:
            self.window.flip()

    def close(self) -> None:
        if self.window is not None:
            self.window.close()
            self.window = None
