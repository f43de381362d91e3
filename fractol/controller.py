from __future__ import annotations

from enum import Enum
from typing import Callable

from fractol.buffer import PixelBuffer
from fractol.config import RenderConfig
from fractol.util.logging_setup import get_logger


class Key(Enum):
    EXIT = "exit"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"


class ZoomController:
    """
    Per-frame keyboard handler.

    Keys are polled as held state, not edge events, so a held zoom key changes
    the zoom and re-renders on every tick. Zooming out stops at ``min_zoom``;
    a held zoom-out key at the floor still re-renders each tick.
    """

    def __init__(
        self,
        window,
        config: RenderConfig,
        buffer: PixelBuffer,
        render: Callable[[RenderConfig, PixelBuffer], None],
        *,
        zoom_step: float = 0.1,
        min_zoom: float = 0.1,
    ):
        if zoom_step <= 0 or min_zoom <= 0:
            raise ValueError("zoom_step and min_zoom must be positive.")
        self.window = window
        self.config = config
        self.buffer = buffer
        self.render = render
        self.zoom_step = zoom_step
        self.min_zoom = min_zoom

    def on_tick(self) -> int:
        logger = get_logger()
        renders = 0

        if self.window.is_key_down(Key.EXIT):
            logger.info("Exit key pressed, closing window")
            self.window.close()

        if self.window.is_key_down(Key.ZOOM_IN):
            self.config.zoom += self.zoom_step
            logger.debug("Zoom in -> %s", self.config.zoom)
            self.render(self.config, self.buffer)
            renders += 1

        if self.window.is_key_down(Key.ZOOM_OUT):
            self.config.zoom = max(self.config.zoom - self.zoom_step, self.min_zoom)
            logger.debug("Zoom out -> %s", self.config.zoom)
            self.render(self.config, self.buffer)
            renders += 1

        return renders
