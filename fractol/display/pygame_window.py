from __future__ import annotations

from typing import Callable, List, Optional

import pygame

from fractol.buffer import PixelBuffer
from fractol.controller import Key
from fractol.util.logging_setup import get_logger

_KEYMAP = {
    Key.EXIT: pygame.K_ESCAPE,
    Key.ZOOM_IN: pygame.K_UP,
    Key.ZOOM_OUT: pygame.K_DOWN,
}


class DisplayError(RuntimeError):
    pass


def _describe(e: Exception) -> str:
    return pygame.get_error() or str(e)


class PygameWindow:
    """Thin adapter exposing the window operations the viewer needs on top of pygame."""

    def __init__(self, screen: "pygame.Surface", *, fps: int = 60):
        self.screen = screen
        self.fps = fps
        self._clock = pygame.time.Clock()
        self._callbacks: List[Callable[[], None]] = []
        self._buffer: Optional[PixelBuffer] = None
        self._origin = (0, 0)
        self._running = False

    @classmethod
    def create(cls, width: int, height: int, title: str, *, fps: int = 60) -> "PygameWindow":
        logger = get_logger()
        try:
            pygame.init()
            screen = pygame.display.set_mode((width, height))
            pygame.display.set_caption(title)
        except pygame.error as e:
            message = _describe(e)
            pygame.quit()
            raise DisplayError(f"Failed to create window: {message}") from e
        logger.info("Window created %sx%s title=%r", width, height, title)
        return cls(screen, fps=fps)

    def create_image_buffer(self, width: int, height: int) -> PixelBuffer:
        try:
            return PixelBuffer(width, height)
        except ValueError as e:
            raise DisplayError(f"Failed to create image buffer: {e}") from e

    def attach(self, buffer: PixelBuffer, x: int = 0, y: int = 0) -> None:
        sw, sh = self.screen.get_size()
        if x < 0 or y < 0 or x + buffer.width > sw or y + buffer.height > sh:
            raise DisplayError(
                f"Buffer {buffer.width}x{buffer.height} at ({x},{y}) does not fit window {sw}x{sh}"
            )
        self._buffer = buffer
        self._origin = (x, y)

    def register_per_frame_callback(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def is_key_down(self, key: Key) -> bool:
        return bool(pygame.key.get_pressed()[_KEYMAP[key]])

    def close(self) -> None:
        self._running = False

    def present(self) -> None:
        if self._buffer is None:
            return
        frame = pygame.image.frombuffer(self._buffer.pixels, self._buffer.size, "RGBA")
        self.screen.blit(frame, self._origin)
        pygame.display.flip()

    def run_event_loop(self) -> None:
        self._running = True
        while self._running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
            if not self._running:
                break
            for callback in self._callbacks:
                callback()
            self.present()
            self._clock.tick(self.fps)

    def terminate(self) -> None:
        pygame.quit()
