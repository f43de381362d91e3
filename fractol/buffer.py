from __future__ import annotations

import numpy as np

from fractol.color import RGBA


class PixelBuffer:
    """
    Fixed-size RGBA pixel grid written by the renderers.

    Pixels are stored row-major as a uint8 array of shape (height, width, 4), so
    pixel (x, y) lives at ``pixels[y, x]``. The array is allocated once and
    every render overwrites it in place.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError("Buffer width/height must be positive.")
        self.width = int(width)
        self.height = int(height)
        self.pixels = np.zeros((self.height, self.width, 4), dtype=np.uint8)

    @property
    def size(self):
        return self.width, self.height

    def set_pixel(self, x: int, y: int, color: RGBA) -> None:
        self.pixels[y, x] = color

    def get_pixel(self, x: int, y: int) -> RGBA:
        r, g, b, a = (int(v) for v in self.pixels[y, x])
        return RGBA(r, g, b, a)

    def fill_from(self, rgba: np.ndarray) -> None:
        if rgba.shape != self.pixels.shape:
            raise ValueError(f"Expected array of shape {self.pixels.shape}, got {rgba.shape}")
        self.pixels[...] = rgba

    def snapshot(self) -> np.ndarray:
        return self.pixels.copy()
