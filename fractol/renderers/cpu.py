from __future__ import annotations

from fractol.buffer import PixelBuffer
from fractol.color import colorize
from fractol.config import RenderConfig
from fractol.fractals import EVALUATORS
from fractol.viewport import pixel_to_complex, plane_range
from fractol.util.logging_setup import get_logger

def render_frame_cpu(config: RenderConfig, buffer: PixelBuffer) -> None:
    logger = get_logger()
    width, height = buffer.width, buffer.height
    max_iter = config.max_iterations
    zoom = config.zoom
    evaluator = EVALUATORS[config.fractal_kind]

    logger.debug("CPU render start kind=%s zoom=%s iter=%s range=%s",
                 config.fractal_kind.value, zoom, max_iter, plane_range(zoom))

    for x in range(width):
        for y in range(height):
            point = pixel_to_complex(x, y, width, height, zoom)
            buffer.set_pixel(x, y, colorize(evaluator(point, max_iter), max_iter))

    logger.debug("CPU render done")
