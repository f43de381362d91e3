from __future__ import annotations

import time
from typing import Callable, Dict

from fractol.buffer import PixelBuffer
from fractol.config import RenderConfig
from fractol.renderers.cpu import render_frame_cpu
from fractol.renderers.jit import probe_numba, render_frame_jit
from fractol.util.logging_setup import get_logger

RenderFn = Callable[[RenderConfig, PixelBuffer], None]

_RENDERERS: Dict[str, RenderFn] = {
    "cpu": render_frame_cpu,
    "jit": render_frame_jit,
}

def choose_renderer(*, renderer: str) -> str:
    if renderer in _RENDERERS:
        return renderer
    if renderer != "auto":
        raise ValueError("renderer must be one of: auto, cpu, jit")

    if probe_numba().get("available"):
        return "jit"
    return "cpu"

def render_frame(config: RenderConfig, buffer: PixelBuffer, *, renderer: str = "auto") -> None:
    """Recompute every pixel of ``buffer`` for the current ``config``."""
    logger = get_logger()
    resolved = choose_renderer(renderer=renderer)
    start = time.perf_counter()
    _RENDERERS[resolved](config, buffer)
    logger.info("Rendered %s %sx%s zoom=%.2f iter=%s renderer=%s in %.3fs",
                config.fractal_kind.value, buffer.width, buffer.height, config.zoom,
                config.max_iterations, resolved, time.perf_counter() - start)

def make_renderer(renderer: str = "auto") -> RenderFn:
    """Resolve the backend once and return a render callable bound to it."""
    resolved = choose_renderer(renderer=renderer)

    def _render(config: RenderConfig, buffer: PixelBuffer) -> None:
        render_frame(config, buffer, renderer=resolved)

    return _render
