"""numba-compiled renderer.

numba is imported when the kernel is first compiled. The kernel performs the
same floating-point operations in the same order as the pure-Python renderer,
so the pixels match; colouring goes through colorize_array().
"""
from __future__ import annotations

from typing import Any, Dict

import numpy as np

from fractol.buffer import PixelBuffer
from fractol.color import colorize_array
from fractol.config import RenderConfig
from fractol.fractals import ESCAPE_RADIUS_SQUARED, JULIA_CONSTANT, FractalKind
from fractol.util.logging_setup import get_logger

_MANDELBROT = 0
_JULIA = 1
_BURNING_SHIP = 2

_KIND_CODES = {
    FractalKind.MANDELBROT: _MANDELBROT,
    FractalKind.JULIA: _JULIA,
    FractalKind.BURNING_SHIP: _BURNING_SHIP,
}


def probe_numba() -> Dict[str, Any]:
    info: Dict[str, Any] = {"available": False}
    try:
        import numba
        info.update({
            "available": True,
            "version": getattr(numba, "__version__", None),
        })
        return info
    except Exception as e:
        info["error"] = str(e)
        return info


def _escape_count(kind, re0, im0, c_re, c_im, max_iter):
    if kind == _JULIA:
        zr = re0
        zi = im0
        cr = c_re
        ci = c_im
    else:
        zr = 0.0
        zi = 0.0
        cr = re0
        ci = im0

    i = 0
    while i < max_iter:
        if kind == _BURNING_SHIP:
            zr = abs(zr)
            zi = abs(zi)
        sr = zr * zr - zi * zi
        si = 2 * zr * zi
        zr = sr + cr
        zi = si + ci
        if zr * zr + zi * zi > ESCAPE_RADIUS_SQUARED:
            return i
        i += 1
    return max_iter


_KERNEL = None


def _kernel():
    global _KERNEL
    if _KERNEL is None:
        try:
            from numba import njit
        except Exception as e:
            raise RuntimeError(f"JIT renderer not available: {e}") from e

        escape_count = njit(_escape_count)

        @njit
        def iteration_grid_kernel(kind, width, height, zoom, max_iter, c_re, c_im):
            out = np.empty((height, width), dtype=np.int64)
            rng = 4.0 / zoom
            for x in range(width):
                for y in range(height):
                    real = (x - width / 2.0) * rng / width
                    imag = (y - height / 2.0) * rng / height
                    out[y, x] = escape_count(kind, real, imag, c_re, c_im, max_iter)
            return out

        _KERNEL = iteration_grid_kernel
    return _KERNEL


def iteration_grid(config: RenderConfig, width: int, height: int) -> np.ndarray:
    return _kernel()(
        _KIND_CODES[config.fractal_kind],
        int(width),
        int(height),
        float(config.zoom),
        int(config.max_iterations),
        JULIA_CONSTANT.real,
        JULIA_CONSTANT.imag,
    )


def render_frame_jit(config: RenderConfig, buffer: PixelBuffer) -> None:
    logger = get_logger()
    logger.debug("JIT render start kind=%s zoom=%s iter=%s",
                 config.fractal_kind.value, config.zoom, config.max_iterations)
    its = iteration_grid(config, buffer.width, buffer.height)
    buffer.fill_from(colorize_array(its, config.max_iterations))
    logger.debug("JIT render done")
