from __future__ import annotations

from typing import NamedTuple

import numpy as np


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int


# points that never escaped
INTERIOR_COLOR = RGBA(20, 20, 20, 255)


def colorize(iterations: int, max_iter: int) -> RGBA:
    """
    Map an escape count to a warm linear ramp. Red runs at full scale, green at
    half and blue at a quarter of the ``iterations / max_iter`` ratio, truncated
    with integer division. Interior points get INTERIOR_COLOR.
    """
    if iterations == max_iter:
        return INTERIOR_COLOR
    r = (iterations * 255) // max_iter
    g = (iterations * 128) // max_iter
    b = (iterations * 64) // max_iter
    return RGBA(r, g, b, 255)


def colorize_array(iterations: np.ndarray, max_iter: int) -> np.ndarray:
    """Vectorised colorize(): returns a uint8 array of shape iterations.shape + (4,)."""
    its = np.asarray(iterations, dtype=np.int64)
    out = np.empty(its.shape + (4,), dtype=np.uint8)
    out[..., 0] = (its * 255) // max_iter
    out[..., 1] = (its * 128) // max_iter
    out[..., 2] = (its * 64) // max_iter
    out[..., 3] = 255
    out[its == max_iter] = INTERIOR_COLOR
    return out
