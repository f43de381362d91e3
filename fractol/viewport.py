"""Mapping between pixel coordinates and the complex plane.

At zoom 1 the view spans 4.0 units on each axis, centred on the origin. The
span shrinks as ``4.0 / zoom``.
"""
from __future__ import annotations

from fractol.complex_math import ComplexPoint

BASE_RANGE = 4.0


def plane_range(zoom: float) -> float:
    return BASE_RANGE / zoom


def pixel_to_complex(x: int, y: int, width: int, height: int, zoom: float) -> ComplexPoint:
    rng = plane_range(zoom)
    real = (x - width / 2.0) * rng / width
    imag = (y - height / 2.0) * rng / height
    return ComplexPoint(real, imag)
