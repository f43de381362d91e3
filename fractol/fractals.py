"""Escape-time evaluators for the supported fractals.

Each evaluator returns the 0-based iteration index at which the orbit first
leaves the escape radius, or ``max_iter`` when it stays bounded for the whole
run. ``max_iter`` must be positive; callers validate it up front.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from fractol.complex_math import ORIGIN, ComplexPoint, add, magnitude_squared, square

ESCAPE_RADIUS_SQUARED = 4.0

JULIA_CONSTANT = ComplexPoint(-0.7, 0.27015)


class FractalKind(Enum):
    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    BURNING_SHIP = "burning_ship"

    @classmethod
    def names(cls) -> list:
        return [k.value for k in cls]


def _escape_time(z: ComplexPoint, c: ComplexPoint, max_iter: int, *, fold: bool = False) -> int:
    i = 0
    while i < max_iter:
        if fold:
            z = ComplexPoint(abs(z.real), abs(z.imag))
        z = add(square(z), c)
        if magnitude_squared(z) > ESCAPE_RADIUS_SQUARED:
            return i
        i += 1
    return max_iter


def mandelbrot(c: ComplexPoint, max_iter: int) -> int:
    return _escape_time(ORIGIN, c, max_iter)


def julia(z: ComplexPoint, max_iter: int, constant: ComplexPoint = JULIA_CONSTANT) -> int:
    """The pixel is the starting point; the constant is the additive term."""
    return _escape_time(z, constant, max_iter)


def burning_ship(c: ComplexPoint, max_iter: int) -> int:
    """Mandelbrot with both components folded to their absolute values before squaring."""
    return _escape_time(ORIGIN, c, max_iter, fold=True)


EVALUATORS: Dict[FractalKind, Callable[[ComplexPoint, int], int]] = {
    FractalKind.MANDELBROT: mandelbrot,
    FractalKind.JULIA: julia,
    FractalKind.BURNING_SHIP: burning_ship,
}


def evaluate(kind: FractalKind, point: ComplexPoint, max_iter: int) -> int:
    return EVALUATORS[kind](point, max_iter)
