from __future__ import annotations

from typing import NamedTuple


class ComplexPoint(NamedTuple):
    real: float
    imag: float


ORIGIN = ComplexPoint(0.0, 0.0)


def add(a: ComplexPoint, b: ComplexPoint) -> ComplexPoint:
    return ComplexPoint(a.real + b.real, a.imag + b.imag)


def square(z: ComplexPoint) -> ComplexPoint:
    # complex square, not component-wise
    return ComplexPoint(z.real * z.real - z.imag * z.imag, 2 * z.real * z.imag)


def magnitude_squared(z: ComplexPoint) -> float:
    return z.real * z.real + z.imag * z.imag
