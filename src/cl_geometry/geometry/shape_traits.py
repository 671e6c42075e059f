"""Shape predicates shared by anything that has a width and a height."""

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Dimensioned(Protocol):
    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE 754 semantics.

    A zero denominator yields ``inf``/``-inf`` (or ``nan`` for ``0 / 0``)
    instead of raising ``ZeroDivisionError``.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def is_square(shape: Dimensioned) -> bool:
    return shape.height == shape.width


def is_horizontal(shape: Dimensioned) -> bool:
    return shape.height < shape.width


def is_vertical(shape: Dimensioned) -> bool:
    return shape.height > shape.width


def aspect(shape: Dimensioned) -> float:
    """Width over height; ``inf`` or ``nan`` when height is zero."""
    return ieee_divide(shape.width, shape.height)


def larger(shape: Dimensioned) -> float:
    return max(shape.height, shape.width)


def smaller(shape: Dimensioned) -> float:
    return min(shape.height, shape.width)
