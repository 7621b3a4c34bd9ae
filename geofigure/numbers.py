from __future__ import annotations

import math
from typing import Tuple

import numpy as np

EPSILON = 1e-6


def is_representable(value: float) -> bool:
    """True when ``value`` has a cell on the ``EPSILON`` grid."""

    return math.isfinite(float(value) / EPSILON)


def quantize(value: float) -> int:
    """Snap ``value`` onto the ``EPSILON`` grid and return the grid index.

    Comparison and hashing of coordinates both go through this function.
    """

    return int(np.rint(float(value) / EPSILON))


def normalize(value: float) -> float:
    return quantize(value) * EPSILON


def coordinate_key(x: float, y: float) -> Tuple[int, int]:
    return quantize(x), quantize(y)


def approximately_equal(a: float, b: float) -> bool:
    return quantize(a) == quantize(b)
