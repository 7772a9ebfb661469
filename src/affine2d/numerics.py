"""
IEEE-754 arithmetic helpers.

Plain Python floats raise on division by zero (``ZeroDivisionError``) and on
trigonometry of infinities (``ValueError``). The geometry types rely on
NaN/inf propagating instead, so those operations are evaluated with numpy
float64 under a silenced ``errstate``.
"""
from __future__ import annotations

import math

import numpy as np


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide two numbers, returning inf/NaN instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def cos_sin(angle: float) -> tuple[float, float]:
    """Return (cos(angle), sin(angle)); NaN for infinite or NaN angles."""
    if math.isfinite(angle):
        return math.cos(angle), math.sin(angle)
    return math.nan, math.nan
