# runningfix/geometry/utils/safe_math.py
"""
Domain-safe inverse trigonometry and a floored modulo.

Rounding in the spherical formulas can push an arcsine/arccosine argument
a hair past +/-1, which would raise ValueError in the math module.
"""
import math


def asin_safe(x: float) -> float:
    return math.asin(max(-1.0, min(1.0, x)))


def acos_safe(x: float) -> float:
    return math.acos(max(-1.0, min(1.0, x)))


def euclidean_modulo(y: float, x: float) -> float:
    """
    Remainder of y / x that takes the sign of the divisor x.

    math.fmod follows the sign of the dividend, which breaks the
    angle wraparound in the intersection formula.
    """
    return y - x * math.floor(y / x)
