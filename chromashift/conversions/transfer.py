"""
Transfer functions between gamma-encoded and linear-light RGB.

Every function is odd-symmetric: the sign is factored out, the curve is applied
to the magnitude and the sign is put back. Matrix transforms of out-of-gamut
colors produce negative linear values, which must survive a round trip.

Functions accept numpy float scalars (or plain floats) and keep their precision.
"""
from __future__ import annotations
from functools import wraps
from typing import Callable, TypeVar

F = TypeVar("F")

# sRGB / Display P3 (IEC 61966-2-1)
SRGB_ENCODED_THRESHOLD = 0.04045
SRGB_LINEAR_THRESHOLD = 0.0031308
SRGB_SLOPE = 12.92
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055

# Rec. 2020 display-referred EOTF (BT.1886, Annex 1)
REC1886_GAMMA = 2.4

# Rec. 2020 scene-referred OETF (BT.2020-2, Table 4)
REC2020_ALPHA = 1.09929682680944
REC2020_BETA = 0.018053968510807
REC2020_SLOPE = 4.5
REC2020_EXPONENT = 0.45


def odd_symmetric(curve: Callable[[F], F]) -> Callable[[F], F]:
    """Extend a curve defined on [0, inf) to negative inputs by symmetry."""
    @wraps(curve)
    def wrapper(value: F) -> F:
        if value < 0:
            return -curve(-value)
        return curve(value)
    return wrapper


@odd_symmetric
def srgb_gamma_to_linear(value):
    if value <= SRGB_ENCODED_THRESHOLD:
        return value / SRGB_SLOPE
    return ((value + SRGB_OFFSET) / (1 + SRGB_OFFSET)) ** SRGB_GAMMA


@odd_symmetric
def srgb_linear_to_gamma(value):
    if value <= SRGB_LINEAR_THRESHOLD:
        return value * SRGB_SLOPE
    return (1 + SRGB_OFFSET) * value ** (1 / SRGB_GAMMA) - SRGB_OFFSET


@odd_symmetric
def rec1886_gamma_to_linear(value):
    return value ** REC1886_GAMMA


@odd_symmetric
def rec1886_linear_to_gamma(value):
    return value ** (1 / REC1886_GAMMA)


@odd_symmetric
def rec2020_oetf(value):
    """Scene linear light -> Rec. 2020 signal."""
    if value < REC2020_BETA:
        return value * REC2020_SLOPE
    return REC2020_ALPHA * value ** REC2020_EXPONENT - (REC2020_ALPHA - 1)


@odd_symmetric
def rec2020_inverse_oetf(value):
    """Rec. 2020 signal -> scene linear light."""
    if value < REC2020_SLOPE * REC2020_BETA:
        return value / REC2020_SLOPE
    return ((value + REC2020_ALPHA - 1) / REC2020_ALPHA) ** (1 / REC2020_EXPONENT)


def identity(value):
    return value
