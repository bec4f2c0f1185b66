"""Direct conversions between sibling models that skip RGB and XYZ."""
from __future__ import annotations
from typing import Optional, Tuple
from ..errors import OutOfRangeError
from ..types.color_types import HueTriple, Scalar

CmykTuple = Tuple[Scalar, Scalar, Scalar, Scalar]
XyzTuple = Tuple[Scalar, Scalar, Scalar]


## HSV <-> HSL

def hsl_to_hsv(h: Optional[Scalar], s: Scalar, l: Scalar) -> HueTriple:
    """
    Convert HSL to HSV.

    Args:
        h: Hue in degrees, or None
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        (hue, saturation, value); hue passes through unchanged
    """
    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 * (1 - l / v)
    return h, s_v, v


def hsv_to_hsl(h: Optional[Scalar], s: Scalar, v: Scalar) -> HueTriple:
    """
    Convert HSV to HSL.

    Args:
        h: Hue in degrees, or None
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        (hue, saturation, lightness); hue passes through unchanged
    """
    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        s_l = 0.0
    else:
        s_l = (v - l) / min(l, 1 - l)
    return h, s_l, l


## HSV <-> HWB

def hsv_to_hwb(h: Optional[Scalar], s: Scalar, v: Scalar) -> HueTriple:
    """Convert HSV to HWB; returns (hue, whiteness, blackness)."""
    return h, (1 - s) * v, 1 - v


def hwb_to_hsv(h: Optional[Scalar], w: Scalar, b: Scalar) -> HueTriple:
    """Convert HWB to HSV; returns (hue, saturation, value). Black has zero saturation."""
    v = 1 - b
    s = 0.0 if v == 0 else 1 - w / v
    return h, s, v


## XYZ <-> Yxy

def xyz_to_yxy(x: Scalar, y: Scalar, z: Scalar) -> XyzTuple:
    """
    Convert XYZ to Yxy.

    Returns:
        (luma, x chromaticity, y chromaticity); all zero when x + y + z == 0
    """
    total = x + y + z
    if total == 0:
        return 0.0, 0.0, 0.0
    return y, x / total, y / total


def yxy_to_xyz(luma: Scalar, x: Scalar, y: Scalar) -> XyzTuple:
    """
    Convert Yxy to XYZ.

    Returns:
        (X, Y, Z); all zero when the y chromaticity is zero
    """
    if y == 0:
        return 0.0, 0.0, 0.0
    return x * luma / y, luma, (1 - x - y) * luma / y


## CMYK ink adjustments

def _check_strength(strength: float) -> None:
    if not 0 <= strength <= 1:
        raise OutOfRangeError(f"strength must be within [0, 1], got {strength}")


def gray_component_replacement(c: Scalar, m: Scalar, y: Scalar, k: Scalar, strength: float) -> CmykTuple:
    """
    Move the gray component shared by c, m and y into k.

    Args:
        c, m, y, k: CMYK channels
        strength: Fraction of ``min(c, m, y)`` to move, in [0, 1]

    Returns:
        Adjusted (c, m, y, k)

    Raises:
        OutOfRangeError: if strength is outside [0, 1]
    """
    _check_strength(strength)
    gray = min(c, m, y) * strength
    return c - gray, m - gray, y - gray, k + gray


def under_color_addition(c: Scalar, m: Scalar, y: Scalar, k: Scalar, strength: float) -> CmykTuple:
    """
    Move part of k back into c, m and y (inverse of gray component replacement).

    Args:
        c, m, y, k: CMYK channels
        strength: Fraction of ``k`` to move, in [0, 1]

    Returns:
        Adjusted (c, m, y, k)

    Raises:
        OutOfRangeError: if strength is outside [0, 1]
    """
    _check_strength(strength)
    added = k * strength
    return c + added, m + added, y + added, k - added
