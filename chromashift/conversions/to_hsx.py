"""
RGB -> cylindrical (HSI, HSL, HSV, HWB) and RGB -> CMYK.

All functions take unit-range RGB channels (any RGB gamut; the math does not
care which) and share the same hue/chroma computation. Hue is ``None`` for
achromatic input.
"""
from __future__ import annotations
from typing import Optional, Tuple
from ..types.color_types import HueTriple, Scalar

HUE_360 = 360
HWB_ACHROMATIC_EPSILON = 1e-5


def normalize_hue(h: Scalar) -> Scalar:
    """Normalize hue to [0, 360) range."""
    return h % HUE_360


def compute_hue(r: Scalar, g: Scalar, b: Scalar, xmax: Scalar, xmin: Scalar) -> Scalar:
    """
    Hue angle in degrees for a triple with non-zero chroma.

    Args:
        r, g, b: channels in [0, 1]
        xmax: max(r, g, b)
        xmin: min(r, g, b)

    Returns:
        Hue in [0, 360)
    """
    chroma = xmax - xmin
    if xmax == r:
        hue = 60 * (((g - b) / chroma) % 6)
    elif xmax == g:
        hue = 60 * ((b - r) / chroma + 2)
    else:
        hue = 60 * ((r - g) / chroma + 4)
    return normalize_hue(hue)


def _hue_or_none(r: Scalar, g: Scalar, b: Scalar, xmax: Scalar, xmin: Scalar) -> Optional[Scalar]:
    if xmax - xmin == 0:
        return None
    return compute_hue(r, g, b, xmax, xmin)


def unit_rgb_to_hsi(r: Scalar, g: Scalar, b: Scalar) -> HueTriple:
    """
    Convert RGB to HSI.

    Returns:
        (hue or None, saturation, intensity)
    """
    xmax = max(r, g, b)
    xmin = min(r, g, b)
    intensity = (r + g + b) / 3
    if intensity == 0 or xmax == xmin:
        saturation = 0.0
    else:
        saturation = 1 - xmin / intensity
    return _hue_or_none(r, g, b, xmax, xmin), saturation, intensity


def unit_rgb_to_hsl(r: Scalar, g: Scalar, b: Scalar) -> HueTriple:
    """
    Convert RGB to HSL.

    Returns:
        (hue or None, saturation, lightness)
    """
    xmax = max(r, g, b)
    xmin = min(r, g, b)
    chroma = xmax - xmin
    lightness = (xmax + xmin) / 2
    if lightness == 0 or lightness == 1:
        saturation = 0.0
    else:
        saturation = chroma / (1 - abs(2 * lightness - 1))
    return _hue_or_none(r, g, b, xmax, xmin), saturation, lightness


def unit_rgb_to_hsv(r: Scalar, g: Scalar, b: Scalar) -> HueTriple:
    """
    Convert RGB to HSV.

    Returns:
        (hue or None, saturation, value)
    """
    xmax = max(r, g, b)
    xmin = min(r, g, b)
    saturation = 0.0 if xmax == 0 else (xmax - xmin) / xmax
    return _hue_or_none(r, g, b, xmax, xmin), saturation, xmax


def unit_rgb_to_hwb(r: Scalar, g: Scalar, b: Scalar) -> HueTriple:
    """
    Convert RGB to HWB.

    Hue is also dropped when whiteness + blackness is within
    ``HWB_ACHROMATIC_EPSILON`` of 1, so round-off chroma does not produce a hue.

    Returns:
        (hue or None, whiteness, blackness)
    """
    xmax = max(r, g, b)
    xmin = min(r, g, b)
    whiteness = xmin
    blackness = 1 - xmax
    hue = None
    if whiteness + blackness < 1 - HWB_ACHROMATIC_EPSILON:
        hue = compute_hue(r, g, b, xmax, xmin)
    return hue, whiteness, blackness


def unit_rgb_to_cmyk(r: Scalar, g: Scalar, b: Scalar) -> Tuple[Scalar, Scalar, Scalar, Scalar]:
    """
    Convert RGB to CMYK.

    Pure black (k == 1) yields c = m = y = 0 instead of dividing by zero.
    """
    k = 1 - max(r, g, b)
    if k == 1:
        return 0.0, 0.0, 0.0, k
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return c, m, y, k
