"""
Cylindrical (HSI, HSL, HSV, HWB) and CMYK -> unit RGB.

The cylindrical models differ only in how they derive chroma, the second
largest component and the offset ``m``; the sextant channel assignment is
shared.
"""
from __future__ import annotations
from typing import Optional
from ..types.color_types import Scalar, UnitRGB
from .to_hsx import normalize_hue


def rgb_from_sextant(h: Scalar, chroma: Scalar, x: Scalar, m: Scalar) -> UnitRGB:
    """
    Assign chroma, second component and offset to r, g, b for the sextant of ``h``.

    Args:
        h: Hue in degrees [0, 360)
        chroma: Model chroma
        x: Second largest component before offset
        m: Offset added to every channel

    Returns:
        (r, g, b)
    """
    sextant = int(h // 60) % 6
    if sextant == 0:
        return chroma + m, x + m, m
    if sextant == 1:
        return x + m, chroma + m, m
    if sextant == 2:
        return m, chroma + m, x + m
    if sextant == 3:
        return m, x + m, chroma + m
    if sextant == 4:
        return x + m, m, chroma + m
    return chroma + m, m, x + m


def _sextant_ramp(h: Scalar) -> Scalar:
    # 0 at sextant edges, 1 at primaries/secondaries
    return 1 - abs((h / 60) % 2 - 1)


def hsl_to_unit_rgb(h: Optional[Scalar], s: Scalar, l: Scalar) -> UnitRGB:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees, or None when achromatic
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    if h is None:
        return l, l, l
    h = normalize_hue(h)
    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * _sextant_ramp(h)
    m = l - chroma / 2
    return rgb_from_sextant(h, chroma, x, m)


def hsv_to_unit_rgb(h: Optional[Scalar], s: Scalar, v: Scalar) -> UnitRGB:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees, or None when achromatic
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    if h is None:
        return v, v, v
    h = normalize_hue(h)
    chroma = v * s
    x = chroma * _sextant_ramp(h)
    m = v - chroma
    return rgb_from_sextant(h, chroma, x, m)


def hsi_to_unit_rgb(h: Optional[Scalar], s: Scalar, i: Scalar) -> UnitRGB:
    """
    Convert HSI to RGB.

    Args:
        h: Hue in degrees, or None when achromatic
        s: Saturation in [0, 1]
        i: Intensity in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    if h is None:
        return i, i, i
    h = normalize_hue(h)
    z = _sextant_ramp(h)
    chroma = (3 * i * s) / (1 + z)
    x = chroma * z
    m = i * (1 - s)
    return rgb_from_sextant(h, chroma, x, m)


def hwb_to_unit_rgb(h: Optional[Scalar], w: Scalar, b: Scalar) -> UnitRGB:
    """
    Convert HWB to RGB.

    Without a hue the result is the gray ``1 - b``. A hued color whose
    whiteness and blackness add up to 1 or more is normalised to the gray
    ``w / (w + b)``.

    Args:
        h: Hue in degrees, or None when achromatic
        w: Whiteness in [0, 1]
        b: Blackness in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    if h is None:
        gray = 1 - b
        return gray, gray, gray
    total = w + b
    if total >= 1:
        gray = w / total
        return gray, gray, gray
    h = normalize_hue(h)
    v = 1 - b
    chroma = v - w
    x = chroma * _sextant_ramp(h)
    return rgb_from_sextant(h, chroma, x, w)


def cmyk_to_unit_rgb(c: Scalar, m: Scalar, y: Scalar, k: Scalar) -> UnitRGB:
    """Convert CMYK to RGB."""
    return (1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)
