from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple, Union
import numpy as np


class ColorSpace(str, Enum):
    """Every color space chromashift can represent. New spaces are added here."""
    SRGB = "srgb"
    LINEAR_SRGB = "linear_srgb"
    P3 = "p3"
    LINEAR_P3 = "linear_p3"
    REC2020 = "rec2020"
    REC2020_SCENE = "rec2020_scene"
    LINEAR_REC2020 = "linear_rec2020"
    HEX_RGB = "hex_rgb"
    CMYK = "cmyk"
    HSI = "hsi"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"
    XYZ = "xyz"
    YXY = "yxy"


Scalar = Union[int, float, np.floating]
Hue = Optional[Scalar]
UnitRGB = Tuple[Scalar, Scalar, Scalar]
HueTriple = Tuple[Hue, Scalar, Scalar]
ColorValue = Tuple[Optional[Scalar], ...]

HUE_SPACES = {ColorSpace.HSI, ColorSpace.HSL, ColorSpace.HSV, ColorSpace.HWB}

RGB_SPACES = {
    ColorSpace.SRGB,
    ColorSpace.LINEAR_SRGB,
    ColorSpace.P3,
    ColorSpace.LINEAR_P3,
    ColorSpace.REC2020,
    ColorSpace.REC2020_SCENE,
    ColorSpace.LINEAR_REC2020,
}


def to_color_space(color_space: Union[ColorSpace, str]) -> ColorSpace:
    """Resolve a ColorSpace from a member or a (case-insensitive) name."""
    if isinstance(color_space, ColorSpace):
        return color_space
    try:
        return ColorSpace(color_space.lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {color_space!r}") from None


def is_hue_space(color_space: Union[ColorSpace, str]) -> bool:
    """
    Check if the given color space carries a hue channel.

    Args:
        color_space: ColorSpace member or its string value
    Returns:
        True for HSI, HSL, HSV and HWB
    """
    return to_color_space(color_space) in HUE_SPACES
