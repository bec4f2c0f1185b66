"""Chromashift: color-space conversion with 8-bit and floating-point backings."""

from .errors import (
    ClampWarning,
    ColorInterfaceError,
    InvalidBackingError,
    InvalidHexStringError,
    OutOfRangeError,
)
from .types import Backing, ColorSpace, U8, F32, F64, float_for, rgb_cast
from .colors import (
    AlphaColor,
    Cmyk,
    Color,
    ColorBase,
    HexRgb,
    Hsi,
    Hsl,
    Hsv,
    Hwb,
    LinearP3,
    LinearRec2020,
    LinearSrgb,
    P3,
    Rec2020,
    Rec2020Scene,
    Srgb,
    Xyz,
    Yxy,
    get_color_class,
)
from .conversions.wrapper import convert, has_direct_edge

__all__ = [
    # Errors
    'ClampWarning',
    'ColorInterfaceError',
    'InvalidBackingError',
    'InvalidHexStringError',
    'OutOfRangeError',
    # Types
    'Backing',
    'ColorSpace',
    'U8',
    'F32',
    'F64',
    'float_for',
    'rgb_cast',
    # Colors
    'AlphaColor',
    'Cmyk',
    'Color',
    'ColorBase',
    'HexRgb',
    'Hsi',
    'Hsl',
    'Hsv',
    'Hwb',
    'LinearP3',
    'LinearRec2020',
    'LinearSrgb',
    'P3',
    'Rec2020',
    'Rec2020Scene',
    'Srgb',
    'Xyz',
    'Yxy',
    'get_color_class',
    # Conversion
    'convert',
    'has_direct_edge',
]
