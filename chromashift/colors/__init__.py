"""
Chromashift Color Classes
=========================

Immutable color values, one class per color space, specialised by backing.

Features
--------
- Immutable instances with read-only channel attributes
- Backing specialisation: ``Srgb[Backing.U8]``, ``Hsl[np.float64]``
- Direct conversions (``to_hsl()``, ``to_linear()`` ...) and the XYZ hub
- ``color.convert(space)`` picks the most direct path
- Alpha carried alongside any color with ``AlphaColor``

Usage
-----
>>> from chromashift.colors import Srgb
>>> from chromashift.types import U8
>>>
>>> color = Srgb[U8](200, 100, 50)
>>> color.value  # (200, 100, 50)
>>> color.to_hsl().h  # 20.0
>>> color.convert("p3")  # P3[u8](...)
>>> color.to_hex().to_string()  # '#C86432'
"""
from .color_base import ColorBase, Channel
from .xyz import Xyz
from .yxy import Yxy
from .rgb import RgbBase
from .srgb import Srgb, LinearSrgb
from .p3 import P3, LinearP3
from .rec2020 import Rec2020, Rec2020Scene, LinearRec2020
from .hex import HexRgb
from .cmyk import Cmyk
from .cylindrical import CylindricalBase
from .hsi import Hsi
from .hsl import Hsl
from .hsv import Hsv
from .hwb import Hwb
from .color import AlphaColor, Color, color_convert, get_color_class, space_to_class

__all__ = [
    'ColorBase', 'Channel', 'RgbBase', 'CylindricalBase',
    'Xyz', 'Yxy',
    'Srgb', 'LinearSrgb', 'P3', 'LinearP3', 'Rec2020', 'Rec2020Scene', 'LinearRec2020',
    'HexRgb', 'Cmyk', 'Hsi', 'Hsl', 'Hsv', 'Hwb',
    'AlphaColor', 'Color', 'color_convert', 'get_color_class', 'space_to_class',
]
