from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..conversions.to_rgb import hsi_to_unit_rgb
from .cylindrical import CylindricalBase


class Hsi(CylindricalBase):
    """
    h: hue in degrees, None when achromatic
    s: saturation, 1 - min(r, g, b) / i
    i: intensity, the mean of r, g and b
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSI
    channels: ClassVar[Tuple[str, ...]] = ('h', 's', 'i')
    to_unit_rgb = staticmethod(hsi_to_unit_rgb)
    rgb_method: ClassVar[str] = 'to_hsi'
