from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..conversions.peer import hwb_to_hsv
from ..conversions.to_rgb import hwb_to_unit_rgb
from .cylindrical import CylindricalBase
from .hsv import Hsv


class Hwb(CylindricalBase):
    """
    Hue, whiteness and blackness. Whiteness + blackness >= 1 is a gray.
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HWB
    channels: ClassVar[Tuple[str, ...]] = ('h', 'w', 'b')
    to_unit_rgb = staticmethod(hwb_to_unit_rgb)
    rgb_method: ClassVar[str] = 'to_hwb'

    def to_hsv(self) -> Hsv:
        return Hsv[self.backing](*hwb_to_hsv(*self._value))
