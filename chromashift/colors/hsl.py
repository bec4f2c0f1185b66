from __future__ import annotations
from typing import ClassVar, Tuple, TYPE_CHECKING
from ..types.color_types import ColorSpace
from ..conversions.peer import hsl_to_hsv
from ..conversions.to_rgb import hsl_to_unit_rgb
from .cylindrical import CylindricalBase

if TYPE_CHECKING:
    from .hsv import Hsv


class Hsl(CylindricalBase):
    """
    h: hue in degrees, None when achromatic
    s: saturation in [0, 1]
    l: lightness in [0, 1]
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSL
    channels: ClassVar[Tuple[str, ...]] = ('h', 's', 'l')
    to_unit_rgb = staticmethod(hsl_to_unit_rgb)
    rgb_method: ClassVar[str] = 'to_hsl'

    def to_hsv(self) -> Hsv:
        from .hsv import Hsv
        return Hsv[self.backing](*hsl_to_hsv(*self._value))
