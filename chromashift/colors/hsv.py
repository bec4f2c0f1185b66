from __future__ import annotations
from typing import ClassVar, Tuple, TYPE_CHECKING
from ..types.color_types import ColorSpace
from ..conversions.peer import hsv_to_hsl, hsv_to_hwb
from ..conversions.to_rgb import hsv_to_unit_rgb
from .cylindrical import CylindricalBase

if TYPE_CHECKING:
    from .hsl import Hsl
    from .hwb import Hwb


class Hsv(CylindricalBase):
    """
    h: hue in degrees, None when achromatic
    s: saturation in [0, 1]
    v: value in [0, 1]
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSV
    channels: ClassVar[Tuple[str, ...]] = ('h', 's', 'v')
    to_unit_rgb = staticmethod(hsv_to_unit_rgb)
    rgb_method: ClassVar[str] = 'to_hsv'

    def to_hsl(self) -> Hsl:
        from .hsl import Hsl
        return Hsl[self.backing](*hsv_to_hsl(*self._value))

    def to_hwb(self) -> Hwb:
        from .hwb import Hwb
        return Hwb[self.backing](*hsv_to_hwb(*self._value))
