from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..conversions.peer import xyz_to_yxy, yxy_to_xyz
from .color_base import ColorBase
from .xyz import Xyz


class Yxy(ColorBase):
    """
    Luminance plus CIE xy chromaticity.

    luma: Y tristimulus value
    x, y: chromaticity coordinates
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.YXY
    channels: ClassVar[Tuple[str, ...]] = ('luma', 'x', 'y')

    def to_xyz(self) -> Xyz:
        return Xyz[self.backing](*yxy_to_xyz(*self._value))

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> Yxy:
        target = cls.specialise(xyz.backing)
        return target(*xyz_to_yxy(*xyz.value))
