from __future__ import annotations
from typing import ClassVar, Tuple, TYPE_CHECKING
from ..types.color_types import ColorSpace
from ..conversions.peer import xyz_to_yxy
from .color_base import ColorBase

if TYPE_CHECKING:
    from .yxy import Yxy


class Xyz(ColorBase):
    """
    CIE 1931 XYZ tristimulus values (D65), the hub every other space converts through.

    x, y, z: unbounded non-negative floats; Y = 1 is diffuse white.
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.XYZ
    channels: ClassVar[Tuple[str, ...]] = ('x', 'y', 'z')

    def to_xyz(self) -> Xyz:
        return self

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> Xyz:
        return xyz.cast(cls.backing) if cls.backing is not None else xyz

    def to_yxy(self) -> Yxy:
        from .yxy import Yxy
        return Yxy[self.backing](*xyz_to_yxy(*self._value))
