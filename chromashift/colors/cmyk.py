from __future__ import annotations
from typing import Any, ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace
from ..conversions.to_rgb import cmyk_to_unit_rgb
from ..conversions.peer import gray_component_replacement, under_color_addition
from .color_base import ColorBase
from .srgb import Srgb
from .xyz import Xyz


class Cmyk(ColorBase):
    """
    Subtractive cyan, magenta, yellow and key (black), each in [0, 1].

    CMYK has no formula of its own against XYZ; it always goes through sRGB.
    The ink adjustments return a new value.
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.CMYK
    channels: ClassVar[Tuple[str, ...]] = ('c', 'm', 'y', 'k')

    def to_srgb(self, backing: Optional[Any] = None) -> Srgb:
        """
        Args:
            backing: Backing of the result, defaults to this color's backing.
        """
        rgb = Srgb[self.backing](*cmyk_to_unit_rgb(*self._value))
        return rgb if backing is None else rgb.cast(backing)

    def to_xyz(self) -> Xyz:
        return self.to_srgb().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> Cmyk:
        target = cls.specialise(xyz.backing)
        return Srgb[target.backing].from_xyz(xyz).to_cmyk()

    def _adjusted(self, channels: Tuple[Any, ...]) -> Cmyk:
        return type(self)(*channels)

    def gray_component_replacement(self, strength: float) -> Cmyk:
        """
        Move ``min(c, m, y) * strength`` from the colored inks into k.

        Raises:
            OutOfRangeError: if strength is outside [0, 1]
        """
        return self._adjusted(gray_component_replacement(*self._value, strength))

    def under_color_removal(self) -> Cmyk:
        """Gray component replacement at full strength."""
        return self.gray_component_replacement(1.0)

    def under_color_addition(self, strength: float) -> Cmyk:
        """
        Move ``k * strength`` back into c, m and y.

        Raises:
            OutOfRangeError: if strength is outside [0, 1]
        """
        return self._adjusted(under_color_addition(*self._value, strength))
