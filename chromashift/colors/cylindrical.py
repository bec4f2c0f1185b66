"""Common base of the hue-based models (HSI, HSL, HSV, HWB)."""
from __future__ import annotations
from typing import Any, Callable, ClassVar, FrozenSet, Optional
from .color_base import ColorBase
from .srgb import Srgb
from .xyz import Xyz


class CylindricalBase(ColorBase):
    """
    A hue in degrees [0, 360), or ``None`` when achromatic, plus two [0, 1] channels.

    Subclasses name the shared unit-RGB routine in each direction.
    """
    __slots__ = ()
    optional_channels: ClassVar[FrozenSet[str]] = frozenset({'h'})

    to_unit_rgb: ClassVar[Callable]
    rgb_method: ClassVar[str]  # name of the RgbBase method producing this model

    @property
    def is_achromatic(self) -> bool:
        return self._value[0] is None

    def to_srgb(self, backing: Optional[Any] = None) -> Srgb:
        """
        Args:
            backing: Backing of the result, defaults to this color's backing.
        """
        rgb = Srgb[self.backing](*self.to_unit_rgb(*self._value))
        return rgb if backing is None else rgb.cast(backing)

    def to_xyz(self) -> Xyz:
        return self.to_srgb().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> CylindricalBase:
        target = cls.specialise(xyz.backing)
        return getattr(Srgb[target.backing].from_xyz(xyz), cls.rgb_method)()
