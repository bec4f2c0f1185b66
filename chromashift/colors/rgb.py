"""
Shared behaviour of the RGB family (sRGB, Display P3, Rec. 2020 and their linear forms).

A concrete RGB space only supplies its primaries matrices and transfer pair;
XYZ conversion, casting and the cylindrical/CMYK conversions live here.
"""
from __future__ import annotations
from typing import Callable, ClassVar, Tuple, TYPE_CHECKING
from numpy.typing import NDArray
from ..types.backing import Backing, RGB_BACKINGS, rgb_cast
from ..types.color_types import ColorValue, UnitRGB
from ..conversions.matrices import apply_matrix
from ..conversions.transfer import identity
from ..conversions.to_hsx import (
    unit_rgb_to_cmyk,
    unit_rgb_to_hsi,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_hwb,
)
from .color_base import ColorBase
from .xyz import Xyz

if TYPE_CHECKING:
    from .cmyk import Cmyk
    from .hsi import Hsi
    from .hsl import Hsl
    from .hsv import Hsv
    from .hwb import Hwb


class RgbBase(ColorBase):
    """
    r, g, b: [0.0, 1.0] for float backings, [0, 255] for u8.
    """
    __slots__ = ()
    channels: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b')
    allowed_backings = RGB_BACKINGS

    to_xyz_matrix: ClassVar[NDArray]
    from_xyz_matrix: ClassVar[NDArray]
    decode: ClassVar[Callable] = staticmethod(identity)  # encoded -> linear light
    encode: ClassVar[Callable] = staticmethod(identity)  # linear light -> encoded

    def _cast_channels(self, target: Backing) -> ColorValue:
        return tuple(rgb_cast(v, self.backing, target) for v in self._value)

    def unit_rgb(self) -> UnitRGB:
        """Channels as floats in the working float backing."""
        source, target = self.backing, self.float_backing
        return tuple(rgb_cast(v, source, target) for v in self._value)

    def _transferred(self, partner: type[RgbBase], curve: Callable) -> RgbBase:
        # float round trip for u8, identity cast otherwise
        source, working = self.backing, self.float_backing
        return partner[source](*(
            rgb_cast(curve(rgb_cast(v, source, working)), working, source)
            for v in self._value
        ))

    def to_xyz(self) -> Xyz:
        working = self.float_backing
        linear = [self.decode(v) for v in self.unit_rgb()]
        return Xyz[working](*apply_matrix(self.to_xyz_matrix, linear, working.scalar_type))

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> RgbBase:
        target = cls.specialise(xyz.backing)
        working = xyz.backing
        linear = apply_matrix(cls.from_xyz_matrix, xyz.value, working.scalar_type)
        return target(*(rgb_cast(cls.encode(v), working, target.backing) for v in linear))

    def to_cmyk(self) -> Cmyk:
        from .cmyk import Cmyk
        return Cmyk[self.float_backing](*unit_rgb_to_cmyk(*self.unit_rgb()))

    def to_hsi(self) -> Hsi:
        from .hsi import Hsi
        return Hsi[self.float_backing](*unit_rgb_to_hsi(*self.unit_rgb()))

    def to_hsl(self) -> Hsl:
        from .hsl import Hsl
        return Hsl[self.float_backing](*unit_rgb_to_hsl(*self.unit_rgb()))

    def to_hsv(self) -> Hsv:
        from .hsv import Hsv
        return Hsv[self.float_backing](*unit_rgb_to_hsv(*self.unit_rgb()))

    def to_hwb(self) -> Hwb:
        from .hwb import Hwb
        return Hwb[self.float_backing](*unit_rgb_to_hwb(*self.unit_rgb()))
