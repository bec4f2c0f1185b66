from __future__ import annotations
from typing import ClassVar, TYPE_CHECKING
from ..types.color_types import ColorSpace
from ..conversions.matrices import SRGB_TO_XYZ, XYZ_TO_SRGB
from ..conversions.transfer import srgb_gamma_to_linear, srgb_linear_to_gamma
from .rgb import RgbBase

if TYPE_CHECKING:
    from .hex import HexRgb


class Srgb(RgbBase):
    """
    Gamma-encoded sRGB, the pivot RGB space and the only one with a hex form.

    r: red value in [0.0, 1.0] (float) or [0, 255] (u8)
    g: green value in [0.0, 1.0] (float) or [0, 255] (u8)
    b: blue value in [0.0, 1.0] (float) or [0, 255] (u8)
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.SRGB
    to_xyz_matrix = SRGB_TO_XYZ
    from_xyz_matrix = XYZ_TO_SRGB
    decode = staticmethod(srgb_gamma_to_linear)
    encode = staticmethod(srgb_linear_to_gamma)

    def to_linear(self) -> LinearSrgb:
        return self._transferred(LinearSrgb, srgb_gamma_to_linear)

    def to_hex(self) -> HexRgb:
        from .hex import HexRgb
        return HexRgb.from_srgb(self)


class LinearSrgb(RgbBase):
    """
    Linear-light sRGB.

    r, g, b: [0.0, 1.0] (float) or [0, 255] (u8)
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.LINEAR_SRGB
    to_xyz_matrix = SRGB_TO_XYZ
    from_xyz_matrix = XYZ_TO_SRGB

    def to_srgb(self) -> Srgb:
        return self._transferred(Srgb, srgb_linear_to_gamma)
