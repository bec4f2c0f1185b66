from __future__ import annotations
from typing import ClassVar
from ..types.color_types import ColorSpace
from ..conversions.matrices import P3_TO_XYZ, XYZ_TO_P3
from ..conversions.transfer import srgb_gamma_to_linear, srgb_linear_to_gamma
from .rgb import RgbBase


class P3(RgbBase):
    """
    Display P3: DCI-P3 primaries, D65 white and the sRGB transfer curve.
    Covers about 45.5% of the CIE 1931 chromaticity gamut.
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.P3
    to_xyz_matrix = P3_TO_XYZ
    from_xyz_matrix = XYZ_TO_P3
    decode = staticmethod(srgb_gamma_to_linear)
    encode = staticmethod(srgb_linear_to_gamma)

    def to_linear(self) -> LinearP3:
        return self._transferred(LinearP3, srgb_gamma_to_linear)


class LinearP3(RgbBase):
    """Linear-light Display P3."""
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.LINEAR_P3
    to_xyz_matrix = P3_TO_XYZ
    from_xyz_matrix = XYZ_TO_P3

    def to_p3(self) -> P3:
        return self._transferred(P3, srgb_linear_to_gamma)
