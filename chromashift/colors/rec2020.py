from __future__ import annotations
from typing import ClassVar
from ..types.color_types import ColorSpace
from ..conversions.matrices import REC2020_TO_XYZ, XYZ_TO_REC2020
from ..conversions.transfer import (
    rec1886_gamma_to_linear,
    rec1886_linear_to_gamma,
    rec2020_inverse_oetf,
    rec2020_oetf,
)
from .rgb import RgbBase


class Rec2020(RgbBase):
    """
    Display-referred Rec. 2020, decoded with the BT.1886 EOTF (pure 2.4 power law).
    Covers about 75.8% of the CIE 1931 chromaticity gamut.
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.REC2020
    to_xyz_matrix = REC2020_TO_XYZ
    from_xyz_matrix = XYZ_TO_REC2020
    decode = staticmethod(rec1886_gamma_to_linear)
    encode = staticmethod(rec1886_linear_to_gamma)

    def to_linear(self) -> LinearRec2020:
        return self._transferred(LinearRec2020, rec1886_gamma_to_linear)


class Rec2020Scene(RgbBase):
    """
    Scene-referred Rec. 2020 using the piecewise BT.2020 OETF.
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.REC2020_SCENE
    to_xyz_matrix = REC2020_TO_XYZ
    from_xyz_matrix = XYZ_TO_REC2020
    decode = staticmethod(rec2020_inverse_oetf)
    encode = staticmethod(rec2020_oetf)

    def to_linear(self) -> LinearRec2020:
        return self._transferred(LinearRec2020, rec2020_inverse_oetf)


class LinearRec2020(RgbBase):
    """Linear-light Rec. 2020, shared by the display- and scene-referred encodings."""
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.LINEAR_REC2020
    to_xyz_matrix = REC2020_TO_XYZ
    from_xyz_matrix = XYZ_TO_REC2020

    def to_rec2020(self) -> Rec2020:
        return self._transferred(Rec2020, rec1886_linear_to_gamma)

    def to_rec2020_scene(self) -> Rec2020Scene:
        return self._transferred(Rec2020Scene, rec2020_oetf)
