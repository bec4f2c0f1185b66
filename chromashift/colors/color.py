from __future__ import annotations
from typing import Any, Dict, Optional, Union
from ..errors import OutOfRangeError
from ..types.color_types import ColorSpace, to_color_space
from ..conversions.wrapper import convert
from .color_base import ColorBase
from .cmyk import Cmyk
from .hex import HexRgb
from .hsi import Hsi
from .hsl import Hsl
from .hsv import Hsv
from .hwb import Hwb
from .p3 import LinearP3, P3
from .rec2020 import LinearRec2020, Rec2020, Rec2020Scene
from .srgb import LinearSrgb, Srgb
from .xyz import Xyz
from .yxy import Yxy

space_to_class: Dict[ColorSpace, type[ColorBase]] = {
    ColorSpace.SRGB: Srgb,
    ColorSpace.LINEAR_SRGB: LinearSrgb,
    ColorSpace.P3: P3,
    ColorSpace.LINEAR_P3: LinearP3,
    ColorSpace.REC2020: Rec2020,
    ColorSpace.REC2020_SCENE: Rec2020Scene,
    ColorSpace.LINEAR_REC2020: LinearRec2020,
    ColorSpace.HEX_RGB: HexRgb,
    ColorSpace.CMYK: Cmyk,
    ColorSpace.HSI: Hsi,
    ColorSpace.HSL: Hsl,
    ColorSpace.HSV: Hsv,
    ColorSpace.HWB: Hwb,
    ColorSpace.XYZ: Xyz,
    ColorSpace.YXY: Yxy,
}

Color = Union[
    Srgb, LinearSrgb, P3, LinearP3, Rec2020, Rec2020Scene, LinearRec2020,
    HexRgb, Cmyk, Hsi, Hsl, Hsv, Hwb, Xyz, Yxy,
]


def get_color_class(space: Union[ColorSpace, str], backing: Optional[Any] = None) -> type[ColorBase]:
    """
    Look up the class for a color space.

    Args:
        space: ColorSpace member or its name (case-insensitive)
        backing: Optional backing to specialise the class with

    Returns:
        The generic class, or its specialisation when ``backing`` is given.

    Raises:
        ValueError: for an unknown space name
        InvalidBackingError: if the space does not accept ``backing``
    """
    cls = space_to_class[to_color_space(space)]
    return cls if backing is None else cls[backing]


def color_convert(self: ColorBase, to_space: Any, to_backing: Optional[Any] = None) -> ColorBase:
    """
    Convert this color to another space.

    Args:
        to_space: Destination class, ColorSpace or space name
        to_backing: Backing of the result; see ``convert``

    Returns:
        New color value in the target space
    """
    return convert(self, to_space, to_backing)


class AlphaColor:
    """
    A color value paired with an alpha in [0, 1].

    Alpha rides along untouched through every conversion.
    """
    __slots__ = ('_color', '_alpha')

    def __init__(self, color: ColorBase, alpha: float = 1.0) -> None:
        if not isinstance(color, ColorBase):
            raise TypeError(f"AlphaColor wraps a color value, got {type(color).__name__}")
        alpha = float(alpha)
        if not 0.0 <= alpha <= 1.0:
            raise OutOfRangeError(f"alpha must be within [0, 1], got {alpha}")
        object.__setattr__(self, '_color', color)
        object.__setattr__(self, '_alpha', alpha)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"AlphaColor is immutable; cannot assign to {name}")

    @property
    def color(self) -> ColorBase:
        return self._color

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def space(self) -> ColorSpace:
        return self._color.space

    def convert(self, to_space: Any, to_backing: Optional[Any] = None) -> AlphaColor:
        return AlphaColor(convert(self._color, to_space, to_backing), self._alpha)

    def with_alpha(self, alpha: float) -> AlphaColor:
        return AlphaColor(self._color, alpha)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlphaColor):
            return NotImplemented
        return self._color == other._color and self._alpha == other._alpha

    def __hash__(self) -> int:
        return hash((self._color, self._alpha))

    def __repr__(self) -> str:
        return f"AlphaColor({self._color!r}, alpha={self._alpha})"


def with_alpha(self: ColorBase, alpha: float = 1.0) -> AlphaColor:
    """Pair this color with an alpha value."""
    return AlphaColor(self, alpha)


ColorBase.convert = color_convert
ColorBase.with_alpha = with_alpha
