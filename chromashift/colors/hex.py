from __future__ import annotations
from typing import Any, ClassVar, Tuple
from ..types.backing import Backing, DEFAULT_FLOAT_BACKING, U8, U8_MAX
from ..types.color_types import ColorSpace
from ..conversions.hex import check_u24, format_hex_string, pack_u8, parse_hex_string, unpack_u24
from .color_base import ColorBase
from .srgb import Srgb
from .xyz import Xyz


class HexRgb(ColorBase):
    """
    sRGB packed at 8-bit precision into a 24-bit integer (0xRRGGBB).

    Not parameterised by a backing; ``value`` is the packed int.
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HEX_RGB
    channels: ClassVar[Tuple[str, ...]] = ('value',)
    generic: ClassVar[bool] = False

    def __init__(self, value: int) -> None:
        object.__setattr__(self, '_value', (check_u24(value),))

    @property
    def float_backing(self) -> Backing:
        return DEFAULT_FLOAT_BACKING

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_string(cls, text: str) -> HexRgb:
        """
        Parse ``"RRGGBB"`` or ``"#RRGGBB"``.

        Raises:
            InvalidHexStringError: on any other shape
        """
        return cls(parse_hex_string(text))

    @classmethod
    def from_u8(cls, r: int, g: int, b: int) -> HexRgb:
        return cls(pack_u8(r, g, b))

    @classmethod
    def from_u24(cls, value: int) -> HexRgb:
        return cls(value)

    @classmethod
    def from_srgb(cls, srgb: Srgb) -> HexRgb:
        """Pack an sRGB color, rounding float channels to 8 bits first."""
        if srgb.backing is not U8:
            srgb = srgb.cast(U8)
        return cls.from_u8(*srgb.value)

    # ------------------ CONVERSIONS ------------------
    def to_srgb(self, backing: Any = U8) -> Srgb:
        """
        Unpack into sRGB.

        Args:
            backing: Target backing; float backings divide each byte by 255.
        """
        target = Srgb[backing]
        channels = unpack_u24(self._value[0])
        if target.backing.is_float:
            scalar = target.backing.scalar_type
            return target(*(scalar(c) / scalar(U8_MAX) for c in channels))
        return target(*channels)

    def to_xyz(self, backing: Any = DEFAULT_FLOAT_BACKING) -> Xyz:
        return self.to_srgb(backing).to_xyz()

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> HexRgb:
        return Srgb[xyz.backing].from_xyz(xyz).to_hex()

    def to_string(self, prefix: bool = True) -> str:
        return format_hex_string(self._value[0], prefix)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"HexRgb({self.to_string()})"
