"""Codec between packed 24-bit RGB integers (0xRRGGBB) and hex strings."""
from __future__ import annotations
import string
from typing import Tuple
import numpy as np
from ..errors import InvalidHexStringError, OutOfRangeError

U24_MAX = 0xFFFFFF
U8_MAX = 0xFF
HEX_DIGITS = frozenset(string.hexdigits)


def _as_int(value, name: str) -> int:
    # numpy integers are widened so shifts cannot overflow their dtype
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return int(value)


def pack_u8(r: int, g: int, b: int) -> int:
    """
    Pack three bytes (ints or numpy integers) into a 24-bit integer.

    Raises:
        OutOfRangeError: if a component is outside [0, 255]
    """
    packed = 0
    for name, byte in (("r", r), ("g", g), ("b", b)):
        byte = _as_int(byte, name)
        if not 0 <= byte <= U8_MAX:
            raise OutOfRangeError(f"{name} must be within [0, 255], got {byte}")
        packed = (packed << 8) | byte
    return packed


def unpack_u24(value: int) -> Tuple[int, int, int]:
    """Split a 24-bit integer into its (r, g, b) bytes."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def check_u24(value: int) -> int:
    value = _as_int(value, "hex value")
    if not 0 <= value <= U24_MAX:
        raise OutOfRangeError(f"hex value must be within [0, 0xFFFFFF], got {value:#x}")
    return value


def parse_hex_string(text: str) -> int:
    """
    Parse ``RRGGBB`` or ``#RRGGBB`` (case-insensitive) into a 24-bit integer.

    Raises:
        InvalidHexStringError: on any other length or a non-hex character
    """
    digits = text[1:] if len(text) == 7 and text.startswith("#") else text
    if len(digits) != 6 or not HEX_DIGITS.issuperset(digits):
        raise InvalidHexStringError(f"Invalid hex color string: {text!r}")
    return int(digits, 16)


def format_hex_string(value: int, prefix: bool = True) -> str:
    """Serialize a 24-bit integer as upper-case ``#RRGGBB`` (or ``RRGGBB``)."""
    return f"{'#' if prefix else ''}{check_u24(value):06X}"
