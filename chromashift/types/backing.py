from __future__ import annotations
import math
import warnings
from enum import Enum
from typing import Any, Optional, Union
import numpy as np
from ..errors import ClampWarning, InvalidBackingError


class Backing(str, Enum):
    """Numeric backing of a color's channels."""
    U8 = "u8"
    F32 = "f32"
    F64 = "f64"

    @property
    def is_float(self) -> bool:
        return self is not Backing.U8

    @property
    def scalar_type(self) -> type:
        return backing_scalar_types[self]

    @classmethod
    def from_type(cls, backing: Any) -> Backing:
        """
        Resolve a backing from a ``Backing``, its string value, or a numpy/builtin type.

        Args:
            backing: ``Backing.F32``, ``"f32"``, ``np.float32``, ``np.dtype("float32")`` ...

        Returns:
            The matching Backing member.

        Raises:
            InvalidBackingError: if the type is not one of u8, f32, f64.
        """
        if isinstance(backing, Backing):
            return backing
        if isinstance(backing, str):
            try:
                return cls(backing.lower())
            except ValueError:
                raise InvalidBackingError(
                    f"Unsupported backing type {backing!r}; expected one of u8, f32, f64"
                ) from None
        if isinstance(backing, np.dtype):
            backing = backing.type
        if isinstance(backing, type) and backing in backing_aliases:
            return backing_aliases[backing]
        name = getattr(backing, "__name__", repr(backing))
        raise InvalidBackingError(
            f"Unsupported backing type {name}; expected one of u8, f32, f64"
        )


U8 = Backing.U8
F32 = Backing.F32
F64 = Backing.F64

U8_MAX = 255

backing_scalar_types = {
    Backing.U8: int,
    Backing.F32: np.float32,
    Backing.F64: np.float64,
}

backing_aliases = {
    np.uint8: Backing.U8,
    np.float32: Backing.F32,
    np.float64: Backing.F64,
    float: Backing.F64,
}

RGB_BACKINGS = frozenset({Backing.U8, Backing.F32, Backing.F64})
FLOAT_BACKINGS = frozenset({Backing.F32, Backing.F64})

# u8 has no float counterpart of its own; single precision by convention
DEFAULT_FLOAT_BACKING = Backing.F32

default_float_backings = {
    Backing.U8: DEFAULT_FLOAT_BACKING,
    Backing.F32: Backing.F32,
    Backing.F64: Backing.F64,
}

Scalar = Union[int, float, np.floating]


def float_for(backing: Backing) -> Backing:
    """Return the float backing used for derived calculations on ``backing`` channels."""
    return default_float_backings[backing]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return -rounded if value < 0 else rounded


def coerce_channel(value: Any, backing: Backing) -> Scalar:
    """Validate one channel value and convert it to the backing's scalar type."""
    if backing is Backing.U8:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"u8 channels must be integers, got {type(value).__name__}")
        value = int(value)
        if not 0 <= value <= U8_MAX:
            raise ValueError(f"u8 channel out of range [0, {U8_MAX}]: {value}")
        return value
    return backing.scalar_type(value)


def coerce_optional(value: Optional[Any], backing: Backing) -> Optional[Scalar]:
    """Like ``coerce_channel`` but lets an absent (``None``) value through."""
    if value is None:
        return None
    return coerce_channel(value, backing)


def rgb_cast(value: Scalar, source: Backing, target: Backing) -> Scalar:
    """
    Cast one RGB channel between backings.

    - u8 -> float: divide by 255
    - float -> u8: multiply by 255, round half away from zero, clamp to [0, 255]
    - float -> float: precision change only
    - same backing: identity

    Args:
        value: Channel value in the ``source`` backing
        source: Backing of ``value``
        target: Backing to cast to

    Returns:
        The channel value in the ``target`` backing.
    """
    if source is target:
        return value

    if source is Backing.U8:
        scalar = target.scalar_type
        return scalar(value) / scalar(U8_MAX)

    if target is Backing.U8:
        if math.isnan(value):
            raise ValueError("Cannot cast a NaN channel to u8")
        scaled = round_half_away(value * U8_MAX)
        clamped = min(max(scaled, 0), U8_MAX)
        if clamped != scaled:
            warnings.warn(
                f"Channel value {float(value):.6g} clamped to {clamped} while casting to u8",
                ClampWarning,
                stacklevel=3,
            )
        return clamped

    return target.scalar_type(value)
