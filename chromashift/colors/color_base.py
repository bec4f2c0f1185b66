from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, FrozenSet, Iterator, Optional, Tuple, Self
from ..types.backing import Backing, FLOAT_BACKINGS, coerce_channel, coerce_optional, float_for
from ..types.color_types import ColorSpace, ColorValue, HUE_SPACES
from ..validation import assert_backing, assert_color_interface


class Channel:
    """Read-only descriptor exposing one entry of a color's value tuple."""

    def __init__(self, index: int, name: str) -> None:
        self.index = index
        self.public_name = name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj._value[self.index]

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError(
            f"'{self.public_name}' is read-only on {obj.__class__.__name__}"
        )

    def __repr__(self) -> str:
        return f"Channel({self.index}, {self.public_name!r})"


# (generic class, backing) -> specialised class
_specializations: Dict[Tuple[type, Backing], type] = {}


def _format_channel(value: Any) -> str:
    if value is None or isinstance(value, int):
        return repr(value)
    return repr(float(value))


class ColorBase:
    """
    Immutable color value.

    Concrete spaces subclass this, declare ``space`` and ``channels`` and are
    specialised by backing before use: ``Srgb[Backing.U8](200, 100, 50)``.
    Each specialisation is created once and cached, so ``Srgb[Backing.U8] is
    Srgb[np.uint8]``.
    """
    __slots__ = ('_value',)  # subclasses declare empty __slots__ so no instance __dict__ exists

    space: ClassVar[ColorSpace]
    channels: ClassVar[Tuple[str, ...]] = ()
    optional_channels: ClassVar[FrozenSet[str]] = frozenset()
    allowed_backings: ClassVar[FrozenSet[Backing]] = FLOAT_BACKINGS
    backing: ClassVar[Optional[Backing]] = None
    generic: ClassVar[bool] = True
    _origin: ClassVar[Optional[type]] = None

    # bound in colors/color.py
    convert: Callable[..., ColorBase]
    with_alpha: Callable[..., Any]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if 'channels' in cls.__dict__:
            for index, name in enumerate(cls.channels):
                setattr(cls, name, Channel(index, name))
        if 'space' in cls.__dict__:
            assert_color_interface(cls)

    def __class_getitem__(cls, backing: Any) -> type[Self]:
        if cls._origin is not None:
            raise TypeError(f"{cls.__name__} is already specialised")
        if not cls.generic:
            raise TypeError(f"{cls.__name__} is not parameterised by a backing type")

        resolved = assert_backing(cls.__name__, backing, cls.allowed_backings)
        key = (cls, resolved)
        specialised = _specializations.get(key)
        if specialised is None:
            name = f"{cls.__name__}[{resolved.value}]"
            specialised = type(cls)(name, (cls,), {
                '__slots__': (),
                '__module__': cls.__module__,
                '__qualname__': f"{cls.__qualname__}[{resolved.value}]",
                'backing': resolved,
                '_origin': cls,
            })
            _specializations[key] = specialised
        return specialised

    @classmethod
    def generic_class(cls) -> type[ColorBase]:
        """The unspecialised class this class was derived from (or itself)."""
        return cls._origin or cls

    @classmethod
    def specialise(cls, default: Backing) -> type[Self]:
        """
        Return this class specialised with ``default`` unless it already has a backing.

        A backing the space does not allow is replaced by its float counterpart.
        """
        if cls.backing is not None or not cls.generic:
            return cls
        if default not in cls.allowed_backings:
            default = float_for(default)
        return cls[default]

    def __init__(self, *channels: Any) -> None:
        if self.generic and self.backing is None:
            name = type(self).__name__
            raise TypeError(
                f"{name} must be specialised with a backing type, e.g. {name}[Backing.F32]"
            )
        if len(channels) != len(self.channels):
            raise ValueError(
                f"{self.space.value} expects {len(self.channels)} channels "
                f"({', '.join(self.channels)}), got {len(channels)}"
            )
        backing = self.backing
        value = tuple(
            coerce_optional(channel, backing) if name in self.optional_channels
            else coerce_channel(channel, backing)
            for name, channel in zip(self.channels, channels)
        )
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict) -> Self:
        return self

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.space in HUE_SPACES

    @property
    def float_backing(self) -> Backing:
        """Float backing used for calculations derived from this color."""
        return float_for(self.backing)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        channels = ", ".join(_format_channel(v) for v in self._value)
        return f"{type(self).__name__}({channels})"

    def cast(self, backing: Any) -> ColorBase:
        """
        Re-express this color with another backing of the same space.

        Raises:
            InvalidBackingError: if the space does not accept ``backing``
        """
        target = self.generic_class()[backing]
        if target is type(self):
            return self
        return target(*self._cast_channels(target.backing))

    def _cast_channels(self, target: Backing) -> ColorValue:
        return self._value
