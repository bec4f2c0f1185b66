import copy

import numpy as np
import pytest

from chromashift import Backing, Cmyk, F32, F64, HexRgb, Hsl, InvalidBackingError, Srgb, U8, Xyz


def test_specialisation_is_cached():
    assert Srgb[U8] is Srgb[Backing.U8]
    assert Srgb[U8] is Srgb[np.uint8]
    assert Srgb[F64] is Srgb[float]
    assert Srgb[U8] is not Srgb[F32]
    assert issubclass(Srgb[U8], Srgb)
    assert Srgb[U8].backing is U8
    assert Srgb[U8].generic_class() is Srgb


def test_disallowed_backing_fails_at_subscription():
    with pytest.raises(InvalidBackingError, match="Hsl"):
        Hsl[U8]
    with pytest.raises(InvalidBackingError):
        Xyz[np.uint8]


def test_cannot_specialise_twice():
    with pytest.raises(TypeError):
        Srgb[U8][F32]


def test_generic_class_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Srgb(1, 2, 3)


def test_channel_count_is_checked():
    with pytest.raises(ValueError):
        Srgb[U8](1, 2)


def test_u8_channels_are_validated():
    with pytest.raises(ValueError):
        Srgb[U8](256, 0, 0)
    with pytest.raises(TypeError):
        Srgb[U8](0.5, 0, 0)


def test_float_channels_are_not_clamped():
    color = Srgb[F64](1.5, -0.25, 0.5)
    assert color.value == (1.5, -0.25, 0.5)
    assert isinstance(color.r, np.float64)
    assert isinstance(Srgb[F32](0.1, 0.2, 0.3).g, np.float32)


def test_channel_attributes():
    color = Srgb[U8](200, 100, 50)
    assert (color.r, color.g, color.b) == (200, 100, 50)
    assert color.value == (200, 100, 50)
    assert tuple(color) == (200, 100, 50)
    hsl = Hsl[F32](None, 0.0, 0.5)
    assert hsl.h is None
    assert hsl.l == np.float32(0.5)


def test_immutable():
    color = Srgb[U8](200, 100, 50)
    with pytest.raises(AttributeError):
        color.r = 10
    with pytest.raises(AttributeError):
        color.alpha = 1
    with pytest.raises(AttributeError):
        del color.r
    assert copy.copy(color) is color
    assert copy.deepcopy(color) is color


def test_equality_and_hash():
    a = Srgb[U8](200, 100, 50)
    b = Srgb[U8](200, 100, 50)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Srgb[U8](200, 100, 51)
    assert Srgb[F32](1.0, 1.0, 1.0) != Srgb[F64](1.0, 1.0, 1.0)


def test_repr():
    assert repr(Srgb[U8](200, 100, 50)) == "Srgb[u8](200, 100, 50)"
    assert repr(Hsl[F64](None, 0.0, 0.5)) == "Hsl[f64](None, 0.0, 0.5)"


def test_cast_between_backings():
    color = Srgb[U8](255, 0, 51)
    as_float = color.cast(F64)
    assert type(as_float) is Srgb[F64]
    assert as_float.value == (1.0, 0.0, 0.2)
    assert as_float.cast(U8) == color
    assert color.cast(U8) is color


def test_cast_float_space():
    hsl = Hsl[F32](120.0, 0.5, 0.25)
    wide = hsl.cast(F64)
    assert type(wide) is Hsl[F64]
    assert wide.value == (120.0, 0.5, 0.25)
    assert Hsl[F32](None, 0.0, 0.5).cast(F64).h is None
    with pytest.raises(InvalidBackingError):
        hsl.cast(U8)


def test_has_hue():
    assert Hsl[F32](0.0, 0.0, 0.0).has_hue
    assert not Srgb[U8](0, 0, 0).has_hue


def test_instances_have_no_dict():
    for color in (Srgb[U8](200, 100, 50), Hsl[F32](120.0, 0.5, 0.25), HexRgb(0xC86432), Cmyk[F64](0.0, 0.5, 0.75, 0.2)):
        assert not hasattr(color, '__dict__')
    with pytest.raises(AttributeError):
        object.__setattr__(Srgb[U8](1, 2, 3), 'alpha', 1)
