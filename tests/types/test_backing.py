import numpy as np
import pytest

from chromashift import Backing, ClampWarning, InvalidBackingError, U8, F32, F64, float_for, rgb_cast
from chromashift.types.backing import coerce_channel, round_half_away


def test_from_type_accepts_aliases():
    assert Backing.from_type(Backing.U8) is U8
    assert Backing.from_type("f32") is F32
    assert Backing.from_type("F64") is F64
    assert Backing.from_type(np.uint8) is U8
    assert Backing.from_type(np.float32) is F32
    assert Backing.from_type(np.float64) is F64
    assert Backing.from_type(np.dtype("float32")) is F32
    assert Backing.from_type(float) is F64


def test_from_type_rejects_unknown():
    with pytest.raises(InvalidBackingError, match="int16"):
        Backing.from_type(np.int16)
    with pytest.raises(InvalidBackingError):
        Backing.from_type("f16")
    # InvalidBackingError is a TypeError
    with pytest.raises(TypeError):
        Backing.from_type(int)


def test_float_for():
    assert float_for(U8) is F32
    assert float_for(F32) is F32
    assert float_for(F64) is F64


def test_round_half_away():
    assert round_half_away(127.5) == 128
    assert round_half_away(0.5) == 1
    assert round_half_away(-0.5) == -1
    assert round_half_away(2.4999) == 2


def test_rgb_cast_u8_to_float():
    value = rgb_cast(255, U8, F32)
    assert isinstance(value, np.float32)
    assert value == 1.0
    assert abs(rgb_cast(200, U8, F64) - 200 / 255) < 1e-12


def test_rgb_cast_float_to_u8_rounds_half_away():
    assert rgb_cast(0.5, F64, U8) == 128
    assert rgb_cast(np.float32(0.5), F32, U8) == 128
    assert rgb_cast(1.0, F64, U8) == 255
    assert rgb_cast(0.0, F64, U8) == 0


def test_rgb_cast_clamps_with_warning():
    with pytest.warns(ClampWarning):
        assert rgb_cast(1.2, F64, U8) == 255
    with pytest.warns(ClampWarning):
        assert rgb_cast(-0.1, F64, U8) == 0


def test_rgb_cast_nan_to_u8():
    with pytest.raises(ValueError):
        rgb_cast(float("nan"), F64, U8)


def test_rgb_cast_float_precision_only():
    value = rgb_cast(np.float64(0.1), F64, F32)
    assert isinstance(value, np.float32)
    assert rgb_cast(1.5, F64, F64) == 1.5


def test_coerce_channel():
    assert coerce_channel(np.uint8(7), U8) == 7
    assert isinstance(coerce_channel(0.25, F32), np.float32)
    with pytest.raises(TypeError):
        coerce_channel(1.0, U8)
    with pytest.raises(TypeError):
        coerce_channel(True, U8)
    with pytest.raises(ValueError):
        coerce_channel(256, U8)
    with pytest.raises(ValueError):
        coerce_channel(-1, U8)
