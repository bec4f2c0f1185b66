import numpy as np
import pytest

from chromashift import (
    ClampWarning,
    Cmyk,
    F32,
    F64,
    Hsl,
    LinearP3,
    LinearRec2020,
    LinearSrgb,
    P3,
    Rec2020,
    Rec2020Scene,
    Srgb,
    U8,
    Xyz,
)
from ..samples import samples_srgb_cmyk, samples_srgb_hsi, samples_srgb_hsl, samples_srgb_hsv, samples_srgb_hwb, samples_srgb_xyz, samples_u8_round_trip
from ..utils import channels_close, hue_close


def test_srgb_u8_to_xyz():
    for rgb, xyz in samples_srgb_xyz.items():
        result = Srgb[U8](*rgb).to_xyz()
        assert type(result) is Xyz[F32]
        assert channels_close(result, xyz, 2e-3)


def test_srgb_f64_white_to_xyz():
    white = Srgb[F64](1.0, 1.0, 1.0).to_xyz()
    assert type(white) is Xyz[F64]
    assert channels_close(white, (0.950470, 1.0, 1.088830), 2e-6)


def test_srgb_from_xyz():
    for rgb, xyz in samples_srgb_xyz.items():
        result = Srgb[F64].from_xyz(Xyz[F64](*xyz))
        assert channels_close(result, tuple(c / 255 for c in rgb), 5e-4)


def test_srgb_from_xyz_u8(no_clamp_warnings):
    xyz = Srgb[U8](200, 100, 50).to_xyz()
    assert channels_close(Srgb[U8].from_xyz(xyz), (200, 100, 50), 1.5)


def test_from_xyz_generic_class_follows_xyz_backing():
    result = Srgb.from_xyz(Xyz[F64](0.3, 0.2, 0.1))
    assert type(result) is Srgb[F64]


def test_out_of_gamut_u8_clamps_with_warning():
    green = P3[F64](0.0, 1.0, 0.0).to_xyz()
    with pytest.warns(ClampWarning):
        result = Srgb[U8].from_xyz(green)
    assert result.r == 0 and result.g == 255


def test_srgb_to_linear_u8():
    linear = Srgb[U8](200, 100, 50).to_linear()
    assert type(linear) is LinearSrgb[U8]
    assert linear.value == (147, 32, 8)


def test_srgb_to_linear_float():
    linear = Srgb[F64](200 / 255, 100 / 255, 50 / 255).to_linear()
    assert channels_close(linear, (0.577580, 0.127438, 0.031896), 1e-6)


def test_linear_round_trip_u8():
    for rgb in samples_u8_round_trip:
        back = Srgb[U8](*rgb).to_linear().to_srgb()
        assert type(back) is Srgb[U8]
        assert channels_close(back, rgb, 1.5)


@pytest.mark.parametrize("backing, tol", [(F32, 2e-3), (F64, 2e-6)])
def test_linear_round_trip_float(backing, tol):
    for rgb in [(0.2, 0.5, 0.9), (0.0, 1.0, 0.01), (0.7, 0.7, 0.7)]:
        assert channels_close(Srgb[backing](*rgb).to_linear().to_srgb(), rgb, tol)
        assert channels_close(P3[backing](*rgb).to_linear().to_p3(), rgb, tol)
        assert channels_close(Rec2020[backing](*rgb).to_linear().to_rec2020(), rgb, tol)
        assert channels_close(Rec2020Scene[backing](*rgb).to_linear().to_rec2020_scene(), rgb, tol)


def test_rec2020_display_and_scene_differ():
    display = Rec2020[F64](0.5, 0.5, 0.5).to_linear()
    scene = Rec2020Scene[F64](0.5, 0.5, 0.5).to_linear()
    assert type(display) is type(scene) is LinearRec2020[F64]
    assert abs(display.r - 0.5 ** 2.4) < 1e-12
    assert display.r != scene.r


def test_linear_keeps_negative_values():
    linear = LinearSrgb[F64](-0.1, 0.5, 1.2)
    assert channels_close(linear.to_srgb().to_linear(), linear, 1e-9)
    assert linear.to_srgb().r < 0


def test_white_is_shared_across_gamuts():
    white = Srgb[F64](1.0, 1.0, 1.0).to_xyz()
    assert channels_close(P3[F64].from_xyz(white), (1.0, 1.0, 1.0), 1e-3)
    assert channels_close(Rec2020[F64].from_xyz(white), (1.0, 1.0, 1.0), 1e-3)
    assert channels_close(LinearP3[F64].from_xyz(white), (1.0, 1.0, 1.0), 1e-3)


def test_srgb_red_in_p3():
    red = P3[F64].from_xyz(Srgb[F64](1.0, 0.0, 0.0).to_xyz())
    assert channels_close(red, (0.9175, 0.2003, 0.1386), 2e-3)


def test_rgb_to_cylindrical():
    for rgb, hsl in samples_srgb_hsl.items():
        result = Srgb[U8](*rgb).to_hsl()
        assert type(result) is Hsl[F32]
        assert hue_close(result.h, hsl[0], 2e-3)
        assert channels_close(result.value[1:], hsl[1:], 2e-3)
    for rgb, hsv in samples_srgb_hsv.items():
        result = Srgb[U8](*rgb).to_hsv()
        assert hue_close(result.h, hsv[0], 2e-3)
        assert channels_close(result.value[1:], hsv[1:], 2e-3)
    for rgb, hsi in samples_srgb_hsi.items():
        result = Srgb[U8](*rgb).to_hsi()
        assert hue_close(result.h, hsi[0], 2e-3)
        assert channels_close(result.value[1:], hsi[1:], 2e-3)
    for rgb, hwb in samples_srgb_hwb.items():
        result = Srgb[U8](*rgb).to_hwb()
        assert hue_close(result.h, hwb[0], 2e-3)
        assert channels_close(result.value[1:], hwb[1:], 2e-3)


def test_rgb_to_cmyk():
    for rgb, cmyk in samples_srgb_cmyk.items():
        result = Srgb[U8](*rgb).to_cmyk()
        assert type(result) is Cmyk[F32]
        assert channels_close(result, cmyk, 2e-3)


def test_cmyk_black_guard():
    assert Srgb[U8](0, 0, 0).to_cmyk() == Cmyk[F32](0.0, 0.0, 0.0, 1.0)
    assert not any(np.isnan(c) for c in Srgb[F64](0.0, 0.0, 0.0).to_cmyk())


def test_achromatic_invariant():
    for gray in (0, 1, 128, 254, 255):
        color = Srgb[U8](gray, gray, gray)
        for result in (color.to_hsl(), color.to_hsv(), color.to_hsi()):
            assert result.h is None
            assert result.s == 0
        assert color.to_hwb().h is None


def test_cylindrical_from_other_gamuts():
    hsl = P3[F64](0.5, 0.25, 0.125).to_hsl()
    assert abs(hsl.h - 20.0) < 1e-9
    assert type(hsl) is Hsl[F64]
