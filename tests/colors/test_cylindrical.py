from chromashift import F32, F64, Hsi, Hsl, Hsv, Hwb, Srgb, U8, Xyz
from ..samples import samples_srgb_hsi, samples_srgb_hsl, samples_srgb_hsv, samples_srgb_hwb
from ..utils import channels_close, hue_close


def test_to_srgb():
    cases = [
        (Hsl, samples_srgb_hsl, 2e-3),
        (Hsv, samples_srgb_hsv, 2e-3),
        (Hsi, samples_srgb_hsi, 1e-5),
        (Hwb, samples_srgb_hwb, 2e-3),
    ]
    for cls, samples, tol in cases:
        for rgb, channels in samples.items():
            result = cls[F64](*channels).to_srgb()
            assert type(result) is Srgb[F64]
            assert channels_close(result, tuple(c / 255 for c in rgb), tol)


def test_to_srgb_with_backing():
    assert Hsl[F32](20.0, 0.6, 0.490196).to_srgb(U8) == Srgb[U8](200, 100, 50)


def test_xyz_round_trip():
    for cls in (Hsi, Hsl, Hsv, Hwb):
        color = Srgb[F64](0.8, 0.3, 0.1).convert(cls)
        back = cls.from_xyz(color.to_xyz())
        assert type(back) is cls[F64]
        assert hue_close(back.h, color.h, 1e-3)
        assert channels_close(back.value[1:], color.value[1:], 1e-5)


def test_from_xyz_specialised():
    result = Hsl[F64].from_xyz(Xyz[F32](0.3, 0.2, 0.1))
    assert type(result) is Hsl[F64]


def test_achromatic():
    gray = Hsl[F32](None, 0.0, 0.5)
    assert gray.is_achromatic
    assert gray.to_srgb().value == (0.5, 0.5, 0.5)
    assert not Hsl[F32](0.0, 0.0, 0.5).is_achromatic


def test_hwb_gray_normalisation():
    assert channels_close(Hwb[F64](200.0, 0.6, 0.6).to_srgb(), (0.5, 0.5, 0.5), 1e-12)
    assert channels_close(Hwb[F64](None, 0.3, 0.2).to_srgb(), (0.8, 0.8, 0.8), 1e-12)


def test_peers():
    hsl = Hsl[F64](*samples_srgb_hsl[(200, 100, 50)])
    hsv = hsl.to_hsv()
    assert type(hsv) is Hsv[F64]
    assert channels_close(hsv, samples_srgb_hsv[(200, 100, 50)], 1e-5)
    assert channels_close(hsv.to_hsl(), hsl, 1e-9)
    hwb = hsv.to_hwb()
    assert type(hwb) is Hwb[F64]
    assert channels_close(hwb, samples_srgb_hwb[(200, 100, 50)], 1e-5)
    assert channels_close(hwb.to_hsv(), hsv, 1e-9)


def test_peers_keep_missing_hue():
    assert Hsl[F32](None, 0.0, 0.3).to_hsv().h is None
    assert Hsv[F32](None, 0.0, 0.3).to_hwb().h is None
