"""
Chromashift Color Space Conversions
===================================

Scalar conversion math behind the color classes. Everything here works on
plain channel values; ``wrapper.convert`` is the dispatcher over color values.

Conversion Functions
--------------------

RGB -> cylindrical / CMYK (to_hsx):
    unit_rgb_to_hsi, unit_rgb_to_hsl, unit_rgb_to_hsv, unit_rgb_to_hwb, unit_rgb_to_cmyk

Cylindrical / CMYK -> RGB (to_rgb):
    hsi_to_unit_rgb, hsl_to_unit_rgb, hsv_to_unit_rgb, hwb_to_unit_rgb, cmyk_to_unit_rgb

Peers (peer):
    hsl_to_hsv, hsv_to_hsl, hsv_to_hwb, hwb_to_hsv, xyz_to_yxy, yxy_to_xyz,
    gray_component_replacement, under_color_addition

Transfer functions (transfer):
    srgb_gamma_to_linear, srgb_linear_to_gamma,
    rec1886_gamma_to_linear, rec1886_linear_to_gamma,
    rec2020_oetf, rec2020_inverse_oetf

Hex codec (hex):
    parse_hex_string, format_hex_string, pack_u8, unpack_u24
"""
from .to_hsx import (
    compute_hue,
    normalize_hue,
    unit_rgb_to_cmyk,
    unit_rgb_to_hsi,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_hwb,
)
from .to_rgb import (
    cmyk_to_unit_rgb,
    hsi_to_unit_rgb,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    hwb_to_unit_rgb,
)
from .peer import (
    gray_component_replacement,
    hsl_to_hsv,
    hsv_to_hsl,
    hsv_to_hwb,
    hwb_to_hsv,
    under_color_addition,
    xyz_to_yxy,
    yxy_to_xyz,
)
from .transfer import (
    rec1886_gamma_to_linear,
    rec1886_linear_to_gamma,
    rec2020_inverse_oetf,
    rec2020_oetf,
    srgb_gamma_to_linear,
    srgb_linear_to_gamma,
)
from .hex import format_hex_string, pack_u8, parse_hex_string, unpack_u24

__all__ = [
    'compute_hue', 'normalize_hue',
    'unit_rgb_to_cmyk', 'unit_rgb_to_hsi', 'unit_rgb_to_hsl', 'unit_rgb_to_hsv', 'unit_rgb_to_hwb',
    'cmyk_to_unit_rgb', 'hsi_to_unit_rgb', 'hsl_to_unit_rgb', 'hsv_to_unit_rgb', 'hwb_to_unit_rgb',
    'gray_component_replacement', 'under_color_addition',
    'hsl_to_hsv', 'hsv_to_hsl', 'hsv_to_hwb', 'hwb_to_hsv', 'xyz_to_yxy', 'yxy_to_xyz',
    'rec1886_gamma_to_linear', 'rec1886_linear_to_gamma', 'rec2020_inverse_oetf', 'rec2020_oetf',
    'srgb_gamma_to_linear', 'srgb_linear_to_gamma',
    'format_hex_string', 'pack_u8', 'parse_hex_string', 'unpack_u24',
]
