from .backing import (
    Backing,
    U8,
    F32,
    F64,
    RGB_BACKINGS,
    FLOAT_BACKINGS,
    DEFAULT_FLOAT_BACKING,
    float_for,
    rgb_cast,
)
from .color_types import ColorSpace, HUE_SPACES, RGB_SPACES, is_hue_space, to_color_space

__all__ = [
    'Backing',
    'U8',
    'F32',
    'F64',
    'RGB_BACKINGS',
    'FLOAT_BACKINGS',
    'DEFAULT_FLOAT_BACKING',
    'float_for',
    'rgb_cast',
    'ColorSpace',
    'HUE_SPACES',
    'RGB_SPACES',
    'is_hue_space',
    'to_color_space',
]
