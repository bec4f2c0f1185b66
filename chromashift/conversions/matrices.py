"""
Primaries matrices between linear RGB gamuts and CIE XYZ (D65 white).

Values follow Bruce Lindbloom's RGB/XYZ tables for sRGB and the derivation in
http://www.brucelindbloom.com/index.html?Eqn_RGB_XYZ_Matrix.html for Display P3
and Rec. 2020. They are fixed constants; do not re-derive them at runtime.
"""
from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
XYZ_TO_SRGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])

P3_TO_XYZ = np.array([
    [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
    [0.2289745640697488, 0.6917385218365064, 0.079286914093745],
    [0.0000000000000000, 0.04511338185890264, 1.043944368900976],
])
XYZ_TO_P3 = np.array([
    [2.493496911941425, -0.9313836179191239, -0.40271078445071684],
    [-0.8294889695615747, 1.7626640603183463, 0.023624685841943577],
    [0.03584583024378447, -0.07617238926804182, 0.9568845240076872],
])

REC2020_TO_XYZ = np.array([
    [0.6369580483012914, 0.14461690358620832, 0.1688809751641721],
    [0.2627002120112671, 0.6779980715188708, 0.05930171646986196],
    [0.000000000000000, 0.028072693049087428, 1.060985057710791],
])
XYZ_TO_REC2020 = np.array([
    [1.716651187971268, -0.355670783776392, -0.253366281373660],
    [-0.666684351832489, 1.616481236634939, 0.0157685458139111],
    [0.017639857445311, -0.042770613257809, 0.942103121235474],
])

for _matrix in (SRGB_TO_XYZ, XYZ_TO_SRGB, P3_TO_XYZ, XYZ_TO_P3, REC2020_TO_XYZ, XYZ_TO_REC2020):
    _matrix.setflags(write=False)


def apply_matrix(matrix: NDArray, vector: Sequence, dtype: type) -> Tuple:
    """
    Multiply a 3x3 matrix by a 3-vector in the given float precision.

    Args:
        matrix: 3x3 transform
        vector: three channel values
        dtype: numpy float scalar type used for the product (np.float32 or np.float64)

    Returns:
        Tuple of three ``dtype`` scalars.
    """
    product = matrix.astype(dtype) @ np.asarray(vector, dtype=dtype)
    return tuple(product)
