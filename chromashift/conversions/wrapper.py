"""
Universal conversion entry point.

``convert`` takes the most direct path available: a curated edge from the
table below when one exists for the (source, destination) pair, otherwise
the XYZ hub route ``dest.from_xyz(src.to_xyz())``. The two paths may differ
in the last digits, so an existing edge is always preferred. A color
converted to its own space is only re-cast.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Tuple, Union
from ..types.backing import Backing, U8, float_for
from ..types.color_types import ColorSpace, RGB_SPACES, to_color_space
from ..errors import InvalidBackingError
from ..validation import assert_color_interface
from ..colors.color_base import ColorBase

DirectEdge = Callable[[Any], ColorBase]
S = ColorSpace

_RGB_MODEL_EDGES: Dict[ColorSpace, DirectEdge] = {
    S.CMYK: lambda c: c.to_cmyk(),
    S.HSI: lambda c: c.to_hsi(),
    S.HSL: lambda c: c.to_hsl(),
    S.HSV: lambda c: c.to_hsv(),
    S.HWB: lambda c: c.to_hwb(),
}

DIRECT_EDGES: Dict[Tuple[ColorSpace, ColorSpace], DirectEdge] = {
    **{
        (rgb, model): edge
        for rgb in RGB_SPACES
        for model, edge in _RGB_MODEL_EDGES.items()
    },
    # transfer functions
    (S.SRGB, S.LINEAR_SRGB): lambda c: c.to_linear(),
    (S.LINEAR_SRGB, S.SRGB): lambda c: c.to_srgb(),
    (S.P3, S.LINEAR_P3): lambda c: c.to_linear(),
    (S.LINEAR_P3, S.P3): lambda c: c.to_p3(),
    (S.REC2020, S.LINEAR_REC2020): lambda c: c.to_linear(),
    (S.REC2020_SCENE, S.LINEAR_REC2020): lambda c: c.to_linear(),
    (S.LINEAR_REC2020, S.REC2020): lambda c: c.to_rec2020(),
    (S.LINEAR_REC2020, S.REC2020_SCENE): lambda c: c.to_rec2020_scene(),
    # hex codec
    (S.SRGB, S.HEX_RGB): lambda c: c.to_hex(),
    (S.HEX_RGB, S.SRGB): lambda c: c.to_srgb(),
    # back to sRGB
    (S.CMYK, S.SRGB): lambda c: c.to_srgb(),
    (S.HSI, S.SRGB): lambda c: c.to_srgb(),
    (S.HSL, S.SRGB): lambda c: c.to_srgb(),
    (S.HSV, S.SRGB): lambda c: c.to_srgb(),
    (S.HWB, S.SRGB): lambda c: c.to_srgb(),
    # peers
    (S.HSL, S.HSV): lambda c: c.to_hsv(),
    (S.HSV, S.HSL): lambda c: c.to_hsl(),
    (S.HSV, S.HWB): lambda c: c.to_hwb(),
    (S.HWB, S.HSV): lambda c: c.to_hsv(),
    (S.XYZ, S.YXY): lambda c: c.to_yxy(),
    (S.YXY, S.XYZ): lambda c: c.to_xyz(),
}


def has_direct_edge(from_space: Union[ColorSpace, str], to_space: Union[ColorSpace, str]) -> bool:
    return (to_color_space(from_space), to_color_space(to_space)) in DIRECT_EDGES


def _resolve_destination(dest: Any) -> type[ColorBase]:
    if isinstance(dest, type):
        return dest
    if isinstance(dest, (ColorSpace, str)):
        from ..colors.color import get_color_class
        return get_color_class(dest)
    raise TypeError(f"Cannot convert to {dest!r}; expected a color class or a color space name")


def _source_backing(src: ColorBase) -> Backing:
    # HexRgb carries no backing parameter; it is 8-bit sRGB
    return src.backing if src.backing is not None else U8


def convert(src: ColorBase, dest: Any, backing: Optional[Any] = None) -> ColorBase:
    """
    Convert a color value to another color space.

    Args:
        src: Source color (any specialised color value, or an AlphaColor)
        dest: Destination color class (generic or specialised), ColorSpace or space name
        backing: Backing of the result. Defaults to the backing of a specialised
            ``dest``; otherwise a direct edge keeps its natural output and the hub
            route keeps the source backing when the destination allows it.

    Returns:
        The converted color value.

    Raises:
        ColorInterfaceError: if either type lacks ``to_xyz``/``from_xyz``
        InvalidBackingError: if the destination does not accept the requested backing,
            or takes no backing at all (HexRgb)
    """
    from ..colors.color import AlphaColor
    if isinstance(src, AlphaColor):
        return AlphaColor(convert(src.color, dest, backing), src.alpha)

    target = _resolve_destination(dest)
    assert_color_interface(type(src))
    assert_color_interface(target)

    requested = Backing.from_type(backing) if backing is not None else target.backing
    if not target.generic and requested is not None:
        raise InvalidBackingError(f"{target.__name__} is not parameterised by a backing type")
    if requested is not None and target.backing is not None and requested is not target.backing:
        target = target.generic_class()[requested]

    # same space: a backing change at most
    if src.space is target.space:
        if requested is None or requested is src.backing:
            return src
        return src.cast(requested)

    edge = DIRECT_EDGES.get((src.space, target.space))
    if edge is not None:
        result = edge(src)
        if requested is not None and result.backing is not requested:
            result = result.cast(requested)
        return result

    if target.generic and target.backing is None:
        source = _source_backing(src)
        if requested is None:
            requested = source if source in target.allowed_backings else float_for(source)
        target = target[requested]
    return target.from_xyz(src.to_xyz())
