"""Contract checks run when color types are defined, specialised and converted."""
from __future__ import annotations
from typing import Any, Iterable
from .errors import ColorInterfaceError, InvalidBackingError
from .types.backing import Backing, FLOAT_BACKINGS, RGB_BACKINGS
from .types.color_types import ColorSpace


def _backing_names(allowed: Iterable[Backing]) -> str:
    return ", ".join(sorted(b.value for b in allowed))


def assert_backing(owner: str, backing: Any, allowed: Iterable[Backing]) -> Backing:
    """
    Resolve ``backing`` and check it is one of ``allowed``.

    Args:
        owner: Name of the type being specialised, used in the error message
        backing: Anything accepted by ``Backing.from_type``
        allowed: Permitted backings

    Returns:
        The resolved Backing.

    Raises:
        InvalidBackingError: naming the rejected type
    """
    resolved = Backing.from_type(backing)
    allowed = frozenset(allowed)
    if resolved not in allowed:
        raise InvalidBackingError(
            f"{owner} value type must be one of: {_backing_names(allowed)} (got {resolved.value})"
        )
    return resolved


def assert_rgb_backing(backing: Any) -> Backing:
    return assert_backing("RGB", backing, RGB_BACKINGS)


def assert_float_backing(backing: Any) -> Backing:
    return assert_backing("Float", backing, FLOAT_BACKINGS)


def has_color_interface(color_type: type) -> bool:
    if getattr(color_type, "space", None) is ColorSpace.XYZ:
        return True
    return callable(getattr(color_type, "to_xyz", None)) and callable(getattr(color_type, "from_xyz", None))


def assert_color_interface(color_type: type) -> None:
    """
    Require ``to_xyz``/``from_xyz`` on a color type (XYZ itself is exempt).

    Raises:
        ColorInterfaceError: if either method is missing
    """
    if getattr(color_type, "space", None) is ColorSpace.XYZ:
        return
    for method in ("to_xyz", "from_xyz"):
        if not callable(getattr(color_type, method, None)):
            raise ColorInterfaceError(
                f"{getattr(color_type, '__name__', color_type)!s} must define a `{method}()` method"
            )
