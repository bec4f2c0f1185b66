from typing import Iterable, Optional


def channels_close(actual: Iterable, expected: Iterable, tol: float) -> bool:
    """Compare channel tuples within ``tol``; ``None`` only matches ``None``."""
    actual, expected = tuple(actual), tuple(expected)
    if len(actual) != len(expected):
        return False
    for a, e in zip(actual, expected):
        if a is None or e is None:
            if a is not e:
                return False
        elif abs(float(a) - float(e)) >= tol:
            return False
    return True


def hue_close(actual: Optional[float], expected: Optional[float], tol: float) -> bool:
    """Compare hues on the circle, so 359.9 and 0.1 are 0.2 apart."""
    if actual is None or expected is None:
        return actual is expected
    diff = abs(float(actual) - float(expected)) % 360
    return min(diff, 360 - diff) < tol
