"""Exception and warning types raised by chromashift."""


class InvalidBackingError(TypeError):
    """A color type was specialised with a numeric backing it does not accept."""


class ColorInterfaceError(TypeError):
    """A type lacks the ``to_xyz``/``from_xyz`` pair required for conversion."""


class InvalidHexStringError(ValueError):
    """A hex color string is not six hex digits with an optional leading ``#``."""


class OutOfRangeError(ValueError):
    """A numeric parameter fell outside its documented range."""


class ClampWarning(UserWarning):
    """A float channel had to be clamped while casting to 8-bit."""
