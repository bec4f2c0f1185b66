import warnings

import pytest

from chromashift import ClampWarning


@pytest.fixture
def no_clamp_warnings():
    """Fail the test if any float -> u8 cast clamps."""
    with warnings.catch_warnings():
        warnings.simplefilter("error", ClampWarning)
        yield
