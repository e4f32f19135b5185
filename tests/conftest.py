"""
Pytest configuration and fixtures for imgkernel tests
"""

import numpy as np
import pytest

from imgkernel.config import reset_settings
from imgkernel.core.buffer import PixelBuffer


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from IMGKERNEL_* variables and cached settings"""
    import os

    for name in list(os.environ):
        if name.startswith("IMGKERNEL_"):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def grid_image():
    """3x3 single-channel image holding 1..9 in row-major order"""
    im = PixelBuffer(3, 3, 1)
    im.fill_from([1, 2, 3, 4, 5, 6, 7, 8, 9])
    return im


@pytest.fixture
def rng():
    """Deterministic random generator"""
    return np.random.default_rng(1234)


@pytest.fixture
def rgb_image(rng):
    """Random 6x5 RGB image with samples in [0, 1)"""
    return PixelBuffer.from_planar(rng.random((3, 5, 6)))


@pytest.fixture
def step_image():
    """5x5 single-channel vertical step: 0 for x < 2, 1 for x >= 2"""
    im = PixelBuffer(5, 5, 1)
    im.planes[0, :, 2:] = 1.0
    return im
