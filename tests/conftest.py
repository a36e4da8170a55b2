# -*- coding: utf-8 -*-
"""
Shared fixtures for the pixelhood test suite.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(20261019)


@pytest.fixture
def random_rgb(rng):
    """Random ``(9, 11, 3)`` uint8 RGB image."""
    return rng.integers(0, 256, size=(9, 11, 3), dtype=np.uint8)


@pytest.fixture
def make_gray():
    """Build a gray RGB image (R = G = B) from a 2D sequence of levels."""
    def _make(levels):
        plane = np.asarray(levels, dtype=np.uint8)
        return np.repeat(plane[..., np.newaxis], 3, axis=-1)
    return _make


@pytest.fixture
def vertical_edge(make_gray):
    """5x6 gray image: bright (200) columns 0-2, dark (0) columns 3-5."""
    levels = np.zeros((5, 6), dtype=np.uint8)
    levels[:, :3] = 200
    return make_gray(levels)
