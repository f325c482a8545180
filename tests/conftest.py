# -*- coding: utf-8 -*-
"""
Shared fixtures for the PFL test suite.

Author
------
PFL Contributors

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

import numpy as np
import pytest


@pytest.fixture
def flat_image():
    """3x3 raster with every channel at 128."""
    return np.full((3, 3, 3), 128, dtype=np.uint8)


@pytest.fixture
def random_image():
    """12 rows x 17 columns of seeded random colour."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(12, 17, 3), dtype=np.uint8)


@pytest.fixture
def literal_image():
    """2x2 raster with gray levels 10, 250, 0 and 128."""
    return np.array(
        [[[10, 10, 10], [250, 250, 250]],
         [[0, 0, 0], [128, 128, 128]]],
        dtype=np.uint8,
    )


@pytest.fixture
def step_edge_image():
    """6 rows x 10 columns: columns 0-4 at 20, columns 5-9 at 200."""
    img = np.full((6, 10, 3), 20, dtype=np.uint8)
    img[:, 5:] = 200
    return img


@pytest.fixture
def gradient_image():
    """8 rows x 10 columns, red rising with x, green rising with y."""
    img = np.zeros((8, 10, 3), dtype=np.uint8)
    img[:, :, 0] = (np.arange(10) * 25)[np.newaxis, :]
    img[:, :, 1] = (np.arange(8) * 30)[:, np.newaxis]
    img[:, :, 2] = 77
    return img


@pytest.fixture
def pixelwise():
    """Reference output built by calling ``compute_pixel`` on every pixel."""
    def run(filt, source):
        rows, cols = source.shape[:2]
        out = np.zeros_like(source)
        for x in range(cols):
            for y in range(rows):
                out[y, x] = filt.compute_pixel(source, x, y)
        return out
    return run
