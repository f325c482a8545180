# -*- coding: utf-8 -*-
"""
Raster Helper Tests.

Tests for ``clamp``, ``clamp_channel`` and ``as_raster`` validation.

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

from pfl.exceptions import PflError, ValidationError
from pfl.image_processing.raster import (
    as_raster,
    clamp,
    clamp_channel,
    get_pixel,
    new_raster,
    raster_size,
)


class TestClamp:
    """Test clamp() and clamp_channel()."""

    @pytest.mark.parametrize('value, expected', [
        (-5, 0), (0, 0), (17, 17), (255, 255), (300, 255),
    ])
    def test_clamp_int(self, value, expected):
        assert clamp(value, 0, 255) == expected

    def test_clamp_float(self):
        assert clamp(1.5, 0.0, 1.0) == 1.0
        assert clamp(-0.5, 0.0, 1.0) == 0.0

    def test_clamp_channel_truncates(self):
        """Fractions are dropped toward zero before clamping."""
        assert clamp_channel(127.9) == 127
        assert clamp_channel(-0.9) == 0
        assert clamp_channel(-12.5) == 0
        assert clamp_channel(255.7) == 255
        assert clamp_channel(400.0) == 255


class TestAsRaster:
    """Test as_raster() validation and conversion."""

    def test_uint8_returned_without_copy(self):
        img = np.zeros((2, 2, 3), dtype=np.uint8)
        assert as_raster(img) is img

    def test_integer_dtype_converted(self):
        img = np.full((2, 2, 3), 255, dtype=np.int64)
        out = as_raster(img)
        assert out.dtype == np.uint8
        assert np.all(out == 255)

    def test_rejects_list(self):
        with pytest.raises(ValidationError):
            as_raster([[[0, 0, 0]]])

    @pytest.mark.parametrize('shape', [(4, 4), (4, 4, 4), (4, 4, 3, 1)])
    def test_rejects_wrong_shape(self, shape):
        with pytest.raises(ValidationError):
            as_raster(np.zeros(shape, dtype=np.uint8))

    def test_rejects_empty(self):
        with pytest.raises(ValidationError):
            as_raster(np.zeros((0, 4, 3), dtype=np.uint8))

    def test_rejects_float(self):
        with pytest.raises(ValidationError):
            as_raster(np.zeros((2, 2, 3), dtype=np.float32))

    def test_rejects_out_of_range(self):
        img = np.zeros((2, 2, 3), dtype=np.int16)
        img[1, 1, 2] = 256
        with pytest.raises(ValidationError):
            as_raster(img)

    def test_validation_error_hierarchy(self):
        """ValidationError is both a PflError and a ValueError."""
        assert issubclass(ValidationError, PflError)
        assert issubclass(ValidationError, ValueError)


class TestRasterAccess:
    """Test size, pixel access and allocation helpers."""

    def test_raster_size_is_width_height(self):
        img = np.zeros((3, 5, 3), dtype=np.uint8)
        assert raster_size(img) == (5, 3)

    def test_get_pixel_is_x_then_y(self):
        img = np.zeros((3, 5, 3), dtype=np.uint8)
        img[2, 4] = (1, 2, 3)
        assert get_pixel(img, 4, 2) == (1, 2, 3)
        assert all(isinstance(c, int) for c in get_pixel(img, 4, 2))

    def test_new_raster_is_black(self):
        img = new_raster(5, 3)
        assert img.shape == (3, 5, 3)
        assert img.dtype == np.uint8
        assert not img.any()
