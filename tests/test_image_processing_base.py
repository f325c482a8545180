# -*- coding: utf-8 -*-
"""
Filter Contract Tests.

Tests for the dense traversal shared by ``PixelFilter`` subclasses:
outcomes, progress reporting, progress sub-ranges, cancellation, and the
``ImageProcessor`` version warning and parameter validation hooks.

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

import logging
import warnings

import numpy as np
import pytest

from pfl.exceptions import ProcessorError, ValidationError
from pfl.image_processing.base import (
    Cancelled,
    Completed,
    Filter,
    ImageProcessor,
    PixelFilter,
)
from pfl.image_processing.filters import (
    GaussianFilter,
    NegativeFilter,
    NoiseLinesFilter,
)
from pfl.image_processing.filters.statistical import ContrastFilter
from pfl.image_processing.progress import ProgressRecorder
from pfl.image_processing.raster import get_pixel
from pfl.image_processing.versioning import processor_version
from pfl.vocabulary import TraversalKind


@processor_version('0.0.1')
class _Identity(PixelFilter):
    def compute_pixel(self, source, x, y):
        return get_pixel(source, x, y)


@processor_version('0.0.1')
class _AlwaysCancelled(Filter):
    def process_image(self, source, progress=None, max_percent=100, offset=0):
        return Cancelled()


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

class TestOutcomes:
    """Test the Completed / Cancelled outcome types."""

    def test_completed_carries_raster(self):
        """Completed exposes its raster and is not cancelled."""
        raster = np.zeros((2, 2, 3), dtype=np.uint8)
        outcome = Completed(raster)
        assert outcome.raster is raster
        assert outcome.cancelled is False

    def test_cancelled_carries_nothing(self):
        """Cancelled has no raster."""
        outcome = Cancelled()
        assert outcome.cancelled is True
        assert outcome.raster is None

    def test_cancelled_instances_equal(self):
        """Cancelled is a value with no fields."""
        assert Cancelled() == Cancelled()


# ---------------------------------------------------------------------------
# Dense traversal
# ---------------------------------------------------------------------------

class TestDenseTraversal:
    """Test PixelFilter.process_image over whole rasters."""

    def test_identity_copies_source(self, random_image):
        """Output equals the source but is a new array."""
        outcome = _Identity().process_image(random_image)
        assert isinstance(outcome, Completed)
        np.testing.assert_array_equal(outcome.raster, random_image)
        assert outcome.raster is not random_image
        assert not np.shares_memory(outcome.raster, random_image)

    def test_output_shape_and_dtype(self, random_image):
        """Output matches the source shape and is uint8."""
        raster = NegativeFilter().process_image(random_image).raster
        assert raster.shape == random_image.shape
        assert raster.dtype == np.uint8

    def test_source_not_mutated(self, random_image):
        """The source raster is left untouched."""
        before = random_image.copy()
        NegativeFilter().process_image(random_image)
        np.testing.assert_array_equal(random_image, before)

    def test_single_pixel_raster(self):
        """A 1x1 raster is a valid input."""
        img = np.array([[[1, 2, 3]]], dtype=np.uint8)
        out = NegativeFilter().apply(img)
        np.testing.assert_array_equal(out, [[[254, 253, 252]]])

    def test_other_integer_dtype_accepted(self):
        """Integer rasters in range are converted to uint8."""
        img = np.full((2, 3, 3), 200, dtype=np.int32)
        out = NegativeFilter().apply(img)
        assert out.dtype == np.uint8
        assert np.all(out == 55)

    def test_invalid_source_rejected(self):
        """Non-RGB input raises ValidationError."""
        with pytest.raises(ValidationError):
            NegativeFilter().process_image(np.zeros((4, 4), dtype=np.uint8))

    def test_apply_returns_raster(self, random_image):
        """apply() unwraps Completed."""
        out = NegativeFilter().apply(random_image)
        np.testing.assert_array_equal(out, 255 - random_image)

    def test_apply_raises_when_cancelled(self, flat_image):
        """apply() turns a Cancelled outcome into ProcessorError."""
        with pytest.raises(ProcessorError):
            _AlwaysCancelled().apply(flat_image)

    def test_traversal_kinds(self):
        """Each filter family declares how it traverses."""
        assert NegativeFilter.__traversal__ is TraversalKind.DENSE
        assert ContrastFilter.__traversal__ is TraversalKind.GLOBAL
        assert NoiseLinesFilter.__traversal__ is TraversalKind.FULL_RASTER


# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------

class TestProgress:
    """Test progress reporting from the dense traversal."""

    def test_one_report_per_column(self):
        """Width 10 reports 0, 10, ..., 90."""
        img = np.zeros((3, 10, 3), dtype=np.uint8)
        sink = ProgressRecorder()
        NegativeFilter().process_image(img, sink)
        assert sink.values == list(range(0, 100, 10))
        assert sink.polls == 10

    def test_monotonic_and_bounded(self, random_image):
        """Values never decrease and stay in [0, 100]."""
        sink = ProgressRecorder()
        GaussianFilter(radius=1).process_image(random_image, sink)
        assert sink.is_monotonic
        assert min(sink.values) >= 0
        assert max(sink.values) <= 100

    def test_sub_range(self):
        """max_percent and offset shift every value into the sub-range."""
        img = np.zeros((2, 10, 3), dtype=np.uint8)
        sink = ProgressRecorder()
        NegativeFilter().process_image(img, sink, max_percent=50, offset=25)
        assert sink.values == [25 + 5 * x for x in range(10)]
        assert all(25 <= v <= 75 for v in sink.values)

    def test_zero_width_range(self):
        """max_percent=0 reports the offset throughout."""
        img = np.zeros((2, 4, 3), dtype=np.uint8)
        sink = ProgressRecorder()
        NegativeFilter().process_image(img, sink, max_percent=0, offset=40)
        assert sink.values == [40, 40, 40, 40]

    @pytest.mark.parametrize('max_percent, offset', [
        (-1, 0),
        (50, -1),
        (80, 30),
        (101, 0),
    ])
    def test_invalid_range_rejected(self, flat_image, max_percent, offset):
        """A sub-range outside [0, 100] raises ValidationError."""
        with pytest.raises(ValidationError):
            NegativeFilter().process_image(
                flat_image, ProgressRecorder(), max_percent, offset
            )


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------

class TestCancellation:
    """Test cooperative cancellation of the dense traversal."""

    def test_cancel_before_start(self, random_image):
        """A sink that is already cancelled yields Cancelled at column 0."""
        before = random_image.copy()
        sink = ProgressRecorder(cancel_after=0)
        outcome = NegativeFilter().process_image(random_image, sink)
        assert isinstance(outcome, Cancelled)
        assert outcome.raster is None
        assert sink.polls == 1
        assert sink.values == [0]
        np.testing.assert_array_equal(random_image, before)

    def test_cancel_mid_traversal(self):
        """Cancellation stops before the next column."""
        img = np.zeros((2, 10, 3), dtype=np.uint8)
        sink = ProgressRecorder(cancel_after=3)
        outcome = NegativeFilter().process_image(img, sink)
        assert outcome.cancelled
        assert sink.polls == 4
        assert sink.values == [0, 10, 20, 30]

    def test_cancel_is_logged(self, random_image, caplog):
        """Cancellation is logged at INFO."""
        with caplog.at_level(logging.INFO, logger='pfl.image_processing.base'):
            NegativeFilter().process_image(
                random_image, ProgressRecorder(cancel_after=2)
            )
        assert any('cancelled' in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# ImageProcessor hooks
# ---------------------------------------------------------------------------

class TestImageProcessorHooks:
    """Test the version warning and declared-parameter validation."""

    def test_missing_version_warns_once(self):
        """An unversioned concrete class warns on first instantiation only."""
        class _Unversioned(PixelFilter):
            def compute_pixel(self, source, x, y):
                return (0, 0, 0)

        with pytest.warns(UserWarning, match='processor version'):
            _Unversioned()
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            _Unversioned()

    def test_versioned_class_does_not_warn(self):
        """A class with @processor_version is silent."""
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            _Identity()

    def test_declared_param_validated(self):
        """An out-of-range declared parameter raises ValidationError."""
        with pytest.raises(ValidationError):
            GaussianFilter(radius=51)

    def test_declared_param_type_checked(self):
        """A wrongly typed declared parameter raises TypeError."""
        with pytest.raises(TypeError):
            GaussianFilter(radius=1, sigma='wide')

    def test_inherited_init_still_validates(self):
        """A subclass without its own __init__ is validated too."""
        @processor_version('0.0.1')
        class _Softer(GaussianFilter):
            pass

        assert _Softer(radius=1).radius == 1
        with pytest.raises(ValidationError):
            _Softer(radius=60)

    def test_params_property(self):
        """params reports every declared parameter by name."""
        assert GaussianFilter(radius=2, sigma=1.5).params == {
            'radius': 2, 'sigma': 1.5,
        }

    def test_repr_lists_params(self):
        """repr of a declared-parameter filter names its values."""
        assert repr(ContrastFilter(2.0)) == 'ContrastFilter(amount=2.0)'

    def test_is_image_processor(self):
        """Every filter is an ImageProcessor."""
        assert isinstance(NegativeFilter(), ImageProcessor)
