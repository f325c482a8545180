# -*- coding: utf-8 -*-
"""
Pipeline Tests.

Tests for sequential filter composition, progress sub-ranges across steps,
and cancellation of a later step.

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

from pfl.exceptions import ValidationError
from pfl.image_processing.base import Cancelled, Completed
from pfl.image_processing.filters import (
    BrightnessFilter,
    ContrastFilter,
    GrayscaleFilter,
    NegativeFilter,
)
from pfl.image_processing.pipeline import Pipeline
from pfl.image_processing.progress import ProgressRecorder


class TestPipeline:
    """Test Pipeline composition."""

    def test_double_negative_is_identity(self, random_image):
        pipe = Pipeline([NegativeFilter(), NegativeFilter()])
        np.testing.assert_array_equal(pipe.apply(random_image), random_image)

    def test_applies_in_order(self, random_image):
        pipe = Pipeline([BrightnessFilter(50), GrayscaleFilter()])
        expected = GrayscaleFilter().apply(BrightnessFilter(50).apply(random_image))
        np.testing.assert_array_equal(pipe.apply(random_image), expected)

    def test_single_step(self, random_image):
        out = Pipeline([NegativeFilter()]).apply(random_image)
        np.testing.assert_array_equal(out, 255 - random_image)

    def test_progress_split_between_steps(self):
        img = np.zeros((2, 10, 3), dtype=np.uint8)
        sink = ProgressRecorder()
        Pipeline([NegativeFilter(), NegativeFilter()]).process_image(img, sink)
        assert sink.values == list(range(0, 50, 5)) + list(range(50, 100, 5))

    def test_progress_monotonic_with_global_step(self, random_image):
        sink = ProgressRecorder()
        Pipeline([ContrastFilter(1.5), GrayscaleFilter(), NegativeFilter()]).process_image(
            random_image, sink, max_percent=90, offset=10
        )
        assert sink.is_monotonic
        assert min(sink.values) >= 10
        assert max(sink.values) <= 100

    def test_cancel_in_second_step(self, random_image):
        before = random_image.copy()
        width = random_image.shape[1]
        sink = ProgressRecorder(cancel_after=width + 1)
        outcome = Pipeline([NegativeFilter(), NegativeFilter()]).process_image(
            random_image, sink
        )
        assert isinstance(outcome, Cancelled)
        np.testing.assert_array_equal(random_image, before)

    def test_completed_outcome(self, flat_image):
        outcome = Pipeline([NegativeFilter()]).process_image(flat_image)
        assert isinstance(outcome, Completed)

    def test_steps_and_len(self):
        steps = [NegativeFilter(), GrayscaleFilter()]
        pipe = Pipeline(steps)
        assert len(pipe) == 2
        assert pipe.steps == steps
        assert pipe.steps is not steps

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            Pipeline([])

    def test_non_filter_rejected(self):
        with pytest.raises(TypeError):
            Pipeline([NegativeFilter(), 'blur'])
