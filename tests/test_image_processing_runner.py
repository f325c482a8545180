# -*- coding: utf-8 -*-
"""
Filter Runner Tests.

Tests for single-flight background execution: commit on completion,
rejection of overlapping starts, cancellation leaving the image intact,
single-level undo, and repeat.

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

import threading

import numpy as np
import pytest

from pfl.exceptions import ProcessorBusyError, ProcessorError
from pfl.image_processing.base import Cancelled, Completed, Filter
from pfl.image_processing.filters import NegativeFilter
from pfl.image_processing.runner import FilterRunner
from pfl.image_processing.versioning import processor_version

TIMEOUT = 10


@processor_version('0.0.1')
class _GatedFilter(Filter):
    """Blocks until released, then honours any pending cancellation."""

    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()

    def process_image(self, source, progress=None, max_percent=100, offset=0):
        self.started.set()
        self.release.wait(TIMEOUT)
        progress.report_progress(offset)
        if progress.cancellation_requested():
            return Cancelled()
        return Completed(255 - source)


@pytest.fixture
def runner(random_image):
    r = FilterRunner(random_image)
    yield r
    r.shutdown()


class TestFilterRunner:
    """Test FilterRunner execution and state."""

    def test_completed_replaces_image(self, runner, random_image):
        neg = NegativeFilter()
        outcome = runner.start(neg).result(TIMEOUT)
        assert isinstance(outcome, Completed)
        np.testing.assert_array_equal(runner.image, 255 - random_image)
        assert runner.previous_image is random_image
        assert runner.last_filter is neg
        assert not runner.busy

    def test_progress_callback(self, random_image):
        seen = []
        with FilterRunner(random_image, progress_callback=seen.append) as r:
            r.start(NegativeFilter()).result(TIMEOUT)
        assert len(seen) == random_image.shape[1]
        assert seen[0] == 0
        assert seen == sorted(seen)

    def test_second_start_rejected_while_busy(self, runner, random_image):
        gated = _GatedFilter()
        future = runner.start(gated)
        assert gated.started.wait(TIMEOUT)
        assert runner.busy
        with pytest.raises(ProcessorBusyError):
            runner.start(NegativeFilter())
        gated.release.set()
        assert isinstance(future.result(TIMEOUT), Completed)
        np.testing.assert_array_equal(runner.image, 255 - random_image)

    def test_cancel_leaves_image_unchanged(self, runner, random_image):
        gated = _GatedFilter()
        future = runner.start(gated)
        assert gated.started.wait(TIMEOUT)
        runner.cancel()
        gated.release.set()
        assert isinstance(future.result(TIMEOUT), Cancelled)
        assert runner.image is random_image
        assert runner.previous_image is None
        assert runner.last_filter is None

    def test_load_and_undo_rejected_while_busy(self, runner, random_image):
        gated = _GatedFilter()
        future = runner.start(gated)
        assert gated.started.wait(TIMEOUT)
        with pytest.raises(ProcessorBusyError):
            runner.load(random_image)
        with pytest.raises(ProcessorBusyError):
            runner.undo()
        gated.release.set()
        future.result(TIMEOUT)

    def test_cancel_when_idle_is_noop(self, runner):
        runner.cancel()
        assert isinstance(runner.start(NegativeFilter()).result(TIMEOUT), Completed)

    def test_no_image_rejected(self):
        with FilterRunner() as r:
            with pytest.raises(ProcessorError):
                r.start(NegativeFilter())

    def test_non_filter_rejected(self, runner):
        with pytest.raises(TypeError):
            runner.start('negative')

    def test_busy_error_is_processor_error(self):
        assert issubclass(ProcessorBusyError, ProcessorError)


class TestUndoRepeat:
    """Test single-level undo, load and repeat."""

    def test_undo_restores_previous(self, runner, random_image):
        runner.start(NegativeFilter()).result(TIMEOUT)
        runner.undo()
        assert runner.image is random_image
        with pytest.raises(ProcessorError):
            runner.undo()

    def test_undo_without_history(self, runner):
        with pytest.raises(ProcessorError):
            runner.undo()

    def test_load_keeps_previous(self, runner, random_image, flat_image):
        runner.load(flat_image)
        assert runner.image is flat_image
        assert runner.previous_image is random_image

    def test_repeat_reapplies_last_filter(self, runner, random_image):
        runner.start(NegativeFilter()).result(TIMEOUT)
        runner.repeat().result(TIMEOUT)
        np.testing.assert_array_equal(runner.image, random_image)

    def test_repeat_without_history(self, runner):
        with pytest.raises(ProcessorError):
            runner.repeat()
