# -*- coding: utf-8 -*-
"""
Filter Runner - Single-flight background execution of filters.

``FilterRunner`` owns the current image and runs one filter invocation at
a time on a dedicated worker thread. A second ``start`` while an
invocation is in flight raises ``ProcessorBusyError``; invocations never
overlap on the same image state.

Each invocation gets a fresh ``CancellationToken``; ``cancel()`` sets it
and the traversal stops at its next column boundary. A ``Completed``
outcome replaces the runner's image (the replaced image and the filter are
kept as ``previous_image`` / ``last_filter``); a ``Cancelled`` outcome
leaves the runner's state exactly as it was.

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

# Standard library
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

# Third-party
import numpy as np

# PFL internal
from pfl.exceptions import ProcessorBusyError, ProcessorError
from pfl.image_processing.base import Filter, FilterOutcome
from pfl.image_processing.progress import CallbackProgress, CancellationToken
from pfl.image_processing.raster import as_raster

logger = logging.getLogger(__name__)


class FilterRunner:
    """Run filters one at a time against an owned image.

    Parameters
    ----------
    image : np.ndarray, optional
        Initial raster, shape ``(rows, cols, 3)``.
    progress_callback : Callable[[int], None], optional
        Receives every progress percentage, on the worker thread.

    Examples
    --------
    >>> with FilterRunner(image) as runner:
    ...     outcome = runner.start(GaussianFilter()).result()
    ...     blurred = runner.image
    """

    def __init__(
        self,
        image: Optional[np.ndarray] = None,
        progress_callback: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.progress_callback = progress_callback
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix='pfl-filter'
        )
        self._lock = threading.Lock()
        self._future: Optional[Future] = None
        self._token: Optional[CancellationToken] = None
        self._image = as_raster(image) if image is not None else None
        self._previous: Optional[np.ndarray] = None
        self._last_filter: Optional[Filter] = None

    # -----------------------------------------------------------------
    # State
    # -----------------------------------------------------------------
    @property
    def image(self) -> Optional[np.ndarray]:
        """The current raster, or ``None`` before one is loaded."""
        with self._lock:
            return self._image

    @property
    def previous_image(self) -> Optional[np.ndarray]:
        """The raster replaced by the last load or completed invocation."""
        with self._lock:
            return self._previous

    @property
    def last_filter(self) -> Optional[Filter]:
        """The filter of the last completed invocation."""
        with self._lock:
            return self._last_filter

    @property
    def busy(self) -> bool:
        """Whether an invocation is in flight."""
        with self._lock:
            return self._busy_locked()

    def _busy_locked(self) -> bool:
        return self._future is not None and not self._future.done()

    def load(self, image: np.ndarray) -> None:
        """Replace the current raster, keeping the old one as ``previous_image``.

        Raises
        ------
        ProcessorBusyError
            If an invocation is in flight.
        """
        raster = as_raster(image)
        with self._lock:
            if self._busy_locked():
                raise ProcessorBusyError("cannot load an image while a filter is running")
            self._previous = self._image
            self._image = raster

    def undo(self) -> None:
        """Restore ``previous_image`` as the current raster (single level).

        Raises
        ------
        ProcessorBusyError
            If an invocation is in flight.
        ProcessorError
            If there is nothing to restore.
        """
        with self._lock:
            if self._busy_locked():
                raise ProcessorBusyError("cannot undo while a filter is running")
            if self._previous is None:
                raise ProcessorError("nothing to undo")
            self._image = self._previous
            self._previous = None

    # -----------------------------------------------------------------
    # Execution
    # -----------------------------------------------------------------
    def start(self, filter: Filter) -> 'Future[FilterOutcome]':
        """Run *filter* on the current image in the background.

        Returns
        -------
        concurrent.futures.Future
            Resolves to the invocation's ``FilterOutcome``. Exceptions raised
            by the filter propagate through ``Future.result()``.

        Raises
        ------
        ProcessorBusyError
            If an invocation is already in flight.
        ProcessorError
            If no image is loaded.
        """
        if not isinstance(filter, Filter):
            raise TypeError(f"expected a Filter, got {type(filter).__name__}")
        with self._lock:
            if self._busy_locked():
                raise ProcessorBusyError(
                    f"cannot start {type(filter).__name__}: "
                    f"another filter is running"
                )
            if self._image is None:
                raise ProcessorError("no image loaded")
            token = CancellationToken()
            sink = CallbackProgress(self.progress_callback, token)
            self._token = token
            logger.debug("Starting %r", filter)
            self._future = self._executor.submit(
                self._run, filter, self._image, sink
            )
            return self._future

    def repeat(self) -> 'Future[FilterOutcome]':
        """Run ``last_filter`` again on the current image.

        Raises
        ------
        ProcessorError
            If no invocation has completed yet.
        """
        last = self.last_filter
        if last is None:
            raise ProcessorError("no filter to repeat")
        return self.start(last)

    def cancel(self) -> None:
        """Ask the in-flight invocation, if any, to stop."""
        with self._lock:
            if self._token is not None and self._busy_locked():
                self._token.cancel()

    def _run(
        self, filter: Filter, source: np.ndarray, sink: CallbackProgress
    ) -> FilterOutcome:
        outcome = filter.process_image(source, sink)
        if outcome.cancelled:
            logger.info("%s cancelled; image unchanged", type(filter).__name__)
            return outcome
        with self._lock:
            self._previous = self._image
            self._image = outcome.raster
            self._last_filter = filter
        return outcome

    # -----------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------
    def shutdown(self, wait: bool = True) -> None:
        """Cancel any in-flight invocation and stop the worker thread."""
        self.cancel()
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> 'FilterRunner':
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()
