# -*- coding: utf-8 -*-
"""
Progress Reporting - Progress sink protocol and cooperative cancellation.

A traversal reports integer percentages to a *progress sink* and polls it
for cancellation once per column. Any object providing
``report_progress(percent)`` and ``cancellation_requested()`` satisfies
the ``ProgressSink`` protocol; this module supplies the implementations
PFL itself needs:

- ``NullProgress``: ignores progress, never cancels.
- ``CancellationToken``: thread-safe cancel flag backed by
  ``threading.Event``.
- ``CallbackProgress``: forwards percentages to a callable and takes its
  cancel flag from a ``CancellationToken``.
- ``ProgressRecorder``: records every reported value; optionally requests
  cancellation after a given number of polls. Used in tests and for
  headless diagnostics.

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
import threading
from typing import Callable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class ProgressSink(Protocol):
    """Receiver of traversal progress and source of cancellation requests."""

    def report_progress(self, percent: int) -> None:
        """Receive a progress value in ``[0, 100]``."""
        ...

    def cancellation_requested(self) -> bool:
        """Return ``True`` once the caller wants the traversal to stop."""
        ...


class NullProgress:
    """Progress sink that discards progress and never cancels."""

    def report_progress(self, percent: int) -> None:
        pass

    def cancellation_requested(self) -> bool:
        return False


class CancellationToken:
    """Thread-safe, one-way cancellation flag.

    Once ``cancel()`` has been called the token stays cancelled; create a
    new token for the next invocation.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """Whether cancellation has been requested."""
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled!r})"


class CallbackProgress:
    """Progress sink forwarding percentages to a callable.

    Parameters
    ----------
    callback : Callable[[int], None], optional
        Called with each reported percentage. ``None`` discards progress.
    token : CancellationToken, optional
        Cancellation source. A fresh, never-cancelled token is created
        when omitted.
    """

    def __init__(
        self,
        callback: Optional[Callable[[int], None]] = None,
        token: Optional[CancellationToken] = None,
    ) -> None:
        self.callback = callback
        self.token = token if token is not None else CancellationToken()

    def report_progress(self, percent: int) -> None:
        if self.callback is not None:
            self.callback(percent)

    def cancellation_requested(self) -> bool:
        return self.token.cancelled


class ProgressRecorder:
    """Progress sink that keeps every reported value.

    Parameters
    ----------
    cancel_after : int, optional
        Number of cancellation polls answered with ``False`` before every
        later poll answers ``True``. ``0`` cancels on the first poll;
        ``None`` (default) never cancels.

    Attributes
    ----------
    values : List[int]
        Every value passed to ``report_progress``, in order.
    polls : int
        Number of ``cancellation_requested`` calls so far.
    """

    def __init__(self, cancel_after: Optional[int] = None) -> None:
        self.cancel_after = cancel_after
        self.values: List[int] = []
        self.polls = 0

    def report_progress(self, percent: int) -> None:
        self.values.append(percent)

    def cancellation_requested(self) -> bool:
        self.polls += 1
        if self.cancel_after is None:
            return False
        return self.polls > self.cancel_after

    @property
    def is_monotonic(self) -> bool:
        """Whether recorded values never decrease."""
        return all(a <= b for a, b in zip(self.values, self.values[1:]))
