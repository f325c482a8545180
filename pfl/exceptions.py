# -*- coding: utf-8 -*-
"""
PFL Exception Hierarchy - Domain-specific exceptions for pixel filtering.

Lets callers (GUI shells, batch scripts) catch PFL errors distinctly from
Python built-in exceptions. Every PFL exception subclasses both
``PflError`` and the matching built-in so existing ``except ValueError``
handlers keep working.

Cancellation has no exception here: a cancelled
traversal is reported through the ``Cancelled`` outcome, never raised.

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


class PflError(Exception):
    """Base exception for all PFL errors."""


class ValidationError(PflError, ValueError):
    """Invalid raster, kernel, or filter parameter.

    Raised at construction time for contract violations such as a
    non-positive Gaussian sigma, an even kernel dimension, a negative
    radius, or a probability outside ``[0, 1]``; and when a source raster
    is not an ``(rows, cols, 3)`` array of 8-bit values.
    """


class ProcessorError(PflError, RuntimeError):
    """Failure while running a filter invocation."""


class ProcessorBusyError(ProcessorError):
    """A filter invocation was requested while another is in flight.

    Raised by ``FilterRunner.start`` so that two invocations never touch
    the same image state concurrently.
    """
