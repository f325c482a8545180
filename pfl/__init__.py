# -*- coding: utf-8 -*-
"""
PFL - Pixel Filter Library.

Pixel-level filters over 8-bit RGB rasters held as numpy arrays: pointwise
colour maps, kernel convolution, median, contrast about the global mean,
procedural noise, and contour marking, all sharing one traversal with
progress reporting and cooperative cancellation.

Dependencies
------------
numpy
scipy

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

__version__ = "0.1.0"

from pfl.exceptions import (
    PflError,
    ValidationError,
    ProcessorError,
    ProcessorBusyError,
)
from pfl.vocabulary import ProcessorCategory, TraversalKind

__all__ = [
    'PflError',
    'ValidationError',
    'ProcessorError',
    'ProcessorBusyError',
    'ProcessorCategory',
    'TraversalKind',
]
