# -*- coding: utf-8 -*-
"""
Rank Filters - Per-channel median over an edge-clamped square window.

``MedianFilter`` replaces every channel of every pixel with the median of
that channel over the ``(2r + 1) x (2r + 1)`` neighbourhood. Channels are
ranked independently (not a joint vector median). The window always holds
an odd number of samples, so the median is the element at index
``size // 2`` of the sorted samples.

The dense traversal evaluates one output column at a time with
``scipy.ndimage.median_filter`` over a slab of edge-clamped columns.

Dependencies
------------
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

# Standard library
from typing import Annotated

# Third-party
import numpy as np
from scipy.ndimage import median_filter

# PFL internal
from pfl.image_processing.base import PixelFilter
from pfl.image_processing.params import Desc, Range
from pfl.image_processing.raster import Pixel, clamp, raster_size
from pfl.image_processing.versioning import processor_tags, processor_version
from pfl.image_processing.filters._validation import validate_radius
from pfl.image_processing.filters.linear import clamped_columns
from pfl.vocabulary import ProcessorCategory


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.RANK,
                description='Per-channel median')
class MedianFilter(PixelFilter):
    """Spatial median filter for salt-and-pepper noise removal.

    Parameters
    ----------
    radius : int
        Window half-width; the window is ``2 * radius + 1`` square.
        ``0`` is the identity. Default 1.

    Raises
    ------
    ValidationError
        If ``radius`` is not a non-negative integer.

    Examples
    --------
    >>> from pfl.image_processing.filters import MedianFilter
    >>> denoised = MedianFilter(radius=2).apply(noisy)
    """

    radius: Annotated[int, Range(min=0, max=50), Desc('Window half-width')] = 1

    def __init__(self, radius: int = 1) -> None:
        validate_radius(radius)
        self.radius = radius

    @property
    def window_size(self) -> int:
        """Number of samples per channel, ``(2r + 1)^2``."""
        side = 2 * self.radius + 1
        return side * side

    def compute_pixel(self, source: np.ndarray, x: int, y: int) -> Pixel:
        width, height = raster_size(source)
        r = self.radius
        reds, greens, blues = [], [], []
        for l in range(-r, r + 1):
            sy = clamp(y + l, 0, height - 1)
            for k in range(-r, r + 1):
                sx = clamp(x + k, 0, width - 1)
                pr, pg, pb = source[sy, sx]
                reds.append(int(pr))
                greens.append(int(pg))
                blues.append(int(pb))
        mid = self.window_size // 2
        return sorted(reds)[mid], sorted(greens)[mid], sorted(blues)[mid]

    def _compute_column(self, source: np.ndarray, x: int) -> np.ndarray:
        r = self.radius
        side = 2 * r + 1
        slab = source[:, clamped_columns(x, r, source.shape[1])]
        ranked = median_filter(slab, size=(side, side, 1), mode='nearest')
        return ranked[:, r]
