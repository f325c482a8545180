# -*- coding: utf-8 -*-
"""
Pointwise Filters - Per-pixel colour maps.

Each output pixel depends only on the source pixel at the same position.
All three use the shared dense traversal; ``_compute_column`` evaluates a
whole column with numpy and matches ``compute_pixel`` value-for-value.

- ``NegativeFilter``: ``255 - channel`` (self-inverse)
- ``GrayscaleFilter``: ``trunc(0.299 R + 0.5876 G + 0.114 B)`` on all three
  channels (idempotent)
- ``BrightnessFilter``: ``clamp(channel + amount, 0, 255)``

Dependencies
------------
numpy

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

# PFL internal
from pfl.image_processing.base import PixelFilter
from pfl.image_processing.params import Desc
from pfl.image_processing.raster import Pixel, clamp, clamp_channel, get_pixel
from pfl.image_processing.versioning import processor_tags, processor_version
from pfl.vocabulary import ProcessorCategory

# Green weight is 0.5876, not the Rec. 601 0.587.
LUMA_WEIGHTS = (0.299, 0.5876, 0.114)


def luminance(r: int, g: int, b: int) -> int:
    """Weighted luminance of one pixel, truncated and clamped to ``[0, 255]``."""
    wr, wg, wb = LUMA_WEIGHTS
    return clamp_channel(wr * r + wg * g + wb * b)


def luminance_array(pixels: np.ndarray) -> np.ndarray:
    """Vectorised ``luminance`` over the last axis of *pixels*.

    Parameters
    ----------
    pixels : np.ndarray
        Array of shape ``(..., 3)``.

    Returns
    -------
    np.ndarray
        Integer luminance, shape ``pixels.shape[:-1]``, dtype uint8.
    """
    wr, wg, wb = LUMA_WEIGHTS
    channels = pixels.astype(np.float64)
    lum = wr * channels[..., 0] + wg * channels[..., 1] + wb * channels[..., 2]
    return np.clip(np.trunc(lum), 0, 255).astype(np.uint8)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINTWISE,
                description='Invert every channel')
class NegativeFilter(PixelFilter):
    """Photographic negative: every channel becomes ``255 - channel``.

    Applying the filter twice restores the original raster exactly.

    Examples
    --------
    >>> from pfl.image_processing.filters import NegativeFilter
    >>> inverted = NegativeFilter().apply(image)
    """

    def compute_pixel(self, source: np.ndarray, x: int, y: int) -> Pixel:
        r, g, b = get_pixel(source, x, y)
        return 255 - r, 255 - g, 255 - b

    def _compute_column(self, source: np.ndarray, x: int) -> np.ndarray:
        return 255 - source[:, x]


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINTWISE,
                description='Weighted-luminance grayscale')
class GrayscaleFilter(PixelFilter):
    """Replace each pixel by its weighted luminance on all three channels.

    Luminance is ``trunc(0.299 R + 0.5876 G + 0.114 B)``. A gray pixel
    maps to itself, so a second pass is a no-op.
    """

    def compute_pixel(self, source: np.ndarray, x: int, y: int) -> Pixel:
        lum = luminance(*get_pixel(source, x, y))
        return lum, lum, lum

    def _compute_column(self, source: np.ndarray, x: int) -> np.ndarray:
        lum = luminance_array(source[:, x])
        return np.repeat(lum[:, None], 3, axis=1)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINTWISE,
                description='Add a constant to every channel')
class BrightnessFilter(PixelFilter):
    """Add a constant to every channel, saturating at 0 and 255.

    Parameters
    ----------
    amount : int
        Value added to each channel. Negative values darken; ``0`` is the
        identity. Default 0.

    Examples
    --------
    >>> brighter = BrightnessFilter(40).apply(image)
    >>> darker = BrightnessFilter.darken(40).apply(image)
    """

    amount: Annotated[int, Desc('Value added to every channel')] = 0

    def __init__(self, amount: int = 0) -> None:
        self.amount = amount

    @classmethod
    def darken(cls, amount: int) -> 'BrightnessFilter':
        """Build the filter that subtracts *amount* from every channel."""
        return cls(-amount)

    def compute_pixel(self, source: np.ndarray, x: int, y: int) -> Pixel:
        r, g, b = get_pixel(source, x, y)
        a = self.amount
        return clamp(r + a, 0, 255), clamp(g + a, 0, 255), clamp(b + a, 0, 255)

    def _compute_column(self, source: np.ndarray, x: int) -> np.ndarray:
        shifted = source[:, x].astype(np.int64) + self.amount
        return np.clip(shifted, 0, 255).astype(np.uint8)
