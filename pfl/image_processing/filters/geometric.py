# -*- coding: utf-8 -*-
"""
Geometric Filters - Resampling distortions with edge-clamped lookup.

``WavesFilter`` shifts each row horizontally by a sinusoid of the row
index: output ``(x, y)`` reads source
``(clamp(x + int(amplitude * sin(2 pi y / period)), 0, w - 1), y)``.

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
import math
from typing import Annotated

# Third-party
import numpy as np

# PFL internal
from pfl.exceptions import ValidationError
from pfl.image_processing.base import PixelFilter
from pfl.image_processing.params import Desc, Range
from pfl.image_processing.raster import Pixel, clamp, get_pixel, raster_size
from pfl.image_processing.versioning import processor_tags, processor_version
from pfl.vocabulary import ProcessorCategory


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.DISTORT,
                description='Horizontal sine-wave displacement')
class WavesFilter(PixelFilter):
    """Horizontal wave distortion.

    Parameters
    ----------
    amplitude : float
        Peak horizontal displacement in pixels. Default 20.
    period : float
        Wavelength in rows. Must be positive. Default 30.
    """

    amplitude: Annotated[float, Range(min=0.0), Desc('Peak displacement (px)')] = 20.0
    period: Annotated[float, Desc('Wavelength in rows (> 0)')] = 30.0

    def __init__(self, amplitude: float = 20.0, period: float = 30.0) -> None:
        if isinstance(period, bool) or not isinstance(period, (int, float)) or not period > 0:
            raise ValidationError(f"period must be positive, got {period!r}")
        self.amplitude = amplitude
        self.period = period

    def _shift(self, y: int) -> int:
        return int(self.amplitude * math.sin(2 * math.pi * y / self.period))

    def compute_pixel(self, source: np.ndarray, x: int, y: int) -> Pixel:
        width, _ = raster_size(source)
        return get_pixel(source, clamp(x + self._shift(y), 0, width - 1), y)

    def _compute_column(self, source: np.ndarray, x: int) -> np.ndarray:
        width, height = raster_size(source)
        rows = np.arange(height)
        cols = np.array([clamp(x + self._shift(y), 0, width - 1) for y in rows])
        return source[rows, cols]
