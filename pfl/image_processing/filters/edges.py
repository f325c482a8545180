# -*- coding: utf-8 -*-
"""
Edge Filters - Neighbour-difference contour marking.

``ContourFilter`` compares each pixel with its four edge-clamped axis
neighbours (left, right, up, down). If any neighbour differs from the
centre by more than ``threshold`` in any channel, the pixel is painted
with the marker colour; otherwise it passes through unchanged.

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
from typing import Annotated, Sequence

# Third-party
import numpy as np

# PFL internal
from pfl.image_processing.base import PixelFilter
from pfl.image_processing.params import Desc, Range
from pfl.image_processing.raster import Pixel, clamp, get_pixel, raster_size
from pfl.image_processing.versioning import processor_tags, processor_version
from pfl.image_processing.filters._validation import validate_color, validate_radius
from pfl.vocabulary import ProcessorCategory

EDGE_MARKER: Pixel = (0, 0, 255)


def _differs(a: Pixel, b: Pixel, threshold: int) -> bool:
    return any(abs(ca - cb) > threshold for ca, cb in zip(a, b))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.EDGES,
                description='Mark pixels that differ from a neighbour')
class ContourFilter(PixelFilter):
    """Paint contour pixels in a marker colour.

    Parameters
    ----------
    threshold : int
        Largest per-channel difference still treated as "same colour".
        Default 10.
    marker : Sequence[int]
        ``(R, G, B)`` colour for contour pixels. Default blue
        ``(0, 0, 255)``.

    Raises
    ------
    ValidationError
        If ``threshold`` is negative or ``marker`` is not a valid colour.
    """

    threshold: Annotated[int, Range(min=0, max=255),
                         Desc('Per-channel difference threshold')] = 10

    def __init__(self, threshold: int = 10, marker: Sequence[int] = EDGE_MARKER) -> None:
        validate_radius(threshold, name='threshold')
        self.threshold = threshold
        self.marker = validate_color(marker, name='marker')

    def compute_pixel(self, source: np.ndarray, x: int, y: int) -> Pixel:
        width, height = raster_size(source)
        centre = get_pixel(source, x, y)
        neighbours = (
            get_pixel(source, clamp(x - 1, 0, width - 1), y),
            get_pixel(source, clamp(x + 1, 0, width - 1), y),
            get_pixel(source, x, clamp(y - 1, 0, height - 1)),
            get_pixel(source, x, clamp(y + 1, 0, height - 1)),
        )
        if any(_differs(centre, n, self.threshold) for n in neighbours):
            return self.marker
        return centre

    def _compute_column(self, source: np.ndarray, x: int) -> np.ndarray:
        width, height = raster_size(source)
        centre = source[:, x].astype(np.int16)
        rows = np.arange(height)
        up_rows = np.clip(rows - 1, 0, height - 1)
        down_rows = np.clip(rows + 1, 0, height - 1)
        neighbours = (
            source[:, clamp(x - 1, 0, width - 1)].astype(np.int16),
            source[:, clamp(x + 1, 0, width - 1)].astype(np.int16),
            centre[up_rows],
            centre[down_rows],
        )
        edge = np.zeros(height, dtype=bool)
        for n in neighbours:
            edge |= np.any(np.abs(centre - n) > self.threshold, axis=1)
        out = source[:, x].copy()
        out[edge] = self.marker
        return out

    def __repr__(self) -> str:
        return f"ContourFilter(threshold={self.threshold!r}, marker={self.marker!r})"
