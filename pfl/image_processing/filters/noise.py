# -*- coding: utf-8 -*-
"""
Procedural Noise Filters - Random dots, line segments, and circles.

Every filter owns a ``numpy.random.Generator`` created from its ``seed``
at construction; no generator is shared between filters, so a fixed seed
reproduces the output exactly. The generator advances across
invocations, so re-running one instance yields fresh noise.

- ``NoiseDotsFilter``: pointwise; each pixel becomes white, black, or
  stays as in the source based on one uniform draw.
- ``NoiseLinesFilter``: replaces the traversal; draws random black/white
  straight segments into a copy of the source.
- ``NoiseCirclesFilter``: replaces the traversal; plots 360 points per
  random circle into a copy of the source. Large radii leave gaps
  between plotted points; no anti-aliasing or gap filling is done.

The two drawing filters report progress and poll cancellation once per
outer iteration (per line group, per circle).

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
import logging
import math
from typing import Annotated, Optional

# Third-party
import numpy as np

# PFL internal
from pfl.image_processing.base import (
    Cancelled,
    Completed,
    Filter,
    FilterOutcome,
    PixelFilter,
)
from pfl.image_processing.params import Desc, Range
from pfl.image_processing.progress import NullProgress, ProgressSink
from pfl.image_processing.raster import BLACK, WHITE, Pixel, as_raster, get_pixel, raster_size
from pfl.image_processing.versioning import processor_tags, processor_version
from pfl.image_processing.filters._validation import (
    validate_count,
    validate_exclusive_upper,
    validate_probability,
)
from pfl.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 10
MIN_CIRCLE_RADIUS = 5


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.NOISE,
                description='Salt-and-pepper dots')
class NoiseDotsFilter(PixelFilter):
    """Salt-and-pepper noise from one uniform draw per pixel.

    With ``p`` drawn uniformly from ``[0, 1)``: ``p < p_white`` gives white;
    otherwise ``p + p_black > 1`` gives black; otherwise the source pixel
    is kept. Both tests read the same draw, so black occupies the top
    ``p_black`` of the unit interval.

    Parameters
    ----------
    p_white : float
        Probability of a white pixel. Default 0.02.
    p_black : float
        Probability of a black pixel. Default 0.02.
    seed : int, optional
        Seed for this filter's generator. ``None`` seeds from the OS.

    Raises
    ------
    ValidationError
        If either probability is outside ``[0, 1]``.
    """

    p_white: Annotated[float, Range(min=0.0, max=1.0),
                       Desc('Probability of a white dot')] = 0.02
    p_black: Annotated[float, Range(min=0.0, max=1.0),
                       Desc('Probability of a black dot')] = 0.02

    def __init__(
        self,
        p_white: float = 0.02,
        p_black: float = 0.02,
        seed: Optional[int] = None,
    ) -> None:
        validate_probability(p_white, 'p_white')
        validate_probability(p_black, 'p_black')
        self.p_white = p_white
        self.p_black = p_black
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def compute_pixel(self, source: np.ndarray, x: int, y: int) -> Pixel:
        p = self._rng.random()
        if p < self.p_white:
            return WHITE
        if p + self.p_black > 1:
            return BLACK
        return get_pixel(source, x, y)

    def _compute_column(self, source: np.ndarray, x: int) -> np.ndarray:
        # random(n) yields the same stream as n scalar draws, in row order.
        p = self._rng.random(source.shape[0])
        out = source[:, x].copy()
        white = p < self.p_white
        black = ~white & (p + self.p_black > 1)
        out[white] = WHITE
        out[black] = BLACK
        return out


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.NOISE,
                description='Random black and white line segments')
class NoiseLinesFilter(Filter):
    """Scratch-like noise: random straight segments drawn over the image.

    Draws ``number_of_lines * max_length`` segments (one group of
    ``max_length`` segments per line). Each segment has a uniform start
    pixel, an angle in ``[0, 2 pi)``, a length in ``[10, max_length)``, and
    is black or white with equal probability. Step ``i`` of a segment
    lands on ``(x0 + int(i cos a), y0 + int(i sin a))``; the segment stops
    at its first out-of-bounds step.

    Parameters
    ----------
    number_of_lines : int
        Number of segment groups. Default 50.
    max_length : int
        Exclusive upper bound on segment length, and segments per group.
        Must exceed 10. Default 40.
    seed : int, optional
        Seed for this filter's generator.

    Raises
    ------
    ValidationError
        If ``number_of_lines < 0`` or ``max_length <= 10``.
    """

    number_of_lines: Annotated[int, Range(min=0),
                               Desc('Number of segment groups')] = 50
    max_length: Annotated[int, Range(min=MIN_LINE_LENGTH + 1),
                          Desc('Maximum segment length (exclusive)')] = 40

    def __init__(
        self,
        number_of_lines: int = 50,
        max_length: int = 40,
        seed: Optional[int] = None,
    ) -> None:
        validate_count(number_of_lines, 'number_of_lines')
        validate_exclusive_upper(max_length, MIN_LINE_LENGTH, 'max_length')
        self.number_of_lines = number_of_lines
        self.max_length = max_length
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def segment_count(self) -> int:
        """Total segments drawn per invocation."""
        return self.number_of_lines * self.max_length

    def process_image(
        self,
        source: np.ndarray,
        progress: Optional[ProgressSink] = None,
        max_percent: int = 100,
        offset: int = 0,
    ) -> FilterOutcome:
        source = as_raster(source)
        self._check_progress_range(max_percent, offset)
        sink = progress if progress is not None else NullProgress()

        result = source.copy()
        width, height = raster_size(result)
        rng = self._rng
        for line in range(self.number_of_lines):
            self._report(sink, line, self.number_of_lines, max_percent, offset)
            if sink.cancellation_requested():
                logger.info("NoiseLinesFilter cancelled at line %d/%d",
                            line, self.number_of_lines)
                return Cancelled()
            for _ in range(self.max_length):
                start_x = int(rng.integers(0, width))
                start_y = int(rng.integers(0, height))
                angle = rng.random() * 2 * math.pi
                length = int(rng.integers(MIN_LINE_LENGTH, self.max_length))
                color = BLACK if rng.integers(2) == 0 else WHITE
                draw_segment(result, start_x, start_y, angle, length, color)
        return Completed(result)


def draw_segment(
    raster: np.ndarray,
    start_x: int,
    start_y: int,
    angle: float,
    length: int,
    color: Pixel,
) -> None:
    """Write *color* along a ray in place, stopping at the first step off the raster."""
    width, height = raster_size(raster)
    dx, dy = math.cos(angle), math.sin(angle)
    for i in range(length):
        x = start_x + int(i * dx)
        y = start_y + int(i * dy)
        if not (0 <= x < width and 0 <= y < height):
            break
        raster[y, x] = color


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.NOISE,
                description='Random black and white circles')
class NoiseCirclesFilter(Filter):
    """Random circle outlines drawn over the image.

    For each circle: a uniform centre pixel and a radius in
    ``[5, max_radius)``. A first draw below ``p_white`` makes it white;
    failing that, a second draw below ``p_black`` makes it black; failing
    both the circle is skipped. The outline is 360 points at integer
    degrees, ``(cx + r cos t, cy + r sin t)`` rounded to the nearest pixel;
    points off the raster are skipped.

    Parameters
    ----------
    number_of_circles : int
        Default 1000.
    max_radius : int
        Exclusive upper bound on the radius. Must exceed 5. Default 30.
    p_white : float
        Default 0.5.
    p_black : float
        Default 0.5.
    seed : int, optional
        Seed for this filter's generator.

    Raises
    ------
    ValidationError
        If a count is negative, ``max_radius <= 5``, or a probability is
        outside ``[0, 1]``.
    """

    number_of_circles: Annotated[int, Range(min=0),
                                 Desc('Number of circles')] = 1000
    max_radius: Annotated[int, Range(min=MIN_CIRCLE_RADIUS + 1),
                          Desc('Maximum radius (exclusive)')] = 30
    p_white: Annotated[float, Range(min=0.0, max=1.0),
                       Desc('Probability of a white circle')] = 0.5
    p_black: Annotated[float, Range(min=0.0, max=1.0),
                       Desc('Probability of a black circle')] = 0.5

    def __init__(
        self,
        number_of_circles: int = 1000,
        max_radius: int = 30,
        p_white: float = 0.5,
        p_black: float = 0.5,
        seed: Optional[int] = None,
    ) -> None:
        validate_count(number_of_circles, 'number_of_circles')
        validate_exclusive_upper(max_radius, MIN_CIRCLE_RADIUS, 'max_radius')
        validate_probability(p_white, 'p_white')
        validate_probability(p_black, 'p_black')
        self.number_of_circles = number_of_circles
        self.max_radius = max_radius
        self.p_white = p_white
        self.p_black = p_black
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def _pick_color(self) -> Optional[Pixel]:
        rng = self._rng
        if rng.random() < self.p_white:
            return WHITE
        if rng.random() < self.p_black:
            return BLACK
        return None

    def process_image(
        self,
        source: np.ndarray,
        progress: Optional[ProgressSink] = None,
        max_percent: int = 100,
        offset: int = 0,
    ) -> FilterOutcome:
        source = as_raster(source)
        self._check_progress_range(max_percent, offset)
        sink = progress if progress is not None else NullProgress()

        result = source.copy()
        width, height = raster_size(result)
        rng = self._rng
        for i in range(self.number_of_circles):
            self._report(sink, i, self.number_of_circles, max_percent, offset)
            if sink.cancellation_requested():
                logger.info("NoiseCirclesFilter cancelled at circle %d/%d",
                            i, self.number_of_circles)
                return Cancelled()
            cx = int(rng.integers(0, width))
            cy = int(rng.integers(0, height))
            radius = int(rng.integers(MIN_CIRCLE_RADIUS, self.max_radius))
            color = self._pick_color()
            if color is not None:
                draw_circle(result, cx, cy, radius, color)
        return Completed(result)


def draw_circle(
    raster: np.ndarray, cx: int, cy: int, radius: int, color: Pixel
) -> None:
    """Plot 360 integer-degree outline points in place, skipping off-raster ones."""
    width, height = raster_size(raster)
    for degree in range(360):
        theta = math.radians(degree)
        x = cx + int(round(radius * math.cos(theta)))
        y = cy + int(round(radius * math.sin(theta)))
        if 0 <= x < width and 0 <= y < height:
            raster[y, x] = color
