# -*- coding: utf-8 -*-
"""
Global-Statistic Filters - Whole-image statistic, then a per-pixel map.

``GlobalStatisticFilter`` runs in two strictly ordered phases inside one
invocation:

1. **Statistic phase** -- scan the whole raster column by column and
   reduce it to a single statistic. Reports the first half of the granted
   progress range.
2. **Apply phase** -- the shared dense traversal, mapping every pixel
   through ``transform_column`` parameterised by the statistic. Reports the
   second half.

The statistic is a local of ``process_image``; nothing about one image
survives into the next invocation.

Cancellation differs between the phases. In the apply phase it ends the
invocation with ``Cancelled()`` as usual. In the statistic phase the
statistic falls back to ``0`` and the apply phase still runs (it then sees
the same cancellation request on its first poll unless the sink has
withdrawn it). That fallback is long-standing behaviour of the contrast
tool and is kept as-is.

``ContrastFilter`` is the concrete instance: the statistic is the mean
brightness ``b`` and each channel maps to ``b + (channel - b) * amount``.

Also provides ``mean_brightness`` and ``luminance_histogram``, the data
behind a front end's brightness readout and histogram panel.

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
from abc import abstractmethod
from typing import Annotated, Any, Optional

# Third-party
import numpy as np

# PFL internal
from pfl.exceptions import ValidationError
from pfl.image_processing.base import FilterOutcome, PixelFilter
from pfl.image_processing.params import Desc
from pfl.image_processing.progress import NullProgress, ProgressSink
from pfl.image_processing.raster import Pixel, as_raster, clamp_channel, raster_size
from pfl.image_processing.versioning import processor_tags, processor_version
from pfl.image_processing.filters.pointwise import luminance_array
from pfl.vocabulary import ProcessorCategory, TraversalKind

logger = logging.getLogger(__name__)


def mean_brightness(source: np.ndarray) -> int:
    """Integer mean of per-pixel ``(R + G + B) // 3`` over the raster.

    Both divisions truncate, matching the statistic phase of
    ``ContrastFilter``.
    """
    source = as_raster(source)
    pix = source.astype(np.int64).sum(axis=2) // 3
    return int(pix.sum() // pix.size)


def luminance_histogram(source: np.ndarray) -> np.ndarray:
    """Count pixels per weighted-luminance level.

    Parameters
    ----------
    source : np.ndarray
        Raster, shape ``(rows, cols, 3)``.

    Returns
    -------
    np.ndarray
        Shape ``(256,)`` int64; entry ``i`` is the number of pixels whose
        luminance (as in ``GrayscaleFilter``) equals ``i``.
    """
    source = as_raster(source)
    lum = luminance_array(source)
    return np.bincount(lum.ravel(), minlength=256).astype(np.int64)


class GlobalStatisticFilter(PixelFilter):
    """
    Abstract two-phase filter: whole-image statistic, then per-pixel map.

    Subclasses implement ``compute_statistic`` (which must report progress
    and poll cancellation itself) and ``transform_column``.
    ``transform_pixel`` defaults to ``transform_column`` on a single row.
    """

    __traversal__ = TraversalKind.GLOBAL

    #: Percentage of the granted progress range used by the statistic phase.
    STATISTIC_SHARE = 50

    @abstractmethod
    def compute_statistic(
        self,
        source: np.ndarray,
        progress: ProgressSink,
        max_percent: int = 100,
        offset: int = 0,
    ) -> Any:
        """Reduce the raster to the statistic used by the apply phase."""
        ...

    @abstractmethod
    def transform_column(self, column: np.ndarray, statistic: Any) -> np.ndarray:
        """Map a ``(rows, 3)`` uint8 column given the statistic."""
        ...

    def transform_pixel(self, pixel: Pixel, statistic: Any) -> Pixel:
        out = self.transform_column(np.array([pixel], dtype=np.uint8), statistic)
        r, g, b = out[0]
        return int(r), int(g), int(b)

    def compute_pixel(self, source: np.ndarray, x: int, y: int) -> Pixel:
        """Compute one output pixel, deriving the statistic from *source*.

        Runs the full statistic phase on every call; use ``process_image``
        for whole rasters.
        """
        statistic = self.compute_statistic(source, NullProgress())
        pixel = source[y, x]
        return self.transform_pixel(
            (int(pixel[0]), int(pixel[1]), int(pixel[2])), statistic
        )

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

        first = max_percent * self.STATISTIC_SHARE // 100
        statistic = self.compute_statistic(source, sink, first, offset)
        logger.debug("%s statistic: %r", type(self).__name__, statistic)

        return self._traverse(
            source, sink, max_percent - first, offset + first,
            lambda src, x: self.transform_column(src[:, x], statistic),
        )


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.ENHANCE,
                description='Stretch channels about the mean brightness')
class ContrastFilter(GlobalStatisticFilter):
    """Scale every channel's distance from the image's mean brightness.

    The statistic is ``b = sum((R + G + B) // 3) // (w * h)``. Each channel
    becomes ``clamp(trunc(b + (channel - b) * amount), 0, 255)``.

    Parameters
    ----------
    amount : float
        Contrast factor. ``1`` is the identity, ``> 1`` increases contrast,
        ``0 < amount < 1`` decreases it. Must be positive. Default 1.0.

    Raises
    ------
    ValidationError
        If ``amount <= 0``.

    Examples
    --------
    >>> punchier = ContrastFilter.increase(1.5).apply(image)
    >>> flatter = ContrastFilter.decrease(1.5).apply(image)
    """

    amount: Annotated[float, Desc('Contrast factor (> 0)')] = 1.0

    def __init__(self, amount: float = 1.0) -> None:
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValidationError(
                f"amount must be a number, got {type(amount).__name__}"
            )
        if not amount > 0:
            raise ValidationError(f"amount must be positive, got {amount}")
        self.amount = amount

    @classmethod
    def increase(cls, amount: float) -> 'ContrastFilter':
        """Contrast filter with factor *amount*."""
        return cls(amount)

    @classmethod
    def decrease(cls, amount: float) -> 'ContrastFilter':
        """Contrast filter with factor ``1 / amount``."""
        if isinstance(amount, bool) or not isinstance(amount, (int, float)) or not amount > 0:
            raise ValidationError(f"amount must be positive, got {amount!r}")
        return cls(1.0 / amount)

    def compute_statistic(
        self,
        source: np.ndarray,
        progress: ProgressSink,
        max_percent: int = 100,
        offset: int = 0,
    ) -> int:
        """Mean brightness; ``0`` if cancellation is requested mid-scan."""
        width, height = raster_size(source)
        total = 0
        for x in range(width):
            self._report(progress, x, width, max_percent, offset)
            if progress.cancellation_requested():
                logger.warning(
                    "%s: cancellation during brightness scan at column %d/%d; "
                    "continuing with brightness 0",
                    type(self).__name__, x, width,
                )
                return 0
            column = source[:, x].astype(np.int64)
            total += int((column.sum(axis=1) // 3).sum())
        return total // (width * height)

    def transform_column(self, column: np.ndarray, statistic: int) -> np.ndarray:
        b = statistic
        mapped = b + (column.astype(np.int64) - b) * self.amount
        return np.clip(np.trunc(mapped), 0, 255).astype(np.uint8)

    def transform_pixel(self, pixel: Pixel, statistic: int) -> Pixel:
        b = statistic
        c = self.amount
        r, g, bl = pixel
        return (
            clamp_channel(b + (r - b) * c),
            clamp_channel(b + (g - b) * c),
            clamp_channel(b + (bl - b) * c),
        )
