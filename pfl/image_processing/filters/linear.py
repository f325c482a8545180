# -*- coding: utf-8 -*-
"""
Linear Spatial Filters - Kernel convolution, Gaussian blur, and sharpen.

``ConvolutionFilter`` applies an arbitrary odd-sized ``Kernel`` with
edge-clamp (replicate) sampling: offsets that leave the raster read the
nearest edge pixel. Each channel's weighted sum is truncated toward zero
and clamped to ``[0, 255]``. Truncation, not rounding, is part of the
contract; sums are first snapped to ``SNAP_DECIMALS`` places so that a
sum which is integral in exact arithmetic (e.g. ``128`` times a kernel
summing to 1) does not lose a level to float noise.

``GaussianFilter`` and ``SharpenFilter`` are ``ConvolutionFilter``
instances over ``gaussian_kernel`` and ``SHARPEN_KERNEL``.

The dense traversal evaluates one output column at a time through
``scipy.ndimage.correlate`` on a slab of edge-clamped source columns
(``mode='nearest'`` supplies the vertical clamp).

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
from typing import Annotated, Sequence, Union

# Third-party
import numpy as np
from scipy.ndimage import correlate

# PFL internal
from pfl.image_processing.base import PixelFilter
from pfl.image_processing.kernels import SHARPEN_KERNEL, Kernel, gaussian_kernel
from pfl.image_processing.params import Desc, Range
from pfl.image_processing.raster import Pixel, clamp, raster_size
from pfl.image_processing.versioning import processor_tags, processor_version
from pfl.vocabulary import ProcessorCategory

SNAP_DECIMALS = 9


def _to_channels(sums: np.ndarray) -> np.ndarray:
    """Snap, truncate toward zero, and clamp weighted sums to uint8."""
    snapped = np.round(sums, SNAP_DECIMALS)
    return np.clip(np.trunc(snapped), 0, 255).astype(np.uint8)


def clamped_columns(x: int, radius: int, width: int) -> np.ndarray:
    """Column indices ``x - radius .. x + radius`` clamped to ``[0, width)``."""
    return np.clip(np.arange(x - radius, x + radius + 1), 0, width - 1)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Convolve with an arbitrary kernel')
class ConvolutionFilter(PixelFilter):
    """Generic 2D kernel convolution with edge-clamp sampling.

    For output pixel ``(x, y)`` and every offset ``(k, l)`` in
    ``[-rx, rx] x [-ry, ry]``, the source pixel at
    ``(clamp(x + k, 0, w - 1), clamp(y + l, 0, h - 1))`` is weighted by
    ``kernel.weights[k + rx, l + ry]`` and summed per channel.

    Parameters
    ----------
    kernel : Kernel or array_like
        Odd-sized weight grid indexed ``[horizontal, vertical]``. Array
        input is wrapped in a ``Kernel``.

    Raises
    ------
    ValidationError
        If the kernel has an even dimension or is not 2D.

    Examples
    --------
    >>> box = ConvolutionFilter(np.full((3, 3), 1 / 9))
    >>> smoothed = box.apply(image)
    """

    def __init__(self, kernel: Union[Kernel, np.ndarray, Sequence[Sequence[float]]]) -> None:
        self.kernel = kernel if isinstance(kernel, Kernel) else Kernel(kernel)

    def compute_pixel(self, source: np.ndarray, x: int, y: int) -> Pixel:
        width, height = raster_size(source)
        weights = self.kernel.weights
        rx, ry = self.kernel.radius_x, self.kernel.radius_y

        sums = np.zeros(3, dtype=np.float64)
        for l in range(-ry, ry + 1):
            sy = clamp(y + l, 0, height - 1)
            for k in range(-rx, rx + 1):
                sx = clamp(x + k, 0, width - 1)
                sums += source[sy, sx].astype(np.float64) * weights[k + rx, l + ry]
        r, g, b = _to_channels(sums)
        return int(r), int(g), int(b)

    def _compute_column(self, source: np.ndarray, x: int) -> np.ndarray:
        rx = self.kernel.radius_x
        cols = clamped_columns(x, rx, source.shape[1])
        slab = source[:, cols].astype(np.float64)
        # correlate expects (rows, cols, bands); kernel is stored (cols, rows).
        weights = self.kernel.weights.T[:, :, np.newaxis]
        sums = correlate(slab, weights, mode='nearest')
        return _to_channels(sums[:, rx])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kernel!r})"


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Gaussian blur')
class GaussianFilter(ConvolutionFilter):
    """Gaussian blur through a normalised ``gaussian_kernel``.

    Parameters
    ----------
    radius : int
        Kernel half-width; the kernel is ``2 * radius + 1`` square.
        Default 3.
    sigma : float
        Gaussian spread. Must be positive. Default 2.0.

    Raises
    ------
    ValidationError
        If ``radius < 0`` or ``sigma <= 0``.
    """

    radius: Annotated[int, Range(min=0, max=50), Desc('Kernel half-width')] = 3
    sigma: Annotated[float, Desc('Gaussian spread (> 0)')] = 2.0

    def __init__(self, radius: int = 3, sigma: float = 2.0) -> None:
        super().__init__(gaussian_kernel(radius, sigma))
        self.radius = radius
        self.sigma = sigma

    def __repr__(self) -> str:
        return f"GaussianFilter(radius={self.radius!r}, sigma={self.sigma!r})"


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='3x3 Laplacian sharpen')
class SharpenFilter(ConvolutionFilter):
    """Sharpen with the fixed kernel ``[[0,-1,0],[-1,5,-1],[0,-1,0]]``."""

    def __init__(self) -> None:
        super().__init__(SHARPEN_KERNEL)

    def __repr__(self) -> str:
        return "SharpenFilter()"
