# -*- coding: utf-8 -*-
"""
Convolution Kernels - Immutable weight grids and kernel builders.

A ``Kernel`` wraps a read-only 2D ``float64`` array with odd extent along
both axes, so a centre cell always exists. The first axis is the
horizontal offset and the second the vertical offset: weight
``weights[k + radius_x, l + radius_y]`` multiplies the source pixel at
``(x + k, y + l)``.

Builders
    ``gaussian_kernel`` -- normalised isotropic Gaussian,
    ``exp(-(i^2 + j^2) / sigma^2)`` divided by the sum of all weights.

Constants
    ``SHARPEN_KERNEL`` -- 3x3 Laplacian sharpen, weights sum to 1.

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
from typing import Sequence, Union

# Third-party
import numpy as np

# PFL internal
from pfl.exceptions import ValidationError


class Kernel:
    """Immutable 2D convolution kernel with odd dimensions.

    Parameters
    ----------
    weights : array_like
        2D grid of weights indexed ``[horizontal, vertical]``. Copied and
        made read-only.

    Raises
    ------
    ValidationError
        If *weights* is not 2D, is empty, has an even dimension, or holds
        non-finite values.

    Examples
    --------
    >>> box = Kernel(np.full((3, 3), 1 / 9))
    >>> box.radius_x, box.radius_y
    (1, 1)
    """

    __slots__ = ('_weights',)

    def __init__(self, weights: Union[np.ndarray, Sequence[Sequence[float]]]) -> None:
        arr = np.array(weights, dtype=np.float64)
        if arr.ndim != 2:
            raise ValidationError(
                f"kernel must be 2D, got {arr.ndim} dimension(s)"
            )
        if arr.shape[0] % 2 == 0 or arr.shape[1] % 2 == 0:
            raise ValidationError(
                f"kernel dimensions must be odd, got {arr.shape}"
            )
        if not np.all(np.isfinite(arr)):
            raise ValidationError("kernel weights must be finite")
        arr.setflags(write=False)
        self._weights = arr

    @property
    def weights(self) -> np.ndarray:
        """Read-only weight array, shape ``(width, height)``."""
        return self._weights

    @property
    def width(self) -> int:
        return self._weights.shape[0]

    @property
    def height(self) -> int:
        return self._weights.shape[1]

    @property
    def radius_x(self) -> int:
        """Horizontal reach, ``(width - 1) // 2``."""
        return (self.width - 1) // 2

    @property
    def radius_y(self) -> int:
        """Vertical reach, ``(height - 1) // 2``."""
        return (self.height - 1) // 2

    def total(self) -> float:
        """Sum of all weights."""
        return float(self._weights.sum())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Kernel):
            return NotImplemented
        return np.array_equal(self._weights, other._weights)

    def __hash__(self) -> int:
        return hash((self._weights.shape, self._weights.tobytes()))

    def __repr__(self) -> str:
        return f"Kernel(shape={self._weights.shape}, total={self.total():.6g})"


def gaussian_kernel(radius: int = 3, sigma: float = 2.0) -> Kernel:
    """Build a normalised square Gaussian kernel.

    For ``i, j`` in ``[-radius, radius]`` the raw weight is
    ``exp(-(i^2 + j^2) / sigma^2)``; every weight is then divided by the
    sum of the raw weights so the kernel sums to 1.

    Parameters
    ----------
    radius : int
        Half-width; the kernel is ``(2 * radius + 1)`` square. Default 3.
    sigma : float
        Spread. Must be positive. Default 2.0.

    Returns
    -------
    Kernel

    Raises
    ------
    ValidationError
        If ``radius`` is not a non-negative integer or ``sigma <= 0``.
    """
    if isinstance(radius, bool) or not isinstance(radius, int) or radius < 0:
        raise ValidationError(
            f"radius must be a non-negative integer, got {radius!r}"
        )
    if not sigma > 0:
        raise ValidationError(f"sigma must be positive, got {sigma!r}")

    size = 2 * radius + 1
    weights = np.empty((size, size), dtype=np.float64)
    norm = 0.0
    for i in range(-radius, radius + 1):
        for j in range(-radius, radius + 1):
            w = np.exp(-(i * i + j * j) / (sigma * sigma))
            weights[i + radius, j + radius] = w
            norm += w
    return Kernel(weights / norm)


SHARPEN_KERNEL = Kernel([
    [0.0, -1.0, 0.0],
    [-1.0, 5.0, -1.0],
    [0.0, -1.0, 0.0],
])
