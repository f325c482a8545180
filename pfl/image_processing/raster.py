# -*- coding: utf-8 -*-
"""
Raster Helpers - Clamp utility and RGB raster validation.

A raster is a ``numpy.ndarray`` of shape ``(rows, cols, 3)`` and dtype
``uint8``. Filters address pixels as ``(x, y)`` = ``(column, row)``, so
pixel ``(x, y)`` lives at ``raster[y, x]`` and a raster's width is
``shape[1]``.

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
from typing import Tuple, Union

# Third-party
import numpy as np

# PFL internal
from pfl.exceptions import ValidationError

Pixel = Tuple[int, int, int]
"""An ``(R, G, B)`` triple of ints in ``[0, 255]``."""

WHITE: Pixel = (255, 255, 255)
BLACK: Pixel = (0, 0, 0)

Number = Union[int, float]


def clamp(value: Number, lo: Number, hi: Number) -> Number:
    """Bound *value* to the inclusive range ``[lo, hi]``.

    Parameters
    ----------
    value : int or float
        Value to bound.
    lo : int or float
        Inclusive lower bound.
    hi : int or float
        Inclusive upper bound. Must be ``>= lo``.

    Returns
    -------
    int or float
        ``lo`` if ``value < lo``, ``hi`` if ``value > hi``, else *value*.
    """
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def clamp_channel(value: float) -> int:
    """Truncate toward zero, then clamp to the 8-bit channel range."""
    return int(clamp(int(value), 0, 255))


def as_raster(source: np.ndarray) -> np.ndarray:
    """Validate *source* as an RGB raster and return it as ``uint8``.

    Integer arrays already in ``uint8`` are returned as-is (no copy).
    Other integer dtypes are range-checked and converted.

    Parameters
    ----------
    source : np.ndarray
        Candidate raster, shape ``(rows, cols, 3)``.

    Returns
    -------
    np.ndarray
        The raster as ``uint8``.

    Raises
    ------
    ValidationError
        If *source* is not a non-empty ``(rows, cols, 3)`` integer array
        with every value in ``[0, 255]``.
    """
    if not isinstance(source, np.ndarray):
        raise ValidationError(
            f"source must be a numpy array, got {type(source).__name__}"
        )
    if source.ndim != 3 or source.shape[2] != 3:
        raise ValidationError(
            f"source must have shape (rows, cols, 3), got {source.shape}"
        )
    if source.shape[0] == 0 or source.shape[1] == 0:
        raise ValidationError(
            f"source must not be empty, got shape {source.shape}"
        )
    if source.dtype == np.uint8:
        return source
    if not np.issubdtype(source.dtype, np.integer):
        raise ValidationError(
            f"source must hold integer channel values, got dtype {source.dtype}"
        )
    if source.min() < 0 or source.max() > 255:
        raise ValidationError(
            "source channel values must lie in [0, 255]"
        )
    return source.astype(np.uint8)


def raster_size(source: np.ndarray) -> Tuple[int, int]:
    """Return ``(width, height)`` of a raster."""
    return source.shape[1], source.shape[0]


def get_pixel(source: np.ndarray, x: int, y: int) -> Pixel:
    """Read pixel ``(x, y)`` as a tuple of Python ints."""
    r, g, b = source[y, x]
    return int(r), int(g), int(b)


def new_raster(width: int, height: int) -> np.ndarray:
    """Allocate a black ``(height, width, 3)`` raster."""
    return np.zeros((height, width, 3), dtype=np.uint8)
