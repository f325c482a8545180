# -*- coding: utf-8 -*-
"""
Filter Validation Helpers - Shared constructor precondition checks.

Reusable checks for window radii, probabilities, counts, and colours.
Every filter constructor in this subpackage calls these so a contract
violation surfaces as ``ValidationError`` before any pixel is touched.

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
from typing import Any, Sequence

# PFL internal
from pfl.exceptions import ValidationError
from pfl.image_processing.raster import Pixel


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_radius(radius: int, name: str = 'radius', minimum: int = 0) -> None:
    """Validate that a window radius is an integer ``>= minimum``.

    Raises
    ------
    ValidationError
        If *radius* is not an integer or is below *minimum*.
    """
    if not _is_int(radius):
        raise ValidationError(
            f"{name} must be an integer, got {type(radius).__name__}"
        )
    if radius < minimum:
        raise ValidationError(f"{name} must be >= {minimum}, got {radius}")


def validate_probability(p: float, name: str) -> None:
    """Validate that *p* is a real number in ``[0, 1]``.

    Raises
    ------
    ValidationError
        If *p* is not numeric or lies outside ``[0, 1]``.
    """
    if isinstance(p, bool) or not isinstance(p, (int, float)):
        raise ValidationError(
            f"{name} must be a number, got {type(p).__name__}"
        )
    if not 0.0 <= p <= 1.0:
        raise ValidationError(f"{name} must lie in [0, 1], got {p}")


def validate_count(count: int, name: str) -> None:
    """Validate that *count* is a non-negative integer."""
    validate_radius(count, name=name, minimum=0)


def validate_exclusive_upper(upper: int, lower: int, name: str) -> None:
    """Validate that ``[lower, upper)`` is a non-empty integer range.

    Raises
    ------
    ValidationError
        If *upper* is not an integer greater than *lower*.
    """
    if not _is_int(upper):
        raise ValidationError(
            f"{name} must be an integer, got {type(upper).__name__}"
        )
    if upper <= lower:
        raise ValidationError(f"{name} must be > {lower}, got {upper}")


def validate_color(color: Sequence[int], name: str = 'color') -> Pixel:
    """Validate an ``(R, G, B)`` triple and return it as a tuple of ints.

    Raises
    ------
    ValidationError
        If *color* does not have three integer channels in ``[0, 255]``.
    """
    try:
        channels = tuple(color)
    except TypeError:
        raise ValidationError(
            f"{name} must be an (R, G, B) triple, got {color!r}"
        ) from None
    if len(channels) != 3 or not all(
        _is_int(c) and 0 <= c <= 255 for c in channels
    ):
        raise ValidationError(
            f"{name} must be three integers in [0, 255], got {color!r}"
        )
    return channels[0], channels[1], channels[2]
