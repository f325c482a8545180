# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability-tag class decorators.

``@processor_version('x.y.z')`` stamps ``__processor_version__`` on a filter
class; filters without one trigger a ``UserWarning`` at first
instantiation (see ``ImageProcessor.__new__``). ``@processor_tags`` stamps
``__processor_tags__`` with the menu category and a short description so
front ends can discover and group filters.

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
import importlib.metadata
from typing import Optional, Type, TypeVar

# PFL vocabulary
from pfl.vocabulary import ProcessorCategory

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps a version on a filter class.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g. ``'1.0.0'``). When omitted the
        installed ``pfl`` distribution version is used, or ``'unknown'``
        if the package is not installed.

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class Identity(PixelFilter):
    ...     def compute_pixel(self, source, x, y):
    ...         return get_pixel(source, x, y)
    >>> Identity.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('pfl')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
):
    """Class decorator for filter capability metadata.

    Parameters
    ----------
    category : ProcessorCategory, optional
        Menu grouping for the filter.
    description : str, optional
        Short human-readable purpose.

    Raises
    ------
    TypeError
        If *category* is not a ``ProcessorCategory`` member. Checked when
        the decorator is built, so typos fail at import time.
    """
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'category': category,
            'description': description,
        }
        return cls
    return decorator
