# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the PFL framework.

Single source of truth for the controlled vocabularies attached to filters
through ``@processor_tags``, so that GUI shells grouping filters into menus
use consistent, typo-free values.

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

from enum import Enum


class ProcessorCategory(Enum):
    """Processing categories for filter tagging.

    Each value corresponds to a functional grouping of pixel filters and
    maps onto one menu of a typical editor front end.
    """

    POINTWISE = "pointwise"
    FILTERS = "filters"
    RANK = "rank"
    ENHANCE = "enhance"
    NOISE = "noise"
    EDGES = "edges"
    DISTORT = "distort"


class TraversalKind(Enum):
    """How a filter visits the raster.

    ``DENSE`` filters use the shared column-major traversal and compute
    one output pixel at a time. ``GLOBAL`` filters run a whole-image
    statistic pass before the dense pass. ``FULL_RASTER`` filters replace
    the traversal entirely and draw into a copy of the source.
    """

    DENSE = "dense"
    GLOBAL = "global"
    FULL_RASTER = "full_raster"
