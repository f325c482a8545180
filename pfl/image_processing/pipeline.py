# -*- coding: utf-8 -*-
"""
Pipeline - Composable sequence of pixel filters.

Chains ``Filter`` instances so the output raster of each feeds the next.
Each step is granted an equal slice of the pipeline's progress range
through ``max_percent`` / ``offset``, so progress stays monotonic across
the whole chain. A cancelled step cancels the pipeline; the source and
the intermediate rasters of earlier steps are discarded.

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
from typing import List, Optional, Sequence

# Third-party
import numpy as np

# PFL internal
from pfl.exceptions import ValidationError
from pfl.image_processing.base import Completed, Filter, FilterOutcome
from pfl.image_processing.progress import NullProgress, ProgressSink
from pfl.image_processing.raster import as_raster

logger = logging.getLogger(__name__)


class Pipeline(Filter):
    """Sequential chain of filters.

    Parameters
    ----------
    steps : Sequence[Filter]
        Filters to apply, in order. Must contain at least one.

    Examples
    --------
    >>> from pfl.image_processing.filters import GrayscaleFilter, SharpenFilter
    >>> pipe = Pipeline([GrayscaleFilter(), SharpenFilter()])
    >>> outcome = pipe.process_image(image, progress=sink)
    """

    __processor_version__ = '1.0.0'

    def __init__(self, steps: Sequence[Filter]) -> None:
        if not steps:
            raise ValidationError("Pipeline requires at least one filter")
        for i, step in enumerate(steps):
            if not isinstance(step, Filter):
                raise TypeError(
                    f"Step {i} is not a Filter: {type(step).__name__}"
                )
        self._steps: List[Filter] = list(steps)

    @property
    def steps(self) -> List[Filter]:
        """Shallow copy of the step list."""
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"Pipeline({[type(s).__name__ for s in self._steps]})"

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

        n = len(self._steps)
        raster = source
        for i, step in enumerate(self._steps):
            start = i * max_percent // n
            stop = (i + 1) * max_percent // n
            logger.debug("Pipeline step %d/%d: %s", i + 1, n,
                         type(step).__qualname__)
            outcome = step.process_image(raster, sink, stop - start, offset + start)
            if outcome.cancelled:
                return outcome
            raster = outcome.raster
        return Completed(raster)
