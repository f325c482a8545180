# -*- coding: utf-8 -*-
"""
Filter Base Classes - Processor base, traversal contract, and outcomes.

Defines ``ImageProcessor``, the common base class providing version
checking at first instantiation and ``typing.Annotated`` parameter
declarations validated at construction; ``Filter``, the ABC every pixel
filter implements through ``process_image``; and ``PixelFilter``, which
supplies the shared dense traversal so concrete filters only say how one
output pixel is computed.

Every invocation returns a ``FilterOutcome``: ``Completed(raster)`` with a
newly allocated raster, or ``Cancelled()`` when the progress sink asked to
stop. A cancelled traversal never hands back a partially filled raster and
never mutates the source.

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
import functools
import logging
import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple, Union

# Third-party
import numpy as np

# PFL internal
from pfl.exceptions import ProcessorError, ValidationError
from pfl.image_processing.params import ParamSpec, collect_param_specs
from pfl.image_processing.progress import NullProgress, ProgressSink
from pfl.image_processing.raster import Pixel, as_raster, new_raster, raster_size
from pfl.vocabulary import TraversalKind

logger = logging.getLogger(__name__)


# ===================================================================
# Outcomes
# ===================================================================

@dataclass(frozen=True, eq=False)
class Completed:
    """A traversal that ran to the end.

    Attributes
    ----------
    raster : np.ndarray
        Newly allocated ``(rows, cols, 3)`` uint8 result owned by the caller.
    """

    raster: np.ndarray = field(repr=False)
    cancelled = False


@dataclass(frozen=True)
class Cancelled:
    """A traversal stopped by a cancellation request. Carries no raster."""

    cancelled = True
    raster = None


FilterOutcome = Union[Completed, Cancelled]


# ===================================================================
# ImageProcessor
# ===================================================================

class ImageProcessor(ABC):
    """
    Common base class for all filters.

    **Version checking**: concrete subclasses without
    ``@processor_version('x.y.z')`` trigger a ``UserWarning`` the first
    time they are instantiated. The check lives in ``__new__`` so that
    class decorators have already run.

    **Parameter declarations**: subclasses declare construction-time
    parameters as ``Annotated`` class fields with ``Range`` / ``Options`` /
    ``Desc`` markers. ``__init_subclass__`` collects them into
    ``__param_specs__`` and wraps the subclass ``__init__`` (its own or the
    inherited one) so that, once the outermost constructor returns, every
    declared attribute is validated.
    """

    _version_warned_classes: set = set()

    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        cls.__init__ = _validating_init(cls, cls.__init__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    @property
    def params(self) -> dict:
        """Current values of every declared parameter, by name."""
        return {
            spec.name: getattr(self, spec.name)
            for spec in type(self).__param_specs__
        }

    def _validate_params(self) -> None:
        for spec in type(self).__param_specs__:
            spec.validate(getattr(self, spec.name))

    def __repr__(self) -> str:
        args = ', '.join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{type(self).__name__}({args})"


def _validating_init(cls: type, init):
    """Wrap *init* so declared params are checked after construction.

    Only the constructor of the instance's own class validates; parent
    constructors reached through ``super().__init__`` run unchecked because
    the subclass has not finished assigning its attributes yet.
    """
    @functools.wraps(init)
    def __init__(self, *args, **kwargs):
        init(self, *args, **kwargs)
        if type(self) is cls:
            self._validate_params()
    return __init__


# ===================================================================
# Filter contract
# ===================================================================

class Filter(ImageProcessor):
    """
    Abstract base class for pixel filters.

    Subclasses implement ``process_image``. Filters that compute each
    output pixel independently should derive from ``PixelFilter`` instead
    and implement ``compute_pixel``; subclasses of ``Filter`` proper
    replace the traversal entirely (e.g. procedural noise drawn into a copy
    of the source).
    """

    __traversal__: TraversalKind = TraversalKind.FULL_RASTER

    @abstractmethod
    def process_image(
        self,
        source: np.ndarray,
        progress: Optional[ProgressSink] = None,
        max_percent: int = 100,
        offset: int = 0,
    ) -> FilterOutcome:
        """
        Run the filter over a whole raster.

        Parameters
        ----------
        source : np.ndarray
            Input raster, shape ``(rows, cols, 3)``, uint8. Never mutated.
        progress : ProgressSink, optional
            Receives integer percentages and is polled for cancellation.
            Defaults to a sink that never cancels.
        max_percent : int
            Width of the progress sub-range granted to this invocation.
            Default 100.
        offset : int
            Start of the progress sub-range. Default 0. Reported values
            lie in ``[offset, offset + max_percent]``.

        Returns
        -------
        FilterOutcome
            ``Completed(raster)`` or ``Cancelled()``.
        """
        ...

    def apply(self, source: np.ndarray) -> np.ndarray:
        """Run the filter without progress reporting and return the raster.

        Raises
        ------
        ProcessorError
            If the traversal reports cancellation, which only a subclass
            polling its own sink can cause.
        """
        outcome = self.process_image(source)
        if outcome.cancelled:
            raise ProcessorError(
                f"{type(self).__name__} was cancelled without a progress sink"
            )
        return outcome.raster

    @staticmethod
    def _check_progress_range(max_percent: int, offset: int) -> None:
        if max_percent < 0 or offset < 0 or offset + max_percent > 100:
            raise ValidationError(
                f"progress range [offset, offset + max_percent] must lie in "
                f"[0, 100], got offset={offset}, max_percent={max_percent}"
            )

    @staticmethod
    def _report(
        sink: ProgressSink, done: int, total: int, max_percent: int, offset: int
    ) -> None:
        sink.report_progress(int(done / total * max_percent) + offset)


class PixelFilter(Filter):
    """
    Filter whose output pixel is computed independently from the source.

    Provides the shared dense traversal: columns ``0..width-1`` outer,
    rows inner. Before each column, progress
    ``int(column / width * max_percent) + offset`` is reported and the
    sink is polled; a cancellation request ends the traversal with
    ``Cancelled()``.

    Subclasses implement ``compute_pixel``. Subclasses may also override
    ``_compute_column`` with a vectorised equivalent; it must produce
    exactly the values ``compute_pixel`` would.
    """

    __traversal__ = TraversalKind.DENSE

    @abstractmethod
    def compute_pixel(self, source: np.ndarray, x: int, y: int) -> Pixel:
        """
        Compute output pixel ``(x, y)`` from the source raster.

        Parameters
        ----------
        source : np.ndarray
            Input raster, shape ``(rows, cols, 3)``, uint8.
        x : int
            Column index.
        y : int
            Row index.

        Returns
        -------
        Pixel
            ``(R, G, B)`` with every channel in ``[0, 255]``.
        """
        ...

    def _compute_column(self, source: np.ndarray, x: int) -> np.ndarray:
        """Compute output column *x* as a ``(rows, 3)`` array."""
        return np.array(
            [self.compute_pixel(source, x, y) for y in range(source.shape[0])],
            dtype=np.uint8,
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
        return self._traverse(source, sink, max_percent, offset,
                              self._compute_column)

    def _traverse(
        self,
        source: np.ndarray,
        sink: ProgressSink,
        max_percent: int,
        offset: int,
        column_fn: Callable[[np.ndarray, int], np.ndarray],
    ) -> FilterOutcome:
        """Dense column-major traversal filling a new raster via *column_fn*."""
        width, height = raster_size(source)
        result = new_raster(width, height)
        for x in range(width):
            self._report(sink, x, width, max_percent, offset)
            if sink.cancellation_requested():
                logger.info("%s cancelled at column %d/%d",
                            type(self).__name__, x, width)
                return Cancelled()
            result[:, x] = column_fn(source, x)
        return Completed(result)
