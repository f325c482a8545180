# -*- coding: utf-8 -*-
"""
Image Processing Module - Filter contract, traversal, and pixel filters.

Provides the traversal contract shared by every pixel filter (progress
reporting, cooperative cancellation, ``Completed`` / ``Cancelled``
outcomes), the kernel type and builders, the concrete filters, a
sequential pipeline, and a single-flight background runner.

Sub-modules
-----------
base.py
    ``ImageProcessor``, ``Filter``, ``PixelFilter``, ``Completed``,
    ``Cancelled``.
raster.py
    ``clamp`` and RGB raster validation helpers.
progress.py
    ``ProgressSink`` protocol, ``CancellationToken`` and sinks.
kernels.py
    ``Kernel``, ``gaussian_kernel``, ``SHARPEN_KERNEL``.
filters/
    Pointwise, linear, rank, global-statistic, noise, edge and geometric
    filters.
pipeline.py
    Sequential composition of filters with progress sub-ranges.
runner.py
    ``FilterRunner``: one invocation at a time against an owned image.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
params.py
    ``Range``, ``Options``, ``Desc`` markers and ``ParamSpec``.

Usage
-----
Blur an image while reporting progress:

    >>> from pfl.image_processing import GaussianFilter, ProgressRecorder
    >>> sink = ProgressRecorder()
    >>> outcome = GaussianFilter(radius=3, sigma=2.0).process_image(image, sink)
    >>> if not outcome.cancelled:
    ...     blurred = outcome.raster

Run filters in the background with cancellation:

    >>> from pfl.image_processing import FilterRunner, ContrastFilter
    >>> with FilterRunner(image, progress_callback=print) as runner:
    ...     future = runner.start(ContrastFilter.increase(1.5))
    ...     runner.cancel()   # image stays as it was if the cancel lands
    ...     outcome = future.result()

Dependencies
------------
numpy
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

from pfl.image_processing.base import (
    Cancelled,
    Completed,
    Filter,
    FilterOutcome,
    ImageProcessor,
    PixelFilter,
)
from pfl.image_processing.raster import Pixel, as_raster, clamp
from pfl.image_processing.progress import (
    CallbackProgress,
    CancellationToken,
    NullProgress,
    ProgressRecorder,
    ProgressSink,
)
from pfl.image_processing.kernels import SHARPEN_KERNEL, Kernel, gaussian_kernel
from pfl.image_processing.filters import (
    BrightnessFilter,
    ContourFilter,
    ContrastFilter,
    ConvolutionFilter,
    GaussianFilter,
    GlobalStatisticFilter,
    GrayscaleFilter,
    MedianFilter,
    NegativeFilter,
    NoiseCirclesFilter,
    NoiseDotsFilter,
    NoiseLinesFilter,
    SharpenFilter,
    WavesFilter,
    luminance_histogram,
    mean_brightness,
)
from pfl.image_processing.pipeline import Pipeline
from pfl.image_processing.runner import FilterRunner
from pfl.image_processing.versioning import processor_tags, processor_version
from pfl.image_processing.params import Desc, Options, ParamSpec, Range

__all__ = [
    'ImageProcessor',
    'Filter',
    'PixelFilter',
    'Completed',
    'Cancelled',
    'FilterOutcome',
    'Pixel',
    'as_raster',
    'clamp',
    'ProgressSink',
    'NullProgress',
    'CancellationToken',
    'CallbackProgress',
    'ProgressRecorder',
    'Kernel',
    'gaussian_kernel',
    'SHARPEN_KERNEL',
    'NegativeFilter',
    'GrayscaleFilter',
    'BrightnessFilter',
    'ConvolutionFilter',
    'GaussianFilter',
    'SharpenFilter',
    'MedianFilter',
    'GlobalStatisticFilter',
    'ContrastFilter',
    'luminance_histogram',
    'mean_brightness',
    'NoiseDotsFilter',
    'NoiseLinesFilter',
    'NoiseCirclesFilter',
    'ContourFilter',
    'WavesFilter',
    'Pipeline',
    'FilterRunner',
    'processor_version',
    'processor_tags',
    'Range',
    'Options',
    'Desc',
    'ParamSpec',
]
