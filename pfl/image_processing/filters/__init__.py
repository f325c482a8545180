# -*- coding: utf-8 -*-
"""
Pixel Filters - Pointwise, convolution, rank, global, noise, and edge filters.

Every filter derives from ``Filter`` and is run with
``process_image(source, progress, max_percent, offset)``, returning
``Completed(raster)`` or ``Cancelled()``. Dense filters derive from
``PixelFilter`` and share one column-major traversal.

Pointwise Filters
    ``NegativeFilter`` -- ``255 - channel``
    ``GrayscaleFilter`` -- weighted luminance on all channels
    ``BrightnessFilter`` -- saturating channel offset

Linear Filters
    ``ConvolutionFilter`` -- arbitrary odd kernel, edge-clamped
    ``GaussianFilter`` -- normalised Gaussian kernel
    ``SharpenFilter`` -- fixed 3x3 Laplacian sharpen

Rank Filters
    ``MedianFilter`` -- per-channel median

Global-Statistic Filters
    ``GlobalStatisticFilter`` -- two-phase base class
    ``ContrastFilter`` -- stretch about the mean brightness

Noise Filters
    ``NoiseDotsFilter`` -- salt and pepper
    ``NoiseLinesFilter`` -- random segments (full-raster)
    ``NoiseCirclesFilter`` -- random circle outlines (full-raster)

Edge Filters
    ``ContourFilter`` -- neighbour-difference marker

Geometric Filters
    ``WavesFilter`` -- horizontal sine displacement

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

from pfl.image_processing.filters.pointwise import (
    BrightnessFilter,
    GrayscaleFilter,
    NegativeFilter,
)
from pfl.image_processing.filters.linear import (
    ConvolutionFilter,
    GaussianFilter,
    SharpenFilter,
)
from pfl.image_processing.filters.rank import MedianFilter
from pfl.image_processing.filters.statistical import (
    ContrastFilter,
    GlobalStatisticFilter,
    luminance_histogram,
    mean_brightness,
)
from pfl.image_processing.filters.noise import (
    NoiseCirclesFilter,
    NoiseDotsFilter,
    NoiseLinesFilter,
)
from pfl.image_processing.filters.edges import ContourFilter
from pfl.image_processing.filters.geometric import WavesFilter

__all__ = [
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
]
