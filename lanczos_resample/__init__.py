# -*- coding: utf-8 -*-
"""
Lanczos Resample - Lanczos-kernel resampling of 1D signals.

Reconstructs a band-limited signal from uniformly spaced samples with a
Lanczos-windowed sinc kernel and re-evaluates it at new abscissas.
Three operations are provided:

- ``resample_time`` — real time-domain signal to a new sample rate.
- ``resample_frequency`` — complex spectrum to a new bin count.
- ``oversample`` — integer-factor oversampling into a caller buffer.

Dependencies
------------
numpy

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-12

Modified
--------
2026-02-12
"""

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from lanczos_resample.exceptions import LanczosError, ValidationError
from lanczos_resample.interpolation import (
    DEFAULT_A,
    Interpolator,
    KernelInterpolator,
    LanczosInterpolator,
    interpolate,
    lanczos_interpolator,
    lanczos_kernel,
)
from lanczos_resample.resampling import (
    oversample,
    oversampled_length,
    resample_frequency,
    resample_time,
    time_output_length,
)

__all__ = [
    'LanczosError',
    'ValidationError',
    'DEFAULT_A',
    'Interpolator',
    'KernelInterpolator',
    'LanczosInterpolator',
    'interpolate',
    'lanczos_interpolator',
    'lanczos_kernel',
    'oversample',
    'oversampled_length',
    'resample_frequency',
    'resample_time',
    'time_output_length',
]
