# -*- coding: utf-8 -*-
"""
Interpolation - Kernel evaluation and fractional-index interpolation.

Provides the Lanczos kernel and a kernel interpolator with the callable
signature ``(samples, positions) -> values``. Samples are uniformly
spaced with unit spacing and out-of-range neighbors are treated as zero.

- ``lanczos_kernel`` — normalized Lanczos windowed-sinc ``L(x, a)``.
- ``LanczosInterpolator`` / ``lanczos_interpolator`` — vectorized
  windowed convolution sum over many positions.
- ``interpolate`` — scalar form for a single position.

Base classes:

- ``Interpolator`` — ABC for all interpolators.
- ``KernelInterpolator`` — Template for kernel-based methods (handles
  neighbor gathering and zero-padded edges).

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

from lanczos_resample.interpolation.base import Interpolator, KernelInterpolator
from lanczos_resample.interpolation.lanczos import (
    DEFAULT_A,
    LanczosInterpolator,
    interpolate,
    lanczos_interpolator,
    lanczos_kernel,
)

__all__ = [
    'DEFAULT_A',
    'Interpolator',
    'KernelInterpolator',
    'LanczosInterpolator',
    'interpolate',
    'lanczos_interpolator',
    'lanczos_kernel',
]
