# -*- coding: utf-8 -*-
"""
Frequency-Domain Resampling - Change the bin count of a complex spectrum.

The spectrum is split into real and imaginary sequences which are
interpolated independently and recombined. There is no coupling
between the two parts and no phase unwrapping.

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

# Standard library
import logging
from typing import Sequence

# Third-party
import numpy as np

# Lanczos Resample internal
from lanczos_resample.interpolation.lanczos import (
    DEFAULT_A,
    LanczosInterpolator,
)
from lanczos_resample.resampling._validation import (
    as_samples,
    validate_positive_int,
)

logger = logging.getLogger(__name__)


def resample_frequency(
    bins: Sequence[complex],
    target_bin_count: int,
    a: int = DEFAULT_A,
) -> np.ndarray:
    """Resample complex frequency bins to ``target_bin_count`` bins.

    Output bin ``i`` is evaluated at fractional source index
    ``i * len(bins) / target_bin_count``.

    Parameters
    ----------
    bins : Sequence[complex]
        Source spectrum. Not modified.
    target_bin_count : int
        Number of output bins. Must be >= 1.
    a : int
        Lanczos kernel half-width. Default is 3.

    Returns
    -------
    np.ndarray
        New ``complex128`` array with exactly ``target_bin_count``
        elements.
    """
    spectrum = as_samples(bins, dtype=np.complex128, name='bins')
    target_bin_count = validate_positive_int(
        target_bin_count, 'target_bin_count',
    )
    interp = LanczosInterpolator(a=a)

    source_real = np.ascontiguousarray(spectrum.real)
    source_imag = np.ascontiguousarray(spectrum.imag)

    dx = spectrum.shape[0] / target_bin_count
    logger.debug(
        "Frequency resample: %d -> %d bins (dx=%g, a=%d)",
        spectrum.shape[0], target_bin_count, dx, interp.a,
    )

    positions = np.arange(target_bin_count, dtype=np.float64) * dx
    target_real = interp(source_real, positions)
    target_imag = interp(source_imag, positions)

    result = np.empty(target_bin_count, dtype=np.complex128)
    result.real = target_real
    result.imag = target_imag
    return result
