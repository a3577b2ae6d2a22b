# -*- coding: utf-8 -*-
"""
Time-Domain Resampling - Change the sample rate of a real signal.

Output sample ``i`` is the Lanczos reconstruction of the input at
fractional index ``i * source_rate / target_rate``.

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
import math
from typing import Sequence

# Third-party
import numpy as np

# Lanczos Resample internal
from lanczos_resample.exceptions import ValidationError
from lanczos_resample.interpolation.lanczos import (
    DEFAULT_A,
    LanczosInterpolator,
)
from lanczos_resample.resampling._validation import (
    as_samples,
    validate_positive_int,
)

logger = logging.getLogger(__name__)


def time_output_length(
    input_length: int,
    source_rate: int,
    target_rate: int,
) -> int:
    """Number of samples produced by :func:`resample_time`.

    Computes ``floor(input_length * target_rate / source_rate)`` and
    subtracts one when the product is an exact integer, so the last
    output never lands one step past the final input-aligned position.

    Parameters
    ----------
    input_length : int
        Number of input samples. May be 0.
    source_rate : int
        Input sample rate. Must be >= 1.
    target_rate : int
        Output sample rate. Must be >= 1.

    Returns
    -------
    int
        Output length, never negative.
    """
    source_rate = validate_positive_int(source_rate, 'source_rate')
    target_rate = validate_positive_int(target_rate, 'target_rate')
    if input_length < 0:
        raise ValidationError(
            f"input_length must be >= 0, got {input_length}"
        )

    expansion = target_rate / source_rate
    raw_length = input_length * expansion
    length = math.floor(raw_length)
    if length == raw_length:
        length -= 1
    return max(length, 0)


def resample_time(
    samples: Sequence[float],
    source_rate: int,
    target_rate: int,
    a: int = DEFAULT_A,
) -> np.ndarray:
    """Resample a real time-domain signal to a new sample rate.

    Parameters
    ----------
    samples : Sequence[float]
        Uniformly spaced real samples at ``source_rate``. Not modified.
    source_rate : int
        Input sample rate. Must be >= 1.
    target_rate : int
        Output sample rate. Must be >= 1.
    a : int
        Lanczos kernel half-width. Default is 3.

    Returns
    -------
    np.ndarray
        New ``float64`` array of length
        ``time_output_length(len(samples), source_rate, target_rate)``.

    Examples
    --------
    >>> y = resample_time([0, 1, 0, -1, 0, 1, 0, -1], 8, 16)
    >>> len(y)
    15
    """
    x = as_samples(samples)
    interp = LanczosInterpolator(a=a)
    length = time_output_length(x.shape[0], source_rate, target_rate)
    dx = source_rate / target_rate

    logger.debug(
        "Time resample: %d -> %d samples (dx=%g, a=%d)",
        x.shape[0], length, dx, interp.a,
    )

    positions = np.arange(length, dtype=np.float64) * dx
    return interp(x, positions)
