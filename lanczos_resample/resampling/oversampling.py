# -*- coding: utf-8 -*-
"""
Fixed-Factor Oversampling - Integer-factor upsampling into a caller buffer.

Target index ``i`` with ``i % factor == 0`` is a copy of
``source[i // factor]``; every other index is the Lanczos
reconstruction at ``i / factor``. Aligned samples are copied rather
than interpolated so the original values pass through bit-for-bit.

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
from typing import MutableSequence, Sequence, Union

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


def oversampled_length(source_length: int, factor: int) -> int:
    """Full target length for oversampling ``source_length`` samples."""
    factor = validate_positive_int(factor, 'factor')
    return source_length * factor


def oversample(
    source: Sequence[float],
    target: Union[np.ndarray, MutableSequence[float]],
    factor: int,
    a: int = DEFAULT_A,
) -> None:
    """Oversample ``source`` by ``factor`` and write into ``target``.

    ``target`` is caller-owned and pre-sized. Its full length is
    ``oversampled_length(len(source), factor)``; shorter buffers are
    filled as far as they go. Positions past the last source sample
    are interpolated against zero-padded edges.

    Parameters
    ----------
    source : Sequence[float]
        Uniformly spaced real samples. Not modified.
    target : np.ndarray or MutableSequence[float]
        Output buffer, written in place.
    factor : int
        Oversampling factor. Must be >= 1.
    a : int
        Lanczos kernel half-width. Default is 3.

    Raises
    ------
    ValidationError
        If ``target`` is longer than ``len(source) * factor``, which
        would place an aligned index past the end of ``source``.
    """
    x = as_samples(source, name='source')
    factor = validate_positive_int(factor, 'factor')
    interp = LanczosInterpolator(a=a)

    n_target = len(target)
    n_max = oversampled_length(x.shape[0], factor)
    if n_target > n_max:
        raise ValidationError(
            f"target length {n_target} exceeds len(source) * factor "
            f"= {n_max}"
        )

    logger.debug(
        "Oversample: %d -> %d samples (factor=%d, a=%d)",
        x.shape[0], n_target, factor, interp.a,
    )

    index = np.arange(n_target)
    aligned = index % factor == 0

    values = np.empty(n_target, dtype=np.float64)
    values[aligned] = x[index[aligned] // factor]
    values[~aligned] = interp(x, index[~aligned] / factor)

    if isinstance(target, np.ndarray):
        target[:] = values
    else:
        for i, value in enumerate(values.tolist()):
            target[i] = value
