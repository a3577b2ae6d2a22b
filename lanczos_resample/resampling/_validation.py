# -*- coding: utf-8 -*-
"""
Resampling Validation Helpers - Shared argument checks.

Provides reusable validation functions for the resampling operations.
Every operation calls these helpers to enforce consistent constraints
on rates, factors, bin counts and sample sequences.

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
import numbers

# Third-party
import numpy as np

# Lanczos Resample internal
from lanczos_resample.exceptions import ValidationError


def validate_positive_int(value, name: str) -> int:
    """Validate that ``value`` is a positive integer.

    Parameters
    ----------
    value : int
        The value to validate.
    name : str
        Parameter name for error messages.

    Returns
    -------
    int
        ``value`` as a plain ``int``.

    Raises
    ------
    ValidationError
        If ``value`` is not an integer or is less than 1.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name} must be >= 1, got {value}")
    return int(value)


def as_samples(values, dtype=np.float64, name: str = 'samples') -> np.ndarray:
    """Convert an ordered sequence to a 1D array of ``dtype``.

    Parameters
    ----------
    values : array_like
        Ordered numeric sequence.
    dtype : numpy dtype
        Target dtype. Default ``float64``.
    name : str
        Parameter name for error messages. Default ``'samples'``.

    Returns
    -------
    np.ndarray
        1D array. May share memory with ``values``; callers only read it.

    Raises
    ------
    ValidationError
        If ``values`` is not one-dimensional, or is complex when
        ``dtype`` is real.
    """
    real_dtype = not np.issubdtype(dtype, np.complexfloating)
    if real_dtype and np.iscomplexobj(values):
        raise ValidationError(f"{name} must be real, got complex values")
    arr = np.asarray(values, dtype=dtype)
    if arr.ndim != 1:
        raise ValidationError(
            f"{name} must be 1D, got shape {arr.shape}"
        )
    return arr
