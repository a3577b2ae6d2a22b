# -*- coding: utf-8 -*-
"""
Resampling - Lanczos resampling operations.

- ``resample_time`` / ``time_output_length`` — real signal to a new
  sample rate.
- ``resample_frequency`` — complex spectrum to a new bin count.
- ``oversample`` / ``oversampled_length`` — integer-factor
  oversampling into a caller-supplied buffer.

All operations are stateless and take the kernel half-width ``a``
(default 3) as a keyword argument.

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

from lanczos_resample.resampling.time_domain import resample_time, time_output_length
from lanczos_resample.resampling.frequency_domain import resample_frequency
from lanczos_resample.resampling.oversampling import (
    oversample,
    oversampled_length,
)

__all__ = [
    'resample_time',
    'time_output_length',
    'resample_frequency',
    'oversample',
    'oversampled_length',
]
