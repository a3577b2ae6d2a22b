# -*- coding: utf-8 -*-
"""
Lanczos Resample Exception Hierarchy - Domain-specific exceptions.

Lets callers catch resampling errors distinctly from Python built-in
exceptions. Every exception subclasses both ``LanczosError`` and the
matching built-in exception so existing ``except ValueError`` handlers
keep working.

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


class LanczosError(Exception):
    """Base exception for all lanczos_resample errors."""


class ValidationError(LanczosError, ValueError):
    """Invalid input data or parameters.

    Raised for non-positive rates, factors or bin counts, an invalid
    kernel half-width, non 1-D sample sequences, and oversampling
    target buffers the source cannot fill.
    """
