# -*- coding: utf-8 -*-
"""
Interpolation Base Classes - ABCs for fractional-index interpolation.

Defines the ``Interpolator`` ABC (callable interface) and
``KernelInterpolator`` (template for kernel-based methods that share
neighbor gathering and zero-padded edge handling).

Samples are assumed uniformly spaced with unit spacing, so positions
are expressed as fractional sample indices.

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
from abc import ABC, abstractmethod

# Third-party
import numpy as np

# Lanczos Resample internal
from lanczos_resample.exceptions import ValidationError


class Interpolator(ABC):
    """Abstract base class for 1D interpolation on a unit-spaced grid.

    All interpolators are callable with signature
    ``(samples, positions) -> values``.

    Parameters
    ----------
    samples : np.ndarray
        Uniformly spaced sample values, shape ``(N,)``. Sample ``i``
        sits at position ``i``.
    positions : np.ndarray
        Fractional sample indices to evaluate at, shape ``(M,)``.

    Returns
    -------
    np.ndarray
        Interpolated values at ``positions``, shape ``(M,)``.
    """

    @abstractmethod
    def __call__(
        self,
        samples: np.ndarray,
        positions: np.ndarray,
    ) -> np.ndarray:
        """Interpolate ``samples`` at ``positions``."""
        ...


class KernelInterpolator(Interpolator):
    """Base class for kernel-based interpolators.

    Handles the common boilerplate: building the neighbor index matrix,
    computing distances from each output point to its neighbors, and
    zero-padding indices that fall outside the sample sequence.
    Subclasses only implement :meth:`_compute_weights`.

    For a position ``x`` the neighbors are the ``kernel_length`` integer
    indices in ``[floor(x) + 1 - half, floor(x) + 1 + half)``. Neighbors
    outside ``[0, N)`` contribute nothing. Weights are applied as-is;
    they are not renormalized near the edges.

    Parameters
    ----------
    kernel_length : int
        Number of input samples used per output point. Must be even
        and >= 2.
    """

    def __init__(self, kernel_length: int) -> None:
        if kernel_length < 2:
            raise ValidationError(
                f"kernel_length must be >= 2, got {kernel_length}"
            )
        if kernel_length % 2 != 0:
            raise ValidationError(
                f"kernel_length must be even, got {kernel_length}"
            )
        self._kernel_length = kernel_length
        self._half = kernel_length // 2

    @property
    def kernel_length(self) -> int:
        """Number of taps per output point."""
        return self._kernel_length

    @abstractmethod
    def _compute_weights(self, dx: np.ndarray) -> np.ndarray:
        """Compute kernel weights from signed distances.

        Parameters
        ----------
        dx : np.ndarray
            Distances ``x - i`` from output points to their neighbors,
            shape ``(M, kernel_length)``, in sample-spacing units.

        Returns
        -------
        np.ndarray
            Kernel weights, same shape as ``dx``.
        """
        ...

    def __call__(
        self,
        samples: np.ndarray,
        positions: np.ndarray,
    ) -> np.ndarray:
        """Interpolate using the kernel.

        Parameters
        ----------
        samples : np.ndarray
            Real sample values, shape ``(N,)``. May be empty. Complex
            input is rejected.
        positions : np.ndarray
            Fractional sample indices, shape ``(M,)``.

        Returns
        -------
        np.ndarray
            Interpolated ``float64`` values, shape ``(M,)``.
        """
        if np.iscomplexobj(samples):
            raise ValidationError(
                "samples must be real; interpolate real and imaginary "
                "parts separately"
            )
        samples = np.asarray(samples, dtype=np.float64)
        positions = np.asarray(positions, dtype=np.float64)
        if samples.ndim != 1:
            raise ValidationError(
                f"samples must be 1D, got shape {samples.shape}"
            )
        if positions.ndim != 1:
            raise ValidationError(
                f"positions must be 1D, got shape {positions.shape}"
            )

        n = samples.shape[0]
        if n == 0 or positions.size == 0:
            return np.zeros(positions.shape[0], dtype=np.float64)

        half = self._half

        # Window starts one past the base index
        center = np.floor(positions).astype(np.int64) + 1

        # Build neighbor index matrix: (M, kernel_length)
        offsets = np.arange(-half, half)
        neighbor_idx = center[:, np.newaxis] + offsets[np.newaxis, :]

        # Out-of-range neighbors contribute zero
        valid = (neighbor_idx >= 0) & (neighbor_idx < n)
        neighbor_idx_clipped = np.clip(neighbor_idx, 0, n - 1)
        y_neighbors = np.where(valid, samples[neighbor_idx_clipped], 0.0)

        dx = positions[:, np.newaxis] - neighbor_idx

        weights = self._compute_weights(dx)

        return np.sum(weights * y_neighbors, axis=1)
