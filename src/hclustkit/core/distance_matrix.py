"""
Validated, read-only pairwise distance matrix.

This module provides the DistanceMatrix class, the single input type accepted
by every clustering engine. Validation happens once at construction so the
engines can index the underlying NumPy array without further checks.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from hclustkit.core.exceptions import (
    AsymmetryError,
    DistanceValueError,
    InsufficientInputError,
    ShapeError,
)

logger = logging.getLogger(__name__)


class DistanceMatrix:
    """
    Square, symmetric matrix of pairwise distances stored as float64.

    The diagonal is never read by the clustering engines, so its values are
    not validated. The stored array is a private copy flagged read-only.

    Example:
        >>> dm = DistanceMatrix([[0, 1, 4], [1, 0, 2], [4, 2, 0]])
        >>> len(dm)
        3
        >>> dm[0, 2]
        4.0
    """

    __slots__ = ("_labels", "_n", "_values")

    def __init__(
        self,
        values: Any,
        labels: Sequence[str | int] | None = None,
        check_values: bool = True,
    ) -> None:
        """
        Initialize and validate a distance matrix.

        Args:
            values: Array-like n x n matrix of pairwise distances
            labels: Optional observation labels (length n)
            check_values: Reject NaN, infinite or negative off-diagonal entries

        Raises:
            ShapeError: If the input is not a square 2-D array or has ragged rows
            InsufficientInputError: If the matrix has no rows
            AsymmetryError: If d[i, j] != d[j, i] for some pair
            DistanceValueError: If check_values and an off-diagonal entry is invalid
        """
        try:
            array = np.array(values, dtype=np.float64)
        except ValueError as e:
            # Ragged rows; anything else (e.g. non-numeric text) propagates
            if "sequence" not in str(e):
                raise
            raise ShapeError(None) from e
        if array.size == 0:
            raise InsufficientInputError(0)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ShapeError(tuple(array.shape))

        n = array.shape[0]
        off_diagonal = ~np.eye(n, dtype=bool)
        mismatch = (array != array.T) & off_diagonal
        # NaN never compares equal, so mirrored NaNs are left to the value check
        mismatch &= ~(np.isnan(array) & np.isnan(array.T))
        if mismatch.any():
            i, j = (int(x) for x in np.argwhere(mismatch)[0])
            raise AsymmetryError(i, j, float(array[i, j]), float(array[j, i]))

        if check_values:
            invalid = (~np.isfinite(array) | (array < 0)) & off_diagonal
            if invalid.any():
                raise DistanceValueError(
                    [(int(i), int(j), float(array[i, j])) for i, j in np.argwhere(invalid)]
                )

        if labels is not None and len(labels) != n:
            msg = f"Got {len(labels)} labels for a {n} x {n} distance matrix"
            raise ValueError(msg)

        array.flags.writeable = False
        self._values = array
        self._n = n
        self._labels: tuple[str | int, ...] | None = (
            tuple(labels) if labels is not None else None
        )
        logger.debug(f"Validated {n} x {n} distance matrix")

    def __len__(self) -> int:
        """Number of observations."""
        return self._n

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._values[index])

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the full matrix."""
        return self._values

    @property
    def labels(self) -> tuple[str | int, ...] | None:
        """Observation labels, or None when the caller supplied none."""
        return self._labels

    def condensed(self) -> np.ndarray:
        """
        Packed upper triangle (i < j) in row-major order.

        Entry (i, j) lives at ``i * n - i * (i + 1) // 2 + j - i - 1``, the
        layout used by scipy's condensed distance vectors.

        Returns:
            Writable float64 copy of length n * (n - 1) / 2
        """
        rows, cols = np.triu_indices(self._n, k=1)
        return self._values[rows, cols].copy()

    def to_numpy(self) -> np.ndarray:
        """Writable copy of the full matrix."""
        return self._values.copy()
