"""
Shared types for the merge engines.

Every engine consumes a validated DistanceMatrix and produces RawMerges:
the merge pairs and heights in the order the engine discovered them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from hclustkit.core.distance_matrix import DistanceMatrix


@dataclass(frozen=True)
class RawMerges:
    """Merge pairs and heights in discovery order."""

    left: np.ndarray
    right: np.ndarray
    height: np.ndarray

    @classmethod
    def allocate(cls, n: int) -> RawMerges:
        """Zeroed buffers for the n - 1 merges of n observations."""
        size = max(n - 1, 0)
        return cls(
            left=np.zeros(size, dtype=np.int64),
            right=np.zeros(size, dtype=np.int64),
            height=np.zeros(size, dtype=np.float64),
        )

    def __len__(self) -> int:
        return len(self.height)

    def record(self, step: int, left: int, right: int, height: float) -> None:
        """Store merge ``step`` (0-based) in the preallocated buffers."""
        self.left[step] = left
        self.right[step] = right
        self.height[step] = height


def leaf_ids(n: int) -> np.ndarray:
    """Initial cluster id per slot: -1, -2, ..., -n."""
    return -np.arange(1, n + 1, dtype=np.int64)


class LinkageEngine(ABC):
    """
    Base class for merge engines.

    Engines hold no state between calls to ``run``; every scratch buffer is
    allocated inside ``run`` and released when it returns.
    """

    def __init__(self, matrix: DistanceMatrix) -> None:
        self._matrix = matrix

    @abstractmethod
    def run(self) -> RawMerges:
        """Compute all n - 1 merges."""


def in_reference_order(left, right):
    """
    True where a pair already follows R's hclust() ordering convention.

    Two leaves: the lower observation index first (-1 before -2). Two
    clusters: the smaller id first. Leaf and cluster: the leaf first.
    Works element-wise on integer arrays as well as on plain ints.
    """
    return (
        ((left < 0) & (right < 0) & (left > right))
        | ((left > 0) & (right > 0) & (left < right))
        | ((left < 0) & (right > 0))
    )


def reference_pair_order(left: int, right: int) -> tuple[int, int]:
    """Return the pair reordered to R's convention."""
    if in_reference_order(left, right):
        return left, right
    return right, left
