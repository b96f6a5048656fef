"""
Ward's minimum-variance clustering via the Lance-Williams recurrence.

Based on the R port of F. Murtagh's hclust.f (Murtagh 1986; Ihaka 1996;
Leisch 2000; Maechler 2001). Two published conventions are supported, see
Murtagh & Legendre, "Ward's hierarchical agglomerative clustering method:
which algorithms implement Ward's criterion?", J. Classification 31 (2014):

    ward1: recurrence applied to the distances as given (R "ward.D")
    ward2: recurrence applied to squared distances, heights reported as
           square roots (R "ward.D2")
"""

from __future__ import annotations

import logging

import numpy as np

from hclustkit.core.distance_matrix import DistanceMatrix
from hclustkit.core.linkage.base import LinkageEngine, RawMerges, leaf_ids

logger = logging.getLogger(__name__)


def packed_index(n: int, i: np.ndarray | int, j: np.ndarray | int) -> np.ndarray | int:
    """Position of pair (i, j), i < j, in a packed upper triangle of order n."""
    return n * i - (i * (i + 1)) // 2 + j - i - 1


class WardEngine(LinkageEngine):
    """
    Lance-Williams engine for Ward's criterion.

    Keeps a packed upper-triangular working copy of the (possibly squared)
    distances, a size counter per cluster and, for every active cluster i,
    its nearest neighbor among active clusters j > i. Retired clusters are
    flagged inactive rather than relocated, so slot numbers stay fixed and
    the reference tie-breaking (lowest index first) is preserved.
    """

    def __init__(self, matrix: DistanceMatrix, squared: bool = False) -> None:
        super().__init__(matrix)
        self._squared = squared

    def _refresh_neighbors(
        self,
        packed: np.ndarray,
        active: np.ndarray,
        nearest: np.ndarray,
        nearest_dist: np.ndarray,
    ) -> None:
        """Recompute the nearest higher-indexed neighbor of every active cluster."""
        n = len(active)
        for i in range(n - 1):
            if not active[i]:
                continue
            start = packed_index(n, i, i + 1)
            row = np.where(active[i + 1:], packed[start:start + n - i - 1], np.inf)
            offset = int(np.argmin(row))
            if row[offset] < np.inf:
                nearest[i] = i + 1 + offset
            nearest_dist[i] = row[offset]

    def run(self) -> RawMerges:
        n = len(self._matrix)
        merges = RawMerges.allocate(n)
        if n < 2:
            return merges

        logger.debug(
            f"Ward ({'squared' if self._squared else 'raw'} distances) on {n} observations"
        )

        packed = self._matrix.condensed()
        if self._squared:
            np.square(packed, out=packed)

        ids = leaf_ids(n)
        size = np.ones(n, dtype=np.float64)
        active = np.ones(n, dtype=bool)
        nearest = np.zeros(n - 1, dtype=np.int64)
        nearest_dist = np.full(n - 1, np.inf)
        self._refresh_neighbors(packed, active, nearest, nearest_dist)

        for step in range(n - 1):
            candidates = np.where(active[:-1], nearest_dist, np.inf)
            im = int(np.argmin(candidates))
            jm = int(nearest[im])
            a, b = min(im, jm), max(im, jm)
            merges.record(step, int(ids[a]), int(ids[b]), float(candidates[im]))

            ids[a] = step + 1
            active[b] = False

            others = np.flatnonzero(active)
            others = others[others != a]
            if len(others):
                ind_a = packed_index(n, np.minimum(a, others), np.maximum(a, others))
                ind_b = packed_index(n, np.minimum(b, others), np.maximum(b, others))
                d_ab = packed[packed_index(n, a, b)]
                sk = size[others]
                packed[ind_a] = (
                    (size[a] + sk) * packed[ind_a]
                    + (size[b] + sk) * packed[ind_b]
                    - sk * d_ab
                ) / (size[a] + size[b] + sk)

            size[a] += size[b]
            self._refresh_neighbors(packed, active, nearest, nearest_dist)

        if self._squared:
            np.sqrt(merges.height, out=merges.height)

        return merges
