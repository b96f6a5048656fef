"""
Nearest-neighbor chain clustering for complete and average linkage.

Follows C. F. Olson, Parallel Computing 21 (1995), fig. 5. The chain is
extended with the nearest neighbor of its tail until the tail's nearest
neighbor is the element two positions back; those two clusters are
reciprocal nearest neighbors and are merged. For reducible linkage criteria
the rest of the chain stays valid, so the walk resumes three positions back.

Cluster distances are computed by a linkage function over explicit member
lists, so any criterion derived from the original matrix can be plugged in.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import numpy as np

from hclustkit.core.distance_matrix import DistanceMatrix
from hclustkit.core.linkage.base import LinkageEngine, RawMerges, leaf_ids

logger = logging.getLogger(__name__)

LinkageFunction = Callable[[np.ndarray, Sequence[int], Sequence[int]], float]


def single_linkage(d: np.ndarray, a: Sequence[int], b: Sequence[int]) -> float:
    """Minimum distance between members of a and b."""
    return float(d[np.ix_(a, b)].min())


def complete_linkage(d: np.ndarray, a: Sequence[int], b: Sequence[int]) -> float:
    """Maximum distance between members of a and b."""
    return float(d[np.ix_(a, b)].max())


def average_linkage(d: np.ndarray, a: Sequence[int], b: Sequence[int]) -> float:
    """Mean distance over all member pairs of a and b (UPGMA)."""
    return float(d[np.ix_(a, b)].mean())


class ChainLinkEngine(LinkageEngine):
    """
    Nearest-neighbor chain engine parameterized by a linkage function.

    The linkage function must be symmetric and depend only on the original
    matrix and the two member lists. Merges come out in discovery order,
    which is not necessarily ascending height.
    """

    def __init__(self, matrix: DistanceMatrix, linkage: LinkageFunction) -> None:
        super().__init__(matrix)
        self._linkage = linkage

    def _nearest(
        self,
        members: list[list[int]],
        slot: int,
        active: int,
    ) -> tuple[int, float]:
        """Nearest active slot to ``slot`` and its distance (lowest slot on ties)."""
        d = self._matrix.values
        best = -1
        best_dist = np.inf
        own = members[slot]
        for other in range(active):
            if other == slot:
                continue
            dist = self._linkage(d, own, members[other])
            if dist < best_dist:
                best_dist = dist
                best = other
        return best, best_dist

    def run(self) -> RawMerges:
        n = len(self._matrix)
        merges = RawMerges.allocate(n)
        if n < 2:
            return merges

        logger.debug(
            f"Nearest-neighbor chain ({getattr(self._linkage, '__name__', 'custom')}) "
            f"on {n} observations"
        )

        members: list[list[int]] = [[k] for k in range(n)]
        ids = leaf_ids(n)
        chain = [0]

        active = n
        for step in range(n - 1):
            while True:
                nearest, height = self._nearest(members, chain[-1], active)
                chain.append(nearest)
                if len(chain) > 2 and chain[-1] == chain[-3]:
                    break

            lo, hi = sorted((chain[-2], chain[-1]))
            merges.record(step, int(ids[lo]), int(ids[hi]), height)

            last = active - 1
            ids[lo] = step + 1
            ids[hi] = ids[last]
            members[lo] = members[lo] + members[hi]
            members[hi] = members[last]

            if len(chain) > 3:
                del chain[-3:]
            else:
                del chain[1:]
            chain = [hi if slot == last else slot for slot in chain]
            active -= 1

            # An absorbed last slot has no replacement; keep only the prefix before it
            for position, slot in enumerate(chain):
                if slot >= active:
                    del chain[position:]
                    break
            if not chain:
                chain.append(lo)

        return merges
