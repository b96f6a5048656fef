"""
Flat partitions from a dendrogram.

Cuts a tree either into a target number of clusters or at a height
threshold, numbering clusters the way R's cutree() does.
"""

from __future__ import annotations

import logging

import numpy as np

from hclustkit.models.config import CutConfig
from hclustkit.models.dendrogram import Dendrogram

logger = logging.getLogger(__name__)


class TreeCutter:
    """
    Derives flat partitions from a built Dendrogram without modifying it.

    Merges are replayed in ascending height order. Replay stops as soon as
    ``n - k`` merges have been executed or the next merge height exceeds
    ``h``; both limits are checked before every merge.

    Cluster numbers are assigned by encounter: clusters formed by executed
    merges first (in merge order), then observations no executed merge
    touched (in index order).
    """

    def __init__(self, dendrogram: Dendrogram) -> None:
        self._tree = dendrogram

    def cut(self, options: CutConfig | None = None) -> np.ndarray:
        """
        Assign every observation to a cluster.

        Args:
            options: Cut parameters (defaults: k=1, h=maximum height)

        Returns:
            Integer array of length n; entry i is the cluster (1..m) of
            observation i + 1
        """
        options = options or CutConfig()
        n = self._tree.n_leaves
        heights = self._tree.height
        threshold = options.h
        if threshold is None:
            threshold = max(heights) if heights else 0.0

        merge_limit = n - options.k
        formed: list[list[int]] = []
        untouched: list[list[int]] = [[leaf] for leaf in range(1, n + 1)]

        step = 0
        while step < merge_limit and heights[step] <= threshold:
            members: list[int] = []
            for cluster_id in self._tree.merge[step]:
                if cluster_id < 0:
                    members.append(-cluster_id)
                    untouched[-cluster_id - 1] = []
                else:
                    members.extend(formed[cluster_id - 1])
                    formed[cluster_id - 1] = []
            formed.append(members)
            step += 1

        assignment = np.zeros(n, dtype=np.int64)
        clusters = [members for members in formed + untouched if members]
        for number, members in enumerate(clusters, start=1):
            assignment[np.asarray(members) - 1] = number

        logger.debug(
            f"Cut {n} observations into {len(clusters)} clusters "
            f"after {step} merges (k={options.k}, h={threshold})"
        )
        return assignment


def cutree(
    dendrogram: Dendrogram,
    k: int = 1,
    h: float | None = None,
) -> np.ndarray:
    """
    Cut a dendrogram into k clusters and/or at height h.

    Args:
        dendrogram: Tree to cut
        k: Target number of clusters (default 1)
        h: Only merges at height <= h are executed (default: maximum height)

    Returns:
        Integer array of cluster numbers, one per observation

    Raises:
        pydantic.ValidationError: If k < 1 or h is not a number
    """
    return TreeCutter(dendrogram).cut(CutConfig(k=k, h=h))
