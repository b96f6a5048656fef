"""
Single linkage in O(n^2) using a nearest-neighbor table.

Follows C. F. Olson, "Parallel algorithms for hierarchical clustering",
Parallel Computing 21 (1995), fig. 2. Each active slot keeps a pointer to
its nearest neighbor. A merge only changes the neighbor sets of the merged
slot and of slots pointing at the removed or relocated slots, so each
iteration costs O(n).
"""

from __future__ import annotations

import logging

import numpy as np

from hclustkit.core.linkage.base import (
    LinkageEngine,
    RawMerges,
    leaf_ids,
    reference_pair_order,
)

logger = logging.getLogger(__name__)


class SingleLinkEngine(LinkageEngine):
    """
    Nearest-neighbor single-linkage engine.

    Active clusters occupy slots 0..active-1 of a working copy of the
    distance matrix. When clusters i < j merge, row/column i take the
    element-wise minimum of rows i and j, then the last active slot is moved
    into slot j and the active count shrinks by one.

    Ties are broken towards the lowest slot index, matching the reference
    scan order.
    """

    def run(self) -> RawMerges:
        n = len(self._matrix)
        merges = RawMerges.allocate(n)
        if n < 2:
            return merges

        logger.debug(f"Single linkage on {n} observations")

        d = self._matrix.to_numpy()
        np.fill_diagonal(d, np.inf)
        ids = leaf_ids(n)

        # argmin returns the first minimum, i.e. the lowest slot on ties
        nearest = np.argmin(d, axis=1)

        active = n
        for step in range(n - 1):
            slots = np.arange(active)
            nn_dist = d[slots, nearest[:active]]
            i = int(np.argmin(nn_dist))
            j = int(nearest[i])
            height = float(nn_dist[i])
            if i > j:
                i, j = j, i

            left, right = reference_pair_order(int(ids[i]), int(ids[j]))
            merges.record(step, left, right, height)

            last = active - 1
            ids[i] = step + 1
            ids[j] = ids[last]

            row = d[i, :active]
            np.minimum(row, d[j, :active], out=row)
            row[i] = np.inf
            d[:active, i] = row

            # Move the last active slot into j
            d[j, :active] = d[last, :active]
            d[:active, j] = d[:active, last]
            d[j, j] = np.inf

            pointers = nearest[:active]
            to_merged = pointers == j
            to_moved = (pointers == last) & ~to_merged
            pointers[to_merged] = i
            pointers[to_moved] = j
            nearest[j] = nearest[last]

            active -= 1
            nearest[i] = int(np.argmin(d[i, :active]))

        return merges
