"""
Canonical ordering of raw merges.

Engines report merges in the order they discovered them. The public form,
R's hclust() convention, lists merges by ascending height with cluster ids
renumbered to match, and each pair ordered by ``in_reference_order``.
"""

from __future__ import annotations

import numpy as np

from hclustkit.core.linkage.base import RawMerges, in_reference_order


def canonicalize(raw: RawMerges) -> tuple[np.ndarray, RawMerges]:
    """
    Sort merges by height and renumber cluster ids accordingly.

    The sort is stable, so merges at equal height keep their discovery
    order. Applying the function to its own output is a no-op.

    Args:
        raw: Merges in discovery order

    Returns:
        Tuple of (permutation, canonical merges). ``permutation[k]`` is the
        discovery index of canonical step k; use it to reorder any data
        kept in parallel with the raw merges.
    """
    permutation = np.argsort(raw.height, kind="stable")
    inverse = np.empty_like(permutation)
    inverse[permutation] = np.arange(len(permutation))

    left = raw.left.copy()
    right = raw.right.copy()
    for ids in (left, right):
        clusters = ids > 0
        ids[clusters] = inverse[ids[clusters] - 1] + 1

    keep = in_reference_order(left, right)
    left, right = np.where(keep, left, right), np.where(keep, right, left)

    return permutation, RawMerges(
        left=left[permutation],
        right=right[permutation],
        height=raw.height[permutation].copy(),
    )
