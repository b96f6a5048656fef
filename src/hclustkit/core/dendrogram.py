"""
Assembly of the immutable Dendrogram result.

Takes canonical merges and derives the leaf display order, then packs
everything into the Dendrogram model together with labels and the method tag.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Sequence

from hclustkit.core.linkage.base import RawMerges
from hclustkit.models.config import LinkageMethod
from hclustkit.models.dendrogram import Dendrogram

logger = logging.getLogger(__name__)


def leaf_order(left: Sequence[int], right: Sequence[int], n: int) -> list[int]:
    """
    Leaf display order of a canonical merge table.

    Each step contributes the leaves of its left operand followed by those
    of its right operand; the order of the final step covers all leaves.

    Args:
        left: First cluster id of every merge step
        right: Second cluster id of every merge step
        n: Number of observations

    Returns:
        1-based observation indices in display order
    """
    if n == 1:
        return [1]

    orders: list[list[int]] = []

    def leaves(cluster_id: int) -> list[int]:
        return [-cluster_id] if cluster_id < 0 else orders[cluster_id - 1]

    for a, b in zip(left, right, strict=True):
        orders.append(leaves(int(a)) + leaves(int(b)))
    return orders[-1]


def _normalize_label(label: object) -> str | int:
    if isinstance(label, str):
        return label
    if isinstance(label, numbers.Integral):
        return int(label)
    return str(label)


class DendrogramBuilder:
    """
    Builds Dendrogram objects from canonical merges.

    Example:
        >>> builder = DendrogramBuilder(LinkageMethod.SINGLE)
        >>> tree = builder.build(canonical_merges, n=5)
        >>> tree.order
        (5, 4, 3, 1, 2)
    """

    def __init__(
        self,
        method: LinkageMethod,
        labels: Sequence[str | int] | None = None,
    ) -> None:
        """
        Args:
            method: Linkage criterion recorded in the result
            labels: Observation labels; defaults to 1..n
        """
        self._method = method
        self._labels = labels

    def build(self, merges: RawMerges, n: int) -> Dendrogram:
        """
        Assemble the Dendrogram.

        Args:
            merges: Canonical merges (ascending height, renumbered ids)
            n: Number of observations

        Returns:
            Frozen Dendrogram instance
        """
        if self._labels is None:
            labels: list[str | int] = list(range(1, n + 1))
        else:
            if len(self._labels) != n:
                msg = f"Got {len(self._labels)} labels for {n} observations"
                raise ValueError(msg)
            labels = [_normalize_label(label) for label in self._labels]

        left = merges.left.tolist()
        right = merges.right.tolist()
        return Dendrogram(
            merge=tuple(zip(left, right, strict=True)),
            height=tuple(merges.height.tolist()),
            order=tuple(leaf_order(left, right, n)),
            labels=tuple(labels),
            method=self._method,
        )
