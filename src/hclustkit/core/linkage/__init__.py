"""
Merge engines for agglomerative hierarchical clustering.

Three algorithms cover the supported linkage criteria:
- SingleLinkEngine: O(n^2) nearest-neighbor updates (single)
- ChainLinkEngine: nearest-neighbor chain over member lists (complete, average)
- WardEngine: Lance-Williams recurrence (ward1, ward2)
"""

from hclustkit.core.linkage.base import (
    LinkageEngine,
    RawMerges,
    in_reference_order,
    leaf_ids,
    reference_pair_order,
)
from hclustkit.core.linkage.chain import (
    ChainLinkEngine,
    LinkageFunction,
    average_linkage,
    complete_linkage,
    single_linkage,
)
from hclustkit.core.linkage.single import SingleLinkEngine
from hclustkit.core.linkage.ward import WardEngine

__all__ = [
    "ChainLinkEngine",
    "LinkageEngine",
    "LinkageFunction",
    "RawMerges",
    "SingleLinkEngine",
    "WardEngine",
    "average_linkage",
    "complete_linkage",
    "in_reference_order",
    "leaf_ids",
    "reference_pair_order",
    "single_linkage",
]
