"""
Hierarchical clustering entry point.

Selects the merge engine for the requested linkage criterion, canonicalizes
its output and assembles the Dendrogram:

    DistanceMatrix -> engine -> canonicalize -> DendrogramBuilder
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from hclustkit.core.canonical import canonicalize
from hclustkit.core.dendrogram import DendrogramBuilder
from hclustkit.core.distance_matrix import DistanceMatrix
from hclustkit.core.linkage import (
    ChainLinkEngine,
    LinkageEngine,
    SingleLinkEngine,
    WardEngine,
    average_linkage,
    complete_linkage,
)
from hclustkit.models.config import ClusteringConfig, LinkageMethod
from hclustkit.models.dendrogram import Dendrogram

logger = logging.getLogger(__name__)

_ENGINES: dict[LinkageMethod, Callable[[DistanceMatrix], LinkageEngine]] = {
    LinkageMethod.SINGLE: SingleLinkEngine,
    LinkageMethod.COMPLETE: lambda m: ChainLinkEngine(m, complete_linkage),
    LinkageMethod.AVERAGE: lambda m: ChainLinkEngine(m, average_linkage),
    LinkageMethod.WARD1: lambda m: WardEngine(m, squared=False),
    LinkageMethod.WARD2: lambda m: WardEngine(m, squared=True),
}


class HierarchicalClustering:
    """
    Agglomerative clustering compatible with R's hclust().

    Example:
        >>> clustering = HierarchicalClustering(ClusteringConfig(method="average"))
        >>> tree = clustering.fit(distances)
        >>> tree.merge[0]
        (-1, -2)
    """

    def __init__(self, config: ClusteringConfig | None = None) -> None:
        """
        Args:
            config: Clustering configuration (uses defaults if None)
        """
        self.config = config or ClusteringConfig()

    def fit(
        self,
        distances: DistanceMatrix | Any,
        labels: Sequence[str | int] | None = None,
    ) -> Dendrogram:
        """
        Build the dendrogram for a distance matrix.

        Args:
            distances: DistanceMatrix or any array-like n x n matrix
            labels: Observation labels; falls back to the matrix labels,
                then to 1..n

        Returns:
            Dendrogram with merges in ascending height order

        Raises:
            InputMatrixError: If the matrix fails validation
        """
        matrix = (
            distances
            if isinstance(distances, DistanceMatrix)
            else DistanceMatrix(distances, check_values=self.config.check_values)
        )
        method = self.config.method
        n = len(matrix)

        raw = _ENGINES[method](matrix).run()
        _, merges = canonicalize(raw)

        builder = DendrogramBuilder(method, labels if labels is not None else matrix.labels)
        tree = builder.build(merges, n)
        logger.info(f"Built {method.value} dendrogram over {n} observations")
        return tree


def hclust(
    distances: DistanceMatrix | Any,
    method: LinkageMethod | str = LinkageMethod.SINGLE,
    labels: Sequence[str | int] | None = None,
) -> Dendrogram:
    """
    Hierarchical clustering of a distance matrix.

    Args:
        distances: DistanceMatrix or any array-like n x n symmetric matrix
        method: One of single, complete, average, ward1, ward2
        labels: Optional observation labels

    Returns:
        Dendrogram

    Raises:
        UnsupportedMethodError: If method is not recognized
        InputMatrixError: If the matrix fails validation

    Example:
        >>> import numpy as np
        >>> x = np.array([0.0, 1.0, 2.0, 5.0, 9.0])
        >>> tree = hclust(np.abs(x[:, None] - x[None, :]), "single")
        >>> tree.merge
        ((-1, -2), (-3, 1), (-4, 2), (-5, 3))
    """
    config = ClusteringConfig(method=LinkageMethod.parse(method))
    return HierarchicalClustering(config).fit(distances, labels=labels)
