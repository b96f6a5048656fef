"""
hclustkit: agglomerative hierarchical clustering from distance matrices.

Builds merge trees with the same merge order, heights and pair ordering as
R's hclust() for single, complete, average and Ward linkage, and cuts them
into flat partitions like R's cutree().
"""

__version__ = "0.1.0"
__author__ = "hclustkit Team"

from hclustkit.core.cutree import cutree
from hclustkit.core.distance_matrix import DistanceMatrix
from hclustkit.core.hclust import HierarchicalClustering, hclust
from hclustkit.models.config import ClusteringConfig, CutConfig, LinkageMethod
from hclustkit.models.dendrogram import Dendrogram, MergeStep

__all__ = [
    "ClusteringConfig",
    "CutConfig",
    "Dendrogram",
    "DistanceMatrix",
    "HierarchicalClustering",
    "LinkageMethod",
    "MergeStep",
    "__version__",
    "cutree",
    "hclust",
]
