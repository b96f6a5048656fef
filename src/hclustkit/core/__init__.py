"""
Core algorithms for hierarchical clustering.

This module contains the distance matrix input type, the merge engines,
canonical ordering, dendrogram assembly and tree cutting.
"""

from hclustkit.core.canonical import canonicalize
from hclustkit.core.cutree import TreeCutter, cutree
from hclustkit.core.dendrogram import DendrogramBuilder, leaf_order
from hclustkit.core.distance_matrix import DistanceMatrix
from hclustkit.core.hclust import HierarchicalClustering, hclust
from hclustkit.core.parsers import DistanceMatrixParser

__all__ = [
    "DendrogramBuilder",
    "DistanceMatrix",
    "DistanceMatrixParser",
    "HierarchicalClustering",
    "TreeCutter",
    "canonicalize",
    "cutree",
    "hclust",
    "leaf_order",
]
