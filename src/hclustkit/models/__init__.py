"""
Pydantic data models for hclustkit.

Provides type-safe models for clustering configuration and results.
"""

from hclustkit.models.config import ClusteringConfig, CutConfig, LinkageMethod
from hclustkit.models.dendrogram import Dendrogram, MergeStep, is_leaf, leaf_index

__all__ = [
    "ClusteringConfig",
    "CutConfig",
    "Dendrogram",
    "LinkageMethod",
    "MergeStep",
    "is_leaf",
    "leaf_index",
]
