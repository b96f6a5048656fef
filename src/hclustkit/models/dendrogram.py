"""
Data models for hierarchical clustering results.

Cluster ids follow R's hclust() encoding: a negative value ``-i`` refers to
original observation ``i`` (1-based) and a positive value ``j`` refers to the
cluster created at merge step ``j``.
"""

from __future__ import annotations

from typing import Self

import numpy as np
import polars as pl
from pydantic import BaseModel, Field, model_validator

from hclustkit.models.config import LinkageMethod


def is_leaf(cluster_id: int) -> bool:
    """True if the id refers to an original observation."""
    return cluster_id < 0


def leaf_index(cluster_id: int) -> int:
    """1-based observation index of a leaf id."""
    if cluster_id >= 0:
        msg = f"Cluster id {cluster_id} does not refer to a leaf"
        raise ValueError(msg)
    return -cluster_id


class MergeStep(BaseModel):
    """One agglomeration: two clusters joined at a given height."""

    left: int = Field(description="Cluster id listed first")
    right: int = Field(description="Cluster id listed second")
    height: float = Field(description="Linkage distance at which the pair was joined")

    model_config = {"frozen": True}


class Dendrogram(BaseModel):
    """
    Immutable merge tree, laid out like R's ``hclust`` object.

    Attributes:
        merge: n-1 pairs of cluster ids, one per merge step
        height: n-1 merge heights, non-decreasing
        order: leaf display order (1-based observation indices)
        labels: one label per observation (default 1..n)
        method: linkage criterion used to build the tree
    """

    merge: tuple[tuple[int, int], ...] = Field(description="Merge table")
    height: tuple[float, ...] = Field(description="Merge heights")
    order: tuple[int, ...] = Field(description="Leaf display order")
    labels: tuple[str | int, ...] = Field(description="Observation labels")
    method: LinkageMethod = Field(description="Linkage criterion")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_tree(self) -> Self:
        """Every leaf and every non-root cluster must be consumed exactly once."""
        n = len(self.labels)
        if len(self.merge) != n - 1 or len(self.height) != n - 1:
            msg = (
                f"Dendrogram over {n} observations needs {n - 1} merges, "
                f"got {len(self.merge)} merges and {len(self.height)} heights"
            )
            raise ValueError(msg)
        for step, (lower, upper) in enumerate(zip(self.height, self.height[1:]), start=2):
            if upper < lower:
                msg = f"Merge heights must be non-decreasing, step {step} has {upper} < {lower}"
                raise ValueError(msg)
        if sorted(self.order) != list(range(1, n + 1)):
            msg = "Leaf order must be a permutation of 1..n"
            raise ValueError(msg)

        seen: set[int] = set()
        for step, pair in enumerate(self.merge, start=1):
            for cluster_id in pair:
                if cluster_id == 0 or cluster_id < -n or cluster_id >= step:
                    msg = f"Merge step {step} refers to invalid cluster id {cluster_id}"
                    raise ValueError(msg)
                if cluster_id in seen:
                    msg = f"Cluster id {cluster_id} is merged more than once"
                    raise ValueError(msg)
                seen.add(cluster_id)
        return self

    @property
    def n_leaves(self) -> int:
        return len(self.labels)

    @property
    def steps(self) -> list[MergeStep]:
        """Merge table and heights as a list of MergeStep records."""
        return [
            MergeStep(left=left, right=right, height=h)
            for (left, right), h in zip(self.merge, self.height, strict=True)
        ]

    def merge_array(self) -> np.ndarray:
        """Merge table as an (n-1) x 2 integer array."""
        return np.array(self.merge, dtype=np.int64).reshape(len(self.merge), 2)

    def height_array(self) -> np.ndarray:
        return np.array(self.height, dtype=np.float64)

    def ordered_labels(self) -> list[str | int]:
        """Labels in leaf display order."""
        return [self.labels[i - 1] for i in self.order]

    def to_polars(self) -> pl.DataFrame:
        """
        Merge table as a DataFrame.

        Returns:
            DataFrame with columns step, left, right, height
        """
        return pl.DataFrame(
            {
                "step": list(range(1, len(self.merge) + 1)),
                "left": [pair[0] for pair in self.merge],
                "right": [pair[1] for pair in self.merge],
                "height": list(self.height),
            },
            schema={
                "step": pl.Int64,
                "left": pl.Int64,
                "right": pl.Int64,
                "height": pl.Float64,
            },
        )
