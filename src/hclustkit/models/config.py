"""
Pydantic configuration models for hclustkit.

These models define the options accepted by the clustering entry points:
the linkage criterion used to build a tree and the parameters used to cut
it into a flat partition.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class LinkageMethod(str, Enum):
    """
    Linkage criterion used to measure the distance between two clusters.

    Method names follow R's hclust():
        SINGLE: minimum pairwise distance
        COMPLETE: maximum pairwise distance
        AVERAGE: mean pairwise distance (UPGMA)
        WARD1: Ward's criterion on the distances as given (R "ward.D")
        WARD2: Ward's criterion on squared distances (R "ward.D2")
    """

    SINGLE = "single"
    COMPLETE = "complete"
    AVERAGE = "average"
    WARD1 = "ward1"
    WARD2 = "ward2"

    @classmethod
    def parse(cls, value: LinkageMethod | str) -> LinkageMethod:
        """
        Resolve a method tag, accepting enum members or plain strings.

        Raises:
            UnsupportedMethodError: If the tag does not name a known method.
        """
        from hclustkit.core.exceptions import UnsupportedMethodError

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnsupportedMethodError(value, [m.value for m in cls]) from None


class ClusteringConfig(BaseModel):
    """Configuration for building a dendrogram from a distance matrix."""

    method: LinkageMethod = Field(
        default=LinkageMethod.SINGLE,
        description="Linkage criterion: single, complete, average, ward1 or ward2",
    )
    check_values: bool = Field(
        default=True,
        description=(
            "Reject matrices with NaN, infinite or negative off-diagonal entries. "
            "Shape and symmetry are always checked."
        ),
    )

    model_config = {"frozen": True}


class CutConfig(BaseModel):
    """
    Parameters for cutting a dendrogram into a flat partition.

    Merges are executed in ascending height order while fewer than
    ``n - k`` merges have been executed and the merge height does not
    exceed ``h``. Both limits apply together.
    """

    k: int = Field(
        default=1,
        ge=1,
        description="Target number of clusters (k >= n yields singletons)",
    )
    h: float | None = Field(
        default=None,
        description="Height threshold; None means the maximum merge height",
    )

    model_config = {"frozen": True}
