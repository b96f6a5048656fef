"""Testing utilities for hclustkit."""

from tests.utils.matrices import line_distances, random_distances, write_matrix_csv
from tests.utils.oracle import brute_force_hclust, merge_clusters

__all__ = [
    "brute_force_hclust",
    "line_distances",
    "merge_clusters",
    "random_distances",
    "write_matrix_csv",
]
