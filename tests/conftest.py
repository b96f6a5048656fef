"""
Shared pytest fixtures for hclustkit tests.

Provides small distance matrices with known dendrograms and seeded random
matrices for comparisons against the brute-force oracle and scipy.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from tests.utils.matrices import line_distances, random_distances, write_matrix_csv


# =============================================================================
# Distance Matrix Fixtures
# =============================================================================


@pytest.fixture
def five_points() -> np.ndarray:
    """Leaves at positions 0, 1, 2, 5, 9 on a line."""
    return line_distances([0, 1, 2, 5, 9])


@pytest.fixture
def four_points() -> np.ndarray:
    """Leaves at positions 0, 10, 20, 21: the last two merge first."""
    return line_distances([0, 10, 20, 21])


@pytest.fixture
def two_points() -> np.ndarray:
    return np.array([[0.0, 3.0], [3.0, 0.0]])


@pytest.fixture
def single_point() -> np.ndarray:
    return np.zeros((1, 1))


@pytest.fixture(params=[0, 1, 2, 3, 4, 5])
def random_matrix(request) -> np.ndarray:
    """Random 8 x 8 Euclidean distance matrix with distinct entries."""
    return random_distances(8, seed=request.param)


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def five_points_csv(tmp_path: Path, five_points: np.ndarray) -> Path:
    """Five-point matrix as a labelled CSV file."""
    return write_matrix_csv(
        tmp_path / "distances.csv",
        five_points,
        ["a", "b", "c", "d", "e"],
    )
