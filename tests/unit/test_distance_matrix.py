"""Unit tests for DistanceMatrix validation."""

from __future__ import annotations

import numpy as np
import pytest

from hclustkit.core.distance_matrix import DistanceMatrix
from hclustkit.core.exceptions import (
    AsymmetryError,
    DistanceValueError,
    InsufficientInputError,
    ShapeError,
)


class TestConstruction:
    """Tests for accepted inputs."""

    def test_from_nested_lists(self):
        dm = DistanceMatrix([[0, 1, 4], [1, 0, 2], [4, 2, 0]])
        assert len(dm) == 3
        assert dm[0, 2] == 4.0
        assert dm.values.dtype == np.float64

    def test_labels(self, five_points):
        dm = DistanceMatrix(five_points, labels=["a", "b", "c", "d", "e"])
        assert dm.labels == ("a", "b", "c", "d", "e")

    def test_labels_default_none(self, five_points):
        assert DistanceMatrix(five_points).labels is None

    def test_label_count_mismatch(self, five_points):
        with pytest.raises(ValueError, match="2 labels"):
            DistanceMatrix(five_points, labels=["a", "b"])

    def test_single_observation(self, single_point):
        assert len(DistanceMatrix(single_point)) == 1

    def test_diagonal_not_validated(self):
        d = np.array([[np.nan, 1.0], [1.0, -5.0]])
        assert len(DistanceMatrix(d)) == 2


class TestImmutability:
    """The matrix never changes after construction."""

    def test_values_read_only(self, five_points):
        dm = DistanceMatrix(five_points)
        with pytest.raises(ValueError):
            dm.values[0, 1] = 100.0

    def test_input_copied(self, five_points):
        dm = DistanceMatrix(five_points)
        five_points[0, 1] = five_points[1, 0] = 100.0
        assert dm[0, 1] == 1.0

    def test_to_numpy_writable_copy(self, five_points):
        dm = DistanceMatrix(five_points)
        copy = dm.to_numpy()
        copy[0, 1] = 100.0
        assert dm[0, 1] == 1.0


class TestCondensed:
    def test_layout(self):
        dm = DistanceMatrix([[0, 1, 2, 3], [1, 0, 4, 5], [2, 4, 0, 6], [3, 5, 6, 0]])
        assert dm.condensed().tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    def test_matches_scipy(self, random_matrix):
        from scipy.spatial.distance import squareform

        condensed = DistanceMatrix(random_matrix).condensed()
        np.testing.assert_array_equal(condensed, squareform(random_matrix, checks=False))

    def test_single_observation_empty(self, single_point):
        assert len(DistanceMatrix(single_point).condensed()) == 0


class TestValidation:
    """Tests for rejected inputs."""

    @pytest.mark.parametrize(
        "values",
        [np.zeros((2, 3)), np.zeros(4), np.zeros((2, 2, 2))],
    )
    def test_not_square(self, values):
        with pytest.raises(ShapeError) as exc_info:
            DistanceMatrix(values)
        assert exc_info.value.shape == values.shape

    @pytest.mark.parametrize("values", [[[0, 1], [1]], [[0, 1, 2], [1, 0], [2, 3, 0]]])
    def test_ragged_rows(self, values):
        with pytest.raises(ShapeError, match="unequal lengths") as exc_info:
            DistanceMatrix(values)
        assert exc_info.value.shape is None

    def test_non_numeric_entries(self):
        with pytest.raises(ValueError, match="could not convert"):
            DistanceMatrix([["0", "x"], ["x", "0"]])

    @pytest.mark.parametrize("values", [np.zeros((0, 0)), []])
    def test_empty(self, values):
        with pytest.raises(InsufficientInputError):
            DistanceMatrix(values)

    def test_asymmetric(self, five_points):
        five_points[1, 3] = 3.5
        with pytest.raises(AsymmetryError) as exc_info:
            DistanceMatrix(five_points)
        assert (exc_info.value.row, exc_info.value.col) == (1, 3)

    def test_tiny_asymmetry_rejected(self, five_points):
        five_points[2, 4] += 1e-12
        with pytest.raises(AsymmetryError):
            DistanceMatrix(five_points)

    def test_negative_distance(self, five_points):
        five_points[0, 4] = five_points[4, 0] = -1.0
        with pytest.raises(DistanceValueError) as exc_info:
            DistanceMatrix(five_points)
        assert exc_info.value.invalid_values == [(0, 4, -1.0), (4, 0, -1.0)]

    def test_nan_distance(self, five_points):
        five_points[0, 1] = five_points[1, 0] = np.nan
        with pytest.raises(DistanceValueError):
            DistanceMatrix(five_points)

    def test_infinite_distance(self, five_points):
        five_points[0, 1] = five_points[1, 0] = np.inf
        with pytest.raises(DistanceValueError):
            DistanceMatrix(five_points)

    def test_value_check_can_be_disabled(self, five_points):
        five_points[0, 4] = five_points[4, 0] = -1.0
        dm = DistanceMatrix(five_points, check_values=False)
        assert dm[0, 4] == -1.0

    def test_symmetry_always_checked(self, five_points):
        five_points[1, 3] = 3.5
        with pytest.raises(AsymmetryError):
            DistanceMatrix(five_points, check_values=False)
