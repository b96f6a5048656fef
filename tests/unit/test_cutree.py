"""
Unit tests for flat partitions derived from dendrograms.

Expected assignments were checked against R's cutree() on the same trees.
"""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import ValidationError

from hclustkit.core.cutree import TreeCutter, cutree
from hclustkit.core.hclust import hclust
from hclustkit.models.config import CutConfig


@pytest.fixture
def single_tree(five_points):
    return hclust(five_points, "single")


@pytest.fixture
def complete_tree(five_points):
    return hclust(five_points, "complete")


class TestCutByCount:
    """Cutting into a target number of clusters."""

    def test_single_two_clusters(self, single_tree):
        assert cutree(single_tree, k=2).tolist() == [1, 1, 1, 1, 2]

    def test_complete_two_clusters(self, complete_tree):
        assert cutree(complete_tree, k=2).tolist() == [1, 1, 1, 2, 2]

    def test_complete_three_clusters(self, complete_tree):
        assert cutree(complete_tree, k=3).tolist() == [1, 1, 1, 2, 3]

    def test_formed_clusters_numbered_before_leaves(self, four_points):
        tree = hclust(four_points, "single")
        assert cutree(tree, k=3).tolist() == [2, 3, 1, 1]
        assert cutree(tree, k=2).tolist() == [2, 2, 1, 1]

    def test_default_is_one_cluster(self, complete_tree):
        assert cutree(complete_tree).tolist() == [1, 1, 1, 1, 1]

    @pytest.mark.parametrize("k", [5, 6, 100])
    def test_k_at_least_n_gives_singletons(self, complete_tree, k):
        assert cutree(complete_tree, k=k).tolist() == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("method", ["single", "complete", "average", "ward1", "ward2"])
    def test_exact_cluster_count(self, random_matrix, method):
        tree = hclust(random_matrix, method)
        for k in range(1, tree.n_leaves + 1):
            assignment = cutree(tree, k=k)
            assert sorted(set(assignment.tolist())) == list(range(1, k + 1))


class TestCutByHeight:
    """Cutting at a height threshold."""

    def test_single_at_two(self, single_tree):
        assert cutree(single_tree, h=2).tolist() == [1, 1, 1, 2, 3]

    @pytest.mark.parametrize("h", [2.0, 2.5, 3.0])
    def test_complete_between_merges(self, complete_tree, h):
        assert cutree(complete_tree, h=h).tolist() == [1, 1, 1, 2, 3]

    def test_complete_after_first_merge(self, complete_tree):
        assert cutree(complete_tree, h=1.5).tolist() == [1, 1, 2, 3, 4]

    def test_at_maximum_height_gives_one_cluster(self, complete_tree):
        assert cutree(complete_tree, h=9.0).tolist() == [1, 1, 1, 1, 1]

    def test_below_minimum_height_gives_singletons(self, complete_tree):
        assert cutree(complete_tree, h=0.5).tolist() == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("h", [-0.5, -100.0])
    def test_negative_height_gives_singletons(self, single_tree, h):
        assert cutree(single_tree, h=h).tolist() == [1, 2, 3, 4, 5]

    def test_tied_heights_cut_together(self, four_points):
        tree = hclust(four_points, "single")
        assert cutree(tree, h=9.9).tolist() == [2, 3, 1, 1]
        assert cutree(tree, h=10.0).tolist() == [1, 1, 1, 1]


class TestCombinedLimits:
    """k and h applied together: the stricter one wins."""

    def test_height_stricter(self, complete_tree):
        assert cutree(complete_tree, k=1, h=1.5).tolist() == [1, 1, 2, 3, 4]

    def test_count_stricter(self, complete_tree):
        assert cutree(complete_tree, k=4, h=100.0).tolist() == [1, 1, 2, 3, 4]


class TestTreeCutter:
    """Tests for the TreeCutter class."""

    def test_default_options(self, complete_tree):
        assignment = TreeCutter(complete_tree).cut()
        assert assignment.dtype == np.int64
        assert assignment.tolist() == [1, 1, 1, 1, 1]

    def test_with_config(self, complete_tree):
        assignment = TreeCutter(complete_tree).cut(CutConfig(k=3))
        assert assignment.tolist() == [1, 1, 1, 2, 3]

    def test_single_observation(self, single_point):
        tree = hclust(single_point)
        assert cutree(tree).tolist() == [1]
        assert cutree(tree, k=3).tolist() == [1]

    def test_tree_unchanged(self, complete_tree):
        before = complete_tree.model_dump()
        cutree(complete_tree, k=3)
        assert complete_tree.model_dump() == before

    def test_rejects_zero_clusters(self, complete_tree):
        with pytest.raises(ValidationError):
            cutree(complete_tree, k=0)
