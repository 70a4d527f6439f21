import random

import pytest

from problemset.trees import tree_diameter, tree_distance_sums, tree_distances

EXAMPLE_EDGES = [(1, 2), (1, 3), (3, 4), (3, 5)]


def random_tree(rng, n):
    return [(rng.randint(1, child - 1), child) for child in range(2, n + 1)]


def relabel(rng, n, edges):
    labels = list(range(1, n + 1))
    rng.shuffle(labels)
    mapping = dict(zip(range(1, n + 1), labels))
    return mapping, [(mapping[u], mapping[v]) for u, v in edges]


def test_example_diameter():
    assert tree_diameter(5, EXAMPLE_EDGES) == 3


def test_example_distances():
    assert tree_distances(5, EXAMPLE_EDGES) == [2, 3, 2, 3, 3]


def test_example_distance_sums():
    assert tree_distance_sums(5, EXAMPLE_EDGES) == [6, 9, 5, 8, 8]


@pytest.mark.parametrize("seed", range(6))
def test_diameter_is_largest_distance(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 40)
    edges = random_tree(rng, n)
    distances = tree_distances(n, edges)
    diameter = tree_diameter(n, edges)
    assert max(distances) == diameter
    assert 2 * min(distances) >= diameter


@pytest.mark.parametrize("seed", range(6))
def test_results_do_not_depend_on_labels(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 30)
    edges = random_tree(rng, n)
    mapping, renamed = relabel(rng, n, edges)
    distances = tree_distances(n, edges)
    sums = tree_distance_sums(n, edges)
    renamed_distances = tree_distances(n, renamed)
    renamed_sums = tree_distance_sums(n, renamed)
    assert tree_diameter(n, renamed) == tree_diameter(n, edges)
    for node in range(1, n + 1):
        assert renamed_distances[mapping[node] - 1] == distances[node - 1]
        assert renamed_sums[mapping[node] - 1] == sums[node - 1]


@pytest.mark.parametrize("seed", range(4))
def test_distance_sums_are_bounded_by_eccentricity(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 30)
    edges = random_tree(rng, n)
    for total, farthest in zip(tree_distance_sums(n, edges), tree_distances(n, edges)):
        assert n - 1 <= total <= farthest * (n - 1)


def test_path_is_symmetric():
    edges = [(i, i + 1) for i in range(1, 10)]
    distances = tree_distances(10, edges)
    sums = tree_distance_sums(10, edges)
    assert distances == distances[::-1]
    assert sums == sums[::-1]
    assert distances[0] == len(edges) == tree_diameter(10, edges)


def test_star_center_sum_equals_edge_count():
    edges = [(1, leaf) for leaf in range(2, 8)]
    sums = tree_distance_sums(7, edges)
    assert sums[0] == len(edges)
    assert tree_distances(7, edges)[0] * 2 == tree_diameter(7, edges)


def test_wrong_edge_count_is_rejected():
    with pytest.raises(ValueError):
        tree_diameter(4, [(1, 2), (2, 3)])


def test_node_outside_range_is_rejected():
    with pytest.raises(ValueError):
        tree_distances(3, [(1, 2), (2, 4)])


def test_disconnected_edges_are_rejected():
    with pytest.raises(ValueError):
        tree_distance_sums(4, [(1, 2), (2, 1), (3, 4)])


def test_empty_tree_is_rejected():
    with pytest.raises(ValueError):
        tree_diameter(0, [])