"""Distances in trees given as node counts and undirected edge lists (nodes 1..n)."""

from __future__ import annotations

from collections.abc import Iterable


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one node")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError(f"a tree of {n} nodes has {n - 1} edges, not {len(edges)}")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge {(u, v)} names a node outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _search(adjacency: list[list[int]], start: int) -> tuple[list[int], list[int], list[int]]:
    """Breadth-first search; return depths, visiting order and parents."""
    depths = [-1] * len(adjacency)
    parents = [0] * len(adjacency)
    depths[start] = 0
    order = [start]
    for node in order:
        for neighbour in adjacency[node]:
            if depths[neighbour] < 0:
                depths[neighbour] = depths[node] + 1
                parents[neighbour] = node
                order.append(neighbour)
    if len(order) != len(adjacency) - 1:
        raise ValueError("the edges do not connect every node")
    return depths, order, parents


def _farthest(depths: list[int]) -> int:
    return max(range(1, len(depths)), key=depths.__getitem__)


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of edges on the longest path of the tree."""
    adjacency = _adjacency(n, edges)
    depths, _, _ = _search(adjacency, 1)
    far_depths, _, _ = _search(adjacency, _farthest(depths))
    return max(far_depths[1:])


def tree_distances(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for each node 1..n, the distance to the node farthest from it."""
    adjacency = _adjacency(n, edges)
    depths, _, _ = _search(adjacency, 1)
    first = _farthest(depths)
    from_first, _, _ = _search(adjacency, first)
    from_second, _, _ = _search(adjacency, _farthest(from_first))
    return [max(a, b) for a, b in zip(from_first[1:], from_second[1:])]


def tree_distance_sums(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for each node 1..n, the sum of its distances to all other nodes."""
    adjacency = _adjacency(n, edges)
    depths, order, parents = _search(adjacency, 1)
    sizes = [1] * (n + 1)
    for node in reversed(order[1:]):
        sizes[parents[node]] += sizes[node]
    sums = [0] * (n + 1)
    sums[1] = sum(depths[1:])
    for node in order[1:]:
        sums[node] = sums[parents[node]] + n - 2 * sizes[node]
    return sums[1:]