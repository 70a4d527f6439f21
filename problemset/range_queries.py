"""Range queries over arrays and grids: segment trees, range additions, prefix sums."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from math import inf
from typing import Any

QUERY = 2
UPDATE = 1


class SegmentTree:
    """A segment tree over a sequence, answering range folds and point updates.

    Positions are 1-based and ranges are inclusive. ``combine`` must be
    associative and ``identity`` its neutral element. A range whose start
    lies after its end folds nothing and yields ``identity``.
    """

    def __init__(self, values: Iterable[Any], combine: Callable[[Any, Any], Any], identity: Any) -> None:
        items = list(values)
        if not items:
            raise ValueError("a segment tree needs at least one value")
        self._size = len(items)
        self._combine = combine
        self._identity = identity
        self._tree = [identity] * self._size + items
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = combine(self._tree[2 * node], self._tree[2 * node + 1])

    def __len__(self) -> int:
        return self._size

    def _check(self, position: int) -> None:
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")

    def query(self, a: int, b: int) -> Any:
        """Fold the values at positions a..b, in order."""
        self._check(a)
        self._check(b)
        left = right = self._identity
        low, high = a - 1 + self._size, b + self._size
        while low < high:
            if low & 1:
                left = self._combine(left, self._tree[low])
                low += 1
            if high & 1:
                high -= 1
                right = self._combine(self._tree[high], right)
            low //= 2
            high //= 2
        return self._combine(left, right)

    def update(self, k: int, value: Any) -> None:
        """Replace the value at position k."""
        self._check(k)
        node = k - 1 + self._size
        self._tree[node] = value
        node //= 2
        while node:
            self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])
            node //= 2


class RangeAddTree:
    """Values that take additions over ranges and answer single positions (1-based)."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("at least one value is needed")
        self._deltas = [0] * (len(self._values) + 2)

    def __len__(self) -> int:
        return len(self._values)

    def _check(self, position: int) -> None:
        if not 1 <= position <= len(self._values):
            raise IndexError(f"position {position} is outside 1..{len(self._values)}")

    def _bump(self, index: int, delta: int) -> None:
        while index < len(self._deltas):
            self._deltas[index] += delta
            index += index & -index

    def add(self, a: int, b: int, delta: int) -> None:
        """Add delta to every value at positions a..b; nothing when a > b."""
        self._check(a)
        self._check(b)
        if a > b:
            return
        self._bump(a, delta)
        self._bump(b + 1, -delta)

    def value(self, k: int) -> int:
        """Return the current value at position k."""
        self._check(k)
        total = self._values[k - 1]
        index = k
        while index > 0:
            total += self._deltas[index]
            index -= index & -index
        return total


def _answer_all(tree: SegmentTree, queries: Iterable[tuple[int, int]]) -> list[Any]:
    return [tree.query(a, b) for a, b in queries]


def static_range_sums(values: Iterable[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer each (a, b) query with the sum of positions a..b."""
    return _answer_all(SegmentTree(values, operator.add, 0), queries)


def static_range_minimums(values: Iterable[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer each (a, b) query with the minimum of positions a..b."""
    return _answer_all(SegmentTree(values, min, inf), queries)


def range_xors(values: Iterable[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer each (a, b) query with the xor of positions a..b."""
    return _answer_all(SegmentTree(values, operator.xor, 0), queries)


def _run_dynamic(tree: SegmentTree, operations: Iterable[tuple[int, int, int]]) -> list[Any]:
    answers = []
    for kind, a, b in operations:
        if kind == UPDATE:
            tree.update(a, b)
        elif kind == QUERY:
            answers.append(tree.query(a, b))
        else:
            raise ValueError(f"unknown operation {kind}")
    return answers


def dynamic_range_sums(values: Iterable[int], operations: Iterable[tuple[int, int, int]]) -> list[int]:
    """Run (1, k, u) updates and (2, a, b) sum queries; return the answers."""
    return _run_dynamic(SegmentTree(values, operator.add, 0), operations)


def dynamic_range_minimums(values: Iterable[int], operations: Iterable[tuple[int, int, int]]) -> list[int]:
    """Run (1, k, u) updates and (2, a, b) minimum queries; return the answers."""
    return _run_dynamic(SegmentTree(values, min, inf), operations)


def range_update_queries(values: Iterable[int], operations: Iterable[Sequence[int]]) -> list[int]:
    """Run (1, a, b, u) range additions and (2, k) value queries; return the answers."""
    tree = RangeAddTree(values)
    answers = []
    for operation in operations:
        kind = operation[0]
        if kind == UPDATE:
            _, a, b, delta = operation
            tree.add(a, b, delta)
        elif kind == QUERY:
            _, k = operation
            answers.append(tree.value(k))
        else:
            raise ValueError(f"unknown operation {kind}")
    return answers


def forest_queries(grid: Sequence[str], queries: Iterable[tuple[int, int, int, int]]) -> list[int]:
    """Count trees ('*') in each (row1, col1, row2, col2) rectangle, 1-based and inclusive."""
    rows = list(grid)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("every grid row must have the same length")
    prefix = [[0] * (width + 1)]
    for row in rows:
        line = [0]
        for above, above_left, square in zip(prefix[-1][1:], prefix[-1], row):
            line.append(line[-1] + above - above_left + (square == "*"))
        prefix.append(line)

    answers = []
    for row1, col1, row2, col2 in queries:
        if not (1 <= row1 <= row2 <= len(rows) and 1 <= col1 <= col2 <= width):
            raise IndexError(f"rectangle {(row1, col1, row2, col2)} is outside the grid")
        answers.append(
            prefix[row2][col2] - prefix[row2][col1 - 1] - prefix[row1 - 1][col2] + prefix[row1 - 1][col1 - 1]
        )
    return answers