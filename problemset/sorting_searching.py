"""Sorting and searching problems: greedy matching, sweeps, and order statistics."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections import Counter, deque
from collections.abc import Iterable, Iterator, Sequence


class FenwickTree:
    """A binary indexed tree over positions 0..size-1 holding integer counts."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * size

    def __len__(self) -> int:
        return self._size

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is outside 0..{self._size - 1}")

    def add(self, index: int, delta: int) -> None:
        """Add delta to the value at index."""
        self._check(index)
        while index < self._size:
            self._tree[index] += delta
            index |= index + 1

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions 0..index; an index of -1 gives 0."""
        if not -1 <= index < self._size:
            raise IndexError(f"index {index} is outside -1..{self._size - 1}")
        total = 0
        while index >= 0:
            total += self._tree[index]
            index = (index & (index + 1)) - 1
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of positions left..right, wrapping round the end when left > right."""
        self._check(left)
        self._check(right)
        if left > right:
            return self.prefix_sum(self._size - 1) - self.prefix_sum(left - 1) + self.prefix_sum(right)
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


def _first_reaching(tree: FenwickTree, target: int, high: int) -> int:
    """Return the smallest index in 0..high whose prefix sum reaches target."""
    return bisect_left(range(high + 1), target, key=tree.prefix_sum)


def distinct_numbers(values: Iterable[int]) -> int:
    """Return how many different values there are."""
    return len(set(values))


def apartments(applicants: Iterable[int], apartments: Iterable[int], k: int) -> int:
    """Return how many applicants get an apartment within k of their desired size."""
    desired = sorted(applicants, reverse=True)
    sizes = sorted(apartments, reverse=True)
    matched = i = j = 0
    while i < len(desired) and j < len(sizes):
        if sizes[j] > desired[i] + k:
            j += 1
        elif sizes[j] < desired[i] - k:
            i += 1
        else:
            matched += 1
            i += 1
            j += 1
    return matched


def ferris_wheel(weights: Iterable[int], limit: int) -> int:
    """Return the fewest gondolas, each holding one or two people within the weight limit."""
    ordered = sorted(weights)
    gondolas = 0
    light, heavy = 0, len(ordered) - 1
    while light <= heavy:
        if ordered[light] + ordered[heavy] <= limit:
            light += 1
        heavy -= 1
        gondolas += 1
    return gondolas


def concert_tickets(tickets: Iterable[int], customers: Iterable[int]) -> list[int | None]:
    """Sell each customer the dearest ticket not above their maximum; None when none is left."""
    prices = sorted(tickets)
    available = FenwickTree(len(prices))
    for index in range(len(prices)):
        available.add(index, 1)

    sold: list[int | None] = []
    for offer in customers:
        end = bisect_right(prices, offer) - 1
        remaining = available.prefix_sum(end) if end >= 0 else 0
        if remaining <= 0:
            sold.append(None)
            continue
        index = _first_reaching(available, remaining, end)
        sold.append(prices[index])
        available.add(index, -1)
    return sold


def restaurant_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the most customers present at once, given (arrival, departure) pairs."""
    pairs = list(intervals)
    arrivals = sorted(arrival for arrival, _ in pairs)
    departures = sorted(departure for _, departure in pairs)
    best = present = 0
    i = j = 0
    while i < len(arrivals) and j < len(departures):
        if arrivals[i] < departures[j]:
            present += 1
            i += 1
        elif departures[j] < arrivals[i]:
            present -= 1
            j += 1
        else:
            i += 1
            j += 1
        best = max(best, present)
    return best


def sum_of_two_values(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return 1-based positions of two values summing to target, or None."""
    numbered = sorted((value, position) for position, value in enumerate(values, start=1))
    low, high = 0, len(numbered) - 1
    while low < high:
        total = numbered[low][0] + numbered[high][0]
        if total < target:
            low += 1
        elif total > target:
            high -= 1
        else:
            return numbered[low][1], numbered[high][1]
    return None


def maximum_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty run of consecutive values."""
    best: int | None = None
    current = 0
    for value in values:
        current = value if best is None or current < 0 else current + value
        best = current if best is None else max(best, current)
    if best is None:
        raise ValueError("the values must not be empty")
    return best


def stick_lengths(values: Iterable[int]) -> int:
    """Return the least total change that makes every stick the same length."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("the values must not be empty")
    median = ordered[len(ordered) // 2]
    return sum(abs(median - value) for value in ordered)


def missing_coin_sum(values: Iterable[int]) -> int:
    """Return the smallest sum that no subset of the coins makes."""
    reachable = 0
    for coin in sorted(values):
        if coin - 1 > reachable:
            break
        reachable += coin
    return reachable + 1


def collecting_numbers(values: Iterable[int]) -> int:
    """Return how many left-to-right rounds collect the numbers in increasing order."""
    seen: set[int] = set()
    rounds = 0
    for value in values:
        seen.add(value)
        if value - 1 not in seen:
            rounds += 1
    return rounds


def collecting_numbers_after_swaps(values: Sequence[int], swaps: Iterable[tuple[int, int]]) -> list[int]:
    """Apply each swap of 1-based positions to a permutation and report the rounds after it."""
    order = list(values)
    n = len(order)
    if sorted(order) != list(range(1, n + 1)):
        raise ValueError("the values must be a permutation of 1..n")
    position = [0] * (n + 1)
    for index, value in enumerate(order):
        position[value] = index

    def inverted(value: int) -> bool:
        return 1 <= value < n and position[value + 1] < position[value]

    rounds = collecting_numbers(order)
    answers = []
    for a, b in swaps:
        if not (1 <= a <= n and 1 <= b <= n):
            raise IndexError(f"swap {(a, b)} is outside 1..{n}")
        i, j = a - 1, b - 1
        x, y = order[i], order[j]
        affected = {x - 1, x, y - 1, y}
        rounds -= sum(inverted(value) for value in affected)
        order[i], order[j] = y, x
        position[x], position[y] = j, i
        rounds += sum(inverted(value) for value in affected)
        answers.append(rounds)
    return answers


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Return the most whole (start, end) movies one can watch without overlap."""
    watched = 0
    free_from: int | None = None
    for start, end in sorted(movies, key=lambda movie: (movie[1], movie[0])):
        if free_from is None or start >= free_from:
            watched += 1
            free_from = end
    return watched


def _longest_passages(length: int, positions: Iterable[int]) -> Iterator[int]:
    lights = [0, length]
    gaps = Counter({length: 1})
    longest = [-length]
    for place in positions:
        if not 0 < place < length:
            raise ValueError(f"light position {place} is outside 1..{length - 1}")
        index = bisect_left(lights, place)
        if lights[index] == place:
            raise ValueError(f"a light is already at {place}")
        previous, following = lights[index - 1], lights[index]
        lights.insert(index, place)
        gaps[following - previous] -= 1
        for gap in (place - previous, following - place):
            gaps[gap] += 1
            heapq.heappush(longest, -gap)
        while gaps[-longest[0]] == 0:
            heapq.heappop(longest)
        yield -longest[0]


def traffic_lights(length: int, positions: Iterable[int]) -> list[int]:
    """After each light is added to a street of this length, report the longest unlit passage."""
    return list(_longest_passages(length, positions))


def josephus_every_second(n: int) -> list[int]:
    """Return the removal order when every second child of 1..n leaves the circle."""
    if n < 0:
        raise ValueError("n must not be negative")
    circle = deque(range(1, n + 1))
    removed = []
    while circle:
        circle.rotate(-1)
        removed.append(circle.popleft())
    return removed


def josephus(n: int, k: int) -> list[int]:
    """Return the removal order when k children are skipped before each removal."""
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    alive = FenwickTree(n)
    for index in range(n):
        alive.add(index, 1)
    removed = []
    rank = 0
    for remaining in range(n, 0, -1):
        rank = (rank + k) % remaining
        index = _first_reaching(alive, rank + 1, n - 1)
        removed.append(index + 1)
        alive.add(index, -1)
    return removed