"""Introductory problems: sequences, counting, simple constructions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from itertools import groupby

MOD = 10**9 + 7
BOARD_SIZE = 8


def weird_algorithm(n: int) -> list[int]:
    """Return the sequence that halves even numbers and maps odd n to 3n+1, until 1."""
    sequence = []
    while n != 1:
        sequence.append(n)
        n = n // 2 if n % 2 == 0 else 3 * n + 1
    sequence.append(1)
    return sequence


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the one number of 1..n that does not occur in ``numbers``."""
    return n * (n + 1) // 2 - sum(numbers)


def repetitions(dna: str) -> int:
    """Return the length of the longest run of one repeated character."""
    if not dna:
        raise ValueError("the sequence must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(dna))


def increasing_array(values: Iterable[int]) -> int:
    """Return the total increment needed to make the values non-decreasing."""
    moves = 0
    highest = None
    for value in values:
        if highest is None or value > highest:
            highest = value
        else:
            moves += highest - value
    return moves


def permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n with no adjacent values differing by one.

    Returns None when no such permutation exists.
    """
    if n == 1:
        return [1]
    if n <= 3:
        return None
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def number_spiral(row: int, column: int) -> int:
    """Return the number written at (row, column) of the infinite number spiral."""
    layer = max(row, column)
    value = (layer - 1) * layer + 1
    if row > column:
        value += -(row - column) if row % 2 else row - column
    elif column > row:
        value += column - row if column % 2 else -(column - row)
    return value


def two_knights(n: int) -> list[int]:
    """For each k in 1..n, count ways to place two non-attacking knights on a k*k board."""
    results = []
    total = 0
    for size in range(1, n + 1):
        total += (size - 1) ** 2 * (2 * size - 1) + (2 * size - 1) * (2 * size - 2) // 2
        for column in range(size - 1, 0, -1):
            attacks = 0
            if size > 1 and column > 2:
                attacks += 1
            if size > 2 and column > 1:
                attacks += 1
            if size > 2 and column + 1 <= size:
                attacks += 1
            if size > 1 and column + 2 <= size:
                attacks += 1
            total -= 2 * attacks
        results.append(total)
    return results


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sets of equal sum, or return None if that is impossible."""
    if n < 1:
        raise ValueError("n must be positive")
    first: list[int] = []
    second: list[int] = []
    first_sum = second_sum = 0
    for value in range(n, 0, -1):
        if first_sum <= second_sum:
            first.append(value)
            first_sum += value
        else:
            second.append(value)
            second_sum += value
    if first_sum != second_sum:
        return None
    return first, second


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length n, modulo 10**9+7."""
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n!."""
    zeros = 0
    while n > 1:
        n //= 5
        zeros += n
    return zeros


def coin_piles(a: int, b: int) -> bool:
    """Tell whether both piles can be emptied by removing 1 and 2 coins at a time."""
    if b > a:
        a, b = b, a
    difference = a - b
    if b >= difference:
        a -= difference * 2
        b -= difference
    return a == b and a % 3 == 0 and b % 3 == 0


def palindrome_reorder(text: str) -> str | None:
    """Reorder the letters into a palindrome, or return None if none exists."""
    counts = Counter(text)
    odd_letters = [letter for letter in sorted(counts) if counts[letter] % 2]
    if len(odd_letters) != len(text) % 2:
        return None
    half = "".join(letter * (counts[letter] // 2) for letter in sorted(counts))
    middle = odd_letters[-1] if odd_letters else ""
    return half + middle + half[::-1]


def _distinct_permutations(counts: Counter, remaining: int) -> Iterator[str]:
    if remaining == 0:
        yield ""
        return
    for letter in sorted(counts):
        if counts[letter]:
            counts[letter] -= 1
            for rest in _distinct_permutations(counts, remaining - 1):
                yield letter + rest
            counts[letter] += 1


def creating_strings(text: str) -> list[str]:
    """Return every distinct arrangement of the characters, in lexicographic order."""
    return list(_distinct_permutations(Counter(text), len(text)))


def apple_division(weights: Iterable[int]) -> int:
    """Return the smallest possible difference between two groups of the weights."""
    sums = {0}
    total = 0
    for weight in weights:
        sums |= {partial + weight for partial in sums}
        total += weight
    return min(abs(total - 2 * partial) for partial in sums)


def chessboard_queens(board: Sequence[str]) -> int:
    """Count placements of eight non-attacking queens on free ('.') squares."""
    rows = list(board)
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError("the board must be 8 rows of 8 squares")

    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == BOARD_SIZE:
            return 1
        ways = 0
        for column, square in enumerate(rows[row]):
            diagonal, anti_diagonal = row - column, row + column
            if (
                square == "."
                and column not in columns
                and diagonal not in diagonals
                and anti_diagonal not in anti_diagonals
            ):
                columns.add(column)
                diagonals.add(diagonal)
                anti_diagonals.add(anti_diagonal)
                ways += place(row + 1)
                columns.discard(column)
                diagonals.discard(diagonal)
                anti_diagonals.discard(anti_diagonal)
        return ways

    return place(0)


def gray_code(n: int) -> list[str]:
    """Return the reflected Gray code of n bits as strings."""
    if n < 1:
        raise ValueError("n must be positive")
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(2**n)]


def _hanoi_moves(n: int, start: int, via: int, end: int) -> Iterator[tuple[int, int]]:
    if n > 1:
        yield from _hanoi_moves(n - 1, start, end, via)
        yield start, end
        yield from _hanoi_moves(n - 1, via, start, end)
    else:
        yield start, end


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the shortest list of (from, to) moves taking n disks from peg 1 to peg 3."""
    if n < 1:
        raise ValueError("n must be positive")
    return list(_hanoi_moves(n, 1, 2, 3))


def digit_query(k: int) -> int:
    """Return the k-th digit (1-based) of the string 123456789101112..."""
    if k < 1:
        raise ValueError("k must be positive")
    length, count, start = 1, 9, 1
    while k > length * count:
        k -= length * count
        length += 1
        count *= 10
        start *= 10
    number = start + (k - 1) // length
    return int(str(number)[(k - 1) % length])