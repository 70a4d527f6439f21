"""Dynamic programming problems over coins, dice and digits."""

from __future__ import annotations

from collections.abc import Iterable
from math import inf

MOD = 10**9 + 7


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of a modulo m by the extended Euclidean algorithm."""
    if m == 1:
        return 0
    modulus = m
    y, x = 0, 1
    while a > 1:
        quotient = a // m
        a, m = m, a % m
        x, y = y, x - quotient * y
    if x < 0:
        x += modulus
    return x


def _check_target(target: int) -> None:
    if target < 0:
        raise ValueError("target must not be negative")


def dice_combinations(n: int) -> int:
    """Count ordered dice throws summing to n, modulo 10**9+7."""
    _check_target(n)
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[total - face] for face in range(1, min(total, 6) + 1)) % MOD
    return ways[n]


def minimizing_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins summing to target, or None if it cannot be made."""
    _check_target(target)
    coins = list(coins)
    fewest: list[float] = [0] + [inf] * target
    for amount in range(1, target + 1):
        for coin in coins:
            if amount >= coin:
                fewest[amount] = min(fewest[amount], fewest[amount - coin] + 1)
    return None if fewest[target] == inf else int(fewest[target])


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Fill the ordered-sum table, halving modulo 10**9+7 after every coin added.

    Each table entry adds the entry one coin back and is then multiplied by
    the inverse of two, so the result is a residue of that weighted sum.
    """
    _check_target(target)
    coins = list(coins)
    half = mod_inverse(2, MOD)
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        for coin in coins:
            if amount >= coin:
                ways[amount] = (ways[amount] + ways[amount - coin]) * half % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Count multisets of coins summing to target, modulo 10**9+7."""
    _check_target(target)
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(1, target + 1):
            if amount >= coin:
                ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def removing_digits(n: int) -> int:
    """Return the fewest steps to reach 0, each step subtracting one digit of the number."""
    _check_target(n)
    steps = [0] * (n + 1)
    for number in range(1, n + 1):
        steps[number] = min(steps[number - int(d)] for d in str(number) if d != "0") + 1
    return steps[n]