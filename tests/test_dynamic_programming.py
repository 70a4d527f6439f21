from collections import deque
from itertools import combinations_with_replacement, product

import pytest

from problemset.dynamic_programming import (
    coin_combinations_ordered,
    coin_combinations_unordered,
    dice_combinations,
    minimizing_coins,
    mod_inverse,
    removing_digits,
)

MOD = 10**9 + 7


@pytest.mark.parametrize("a", [2, 3, 10, 123456, MOD - 1])
def test_mod_inverse_prime_modulus(a):
    assert a * mod_inverse(a, MOD) % MOD == 1


@pytest.mark.parametrize("a,m", [(3, 7), (5, 12), (7, 40)])
def test_mod_inverse_small(a, m):
    inverse = mod_inverse(a, m)
    assert 0 <= inverse < m
    assert a * inverse % m == 1


def test_mod_inverse_modulus_one():
    assert mod_inverse(5, 1) == 0


@pytest.mark.parametrize("n", range(0, 7))
def test_dice_combinations_matches_enumeration(n):
    count = 1 if n == 0 else 0
    for throws in range(1, n + 1):
        count += sum(1 for faces in product(range(1, 7), repeat=throws) if sum(faces) == n)
    assert dice_combinations(n) == count


def test_dice_combinations_is_reduced():
    assert 0 <= dice_combinations(10**5) < MOD


def test_minimizing_coins():
    assert minimizing_coins([1, 5, 7], 11) == 3
    assert minimizing_coins([1], 9) == 9
    assert minimizing_coins([4, 7], 0) == 0


def test_minimizing_coins_impossible():
    assert minimizing_coins([2], 7) is None
    assert minimizing_coins([], 3) is None


def test_minimizing_coins_negative_target():
    with pytest.raises(ValueError):
        minimizing_coins([1], -1)


@pytest.mark.parametrize("coins,target", [([2, 3, 5], 9), ([1, 2], 6), ([3, 4], 10), ([5], 3)])
def test_coin_combinations_unordered_matches_enumeration(coins, target):
    count = sum(
        1
        for size in range(target + 1)
        for chosen in combinations_with_replacement(coins, size)
        if sum(chosen) == target
    )
    assert coin_combinations_unordered(coins, target) == count


def test_coin_combinations_ordered_base_cases():
    assert coin_combinations_ordered([2, 3], 0) == 1
    assert coin_combinations_ordered([5, 6], 4) == 0


@pytest.mark.parametrize("target", [1, 2, 5, 20])
def test_coin_combinations_ordered_single_unit_coin(target):
    assert coin_combinations_ordered([1], target) == mod_inverse(pow(2, target, MOD), MOD)


def test_coin_combinations_ordered_is_reduced():
    assert 0 <= coin_combinations_ordered([2, 3, 5], 1000) < MOD


def _fewest_steps(n):
    seen = {n: 0}
    queue = deque([n])
    while queue:
        current = queue.popleft()
        if current == 0:
            return seen[0]
        for digit in {int(d) for d in str(current)} - {0}:
            following = current - digit
            if following not in seen:
                seen[following] = seen[current] + 1
                queue.append(following)
    raise AssertionError("unreachable")


def test_removing_digits_example():
    assert removing_digits(27) == 5


@pytest.mark.parametrize("n", [0, 1, 9, 10, 58, 101, 999])
def test_removing_digits_matches_search(n):
    assert removing_digits(n) == _fewest_steps(n)