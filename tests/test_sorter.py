import random
from itertools import permutations

import pytest

from pushswap.sorter import (
    is_sorted,
    max_bits,
    radix_sort,
    rank,
    solve,
    sort_five,
    sort_four,
    sort_three,
    sort_two,
)
from pushswap.stacks import Stacks


def replay(values, operations):
    stacks = Stacks(values)
    for name in operations:
        getattr(stacks, name)()
    return stacks


def test_rank_orders_values():
    assert rank([10, -5, 3]) == [2, 0, 1]


def test_rank_is_a_permutation():
    values = [50, -3, 7, 1000, 0, 12]
    ranks = rank(values)
    assert sorted(ranks) == list(range(len(values)))
    assert [v for _, v in sorted(zip(ranks, values))] == sorted(values)


def test_is_sorted():
    assert is_sorted(range(6)) is True
    assert is_sorted([1, 0]) is False
    assert is_sorted([0, 2, 1]) is False


def test_max_bits():
    assert max_bits(0) == 0
    assert max_bits(5) == 3
    with pytest.raises(ValueError):
        max_bits(-1)


def test_small_worked_examples():
    assert solve([2, 1]) == ["sa"]
    assert solve([3, 2, 1]) == ["ra", "sa"]
    assert solve([1, 2, 3]) == []
    assert solve([]) == []
    assert solve([42]) == []


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_every_permutation_is_sorted(size):
    for values in permutations(range(size)):
        operations = solve(list(values))
        stacks = replay(values, operations)
        assert list(stacks.a) == sorted(values)
        assert not stacks.b


def test_three_and_five_stay_short():
    for values in permutations(range(3)):
        assert len(solve(list(values))) <= 2
    for values in permutations(range(5)):
        assert len(solve(list(values))) <= 12


@pytest.mark.parametrize("size", [6, 17, 100])
def test_radix_sorts_larger_inputs(size):
    values = random.Random(size).sample(range(-1000, 1000), size)
    stacks = replay(values, solve(values))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_helpers_on_stacks_directly():
    stacks = Stacks([2, 0, 1])
    sort_three(stacks)
    assert list(stacks.a) == [0, 1, 2]

    stacks = Stacks([3, 1, 0, 2])
    sort_four(stacks)
    assert list(stacks.a) == [0, 1, 2, 3]

    stacks = Stacks([4, 2, 0, 3, 1])
    sort_five(stacks)
    assert list(stacks.a) == [0, 1, 2, 3, 4]

    stacks = Stacks([5, 3, 0, 6, 1, 4, 2])
    radix_sort(stacks)
    assert list(stacks.a) == list(range(7))


def test_sort_two_on_b():
    stacks = Stacks([0, 1])
    stacks.pb()
    stacks.pb()
    sort_two(stacks, "b")
    assert list(stacks.b) == [0, 1]
    assert stacks.operations[-1] == "sb"