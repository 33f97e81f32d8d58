import itertools
import random

import pytest

from pushswap.parsing import INT_MAX, INT_MIN
from pushswap.sorting import (
    find_largest_position,
    find_max_value,
    find_min_value,
    find_smallest_position,
    is_unsorted,
    k_sort,
    move_to_bottom,
    organize,
    sort_four,
    sort_large,
    sort_small,
    sort_three,
)
from pushswap.stack import Stack


def _stacks(values):
    ops = []
    a = Stack("a", len(values), ops.append)
    b = Stack("b", len(values), ops.append)
    a.fill(values)
    return a, b, ops


def _replay(values, ops):
    a, b = list(values), []
    for op in ops:
        if op == "sa":
            a[0], a[1] = a[1], a[0]
        elif op == "sb":
            b[0], b[1] = b[1], b[0]
        elif op == "pa":
            a.insert(0, b.pop(0))
        elif op == "pb":
            b.insert(0, a.pop(0))
        elif op == "ra":
            a.append(a.pop(0))
        elif op == "rb":
            b.append(b.pop(0))
        elif op == "rra":
            a.insert(0, a.pop())
        elif op == "rrb":
            b.insert(0, b.pop())
        else:
            raise AssertionError(f"unknown operation {op!r}")
    return a, b


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3], False), ([2, 1], True), ([], False), ([5], False), ([1, 3, 2], True)],
)
def test_is_unsorted(values, expected):
    a, _, _ = _stacks(values)
    assert is_unsorted(a) is expected


def test_min_and_max_values():
    a, _, _ = _stacks([3, -4, 7])
    assert find_min_value(a) == -4
    assert find_max_value(a) == 7


def test_min_and_max_of_empty_stack():
    a, _, _ = _stacks([])
    assert find_min_value(a) == INT_MAX
    assert find_max_value(a) == INT_MIN


def test_smallest_position():
    a, _, _ = _stacks([3, 1, 2])
    assert find_smallest_position(a) == 1


def test_smallest_position_of_empty_stack_raises():
    a, _, _ = _stacks([])
    with pytest.raises(ValueError):
        find_smallest_position(a)


def test_largest_position():
    a, _, _ = _stacks([3, 9, 2])
    assert find_largest_position(a) == 1
    empty, _, _ = _stacks([])
    assert find_largest_position(empty) == -1


@pytest.mark.parametrize("position", range(5))
def test_move_to_bottom_brings_element_to_top(position):
    values = [5, 6, 7, 8, 9]
    a, _, ops = _stacks(values)
    move_to_bottom(a, position)
    assert a.values[0] == values[position]
    assert len(ops) <= len(values) // 2
    assert sorted(a.values) == values


def test_move_to_bottom_uses_reverse_rotation_near_the_end():
    a, _, ops = _stacks([5, 6, 7, 8, 9])
    move_to_bottom(a, 4)
    assert ops == ["rra"]
    assert a.values[0] == 9


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_orders(values):
    a, _, ops = _stacks(list(values))
    sort_three(a)
    assert a.values == [1, 2, 3]
    assert len(ops) <= 2
    assert _replay(values, ops)[0] == [1, 2, 3]


def test_sort_three_single_swap():
    a, _, ops = _stacks([2, 1, 3])
    sort_three(a)
    assert ops == ["sa"]


def test_sort_three_single_rotation():
    a, _, ops = _stacks([3, 1, 2])
    sort_three(a)
    assert ops == ["ra"]


def test_sort_three_needs_three_values():
    a, _, _ = _stacks([2, 1])
    with pytest.raises(ValueError):
        sort_three(a)


@pytest.mark.parametrize("values", list(itertools.permutations([10, -3, 7, 0])))
def test_sort_four_all_orders(values):
    a, b, ops = _stacks(list(values))
    sort_four(a, b)
    assert a.values == sorted(values)
    assert b.is_empty()
    assert _replay(values, ops) == (sorted(values), [])


@pytest.mark.parametrize("values", list(itertools.permutations([4, 1, 5, 2, 3])))
def test_sort_small_all_orders(values):
    a, b, ops = _stacks(list(values))
    sort_small(a, b)
    assert a.values == [1, 2, 3, 4, 5]
    assert b.is_empty()
    assert _replay(values, ops) == ([1, 2, 3, 4, 5], [])


def test_k_sort_pushes_the_highest_rank():
    a = Stack("a", 5)
    b = Stack("b", 5)
    b.fill([3, 9, 1, 4])
    k_sort(a, b)
    assert a.values == [9]
    assert sorted(b.values) == [1, 3, 4]


@pytest.mark.parametrize("size, seed", [(6, 1), (20, 2), (100, 3), (500, 4)])
def test_sort_large_sorts(size, seed):
    values = random.Random(seed).sample(range(-10_000, 10_000), size)
    a, b, ops = _stacks(values)
    sort_large(a, b)
    assert a.values == sorted(values)
    assert a.ranks == list(range(size))
    assert b.is_empty()
    assert _replay(values, ops) == (sorted(values), [])


@pytest.mark.parametrize("size", range(3, 12))
def test_organize_sorts_every_size(size):
    values = random.Random(size).sample(range(1000), size)
    a, b, ops = _stacks(values)
    organize(a, b)
    assert a.values == sorted(values)
    assert _replay(values, ops) == (sorted(values), [])


def test_organize_leaves_tiny_stacks_alone():
    a, b, ops = _stacks([2, 1])
    organize(a, b)
    assert ops == []
    assert a.values == [2, 1]