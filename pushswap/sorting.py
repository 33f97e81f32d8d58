"""Strategies that sort stack ``a`` using stack ``b`` as scratch space."""

from __future__ import annotations

from .parsing import INT_MAX, INT_MIN
from .stack import Stack, push_to

_SMALL_INPUT = 100
_SMALL_WINDOW = 20
_LARGE_WINDOW = 25


def is_unsorted(stack: Stack) -> bool:
    """Tell whether the stack is out of ascending order from top to bottom."""
    values = stack.values
    return any(upper > lower for upper, lower in zip(values, values[1:]))


def find_min_value(stack: Stack) -> int:
    """Return the smallest value, or ``INT_MAX`` for an empty stack."""
    return min(stack.values, default=INT_MAX)


def find_max_value(stack: Stack) -> int:
    """Return the largest value, or ``INT_MIN`` for an empty stack."""
    return max(stack.values, default=INT_MIN)


def find_smallest_position(stack: Stack) -> int:
    """Return the position of the first occurrence of the smallest value."""
    values = stack.values
    if not values:
        raise ValueError(f"stack {stack.name!r} is empty")
    return values.index(min(values))


def find_largest_position(stack: Stack) -> int:
    """Return the position of the first occurrence of the largest value, or -1."""
    values = stack.values
    if not values:
        return -1
    return values.index(max(values))


def move_to_bottom(stack: Stack, position: int) -> None:
    """Bring the element at ``position`` to the top by the shorter rotation."""
    length = len(stack)
    if position == 0:
        return
    if position > length // 2:
        for _ in range(length - position):
            stack.reverse_rotate()
    else:
        for _ in range(position):
            stack.rotate()


def sort_three(a: Stack) -> None:
    """Sort the last three elements of ``a`` with at most two operations."""
    if len(a) < 3:
        raise ValueError(f"stack {a.name!r} holds fewer than three values")
    first, second, last = a.values[-3:]
    if first < last < second:
        a.reverse_rotate()
        a.swap()
    elif second < first < last:
        a.swap()
    elif second < last < first:
        a.rotate()
    elif last < first < second:
        a.reverse_rotate()
    elif last < second < first:
        a.rotate()
        a.swap()


def sort_four(a: Stack, b: Stack) -> None:
    """Sort four values: park the smallest on ``b``, sort the rest, bring it back."""
    smallest = find_min_value(a)
    while a.values[0] != smallest:
        a.rotate()
    push_to(a, b)
    sort_three(a)
    push_to(b, a)


def sort_small(a: Stack, b: Stack) -> None:
    """Sort five values by parking the two smallest on ``b``."""
    for _ in range(2):
        move_to_bottom(a, find_smallest_position(a))
        push_to(a, b)
    sort_three(a)
    while not b.is_empty():
        push_to(b, a)


def k_sort(a: Stack, b: Stack) -> None:
    """Bring the highest-ranked element of ``b`` to its top and push it onto ``a``."""
    length = len(b)
    position = b.ranks.index(length - 1)
    if position < length // 2:
        for _ in range(position):
            b.rotate()
    else:
        for _ in range(length - position):
            b.reverse_rotate()
    push_to(b, a)


def sort_large(a: Stack, b: Stack) -> None:
    """Sort by pushing ranks to ``b`` in windows, then pulling them back by rank."""
    window = _SMALL_WINDOW if len(a) <= _SMALL_INPUT else _LARGE_WINDOW
    pushed = 0
    while len(a):
        rank = a.ranks[0]
        if rank <= pushed:
            push_to(a, b)
            b.rotate()
            pushed += 1
        elif rank <= pushed + window:
            push_to(a, b)
            pushed += 1
        else:
            a.rotate()
    while len(b):
        k_sort(a, b)


def organize(a: Stack, b: Stack) -> None:
    """Pick the strategy that suits the number of values on ``a``."""
    length = len(a)
    if length == 3:
        sort_three(a)
    elif length == 4:
        sort_four(a, b)
    elif length == 5:
        sort_small(a, b)
    elif length > 5:
        sort_large(a, b)