"""The two stacks the sorter works on, and the operations it may perform."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

Logger = Callable[[str], None]


def assign_ranks(values: Iterable[int]) -> list[int]:
    """Return, for each value, its position in the sorted order of all values.

    Equal values share the rank of the first slot they occupy once sorted.
    """
    items = list(values)
    first_slot: dict[int, int] = {}
    for position, value in enumerate(sorted(items)):
        first_slot.setdefault(value, position)
    return [first_slot[value] for value in items]


class Stack:
    """A bounded stack of values with their ranks; position 0 is the top.

    Every operation that changes the order reports its name (``sa``, ``ra``,
    ``rra``, ``pa`` and so on) through ``log``.
    """

    def __init__(self, name: str, capacity: int, log: Optional[Logger] = None) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.name = name
        self.capacity = capacity
        self._log: Logger = log if log is not None else (lambda _op: None)
        self._values: list[int] = []
        self._ranks: list[int] = []

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, values={self._values!r})"

    @property
    def values(self) -> list[int]:
        """The values from top to bottom."""
        return list(self._values)

    @property
    def ranks(self) -> list[int]:
        """The ranks of the values, from top to bottom."""
        return list(self._ranks)

    def is_empty(self) -> bool:
        return not self._values

    def fill(self, values: Iterable[int]) -> None:
        """Replace the contents with ``values`` (first one on top) and rank them."""
        items = list(values)
        if len(items) > self.capacity:
            raise ValueError(
                f"{len(items)} values do not fit in a stack of capacity {self.capacity}"
            )
        self._values = items
        self._ranks = assign_ranks(items)

    def push(self, value: int, rank: int) -> None:
        """Put a value on top; a full stack leaves it out."""
        if len(self._values) >= self.capacity:
            return
        self._values.insert(0, value)
        self._ranks.insert(0, rank)

    def pop(self) -> tuple[int, int]:
        """Take the top value off and return it with its rank."""
        if not self._values:
            raise IndexError(f"pop from empty stack {self.name!r}")
        return self._values.pop(0), self._ranks.pop(0)

    def swap(self) -> None:
        """Exchange the two top elements."""
        if len(self._values) < 2:
            return
        self._values[0], self._values[1] = self._values[1], self._values[0]
        self._ranks[0], self._ranks[1] = self._ranks[1], self._ranks[0]
        self._log(f"s{self.name}")

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if len(self._values) < 2:
            return
        self._values.append(self._values.pop(0))
        self._ranks.append(self._ranks.pop(0))
        self._log(f"r{self.name}")

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if len(self._values) < 2:
            return
        self._values.insert(0, self._values.pop())
        self._ranks.insert(0, self._ranks.pop())
        self._log(f"rr{self.name}")


def push_to(src: Stack, dst: Stack) -> None:
    """Move the top element of ``src`` onto ``dst``; nothing happens if ``src`` is empty."""
    if src.is_empty():
        return
    value, rank = src.pop()
    dst.push(value, rank)
    dst._log(f"p{dst.name}")