"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import InputError, parse_arguments
from .sorting import is_unsorted, organize
from .stack import Stack


def push_swap(args: Sequence[str]) -> list[str]:
    """Return the operations that sort the numbers given in ``args``.

    Raises :class:`InputError` when the arguments are invalid.
    """
    values = parse_arguments(args)
    operations: list[str] = []
    a = Stack("a", len(values), operations.append)
    b = Stack("b", len(values), operations.append)
    a.fill(values)
    if is_unsorted(a):
        if len(a) == 2:
            a.swap()
        else:
            organize(a, b)
    return operations


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on the command-line arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        operations = push_swap(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())