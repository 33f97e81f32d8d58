# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It prints the operations it performs, one per line. After
they have run, `a` holds the numbers in ascending order from top to bottom.

## Operations

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the first two elements of `a`             |
| `pa`  | move the first element of `b` onto `a`         |
| `pb`  | move the first element of `a` onto `b`         |
| `ra`  | rotate `a`: the first element becomes the last |
| `rb`  | rotate `b`                                     |
| `rra` | reverse rotate `a`: the last becomes the first |
| `rrb` | reverse rotate `b`                             |

## Usage

Install the package. Then pass the numbers either as separate arguments or as
one space-separated string:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

Nothing is printed, and the exit status is 0, in these cases:

- the input is already sorted
- no arguments are given

In the following cases the program writes `Error` to standard error and exits
with status 1:

- an argument holds anything other than digits and a sign in front of them
- the single argument is an empty string
- a number is too long to be an int
- a number lies outside the 32-bit signed range
- a number appears twice

The strategy depends on how many numbers there are:

- Two numbers are swapped directly.
- Three, four and five numbers use small dedicated routines.
- Larger inputs are moved to `b` in ranked windows. The window is 20 wide up to
  100 numbers and 25 wide beyond that. The numbers are then brought back to `a`
  largest first.

## Library use

```python
from pushswap.cli import push_swap

operations = push_swap(["3", "2", "1"])   # ["ra", "sa"] or similar
```

- `pushswap.cli.push_swap` returns the list of operation names. It raises
  `pushswap.parsing.InputError` on invalid input.
- `pushswap.cli.main` runs the command and returns its exit status.
- `pushswap.parsing.parse_arguments` validates the arguments and converts them
  to integers.
- `pushswap.stack.Stack` holds values together with their ranks. It reports
  each operation it performs to an optional `log` callback.
- `pushswap.stack.push_to` moves the top element from one stack to another.
- `pushswap.sorting.organize` sorts stack `a`, using stack `b` as scratch
  space.

## What it does not do

The package only produces the list of operations. It has no checker that reads
a list of operations and verifies that it sorts the input. It also does not
support the combined operations `ss`, `rr` or `rrr`.

## Tests

```
pip install -e ".[test]"
pytest
```