# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of operations. It prints the operations that sort stack `a` in
ascending order, one per line.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two items of `a`, of `b`, or of both |
| `pa`, `pb` | move the top item of `b` onto `a`, or of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top item goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom item goes to the top |

A swap on a stack with fewer than two items does nothing. A push from an
empty stack raises `IndexError`.

## Command line

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The same entry point can be run as `python -m pushswap.cli`.

The numbers may be given as separate arguments, or all in one argument
separated by spaces, tabs or newlines. Each must be an optionally signed
decimal integer in the 32-bit signed range, and no value may occur twice.
Invalid input prints `Error` to standard error and exits with status 1.
With no arguments, or a single empty argument, nothing is printed and the
exit status is 1. Input that is already sorted produces no output and exits
with status 0.

How the stack is sorted depends on its size:

- 2 numbers: one swap;
- 3 numbers: at most one rotation and one swap;
- 4 or 5 numbers: the smallest one or two are pushed to `b`, the other three
  are sorted, and the rest are pushed back;
- more: a binary radix sort over each number's rank.

## Library use

```python
from pushswap.sorting import sort_numbers
from pushswap.parsing import parse_arguments, InputError
from pushswap.stack import Machine, Operation

ops = sort_numbers([3, 2, 1])          # list of Operation values applied
print([str(op) for op in ops])

try:
    numbers = parse_arguments(["5", "x"])
except InputError:
    ...

machine = Machine([2, 1, 3])
machine.sa()                           # swap the top two items of a
print(machine.a.numbers())             # [1, 2, 3]
machine.apply("pb")                    # operations may also be given by name
print(machine.operations)              # [Operation.SA, Operation.PB]
```

Modules:

- `pushswap.stack`: `Operation`, `Item`, `Stack` (a deque-backed stack with
  `rotate`, `reverse_rotate`, `swap`, `is_sorted`, `highest`,
  `assign_indices` and friends) and `Machine`, which holds stacks `a` and
  `b` and records every operation applied.
- `pushswap.parsing`: `parse_long`, `split_words`, `is_valid_number`,
  `has_duplicates`, `parse_arguments` and `InputError`.
- `pushswap.sorting`: `tiny_sort`, `medium_sort`, `radix_sort`,
  `sort_numbers`, and the bit helpers `bit_string` and `bit_matches`.
- `pushswap.cli`: `main`, the command-line entry point.

## What it does not do

There is no command that reads a list of operations and checks whether
they sort a given input. `Machine.apply` accepts operation names, so such a
replay can be done from Python.

## Running the tests

```
pip install -e ".[test]"
pytest
```