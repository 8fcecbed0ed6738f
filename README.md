# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It prints the operations that sort stack `a` into
ascending order, one per line.

## Operations

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: the top goes to the bottom     |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down: the bottom goes to the top   |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

An operation on an empty stack, or a swap or rotation on a stack with fewer
than two numbers, changes nothing.

## Command line

Give the numbers as separate arguments, or as one argument separated by
spaces. The first number is the top of stack `a`:

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

The same command can be run as `python -m pushswap.cli`.

Input that is already sorted prints nothing and exits with status 0. An
argument that is not an optionally signed run of digits, a number outside the
32-bit signed range, or a repeated number prints `Error` and exits with
status 1. Running with no arguments, or with a single argument that is empty
or holds only spaces, prints nothing and exits with status 1.

## Library

```python
from pushswap.sorting import solve
from pushswap.stack import Stacks

moves = solve([3, 2, 1])

stacks = Stacks([3, 2, 1])
for move in moves:
    stacks.apply(move)
assert stacks.values_a() == [1, 2, 3]
assert stacks.values_b() == []
```

- `pushswap.stack` holds `Stacks` (the two stacks and the list of operations
  applied), the `Operation` enum, whose values are the names above, and the
  helpers `is_sorted`, `find_min` and `find_max`.
- `pushswap.sorting` holds `solve`, which returns the list of operations, and
  the steps it is built from: `sort_three`, `sort_stacks`, `prep_for_push`,
  `init_nodes_a`, `init_nodes_b`, `current_index`, `set_cheapest` and
  `get_cheapest`.
- `pushswap.parsing` reads command-line words into integers with
  `parse_values`, and splits a single argument with `split_words`. Bad input
  raises `InputError`, a subclass of `ValueError`.

## What it does not do

There is no command that reads a list of operations and checks whether they
sort a given input. To check a sequence, replay it on a `Stacks` object with
`apply` and look at `values_a()` and `values_b()`, as in the example above.

## Tests

```
pip install -e ".[test]"
pytest
```