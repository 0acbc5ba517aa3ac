# pushswap

Sort a list of distinct integers with two stacks and a small set of
operations, printing the sequence of moves the solver finds.

## The operations

Stack `a` starts with the numbers, with the first argument on top.
Stack `b` starts empty.

| move  | effect                                       |
|-------|----------------------------------------------|
| `sa`  | swap the top two elements of `a`             |
| `sb`  | swap the top two elements of `b`             |
| `ss`  | `sa` and `sb` together                       |
| `pa`  | move the top of `b` onto `a`                 |
| `pb`  | move the top of `a` onto `b`                 |
| `ra`  | rotate `a` up (top goes to the bottom)       |
| `rb`  | rotate `b` up                                |
| `rr`  | `ra` and `rb` together                       |
| `rra` | rotate `a` down (bottom comes to the top)    |
| `rrb` | rotate `b` down                              |
| `rrr` | `rra` and `rrb` together                     |

A move on a stack with too few elements does nothing. The puzzle is
solved when `b` is empty and `a` is in ascending order from top to
bottom.

## Installation

```
pip install .
```

## Solving

```
push-swap 3 2 1
```

Numbers may be given as separate arguments or in one quoted argument
separated by spaces (`push-swap "4 67 3" 87 23`). Each move is printed
on its own line. An input that is already sorted, or no arguments at
all, prints nothing.

If any value is not an integer, falls outside the 32-bit signed range,
or appears twice, `Error` is written to standard error.

Two values are sorted with one swap, three with at most two moves, four
by pushing one value aside and inserting it back. Larger inputs are
sorted by pushing all but three values onto `b`, each time choosing the
value that costs the fewest rotations to place, then bringing them back
into `a` in order.

## From Python

```python
from pushswap.algorithm import solve
from pushswap.stacks import Stacks

moves = solve([3, 2, 1])

stacks = Stacks([3, 2, 1], [])
stacks.run(moves)
assert stacks.is_solved()
```

- `pushswap.algorithm.solve(values)` returns the list of `Move` values
  that sorts `values`, given top first.
- `pushswap.stacks.Stacks` holds the stacks `a` and `b` as lists (top at
  index 0). `apply(move)` takes a `Move` or its name and raises
  `ValueError` for an unknown name; `run(moves)` applies several in
  order; `history` records every move applied; `is_solved()` tells
  whether `b` is empty and `a` sorted.
- `pushswap.parsing.parse_arguments(args)` turns command-line arguments
  into values and raises `pushswap.parsing.ParseError` when they are
  invalid.

The `pushswap.libft` sub-package holds the small helpers the solver is
built on: character and integer conversion (`chars`), byte-buffer
operations (`memory`), string functions (`strings`), formatted output
(`output`) and a singly linked list (`linkedlist`).

## What it does not do

There is no command that reads a sequence of moves from standard input
and reports whether it sorts the input. To check a sequence, replay it
from Python with `Stacks.run` and `Stacks.is_solved` as shown above.

## Running the tests

```
pip install .[test]
pytest
```