# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations. It prints the operations it performs, one per line.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments, as space-separated strings, or both:

```
push_swap 3 2 1
push_swap "4 67 3" 87 23
```

The same entry point can be started with `python -m pushswap.cli`.

The program writes the instructions that sort stack `a` in ascending order.
The top of `a` is the first number given. The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

Input that is already sorted produces no output. In these cases the program
prints `Error` to standard error and exits with status 1:

- a token that is not an integer (numbers within one argument must be
  separated by spaces),
- a value outside the signed 32-bit range,
- a duplicate value,
- an argument that holds no number.

With no arguments the program exits quietly with status 0.

## Library use

```python
from pushswap.cli import solve
from pushswap.parsing import InputError, parse_input
from pushswap.stacks import PushSwap, is_sorted

ps = PushSwap(parse_input(["5", "1 4", "2 3"]))
operations = solve(ps)          # list of Operation members
print(" ".join(op.text for op in operations))
assert is_sorted(ps.a)
```

- `pushswap.stacks`: `PushSwap` holds the stacks `a` and `b` as lists, top
  first. It has one method per operation (`sa`, `pb`, `rrr`, ...). Each
  method returns whether it changed anything. `PushSwap.apply()` takes an
  `Operation` or its name, and records the operations that had an effect in
  `history`. The module also provides `is_sorted`, `find_min_index` and
  `find_max_index`.
- `pushswap.parsing`: `count_numbers`, `parse_number` and `parse_input`.
  Invalid input raises `InputError`, a subclass of `ValueError`.
- `pushswap.turksort`: the sorting strategy.
  - `set_targets_a` and `set_target_b` choose where each element belongs.
  - `calc_cost` produces a `MovePlan` for each element, with a
    `RotationMode`.
  - `find_cheapest` picks the first plan of lowest cost.
  - `turksort` pushes elements to `b`, sorts the last three with
    `sort_three`, pushes everything back in place, and finishes with
    `sort_stack`.
- `pushswap.cli`: `solve(ps)` sorts and returns the applied operations.
  `main(argv=None)` is the command.

Small helper modules provide text and data utilities:

- `strings`: `atoi`, `split`, `substr`, `strtrim` and more.
- `chars`: ASCII classification and case conversion.
- `transform`: `strdup`, `strjoin`, `strlcpy`, `strlcat`, `strmapi`,
  `striteri`.
- `memory`: byte-buffer `memset`, `memcpy`, `memmove` and similar.
- `lists`: `LinkedList` and `Node`.
- `output`: `put_str`, `put_nbr`, and a small `printf` / `format_printf`.
- `lines`: `LineReader` and `get_next_line`, which read a stream or file
  descriptor line by line.

## Limits

The package only produces instruction lists. It has no command that reads a
list of instructions and checks whether it sorts a given input.

## Running the tests

```
pip install ".[test]"
pytest
```