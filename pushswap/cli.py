"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.output import put_str
from pushswap.parsing import InputError, count_numbers, parse_input
from pushswap.stacks import Operation, PushSwap, is_sorted
from pushswap.turksort import sort_three, turksort


def solve(ps: PushSwap) -> list[Operation]:
    """Sort stack a and return the operations that were applied."""
    if not is_sorted(ps.a):
        if len(ps.a) == 2:
            ps.apply(Operation.SA)
        elif len(ps.a) == 3:
            sort_three(ps)
        else:
            turksort(ps)
    return list(ps.history)


def _fail() -> int:
    put_str("Error\n", sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from the arguments and print one operation per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    if count_numbers(args) == 0:
        return _fail()
    try:
        values = parse_input(args)
    except InputError:
        return _fail()
    for operation in solve(PushSwap(values)):
        put_str(f"{operation.text}\n", sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())