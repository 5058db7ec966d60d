"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum


class Operation(Enum):
    """Stack operations, numbered as in the instruction table."""

    SA = 0
    PA = 1
    RA = 2
    RRA = 3
    SB = 4
    PB = 5
    RB = 6
    RRB = 7
    SS = 8
    RR = 9
    RRR = 10

    @property
    def text(self) -> str:
        """The instruction as it is printed, e.g. 'rra'."""
        return self.name.lower()


def _as_operation(operation: Operation | str) -> Operation:
    if isinstance(operation, Operation):
        return operation
    if isinstance(operation, str):
        try:
            return Operation[operation.strip().upper()]
        except KeyError:
            pass
    raise ValueError(f"unknown operation: {operation!r}")


def _swap(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _push(source: list[int], dest: list[int]) -> bool:
    if not source:
        return False
    dest.insert(0, source.pop(0))
    return True


def _rotate(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def _reverse_rotate(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


class PushSwap:
    """Stacks a and b, top first, plus the operations applied through apply()."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"PushSwap(a={self.a!r}, b={self.b!r})"

    def apply(self, operation: Operation | str) -> bool:
        """Run an operation; record it in history only if it changed anything."""
        op = _as_operation(operation)
        done = getattr(self, op.text)()
        if done:
            self.history.append(op)
        return done

    def _both_rotatable(self) -> bool:
        return len(self.a) >= 2 and len(self.b) >= 2

    def sa(self) -> bool:
        """Swap the top two of a."""
        return _swap(self.a)

    def sb(self) -> bool:
        """Swap the top two of b."""
        return _swap(self.b)

    def ss(self) -> bool:
        """sa and sb together; only when both stacks hold two or more."""
        if not self._both_rotatable():
            return False
        self.sa()
        self.sb()
        return True

    def pa(self) -> bool:
        """Move the top of b onto a."""
        return _push(self.b, self.a)

    def pb(self) -> bool:
        """Move the top of a onto b."""
        return _push(self.a, self.b)

    def ra(self) -> bool:
        """Rotate a: the top goes to the bottom."""
        return _rotate(self.a)

    def rb(self) -> bool:
        """Rotate b: the top goes to the bottom."""
        return _rotate(self.b)

    def rr(self) -> bool:
        """ra and rb together; only when both stacks hold two or more."""
        if not self._both_rotatable():
            return False
        self.ra()
        self.rb()
        return True

    def rra(self) -> bool:
        """Reverse-rotate a: the bottom comes to the top."""
        return _reverse_rotate(self.a)

    def rrb(self) -> bool:
        """Reverse-rotate b: the bottom comes to the top."""
        return _reverse_rotate(self.b)

    def rrr(self) -> bool:
        """rra and rrb together; only when both stacks hold two or more."""
        if not self._both_rotatable():
            return False
        self.rra()
        self.rrb()
        return True


def is_sorted(values: Sequence[int]) -> bool:
    """True when values never decrease from first to last."""
    return all(x <= y for x, y in zip(values, values[1:]))


def find_max_index(values: Sequence[int]) -> int:
    """Index of the first largest value."""
    if not values:
        raise ValueError("empty sequence has no maximum")
    return max(range(len(values)), key=values.__getitem__)


def find_min_index(values: Sequence[int]) -> int:
    """Index of the first smallest value."""
    if not values:
        raise ValueError("empty sequence has no minimum")
    return min(range(len(values)), key=values.__getitem__)