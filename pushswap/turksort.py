"""Sorting stack a with the help of stack b by cheapest-move insertion."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from pushswap.stacks import (
    Operation,
    PushSwap,
    find_max_index,
    find_min_index,
    is_sorted,
)


class RotationMode(Enum):
    """How a move brings its element of a and its target in b to the top."""

    SEPARATE = "r"
    TOGETHER = "rr"
    REVERSE_TOGETHER = "rrr"


@dataclass(frozen=True)
class MovePlan:
    """Cost of bringing a[index] and b[target] to the tops of their stacks."""

    index: int
    target: int | None
    cost: int
    mode: RotationMode = RotationMode.SEPARATE


def _median(size: int) -> int:
    return (size + 1) // 2


def _apply_until(ps: PushSwap, operation: Operation, reached: Callable[[], bool]) -> None:
    while not reached():
        if not ps.apply(operation):
            raise RuntimeError(f"{operation.text} cannot make progress")


def set_targets_a(ps: PushSwap) -> list[int | None]:
    """For every element of a, the index in b it should sit on top of.

    That is the largest value of b below the element, or the largest value of
    b when none is below. With b empty every target is None.
    """
    if not ps.b:
        return [None] * len(ps.a)
    fallback = find_max_index(ps.b)
    targets: list[int | None] = []
    for value in ps.a:
        smaller = [j for j, other in enumerate(ps.b) if other < value]
        if smaller:
            targets.append(max(smaller, key=ps.b.__getitem__))
        else:
            targets.append(fallback)
    return targets


def set_target_b(ps: PushSwap) -> int:
    """Index in a of the smallest value above the top of b, else of the minimum of a."""
    if not ps.b:
        raise ValueError("stack b is empty")
    if not ps.a:
        raise ValueError("stack a is empty")
    top = ps.b[0]
    larger = [i for i, value in enumerate(ps.a) if value > top]
    if larger:
        return min(larger, key=ps.a.__getitem__)
    return find_min_index(ps.a)


def calc_cost(ps: PushSwap, targets: Sequence[int | None]) -> list[MovePlan]:
    """Plan the cheapest way to bring each a[i] and its target to the top."""
    size_a, size_b = len(ps.a), len(ps.b)
    if len(targets) != size_a:
        raise ValueError("one target is needed for every element of a")
    median_a, median_b = _median(size_a), _median(size_b)
    plans: list[MovePlan] = []
    for index, target in enumerate(targets):
        cost = index if index < median_a else size_a - index
        mode = RotationMode.SEPARATE
        if target is not None:
            cost += target if target < median_b else size_b - target
            together = max(index, target)
            if together < cost:
                cost, mode = together, RotationMode.TOGETHER
            reverse = max(size_a - index, size_b - target)
            if reverse < cost:
                cost, mode = reverse, RotationMode.REVERSE_TOGETHER
        plans.append(MovePlan(index, target, cost, mode))
    return plans


def find_cheapest(plans: Sequence[MovePlan]) -> MovePlan:
    """The first plan of lowest cost."""
    if not plans:
        raise ValueError("no plans to choose from")
    return min(plans, key=lambda plan: plan.cost)


def rotate_to_top(ps: PushSwap, index: int, target: int | None = None) -> None:
    """Rotate a[index] to the top of a, then b[target] to the top of b.

    Each stack turns the shorter way. An index outside a does nothing; a
    target outside b leaves b alone.
    """
    if not 0 <= index < len(ps.a):
        return
    value = ps.a[index]
    op_a = Operation.RA if index < _median(len(ps.a)) else Operation.RRA
    _apply_until(ps, op_a, lambda: ps.a[0] == value)
    if target is None or not 0 <= target < len(ps.b):
        return
    b_value = ps.b[target]
    op_b = Operation.RB if target < _median(len(ps.b)) else Operation.RRB
    _apply_until(ps, op_b, lambda: ps.b[0] == b_value)


def _rotate_together(
    ps: PushSwap,
    plan: MovePlan,
    both: Operation,
    op_a: Operation,
    op_b: Operation,
) -> None:
    if plan.target is None or plan.target >= len(ps.b):
        rotate_to_top(ps, plan.index, plan.target)
        return
    a_value = ps.a[plan.index]
    b_value = ps.b[plan.target]
    _apply_until(ps, both, lambda: ps.a[0] == a_value or ps.b[0] == b_value)
    _apply_until(ps, op_a, lambda: ps.a[0] == a_value)
    _apply_until(ps, op_b, lambda: ps.b[0] == b_value)


def move_cheapest_to_top(ps: PushSwap) -> MovePlan:
    """Bring the cheapest element of a and its target in b to the tops."""
    plan = find_cheapest(calc_cost(ps, set_targets_a(ps)))
    if plan.mode is RotationMode.TOGETHER:
        _rotate_together(ps, plan, Operation.RR, Operation.RA, Operation.RB)
    elif plan.mode is RotationMode.REVERSE_TOGETHER:
        _rotate_together(ps, plan, Operation.RRR, Operation.RRA, Operation.RRB)
    else:
        rotate_to_top(ps, plan.index, plan.target)
    return plan


def move_b_target_to_top(ps: PushSwap) -> None:
    """Rotate a so that the top of b can be pushed into its sorted place."""
    index = set_target_b(ps)
    value = ps.a[index]
    op_a = Operation.RA if index < _median(len(ps.a)) else Operation.RRA
    _apply_until(ps, op_a, lambda: ps.a[0] == value)


def sort_three(ps: PushSwap) -> None:
    """Sort a when it holds exactly three values; otherwise do nothing."""
    if len(ps.a) != 3:
        return
    largest = ps.a[find_max_index(ps.a)]
    if ps.a[0] == largest:
        ps.apply(Operation.RA)
    elif ps.a[1] == largest:
        ps.apply(Operation.RRA)
    if ps.a[0] > ps.a[1]:
        ps.apply(Operation.SA)


def sort_stack(ps: PushSwap) -> None:
    """Rotate a, the shorter way, until its minimum is on top."""
    if not ps.a:
        return
    index = find_min_index(ps.a)
    smallest = ps.a[index]
    op_a = Operation.RA if index < _median(len(ps.a)) else Operation.RRA
    _apply_until(ps, op_a, lambda: ps.a[0] == smallest)


def turksort(ps: PushSwap) -> None:
    """Sort a: push to b in order, sort the last three, push back in place."""
    for _ in range(2):
        if len(ps.a) > 3 and not is_sorted(ps.a):
            ps.apply(Operation.PB)
    while len(ps.a) > 3 and not is_sorted(ps.a):
        move_cheapest_to_top(ps)
        ps.apply(Operation.PB)
    sort_three(ps)
    while ps.b:
        move_b_target_to_top(ps)
        ps.apply(Operation.PA)
    sort_stack(ps)