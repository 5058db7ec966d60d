from itertools import permutations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.stacks import Operation, PushSwap, is_sorted
from pushswap.turksort import (
    MovePlan,
    RotationMode,
    calc_cost,
    find_cheapest,
    move_b_target_to_top,
    move_cheapest_to_top,
    rotate_to_top,
    set_target_b,
    set_targets_a,
    sort_stack,
    sort_three,
    turksort,
)


def _replay(values, history):
    ps = PushSwap(values)
    for op in history:
        assert ps.apply(op)
    return ps


def _with_b(a, b):
    ps = PushSwap(a)
    ps.b = list(b)
    return ps


def test_set_targets_a_picks_closest_smaller_or_max():
    ps = _with_b([5, 1, 9], [4, 8, 2])
    targets = set_targets_a(ps)
    assert targets == [ps.b.index(4), ps.b.index(8), ps.b.index(8)]


def test_set_targets_a_with_empty_b():
    ps = PushSwap([3, 1, 2])
    assert set_targets_a(ps) == [None, None, None]


def test_set_target_b_smallest_larger():
    ps = _with_b([7, 3, 10, 5], [4])
    assert set_target_b(ps) == ps.a.index(5)


def test_set_target_b_falls_back_to_min():
    ps = _with_b([7, 3, 10, 5], [20])
    assert set_target_b(ps) == ps.a.index(3)


def test_set_target_b_empty_b_raises():
    with pytest.raises(ValueError):
        set_target_b(PushSwap([1, 2]))


def test_calc_cost_zero_when_both_on_top():
    ps = _with_b([5, 1, 9, 7], [4, 8, 2])
    plans = calc_cost(ps, set_targets_a(ps))
    assert len(plans) == len(ps.a)
    assert plans[0].cost == 0
    assert find_cheapest(plans) == plans[0]
    assert all(plan.cost >= 0 for plan in plans)


def test_calc_cost_length_mismatch():
    ps = _with_b([5, 1], [4])
    with pytest.raises(ValueError):
        calc_cost(ps, [0])


def test_find_cheapest_first_of_ties():
    plans = [
        MovePlan(0, 0, 3),
        MovePlan(1, 0, 1, RotationMode.TOGETHER),
        MovePlan(2, 0, 1),
    ]
    assert find_cheapest(plans) is plans[1]


def test_find_cheapest_empty():
    with pytest.raises(ValueError):
        find_cheapest([])


@pytest.mark.parametrize("index", range(5))
@pytest.mark.parametrize("target", range(4))
def test_rotate_to_top_brings_both_up(index, target):
    ps = _with_b([10, 20, 30, 40, 50], [1, 2, 3, 4])
    a_value, b_value = ps.a[index], ps.b[target]
    rotate_to_top(ps, index, target)
    assert ps.a[0] == a_value
    assert ps.b[0] == b_value
    assert sorted(ps.a) == [10, 20, 30, 40, 50]


def test_rotate_to_top_out_of_range_is_noop():
    ps = _with_b([3, 1, 2], [5])
    rotate_to_top(ps, 7, 0)
    assert ps.a == [3, 1, 2]
    assert ps.history == []


@given(
    st.lists(st.integers(-1000, 1000), unique=True, min_size=6, max_size=20),
    st.integers(1, 4),
)
def test_move_cheapest_to_top_puts_target_under(values, pushed):
    ps = PushSwap(values)
    for _ in range(pushed):
        ps.apply(Operation.PB)
    targets = dict(zip(ps.a, (ps.b[t] for t in set_targets_a(ps))))
    move_cheapest_to_top(ps)
    assert ps.b[0] == targets[ps.a[0]]


def test_move_b_target_to_top():
    ps = _with_b([7, 3, 10, 5], [4])
    move_b_target_to_top(ps)
    assert ps.a[0] == 5
    assert ps.b == [4]


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_all_orders(values):
    ps = PushSwap(values)
    sort_three(ps)
    assert ps.a == sorted(values)
    assert len(ps.history) <= 2
    assert _replay(values, ps.history).a == ps.a


def test_sort_three_ignores_other_sizes():
    ps = PushSwap([4, 3, 2, 1])
    sort_three(ps)
    assert ps.a == [4, 3, 2, 1]
    assert ps.history == []


@pytest.mark.parametrize("shift", range(6))
def test_sort_stack_rotated_sorted(shift):
    base = [1, 4, 6, 9, 12, 15]
    ps = PushSwap(base[shift:] + base[:shift])
    sort_stack(ps)
    assert ps.a == base
    assert len(ps.history) <= len(base) // 2


@settings(max_examples=60)
@given(st.lists(st.integers(-(2**31), 2**31 - 1), unique=True, min_size=4, max_size=60))
def test_turksort_sorts(values):
    ps = PushSwap(values)
    turksort(ps)
    assert ps.a == sorted(values)
    assert ps.b == []
    replayed = _replay(values, ps.history)
    assert replayed.a == sorted(values)


def test_turksort_sorted_input_no_ops():
    ps = PushSwap([1, 2, 3, 4, 5])
    turksort(ps)
    assert ps.history == []
    assert is_sorted(ps.a)