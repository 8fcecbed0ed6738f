import itertools
import random

import pytest

from pushswap.sorting import (
    current_index,
    get_cheapest,
    init_nodes_a,
    init_nodes_b,
    prep_for_push,
    set_cheapest,
    solve,
    sort_stacks,
    sort_three,
)
from pushswap.stack import Node, Operation, Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for operation in operations:
        stacks.apply(operation)
    return stacks


@pytest.mark.parametrize("size", [0, 1, 2, 3, 4, 5, 6])
def test_solve_sorts_every_permutation(size):
    for values in itertools.permutations(range(size)):
        stacks = _replay(values, solve(values))
        assert stacks.values_a() == sorted(values)
        assert stacks.values_b() == []


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_solve_sorts_random_hundred(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-10_000, 10_000), 100)
    stacks = _replay(values, solve(values))
    assert stacks.values_a() == sorted(values)
    assert stacks.values_b() == []


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4, 5, 6]) == []


def test_solve_two_numbers_swaps():
    assert solve([2, 1]) == [Operation.SA]


def test_sort_three_swap_only():
    stacks = Stacks([2, 1, 3])
    sort_three(stacks)
    assert stacks.operations == ["sa"]
    assert stacks.values_a() == [1, 2, 3]


def test_sort_three_biggest_on_top():
    stacks = Stacks([3, 2, 1])
    sort_three(stacks)
    assert stacks.operations == ["ra", "sa"]
    assert stacks.values_a() == [1, 2, 3]


@pytest.mark.parametrize("values", list(itertools.permutations([7, -4, 12])))
def test_sort_three_at_most_two_operations(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.values_a() == sorted(values)
    assert len(stacks.operations) <= 2


def test_sort_stacks_leaves_b_empty():
    stacks = Stacks([5, 3, 9, -1, 0, 8, 2])
    sort_stacks(stacks)
    assert stacks.values_a() == [-1, 0, 2, 3, 5, 8, 9]
    assert stacks.values_b() == []


def test_current_index_marks_upper_half():
    nodes = [Node(value) for value in (10, 20, 30, 40, 50)]
    current_index(nodes)
    assert [node.index for node in nodes] == [0, 1, 2, 3, 4]
    assert [node.above_median for node in nodes] == [True, True, True, False, False]


def test_init_nodes_a_targets_closest_smaller():
    a = [Node(7), Node(3)]
    b = [Node(5), Node(1), Node(8)]
    init_nodes_a(a, b)
    assert a[0].target is b[0]
    assert a[1].target is b[1]


def test_init_nodes_a_falls_back_to_max():
    a = [Node(0)]
    b = [Node(5), Node(1)]
    init_nodes_a(a, b)
    assert a[0].target is b[0]
    assert get_cheapest(a) is a[0]


def test_init_nodes_b_targets_closest_larger_or_min():
    a = [Node(1), Node(5), Node(9)]
    b = [Node(6), Node(10)]
    init_nodes_b(a, b)
    assert b[0].target is a[2]
    assert b[1].target is a[0]


def test_set_cheapest_picks_first_lowest():
    nodes = [Node(1, push_cost=3), Node(2, push_cost=1), Node(3, push_cost=1)]
    set_cheapest(nodes)
    assert get_cheapest(nodes) is nodes[1]
    assert [node.cheapest for node in nodes] == [False, True, False]


def test_get_cheapest_empty():
    assert get_cheapest([]) is None


def test_prep_for_push_rotates_forward():
    stacks = Stacks([1, 2, 3, 4, 5])
    current_index(stacks.a)
    prep_for_push(stacks, stacks.a[1], "a")
    assert stacks.operations == [Operation.RA]
    assert stacks.values_a()[0] == 2


def test_prep_for_push_rotates_backward():
    stacks = Stacks([1, 2, 3, 4, 5])
    current_index(stacks.a)
    prep_for_push(stacks, stacks.a[4], "a")
    assert stacks.operations == [Operation.RRA]
    assert stacks.values_a()[0] == 5


def test_prep_for_push_on_b():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)
    current_index(stacks.b)
    target = stacks.b[1]
    prep_for_push(stacks, target, "b")
    assert stacks.b[0] is target
    assert stacks.operations[2:] == [Operation.RB]


def test_prep_for_push_rejects_unknown_stack():
    stacks = Stacks([1, 2])
    with pytest.raises(ValueError):
        prep_for_push(stacks, stacks.a[0], "c")


def test_prep_for_push_rejects_foreign_node():
    stacks = Stacks([1, 2])
    with pytest.raises(ValueError):
        prep_for_push(stacks, Node(1), "a")