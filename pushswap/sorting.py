"""Choosing the operations that sort stack ``a`` with the help of stack ``b``."""

from __future__ import annotations

from collections.abc import Iterable

from .stack import Node, Operation, Stacks, find_max, find_min, is_sorted


def current_index(nodes: Iterable[Node]) -> None:
    """Number the nodes from the top and mark those in the upper half."""
    nodes = list(nodes)
    median = len(nodes) // 2
    for position, node in enumerate(nodes):
        node.index = position
        node.above_median = position <= median


def _rotation_cost(node: Node, length: int) -> int:
    """Rotations needed to bring ``node`` to the top of a stack of ``length``."""
    return node.index if node.above_median else length - node.index


def _set_target_a(a: Iterable[Node], b: Iterable[Node]) -> None:
    b = list(b)
    for node in a:
        smaller = [candidate for candidate in b if candidate.nbr < node.nbr]
        if smaller:
            node.target = max(smaller, key=lambda candidate: candidate.nbr)
        else:
            node.target = find_max(b)


def _set_target_b(a: Iterable[Node], b: Iterable[Node]) -> None:
    a = list(a)
    for node in b:
        larger = [candidate for candidate in a if candidate.nbr > node.nbr]
        if larger:
            node.target = min(larger, key=lambda candidate: candidate.nbr)
        else:
            node.target = find_min(a)


def _cost_analysis_a(a: Iterable[Node], b: Iterable[Node]) -> None:
    a = list(a)
    len_a = len(a)
    len_b = len(list(b))
    for node in a:
        node.push_cost = _rotation_cost(node, len_a)
        if node.target is not None:
            node.push_cost += _rotation_cost(node.target, len_b)


def set_cheapest(nodes: Iterable[Node]) -> None:
    """Flag the first node with the lowest push cost, and only that one."""
    nodes = list(nodes)
    if not nodes:
        return
    best = min(nodes, key=lambda node: node.push_cost)
    for node in nodes:
        node.cheapest = node is best


def get_cheapest(nodes: Iterable[Node]) -> Node | None:
    """The first node flagged as cheapest, or None."""
    return next((node for node in nodes if node.cheapest), None)


def init_nodes_a(a: Iterable[Node], b: Iterable[Node]) -> None:
    """Prepare the nodes of ``a`` for a move to ``b``."""
    a = list(a)
    b = list(b)
    current_index(a)
    current_index(b)
    _set_target_a(a, b)
    _cost_analysis_a(a, b)
    set_cheapest(a)


def init_nodes_b(a: Iterable[Node], b: Iterable[Node]) -> None:
    """Prepare the nodes of ``b`` for a move back to ``a``."""
    a = list(a)
    b = list(b)
    current_index(a)
    current_index(b)
    _set_target_b(a, b)


def prep_for_push(stacks: Stacks, top_node: Node, stack_name: str) -> None:
    """Rotate stack ``a`` or ``b`` until ``top_node`` is on top."""
    if stack_name == "a":
        stack, forward, backward = stacks.a, Operation.RA, Operation.RRA
    elif stack_name == "b":
        stack, forward, backward = stacks.b, Operation.RB, Operation.RRB
    else:
        raise ValueError(f"unknown stack: {stack_name!r}")
    if not any(node is top_node for node in stack):
        raise ValueError(f"node {top_node.nbr} is not on stack {stack_name}")
    while stack[0] is not top_node:
        stacks.apply(forward if top_node.above_median else backward)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most three numbers with at most two operations."""
    a = stacks.a
    if len(a) < 2:
        return
    biggest = find_max(a)
    if biggest is a[0]:
        stacks.apply(Operation.RA)
    elif biggest is a[1]:
        stacks.apply(Operation.RRA)
    if a[0].nbr > a[1].nbr:
        stacks.apply(Operation.SA)


def _move_a_to_b(stacks: Stacks) -> None:
    cheapest = get_cheapest(stacks.a)
    if cheapest is None:
        return
    prep_for_push(stacks, cheapest, "a")
    if cheapest.target is not None:
        prep_for_push(stacks, cheapest.target, "b")
    stacks.apply(Operation.PB)


def _move_b_to_a(stacks: Stacks) -> None:
    if not stacks.b:
        return
    target = stacks.b[0].target
    if target is not None:
        prep_for_push(stacks, target, "a")
    stacks.apply(Operation.PA)


def _min_on_top(stacks: Stacks) -> None:
    smallest = find_min(stacks.a)
    if smallest is None:
        return
    while stacks.a[0] is not smallest:
        stacks.apply(Operation.RA if smallest.above_median else Operation.RRA)


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` of any size, leaving ``b`` empty."""
    a, b = stacks.a, stacks.b
    if len(a) > 3 and not is_sorted(a):
        stacks.apply(Operation.PB)
    while len(a) > 3 and not is_sorted(a):
        init_nodes_a(a, b)
        _move_a_to_b(stacks)
    sort_three(stacks)
    while b:
        init_nodes_b(a, b)
        _move_b_to_a(stacks)
    current_index(a)
    _min_on_top(stacks)


def solve(values: Iterable[int]) -> list[Operation]:
    """The operations that sort ``values``, top first, into ascending order."""
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.apply(Operation.SA)
        elif len(stacks.a) == 3:
            sort_three(stacks)
        else:
            sort_stacks(stacks)
    return list(stacks.operations)