"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise


@dataclass(eq=False)
class Node:
    """One number on a stack, with the bookkeeping the sorter fills in."""

    nbr: int
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target: Node | None = None


class Operation(str, Enum):
    """A stack operation, valued by the name it is printed with."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(dst: deque[Node], src: deque[Node]) -> None:
    if src:
        dst.appendleft(src.popleft())


class Stacks:
    """Stacks ``a`` and ``b``, top first, and the operations applied so far."""

    def __init__(self, values: Iterable[int]):
        self.a: deque[Node] = deque(Node(value) for value in values)
        self.b: deque[Node] = deque()
        self.operations: list[Operation] = []

    def apply(self, operation: Operation | str) -> None:
        """Perform one operation and record it."""
        op = Operation(operation)
        if op in (Operation.SA, Operation.SS):
            _swap(self.a)
        if op in (Operation.SB, Operation.SS):
            _swap(self.b)
        if op is Operation.PA:
            _push(self.a, self.b)
        if op is Operation.PB:
            _push(self.b, self.a)
        if op in (Operation.RA, Operation.RR):
            self.a.rotate(-1)
        if op in (Operation.RB, Operation.RR):
            self.b.rotate(-1)
        if op in (Operation.RRA, Operation.RRR):
            self.a.rotate(1)
        if op in (Operation.RRB, Operation.RRR):
            self.b.rotate(1)
        self.operations.append(op)

    def values_a(self) -> list[int]:
        """The numbers on stack ``a``, top first."""
        return [node.nbr for node in self.a]

    def values_b(self) -> list[int]:
        """The numbers on stack ``b``, top first."""
        return [node.nbr for node in self.b]


def is_sorted(nodes: Iterable[Node]) -> bool:
    """True when the numbers never decrease from top to bottom."""
    return all(upper.nbr <= lower.nbr for upper, lower in pairwise(nodes))


def find_min(nodes: Iterable[Node]) -> Node | None:
    """The first node holding the smallest number, or None if there is none."""
    return min(nodes, key=lambda node: node.nbr, default=None)


def find_max(nodes: Iterable[Node]) -> Node | None:
    """The first node holding the largest number, or None if there is none."""
    return max(nodes, key=lambda node: node.nbr, default=None)