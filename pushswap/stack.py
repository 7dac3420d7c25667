"""Stacks of numbers and the two-stack machine that the sorting works on."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator


class Operation(str, Enum):
    """The instructions the machine understands, named as they are printed."""

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


@dataclass
class Item:
    """A number on a stack together with its rank among its neighbours."""

    number: int
    index: int = 0


class Stack:
    """A stack whose top is the first element and whose bottom is the last."""

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self._items: deque[Item] = deque(Item(number) for number in numbers)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.numbers()!r})"

    def numbers(self) -> list[int]:
        """The numbers from top to bottom."""
        return [item.number for item in self._items]

    def top(self) -> Item:
        """The item on top; IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def bottom(self) -> Item:
        """The item at the bottom; IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("bottom of an empty stack")
        return self._items[-1]

    def push_top(self, item: Item) -> None:
        """Put an item on top."""
        self._items.appendleft(item)

    def pop_top(self) -> Item:
        """Take the item off the top; IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def rotate(self) -> None:
        """Move the top item to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom item to the top."""
        self._items.rotate(1)

    def swap(self) -> None:
        """Exchange the two top items; does nothing with fewer than two."""
        if len(self._items) >= 2:
            first = self._items.popleft()
            second = self._items.popleft()
            self._items.appendleft(first)
            self._items.appendleft(second)

    def is_sorted(self) -> bool:
        """True if the numbers never decrease from top to bottom."""
        numbers = self.numbers()
        return all(a <= b for a, b in zip(numbers, numbers[1:]))

    def highest(self) -> Item:
        """The first item holding the largest number; ValueError if empty."""
        if not self._items:
            raise ValueError("highest of an empty stack")
        return max(self._items, key=lambda item: item.number)

    def assign_indices(self) -> None:
        """Give each item the count of numbers on the stack smaller than its own."""
        numbers = self.numbers()
        for item in self._items:
            item.index = sum(1 for number in numbers if number < item.number)


class Machine:
    """Two stacks, a and b, and the record of operations applied to them."""

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a = Stack(numbers)
        self.b = Stack()
        self.operations: list[Operation] = []
        self._actions: dict[Operation, Callable[[], None]] = {
            Operation.SA: self.a.swap,
            Operation.SB: self.b.swap,
            Operation.SS: self._swap_both,
            Operation.PA: lambda: self._move(self.b, self.a),
            Operation.PB: lambda: self._move(self.a, self.b),
            Operation.RA: self.a.rotate,
            Operation.RB: self.b.rotate,
            Operation.RR: self._rotate_both,
            Operation.RRA: self.a.reverse_rotate,
            Operation.RRB: self.b.reverse_rotate,
            Operation.RRR: self._reverse_rotate_both,
        }

    @staticmethod
    def _move(source: Stack, destination: Stack) -> None:
        destination.push_top(source.pop_top())

    def _swap_both(self) -> None:
        self.a.swap()
        self.b.swap()

    def _rotate_both(self) -> None:
        self.a.rotate()
        self.b.rotate()

    def _reverse_rotate_both(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()

    def apply(self, operation: Operation | str) -> None:
        """Carry out one operation and record it.

        A push from an empty stack raises IndexError and is not recorded.
        """
        operation = Operation(operation)
        self._actions[operation]()
        self.operations.append(operation)

    def sa(self) -> None:
        self.apply(Operation.SA)

    def sb(self) -> None:
        self.apply(Operation.SB)

    def ss(self) -> None:
        self.apply(Operation.SS)

    def pa(self) -> None:
        self.apply(Operation.PA)

    def pb(self) -> None:
        self.apply(Operation.PB)

    def ra(self) -> None:
        self.apply(Operation.RA)

    def rb(self) -> None:
        self.apply(Operation.RB)

    def rr(self) -> None:
        self.apply(Operation.RR)

    def rra(self) -> None:
        self.apply(Operation.RRA)

    def rrb(self) -> None:
        self.apply(Operation.RRB)

    def rrr(self) -> None:
        self.apply(Operation.RRR)