"""Sorting strategies that drive the two-stack machine."""

from __future__ import annotations

from typing import Iterable

from pushswap.stack import Machine, Operation

_BIT_WIDTH = 32


def bit_string(n: int) -> str:
    """The lowest 32 bits of n as '0'/'1' characters, least significant first.

    Numbers that are not positive give all zeros.
    """
    bits = []
    while n > 0 and len(bits) < _BIT_WIDTH:
        bits.append("1" if n & 1 else "0")
        n >>= 1
    return "".join(bits).ljust(_BIT_WIDTH, "0")


def bit_matches(n: int, bit: str, position: int) -> bool:
    """True if the bit of n at position (least significant first) is the given
    character. Positions outside the 32-bit window never match."""
    if not 0 <= position < _BIT_WIDTH:
        return False
    return bit_string(n)[position] == bit


def tiny_sort(machine: Machine) -> None:
    """Sort three numbers on stack a with at most two operations."""
    stack = machine.a
    highest = stack.highest()
    first, second = list(stack)[:2]
    if first is highest:
        machine.ra()
    elif second is highest:
        machine.rra()
    first, second = list(stack)[:2]
    if first.number > second.number:
        machine.sa()


def _push_smallest(machine: Machine) -> None:
    """Bring the item ranked 0 to the top of a and push it onto b."""
    items = list(machine.a)
    if items[-1].index == 0:
        machine.rra()
    elif items[-2].index == 0:
        machine.rra()
        machine.rra()
    else:
        while machine.a.top().index != 0:
            machine.ra()
    machine.pb()


def _push_second_smallest(machine: Machine) -> None:
    """Bring the item ranked 1 to the top of a and push it onto b."""
    if machine.a.bottom().index == 1:
        machine.rra()
    else:
        while machine.a.top().index != 1:
            machine.ra()
    machine.pb()


def medium_sort(machine: Machine) -> None:
    """Sort four or five numbers: park the smallest on b, sort the rest, return."""
    length = len(machine.a)
    machine.a.assign_indices()
    _push_smallest(machine)
    if length == 5:
        _push_second_smallest(machine)
    tiny_sort(machine)
    while len(machine.a) != length:
        machine.pa()


def _push_or_rotate(machine: Machine, position: int) -> None:
    if bit_matches(machine.a.top().index, "0", position):
        machine.pb()
    else:
        machine.ra()


def _radix_pass(machine: Machine, position: int) -> None:
    """Send every item whose rank has a 0 at position to b, keep the rest on a."""
    last = machine.a.bottom()
    while machine.a.top() is not last:
        _push_or_rotate(machine, position)
    _push_or_rotate(machine, position)


def radix_sort(machine: Machine) -> None:
    """Binary radix sort on the ranks of the numbers on stack a."""
    length = len(machine.a)
    machine.a.assign_indices()
    position = 0
    while not machine.a.is_sorted():
        _radix_pass(machine, position)
        while len(machine.a) != length:
            machine.pa()
        position += 1


def sort_numbers(numbers: Iterable[int]) -> list[Operation]:
    """The operations that sort the numbers, chosen by how many there are."""
    machine = Machine(numbers)
    if not machine.a.is_sorted():
        size = len(machine.a)
        if size == 2:
            machine.sa()
        elif size == 3:
            tiny_sort(machine)
        elif size in (4, 5):
            medium_sort(machine)
        else:
            radix_sort(machine)
    return list(machine.operations)