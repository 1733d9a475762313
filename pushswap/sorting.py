"""The sorting strategy: small cases by hand, larger ones by insertion through stack ``b``."""

from __future__ import annotations

import sys
from collections import deque
from typing import Callable, Iterable

from .stacks import Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True if the values never decrease from first to last."""
    previous = None
    for value in values:
        if previous is not None and previous > value:
            return False
        previous = value
    return True


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three numbers, smallest on top."""
    a = stacks.a
    if len(a) != 3:
        raise ValueError(f"stack a must hold three numbers, not {len(a)}")
    if is_sorted(a):
        return
    top, following, bottom = a[0], a[1], a[-1]
    if top < following and top < bottom:
        stacks.swap_a()
        stacks.rotate_a()
    elif top < following:
        stacks.reverse_rotate_a()
    elif top < bottom:
        stacks.swap_a()
    else:
        stacks.rotate_a()
        if a[0] > a[1]:
            stacks.swap_a()


def _insert_position(value: int, stack: deque) -> int:
    """Rotations that bring the slot for ``value`` to the top of ``stack``.

    The slot lies between a larger element and a smaller one that follows it.
    Without such a slot, the position after the last rising step is used.
    """
    size = len(stack)
    fallback = 0
    for index in range(1, size + 1):
        current = stack[index - 1]
        following = stack[index % size]
        if following < value < current:
            return index
        if current < following:
            fallback = index
    return fallback


def _bring_to_top(
    index: int,
    size: int,
    rotate: Callable[[], None],
    reverse_rotate: Callable[[], None],
) -> None:
    if 2 * index > size:
        for _ in range(size - index):
            reverse_rotate()
    else:
        for _ in range(index):
            rotate()


def insert_into_b(stacks: Stacks) -> None:
    """Rotate ``b`` to the slot for the top of ``a`` and push it there."""
    if not stacks.a:
        raise IndexError("stack a is empty")
    index = _insert_position(stacks.a[0], stacks.b)
    _bring_to_top(index, len(stacks.b), stacks.rotate_b, stacks.reverse_rotate_b)
    stacks.push_b()


def insert_into_a(stacks: Stacks) -> None:
    """Rotate ``a`` to the slot for the top of ``b`` and push it there.

    The number of rotations chosen is written to the output first.
    """
    if not stacks.b:
        raise IndexError("stack b is empty")
    index = _insert_position(stacks.b[0], stacks.a)
    (sys.stdout if stacks.out is None else stacks.out).write(f"{index}\n")
    _bring_to_top(index, len(stacks.a), stacks.rotate_a, stacks.reverse_rotate_a)
    stacks.push_a()


def sort_stacks(stacks: Stacks) -> None:
    """Run the whole strategy on ``stacks``, writing every operation."""
    if is_sorted(stacks.a):
        return
    if len(stacks.a) == 2:
        stacks.swap_a()
    elif len(stacks.a) == 3:
        sort_three(stacks)
    else:
        stacks.push_b()
        while len(stacks.a) != 3 and len(stacks.b) <= len(stacks.a) - 1:
            insert_into_b(stacks)
        while len(stacks.a) != 3:
            stacks.push_b()
        sort_three(stacks)
        while stacks.b:
            insert_into_a(stacks)