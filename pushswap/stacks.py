"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, Optional, TextIO


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its leftmost element.

    Every operation writes its name, followed by a newline, to ``out``
    (standard output when ``out`` is None).
    """

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.out = out

    def _emit(self, name: str) -> None:
        (sys.stdout if self.out is None else self.out).write(name + "\n")

    @staticmethod
    def _require(stack: deque, name: str) -> None:
        if not stack:
            raise IndexError(f"stack {name} is empty")

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._require(self.b, "b")
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._require(self.a, "a")
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    @staticmethod
    def _swap(stack: deque) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    def swap_a(self) -> None:
        """Exchange the two top elements of ``a``."""
        self._require(self.a, "a")
        self._swap(self.a)
        self._emit("sa")

    def swap_b(self) -> None:
        """Exchange the two top elements of ``b``."""
        self._require(self.b, "b")
        self._swap(self.b)
        self._emit("sb")

    def rotate_a(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._require(self.a, "a")
        self.a.rotate(-1)
        self._emit("ra")

    def rotate_b(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._require(self.b, "b")
        self.b.rotate(-1)
        self._emit("rb")

    def reverse_rotate_a(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._require(self.a, "a")
        self.a.rotate(1)
        self._emit("rra")

    def reverse_rotate_b(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._require(self.b, "b")
        self.b.rotate(1)
        # Reported under the same name as reverse_rotate_a.
        self._emit("rra")