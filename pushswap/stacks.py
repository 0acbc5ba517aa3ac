"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

import enum
from typing import Callable, Iterable


class Move(str, enum.Enum):
    """The eleven moves allowed on the stacks."""

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


def _swap(stack: list[int]) -> None:
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def _push(source: list[int], target: list[int]) -> None:
    if source:
        target.insert(0, source.pop(0))


def _rotate(stack: list[int]) -> None:
    if len(stack) > 1:
        stack.append(stack.pop(0))


def _rev_rotate(stack: list[int]) -> None:
    if len(stack) > 1:
        stack.insert(0, stack.pop())


def is_sorted(values: Iterable[int]) -> bool:
    """True when no value is smaller than one before it."""
    items = list(values)
    return all(x <= y for x, y in zip(items, items[1:]))


class Stacks:
    """Stacks a and b, top at index 0, with a record of the moves applied."""

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: list[int] = list(a)
        self.b: list[int] = list(b)
        self.history: list[Move] = []
        self._actions: dict[Move, Callable[[], None]] = {
            Move.SA: lambda: _swap(self.a),
            Move.SB: lambda: _swap(self.b),
            Move.SS: lambda: (_swap(self.a), _swap(self.b)) and None,
            Move.PA: lambda: _push(self.b, self.a),
            Move.PB: lambda: _push(self.a, self.b),
            Move.RA: lambda: _rotate(self.a),
            Move.RB: lambda: _rotate(self.b),
            Move.RR: lambda: (_rotate(self.a), _rotate(self.b)) and None,
            Move.RRA: lambda: _rev_rotate(self.a),
            Move.RRB: lambda: _rev_rotate(self.b),
            Move.RRR: lambda: (_rev_rotate(self.a), _rev_rotate(self.b)) and None,
        }

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def apply(self, move: Move | str) -> Move:
        """Apply one move, given as a Move or its name, and return it.

        Raises ValueError for an unknown move name.
        """
        parsed = Move(move)
        self._actions[parsed]()
        self.history.append(parsed)
        return parsed

    def run(self, moves: Iterable[Move | str]) -> None:
        """Apply the moves in order."""
        for move in moves:
            self.apply(move)

    def is_solved(self) -> bool:
        """True when b is empty and a is sorted."""
        return not self.b and is_sorted(self.a)