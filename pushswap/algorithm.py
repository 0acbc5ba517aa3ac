"""Cost-driven insertion sort of stack a using stack b."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from pushswap.stacks import Move, Stacks, is_sorted


@dataclass(frozen=True)
class Rotation:
    """Signed rotation counts for a and b: positive rotates, negative reverse-rotates."""

    a: int
    b: int

    def moves(self) -> int:
        """Number of moves needed, sharing rr/rrr when both go the same way."""
        if self.a <= 0 and self.b <= 0:
            return max(-self.a, -self.b)
        if self.a >= 0 and self.b >= 0:
            return max(self.a, self.b)
        return abs(self.a) + abs(self.b)


def min_abs(a: int, b: int) -> int:
    """Return the argument of smaller magnitude, the first one on a tie."""
    return a if abs(a) <= abs(b) else b


def _index_of(stack: Sequence[int], value: int) -> int:
    """1-based position of value in stack, or -1."""
    for position, item in enumerate(stack, start=1):
        if item == value:
            return position
    return -1


def index_to_put(b: Sequence[int], value: int) -> int:
    """1-based position in b of the element that must be on top before pushing value."""
    if value > max(b) or value < min(b):
        return _index_of(b, max(b))
    diff = value - b[0]
    index = 1
    for position, item in enumerate(b, start=1):
        gap = value - item
        if gap > 0 and (diff < 0 or gap < diff):
            diff = gap
            index = position
    return index


def index_to_pa(a: Sequence[int], value: int) -> int:
    """1-based position in a of the element that must be on top before value comes back."""
    if value > max(a) or value < min(a):
        return _index_of(a, min(a))
    diff = a[0] - value
    index = 1
    for position, item in enumerate(a, start=1):
        gap = item - value
        if gap > 0 and (diff < 0 or gap < diff):
            diff = gap
            index = position
    return index


def rotations(stacks: Stacks, ia: int, ib: int) -> Rotation:
    """Cheapest rotations bringing position ia of a and ib of b to the top together."""
    rev_a = -((len(stacks.a) - ia) + 1)
    rev_b = -((len(stacks.b) - ib) + 1)
    best = Rotation(min_abs(ia - 1, rev_a), min_abs(ib - 1, rev_b))
    count = best.moves()
    if count > max(ia - 1, ib - 1):
        best = Rotation(ia - 1, ib - 1)
        count = best.moves()
    if count > max(abs(rev_a), abs(rev_b)):
        best = Rotation(rev_a, rev_b)
    return best


def index_to_push(stacks: Stacks) -> int:
    """1-based position in a of the element cheapest to move onto b."""
    index = 1
    best = rotations(stacks, 1, index_to_put(stacks.b, stacks.a[0]))
    for position, value in enumerate(stacks.a[1:], start=2):
        candidate = rotations(stacks, position, index_to_put(stacks.b, value))
        if best.moves() > candidate.moves():
            index = position
            best = candidate
    return index


def cost(a: Sequence[int], index: int) -> int:
    """Signed rotation count bringing position index of a to the top."""
    return min_abs(-((len(a) - index) + 1), index - 1)


def do_moves(stacks: Stacks, rotation: Rotation) -> None:
    """Apply the rotations, combining them into rr or rrr where possible."""
    ra, rb = rotation.a, rotation.b
    while ra < 0 and rb < 0:
        stacks.apply(Move.RRR)
        ra += 1
        rb += 1
    while ra > 0 and rb > 0:
        stacks.apply(Move.RR)
        ra -= 1
        rb -= 1
    for _ in range(max(ra, 0)):
        stacks.apply(Move.RA)
    for _ in range(max(-ra, 0)):
        stacks.apply(Move.RRA)
    for _ in range(max(-rb, 0)):
        stacks.apply(Move.RRB)
    for _ in range(max(rb, 0)):
        stacks.apply(Move.RB)


def sort_three(stacks: Stacks) -> None:
    """Sort the three values of a."""
    a, b, c = stacks.a[:3]
    if a > b and b < c and c < a:
        stacks.apply(Move.RRA)
    a, b, c = stacks.a[:3]
    if (a > b and b < c and c > a) or (a > b and b > c and c < a):
        stacks.apply(Move.SA)
    a, b, c = stacks.a[:3]
    if a < b and b > c:
        stacks.apply(Move.RRA)
        if a < c:
            stacks.apply(Move.SA)


def first_part(stacks: Stacks) -> None:
    """Move all but three values to b in descending order, then finish the sort."""
    stacks.apply(Move.PB)
    stacks.apply(Move.PB)
    while len(stacks.a) > 3:
        to_push = index_to_push(stacks)
        to_put = index_to_put(stacks.b, stacks.a[to_push - 1])
        do_moves(stacks, rotations(stacks, to_push, to_put))
        stacks.apply(Move.PB)
    second_part(stacks)


def second_part(stacks: Stacks) -> None:
    """Sort the three values of a, bring b back in place and put the minimum on top."""
    if len(stacks.a) == 3:
        sort_three(stacks)
    while stacks.b:
        target = index_to_pa(stacks.a, stacks.b[0])
        do_moves(stacks, Rotation(cost(stacks.a, target), 0))
        stacks.apply(Move.PA)
    smallest = _index_of(stacks.a, min(stacks.a))
    do_moves(stacks, Rotation(cost(stacks.a, smallest), 0))


def special_cases(stacks: Stacks) -> None:
    """Sort a stack a of two, three or four values."""
    size = len(stacks.a)
    if size == 2:
        stacks.apply(Move.SA)
    elif size == 4:
        stacks.apply(Move.PB)
        second_part(stacks)
    elif size == 3:
        sort_three(stacks)


def solve(values: Iterable[int]) -> list[Move]:
    """Return the moves that sort values, given top first."""
    stacks = Stacks(values)
    if is_sorted(stacks.a):
        return []
    if len(stacks.a) <= 4:
        special_cases(stacks)
    else:
        first_part(stacks)
    return list(stacks.history)