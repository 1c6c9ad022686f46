"""The sorting strategy: park everything on b, then insert back into a greedily."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.stacks import StackPair


def cost_to_top(length: int, index: int) -> int:
    """Return how many rotations bring ``index`` to the top of a stack of ``length``."""
    if index > length // 2:
        return length - index
    return index


def next_value_index(value: int, values: Sequence[int]) -> int:
    """Return the index of the smallest value above ``value``, or of the minimum."""
    greater = [(v, i) for i, v in enumerate(values) if v > value]
    if greater:
        return min(greater)[1]
    return values.index(min(values))


def _bring_to_top(pair: StackPair, stack_id: str, index: int) -> None:
    stack = pair.stack(stack_id)
    target = stack.values[index]
    if index > len(stack) // 2:
        move = pair.reverse_rotate
    else:
        move = pair.rotate
    while stack.values[0] != target:
        move(stack_id)


def tiny_sort(pair: StackPair) -> None:
    """Sort stack a when it holds at most three values."""
    values = pair.a.values
    if not values:
        return
    highest = values.index(max(values))
    if highest == 0:
        pair.rotate("a")
    elif highest == 1:
        pair.reverse_rotate("a")
    if len(values) >= 2 and values[0] > values[1]:
        pair.swap("a")


def b_to_a(pair: StackPair, a_index: int, b_index: int) -> None:
    """Rotate both stacks so the chosen elements are on top, then push b onto a."""
    _bring_to_top(pair, "a", a_index)
    _bring_to_top(pair, "b", b_index)
    pair.push("a")


def finish(pair: StackPair) -> None:
    """Rotate stack a until its smallest value is on top."""
    values = pair.a.values
    if not values:
        return
    _bring_to_top(pair, "a", values.index(min(values)))


def push_swap(pair: StackPair) -> list[str]:
    """Sort stack a in place and return the pair's operation history."""
    a, b = pair.a, pair.b
    if a.is_sorted():
        return pair.history
    while len(a) > 3:
        pair.push("b")
    tiny_sort(pair)
    if not b.values:
        return pair.history
    while b.values:
        b_index = 0
        a_index = next_value_index(b.values[0], a.values)
        cost = cost_to_top(len(a), a_index) + cost_to_top(len(b), 0)
        if cost == 0 and len(b) > 1:
            # A free move is skipped in favour of the next element of b.
            b_index = 1
            a_index = next_value_index(b.values[1], a.values)
        b_to_a(pair, a_index, b_index)
    finish(pair)
    return pair.history