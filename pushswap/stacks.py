"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


@dataclass
class Stack:
    """A stack of integers whose top is the first element of ``values``."""

    id: str
    values: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)

    def is_sorted(self) -> bool:
        """Return True if the values ascend from top to bottom."""
        return all(x <= y for x, y in zip(self.values, self.values[1:]))


def _swap_top(stack: Stack) -> bool:
    if len(stack) < 2:
        return False
    values = stack.values
    values[0], values[1] = values[1], values[0]
    return True


def _rotate(stack: Stack) -> None:
    if stack.values:
        stack.values.append(stack.values.pop(0))


def _reverse_rotate(stack: Stack) -> None:
    if stack.values:
        stack.values.insert(0, stack.values.pop())


class StackPair:
    """Stacks ``a`` and ``b`` together with a record of the operations applied.

    Every operation that takes effect is appended to ``history`` and passed to
    the optional ``on_operation`` callback.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        on_operation: Callable[[str], None] | None = None,
    ) -> None:
        self.a = Stack("a", list(values))
        self.b = Stack("b")
        self.history: list[str] = []
        self._on_operation = on_operation

    def _emit(self, name: str) -> None:
        self.history.append(name)
        if self._on_operation is not None:
            self._on_operation(name)

    def stack(self, stack_id: str) -> Stack:
        """Return the stack named ``stack_id`` ("a" or "b")."""
        if stack_id == self.a.id:
            return self.a
        if stack_id == self.b.id:
            return self.b
        raise ValueError(f"unknown stack: {stack_id!r}")

    def swap(self, stack_id: str) -> None:
        """Swap the two top elements of one stack; nothing happens below two."""
        stack = self.stack(stack_id)
        if _swap_top(stack):
            self._emit(f"s{stack.id}")

    def swap_both(self) -> None:
        _swap_top(self.a)
        _swap_top(self.b)
        self._emit("ss")

    def push(self, to_id: str) -> None:
        """Move the top of the other stack onto ``to_id``; nothing if it is empty."""
        target = self.stack(to_id)
        source = self.b if target is self.a else self.a
        if not source.values:
            return
        target.values.insert(0, source.values.pop(0))
        self._emit(f"p{target.id}")

    def rotate(self, stack_id: str) -> None:
        """Move the top element of one stack to its bottom."""
        stack = self.stack(stack_id)
        _rotate(stack)
        self._emit(f"r{stack.id}")

    def rotate_both(self) -> None:
        _rotate(self.a)
        _rotate(self.b)
        self._emit("rr")

    def reverse_rotate(self, stack_id: str) -> None:
        """Move the bottom element of one stack to its top."""
        stack = self.stack(stack_id)
        _reverse_rotate(stack)
        self._emit(f"rr{stack.id}")

    def reverse_rotate_both(self) -> None:
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit("rrr")

    def apply(self, op: str) -> None:
        """Apply an operation given by its name, such as "pb" or "rra"."""
        actions: dict[str, Callable[[], None]] = {
            "sa": lambda: self.swap("a"),
            "sb": lambda: self.swap("b"),
            "ss": self.swap_both,
            "pa": lambda: self.push("a"),
            "pb": lambda: self.push("b"),
            "ra": lambda: self.rotate("a"),
            "rb": lambda: self.rotate("b"),
            "rr": self.rotate_both,
            "rra": lambda: self.reverse_rotate("a"),
            "rrb": lambda: self.reverse_rotate("b"),
            "rrr": self.reverse_rotate_both,
        }
        try:
            action = actions[op]
        except KeyError:
            raise ValueError(f"unknown operation: {op!r}") from None
        action()