"""The command that reads operations from standard input and checks the result."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from pushswap.parser import InputError, parse_args
from pushswap.stacks import StackPair


def operation_from_line(line: str) -> str | None:
    """Return the operation a line names, judged by its leading characters.

    The decoding is lenient: only the first few characters are examined, and a
    line that begins with "r" followed by something other than "a", "b" or "r"
    names no operation.
    """

    def at(index: int) -> str:
        return line[index] if index < len(line) else ""

    first, second = at(0), at(1)
    if first == "s":
        if second == "s":
            return "ss"
        return "sa" if second == "a" else "sb"
    if first == "r":
        if second in ("a", "b"):
            return "r" + second
        if second == "r":
            third = at(2)
            if third == "\n":
                return "rr"
            if third == "r":
                return "rrr"
            return "rra" if third == "a" else "rrb"
        return None
    return "pa" if second == "a" else "pb"


def execute_line(pair: StackPair, line: str) -> None:
    """Apply the operation named by ``line``, if any."""
    op = operation_from_line(line)
    if op is not None:
        pair.apply(op)


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream``, each with its newline if it has one."""
    yield from iter(stream.readline, "")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the operations from standard input and print OK if a ends up sorted."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if not args:
            raise InputError("no arguments")
        values = parse_args(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    pair = StackPair(values, on_operation=print)
    for line in read_lines(sys.stdin):
        execute_line(pair, line)
    print("OK" if pair.a.is_sorted() else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())