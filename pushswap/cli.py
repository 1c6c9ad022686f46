"""The command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parser import InputError, parse_args
from pushswap.solver import push_swap
from pushswap.stacks import StackPair


def _report_error() -> None:
    sys.stderr.write("Error\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        _report_error()
        return 0
    try:
        values = parse_args(args)
    except InputError:
        _report_error()
        return 0
    pair = StackPair(values, on_operation=print)
    push_swap(pair)
    return 0


if __name__ == "__main__":
    sys.exit(main())