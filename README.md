# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. The package comes with two commands:

- `push-swap` prints, one per line, a sequence of instructions that sorts
  the numbers it is given into ascending order on stack `a`.
- `push-swap-checker` reads instructions from standard input and applies
  them to the numbers it is given. It echoes each instruction that takes
  effect, then prints `OK` if stack `a` ends up sorted and `KO` otherwise.

## Installation

```
pip install .
```

## Instructions

The first number given is the top of stack `a`; stack `b` starts empty.

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`  | swap the top two elements of `a` / `b` |
| `ss`        | `sa` and `sb` together |
| `pa`, `pb`  | move the top of `b` onto `a` / the top of `a` onto `b` |
| `ra`, `rb`  | rotate `a` / `b` up: the top element goes to the bottom |
| `rr`        | `ra` and `rb` together |
| `rra`, `rrb`| rotate `a` / `b` down: the bottom element goes to the top |
| `rrr`       | `rra` and `rrb` together |

A swap on a stack with fewer than two elements, or a push from an empty
stack, does nothing and is not recorded.

## Usage

```
$ push-swap 3 2 1
ra
sa
```

Feed the output to the checker with the same numbers:

```
$ push-swap 2 1 | push-swap-checker 2 1
ra
OK
```

Every argument must be a whole number in the 32-bit signed range, optionally
signed with `+` or `-`, and no number may appear twice. If an argument is
invalid, or none is given, the command writes `Error` to standard error and
prints nothing else (the exit status is still 0).

The checker reads instruction lines leniently: only the leading characters
of each line are looked at, so a misspelt line may still be taken as an
instruction, and a line starting with `r` that is not followed by `a`, `b`
or `r` is ignored. It does not reject unknown instructions.

## As a library

```python
from pushswap.parser import parse_args
from pushswap.solver import push_swap
from pushswap.stacks import StackPair

pair = StackPair(parse_args(["3", "1", "2"]))
operations = push_swap(pair)   # list of instruction names
print(operations, pair.a.values)
```

- `pushswap.parser.parse_args` validates the arguments and returns a list of
  integers, raising `pushswap.parser.InputError` (a `ValueError`) on bad
  input.
- `pushswap.stacks.StackPair` holds stacks `a` and `b`, applies instructions
  by name through `apply`, records them in `history`, and calls an optional
  `on_operation` callback for each one.
- `pushswap.solver.push_swap` sorts stack `a` of a pair in place and returns
  the pair's history.
- `pushswap.checker.operation_from_line` and `execute_line` decode and apply
  one instruction line.

## Running the tests

```
pip install .[test]
pytest
```