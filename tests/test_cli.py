import random

import pytest

from pushswap.cli import main
from pushswap.stacks import StackPair


def test_no_arguments_reports_error(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "x"], ["1", "1"], ["2147483648"], ["+"], ["1", ""]],
)
def test_bad_input_reports_error(capsys, args):
    assert main(args) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_three_descending(capsys):
    main(["3", "2", "1"])
    assert capsys.readouterr().out == "ra\nsa\n"


def test_output_sorts_input(capsys):
    rng = random.Random(7)
    values = rng.sample(range(-500, 500), 30)
    main([str(v) for v in values])
    operations = capsys.readouterr().out.splitlines()
    pair = StackPair(values)
    for op in operations:
        pair.apply(op)
    assert pair.a.values == sorted(values)
    assert pair.b.values == []