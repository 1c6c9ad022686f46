import pytest

from pushswap.parser import (
    INT_MAX,
    INT_MIN,
    InputError,
    contains_duplicates,
    is_number,
    parse_args,
)


@pytest.mark.parametrize("text", ["0", "42", "+7", "-13", "007"])
def test_is_number_accepts(text):
    assert is_number(text) is True


@pytest.mark.parametrize("text", ["", "+", "-", "1a", " 1", "1 ", "--1", "+-2", "1.5", "٣"])
def test_is_number_rejects(text):
    assert is_number(text) is False


def test_contains_duplicates():
    assert contains_duplicates([1, 2, 1]) is True
    assert contains_duplicates([1, 2, 3]) is False
    assert contains_duplicates([]) is False


def test_parse_args_converts_in_order():
    assert parse_args(["3", "-1", "+2"]) == [3, -1, 2]


def test_parse_args_empty():
    assert parse_args([]) == []


def test_parse_args_accepts_int_limits():
    assert parse_args(["2147483647", "-2147483648"]) == [INT_MAX, INT_MIN]


@pytest.mark.parametrize("arg", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_args_rejects_out_of_range(arg):
    with pytest.raises(InputError):
        parse_args(["1", arg])


@pytest.mark.parametrize("args", [["1", "x"], ["1", ""], ["-"], ["4", "5 6"]])
def test_parse_args_rejects_non_numbers(args):
    with pytest.raises(InputError):
        parse_args(args)


@pytest.mark.parametrize("args", [["1", "+1"], ["-0", "0"], ["5", "3", "05"]])
def test_parse_args_rejects_duplicates(args):
    with pytest.raises(InputError):
        parse_args(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["a"])