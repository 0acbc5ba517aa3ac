import random

import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _run(capsys, args):
    code = main(args)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def _replay(values, out):
    stacks = Stacks(values)
    stacks.run(line for line in out.splitlines())
    return stacks


def test_no_arguments_prints_nothing(capsys):
    code, out, err = _run(capsys, [])
    assert (code, out, err) == (0, "", "")


@pytest.mark.parametrize(
    "args",
    [["abc"], ["1", "2", "1"], ["1 2 x"], ["2147483648"], ["-2147483649"], ["1-2"]],
)
def test_invalid_arguments_report_error(capsys, args):
    code, out, err = _run(capsys, args)
    assert code == 0
    assert out == ""
    assert err == "Error\n"


def test_sorted_input_prints_nothing(capsys):
    code, out, err = _run(capsys, ["1", "2", "3", "4", "5"])
    assert (out, err) == ("", "")


def test_empty_string_argument_prints_nothing(capsys):
    code, out, err = _run(capsys, [""])
    assert (out, err) == ("", "")


def test_two_values_swap(capsys):
    _, out, _ = _run(capsys, ["2", "1"])
    assert out == "sa\n"


def test_values_in_one_argument(capsys):
    _, out, _ = _run(capsys, ["3 1 2"])
    assert _replay([3, 1, 2], out).is_solved()


@pytest.mark.parametrize(
    "values",
    [[2, 1, 3], [3, 2, 1], [1, 3, 2], [2, 3, 1], [4, 3, 2, 1], [1, 4, 2, 3]],
)
def test_small_inputs_are_sorted(capsys, values):
    _, out, _ = _run(capsys, [str(v) for v in values])
    assert _replay(values, out).is_solved()


@pytest.mark.parametrize("size", [5, 10, 50])
def test_random_inputs_are_sorted(capsys, size):
    values = random.Random(size).sample(range(-1000, 1000), size)
    _, out, err = _run(capsys, [str(v) for v in values])
    assert err == ""
    assert _replay(values, out).is_solved()


def test_extreme_values_are_accepted(capsys):
    values = [2147483647, -2147483648, 0]
    _, out, err = _run(capsys, [str(v) for v in values])
    assert err == ""
    assert _replay(values, out).is_solved()