import itertools

import pytest

from pushswap.cli import format_state, main
from pushswap.stacks import Stacks


def _state_section(output):
    """The list of stack a numbers printed in the final state."""
    lines = output.splitlines()
    start = lines.index("--list_a--")
    end = lines.index("--list_b--")
    return [int(line) for line in lines[start + 2:end]]


def test_format_state_matches_layout():
    stacks = Stacks([2, 1])
    assert format_state(stacks) == (
        "----------\n--list_a--\na_qty = 2\n2\n1\n--list_b--\nb_qty = 0\n----------\n"
    )


def test_format_state_lists_stack_b():
    stacks = Stacks([1, 2, 3])
    stacks.b.extend([5, 4])
    lines = format_state(stacks).splitlines()
    assert lines[lines.index("--list_b--") + 1] == "b_qty = 2"
    assert lines[-3:-1] == ["5", "4"]


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("args", [["1", "x"], ["1", "1"], ["2147483648"], ["1 2 2"], ["   "]])
def test_invalid_input_reports_error(args, capsys):
    assert main(args) == 0
    assert capsys.readouterr().out == "error\n"


def test_sorted_input_prints_state_only(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == format_state(Stacks([1, 2, 3]))


def test_two_numbers_are_swapped(capsys):
    main(["2", "1"])
    out = capsys.readouterr().out
    assert out == "sa\n" + format_state(Stacks([1, 2]))


@pytest.mark.parametrize("perm", list(itertools.permutations(["1", "2", "3"])))
def test_three_numbers_end_sorted(perm, capsys):
    main(list(perm))
    assert _state_section(capsys.readouterr().out) == [1, 2, 3]


def test_values_are_replaced_by_ranks(capsys):
    main(["-5", "100", "7"])
    assert _state_section(capsys.readouterr().out) == [1, 2, 3]


def test_single_argument_is_split(capsys):
    main(["3 2 1"])
    out = capsys.readouterr().out
    assert out.endswith(format_state(Stacks([1, 2, 3])))