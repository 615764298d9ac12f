import io
import sys

import pytest

from pushswap.checker import Verdict, main, parse_action, run_instructions
from pushswap.sorter import solve
from pushswap.stacks import Action, Stacks


@pytest.mark.parametrize("action", list(Action))
def test_parse_action_round_trip(action):
    assert parse_action(f"{action}\n") is action


@pytest.mark.parametrize("line", ["sa", "foo\n", "rra \n", "\n", "SA\n", "sa\r\n"])
def test_parse_action_rejects(line):
    with pytest.raises(ValueError):
        parse_action(line)


def test_run_ok():
    assert run_instructions(Stacks([2, 1]), ["sa\n"]) is Verdict.OK


def test_run_ko_unsorted():
    assert run_instructions(Stacks([2, 1]), []) is Verdict.KO


def test_run_ko_when_b_not_empty():
    assert run_instructions(Stacks([1, 2, 3]), ["pb\n"]) is Verdict.KO


def test_run_unknown_stops():
    stacks = Stacks([2, 1])
    assert run_instructions(stacks, ["sa\n", "xx\n", "sa\n"]) is Verdict.ERROR_UNKNOWN
    assert stacks.list_a() == [1, 2]


def test_solution_is_accepted():
    values = [9, -4, 17, 0, 3, 12, -8, 5]
    lines = [f"{action}\n" for action in solve(values)]
    assert run_instructions(Stacks(values), lines) is Verdict.OK


def _run_main(monkeypatch, args, stdin):
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    return main(args)


def test_main_ok(monkeypatch, capsys):
    assert _run_main(monkeypatch, ["2", "1"], "sa\n") == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(monkeypatch, capsys):
    assert _run_main(monkeypatch, ["2", "1"], "") == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_unknown_instruction(monkeypatch, capsys):
    assert _run_main(monkeypatch, ["2", "1"], "sa\nnope\n") == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_missing_final_newline_is_error(monkeypatch, capsys):
    assert _run_main(monkeypatch, ["2", "1"], "sa") == 0
    assert capsys.readouterr().err == "Error\n"


def test_main_no_arguments(monkeypatch, capsys):
    assert _run_main(monkeypatch, [], "sa\n") == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("args", [["1", "b"], ["1", "1"], ["-2147483649", "3"]])
def test_main_bad_arguments(monkeypatch, capsys, args):
    assert _run_main(monkeypatch, args, "") == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_single_argument_skips_duplicate_check(monkeypatch, capsys):
    assert _run_main(monkeypatch, ["1 1 2"], "") == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_reports_push_from_empty_stack(monkeypatch, capsys):
    assert _run_main(monkeypatch, ["1", "2"], "pa\n") == 0
    assert capsys.readouterr().out == "pa\nOK\n"


def test_main_accepts_solver_output(monkeypatch, capsys):
    values = ["5", "3", "8", "1", "9", "2", "7"]
    stdin = "".join(f"{action}\n" for action in solve([int(v) for v in values]))
    assert _run_main(monkeypatch, values, stdin) == 0
    assert capsys.readouterr().out == "OK\n"