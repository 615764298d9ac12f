import itertools
import random
from collections import Counter

import pytest

from pushswap.sorter import Algorithm, first_sort, main, solve, sort
from pushswap.stacks import Action, Stacks


def _replay(values, actions):
    stacks = Stacks(values)
    for action in actions:
        stacks.apply(action)
    return stacks


def _shuffled(n, seed):
    values = list(range(n))
    random.Random(seed).shuffle(values)
    return values


def test_first_sort_is_ordered_permutation():
    values = [5, -3, 12, 0, 7, -100]
    result = first_sort(values)
    assert Counter(result) == Counter(values)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_sorted_input_needs_no_action():
    assert solve([1, 2, 3, 4, 5, 6]) == []


def test_two_values():
    assert solve([2, 1]) == [Action.SA]


@pytest.mark.parametrize("perm", list(itertools.permutations([10, 20, 30])))
def test_three_values_all_permutations(perm):
    actions = solve(perm)
    stacks = _replay(perm, actions)
    assert stacks.list_a() == sorted(perm)
    assert stacks.list_b() == []
    assert len(actions) <= 2


@pytest.mark.parametrize("perm", list(itertools.permutations([4, 1, 3, 2])))
def test_four_values_all_permutations(perm):
    stacks = _replay(perm, solve(perm))
    assert stacks.list_a() == sorted(perm)
    assert stacks.list_b() == []


@pytest.mark.parametrize("perm", list(itertools.permutations(range(5))))
def test_five_values_all_permutations(perm):
    actions = solve(perm)
    stacks = _replay(perm, actions)
    assert stacks.list_a() == sorted(perm)
    assert stacks.list_b() == []
    assert len(actions) <= 12


@pytest.mark.parametrize("n", [6, 10, 20, 50, 109, 110, 150, 399, 400, 500])
def test_default_sorts_shuffled(n):
    values = _shuffled(n, n)
    stacks = _replay(values, solve(values))
    assert stacks.list_a() == sorted(values)
    assert stacks.list_b() == []


@pytest.mark.parametrize("n", [8, 40, 60, 150])
@pytest.mark.parametrize("scale, offset", [(1000, -37000), (-7, 0), (3, 5000)])
def test_default_sorts_spread_values(n, scale, offset):
    values = [v * scale + offset for v in _shuffled(n, n + scale)]
    stacks = _replay(values, solve(values))
    assert stacks.list_a() == sorted(values)
    assert stacks.list_b() == []


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("n", [7, 30, 100])
def test_each_algorithm_sorts_indices(algorithm, n):
    values = _shuffled(n, 3 * n + int(algorithm))
    stacks = Stacks(values)
    sort(stacks, list(range(n)), algorithm)
    assert stacks.list_a() == list(range(n))
    assert stacks.list_b() == []


def test_sort_records_actions_that_replay():
    values = _shuffled(40, 11)
    stacks = Stacks(values)
    sort(stacks, list(range(40)), Algorithm.BBEG)
    assert _replay(values, stacks.actions).list_a() == list(range(40))


def test_solve_rejects_duplicates():
    with pytest.raises(ValueError):
        solve([3, 1, 3])


def test_main_prints_actions(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_main_single_argument_list(capsys):
    assert main(["3 1 2"]) == 0
    lines = capsys.readouterr().out.split()
    assert _replay([3, 1, 2], lines).list_a() == [1, 2, 3]


def test_main_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args", [["1", "a"], ["1", "1"], ["2147483648", "1"], ["1 x 2"]]
)
def test_main_errors(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""