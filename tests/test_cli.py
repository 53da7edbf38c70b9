import io

import pytest

from judgepractice.basics import add, cat_art, hello_world, sum_pairs
from judgepractice.cli import main, solve
from judgepractice.recursion import cantor, fill_box, star_pattern
from judgepractice.structures import josephus, run_stack_commands


def test_hello_world():
    assert solve("2557", "") == "Hello World!"


def test_cat_art_matches_module():
    assert solve("10171", "") == cat_art()


def test_problem_number_may_be_int():
    assert solve(2557, "") == hello_world()


def test_sum_until_end_of_input_ignores_unpaired_token():
    lines = solve("10951", "1 1\n2 3\n4").splitlines()
    assert lines == [str(v) for v in sum_pairs([(1, 1), (2, 3)])]


def test_sum_until_zeros_stops():
    lines = solve("10952", "1 2\n0 0\n5 5\n").splitlines()
    assert lines == [str(add(1, 2))]


def test_star_pattern_output():
    assert solve("2447", "9\n").splitlines() == star_pattern(9)


def test_cantor_reads_until_end():
    output = solve("4779", "0\n1\n2\n")
    assert output.splitlines() == [cantor(0), cantor(1), cantor(2)]


def test_fill_box_output():
    text = "4 4 8\n3\n0 10\n1 10\n2 1\n"
    expected = fill_box(4, 4, 8, [(0, 10), (1, 10), (2, 1)])
    assert solve("1493", text) == str(expected)


def test_fill_box_failure_prints_minus_one():
    assert solve("1493", "1 1 1\n1\n1 5\n") == "-1"


def test_impossible_stack_sequence_prints_no():
    assert solve("1874", "3\n3\n1\n2\n") == "NO\n"


def test_josephus_format():
    output = solve("1158", "7 3")
    assert output.startswith("<") and output.endswith(">")
    assert [int(v) for v in output[1:-1].split(", ")] == josephus(7, 3)


def test_stack_commands():
    output = solve("10828", "3\npush 1\ntop\npop\n")
    expected = run_stack_commands(["push 1", "top", "pop"])
    assert output.splitlines() == [str(v) for v in expected]


def test_division_has_one_hundred_decimals():
    output = solve("1008", "1 3")
    whole, fraction = output.split(".")
    assert whole == "0"
    assert len(fraction) == 100
    assert fraction.startswith("3333")


def test_unknown_problem():
    with pytest.raises(ValueError):
        solve("99999", "")


def test_truncated_input():
    with pytest.raises(ValueError):
        solve("1000", "1")


def test_non_integer_input():
    with pytest.raises(ValueError):
        solve("1000", "a b")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("2 3\n")
    assert main(["1000", str(path)]) == 0
    assert capsys.readouterr().out == str(add(2, 3))


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 9\n"))
    assert main(["1000"]) == 0
    assert capsys.readouterr().out == str(add(5, 9))


def test_main_unknown_problem_exits():
    with pytest.raises(SystemExit) as info:
        main(["99999"])
    assert info.value.code == 2


def test_main_bad_input_returns_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1"))
    assert main(["1000"]) == 1
    assert "end of input" in capsys.readouterr().err