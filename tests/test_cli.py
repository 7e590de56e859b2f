import io
import itertools
import re

import pytest

from algolab.arrays import elementwise_product, is_unique, linear_search
from algolab.cli import main, random_values
from algolab.factorial import factorial_iterative
from algolab.gcd import gcd_euclid
from algolab.graphs import floyd, format_closure, format_distances, warshall


def run(monkeypatch, capsys, argv, stdin=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def parse_matrix(segment):
    return [[int(x) for x in line.split()] for line in segment.strip("\n").splitlines()]


def test_random_values_calls_generator_count_times():
    counter = itertools.count()
    assert random_values(4, counter.__next__) == [0, 1, 2, 3]
    assert next(counter) == 4


def test_random_values_zero_count_is_empty():
    assert random_values(0, lambda: 1 / 0) == []


def test_gcd_reports_result_and_time(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["gcd"], "12 18\n")
    assert status == 0
    assert f"The GCD of 12 and 18 is: {gcd_euclid(12, 18)}\n" in out
    assert re.search(r"Time taken is \d+\.\d{6} ms\n", out)


@pytest.mark.parametrize("method", ["euclid", "consecutive", "prime"])
def test_gcd_methods_agree(monkeypatch, capsys, method):
    _, out, _ = run(monkeypatch, capsys, ["gcd", "--method", method], "48 36")
    assert f"The GCD of 48 and 36 is: {gcd_euclid(48, 36)}\n" in out


def test_gcd_rejects_non_integer(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["gcd"], "12 abc")
    assert status == 1
    assert "expected an integer" in err


def test_gcd_rejects_missing_input(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["gcd"], "12")
    assert status == 1
    assert "unexpected end of input" in err


def test_matrix_size_limit(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["matrix"], "101")
    assert status == 1
    assert "Max allowed size is 100" in out


def test_matrix_product_matches_operands(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["--seed", "3", "matrix"], "4")
    assert status == 0
    a = parse_matrix(out.split("Matrix A:")[1].split("\nMatrix B:")[0])
    b = parse_matrix(out.split("Matrix B:")[1].split("\nMatrix C:")[0])
    c = parse_matrix(out.split("Matrix C:")[1].split("\n Time taken")[0])
    assert len(a) == 4 and all(len(row) == 4 for row in a)
    assert all(0 <= x <= 9 for row in a + b for x in row)
    assert c == elementwise_product(a, b)


def test_matrix_same_seed_same_matrices(monkeypatch, capsys):
    _, first, _ = run(monkeypatch, capsys, ["--seed", "7", "matrix"], "3")
    _, second, _ = run(monkeypatch, capsys, ["--seed", "7", "matrix"], "3")
    assert first.split("\n Time taken")[0] == second.split("\n Time taken")[0]


@pytest.mark.parametrize("size", ["0", "1001", "-3"])
def test_largest_size_limits(monkeypatch, capsys, size):
    status, out, _ = run(monkeypatch, capsys, ["largest"], size)
    assert status == 1
    assert "Size must be between 1 to 1000" in out


def test_largest_finds_maximum(monkeypatch, capsys):
    prompt = "Enter size of array: "
    status, out, _ = run(monkeypatch, capsys, ["--seed", "1", "largest"], "20")
    assert status == 0
    values = [int(x) for x in out[len(prompt):].split("\n")[0].split()]
    assert len(values) == 20
    assert all(v % 18 == 0 and 0 <= v <= 162 for v in values)
    assert f"Largest number in Array is: {max(values)} \n" in out


def test_unique_verdict_matches_values(monkeypatch, capsys):
    prompt = "\nEnter size of array: "
    status, out, _ = run(monkeypatch, capsys, ["--seed", "5", "unique"], "30")
    assert status == 0
    values = [int(x) for x in out[len(prompt):].split("\n")[0].split()]
    assert len(values) == 30
    expected = "Array is unique" if is_unique(values) else "Array is not unique"
    assert expected in out


def test_unique_size_limit(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["unique"], "10001")
    assert status == 1
    assert "Size must be between 1 to 10000" in out


def test_search_finds_shown_value(monkeypatch, capsys):
    argv = ["--seed", "2", "search", "--show"]
    _, out, _ = run(monkeypatch, capsys, argv, "10\n-1\n")
    line = out.split("Enter number of elements: ")[1].split("\n")[0]
    values = [int(x) for x in line.split()]
    key = values[6]
    status, out, _ = run(monkeypatch, capsys, argv, f"10\n{key}\n")
    assert status == 0
    assert f"Element found at index {linear_search(values, key)}\n" in out


def test_search_missing_key(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["search"], "5 -1")
    assert status == 0
    assert "Element not found\n" in out
    assert re.search(r"Time taken: \d+\.\d{6} seconds\n", out)


def test_match_default_example(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["match"])
    assert status == 0
    assert out == "Pattern found at index 6\n"


def test_match_reports_every_occurrence(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, ["match", "aaaa", "aa"])
    assert out.splitlines() == [f"Pattern found at index {i}" for i in (0, 1, 2)]


def test_factorial_both_methods(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["factorial"], "5")
    assert status == 0
    assert "\nn = 5\n" in out
    assert f"Recursive factorial: {factorial_iterative(5)}\n" in out
    assert f"Non-recursive factorial: {factorial_iterative(5)}\n" in out
    assert re.search(r"Recursive time: \d+\.\d{6} seconds", out)


def test_factorial_too_deep_is_reported(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["factorial"], "100000")
    assert status == 1
    assert "too large" in err


@pytest.mark.parametrize("method", ["selection", "insertion", "merge", "quick"])
def test_sort_output_is_sorted(monkeypatch, capsys, method):
    argv = ["--seed", "11", "sort", "--method", method]
    status, out, _ = run(monkeypatch, capsys, argv, "25")
    assert status == 0
    values = [int(x) for x in out.split("Sorted array: ")[1].split("\n")[0].split()]
    assert len(values) == 25
    assert values == sorted(values)
    assert all(0 <= v < 100 for v in values)


def test_sort_methods_agree_for_same_seed(monkeypatch, capsys):
    results = set()
    for method in ("selection", "insertion", "merge", "quick"):
        _, out, _ = run(monkeypatch, capsys, ["--seed", "4", "sort", "--method", method], "15")
        results.add(out.split("Time taken")[0])
    assert len(results) == 1


def test_sort_rejects_negative_count(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["sort"], "-2")
    assert status == 1
    assert "negative" in err


def test_warshall_prints_closure(monkeypatch, capsys):
    adjacency = [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
    status, out, _ = run(monkeypatch, capsys, ["warshall"], "3\n0 1 0\n0 0 1\n0 0 0\n")
    assert status == 0
    assert out.endswith(format_closure(warshall(adjacency)))


def test_warshall_vertex_limit(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["warshall"], "11")
    assert status == 1
    assert "between 0 and 10" in err


def test_floyd_prints_distances(monkeypatch, capsys):
    distances = [[0, 3, 99999], [99999, 0, 2], [1, 99999, 0]]
    text = "3\n" + "\n".join(" ".join(map(str, row)) for row in distances)
    status, out, _ = run(monkeypatch, capsys, ["floyd"], text)
    assert status == 0
    assert "Distance from node 2 to node 1: " in out
    heading = "\nShortest distances between every pair of nodes:\n"
    assert out.endswith(heading + format_distances(floyd(distances)))


def test_floyd_keeps_inf_for_unreachable(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, ["floyd"], "2\n0 99999\n99999 0\n")
    assert out.endswith("0 INF \nINF 0 \n")