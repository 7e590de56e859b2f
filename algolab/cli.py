"""Command-line front end that runs each algorithm on typed or random input."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Iterator, Optional, Sequence, TextIO, TypeVar

from algolab.arrays import elementwise_product, is_unique, largest, linear_search
from algolab.factorial import factorial_iterative, factorial_recursive
from algolab.gcd import gcd_consecutive, gcd_euclid, gcd_prime_factors
from algolab.graphs import INF, floyd, format_closure, format_distances, warshall
from algolab.sorting import insertion_sort, merge_sort, quick_sort, selection_sort
from algolab.text import find_pattern
from algolab.timing import timed

T = TypeVar("T")

MAX_MATRIX_SIZE = 100
MAX_LARGEST_SIZE = 1000
MAX_ARRAY_SIZE = 10000
MAX_WARSHALL_VERTICES = 10
MAX_FLOYD_NODES = 100

_GCD_METHODS = {
    "euclid": gcd_euclid,
    "consecutive": gcd_consecutive,
    "prime": gcd_prime_factors,
}

_SORT_METHODS = {
    "selection": selection_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
}


class _InputError(Exception):
    """Raised when the typed input cannot be read as expected."""


class _Input:
    """Reads whitespace-separated integers from a text stream, as they are needed."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = (
            token for line in stream for token in line.split()
        )

    def integer(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise _InputError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise _InputError(f"expected an integer, got {token!r}") from None


def random_values(count: int, generator: Callable[[], T]) -> list[T]:
    """Return ``count`` values, each produced by calling ``generator``."""
    return [generator() for _ in range(count)]


def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _row(values: Sequence[int], separator: str) -> str:
    return "".join(f"{value}{separator}" for value in values)


def _run_gcd(args: argparse.Namespace, reader: _Input, rng: random.Random, out: TextIO) -> int:
    _prompt(out, "Enter two numbers: ")
    first, second = reader.integer(), reader.integer()
    result = timed(_GCD_METHODS[args.method], first, second)
    out.write(f"The GCD of {first} and {second} is: {result.value}\n")
    out.write(f"Time taken is {result.milliseconds():f} ms\n")
    return 0


def _run_matrix(args: argparse.Namespace, reader: _Input, rng: random.Random, out: TextIO) -> int:
    _prompt(out, "Enter size N for n x n matrices: ")
    size = reader.integer()
    if size > MAX_MATRIX_SIZE:
        out.write(f"Max allowed size is {MAX_MATRIX_SIZE}\n")
        return 1
    a: list[list[int]] = []
    b: list[list[int]] = []
    for _ in range(max(size, 0)):
        pairs = random_values(size, lambda: (rng.randrange(10), rng.randrange(10)))
        a.append([x for x, _ in pairs])
        b.append([y for _, y in pairs])
    result = timed(elementwise_product, a, b)
    for name, matrix in (("A", a), ("B", b), ("C", result.value)):
        out.write(f"\nMatrix {name}:")
        for row in matrix:
            out.write(_row(row, " ") + "\n")
    out.write(f"\n Time taken to do multiplication: {result.milliseconds():f} ms\n")
    return 0


def _read_size(reader: _Input, out: TextIO, prompt: str, limit: int) -> Optional[int]:
    _prompt(out, prompt)
    size = reader.integer()
    if size > limit or size <= 0:
        out.write(f"\nSize must be between 1 to {limit}\n")
        return None
    return size


def _run_largest(args: argparse.Namespace, reader: _Input, rng: random.Random, out: TextIO) -> int:
    size = _read_size(reader, out, "Enter size of array: ", MAX_LARGEST_SIZE)
    if size is None:
        return 1
    values = random_values(size, lambda: rng.randrange(10) * 18)
    result = timed(largest, values)
    out.write(_row(values, "\t"))
    out.write(f"\nLargest number in Array is: {result.value} \n")
    out.write(f"\nTime taken to find is: {result.milliseconds():f} ms \n")
    return 0


def _spread_value(rng: random.Random) -> int:
    return rng.randrange(10) * rng.randrange(180)


def _run_unique(args: argparse.Namespace, reader: _Input, rng: random.Random, out: TextIO) -> int:
    size = _read_size(reader, out, "\nEnter size of array: ", MAX_ARRAY_SIZE)
    if size is None:
        return 1
    values = random_values(size, lambda: _spread_value(rng))
    result = timed(is_unique, values)
    out.write(_row(values, "\t"))
    out.write("\nArray is unique\n" if result.value else "\nArray is not unique \n")
    out.write(f"\nTime taken to find is: {result.milliseconds():f} ms \n")
    return 0


def _run_search(args: argparse.Namespace, reader: _Input, rng: random.Random, out: TextIO) -> int:
    size = _read_size(reader, out, "Enter number of elements: ", MAX_ARRAY_SIZE)
    if size is None:
        return 1
    values = random_values(size, lambda: _spread_value(rng))
    if args.show:
        out.write(_row(values, "\t") + "\n")
    _prompt(out, "Enter element to search: ")
    key = reader.integer()
    result = timed(linear_search, values, key)
    if result.value is None:
        out.write("Element not found\n")
    else:
        out.write(f"Element found at index {result.value}\n")
    out.write(f"Time taken: {result.seconds:f} seconds\n")
    return 0


def _run_match(args: argparse.Namespace, reader: _Input, rng: random.Random, out: TextIO) -> int:
    for index in find_pattern(args.text, args.pattern):
        out.write(f"Pattern found at index {index}\n")
    return 0


def _run_factorial(args: argparse.Namespace, reader: _Input, rng: random.Random, out: TextIO) -> int:
    _prompt(out, "Enter a value for n: ")
    n = reader.integer()
    try:
        recursive = timed(factorial_recursive, n)
    except RecursionError:
        raise _InputError(f"n = {n} is too large for the recursive factorial") from None
    iterative = timed(factorial_iterative, n)
    out.write(f"\nn = {n}\n")
    out.write(f"Recursive factorial: {recursive.value}\n")
    out.write(f"Recursive time: {recursive.seconds:.6f} seconds\n")
    out.write(f"Non-recursive factorial: {iterative.value}\n")
    out.write(f"Non-recursive time: {iterative.seconds:.6f} seconds\n")
    return 0


def _run_sort(args: argparse.Namespace, reader: _Input, rng: random.Random, out: TextIO) -> int:
    _prompt(out, "Enter the number of random numbers to generate: ")
    count = reader.integer()
    if count < 0:
        raise _InputError("the number of values must not be negative")
    values = random_values(count, lambda: rng.randrange(100))
    result = timed(_SORT_METHODS[args.method], values)
    out.write("Sorted array: " + _row(result.value, " ") + "\n")
    out.write(f"Time taken to sort the array: {result.seconds:f} seconds\n")
    return 0


def _read_matrix(reader: _Input, size: int) -> list[list[int]]:
    return [[reader.integer() for _ in range(size)] for _ in range(size)]


def _check_vertices(size: int, limit: int) -> None:
    if size < 0 or size > limit:
        raise _InputError(f"the number of vertices must be between 0 and {limit}")


def _run_warshall(args: argparse.Namespace, reader: _Input, rng: random.Random, out: TextIO) -> int:
    _prompt(out, "Enter the number of vertices: ")
    size = reader.integer()
    _check_vertices(size, MAX_WARSHALL_VERTICES)
    out.write("Enter the adjacency matrix:\n")
    adjacency = _read_matrix(reader, size)
    out.write(format_closure(warshall(adjacency)))
    return 0


def _run_floyd(args: argparse.Namespace, reader: _Input, rng: random.Random, out: TextIO) -> int:
    _prompt(out, "Enter the number of nodes in the graph: ")
    size = reader.integer()
    _check_vertices(size, MAX_FLOYD_NODES)
    out.write(f"Enter the adjacency matrix (use {INF} for INF/no edge):\n")
    distances = []
    for i in range(size):
        row = []
        for j in range(size):
            _prompt(out, f"Distance from node {i} to node {j}: ")
            row.append(reader.integer())
        distances.append(row)
    out.write("\nShortest distances between every pair of nodes:\n")
    out.write(format_distances(floyd(distances)))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algolab", description="Run classic algorithms and time them."
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the random input values"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    gcd = commands.add_parser("gcd", help="greatest common divisor of two numbers")
    gcd.add_argument("--method", choices=sorted(_GCD_METHODS), default="euclid")
    gcd.set_defaults(handler=_run_gcd)

    commands.add_parser(
        "matrix", help="entry-by-entry product of two random matrices"
    ).set_defaults(handler=_run_matrix)
    commands.add_parser(
        "largest", help="largest value of a random array"
    ).set_defaults(handler=_run_largest)
    commands.add_parser(
        "unique", help="whether a random array has no repeated values"
    ).set_defaults(handler=_run_unique)

    search = commands.add_parser("search", help="linear search in a random array")
    search.add_argument(
        "--show", action="store_true", help="print the array before asking for the key"
    )
    search.set_defaults(handler=_run_search)

    match = commands.add_parser("match", help="brute-force string matching")
    match.add_argument("text", nargs="?", default="Hello world")
    match.add_argument("pattern", nargs="?", default="world")
    match.set_defaults(handler=_run_match)

    commands.add_parser(
        "factorial", help="factorial computed recursively and iteratively"
    ).set_defaults(handler=_run_factorial)

    sort = commands.add_parser("sort", help="sort random values")
    sort.add_argument("--method", choices=sorted(_SORT_METHODS), default="insertion")
    sort.set_defaults(handler=_run_sort)

    commands.add_parser(
        "warshall", help="transitive closure of a typed adjacency matrix"
    ).set_defaults(handler=_run_warshall)
    commands.add_parser(
        "floyd", help="all-pairs shortest paths of a typed distance matrix"
    ).set_defaults(handler=_run_floyd)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one algorithm chosen on the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    rng = random.Random(args.seed)
    reader = _Input(sys.stdin)
    try:
        return args.handler(args, reader, rng, sys.stdout)
    except _InputError as exc:
        sys.stdout.write("\n")
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())