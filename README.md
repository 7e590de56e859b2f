# algolab

Classic algorithms from an introductory algorithms course. Each one is a
plain Python function, and each can be run from the command line on typed
or random input with a report of the processor time it took.

## Installation

```
pip install .
```

## Library use

```python
from algolab.gcd import gcd_euclid, gcd_consecutive, gcd_prime_factors
from algolab.arrays import elementwise_product, largest, is_unique, linear_search
from algolab.text import find_pattern
from algolab.factorial import factorial_iterative, factorial_recursive
from algolab.sorting import selection_sort, insertion_sort, merge_sort, quick_sort
from algolab.graphs import INF, warshall, floyd, format_closure, format_distances
from algolab.timing import timed

gcd_euclid(48, 18)                       # 6
find_pattern("Hello world", "world")     # [6]
merge_sort([64, 25, 12, 22, 11])         # [11, 12, 22, 25, 64]

closure = warshall([[0, 1, 0], [0, 0, 1], [0, 0, 0]])
print(format_closure(closure))

result = timed(quick_sort, [5, 3, 1])
print(result.value, result.seconds, result.milliseconds())
```

### Modules

- `algolab.gcd`
  - `gcd_euclid(a, b)`: Euclid's algorithm. The remainder takes the sign of
    the dividend, so negative operands can give a negative result.
  - `gcd_consecutive(a, b)`: tries every candidate from the smaller number
    down to 1; returns 1 when there is no positive candidate (for example
    when an operand is 0).
  - `gcd_prime_factors(a, b)`: divides out common factors; an operand of 0
    or 1 gives 1.
- `algolab.arrays`
  - `elementwise_product(a, b)`: multiplies two matrices of the same shape
    entry by entry (not a matrix product); raises `ValueError` when the
    shapes differ.
  - `largest(values)`: the largest value; raises `ValueError` when empty.
  - `is_unique(values)`: whether no value repeats among all elements but the
    last one, which takes no part in the comparison.
  - `linear_search(values, key)`: index of the first occurrence, or `None`.
- `algolab.text`
  - `find_pattern(text, pattern)`: every index where `pattern` occurs,
    overlapping matches included.
- `algolab.factorial`
  - `factorial_iterative(n)` and `factorial_recursive(n)`: both give 1 for
    `n` below 2. The recursive one raises `RecursionError` for very large `n`.
- `algolab.sorting`
  - `selection_sort`, `insertion_sort`, `merge_sort` (stable) and
    `quick_sort` (last element as pivot). Each takes any iterable and returns
    a new sorted list.
- `algolab.graphs`
  - `warshall(adjacency)`: transitive closure; reachable entries become 1.
  - `floyd(distances)`: all-pairs shortest distances, with `INF` (`99999`)
    marking a missing edge.
  - Both return new matrices and raise `ValueError` for a non-square input.
  - `format_closure(matrix)` renders a closure under the heading
    `Transitive Closure Matrix:`; `format_distances(matrix)` renders distances
    one row per line, writing `INF` for missing edges.
- `algolab.timing`
  - `timed(func, *args, **kwargs)` calls `func` and returns a frozen `Timed`
    holding `value` and `seconds` of processor time; `Timed.milliseconds()`
    gives the same time in milliseconds. Exceptions from `func` propagate.

## Command line

The `algolab` command runs one algorithm at a time. Numbers it needs are read
as whitespace-separated integers from standard input, after a prompt; arrays
and matrices for the non-graph commands are filled with random values.

```
algolab --help
algolab [--seed N] COMMAND [options]
```

`--seed N` makes the random values repeatable.

| Command | Input read | Notes |
|---|---|---|
| `gcd [--method euclid\|consecutive\|prime]` | two numbers | default method `euclid`; time in ms |
| `matrix` | size N | entry-by-entry product of two random N x N matrices of digits; N at most 100 |
| `largest` | array size | size 1 to 1000 |
| `unique` | array size | size 1 to 10000 |
| `search [--show]` | array size, then key | size 1 to 10000; `--show` prints the array before asking for the key |
| `match [TEXT [PATTERN]]` | nothing | defaults `Hello world` and `world` |
| `factorial` | n | runs both versions and times each |
| `sort [--method selection\|insertion\|merge\|quick]` | count | sorts that many random values below 100; default `insertion` |
| `warshall` | vertex count, then the adjacency matrix | at most 10 vertices |
| `floyd` | node count, then each distance | at most 100 nodes; type `99999` for no edge |

Example:

```
$ echo "48 18" | algolab gcd --method prime
Enter two numbers: The GCD of 48 and 18 is: 6
Time taken is 0.001000 ms
```

A size outside the allowed range prints a message and exits with status 1.
Input that is missing, not an integer, or otherwise out of range (a negative
sort count, too many vertices, an `n` too large for the recursive factorial)
prints an `error:` line to standard error and exits with status 1.

## Running the tests

```
pip install .[test]
pytest
```