# algoclase

This package collects algorithms and data structures from an algorithms course.
It uses only the Python standard library.

## Contents

- `algoclase.dheap.DHeap(elements=None, priorities=None, branching_factor=2)`
  is a max-priority d-ary heap. You can build it from matching lists of
  elements and priorities. It provides `insert(element, priority)`, `peek()`,
  `top()`, `is_empty()`, `len()` and `validate()`. `top()` removes and returns
  the element with the highest priority. `validate()` checks that no child has
  a higher priority than its parent. The constructor raises `ValueError` in two
  cases: the two lists differ in length, or the branching factor is below 2.
  `peek()` and `top()` raise `IndexError("Heap is empty.")` when the heap is
  empty.
- `algoclase.search` has two binary-search functions:
  - `find_crossover_index(x, y)` returns an index `j` with `x[j] > y[j]` and
    `x[j + 1] < y[j + 1]`. It raises `ValueError` if its preconditions are not
    met.
  - `integer_cube_root(n)` returns the largest integer whose cube does not
    exceed a positive `n`.
- `algoclase.math_utils.sumar(a, b)` returns `a + b`.
- `algoclase.party` handles the "most people at a party" problem:
  - `PersonPreference(a, b, c)` holds one person's minimum amount of each of
    three drinks. Each value must lie between 0 and 10000, and their sum must
    not exceed 10000.
  - `max_people_party(persons)` returns how many people a single mix can
    satisfy.
- `algoclase.graph.Graph` is an undirected graph of integer nodes. It provides
  `insert_node`, `delete_node`, `has_node`, `insert_edge`, `delete_edge`,
  `neighbors` and `max_cycle_size()`. `max_cycle_size()` returns the number of
  nodes in the longest simple cycle it finds, or 0 if there is none. Invalid
  operations raise `ValueError` or `KeyError`.
- `algoclase.estimation.order_time_estimation(data_size, assignation_time,
  comparation_time)` estimates the running time of a quadratic sorting
  procedure.

## Example

```python
from algoclase.dheap import DHeap

heap = DHeap(["A", "B", "C"], [0.1, -0.1, 1.0], 3)
heap.insert("D", 2.0)
assert heap.top() == "D"
assert heap.peek() == "C"
```

## Commands

`algoclase-party` and `algoclase-cycles` read test cases interactively from
standard input. Each prints one `Caso #i: result` line per case.

```
algoclase-party
algoclase-cycles
```

`algoclase-party` asks for three inputs:

1. The number of tests.
2. For each test, the number of persons.
3. For each person, three integers on one line.

`algoclase-cycles` asks for two inputs:

1. The number of tests.
2. For each test, the number of nodes, which must be greater than 3.

It starts from a triangle on nodes 0, 1 and 2. For every further node it reads
two 1-based node numbers on one line and connects the new node to both. When a
connection is rejected, the command prints the reason to standard error.

`algoclase-estimate` prints two things. First it prints the measured duration
of an empty step, in whole microseconds. Then it prints the estimated sorting
time for the data sizes 100, 1000, 5000, 10000 and 50000.

```
algoclase-estimate
```

## Limitations

The graph and the heap exist in memory only. Nothing is saved to disk. The
commands read only from standard input and do not take options.

## Tests

```
pip install -e .[test]
pytest
```