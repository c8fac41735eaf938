# dsakit

Small, readable implementations of classic data structures and algorithms.
The package includes array utilities, searching and sorting, queues, a stack,
an adjacency-list graph, a backtracking Sudoku solver and text patterns. It
uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.arrays`

- `find_duplicates(values)`: sorts the values and returns each one that
  equals its successor, so a value that occurs k times is reported k - 1
  times.
- `sorted_intersection(first, second)`: returns the common elements of two
  ascending sequences, counting repeats.
- `max_subarray(values)`: uses Kadane's algorithm to return the earliest
  contiguous run with the largest sum. An empty input gives `[]`.
- `minimum(values)` and `maximum(values)`: raise `ValueError` on empty input.
- `ncr(n, r)`: returns the binomial coefficient.
- `pascal_row(n)`: returns the n-th row of Pascal's triangle, counting from 1.
  It raises `ValueError` when `n < 1`.
- `reverse(values)`: returns the values in reverse order.
- `sort_zeros_ones(values)`: puts the 0s before the 1s. It raises `ValueError`
  if any other value is present.
- `unique_element(values)`: XORs all the values, which leaves the one element
  that is not paired.
- `swap_alternate(values)`: swaps each pair of neighbours. A trailing odd
  element stays where it is.

### `dsakit.searching`

`binary_search(values, key)` works on ascending input. `linear_search(values, key)`
returns the first match. Both return the index they find, or `-1` when the key
is absent.

### `dsakit.sorting`

Each of these returns a new sorted list:

- `bubble_sort` (stops early once a pass makes no swap)
- `insertion_sort`
- `selection_sort`
- `merge_sort`

### `dsakit.graph`

`Graph` is an adjacency list that keeps nodes in the order they were first
added.

- `add_edge(u, v, directed=False)` adds an edge from `u` to `v`. Unless
  `directed` is true, it also adds the edge back from `v` to `u`.
- `neighbours(node)` returns the nodes next to `node`.
- `node in graph` tests whether a node is present, and `len(graph)` counts the
  nodes.
- `format_adjacency()` returns one line per node, in the form `node->a , b , `.

### `dsakit.queues`

- `CircularQueue(capacity)` is a fixed-size queue whose slots wrap around.
- `ArrayQueue(capacity=100)` is a queue over a fixed array. Its slots are not
  reused until the queue has fully drained. It reports itself full once the
  rear reaches the last slot, so it holds at most `capacity - 1` items at a
  time.
- `LinkedQueue()` is an unbounded queue of linked nodes.

All three have `enqueue` and `dequeue`. `ArrayQueue` and `LinkedQueue` also
have `front()` and `is_empty()`, and iterating over one of them yields its
items from front to rear.

Taking an item from an empty queue raises `QueueEmptyError`, which is a
subclass of `IndexError`. Adding an item to a full queue raises
`QueueFullError`, which is a subclass of `OverflowError`.

### `dsakit.stacks`

- `Stack(size)` holds at most `size` elements. It has `push`, `pop`, `peek`,
  `is_empty` and `len()`.
  - Pushing onto a full stack raises `StackOverflowError`.
  - Calling `pop` or `peek` on an empty stack raises `StackUnderflowError`.
- `reverse_string(text)` reverses a string by pushing its characters onto a
  `Stack` and popping them off again.

### `dsakit.sudoku`

Grids are 9 rows of 9 cells, and `0` marks an empty cell.

- `is_safe(grid, row, col, value)` checks whether `value` is absent from that
  cell's row, column and 3x3 box.
- `solve(grid)` returns a solved copy and leaves the input unchanged. It
  raises `ValueError` for a malformed grid or one that has no solution.
- `format_grid(grid)` renders the grid with bars between the boxes and rules
  under rows 3 and 6.

### `dsakit.patterns`

Each of these returns a multi-line string:

- `hollow_diamond(n)`
- `butterfly(n)`
- `hollow_square(n)`
- `concentric_square(n)`

## Examples

```python
from dsakit.arrays import max_subarray, pascal_row
from dsakit.searching import binary_search
from dsakit.sorting import merge_sort
from dsakit.stacks import reverse_string

max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # [4, -1, 2, 1]
pascal_row(5)                                   # [1, 4, 6, 4, 1]
binary_search([1, 2, 4, 8, 9, 10], 8)           # 3
merge_sort([15, 36, 98, 10, 0, 2])              # [0, 2, 10, 15, 36, 98]
reverse_string("stack")                         # "kcats"
```

```python
from dsakit.graph import Graph

g = Graph()
g.add_edge(0, 1)
g.add_edge(1, 2)
print(g.format_adjacency(), end="")
# 0->1 , 
# 1->0 , 2 , 
# 2->1 , 
```

```python
from dsakit.queues import LinkedQueue

q = LinkedQueue()
q.enqueue(11)
q.enqueue(12)
q.dequeue()      # 11
q.front()        # 12
list(q)          # [12]
```

```python
from dsakit.sudoku import solve, format_grid

puzzle = [
    [0, 2, 0, 0, 9, 6, 0, 0, 1],
    [7, 9, 4, 0, 5, 1, 8, 0, 0],
    [0, 0, 6, 4, 7, 0, 0, 2, 5],
    [8, 7, 2, 1, 3, 0, 5, 6, 0],
    [1, 0, 5, 0, 0, 7, 0, 8, 4],
    [4, 6, 9, 0, 2, 5, 3, 1, 0],
    [0, 0, 7, 6, 0, 9, 0, 5, 3],
    [0, 0, 0, 7, 8, 3, 4, 9, 0],
    [9, 4, 3, 0, 1, 0, 6, 0, 8],
]
print(format_grid(solve(puzzle)))
```

```python
from dsakit.patterns import concentric_square

print(concentric_square(4), end="")
```

## What it does not do

dsakit is a library only. It has no command-line program, so it does not read
input from the terminal or print results by itself. Call its functions from
your own code.