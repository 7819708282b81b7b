# algoritma

A collection of classic algorithms and data structures written in plain
Python, meant for reading, experimenting and learning. It needs nothing
outside the standard library.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algoritma.number_theory` | `is_factorial`, `is_prime`, `power_recursive`, `power_linear`, `fibonacci`, `is_even`, `reverse_binary`, `modular_exponent`, `miller_test`, `is_probable_prime` (Miller–Rabin) |
| `algoritma.calculus` | `equation`, `bisection`, `factorial`, `cosine` (Taylor series), `derivative`, `poly_derivative`, `sum_derivative`, `product_derivative`, `chain_derivative`, angle conversions, `relu`, `sigmoid`, volumes, `quadratic_roots` |
| `algoritma.descriptive` | `Summary`, `selection_sort`, `mean`, `median`, `value_range`, `quartiles`, `describe`, `variance`, `z_score` |
| `algoritma.regression` | `RegressionStats`, `regression_stats`, `line_equation`, `linear_regression`, `mean_absolute_error`, `mean_absolute_percentage_error`, `mean_squared_error` |
| `algoritma.hash_table` | `HashTable`, a fixed-size table of integers with list buckets |
| `algoritma.chaining` | `ChainingHash`, integers chained by remainder of a fixed modulus |
| `algoritma.board_puzzles` | `knight_tour`, `n_queens`, `solve_maze`, `solve_sudoku`, `format_sudoku` |
| `algoritma.search_problems` | `minimax`, `subarray_sum_count`, `wildcard_match` |
| `algoritma.bits` | `count_set_bits`, `count_bits_flip`, `bit_count`, `hamming_distance`, `string_hamming_distance` |
| `algoritma.sorting` | `bead_sort`, `bubble_sort`, `bucket_sort`, `insertion_sort`, `selection_sort`, `snail_sort`, `DoublyLinkedList` |
| `algoritma.greedy` | `huffman_codes`, `fractional_knapsack`, `Item` |
| `algoritma.dynamic` | `is_armstrong`, `max_subarray_sum`, `subset_sum`, `word_break` |
| `algoritma.boyer_moore` | `Pattern` for Boyer–Moore search, `is_prefix` |
| `algoritma.catalog` | `Catalog`, a small book list searched linearly, and `linear_search` |
| `algoritma.adaline` | `Adaline`, a single adaptive linear neuron |
| `algoritma.knn` | `KNearestNeighbours`, `euclidean_distance` |
| `algoritma.geometry` | `Point`, `Orientation`, `convex_hull` (Graham scan), `orientation`, `squared_distance` |
| `algoritma.graph` | `Graph` with Dijkstra's `shortest_distance` |

The sorting functions return new lists and leave their input alone;
`DoublyLinkedList.bubble_sort` sorts the list in place.

## Examples

```python
from algoritma.number_theory import fibonacci, is_factorial
from algoritma.search_problems import wildcard_match
from algoritma.dynamic import word_break
from algoritma.graph import Graph

fibonacci(10)                                  # 55
is_factorial(479001600)                        # True
wildcard_match("baaabab", "ba*ab")             # True
word_break("applepenapple", ["apple", "pen"])  # True

graph = Graph(4)          # vertices are numbered 1 to 4
graph.add_edge(1, 2, 1)
graph.add_edge(2, 3, 2)
graph.add_edge(1, 3, 5)
graph.shortest_distance(1, 3)                  # 3
graph.shortest_distance(3, 1)                  # None: unreachable
```

```python
from algoritma.geometry import Point, convex_hull

points = [Point(0, 3), Point(1, 1), Point(2, 2), Point(4, 4),
          Point(0, 0), Point(1, 2), Point(3, 1), Point(3, 3)]
convex_hull(points)
# [Point(x=0, y=3), Point(x=4, y=4), Point(x=3, y=1), Point(x=0, y=0)]
```

```python
from algoritma.adaline import Adaline

model = Adaline(2, learning_rate=0.01)
passes = model.fit([[0, 1], [1, -2], [2, 3], [3, -1]], [1, -1, 1, -1])
model.predict([5, 8])     # +1 or -1
```

## Errors

Invalid input raises `ValueError`: sequences of mismatched length (the
error metrics in `algoritma.regression`, `string_hamming_distance`,
`euclidean_distance`), empty data for the statistics functions, a vertex
outside a `Graph`, a bisection interval whose ends do not differ in sign,
and the like.

## What it does not do

This is a library only. It has no command-line programs and no
interactive menus: the book catalog, the hash tables and the graph are
driven from Python code, and nothing is read from standard input or
stored on disk.