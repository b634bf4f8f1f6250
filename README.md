# alglab

A collection of classic algorithms and data structures. Each can be used as
plain Python functions or classes. Each also has a small command that reads
its input from standard input, or from text files, and prints the results.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `alglab.sorting` | `merge_sort` (stable, ascending), `sort_descending` |
| `alglab.sums` | `sum_iterative`, `sum_recursive`, `sum_direct`: the sum of 1..n |
| `alglab.coins` | coin change: `dynamic_change` (fewest coins, raises `ValueError` if the amount cannot be made), `greedy_change`, `count_coins`, `format_table` |
| `alglab.maze` | rat in a maze: `find_path` (backtracking), `branch_and_bound` (path length limited to a number of steps), `format_grid`; both searches return a 0/1 grid or `None` |
| `alglab.hashstring` | column hash of a text: `prepare_text`, `build_table`, `column_sums`, `hex_groups`, `hash_text` |
| `alglab.trie` | `Trie` with `insert`, `contains` (also `in`) and `dfs`; only the letters a–z can be stored |
| `alglab.knapsack` | 0/1 knapsack: `knapsack_table`, `knapsack` |
| `alglab.shortest_paths` | `dijkstra`, `floyd_warshall`, `from_input` (turns `-1` into the `INF` weight 999) |
| `alglab.coloring` | three-colour graph colouring: `is_safe`, `color_graph` (returns `None` when no colouring exists) |
| `alglab.malware` | `prefix_table`, `kmp_search`, `suffixes`, `longest_common_substring`, `read_chars` |
| `alglab.networks` | `travelling_salesman` (nearest-neighbour tour), `max_flow`, `nearest_central`, `read_matrix` |
| `alglab.logs` | log lines by date: `month_to_number`, `number_to_month`, `date_key`, `search_date` |
| `alglab.linkedlist` | `LinkedList` (`push_front`, `push_back`, `pop_front`, `pop_back`, `reverse`, `concat`, `equals`), `run_commands`, `compare_lists` |
| `alglab.bst` | `BinarySearchTree` with `insert`, `delete`, `in`, `preorder`, `inorder`, `postorder`, `level_order`, `height`, `ancestors`, `level_of` |
| `alglab.iplog` | `LogEntry`, `parse_entry`, `normalize_ip`, `pad_octet`, `month_number`, `sort_by_ip`, `search_range`, `sort_by_month` |

## Using the library

```python
from alglab.sorting import merge_sort, sort_descending
from alglab.trie import Trie
from alglab.bst import BinarySearchTree
from alglab.shortest_paths import dijkstra, from_input

merge_sort([3.5, 1.0, 2.25])        # [1.0, 2.25, 3.5]
sort_descending([3.5, 1.0, 2.25])   # [3.5, 2.25, 1.0]

trie = Trie()
trie.insert("casa")
trie.contains("casa")               # True
"cas" in trie                       # False

tree = BinarySearchTree([8, 3, 10, 1, 6])
tree.inorder()                      # [1, 3, 6, 8, 10]
tree.height()                       # 3
tree.ancestors(6)                   # [8, 3]
tree.level_of(6)                    # 2

matrix = from_input([[0, 4, -1], [4, 0, 1], [-1, 1, 0]])
dijkstra(matrix, 0)                 # [0, 4, 5]
```

## Commands

| Command | Input | Output |
| --- | --- | --- |
| `alglab-sort` | N, then N real numbers | the numbers from largest to smallest |
| `alglab-sums` | k, then k integers | the iterative, recursive and direct sum of 1..n for each |
| `alglab-coins` | denominations, a price and the amount paid | change tables by dynamic programming and by the greedy method |
| `alglab-maze` | size, maximum steps, then the 0/1 cells | the backtracking path and the step-limited path |
| `alglab-hash` | n (a multiple of 4, 16–64), then a file name without `.txt` | the character tables and the hexadecimal hash |
| `alglab-trie` | words to store, then words to look up | the DFS of the trie and `true`/`false` for each lookup |
| `alglab-knapsack` | item count, values, weights, capacity | the benefit table and the optimal benefit |
| `alglab-paths` | node count, then the weight matrix (`-1` for no edge) | Dijkstra distances from every node and the Floyd–Warshall matrix |
| `alglab-coloring` | node count, then the 0/1 adjacency matrix | a colour from 1 to 3 for each node, or a message that none exists |
| `alglab-linkedlist` | `commands` mode (default): `1 x`, `2 x`, `3`, `4`, `5`, `0`; `compare` mode: two counted lists | the printed list values; or both reversed lists, their join and `true`/`false` |
| `alglab-bst` | values to insert, values to delete, values for ancestors, values for levels (each preceded by a count) | traversals, height, ancestors and levels |

Every command reads standard input; `alglab-hash` also opens the named file.

The following commands work on fixed file names:

- `alglab-malware [--dir DIR]` reads `transmission1.txt`, `transmission2.txt`,
  `mcode1.txt`, `mcode2.txt` and `mcode3.txt` from `DIR` (default: current
  directory). It reports where each code occurs in each transmission, then
  the longest line suffix the two transmissions share.
- `alglab-networks [--dir DIR] [--output FILE]` reads one integer per line
  from `archivo.txt` (4×4 distances), `archivo2.txt` (4×4 capacities),
  `archivo5.txt` (6×6 capacities), `archivo3.txt` (four x, y centrals) and
  `archivo4.txt` (a point). It prints distances, a tour, maximum flows and
  the central nearest the point. It writes a report to `FILE` (default
  `Equipo_07_Salida_Y.txt`).
- `alglab-logs [--input FILE] [--output FILE]` sorts a log (default
  `bitacora.txt`) by date. It writes the result newest first (default
  `sortedData.txt`). It then reads a day and a month from standard input and
  prints that day's entries.
- `alglab-iplog [--input FILE] [--output FILE]` sorts a log (default
  `bitacora.txt`) by IP address. It reads a high and a low address from
  standard input and prints the entries between them, ordered by month. It
  writes the whole log sorted by month (default `SortedData.txt`).

## Limitations

- The commands read only the fixed input formats described above.
- They are not general tools for arbitrary graphs, logs or files.
- The network command handles only the fixed sizes listed: four colonies and one six-node flow network.