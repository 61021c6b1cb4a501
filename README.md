# graphroutes

Small, dependency-free tools for routing over weighted, undirected edge lists.
Vertices are integer character codes (for example `65` for `A`) and are shown
as the corresponding characters.

- **Bellman-Ford** shortest distances from a start vertex, with negative-cycle
  detection, and reconstruction of the shortest path to a goal vertex.
- **Travelling salesman** by exhaustive search: the cheapest tour that starts
  at a vertex, visits every other vertex once and returns.
- **Edge lists**: generate random simple graphs whose edges touch every
  vertex, and read or write them as plain text, one edge per line as
  `source target weight` (all integers).

All graphs are treated as undirected: every edge can be travelled in both
directions at the same weight.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
graphroutes
```

By default the command generates a random graph (40 edges, 10 vertices,
weights from 1 to 15), writes it to `EdgeList.txt`, prints every edge, and
runs Bellman-Ford from the first edge's source vertex, reporting the distance
to every vertex (`INF` for unreachable ones).

Options:

- `--mode {bf,path,tsp}` — `bf` (default) prints Bellman-Ford distances;
  `path` prints the shortest path from the first edge's source to the second
  edge's target; `tsp` prints the cheapest tour from the first edge's source.
- `--file PATH` — the edge list file (default `EdgeList.txt`).
- `--load` — read edges from the file instead of generating a graph. At most
  `--edges` edges are read. If the file cannot be opened, a small built-in
  sample graph is used instead.
- `--edges N`, `--vertices N`, `--weight-limit N` — size and weights of the
  generated graph. A weight limit of 1 or less makes every weight 1.
- `--seed N` — seed for the random generator, for repeatable graphs.

The command exits with status 1 if the requested graph cannot be generated,
if there are no edges, or if `--mode path` has fewer than two edges.

## Library use

```python
from graphroutes.edgelist import sample_edges
from graphroutes.bellman import bellman_ford, shortest_path
from graphroutes.tsp import traveling

edges = sample_edges()  # A-B 4, A-C 2, B-C 1, B-D 5, C-D 8

result = bellman_ford(edges, ord("A"))
print(result.distances[ord("D")])        # 8
print(result.report())

print(shortest_path(edges, ord("A"), ord("D")))  # "A C B D"

tour = traveling(edges, ord("A"))
print(tour.cost)                         # 19
print(tour.describe())                   # A -> B -> D -> C -> A
```

Modules:

- `graphroutes.graph` — the `Edge` named tuple (`source`, `target`, `weight`)
  and `unique_vertices(edges)`, which lists vertices in order of first
  appearance.
- `graphroutes.bellman` — `bellman_ford(edges, start)` returns a
  `ShortestPaths` result with `distances` and `previous` dictionaries
  (unreachable vertices are absent), the graph's `vertices`, `edge_count`,
  `converged_after` (the round in which relaxation stopped changing anything,
  or `None`) and a `report()` method. A reachable negative cycle raises
  `NegativeCycleError`. `shortest_path(edges, start, goal)` returns the path
  as space-separated vertex characters, or `"No path exists"`.
- `graphroutes.tsp` — `traveling(edges, start)` returns the best `Tour`
  (`start`, `path`, `cost`, and `describe()`); among equally cheap tours the
  first in lexicographic order wins. Graphs with fewer than two vertices or no
  complete tour raise `TourError`.
- `graphroutes.edgelist` — `generate_edges(num_edges, num_vertices,
  weight_limit, rng)`, `read_edges(path, limit)`, `write_edges(path, edges)`
  and `sample_edges()`. Impossible generation requests raise
  `GraphGenerationError`; malformed files raise `ValueError`.
- `graphroutes.cli` — `format_edge(edge)` and the `main(argv=None)` entry
  point.

## Limits

The travelling-salesman search tries every ordering of the vertices, so it is
only practical for small graphs. `shortest_path` does not check for negative
cycles; use `bellman_ford` for that. Generated vertices are printable
characters from `!` to `~`, so at most 94 vertices can be generated.