import pytest

from graphroutes.graph import Edge
from graphroutes.tsp import Tour, TourError, traveling

A, B, C, D, E = (ord(ch) for ch in "ABCDE")

SQUARE = [
    Edge(A, B, 1),
    Edge(B, C, 1),
    Edge(C, D, 1),
    Edge(D, A, 1),
    Edge(A, C, 5),
    Edge(B, D, 5),
]


def _weight(edges, u, v):
    return min(w for a, b, w in edges if {a, b} == {u, v})


def test_triangle_tour_is_first_lexicographic():
    edges = [Edge(A, B, 1), Edge(B, C, 2), Edge(C, A, 3)]
    tour = traveling(edges, A)
    assert tour.path == (A, B, C, A)
    assert tour.cost == 1 + 2 + 3


def test_tour_visits_every_vertex_once():
    tour = traveling(SQUARE, A)
    assert tour.path[0] == A and tour.path[-1] == A
    inner = tour.path[1:-1]
    assert sorted(inner) == [B, C, D]


def test_tour_cost_matches_path():
    tour = traveling(SQUARE, A)
    total = sum(_weight(SQUARE, u, v) for u, v in zip(tour.path, tour.path[1:]))
    assert tour.cost == total


def test_square_avoids_diagonals():
    tour = traveling(SQUARE, A)
    assert tour.cost == 4


def test_tour_from_other_start_same_cost():
    assert traveling(SQUARE, C).cost == traveling(SQUARE, A).cost
    assert traveling(SQUARE, C).path[0] == C


def test_parallel_edges_use_cheapest():
    edges = [Edge(A, B, 9), Edge(B, A, 2)]
    tour = traveling(edges, A)
    assert tour.path == (A, B, A)
    assert tour.cost == 2 + 2


def test_describe_format():
    tour = Tour(start=A, path=(A, B, A), cost=4)
    assert tour.describe() == (
        "Shortest TSP tour starting from A:\nA -> B -> A\nTotal cost: 4"
    )


def test_empty_graph_rejected():
    with pytest.raises(TourError, match="Not enough vertices for TSP!"):
        traveling([], A)


def test_self_loop_only_rejected():
    with pytest.raises(TourError, match="Not enough vertices for TSP!"):
        traveling([Edge(A, A, 1)], A)


def test_path_graph_has_no_tour():
    edges = [Edge(A, B, 1), Edge(B, C, 1)]
    with pytest.raises(TourError, match="No valid TSP tour found!"):
        traveling(edges, A)


def test_start_outside_graph_has_no_tour():
    with pytest.raises(TourError, match="No valid TSP tour found!"):
        traveling(SQUARE, E)


def test_tour_is_no_worse_than_reversed():
    tour = traveling(SQUARE, B)
    reversed_path = tuple(reversed(tour.path))
    reversed_cost = sum(
        _weight(SQUARE, u, v) for u, v in zip(reversed_path, reversed_path[1:])
    )
    assert tour.cost <= reversed_cost