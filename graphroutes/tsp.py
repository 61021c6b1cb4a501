"""Brute-force travelling salesman tour on an undirected weighted graph."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise, permutations
from typing import Iterable

from .graph import unique_vertices


class TourError(ValueError):
    """Raised when no round trip through every vertex can be formed."""


@dataclass(frozen=True)
class Tour:
    """A closed tour that starts and ends at ``start``."""

    start: int
    path: tuple[int, ...]
    cost: int

    def describe(self) -> str:
        """Return the tour and its total cost as text."""
        route = " -> ".join(chr(vertex) for vertex in self.path)
        return (
            f"Shortest TSP tour starting from {chr(self.start)}:\n"
            f"{route}\n"
            f"Total cost: {self.cost}"
        )


def traveling(edges: Iterable[tuple[int, int, int]], start: int) -> Tour:
    """Find the cheapest tour from ``start`` through every vertex and back.

    Orders are tried lexicographically; the first cheapest one wins.
    """
    edges = list(edges)
    vertices = unique_vertices(edges)
    if len(vertices) < 2:
        raise TourError("Not enough vertices for TSP!")

    weights: dict[tuple[int, int], int] = {}
    for u, v, weight in edges:
        for key in ((u, v), (v, u)):
            if key not in weights or weight < weights[key]:
                weights[key] = weight

    others = sorted(vertex for vertex in vertices if vertex != start)

    best: Tour | None = None
    for order in permutations(others):
        route = (start, *order, start)
        try:
            cost = sum(weights[step] for step in pairwise(route))
        except KeyError:
            continue
        if best is None or cost < best.cost:
            best = Tour(start=start, path=route, cost=cost)

    if best is None:
        raise TourError("No valid TSP tour found!")
    return best