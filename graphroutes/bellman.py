"""Bellman-Ford shortest paths on an undirected weighted graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .graph import unique_vertices

NO_PATH = "No path exists"


class NegativeCycleError(ValueError):
    """Raised when relaxation still improves a distance after all rounds."""

    def __init__(self, message: str = "Negative cycle detected!") -> None:
        super().__init__(message)


@dataclass
class ShortestPaths:
    """Distances from ``start`` to every reachable vertex.

    Vertices missing from ``distances`` are unreachable.
    """

    start: int
    vertices: tuple[int, ...]
    edge_count: int
    distances: dict[int, int] = field(default_factory=dict)
    previous: dict[int, int] = field(default_factory=dict)
    converged_after: int | None = None

    def report(self) -> str:
        """Return a human-readable summary of the run and its distances."""
        start = chr(self.start)
        lines = [
            f"Start vertex: {start} (ASCII: {self.start})",
            f"Number of vertices: {len(self.vertices)}",
            f"Number of edges: {self.edge_count}",
        ]
        if self.converged_after is not None:
            lines.append(f"Converged after {self.converged_after} iterations")
        lines.append(f"Bellman-Ford shortest distances from {start}:")
        for vertex in self.vertices:
            distance = self.distances.get(vertex)
            shown = "INF" if distance is None else str(distance)
            lines.append(f"To {chr(vertex)}: {shown}")
        return "\n".join(lines)


def _improve(dist: dict[int, int], prev: dict[int, int], frm: int, to: int, weight: int) -> bool:
    base = dist.get(frm)
    if base is None:
        return False
    candidate = base + weight
    current = dist.get(to)
    if current is not None and candidate >= current:
        return False
    dist[to] = candidate
    prev[to] = frm
    return True


def _relax(edges, start, rounds):
    dist: dict[int, int] = {start: 0}
    prev: dict[int, int] = {}
    for round_number in range(1, rounds + 1):
        updated = False
        for u, v, weight in edges:
            updated |= _improve(dist, prev, u, v, weight)
            updated |= _improve(dist, prev, v, u, weight)
        if not updated:
            return dist, prev, round_number
    return dist, prev, None


def _can_improve(dist: dict[int, int], frm: int, to: int, weight: int) -> bool:
    base = dist.get(frm)
    if base is None:
        return False
    current = dist.get(to)
    return current is None or base + weight < current


def bellman_ford(edges: Iterable[tuple[int, int, int]], start: int) -> ShortestPaths:
    """Compute shortest distances from ``start``, treating every edge as undirected.

    Raises NegativeCycleError if a negative cycle is reachable.
    """
    edges = list(edges)
    vertices = unique_vertices(edges)
    dist, prev, converged = _relax(edges, start, len(vertices) - 1)
    if any(
        _can_improve(dist, u, v, w) or _can_improve(dist, v, u, w) for u, v, w in edges
    ):
        raise NegativeCycleError()
    return ShortestPaths(
        start=start,
        vertices=tuple(vertices),
        edge_count=len(edges),
        distances=dist,
        previous=prev,
        converged_after=converged,
    )


def shortest_path(edges: Iterable[tuple[int, int, int]], start: int, goal: int) -> str:
    """Return the shortest path from ``start`` to ``goal`` as space-separated vertices.

    Returns ``"No path exists"`` when ``goal`` cannot be reached.
    """
    edges = list(edges)
    vertices = unique_vertices(edges)
    dist, prev, _ = _relax(edges, start, len(vertices) - 1)

    if goal not in dist:
        return NO_PATH
    if start == goal:
        return chr(start)

    path: list[int] = []
    visited: set[int] = set()
    current: int | None = goal
    while current is not None:
        if current in visited:
            return NO_PATH
        visited.add(current)
        path.append(current)
        current = prev.get(current)

    if path[-1] != start:
        return NO_PATH
    return " ".join(chr(vertex) for vertex in reversed(path))