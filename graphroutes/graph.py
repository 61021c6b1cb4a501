"""Weighted undirected edges and helpers shared by the graph algorithms."""

from __future__ import annotations

from typing import Iterable, NamedTuple


class Edge(NamedTuple):
    """An undirected weighted edge between two vertices given by character code."""

    source: int
    target: int
    weight: int


def unique_vertices(edges: Iterable[tuple[int, int, int]]) -> list[int]:
    """Return every vertex named by ``edges``, in order of first appearance."""
    seen: dict[int, None] = {}
    for source, target, _ in edges:
        seen.setdefault(source, None)
        seen.setdefault(target, None)
    return list(seen)