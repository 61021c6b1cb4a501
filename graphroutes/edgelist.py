"""Reading, writing and generating edge lists."""

from __future__ import annotations

import random
from itertools import combinations
from pathlib import Path
from typing import Iterable

from .graph import Edge

FIRST_VERTEX = 33
LAST_VERTEX = 126


class GraphGenerationError(ValueError):
    """Raised when the requested random graph cannot be built."""


def sample_edges() -> list[Edge]:
    """Return the small built-in graph used when no edge file is available."""
    return [
        Edge(65, 66, 4),
        Edge(65, 67, 2),
        Edge(66, 67, 1),
        Edge(66, 68, 5),
        Edge(67, 68, 8),
    ]


def generate_edges(
    num_edges: int,
    num_vertices: int,
    weight_limit: int = 1,
    rng: random.Random | None = None,
) -> list[Edge]:
    """Build a random simple graph whose edges touch every vertex.

    Vertices are printable characters chosen at random. With ``weight_limit``
    of 1 or less every weight is 1, otherwise weights lie in 1..weight_limit.
    """
    if num_edges > num_vertices * (num_vertices - 1) // 2:
        raise GraphGenerationError("cannot create simple graph")
    if num_edges < num_vertices - 1:
        raise GraphGenerationError("cannot create a connected (weak) graph")
    names = list(range(FIRST_VERTEX, LAST_VERTEX + 1))
    if num_vertices > len(names):
        raise GraphGenerationError(
            f"cannot name more than {len(names)} vertices"
        )
    if num_vertices > 2 * num_edges:
        raise GraphGenerationError("cannot create a connected (weak) graph")

    rng = rng if rng is not None else random.Random()
    rng.shuffle(names)
    chosen = names[:num_vertices]
    candidates = list(combinations(chosen, 2))
    wanted = set(chosen)

    while True:
        rng.shuffle(candidates)
        pairs = candidates[:num_edges]
        covered = {vertex for pair in pairs for vertex in pair}
        if covered == wanted:
            break

    if weight_limit <= 1:
        return [Edge(u, v, 1) for u, v in pairs]
    return [Edge(u, v, rng.randint(1, weight_limit)) for u, v in pairs]


def read_edges(path: str | Path, limit: int | None = None) -> list[Edge]:
    """Read whitespace-separated ``source target weight`` triples from ``path``.

    At most ``limit`` edges are read. Raises ValueError on malformed data.
    """
    numbers = [int(token) for token in Path(path).read_text().split()]
    count = len(numbers) // 3
    if limit is not None:
        count = min(count, limit)
        if len(numbers) < 3 * limit and len(numbers) % 3:
            raise ValueError(f"{path}: incomplete edge at the end of the file")
    elif len(numbers) % 3:
        raise ValueError(f"{path}: incomplete edge at the end of the file")
    triples = zip(*[iter(numbers[: 3 * count])] * 3)
    return [Edge(*triple) for triple in triples]


def write_edges(path: str | Path, edges: Iterable[tuple[int, int, int]]) -> None:
    """Write ``edges`` to ``path``, one ``source target weight`` line each."""
    with open(path, "w") as handle:
        for source, target, weight in edges:
            handle.write(f"{source} {target} {weight}\n")