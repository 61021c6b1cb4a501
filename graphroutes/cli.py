"""Command line front end for the graph algorithms."""

from __future__ import annotations

import argparse
import random
from typing import Sequence

from .bellman import NegativeCycleError, bellman_ford, shortest_path
from .edgelist import GraphGenerationError, generate_edges, read_edges, sample_edges, write_edges
from .graph import Edge
from .tsp import TourError, traveling


def format_edge(edge: tuple[int, int, int]) -> str:
    """Return ``edge`` as ``"A -> B, weight: 4"``."""
    source, target, weight = edge
    return f"{chr(source)} -> {chr(target)}, weight: {weight}"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphroutes",
        description="Run shortest-path or travelling-salesman search on an edge list.",
    )
    parser.add_argument("--mode", choices=("bf", "path", "tsp"), default="bf")
    parser.add_argument("--file", default="EdgeList.txt", help="edge list file")
    parser.add_argument(
        "--load",
        action="store_true",
        help="read edges from the file instead of generating a random graph",
    )
    parser.add_argument("--edges", type=int, default=40)
    parser.add_argument("--vertices", type=int, default=10)
    parser.add_argument("--weight-limit", type=int, default=15)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def _load(args: argparse.Namespace) -> list[Edge]:
    try:
        return read_edges(args.file, args.edges)
    except OSError:
        print(f"Error: Cannot open {args.file}")
        print("Generating sample edges instead...")
        return sample_edges()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return the process exit status."""
    args = _parser().parse_args(argv)

    if args.load:
        edges = _load(args)
    else:
        try:
            edges = generate_edges(
                args.edges, args.vertices, args.weight_limit, random.Random(args.seed)
            )
        except GraphGenerationError as error:
            print(error)
            return 1
        write_edges(args.file, edges)

    print(f"Graph loaded with {len(edges)} edges:")
    for index, (source, target, weight) in enumerate(edges):
        print(f"Edge {index}: {chr(source)} -> {chr(target)} (weight: {weight})")
    print()

    if not edges:
        print("No edges to process")
        return 1
    start = edges[0].source

    if args.mode == "bf":
        print("=== Running Bellman-Ford Algorithm ===")
        try:
            print(bellman_ford(edges, start).report())
        except NegativeCycleError as error:
            print(error)
    elif args.mode == "path":
        if len(edges) < 2:
            print("Path search needs at least two edges")
            return 1
        goal = edges[1].target
        print("=== Running Bellman-Ford Path Algorithm ===")
        print(f"From: {chr(start)} To: {chr(goal)}")
        result = shortest_path(edges, start, goal)
        print(f"Shortest path from {chr(start)} to {chr(goal)}: {result}")
    else:
        print("=== Running Traveling Salesman Algorithm ===")
        print(f"Starting from vertex: {chr(start)}")
        try:
            print(traveling(edges, start).describe())
        except TourError as error:
            print(error)
    return 0