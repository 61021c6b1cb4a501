"""Bellman-Ford shortest paths, brute-force travelling-salesman tours and edge-list tools."""

__version__ = "0.1.0"