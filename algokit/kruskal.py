"""Minimum spanning trees by Kruskal's algorithm, with a small file format."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

_EDGE_PATTERN = re.compile(r"([a-z]),([a-z]),(-?\d+)")


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two 0-based vertices."""

    start: int
    end: int
    cost: int


def _root(parents: list[int], vertex: int) -> int:
    while parents[vertex] != vertex:
        parents[vertex] = parents[parents[vertex]]
        vertex = parents[vertex]
    return vertex


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the spanning-tree edges in the order they were chosen.

    Raises ValueError if the edges do not connect all vertices.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
    ordered = sorted(edges, key=lambda edge: edge.cost)
    for edge in ordered:
        if not (0 <= edge.start < vertex_count and 0 <= edge.end < vertex_count):
            raise ValueError(f"edge {edge} has a vertex outside 0..{vertex_count - 1}")
    needed = max(vertex_count - 1, 0)
    parents = list(range(vertex_count))
    chosen: list[Edge] = []
    for edge in ordered:
        if len(chosen) == needed:
            break
        start_root = _root(parents, edge.start)
        end_root = _root(parents, edge.end)
        if start_root != end_root:
            chosen.append(edge)
            parents[start_root] = end_root
    if len(chosen) != needed:
        raise ValueError("graph is not connected")
    return chosen


def parse_graph(text: str) -> tuple[int, list[Edge]]:
    """Parse a vertex count, an edge count, then ``a,b,cost`` tokens."""
    tokens = text.split()
    if not tokens:
        raise ValueError("empty graph description")
    try:
        vertex_count = int(tokens[0])
    except ValueError as error:
        raise ValueError(f"bad vertex count {tokens[0]!r}") from error
    edges = []
    for token in tokens[2:]:
        match = _EDGE_PATTERN.fullmatch(token)
        if match is None:
            raise ValueError(f"bad edge {token!r}")
        start, end, cost = match.groups()
        edges.append(Edge(ord(start) - ord("a"), ord(end) - ord("a"), int(cost)))
    return vertex_count, edges


def format_tree(edges: Iterable[Edge]) -> str:
    """Write each edge as ``a,b`` on its own line, vertices named by letter."""
    return "".join(
        f"{chr(edge.start + ord('a'))},{chr(edge.end + ord('a'))}\n" for edge in edges
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from the first path and write its spanning tree to the second."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: kruskal INPUT OUTPUT", file=sys.stderr)
        return 2
    source, destination = (Path(arg) for arg in args)
    vertex_count, edges = parse_graph(source.read_text())
    destination.write_text(format_tree(kruskal(vertex_count, edges)))
    return 0