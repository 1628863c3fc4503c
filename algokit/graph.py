"""Adjacency-list graph with traversal, shortest paths, ordering and cycle checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(Generic[T]):
    """Graph over orderable, hashable nodes; nodes are visited in sorted order."""

    def __init__(self) -> None:
        self._adjacency: dict[T, list[T]] = {}

    def add_edge(self, u: T, v: T, bidirectional: bool = True) -> None:
        """Add an edge from ``u`` to ``v``, and back again when bidirectional."""
        self._adjacency.setdefault(u, []).append(v)
        self._adjacency.setdefault(v, [])
        if bidirectional:
            self._adjacency[v].append(u)

    def _nodes(self) -> list[T]:
        return sorted(self._adjacency)

    def _require(self, node: T) -> None:
        if node not in self._adjacency:
            raise KeyError(node)

    def adjacency(self) -> dict[T, list[T]]:
        """Return a copy of the adjacency lists, keyed in sorted node order."""
        return {node: list(self._adjacency[node]) for node in self._nodes()}

    def render(self) -> str:
        """Return one line per node: the node, an arrow, then its neighbours."""
        return "".join(
            f"{node}-->" + "".join(f"{child}," for child in self._adjacency[node]) + "\n"
            for node in self._nodes()
        )

    def _breadth_first(self, source: T) -> Iterator[tuple[T, int]]:
        self._require(source)
        distances = {source: 0}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            yield node, distances[node]
            for child in self._adjacency[node]:
                if child not in distances:
                    distances[child] = distances[node] + 1
                    queue.append(child)

    def bfs(self, source: T) -> list[T]:
        """Return the nodes reachable from ``source`` in breadth-first order."""
        return [node for node, _ in self._breadth_first(source)]

    def shortest_distances(self, source: T) -> dict[T, int | None]:
        """Return the edge count from ``source`` to every node; None if unreachable."""
        reached = dict(self._breadth_first(source))
        return {node: reached.get(node) for node in self._nodes()}

    def distance(self, source: T, target: T) -> int | None:
        """Return the fewest edges from ``source`` to ``target``, or None."""
        self._require(target)
        return self.shortest_distances(source)[target]

    def _dfs_from(self, source: T, visited: set[T]) -> list[T]:
        visited.add(source)
        order = [source]
        stack = [iter(self._adjacency[source])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order

    def dfs(self, source: T) -> list[T]:
        """Return the nodes reachable from ``source`` in depth-first order."""
        self._require(source)
        return self._dfs_from(source, set())

    def components(self, source: T) -> list[list[T]]:
        """Split the nodes into depth-first groups, starting the first at ``source``."""
        self._require(source)
        visited: set[T] = set()
        groups = [self._dfs_from(source, visited)]
        for node in self._nodes():
            if node not in visited:
                groups.append(self._dfs_from(node, visited))
        return groups

    def topological_sort_dfs(self) -> list[T]:
        """Return the nodes ordered so that every edge points forwards."""
        visited: set[T] = set()
        finished: list[T] = []
        for root in self._nodes():
            if root in visited:
                continue
            visited.add(root)
            stack = [(root, iter(self._adjacency[root]))]
            while stack:
                node, neighbours = stack[-1]
                for neighbour in neighbours:
                    if neighbour not in visited:
                        visited.add(neighbour)
                        stack.append((neighbour, iter(self._adjacency[neighbour])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        return finished[::-1]

    def topological_sort_bfs(self) -> list[T]:
        """Return a topological order by removing in-degree-zero nodes.

        Nodes on or behind a cycle never reach in-degree zero and are left out.
        """
        indegree = dict.fromkeys(self._adjacency, 0)
        for neighbours in self._adjacency.values():
            for neighbour in neighbours:
                indegree[neighbour] += 1
        queue = deque(node for node in self._nodes() if indegree[node] == 0)
        order: list[T] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._adjacency[node]:
                indegree[neighbour] -= 1
                if indegree[neighbour] == 0:
                    queue.append(neighbour)
        return order

    def has_cycle_bfs(self, source: T) -> bool:
        """Report whether the undirected part reachable from ``source`` has a cycle."""
        self._require(source)
        parent: dict[T, T | None] = {source: None}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for neighbour in self._adjacency[node]:
                if neighbour not in parent:
                    parent[neighbour] = node
                    queue.append(neighbour)
                elif neighbour != parent[node]:
                    return True
        return False

    def has_cycle_dfs(self) -> bool:
        """Report whether any undirected component of the graph has a cycle."""
        visited: set[T] = set()
        for root in self._nodes():
            if root in visited:
                continue
            visited.add(root)
            stack: list[tuple[T, T | None, Iterator[T]]] = [
                (root, None, iter(self._adjacency[root]))
            ]
            while stack:
                node, parent, neighbours = stack[-1]
                for neighbour in neighbours:
                    if neighbour not in visited:
                        visited.add(neighbour)
                        stack.append((neighbour, node, iter(self._adjacency[neighbour])))
                        break
                    if neighbour != parent:
                        return True
                else:
                    stack.pop()
        return False