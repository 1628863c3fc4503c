"""Lowest common ancestor queries on a rooted tree via an Euler tour."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Hashable, Iterable, Mapping


class LcaTree:
    """Answers lowest-common-ancestor queries for a tree given by child lists."""

    def __init__(self, children: Mapping[Hashable, Iterable[Hashable]], root: Hashable = 1) -> None:
        adjacency: defaultdict[Hashable, list[Hashable]] = defaultdict(list)
        for parent, kids in children.items():
            for child in kids:
                adjacency[parent].append(child)
                adjacency[child].append(parent)
        self.root = root
        self._depth = {root: 0}
        self._first = {root: 0}
        euler = [root]
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in self._depth:
                    self._depth[neighbour] = self._depth[node] + 1
                    self._first[neighbour] = len(euler)
                    euler.append(neighbour)
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                if stack:
                    euler.append(stack[-1][0])
        self._table = [euler]
        span = 1
        while 2 * span <= len(euler):
            previous = self._table[-1]
            self._table.append(
                [
                    self._shallower(previous[start], previous[start + span])
                    for start in range(len(euler) - 2 * span + 1)
                ]
            )
            span *= 2

    def _shallower(self, a: Hashable, b: Hashable) -> Hashable:
        return a if self._depth[a] <= self._depth[b] else b

    def lca(self, u: Hashable, v: Hashable) -> Hashable:
        """Return the deepest node that is an ancestor of both ``u`` and ``v``."""
        for node in (u, v):
            if node not in self._first:
                raise KeyError(node)
        low, high = sorted((self._first[u], self._first[v]))
        level = (high - low + 1).bit_length() - 1
        row = self._table[level]
        return self._shallower(row[low], row[high - (1 << level) + 1])