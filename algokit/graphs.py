"""Union-find and Kruskal's minimum spanning tree."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class DisjointSet:
    """Union-find over arbitrary hashable nodes, created on first use."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}

    def find(self, node: Hashable) -> Hashable:
        """Return the representative of node's set, halving paths on the way."""
        parent = self._parent
        parent.setdefault(node, node)
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    def union(self, a: Hashable, b: Hashable) -> None:
        """Merge the sets holding a and b."""
        self._parent[self.find(a)] = self.find(b)


def kruskal(edges: Iterable[tuple[int, Hashable, Hashable]]) -> int:
    """Total weight of a minimum spanning forest of (weight, a, b) edges."""
    sets = DisjointSet()
    total = 0
    for weight, a, b in sorted(edges):
        if sets.find(a) != sets.find(b):
            total += weight
            sets.union(a, b)
    return total