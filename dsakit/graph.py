"""Adjacency-list graph."""

from __future__ import annotations

from collections.abc import Hashable


class Graph:
    """A graph stored as an adjacency list, keyed by node in insertion order."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, u: Hashable, v: Hashable, directed: bool = False) -> None:
        """Add an edge from u to v, and from v to u unless directed."""
        self._adjacency.setdefault(u, []).append(v)
        if not directed:
            self._adjacency.setdefault(v, []).append(u)

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """Return the nodes adjacent to node, in the order edges were added."""
        return list(self._adjacency.get(node, ()))

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def format_adjacency(self) -> str:
        """Render the adjacency list, one ``node->a , b , `` line per node."""
        lines = []
        for node, targets in self._adjacency.items():
            lines.append(f"{node}->" + "".join(f"{t} , " for t in targets))
        return "".join(line + "\n" for line in lines)