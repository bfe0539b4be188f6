"""Adjacency-list graphs and articulation points."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from itertools import count


class Graph:
    """A graph kept as an adjacency list keyed by node."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, u: Hashable, v: Hashable, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless ``directed``."""
        self._adjacency.setdefault(u, []).append(v)
        if not directed:
            self._adjacency.setdefault(v, []).append(u)

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """Return the nodes reachable from ``node`` by one edge, in insertion order."""
        return list(self._adjacency.get(node, ()))

    def format_adjacency(self) -> str:
        """Render one line per node as ``node->neighbour, neighbour``."""
        return "\n".join(
            f"{node}->" + ", ".join(str(other) for other in others)
            for node, others in self._adjacency.items()
        )


def articulation_points(node_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, sorted, the nodes of an undirected graph whose removal disconnects it.

    Nodes are numbered ``0`` to ``node_count - 1``.
    """
    adjacency: dict[int, list[int]] = {node: [] for node in range(node_count)}
    for u, v in edges:
        if u not in adjacency or v not in adjacency:
            raise ValueError(f"edge ({u}, {v}) refers to an unknown node")
        adjacency[u].append(v)
        adjacency[v].append(u)

    discovery: dict[int, int] = {}
    low: dict[int, int] = {}
    points: set[int] = set()
    timer = count()

    def visit(node: int, parent: int | None) -> None:
        discovery[node] = low[node] = next(timer)
        children = 0
        for neighbour in adjacency[node]:
            if neighbour == parent:
                continue
            if neighbour not in discovery:
                visit(neighbour, node)
                low[node] = min(low[node], low[neighbour])
                if low[neighbour] >= discovery[node] and parent is not None:
                    points.add(node)
                children += 1
            else:
                low[node] = min(low[node], discovery[neighbour])
        if parent is None and children > 1:
            points.add(node)

    for node in range(node_count):
        if node not in discovery:
            visit(node, None)
    return sorted(points)