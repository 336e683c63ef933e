"""A small weighted directed graph with Bellman-Ford negative cycle detection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(eq=False, repr=False)
class Divertex:
    id: int
    outedges: list["Diedge"] = field(default_factory=list)
    inedges: list["Diedge"] = field(default_factory=list)


@dataclass(eq=False, repr=False)
class Diedge:
    id: int
    source: Divertex
    target: Divertex
    weight: float = 0.0


class Digraph:
    """Directed graph whose vertices and edges are numbered in insertion order."""

    def __init__(self) -> None:
        self.vertices: list[Divertex] = []
        self.edges: list[Diedge] = []

    def add_vertex(self) -> int:
        vertex = Divertex(len(self.vertices))
        self.vertices.append(vertex)
        return vertex.id

    def add_edge(self, source: int, target: int, weight: float) -> int:
        edge = Diedge(len(self.edges), self.vertices[source], self.vertices[target], weight)
        self.edges.append(edge)
        edge.source.outedges.append(edge)
        edge.target.inedges.append(edge)
        return edge.id

    def __str__(self) -> str:
        return f"Graph has {len(self.vertices)} vertices and {len(self.edges)} edges."

    def bellman_ford(self) -> bool:
        """Relax from vertex 0; return True once a negative cycle through it is seen."""
        n = len(self.vertices)
        if n == 0:
            return False
        distances = [math.inf] * n
        distances[0] = 0.0
        for _ in range(n):
            updated = False
            for edge in self.edges:
                start = distances[edge.source.id]
                if start != math.inf and start + edge.weight < distances[edge.target.id]:
                    distances[edge.target.id] = start + edge.weight
                    updated = True
            if not updated:
                return False
            if distances[0] < 0.0:
                return True
        return False