"""Weighted directed graph with Dijkstra shortest distances."""

from __future__ import annotations

import heapq


class Graph:
    """A directed graph whose vertices are numbered from 1 to ``vertex_count``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 1:
            raise ValueError("graph needs at least one vertex")
        self.vertex_count = vertex_count
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def _index(self, vertex: int) -> int:
        if not 1 <= vertex <= self.vertex_count:
            raise ValueError(f"vertex {vertex} is not in the graph")
        return vertex - 1

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an edge from ``u`` to ``v`` with the given weight."""
        self._adjacency[self._index(u)].append((self._index(v), weight))

    def shortest_distance(self, source: int, target: int) -> int | None:
        """Length of the shortest path, or ``None`` when ``target`` is unreachable."""
        start, goal = self._index(source), self._index(target)
        distance: list[int | None] = [None] * self.vertex_count
        distance[start] = 0
        queue = [(0, start)]
        while queue:
            current, vertex = heapq.heappop(queue)
            known = distance[vertex]
            if known is not None and current > known:
                continue
            for neighbour, weight in self._adjacency[vertex]:
                candidate = current + weight
                best = distance[neighbour]
                if best is None or candidate < best:
                    distance[neighbour] = candidate
                    heapq.heappush(queue, (candidate, neighbour))
        return distance[goal]