"""
Weighted directed graph engine.

This module defines the core data structures for storing a directed graph as
an adjacency list (vertex -> outgoing edges) together with breadth-first
traversal and Dijkstra shortest-path search.
"""

import decimal
import heapq
import itertools
import logging
import math
import numbers
from collections import deque
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Tuple, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar('V')
D = TypeVar('D')

_MISSING = object()


class InvalidArgumentError(ValueError):
    """Raised when an operation's precondition on its input is violated."""


@dataclass(frozen=True)
class Edge(Generic[V, D]):
    """
    Represents a directed, weighted arc between two vertices.

    Attributes:
        from_vertex: Vertex the edge leaves
        to_vertex: Vertex the edge enters
        distance: Weight of the edge (non-negative for shortest-path search)
    """
    from_vertex: V
    to_vertex: V
    distance: D

    def __repr__(self):
        return f"Edge({self.from_vertex!r} -> {self.to_vertex!r}, {self.distance!r})"


def path_distance(path: List[Edge]) -> Any:
    """Sum the edge distances along a path (0 for an empty path)."""
    total = 0
    for edge in path:
        total += edge.distance
    return total


def _is_negative_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        return False
    # Complex values have no ordering
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return False
    if isinstance(value, decimal.Decimal) and value.is_nan():
        return False
    return value < 0


class Graph(Generic[V, D]):
    """
    Directed, weighted graph stored as an adjacency list.

    Parallel edges between the same pair of vertices are allowed. Query
    methods return new lists, so mutating the graph never changes a result
    that was already handed out.
    """

    def __init__(self):
        self._adjacency: Dict[V, List[Edge]] = {}

    def has_vertex(self, vertex: V) -> bool:
        """Check whether a vertex is present."""
        return vertex in self._adjacency

    def add_vertex(self, vertex: V) -> None:
        """Add a vertex. Adding an existing vertex leaves its edges untouched."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []

    def remove_vertex(self, vertex: V) -> bool:
        """
        Remove a vertex together with every edge entering or leaving it.

        Returns:
            False if the vertex was not present, True otherwise
        """
        if vertex not in self._adjacency:
            return False

        outgoing = self._adjacency.pop(vertex)
        stripped = 0
        for key, edges in self._adjacency.items():
            kept = [edge for edge in edges if edge.to_vertex != vertex]
            stripped += len(edges) - len(kept)
            self._adjacency[key] = kept

        logger.debug(f"Removed vertex {vertex!r}: {len(outgoing)} outgoing, "
                     f"{stripped} incoming edges dropped")
        return True

    def vertices(self) -> List[V]:
        """Get all vertices. Callers must not rely on the ordering."""
        return list(self._adjacency)

    def add_edge(self, from_vertex: V, to_vertex: V, distance: D) -> None:
        """Add an edge, creating missing endpoints. Never deduplicates."""
        self.add_vertex(from_vertex)
        self.add_vertex(to_vertex)
        self._adjacency[from_vertex].append(Edge(from_vertex, to_vertex, distance))

    def remove_edge(self, from_vertex, to_vertex=_MISSING) -> bool:
        """
        Remove every edge from one vertex to another.

        Accepts either two vertices or a single Edge. An Edge is matched by its
        endpoints only; its distance is not compared.

        Returns:
            True if at least one edge was removed
        """
        from_vertex, to_vertex = self._endpoints(from_vertex, to_vertex)
        edges = self._adjacency.get(from_vertex)
        if not edges:
            return False

        kept = [edge for edge in edges if edge.to_vertex != to_vertex]
        if len(kept) == len(edges):
            return False
        self._adjacency[from_vertex] = kept
        return True

    def has_edge(self, from_vertex, to_vertex=_MISSING) -> bool:
        """Check for an edge between two vertices (or the endpoints of an Edge)."""
        from_vertex, to_vertex = self._endpoints(from_vertex, to_vertex)
        return any(edge.to_vertex == to_vertex
                   for edge in self._adjacency.get(from_vertex, []))

    def edges(self, vertex: V) -> List[Edge]:
        """Get outgoing edges of a vertex in insertion order ([] if absent)."""
        return list(self._adjacency.get(vertex, []))

    def order(self) -> int:
        """Number of vertices."""
        return len(self._adjacency)

    def size(self) -> int:
        """Number of edges, counting parallel edges separately."""
        return sum(len(edges) for edges in self._adjacency.values())

    def degree(self, vertex: V) -> int:
        """Number of outgoing edges of a vertex (0 if absent)."""
        return len(self._adjacency.get(vertex, []))

    @staticmethod
    def _endpoints(first, second) -> Tuple[Any, Any]:
        if second is _MISSING:
            if not isinstance(first, Edge):
                raise TypeError(f"Expected an Edge or two vertices, got {first!r}")
            return first.from_vertex, first.to_vertex
        return first, second

    def walk(self, start: V) -> List[V]:
        """
        Breadth-first traversal from a start vertex.

        A vertex is marked visited when it is enqueued, so each vertex appears
        once. Siblings are visited in edge insertion order.

        Args:
            start: Vertex to start from

        Returns:
            Visited vertices in BFS order, starting with ``start``;
            empty if ``start`` is not in the graph
        """
        if start not in self._adjacency:
            return []

        traversal = []
        visited = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            traversal.append(current)
            for edge in self._adjacency[current]:
                if edge.to_vertex not in visited:
                    visited.add(edge.to_vertex)
                    queue.append(edge.to_vertex)

        return traversal

    def shortest_path(self, from_vertex: V, to_vertex: V) -> List[Edge]:
        """
        Compute the shortest path between two vertices using Dijkstra.

        Edge distances are assumed non-negative. Ties between equal tentative
        distances are broken by the order in which vertices entered the
        frontier.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex

        Returns:
            Edges traversed from source to target, in order. Empty if there is
            no path, if either vertex is absent, or if source equals target.

        Raises:
            InvalidArgumentError: If any vertex is a negative number
        """
        for vertex in self._adjacency:
            if _is_negative_number(vertex):
                logger.warning(f"Rejecting shortest path query: negative vertex {vertex!r}")
                raise InvalidArgumentError(f"Graph contains a negative vertex: {vertex!r}")

        if from_vertex not in self._adjacency or to_vertex not in self._adjacency:
            return []

        distances: Dict[V, Any] = {vertex: math.inf for vertex in self._adjacency}
        distances[from_vertex] = 0
        predecessors: Dict[V, Edge] = {}

        counter = itertools.count()
        heap = [(0, next(counter), from_vertex)]
        settled = set()

        while heap:
            current_distance, _, current = heapq.heappop(heap)

            # Skip outdated entries
            if current in settled:
                continue
            settled.add(current)

            if current == to_vertex:
                break

            for edge in self._adjacency[current]:
                new_distance = current_distance + edge.distance
                if new_distance < distances[edge.to_vertex]:
                    distances[edge.to_vertex] = new_distance
                    predecessors[edge.to_vertex] = edge
                    heapq.heappush(heap, (new_distance, next(counter), edge.to_vertex))

        if distances[to_vertex] == math.inf:
            logger.debug(f"No path from {from_vertex!r} to {to_vertex!r}")
            return []

        path: List[Edge] = []
        current = to_vertex
        while current != from_vertex:
            edge = predecessors[current]
            path.append(edge)
            current = edge.from_vertex
        path.reverse()

        logger.debug(f"Shortest path {from_vertex!r} -> {to_vertex!r}: "
                     f"{len(path)} edges, distance {distances[to_vertex]!r}")
        return path

    def validate(self) -> Tuple[bool, List[str]]:
        """
        Validate the graph structure.

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        for vertex, edges in self._adjacency.items():
            for edge in edges:
                if edge.from_vertex != vertex:
                    errors.append(f"Edge {edge!r} stored under vertex {vertex!r}")
                if edge.to_vertex not in self._adjacency:
                    errors.append(f"Edge references non-existent vertex: {edge.to_vertex!r}")
                if edge.distance < 0:
                    errors.append(f"Edge ({edge.from_vertex!r}, {edge.to_vertex!r}) "
                                  f"has negative distance")

        return len(errors) == 0, errors

    def get_statistics(self) -> Dict:
        """Get statistics about the graph."""
        num_vertices = self.order()
        num_edges = self.size()
        return {
            'num_vertices': num_vertices,
            'num_edges': num_edges,
            'avg_degree': num_edges / num_vertices if num_vertices else 0,
        }

    def __len__(self):
        return self.order()

    def __contains__(self, vertex):
        return self.has_vertex(vertex)

    def __repr__(self):
        return f"Graph(vertices={self.order()}, edges={self.size()})"
