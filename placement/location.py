"""
Warehouse location selection.

Picks the vertex with the smallest average shortest-path distance to the
other vertices of a graph. Only the public Graph API is used.
"""

import logging
import math
from enum import Enum
from typing import Any, Dict

from graph.graph import Graph, InvalidArgumentError, path_distance

logger = logging.getLogger(__name__)


class UnreachablePolicy(Enum):
    """How unreachable targets count towards a vertex's average distance."""
    EXCLUDE = 'exclude'  # left out of both the sum and the count
    ZERO = 'zero'        # contribute 0, divisor is always order - 1


def average_distances(graph: Graph,
                      unreachable: UnreachablePolicy = UnreachablePolicy.EXCLUDE) -> Dict[Any, float]:
    """
    Compute each vertex's average shortest-path distance to the other vertices.

    Args:
        graph: Graph to analyse
        unreachable: Policy for targets with no path

    Returns:
        Dictionary mapping vertex to its average distance, in ``vertices()``
        order. Under ``EXCLUDE`` a vertex that reaches nothing maps to ``inf``.

    Raises:
        InvalidArgumentError: If the graph has fewer than 2 vertices
    """
    vertices = graph.vertices()
    if len(vertices) < 2:
        raise InvalidArgumentError(
            f"Need at least 2 vertices to place a warehouse, got {len(vertices)}")

    averages = {}
    for vertex in vertices:
        total_distance = 0
        count = 0
        for other in vertices:
            if other == vertex:
                continue
            path = graph.shortest_path(vertex, other)
            if path or unreachable is UnreachablePolicy.ZERO:
                total_distance += path_distance(path)
                count += 1

        averages[vertex] = total_distance / count if count else math.inf
        logger.debug(f"Vertex {vertex!r}: average distance {averages[vertex]} over {count} targets")

    return averages


def find_optimal_warehouse_location(graph: Graph,
                                    unreachable: UnreachablePolicy = UnreachablePolicy.EXCLUDE):
    """
    Find the vertex minimizing average shortest-path distance to all others.

    Ties go to the vertex listed first by ``graph.vertices()``.

    Raises:
        InvalidArgumentError: If the graph has fewer than 2 vertices, or no
            vertex reaches any other vertex under the ``EXCLUDE`` policy
    """
    averages = average_distances(graph, unreachable)

    optimal_vertex = None
    min_average_distance = math.inf
    for vertex, average in averages.items():
        if average < min_average_distance:
            min_average_distance = average
            optimal_vertex = vertex

    if optimal_vertex is None:
        raise InvalidArgumentError("No vertex reaches any other vertex")

    logger.info(f"Optimal warehouse location: {optimal_vertex!r} "
                f"(average distance {min_average_distance:.2f})")
    return optimal_vertex
