"""Single-source shortest paths over an arbitrary non-negative graph.

The graph is not assumed complete: only listed edges are traversed, so the
same solver works for the straight-line graph and for any sparser network.
Selection scans for the minimum tentative distance (O(V^2)), which is fine for
the handful of nodes a vendor route holds. Ties go to the lowest node id.
"""

from __future__ import annotations

import math
from typing import Sequence

from .models import UNREACHABLE, Graph, ShortestPath


def _collect_nodes(graph: Graph) -> list[str]:
    nodes = set(graph)
    for neighbors in graph.values():
        nodes.update(neighbors)
    return sorted(nodes)


def shortest_path(graph: Graph, source: str, target: str) -> ShortestPath:
    """Return the shortest distance and node path from ``source`` to ``target``.

    An unreachable or unknown target yields ``distance=inf`` and an empty path.
    """

    nodes = _collect_nodes(graph)
    if source not in nodes or target not in nodes:
        return UNREACHABLE
    if source == target:
        return ShortestPath(distance=0.0, path=(source,))

    distances: dict[str, float] = {node: math.inf for node in nodes}
    previous: dict[str, str | None] = {node: None for node in nodes}
    distances[source] = 0.0
    unvisited = set(nodes)

    while unvisited:
        current = None
        min_distance = math.inf
        for node in nodes:
            if node in unvisited and distances[node] < min_distance:
                min_distance = distances[node]
                current = node

        if current is None:
            break  # remaining nodes are disconnected from the source

        unvisited.remove(current)
        if current == target:
            break

        for neighbor, weight in graph.get(current, {}).items():
            if neighbor not in unvisited:
                continue
            alt = distances[current] + weight
            if alt < distances[neighbor]:
                distances[neighbor] = alt
                previous[neighbor] = current

    if not math.isfinite(distances[target]):
        return UNREACHABLE

    path: list[str] = []
    node: str | None = target
    while node is not None and len(path) <= len(nodes):
        path.append(node)
        node = previous[node]
    path.reverse()
    if not path or path[0] != source:
        return UNREACHABLE
    return ShortestPath(distance=distances[target], path=tuple(path))


def shortest_distances(graph: Graph, source: str, targets: Sequence[str]) -> dict[str, float]:
    """Shortest distance from ``source`` to each target, ``inf`` where unreachable."""

    return {target: shortest_path(graph, source, target).distance for target in targets}
