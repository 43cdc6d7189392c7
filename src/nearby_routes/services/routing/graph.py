"""Complete distance graph over the vendor and its consumers."""

from __future__ import annotations

from typing import Callable, Sequence

from ...models.domain import ORIGIN_ID, Coordinate, Destination
from ..geospatial import distance_km
from .models import Graph


def build_location_graph(
    origin: Coordinate,
    destinations: Sequence[Destination],
    distance: Callable[[Coordinate, Coordinate], float] = distance_km,
) -> Graph:
    """Connect every pair of distinct nodes with their great-circle distance.

    Each unordered pair is measured once and stored in both directions, so the
    result is symmetric. No self-edges are added.
    """

    locations: list[tuple[str, Coordinate]] = [(ORIGIN_ID, origin)]
    locations.extend((destination.id, destination.coordinate) for destination in destinations)

    graph: Graph = {node_id: {} for node_id, _ in locations}
    for i, (id_a, coord_a) in enumerate(locations):
        for id_b, coord_b in locations[i + 1:]:
            weight = distance(coord_a, coord_b)
            graph[id_a][id_b] = weight
            graph[id_b][id_a] = weight
    return graph
