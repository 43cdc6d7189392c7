"""Tour construction strategies and route result assembly."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence

from ...models.domain import Coordinate
from .dijkstra import shortest_path
from .models import Graph, RouteResult, RouteStop, TourPlan


class TourStrategy(ABC):
    """Contract for tour planners that order destinations starting at the origin."""

    name: str = "abstract"

    @abstractmethod
    def plan(self, graph: Graph, origin_id: str, destination_ids: Sequence[str]) -> TourPlan:
        raise NotImplementedError


class NearestNeighborTour(TourStrategy):
    """Greedy tour: always step to the closest unvisited destination.

    Distances are re-solved from the current node on every step, so the
    planner stays correct on sparse graphs where the direct edge is missing.
    Destinations that cannot be reached end the walk and are reported as
    unreachable.
    """

    name = "nearest_neighbor"

    def plan(self, graph: Graph, origin_id: str, destination_ids: Sequence[str]) -> TourPlan:
        visited: set[str] = set()
        current = origin_id
        route = [origin_id]
        legs: list[float] = []

        while len(visited) < len(destination_ids):
            nearest: Optional[str] = None
            shortest = math.inf
            for destination_id in destination_ids:
                if destination_id in visited:
                    continue
                distance = shortest_path(graph, current, destination_id).distance
                if distance < shortest:
                    shortest = distance
                    nearest = destination_id

            if nearest is None:
                break

            route.append(nearest)
            legs.append(shortest)
            visited.add(nearest)
            current = nearest

        unreachable = tuple(d for d in destination_ids if d not in visited)
        return TourPlan(route=tuple(route), leg_distances=tuple(legs), unreachable=unreachable)


def get_tour_strategy(name: str) -> TourStrategy:
    """Resolve a strategy by name."""

    if name == NearestNeighborTour.name:
        return NearestNeighborTour()
    if name == "ortools":
        from .sequence_solver import OrToolsTour

        return OrToolsTour()
    raise ValueError(f"Unknown tour strategy '{name}'. Expected 'nearest_neighbor' or 'ortools'.")


def build_route_result(
    tour: TourPlan,
    coordinates: Mapping[str, Coordinate],
    *,
    strategy: str,
    roster_version: Optional[int] = None,
) -> RouteResult:
    """Resolve a tour to coordinates and per-stop distances."""

    stops: list[RouteStop] = []
    cumulative = 0.0
    for sequence, (destination_id, leg) in enumerate(zip(tour.route[1:], tour.leg_distances), start=1):
        cumulative += leg
        stops.append(
            RouteStop(
                destination_id=destination_id,
                sequence=sequence,
                distance_from_prev_km=leg,
                cumulative_km=cumulative,
            )
        )

    return RouteResult(
        route=tour.route,
        total_distance=tour.total_distance,
        leg_coordinates=tuple(coordinates[node_id] for node_id in tour.route),
        stops=tuple(stops),
        unreachable=tour.unreachable,
        strategy=strategy,
        roster_version=roster_version,
    )
