"""OR-Tools sequence optimization for a single vendor route.

The vendor visits every reachable consumer once without returning, so the
model is an open path: arcs back to the depot cost nothing. Arc costs are the
shortest-path distances between nodes, which keeps the strategy correct on
sparse graphs and reuses the Dijkstra solver unchanged.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ortools.constraint_solver import pywrapcp, routing_enums_pb2

from ...config import settings
from .dijkstra import shortest_distances, shortest_path
from .models import Graph, TourPlan
from .planner import NearestNeighborTour, TourStrategy

logger = logging.getLogger(__name__)

# Effectively forbids an arc the graph cannot traverse.
LARGE_PENALTY = 999999999


def _metres(distance_km: float) -> int:
    if not math.isfinite(distance_km):
        return LARGE_PENALTY
    return int(round(distance_km * 1000))


class OrToolsTour(TourStrategy):
    """Order destinations with the OR-Tools routing solver."""

    name = "ortools"

    def __init__(
        self,
        *,
        first_solution_strategy: str | None = None,
        local_search_metaheuristic: str | None = None,
        time_limit_seconds: int | None = None,
    ) -> None:
        self.first_solution_strategy = first_solution_strategy or settings.solver_first_solution_strategy
        self.local_search_metaheuristic = local_search_metaheuristic or settings.solver_local_search_metaheuristic
        self.time_limit_seconds = (
            time_limit_seconds if time_limit_seconds is not None else settings.solver_time_limit_seconds
        )

    def plan(self, graph: Graph, origin_id: str, destination_ids: Sequence[str]) -> TourPlan:
        from_origin = shortest_distances(graph, origin_id, destination_ids)
        reachable = [d for d in destination_ids if math.isfinite(from_origin[d])]
        unreachable = tuple(d for d in destination_ids if d not in reachable)
        if unreachable:
            logger.warning(f"{len(unreachable)} destinations unreachable from origin, excluded: {list(unreachable)}")

        if len(reachable) <= 1:
            route = (origin_id, *reachable)
            legs = tuple(from_origin[d] for d in reachable)
            return TourPlan(route=route, leg_distances=legs, unreachable=unreachable)

        nodes = [origin_id, *reachable]
        distance_matrix = [
            [_metres(distance) for distance in shortest_distances(graph, a, nodes).values()]
            for a in nodes
        ]

        manager = pywrapcp.RoutingIndexManager(len(nodes), 1, 0)
        routing = pywrapcp.RoutingModel(manager)

        def distance_callback(from_index: int, to_index: int) -> int:
            from_node = manager.IndexToNode(from_index)
            to_node = manager.IndexToNode(to_index)
            if to_node == 0:
                return 0  # open path, no return leg
            return distance_matrix[from_node][to_node]

        transit_callback_index = routing.RegisterTransitCallback(distance_callback)
        routing.SetArcCostEvaluatorOfAllVehicles(transit_callback_index)

        search_parameters = pywrapcp.DefaultRoutingSearchParameters()
        search_parameters.first_solution_strategy = getattr(
            routing_enums_pb2.FirstSolutionStrategy, self.first_solution_strategy
        )
        search_parameters.local_search_metaheuristic = getattr(
            routing_enums_pb2.LocalSearchMetaheuristic, self.local_search_metaheuristic
        )
        search_parameters.time_limit.FromSeconds(self.time_limit_seconds)

        assignment = routing.SolveWithParameters(search_parameters)
        if not assignment:
            logger.warning("OR-Tools found no sequence, falling back to nearest neighbor")
            return NearestNeighborTour().plan(graph, origin_id, destination_ids)

        order: list[str] = []
        index = routing.Start(0)
        while not routing.IsEnd(index):
            node = manager.IndexToNode(index)
            if node != 0:
                order.append(nodes[node])
            index = assignment.Value(routing.NextVar(index))

        legs: list[float] = []
        current = origin_id
        for destination_id in order:
            leg = shortest_path(graph, current, destination_id).distance
            if not math.isfinite(leg):
                logger.warning(f"No path from {current} to {destination_id} in solver order, falling back to nearest neighbor")
                return NearestNeighborTour().plan(graph, origin_id, destination_ids)
            legs.append(leg)
            current = destination_id

        return TourPlan(route=(origin_id, *order), leg_distances=tuple(legs), unreachable=unreachable)
