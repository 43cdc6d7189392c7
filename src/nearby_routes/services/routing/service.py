"""Routing orchestration service."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import ORIGIN_ID, Coordinate, Destination
from ..geospatial import is_valid_coordinate
from .graph import build_location_graph
from .models import RouteResult
from .planner import TourStrategy, build_route_result, get_tour_strategy

logger = logging.getLogger(__name__)


def resolve_origin(coordinate: Optional[Coordinate]) -> Coordinate:
    """Return the vendor location, or the configured fallback when none is known."""

    if coordinate is not None:
        return coordinate
    fallback = Coordinate(settings.fallback_origin_latitude, settings.fallback_origin_longitude)
    logger.info(f"No vendor location available, using fallback origin {fallback.as_tuple()}")
    return fallback


def _validate_inputs(origin: Coordinate, destinations: Sequence[Destination]) -> None:
    if not is_valid_coordinate(origin):
        raise ValueError(f"Origin coordinate {origin.as_tuple()} is not a finite, in-range coordinate.")

    seen: set[str] = set()
    for destination in destinations:
        if destination.id == ORIGIN_ID:
            raise ValueError(f"Destination id '{ORIGIN_ID}' is reserved for the origin.")
        if destination.id in seen:
            raise ValueError(f"Duplicate destination id '{destination.id}'.")
        seen.add(destination.id)
        if not is_valid_coordinate(destination.coordinate):
            raise ValueError(
                f"Destination '{destination.id}' has invalid coordinate {destination.coordinate.as_tuple()}."
            )


def _resolve_strategy(strategy: TourStrategy | str | None) -> TourStrategy:
    if isinstance(strategy, TourStrategy):
        return strategy
    return get_tour_strategy(strategy or settings.tour_strategy)


def plan_route(
    origin: Coordinate,
    destinations: Sequence[Destination],
    *,
    strategy: TourStrategy | str | None = None,
    roster_version: Optional[int] = None,
) -> RouteResult:
    """Plan a visiting order from the vendor through every consumer.

    The destinations are treated as a snapshot: the graph is built from the
    coordinates they carry at call time and nothing is read afterwards.
    """

    _validate_inputs(origin, destinations)
    planner = _resolve_strategy(strategy)

    graph = build_location_graph(origin, destinations)
    destination_ids = [destination.id for destination in destinations]
    tour = planner.plan(graph, ORIGIN_ID, destination_ids)

    coordinates = {ORIGIN_ID: origin}
    coordinates.update({destination.id: destination.coordinate for destination in destinations})
    result = build_route_result(tour, coordinates, strategy=planner.name, roster_version=roster_version)

    if result.unreachable:
        logger.warning(f"{len(result.unreachable)} destinations unreachable, route is partial: {list(result.unreachable)}")
    logger.info(
        f"Planned route via {planner.name}: {result.destination_count}/{len(destinations)} destinations, "
        f"{result.total_distance:.3f} km"
    )
    return result
