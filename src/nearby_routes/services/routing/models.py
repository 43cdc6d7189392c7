"""Routing domain models."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ...models.domain import Coordinate

Graph = Dict[str, Dict[str, float]]
"""Adjacency mapping: node id -> neighbor id -> non-negative edge weight in km."""


@dataclass(frozen=True, slots=True)
class ShortestPath:
    distance: float
    path: Tuple[str, ...]

    @property
    def reachable(self) -> bool:
        return math.isfinite(self.distance) and bool(self.path)


UNREACHABLE = ShortestPath(distance=math.inf, path=())


@dataclass(frozen=True, slots=True)
class TourPlan:
    """Visiting order produced by a tour strategy, before coordinates are resolved."""

    route: Tuple[str, ...]
    leg_distances: Tuple[float, ...]
    unreachable: Tuple[str, ...] = ()

    @property
    def total_distance(self) -> float:
        return sum(self.leg_distances)


@dataclass(frozen=True, slots=True)
class RouteStop:
    destination_id: str
    sequence: int
    distance_from_prev_km: float
    cumulative_km: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    route: Tuple[str, ...]
    total_distance: float
    leg_coordinates: Tuple[Coordinate, ...]
    stops: Tuple[RouteStop, ...] = ()
    unreachable: Tuple[str, ...] = ()
    strategy: str = "nearest_neighbor"
    roster_version: Optional[int] = None

    @property
    def destination_count(self) -> int:
        return len(self.route) - 1
