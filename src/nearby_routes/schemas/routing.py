"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import Coordinate, Destination, Movement


class CoordinateModel(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    def to_domain(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class MovementModel(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    speed: float
    phase_seed: float = 0.0


class DestinationModel(BaseModel):
    """A consumer to visit. Coordinates are validated before they reach the planner."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    movement: Optional[MovementModel] = None
    name: Optional[str] = None
    address: Optional[str] = None
    order_count: int = Field(default=0, ge=0)
    total_value: float = Field(default=0.0, ge=0.0)
    phone: Optional[str] = None

    def to_domain(self) -> Destination:
        movement = Movement(self.movement.speed, self.movement.phase_seed) if self.movement else None
        return Destination(
            id=self.id,
            coordinate=Coordinate(self.latitude, self.longitude),
            movement=movement,
            name=self.name,
            address=self.address,
            order_count=self.order_count,
            total_value=self.total_value,
            phone=self.phone,
        )


class RoutePlanRequest(BaseModel):
    origin: Optional[CoordinateModel] = Field(
        default=None,
        description="Vendor location. The configured fallback is used when omitted.",
    )
    destinations: List[DestinationModel] = Field(default_factory=list)
    strategy: Optional[Literal["nearest_neighbor", "ortools"]] = None


class RosterLoadRequest(BaseModel):
    origin: Optional[CoordinateModel] = None
    consumers: List[dict] = Field(
        default_factory=list,
        description="Nearby-consumer records as returned by the vendor backend.",
    )


class RouteStopModel(BaseModel):
    destination_id: str
    sequence: int
    distance_from_prev_km: float
    cumulative_km: float


class RouteResultModel(BaseModel):
    route: List[str]
    total_distance_km: float
    distance_label: str
    strategy: str
    roster_version: Optional[int] = None
    unreachable: List[str]
    leg_coordinates: List[CoordinateModel]
    stops: List[RouteStopModel]
    metadata: dict
    stale: bool = False
