"""Simulation request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from ..models.domain import Destination, RosterSnapshot
from .routing import CoordinateModel


class SimulationStartRequest(BaseModel):
    origin: Optional[CoordinateModel] = None


class ConsumerModel(BaseModel):
    id: str
    name: Optional[str] = None
    address: Optional[str] = None
    latitude: float
    longitude: float
    is_moving: bool
    order_count: int
    total_value: float
    phone: Optional[str] = None
    distance_km: float

    @classmethod
    def from_domain(cls, destination: Destination) -> "ConsumerModel":
        return cls(
            id=destination.id,
            name=destination.name,
            address=destination.address,
            latitude=destination.coordinate.latitude,
            longitude=destination.coordinate.longitude,
            is_moving=destination.is_moving,
            order_count=destination.order_count,
            total_value=destination.total_value,
            phone=destination.phone,
            distance_km=destination.distance_km,
        )


class RosterResponse(BaseModel):
    status: str
    version: int
    ticks: int
    summary: str
    origin: Optional[CoordinateModel] = None
    consumers: List[ConsumerModel]

    @classmethod
    def build(cls, status: str, ticks: int, snapshot: Optional[RosterSnapshot]) -> "RosterResponse":
        consumers = snapshot.destinations if snapshot else ()
        count = len(consumers)
        mode = "(Demo)" if status == "RUNNING" else "with active orders"
        return cls(
            status=status,
            version=snapshot.version if snapshot else 0,
            ticks=ticks,
            summary=f"{count} consumer{'' if count == 1 else 's'} {mode}",
            origin=CoordinateModel(latitude=snapshot.origin.latitude, longitude=snapshot.origin.longitude)
            if snapshot
            else None,
            consumers=[ConsumerModel.from_domain(destination) for destination in consumers],
        )


class SimulationStatusResponse(BaseModel):
    status: str
    ticks: int
    ticker_running: bool
    roster_version: int
    stale: bool
    total_distance_km: float
