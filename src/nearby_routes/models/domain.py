"""Domain models for the vendor origin and consumer destinations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

ORIGIN_ID = "vendor"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Movement:
    """Parameters of a circular trajectory around the simulation center.

    ``speed`` scales how fast the angle advances with elapsed time and
    ``phase_seed`` is the starting angle in degrees.
    """

    speed: float
    phase_seed: float = 0.0


@dataclass(frozen=True, slots=True)
class Destination:
    """A consumer to visit, enriched with the metadata the vendor screen shows."""

    id: str
    coordinate: Coordinate
    movement: Optional[Movement] = None
    name: Optional[str] = None
    address: Optional[str] = None
    order_count: int = 0
    total_value: float = 0.0
    phone: Optional[str] = None
    distance_km: float = 0.0
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_moving(self) -> bool:
        return self.movement is not None


@dataclass(frozen=True, slots=True)
class RosterSnapshot:
    """Immutable view of the origin and destinations at one roster version."""

    version: int
    origin: Coordinate
    destinations: tuple[Destination, ...] = ()
