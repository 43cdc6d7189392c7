"""Position simulator for moving consumers.

Each tick is a pure step: it takes a ``SimulationState`` and returns a new one
with an advanced clock and a fresh roster tuple. Positions depend only on the
simulation clock and each consumer's own movement, never on wall-clock time or
on the other consumers, so two runs with the same inputs agree exactly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from ...config import settings
from ...models.domain import Coordinate, Destination, Movement
from ..geospatial import distance_km


@dataclass(frozen=True, slots=True)
class SimulationState:
    center: Coordinate
    roster: tuple[Destination, ...]
    ticks: int = 0
    tick_seconds: float = 1.0
    radius_degrees: float = 0.004
    angle_period_ms: float = 10000.0

    @property
    def elapsed_ms(self) -> float:
        return self.ticks * self.tick_seconds * 1000.0


def new_simulation_state(center: Coordinate, roster: tuple[Destination, ...]) -> SimulationState:
    return SimulationState(
        center=center,
        roster=roster,
        tick_seconds=settings.simulation_tick_seconds,
        radius_degrees=settings.simulation_radius_degrees,
        angle_period_ms=settings.simulation_angle_period_ms,
    )


def trajectory_position(
    center: Coordinate,
    movement: Movement,
    elapsed_ms: float,
    *,
    radius_degrees: float,
    angle_period_ms: float,
) -> Coordinate:
    """Point on the circle around ``center`` after ``elapsed_ms`` of simulated time."""

    angle = movement.phase_seed + (elapsed_ms / angle_period_ms) * movement.speed * 360.0
    radians = math.radians(angle)
    return Coordinate(
        center.latitude + radius_degrees * math.sin(radians),
        center.longitude + radius_degrees * math.cos(radians),
    )


def advance_simulation(state: SimulationState) -> SimulationState:
    """Advance the clock by one tick and move every moving consumer."""

    advanced = replace(state, ticks=state.ticks + 1)
    elapsed_ms = advanced.elapsed_ms
    roster: list[Destination] = []
    for destination in state.roster:
        if destination.movement is None:
            roster.append(destination)
            continue
        coordinate = trajectory_position(
            state.center,
            destination.movement,
            elapsed_ms,
            radius_degrees=state.radius_degrees,
            angle_period_ms=state.angle_period_ms,
        )
        roster.append(
            replace(destination, coordinate=coordinate, distance_km=distance_km(state.center, coordinate))
        )
    return replace(advanced, roster=tuple(roster))
