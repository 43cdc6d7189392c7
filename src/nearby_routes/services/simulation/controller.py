"""Route controller: owns the roster snapshot, the simulation and the last route.

Planning never happens implicitly. Simulation ticks replace the roster with a
new snapshot version, and the last route result keeps the version it was
computed from, so ``is_stale`` reports when the displayed route no longer
matches live positions. Callers replan explicitly with ``refresh``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence

from ...models.domain import Coordinate, Destination, RosterSnapshot
from ..routing.models import RouteResult
from ..routing.planner import TourStrategy
from ..routing.service import plan_route, resolve_origin
from .demo import generate_demo_consumers
from .simulator import SimulationState, advance_simulation, new_simulation_state

logger = logging.getLogger(__name__)


class SimulationStatus(Enum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"


class SimulationStateError(RuntimeError):
    """Raised for a simulation transition that the state machine does not allow."""


class RouteController:
    def __init__(self, strategy: TourStrategy | str | None = None) -> None:
        self.strategy = strategy
        self._status = SimulationStatus.IDLE
        self._snapshot: Optional[RosterSnapshot] = None
        self._simulation: Optional[SimulationState] = None
        self._last_result: Optional[RouteResult] = None
        self._version = 0

    @property
    def status(self) -> SimulationStatus:
        return self._status

    @property
    def snapshot(self) -> Optional[RosterSnapshot]:
        return self._snapshot

    @property
    def roster(self) -> tuple[Destination, ...]:
        return self._snapshot.destinations if self._snapshot else ()

    @property
    def last_result(self) -> Optional[RouteResult]:
        return self._last_result

    @property
    def total_distance(self) -> float:
        return self._last_result.total_distance if self._last_result else 0.0

    @property
    def is_stale(self) -> bool:
        if self._last_result is None or self._snapshot is None:
            return False
        return self._last_result.roster_version != self._snapshot.version

    def _commit(self, origin: Coordinate, destinations: Sequence[Destination]) -> RosterSnapshot:
        self._version += 1
        self._snapshot = RosterSnapshot(version=self._version, origin=origin, destinations=tuple(destinations))
        return self._snapshot

    def _plan_candidate(self, origin: Coordinate, destinations: Sequence[Destination]) -> RouteResult:
        """Plan a roster that has not been published yet, as the next version.

        Raises ValueError without touching any controller state.
        """

        return plan_route(origin, destinations, strategy=self.strategy, roster_version=self._version + 1)

    def load_roster(self, origin: Optional[Coordinate], destinations: Sequence[Destination]) -> RouteResult:
        """Adopt an externally supplied roster and plan it immediately.

        A rejected roster leaves the previous snapshot and route in place.
        """

        if self._status is SimulationStatus.RUNNING:
            raise SimulationStateError("Stop the simulation before loading an external roster.")
        origin = resolve_origin(origin)
        result = self._plan_candidate(origin, destinations)
        self._commit(origin, destinations)
        self._last_result = result
        return result

    def refresh(self) -> Optional[RouteResult]:
        """Replan the current snapshot; returns None when there is no roster yet."""

        snapshot = self._snapshot
        if snapshot is None:
            return None
        self._last_result = plan_route(
            snapshot.origin,
            snapshot.destinations,
            strategy=self.strategy,
            roster_version=snapshot.version,
        )
        return self._last_result

    def start_simulation(
        self,
        origin: Optional[Coordinate] = None,
        roster: Optional[Sequence[Destination]] = None,
    ) -> tuple[Destination, ...]:
        if self._status is SimulationStatus.RUNNING:
            raise SimulationStateError("Simulation is already running.")

        center = resolve_origin(origin)
        destinations = tuple(roster) if roster is not None else generate_demo_consumers(center)
        result = self._plan_candidate(center, destinations)

        self._simulation = new_simulation_state(center, destinations)
        self._commit(center, destinations)
        self._last_result = result
        self._status = SimulationStatus.RUNNING
        logger.info(f"Simulation started with {len(destinations)} consumers around {center.as_tuple()}")
        return destinations

    def stop_simulation(self) -> None:
        if self._status is SimulationStatus.IDLE:
            return
        self._status = SimulationStatus.IDLE
        self._simulation = None
        self._snapshot = None
        self._last_result = None
        self._version = 0
        logger.info("Simulation stopped, roster and route cleared")

    def tick(self) -> None:
        """Advance moving consumers by one step. Does not replan."""

        if self._status is not SimulationStatus.RUNNING or self._simulation is None:
            logger.debug("Tick ignored while idle")
            return
        self._simulation = advance_simulation(self._simulation)
        self._commit(self._simulation.center, self._simulation.roster)
        logger.debug(f"Tick {self._simulation.ticks}: roster version {self._version}")

    @property
    def ticks(self) -> int:
        return self._simulation.ticks if self._simulation else 0
