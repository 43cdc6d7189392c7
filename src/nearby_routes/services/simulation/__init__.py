"""Moving-consumer simulation and route controller."""

from .controller import RouteController, SimulationStateError, SimulationStatus
from .demo import generate_demo_consumers
from .simulator import SimulationState, advance_simulation, trajectory_position
from .ticker import SimulationTicker

__all__ = [
    "RouteController",
    "SimulationStateError",
    "SimulationStatus",
    "SimulationState",
    "SimulationTicker",
    "advance_simulation",
    "generate_demo_consumers",
    "trajectory_position",
]
