import math
from dataclasses import replace

import pytest

from nearby_routes.models.domain import Coordinate, Destination, Movement
from nearby_routes.services.geospatial import distance_km
from nearby_routes.services.simulation.demo import generate_demo_consumers
from nearby_routes.services.simulation.simulator import (
    SimulationState,
    advance_simulation,
    trajectory_position,
)

CENTER = Coordinate(28.6139, 77.2090)


def _state(roster, **overrides) -> SimulationState:
    params = dict(center=CENTER, roster=tuple(roster), tick_seconds=1.0, radius_degrees=0.004, angle_period_ms=10000.0)
    params.update(overrides)
    return SimulationState(**params)


def _advance(state: SimulationState, ticks: int) -> SimulationState:
    for _ in range(ticks):
        state = advance_simulation(state)
    return state


def test_trajectory_starts_at_phase_seed():
    position = trajectory_position(
        CENTER, Movement(speed=1.0, phase_seed=90.0), 0.0, radius_degrees=0.004, angle_period_ms=10000.0
    )

    assert position.latitude == pytest.approx(CENTER.latitude + 0.004)
    assert position.longitude == pytest.approx(CENTER.longitude)


def test_one_tick_advances_angle_by_speed_scaled_turn():
    mover = Destination(id="m", coordinate=CENTER, movement=Movement(speed=1.0, phase_seed=0.0))

    state = advance_simulation(_state([mover]))

    moved = state.roster[0].coordinate
    assert state.ticks == 1
    assert moved.latitude == pytest.approx(CENTER.latitude + 0.004 * math.sin(math.radians(36.0)))
    assert moved.longitude == pytest.approx(CENTER.longitude + 0.004 * math.cos(math.radians(36.0)))
    assert state.roster[0].distance_km == pytest.approx(distance_km(CENTER, moved))


def test_static_destinations_are_untouched():
    roster = generate_demo_consumers(CENTER)

    state = _advance(_state(roster), 3)

    for before, after in zip(roster, state.roster):
        if before.movement is None:
            assert after is before
        else:
            assert after.coordinate != before.coordinate


def test_advance_returns_new_state_without_mutating_input():
    roster = generate_demo_consumers(CENTER)
    original = _state(roster)

    advanced = advance_simulation(original)

    assert original.ticks == 0
    assert original.roster == roster
    assert advanced is not original


def test_identical_runs_produce_identical_positions():
    first = _advance(_state(generate_demo_consumers(CENTER)), 7)
    second = _advance(_state(generate_demo_consumers(CENTER)), 7)

    assert [d.coordinate for d in first.roster] == [d.coordinate for d in second.roster]


def test_positions_do_not_depend_on_roster_order():
    roster = generate_demo_consumers(CENTER)

    forward = _advance(_state(roster), 5)
    backward = _advance(_state(tuple(reversed(roster))), 5)

    by_id = {d.id: d.coordinate for d in backward.roster}
    for destination in forward.roster:
        assert by_id[destination.id] == destination.coordinate


def test_demo_roster_is_deterministic_and_partly_moving():
    roster = generate_demo_consumers(CENTER)

    assert [d.id for d in roster] == [f"consumer_{i}" for i in range(5)]
    assert [d.is_moving for d in roster] == [False, True, True, False, True]
    assert roster == generate_demo_consumers(CENTER)
    first = roster[0]
    assert first.coordinate == Coordinate(CENTER.latitude + 0.005, CENTER.longitude + 0.003)
    assert first.distance_km == pytest.approx(distance_km(CENTER, first.coordinate))


def test_phase_seed_matches_seeded_bearing():
    mover = generate_demo_consumers(CENTER)[1]

    assert mover.movement.phase_seed == pytest.approx(math.degrees(math.atan2(-0.004, 0.005)))
    assert replace(mover, movement=None).is_moving is False
