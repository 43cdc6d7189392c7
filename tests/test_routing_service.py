import math

import pytest

from nearby_routes.config import settings
from nearby_routes.models.domain import ORIGIN_ID, Coordinate, Destination
from nearby_routes.services.routing import service as routing_service
from nearby_routes.services.routing.planner import NearestNeighborTour
from nearby_routes.services.routing.service import plan_route, resolve_origin


def _destination(did: str, lat: float, lon: float) -> Destination:
    return Destination(id=did, coordinate=Coordinate(lat, lon))


@pytest.fixture
def delhi_roster() -> list[Destination]:
    return [
        _destination("consumer_0", 28.6189, 77.2120),
        _destination("consumer_1", 28.6099, 77.2140),
        _destination("consumer_2", 28.6199, 77.2050),
        _destination("consumer_3", 28.6109, 77.2030),
    ]


def test_plan_route_visits_every_destination_once(delhi_roster):
    origin = Coordinate(28.6139, 77.2090)

    result = plan_route(origin, delhi_roster)

    assert result.route[0] == ORIGIN_ID
    assert sorted(result.route[1:]) == sorted(d.id for d in delhi_roster)
    assert len(result.leg_coordinates) == len(result.route)
    assert result.leg_coordinates[0] == origin
    assert result.unreachable == ()
    assert result.total_distance == pytest.approx(sum(stop.distance_from_prev_km for stop in result.stops))
    assert result.strategy == "nearest_neighbor"


def test_plan_route_is_idempotent(delhi_roster):
    origin = Coordinate(28.6139, 77.2090)

    first = plan_route(origin, delhi_roster)
    second = plan_route(origin, delhi_roster)

    assert first.route == second.route
    assert first.total_distance == second.total_distance


def test_plan_route_without_destinations():
    origin = Coordinate(28.6139, 77.2090)

    result = plan_route(origin, [])

    assert result.route == (ORIGIN_ID,)
    assert result.total_distance == 0
    assert result.leg_coordinates == (origin,)
    assert result.stops == ()


def test_plan_route_rejects_non_finite_coordinates():
    with pytest.raises(ValueError, match="invalid coordinate"):
        plan_route(Coordinate(0.0, 0.0), [_destination("bad", math.nan, 0.0)])
    with pytest.raises(ValueError, match="Origin"):
        plan_route(Coordinate(math.inf, 0.0), [])


def test_plan_route_rejects_duplicate_and_reserved_ids():
    origin = Coordinate(0.0, 0.0)
    with pytest.raises(ValueError, match="Duplicate"):
        plan_route(origin, [_destination("a", 0.0, 0.1), _destination("a", 0.0, 0.2)])
    with pytest.raises(ValueError, match="reserved"):
        plan_route(origin, [_destination(ORIGIN_ID, 0.0, 0.1)])


def test_plan_route_uses_configured_strategy(monkeypatch, delhi_roster):
    calls = []

    class Recording(NearestNeighborTour):
        name = "recording"

        def plan(self, graph, origin_id, destination_ids):
            calls.append(list(destination_ids))
            return super().plan(graph, origin_id, destination_ids)

    monkeypatch.setattr(routing_service, "get_tour_strategy", lambda name: Recording())

    result = plan_route(Coordinate(28.6139, 77.2090), delhi_roster)

    assert calls == [[d.id for d in delhi_roster]]
    assert result.strategy == "recording"


def test_resolve_origin_falls_back_to_configured_location():
    fallback = resolve_origin(None)
    assert fallback == Coordinate(settings.fallback_origin_latitude, settings.fallback_origin_longitude)

    supplied = Coordinate(1.0, 2.0)
    assert resolve_origin(supplied) is supplied
