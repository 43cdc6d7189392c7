from nearby_routes.models.domain import ORIGIN_ID, Coordinate, Destination
from nearby_routes.services.geospatial import distance_km
from nearby_routes.services.routing.graph import build_location_graph


def _destination(did: str, lat: float, lon: float) -> Destination:
    return Destination(id=did, coordinate=Coordinate(lat, lon))


def test_graph_is_complete_and_symmetric():
    origin = Coordinate(28.6139, 77.2090)
    destinations = [
        _destination("consumer_0", 28.6189, 77.2120),
        _destination("consumer_1", 28.6099, 77.2140),
        _destination("consumer_2", 28.6199, 77.2050),
    ]

    graph = build_location_graph(origin, destinations)

    nodes = [ORIGIN_ID, "consumer_0", "consumer_1", "consumer_2"]
    assert sorted(graph) == sorted(nodes)
    for a in nodes:
        assert a not in graph[a]
        for b in nodes:
            if a != b:
                assert graph[a][b] == graph[b][a]
    assert graph[ORIGIN_ID]["consumer_0"] == distance_km(origin, destinations[0].coordinate)


def test_graph_without_destinations_has_single_node():
    graph = build_location_graph(Coordinate(0.0, 0.0), [])
    assert graph == {ORIGIN_ID: {}}


def test_graph_uses_supplied_distance_function():
    graph = build_location_graph(
        Coordinate(0.0, 0.0),
        [_destination("a", 0.0, 1.0)],
        distance=lambda a, b: 7.0,
    )
    assert graph[ORIGIN_ID]["a"] == 7.0
    assert graph["a"] == {ORIGIN_ID: 7.0}
