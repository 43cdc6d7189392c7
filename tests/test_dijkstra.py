import math

from nearby_routes.services.routing.dijkstra import shortest_distances, shortest_path


def test_prefers_indirect_path_when_shorter():
    graph = {
        "s": {"a": 1.0, "t": 10.0},
        "a": {"s": 1.0, "t": 2.0},
        "t": {"s": 10.0, "a": 2.0},
    }

    result = shortest_path(graph, "s", "t")

    assert result.distance == 3.0
    assert result.path == ("s", "a", "t")
    assert result.reachable


def test_ties_resolve_to_lowest_node_id():
    graph = {
        "s": {"b": 1.0, "a": 1.0},
        "a": {"t": 1.0},
        "b": {"t": 1.0},
        "t": {},
    }

    assert shortest_path(graph, "s", "t").path == ("s", "a", "t")


def test_disconnected_target_is_unreachable():
    graph = {"s": {"a": 1.0}, "a": {"s": 1.0}, "island": {}}

    result = shortest_path(graph, "s", "island")

    assert math.isinf(result.distance)
    assert result.path == ()
    assert not result.reachable


def test_edges_are_directed():
    graph = {"a": {"b": 4.0}, "b": {}}

    assert shortest_path(graph, "a", "b").distance == 4.0
    assert math.isinf(shortest_path(graph, "b", "a").distance)


def test_unknown_nodes_are_unreachable():
    graph = {"a": {"b": 1.0}, "b": {"a": 1.0}}

    assert shortest_path(graph, "a", "zzz").path == ()
    assert shortest_path(graph, "zzz", "a").path == ()


def test_source_equals_target():
    graph = {"a": {"b": 1.0}, "b": {"a": 1.0}}

    result = shortest_path(graph, "a", "a")

    assert result.distance == 0.0
    assert result.path == ("a",)


def test_deterministic_for_fixed_graph():
    graph = {
        "s": {"a": 2.0, "b": 2.0, "c": 1.0},
        "a": {"t": 1.0},
        "b": {"t": 1.0},
        "c": {"t": 2.0},
        "t": {},
    }

    first = shortest_path(graph, "s", "t")
    second = shortest_path(graph, "s", "t")

    assert first == second
    assert first.distance == 3.0
    assert first.path == ("s", "c", "t")


def test_shortest_distances_reports_inf_for_missing_targets():
    graph = {"s": {"a": 1.5}, "a": {}, "b": {}}

    assert shortest_distances(graph, "s", ["a", "b"]) == {"a": 1.5, "b": math.inf}
