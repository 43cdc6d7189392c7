"""Serializers for routing outputs."""

from __future__ import annotations

from dataclasses import asdict

from ..routing.models import RouteResult


def distance_label(total_distance_km: float) -> str:
    return f"Optimal Route: {total_distance_km:.1f} km"


def route_overlay(result: RouteResult, route_id: str = "vendor_route") -> dict:
    """Straight-line polyline of the route as ``[lat, lon]`` pairs."""

    return {
        "route_id": route_id,
        "coordinates": [[coord.latitude, coord.longitude] for coord in result.leg_coordinates],
        "source": "straight_line",
    }


def route_result_to_json(result: RouteResult) -> dict:
    return {
        "route": list(result.route),
        "total_distance_km": result.total_distance,
        "distance_label": distance_label(result.total_distance),
        "strategy": result.strategy,
        "roster_version": result.roster_version,
        "unreachable": list(result.unreachable),
        "leg_coordinates": [asdict(coord) for coord in result.leg_coordinates],
        "stops": [asdict(stop) for stop in result.stops],
        "metadata": {"map_overlays": {"routes": [route_overlay(result)]}},
    }


def route_result_to_geojson(result: RouteResult) -> dict:
    """FeatureCollection with the route line and one point per node, in GeoJSON lon/lat order."""

    features: list[dict] = [
        {
            "type": "Feature",
            "geometry": {
                "type": "LineString",
                "coordinates": [[coord.longitude, coord.latitude] for coord in result.leg_coordinates],
            },
            "properties": {
                "kind": "route",
                "strategy": result.strategy,
                "total_distance_km": result.total_distance,
            },
        }
    ]
    stops = {stop.destination_id: stop for stop in result.stops}
    for node_id, coord in zip(result.route, result.leg_coordinates):
        stop = stops.get(node_id)
        features.append(
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [coord.longitude, coord.latitude]},
                "properties": {
                    "kind": "stop" if stop else "origin",
                    "id": node_id,
                    "sequence": stop.sequence if stop else 0,
                    "distance_from_prev_km": stop.distance_from_prev_km if stop else 0.0,
                },
            }
        )
    return {"type": "FeatureCollection", "features": features}
