"""Route planning: distance graph, shortest paths and tour strategies."""

from .dijkstra import shortest_path
from .graph import build_location_graph
from .models import Graph, RouteResult, RouteStop, ShortestPath, TourPlan
from .planner import NearestNeighborTour, TourStrategy, get_tour_strategy
from .service import plan_route, resolve_origin

__all__ = [
    "Graph",
    "RouteResult",
    "RouteStop",
    "ShortestPath",
    "TourPlan",
    "TourStrategy",
    "NearestNeighborTour",
    "build_location_graph",
    "get_tour_strategy",
    "plan_route",
    "resolve_origin",
    "shortest_path",
]
