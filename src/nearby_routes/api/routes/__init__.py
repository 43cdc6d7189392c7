"""Route group exports."""

from . import health, routes, simulation

__all__ = ["health", "routes", "simulation"]
