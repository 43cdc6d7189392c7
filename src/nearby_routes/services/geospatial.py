"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..config import settings
from ..models.domain import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float, radius_km: float | None = None) -> float:
    """Compute distance between two coordinates using the Haversine formula.

    Never raises: non-finite inputs give NaN, and rounding near antipodal
    points is clamped so the result stays at most half the circumference.
    """

    if not all(math.isfinite(value) for value in (lat1, lon1, lat2, lon2)):
        return math.nan

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return (radius_km or EARTH_RADIUS_KM) * c


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates with the configured Earth radius."""

    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude, settings.earth_radius_km)


def is_valid_coordinate(coordinate: Coordinate) -> bool:
    """Return True if both components are finite and within their geographic range."""

    lat, lon = coordinate.latitude, coordinate.longitude
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0
