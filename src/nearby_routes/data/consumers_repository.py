"""Data access helpers for turning nearby-consumer records into destinations."""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from ..models.domain import Coordinate, Destination
from ..services.geospatial import distance_km, is_valid_coordinate

logger = logging.getLogger(__name__)


def _coerce_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).replace(",", ""))
    except ValueError as exc:
        raise ValueError(f"Unable to parse float from value '{value}'") from exc


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None and value != "":
            return value
    return None


def _text(record: Mapping[str, Any], *keys: str) -> Optional[str]:
    value = _first(record, *keys)
    if value is None:
        return None
    return str(value).strip() or None


def destination_from_record(record: Mapping[str, Any], index: int, origin: Coordinate) -> Optional[Destination]:
    """Map one consumer record to a static destination, or None without usable coordinates."""

    lat = _coerce_float(_first(record, "latitude", "Latitude", "lat"))
    lon = _coerce_float(_first(record, "longitude", "Longitude", "lng", "lon"))
    if lat is None or lon is None:
        return None
    coordinate = Coordinate(lat, lon)
    if not is_valid_coordinate(coordinate):
        return None

    raw_id = _text(record, "id", "consumer_id", "ConsumerId")
    distance = _coerce_float(_first(record, "distance", "distance_km"))
    if distance is None or not math.isfinite(distance):
        distance = distance_km(origin, coordinate)

    return Destination(
        id=f"consumer_{raw_id or index}",
        coordinate=coordinate,
        name=_text(record, "name", "Name") or f"Consumer {index + 1}",
        address=_text(record, "address", "Address") or "Unknown Address",
        order_count=int(_coerce_float(_first(record, "activeOrders", "order_count", "orderCount")) or 0),
        total_value=_coerce_float(_first(record, "orderValue", "total_value", "totalValue")) or 0.0,
        phone=_text(record, "phone", "Phone"),
        distance_km=distance,
        raw=dict(record),
    )


def destinations_from_records(records: Iterable[Mapping[str, Any]], origin: Coordinate) -> list[Destination]:
    """Convert consumer records, skipping any without finite in-range coordinates."""

    destinations: list[Destination] = []
    skipped = 0
    for index, record in enumerate(records):
        destination = destination_from_record(record, index, origin)
        if destination is None:
            skipped += 1
            continue
        destinations.append(destination)
    if skipped:
        logger.warning(f"Skipped {skipped} consumer records without valid coordinates")
    return destinations


def load_roster_csv(path: Path, origin: Coordinate) -> list[Destination]:
    """Load a consumer roster from a CSV file."""

    if not path.exists():
        raise FileNotFoundError(f"Roster file not found: {path}")

    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"Roster file '{path}' is missing a header row.")
        rows = list(reader)
    logger.info(f"Read {len(rows)} consumer rows from {path}")
    return destinations_from_records(rows, origin)
