"""Deterministic demo roster used when the simulation starts without consumers."""

from __future__ import annotations

import math

from ...models.domain import Coordinate, Destination, Movement
from ..geospatial import distance_km

# (id, name, address, lat offset, lon offset, orders, value, phone, speed or None)
DEMO_CONSUMERS = (
    ("consumer_0", "Raj Kumar", "Connaught Place, Delhi", 0.005, 0.003, 3, 5500, "+91 9876543210", None),
    ("consumer_1", "Priya Sharma", "Karol Bagh, Delhi", -0.004, 0.005, 2, 3200, "+91 9876543211", 1.0),
    ("consumer_2", "Amit Patel", "Rohini, Delhi", 0.006, -0.004, 5, 8900, "+91 9876543212", 0.8),
    ("consumer_3", "Sneha Gupta", "Janakpuri, Delhi", -0.003, -0.006, 1, 1500, "+91 9876543213", None),
    ("consumer_4", "Vikram Singh", "Dwarka, Delhi", 0.002, 0.007, 4, 6700, "+91 9876543214", 1.2),
)


def generate_demo_consumers(origin: Coordinate) -> tuple[Destination, ...]:
    """Place the demo consumers around ``origin``.

    Moving consumers start their circle at the bearing of their seeded offset.
    """

    consumers: list[Destination] = []
    for cid, name, address, d_lat, d_lon, orders, value, phone, speed in DEMO_CONSUMERS:
        coordinate = Coordinate(origin.latitude + d_lat, origin.longitude + d_lon)
        movement = None
        if speed is not None:
            movement = Movement(speed=speed, phase_seed=math.degrees(math.atan2(d_lat, d_lon)))
        consumers.append(
            Destination(
                id=cid,
                coordinate=coordinate,
                movement=movement,
                name=name,
                address=address,
                order_count=orders,
                total_value=float(value),
                phone=phone,
                distance_km=distance_km(origin, coordinate),
            )
        )
    return tuple(consumers)
