"""Great-circle helpers shared by route generation and flood checks."""
from __future__ import annotations

from math import atan2, cos, pi, sin, sqrt
from typing import Sequence

from rain_alert.core.models import Coordinate

EARTH_RADIUS_KM = 6371.0


def to_radians(deg: float) -> float:
    return deg * (pi / 180.0)


def distance(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in kilometres between two WGS-84 points."""
    dlat = to_radians(b.latitude - a.latitude)
    dlon = to_radians(b.longitude - a.longitude)
    h = (
        sin(dlat / 2) ** 2
        + cos(to_radians(a.latitude)) * cos(to_radians(b.latitude)) * sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * atan2(sqrt(h), sqrt(1 - h))


def total_distance(coords: Sequence[Coordinate]) -> float:
    """Length in kilometres of the polyline through ``coords``."""
    km = 0.0
    for i in range(len(coords) - 1):
        km += distance(coords[i], coords[i + 1])
    return km


def shifted(p: Coordinate, dlat: float, dlon: float) -> Coordinate:
    """Offset ``p`` by degrees; latitude is clamped at the poles and longitude wraps at 180."""
    lat = max(-90.0, min(90.0, p.latitude + dlat))
    lon = p.longitude + dlon
    if lon > 180.0 or lon < -180.0:
        lon = (lon + 180.0) % 360.0 - 180.0
    return Coordinate(latitude=lat, longitude=lon)
