"""Geographic primitives: points and initial bearing between them."""
import math
from typing import NamedTuple


class GeoPoint(NamedTuple):
    """A (lat, lng) pair in decimal degrees."""

    lat: float
    lng: float


def bearing(start: tuple[float, float], end: tuple[float, float]) -> float:
    """
    Compute the initial great-circle bearing (0–360°, clockwise from north)
    from start to end.
    """
    lat1_r = math.radians(start[0])
    lat2_r = math.radians(end[0])
    dlng_r = math.radians(end[1] - start[1])

    x = math.sin(dlng_r) * math.cos(lat2_r)
    y = (math.cos(lat1_r) * math.sin(lat2_r)
         - math.sin(lat1_r) * math.cos(lat2_r) * math.cos(dlng_r))

    return (math.degrees(math.atan2(x, y)) + 360) % 360
