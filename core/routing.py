"""Routing: fetch a driving route from OSRM and convert it to a polyline."""
import logging
import os
from typing import NamedTuple, Optional, Sequence

import httpx
from dotenv import load_dotenv

from core.geo import GeoPoint

load_dotenv()

_DEFAULT_OSRM_URL = "https://router.project-osrm.org"

_log = logging.getLogger(__name__)


class Route(NamedTuple):
    points: list[GeoPoint]
    distance_m: float
    duration_s: float

    @property
    def distance_km(self) -> float:
        return round(self.distance_m / 1000, 1)

    @property
    def duration_min(self) -> int:
        return round(self.duration_s / 60)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _osrm_base_url(base_url: Optional[str]) -> str:
    return (base_url or os.getenv("OSRM_BASE_URL") or _DEFAULT_OSRM_URL).rstrip("/")


def _osrm_timeout() -> float:
    return float(os.getenv("OSRM_TIMEOUT", "10"))


def _coords_param(waypoints: Sequence[tuple[float, float]]) -> str:
    """OSRM wants "lng,lat" pairs joined by semicolons."""
    return ";".join(f"{lng},{lat}" for lat, lng in waypoints)


def _decode_geojson(coordinates: list[list[float]]) -> list[GeoPoint]:
    """Flip GeoJSON [lng, lat] positions into (lat, lng) points."""
    return [GeoPoint(lat=c[1], lng=c[0]) for c in coordinates]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

async def get_route(
    waypoints: Sequence[tuple[float, float]],
    base_url: Optional[str] = None,
) -> Route:
    """
    Fetch a driving route through the given waypoints.

    Args:
        waypoints: (lat, lng) points in travel order: start, any via
                   points, end.
        base_url:  OSRM server. Falls back to the OSRM_BASE_URL environment
                   variable / .env file, then to the public demo server.

    Raises:
        ValueError: Fewer than two waypoints, or OSRM returned no route.
        httpx.HTTPStatusError: On HTTP-level errors.
    """
    if len(waypoints) < 2:
        raise ValueError("A route needs at least a start and an end point.")

    url = f"{_osrm_base_url(base_url)}/route/v1/driving/{_coords_param(waypoints)}"
    params = {"overview": "full", "geometries": "geojson"}
    _log.debug("Requesting OSRM route: %s", url)

    async with httpx.AsyncClient(timeout=_osrm_timeout()) as client:
        response = await client.get(url, params=params)
        # OSRM reports NoRoute / InvalidQuery as 400 with a JSON body.
        if response.status_code != 400:
            response.raise_for_status()
        try:
            data = response.json()
        except ValueError as exc:
            raise ValueError(
                f"Routing error: unreadable response from routing service "
                f"(HTTP {response.status_code})"
            ) from exc

    code = data.get("code")
    if code != "Ok":
        raise ValueError(
            f"Routing error: {code} ({data.get('message', 'no details')})"
        )
    if not data.get("routes"):
        raise ValueError("Routing error: route not found")

    best = data["routes"][0]
    return Route(
        points=_decode_geojson(best["geometry"]["coordinates"]),
        distance_m=float(best["distance"]),
        duration_s=float(best["duration"]),
    )
