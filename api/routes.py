"""API route definitions."""
import logging
import math
from datetime import date, datetime, time, timezone
from typing import Literal, Optional

import httpx
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from core.exposure import estimate_exposure, trip_start
from core.geo import GeoPoint
from core.recommendation import recommend_side
from core.routing import get_route
from core.solar import get_solar_position

router = APIRouter()

_log = logging.getLogger(__name__)

# Roughly once around the equator.
_MAX_DISTANCE_M = 40_000_000


# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------

class Point(BaseModel):
    lat: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    lng: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class _TripTime(BaseModel):
    departure_date: date = Field(..., description="Calendar date of departure")
    departure_time: time = Field(
        ..., description="Wall-clock departure time; naive times are assumed UTC"
    )


class ExposureRequest(_TripTime):
    route: list[Point] = Field(..., description="Route polyline in travel order")
    distance_m: float = Field(
        ...,
        le=_MAX_DISTANCE_M,
        allow_inf_nan=False,
        description="Total route length in meters",
    )


class RecommendRequest(_TripTime):
    origin: Point
    destination: Point
    via: list[Point] = Field(default_factory=list, description="Intermediate stops")


class Exposure(BaseModel):
    left: float
    right: float


class Recommendation(BaseModel):
    side: Optional[Literal["left", "right", "any"]]
    left_pct: int
    right_pct: int
    seats: list[str]
    severity: Literal["success", "warning", "info"]
    summary: str


class RouteInfo(BaseModel):
    distance_km: float
    duration_min: int
    points: list[Point]


class ExposureResponse(BaseModel):
    exposure: Exposure
    recommendation: Recommendation


class RecommendResponse(ExposureResponse):
    route: RouteInfo


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _as_geo(points: list[Point]) -> list[GeoPoint]:
    return [GeoPoint(p.lat, p.lng) for p in points]


def _evaluate(
    route: list[GeoPoint], distance_m: float, body: _TripTime
) -> ExposureResponse:
    start = trip_start(body.departure_date, body.departure_time)
    result = estimate_exposure(route, distance_m, start, solar_position=get_solar_position)
    return ExposureResponse(
        exposure=Exposure(left=result.left, right=result.right),
        recommendation=Recommendation(**recommend_side(result)),
    )


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/sun-position")
def sun_position(
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude"),
    dt: datetime = Query(default=None, description="ISO datetime (UTC); defaults to now"),
):
    if dt is None:
        dt = datetime.now(timezone.utc)
    solar = get_solar_position(dt, lat, lon)
    return {
        "azimuth": round(math.degrees(solar.azimuth), 4),
        "elevation": round(math.degrees(solar.altitude), 4),
    }


# ---------------------------------------------------------------------------
# POST /exposure
# ---------------------------------------------------------------------------

@router.post("/exposure", response_model=ExposureResponse)
def exposure(body: ExposureRequest) -> ExposureResponse:
    """Estimate left/right sun exposure for a route the caller already has."""
    return _evaluate(_as_geo(body.route), body.distance_m, body)


# ---------------------------------------------------------------------------
# POST /recommend
# ---------------------------------------------------------------------------

@router.post("/recommend", response_model=RecommendResponse)
async def recommend(body: RecommendRequest) -> RecommendResponse:
    """
    Full seat-recommendation pipeline:
      1. Fetch the driving route through origin, via points and destination
      2. Estimate left/right sun exposure along it
      3. Return route info, exposure ratios and the seat advice
    """
    waypoints = _as_geo([body.origin, *body.via, body.destination])

    # --- Step 1: routing ---
    try:
        route = await get_route(waypoints)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except httpx.HTTPStatusError as exc:
        raise HTTPException(
            status_code=502,
            detail=f"Routing service returned an unexpected HTTP error: {exc.response.status_code}",
        )
    except httpx.RequestError as exc:
        _log.warning("Routing service unreachable: %s", exc)
        raise HTTPException(
            status_code=503,
            detail="Failed to build route. Check internet connection and selected points.",
        )

    if len(route.points) < 2:
        raise HTTPException(
            status_code=422,
            detail="The route produced no drivable segments. Check the selected points.",
        )

    # --- Step 2 + 3: exposure and advice ---
    evaluated = _evaluate(route.points, route.distance_m, body)

    return RecommendResponse(
        route=RouteInfo(
            distance_km=route.distance_km,
            duration_min=route.duration_min,
            points=[Point(lat=p.lat, lng=p.lng) for p in route.points],
        ),
        exposure=evaluated.exposure,
        recommendation=evaluated.recommendation,
    )
