"""Left/right sun exposure along a route."""
import logging
import math
from datetime import date, datetime, time, timedelta
from typing import NamedTuple, Sequence

from core.geo import bearing
from core.solar import SolarPositionProvider, get_solar_position

SEGMENT_KM = 5.0
AVERAGE_SPEED_KMH = 60.0
# Low sun is ignored: below this the glare estimate is unreliable.
MIN_SUN_ALTITUDE_DEG = 10.0
_MIN_SUN_ALTITUDE_RAD = math.radians(MIN_SUN_ALTITUDE_DEG)

_log = logging.getLogger(__name__)


class ExposureResult(NamedTuple):
    """Share of the weighted trip with the sun on each side (0–1)."""

    left: float
    right: float


_NO_EXPOSURE = ExposureResult(0.0, 0.0)


def trip_start(day: date, clock: time) -> datetime:
    """Combine a calendar date with a wall-clock time, dropping seconds."""
    return datetime.combine(day, clock.replace(second=0, microsecond=0))


def estimate_exposure(
    route: Sequence[tuple[float, float]],
    total_distance_m: float,
    start: datetime,
    solar_position: SolarPositionProvider = get_solar_position,
) -> ExposureResult:
    """
    Estimate how much of a trip has the sun on the left vs. right side.

    The trip is sampled every SEGMENT_KM, spread evenly over the polyline
    vertices, at a constant AVERAGE_SPEED_KMH. Each sample whose sun is at
    least MIN_SUN_ALTITUDE_DEG high votes for one side, weighted by the
    share of SEGMENT_KM it covers (the last sample may be partial).

    Args:
        route:            Ordered (lat, lng) points of the path.
        total_distance_m: Route length in meters.
        start:            Departure time, passed to the provider unconverted.
        solar_position:   Callable (instant, lat, lng) -> SolarPosition.

    Returns:
        ExposureResult summing to 1, or (0, 0) when nothing contributed.
        Degenerate input never raises.
    """
    if len(route) < 2 or not math.isfinite(total_distance_m) or total_distance_m <= 0:
        return _NO_EXPOSURE

    total_km = total_distance_m / 1000
    num_segments = math.ceil(total_km / SEGMENT_KM)
    last = len(route) - 1

    left = 0.0
    right = 0.0
    total_weight = 0.0

    for i in range(num_segments):
        index = math.floor((i / num_segments) * last)
        if index >= last:
            break
        anchor = route[index]
        ahead = route[min(index + 1, last)]

        offset_hours = (i * SEGMENT_KM) / AVERAGE_SPEED_KMH
        instant = start + timedelta(hours=offset_hours)

        try:
            sun = solar_position(instant, anchor[0], anchor[1])
        except Exception:
            _log.warning(
                "Solar lookup failed for segment %d at (%.4f, %.4f); skipping.",
                i, anchor[0], anchor[1],
            )
            continue

        # Exactly MIN_SUN_ALTITUDE_DEG still counts.
        if sun.altitude < _MIN_SUN_ALTITUDE_RAD:
            continue

        azimuth = (math.degrees(sun.azimuth) + 360) % 360
        heading = bearing(anchor, ahead)
        relative_angle = (azimuth - heading + 360) % 360

        weight = min(SEGMENT_KM, total_km - i * SEGMENT_KM) / SEGMENT_KM

        # 90 and 270 exactly count as right.
        if 90 < relative_angle < 270:
            left += weight
        else:
            right += weight
        total_weight += weight

    _log.debug(
        "Exposure over %d segments: left=%.3f right=%.3f weight=%.3f",
        num_segments, left, right, total_weight,
    )

    if total_weight <= 0:
        return _NO_EXPOSURE
    return ExposureResult(left / total_weight, right / total_weight)
