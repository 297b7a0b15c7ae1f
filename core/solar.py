"""Solar position lookups using pvlib."""
import math
from datetime import datetime
from typing import NamedTuple, Protocol

import pandas as pd
import pvlib


class SolarPosition(NamedTuple):
    """Sun direction for one place and instant, both angles in radians."""

    azimuth: float   # clockwise from true north
    altitude: float  # above the horizon; negative at night


class SolarPositionProvider(Protocol):
    def __call__(self, instant: datetime, lat: float, lng: float) -> SolarPosition: ...


def get_solar_position(instant: datetime, lat: float, lng: float) -> SolarPosition:
    """
    Return the solar position for a location and instant.

    Args:
        instant: Point in time. Naive datetimes are assumed UTC.
        lat: Latitude in decimal degrees.
        lng: Longitude in decimal degrees.

    Returns:
        SolarPosition with azimuth and apparent elevation in radians.
    """
    ts = pd.Timestamp(instant)
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    times = pd.DatetimeIndex([ts])
    location = pvlib.location.Location(latitude=lat, longitude=lng)
    solar_pos = location.get_solarposition(times)
    return SolarPosition(
        azimuth=math.radians(float(solar_pos["azimuth"].iloc[0])),
        altitude=math.radians(float(solar_pos["apparent_elevation"].iloc[0])),
    )
