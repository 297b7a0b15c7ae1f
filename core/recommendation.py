"""Seat recommendation: turn left/right exposure into seat advice."""
import math
from typing import Literal, Optional

from core.exposure import ExposureResult

# One side must beat the other by more than this many percentage points.
SIDE_MARGIN_PCT = 20

SEATS: dict[str, tuple[str, ...]] = {
    "left": ("A", "C"),
    "right": ("B", "D"),
}


def _percent(ratio: float) -> int:
    """Ratio (0-1) as a whole percentage, rounding halves up."""
    return math.floor(ratio * 100 + 0.5)


def recommend_side(exposure: ExposureResult) -> dict:
    """
    Pick the shadier side of the vehicle.

    Returns a dict with:
        side      – "left", "right", "any" (no clear winner) or None (no sun)
        left_pct  – int, left exposure in percent
        right_pct – int, right exposure in percent
        seats     – list of seat labels on the recommended side
        severity  – "success", "warning" or "info"
        summary   – human-readable advice
    """
    if exposure.left == 0 and exposure.right == 0:
        return {
            "side": None,
            "left_pct": 0,
            "right_pct": 0,
            "seats": [],
            "severity": "info",
            "summary": "No sun exposure during your trip - any seat is good!",
        }

    left_pct = _percent(exposure.left)
    right_pct = _percent(exposure.right)

    side: Optional[Literal["left", "right"]] = None
    if left_pct > right_pct + SIDE_MARGIN_PCT:
        side = "right"
        shaded, sunny = right_pct, left_pct
    elif right_pct > left_pct + SIDE_MARGIN_PCT:
        side = "left"
        shaded, sunny = left_pct, right_pct

    if side is None:
        return {
            "side": "any",
            "left_pct": left_pct,
            "right_pct": right_pct,
            "seats": [*SEATS["left"], *SEATS["right"]],
            "severity": "warning",
            "summary": (
                f"Similar sun exposure on both sides "
                f"(~{max(left_pct, right_pct)}%) - choose any side"
            ),
        }

    seats = SEATS[side]
    return {
        "side": side,
        "left_pct": left_pct,
        "right_pct": right_pct,
        "seats": list(seats),
        "severity": "success",
        "summary": (
            f"Choose {side.upper()} side seats ({', '.join(seats)}) "
            f"for less sun exposure ({shaded}% vs {sunny}%)"
        ),
    }
