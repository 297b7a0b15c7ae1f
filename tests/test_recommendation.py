"""Tests for seat recommendation logic."""
import pytest

from core.exposure import ExposureResult
from core.recommendation import recommend_side


def test_no_sun_any_seat():
    result = recommend_side(ExposureResult(0.0, 0.0))
    assert result["side"] is None
    assert result["severity"] == "info"
    assert result["seats"] == []
    assert "No sun exposure" in result["summary"]


def test_sun_mostly_left_choose_right():
    result = recommend_side(ExposureResult(0.8, 0.2))
    assert result["side"] == "right"
    assert result["seats"] == ["B", "D"]
    assert result["severity"] == "success"
    assert result["summary"] == (
        "Choose RIGHT side seats (B, D) for less sun exposure (20% vs 80%)"
    )


def test_sun_mostly_right_choose_left():
    result = recommend_side(ExposureResult(0.0, 1.0))
    assert result["side"] == "left"
    assert result["seats"] == ["A", "C"]
    assert result["left_pct"] == 0
    assert result["right_pct"] == 100
    assert "(0% vs 100%)" in result["summary"]


def test_exactly_twenty_points_is_similar():
    result = recommend_side(ExposureResult(0.6, 0.4))
    assert result["side"] == "any"
    assert result["severity"] == "warning"
    assert result["summary"] == (
        "Similar sun exposure on both sides (~60%) - choose any side"
    )


def test_just_over_twenty_points_picks_a_side():
    result = recommend_side(ExposureResult(0.61, 0.39))
    assert result["side"] == "right"


def test_even_split_is_similar():
    result = recommend_side(ExposureResult(0.5, 0.5))
    assert result["side"] == "any"
    assert sorted(result["seats"]) == ["A", "B", "C", "D"]


@pytest.mark.parametrize("ratio,expected", [(0.125, 13), (0.005, 1), (0.994, 99)])
def test_percentages_round_half_up(ratio, expected):
    result = recommend_side(ExposureResult(ratio, 1 - ratio))
    assert result["left_pct"] == expected


def test_return_keys_always_present():
    for exposure in (ExposureResult(0.0, 0.0), ExposureResult(0.3, 0.7)):
        result = recommend_side(exposure)
        for key in ("side", "left_pct", "right_pct", "seats", "severity", "summary"):
            assert key in result
