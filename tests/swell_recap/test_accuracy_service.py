"""Tests for predicted vs actual comparisons."""
import pytest

from swell_recap.models.summary import DailySummary, SwellComponent, SwellSet, Wind
from swell_recap.services.accuracy_service import SummaryComparer, circular_difference


def summary(date="2025-06-01", height=None, wind_dir=None, temp=None):
    return DailySummary(
        date=date,
        swell=SwellSet(primary=SwellComponent(height=height)),
        wind=Wind(direction=wind_dir),
        water_temperature=temp,
    )


class TestCircularDifference:
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (10, 350, 20),
            (350, 10, -20),
            (90, 90, 0),
            (0, 180, -180),
        ],
    )
    def test_wraps(self, a, b, expected):
        assert circular_difference(a, b) == expected


class TestDiff:
    """Tests for per-day deltas."""

    def test_predicted_minus_actual(self):
        deltas = SummaryComparer().diff(
            summary(height=2.0, wind_dir=350, temp=18.0),
            summary(height=1.5, wind_dir=10, temp=18.4),
        )
        assert deltas["swell.primary.height"] == 0.5
        assert deltas["wind.direction"] == -20
        assert deltas["waterTemperature"] == pytest.approx(-0.4)

    def test_missing_leaf_gives_none(self):
        deltas = SummaryComparer().diff(summary(height=2.0), summary(height=None))
        assert deltas["swell.primary.height"] is None
        assert deltas["wind.speed"] is None

    def test_missing_side_gives_none(self):
        assert SummaryComparer().diff(None, summary(height=1.0)) is None
        assert SummaryComparer().diff(summary(height=1.0), None) is None


class TestSummarize:
    """Tests for MAE and bias aggregation."""

    def test_mae_and_bias(self):
        rows = [
            ("2025-06-01", summary(height=1.0), summary(height=1.5)),
            ("2025-06-02", summary(height=2.0), summary(height=1.0)),
        ]
        result = SummaryComparer().summarize(rows)

        assert result["mae"]["swell.primary.height"] == 0.75
        assert result["bias"]["swell.primary.height"] == 0.25
        assert result["count"]["swell.primary.height"] == 2

    def test_field_without_comparisons(self):
        rows = [("2025-06-01", summary(height=1.0), summary(height=1.5))]
        result = SummaryComparer().summarize(rows)

        assert result["mae"]["waveHeight"] is None
        assert result["bias"]["waveHeight"] is None
        assert result["count"]["waveHeight"] == 0

    def test_days_without_actual_are_skipped(self):
        rows = [
            ("2025-06-01", summary(height=1.0), None),
            ("2025-06-02", summary(height=3.0), summary(height=2.0)),
        ]
        result = SummaryComparer().summarize(rows)
        assert result["mae"]["swell.primary.height"] == 1.0
        assert result["count"]["swell.primary.height"] == 1

    def test_no_rows(self):
        assert SummaryComparer().summarize([]) == {"mae": {}, "bias": {}, "count": {}}
