"""Tests for unit conversion helpers."""
import pytest

from swell_recap.models.summary import (
    DailySummary,
    SwellComponent,
    SwellSet,
    TideBundle,
    TideEvent,
    Wind,
)
from swell_recap.utils.units import (
    IMPERIAL,
    METRIC,
    cardinal,
    convert_summary,
    kmh_to_mph,
    to_fahrenheit,
    with_cardinals,
)


class TestConversions:
    def test_scalars(self):
        assert to_fahrenheit(0) == 32
        assert to_fahrenheit(100) == 212
        assert kmh_to_mph(100) == pytest.approx(62.1371)

    @pytest.mark.parametrize(
        "degrees,label",
        [
            (0, "N"),
            (11, "N"),
            (11.25, "NNE"),
            (90, "E"),
            (225, "SW"),
            (340, "NNW"),
            (355, "N"),
        ],
    )
    def test_cardinal(self, degrees, label):
        assert cardinal(degrees) == label

    def test_cardinal_none(self):
        assert cardinal(None) is None


class TestConvertSummary:
    """Tests for converting a whole summary dict."""

    def summary_dict(self):
        return DailySummary(
            date="2025-06-01",
            swell=SwellSet(primary=SwellComponent(height=1.0, period=12.0, direction=270)),
            wave_height=2.0,
            wind=Wind(speed=10.0, direction=300),
            water_temperature=20.0,
            tides=TideBundle(highs=[TideEvent("2025-06-01T10:00", 1.0)]),
        ).to_dict()

    def test_metric_unchanged(self):
        data = self.summary_dict()
        assert convert_summary(data, METRIC) == data

    def test_imperial(self):
        data = self.summary_dict()
        out = convert_summary(data, IMPERIAL)

        assert out["swell"]["primary"]["height"] == 3.281
        assert out["swell"]["primary"]["period"] == 12.0
        assert out["swell"]["primary"]["direction"] == 270
        assert out["swell"]["secondary"] is None
        assert out["waveHeight"] == 6.562
        assert out["wind"]["speed"] == 6.214
        assert out["wind"]["direction"] == 300
        assert out["waterTemperature"] == 68.0
        assert out["tides"]["highs"][0]["height"] == 3.281
        assert out["tideHigh"] == 3.281
        assert out["tideLow"] is None
        # Input left untouched
        assert data["waveHeight"] == 2.0

    def test_unknown_units(self):
        with pytest.raises(ValueError):
            convert_summary(self.summary_dict(), "nautical")

    def test_with_cardinals(self):
        data = self.summary_dict()
        out = with_cardinals(data)

        assert out["swell"]["primary"]["cardinal"] == "W"
        assert out["swell"]["secondary"] is None
        assert out["wind"]["cardinal"] == "WNW"
        assert "cardinal" not in data["wind"]

    def test_with_cardinals_null_direction(self):
        data = DailySummary(date="2025-06-01").to_dict()
        out = with_cardinals(data)
        assert out["swell"]["primary"]["cardinal"] is None
        assert out["wind"]["cardinal"] is None
