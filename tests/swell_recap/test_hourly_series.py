"""Tests for the hourly series model."""
import numpy as np
import pytest

from swell_recap.models.hourly import HourlySeries


class TestFromPayload:
    """Tests for building a series from a raw payload."""

    def test_channels_aligned_to_time(self):
        """Test short channels are padded and long ones truncated."""
        series = HourlySeries.from_payload({
            "time": ["2025-06-01T00:00", "2025-06-01T01:00", "2025-06-01T02:00"],
            "wave_height": [1.0],
            "wind_speed_10m": [5.0, 6.0, 7.0, 8.0],
        })
        assert len(series) == 3
        wave = series.channel("wave_height")
        assert wave[0] == 1.0
        assert np.isnan(wave[1]) and np.isnan(wave[2])
        assert series.channel("wind_speed_10m").tolist() == [5.0, 6.0, 7.0]

    def test_malformed_samples_become_nan(self):
        series = HourlySeries.from_payload({
            "time": ["a", "b", "c", "d"],
            "x": [None, "oops", float("inf"), 2],
        })
        x = series.channel("x")
        assert np.isnan(x[:3]).all()
        assert x[3] == 2.0

    def test_missing_channel_is_all_nan(self):
        series = HourlySeries.from_payload({"time": ["2025-06-01T00:00"]})
        assert np.isnan(series.channel("sea_level_height_msl")).all()

    @pytest.mark.parametrize("payload", [
        None,
        [],
        {},
        {"wave_height": [1.0]},
        {"time": "2025-06-01T00:00"},
        {"time": None},
    ])
    def test_invalid_payload_is_none(self, payload):
        """Test that a missing or non-sequence time array gives no series."""
        assert HourlySeries.from_payload(payload) is None

    def test_non_sequence_channels_skipped(self):
        series = HourlySeries.from_payload({"time": ["t"], "units": "m"})
        assert series.channel_names == []


class TestDayIndices:
    """Tests for date selection."""

    def test_prefix_match(self):
        series = HourlySeries.from_payload({
            "time": ["2025-05-31T23:00", "2025-06-01T00:00", "2025-06-01T01:00", "2025-06-02T00:00"],
        })
        assert series.day_indices("2025-06-01").tolist() == [1, 2]
        assert series.day_indices("2025-06-03").size == 0


class TestMerge:
    """Tests for combining marine and wind series."""

    def test_outer_join_on_time(self):
        """Test the union of timestamps with gaps filled by NaN."""
        marine = HourlySeries.from_payload({
            "time": ["2025-06-01T00:00", "2025-06-01T01:00", "2025-06-01T02:00"],
            "swell_wave_height": [1.0, 1.1, 1.2],
        })
        wind = HourlySeries.from_payload({
            "time": ["2025-06-01T01:00", "2025-06-01T02:00", "2025-06-01T03:00"],
            "wind_speed_10m": [10.0, 11.0, 12.0],
        })

        merged = marine.merge(wind)

        assert merged.time == (
            "2025-06-01T00:00", "2025-06-01T01:00", "2025-06-01T02:00", "2025-06-01T03:00",
        )
        swell = merged.channel("swell_wave_height")
        assert swell[:3].tolist() == [1.0, 1.1, 1.2]
        assert np.isnan(swell[3])
        speed = merged.channel("wind_speed_10m")
        assert np.isnan(speed[0])
        assert speed[1:].tolist() == [10.0, 11.0, 12.0]

    def test_shared_channel_prefers_left(self):
        left = HourlySeries.from_payload({"time": ["t1", "t2"], "x": [1.0, None]})
        right = HourlySeries.from_payload({"time": ["t1", "t2"], "x": [5.0, 6.0]})
        assert left.merge(right).channel("x").tolist() == [1.0, 6.0]

    def test_concat_skips_none(self):
        part = HourlySeries.from_payload({"time": ["t1"], "x": [1.0]})
        assert HourlySeries.concat([None, part]) is part
        assert HourlySeries.concat([None, None]) is None


class TestToPayload:
    def test_nan_serialized_as_none(self):
        series = HourlySeries.from_payload({"time": ["t1", "t2"], "x": [1.5, None]})
        assert series.to_payload() == {"time": ["t1", "t2"], "x": [1.5, None]}
