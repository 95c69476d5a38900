"""Tests for the marine/wind forecast client."""
import asyncio
import httpx
import numpy as np

from backend.data.forecast_client import ForecastClient
from cachetools import TTLCache

MARINE_URL = "https://marine.test/v1/marine"
FORECAST_URL = "https://forecast.test/v1/forecast"
TIMES = ["2025-06-01T00:00", "2025-06-01T01:00"]


def make_handler(calls, wind_status=200):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.url.host == "marine.test":
            return httpx.Response(
                200,
                json={"hourly": {"time": TIMES, "swell_wave_height": [1.0, None]}},
            )
        if wind_status != 200:
            return httpx.Response(wind_status, json={"error": True})
        return httpx.Response(
            200,
            json={"hourly": {"time": TIMES, "wind_speed_10m": [12.0, 14.0]}},
        )

    return handler


def make_client(handler, cache=None):
    return ForecastClient(
        marine_url=MARINE_URL,
        forecast_url=FORECAST_URL,
        timeout=5,
        cache=cache,
        transport=httpx.MockTransport(handler),
    )


class TestForecastClient:
    """Tests for ForecastClient.fetch_hourly."""

    def test_merges_marine_and_wind(self):
        calls = []
        client = make_client(make_handler(calls))
        series = asyncio.run(client.fetch_hourly(32.1, -117.2, "2025-05-31", "2025-06-02"))

        assert series.time == tuple(TIMES)
        assert series.channel("swell_wave_height")[0] == 1.0
        assert np.isnan(series.channel("swell_wave_height")[1])
        assert list(series.channel("wind_speed_10m")) == [12.0, 14.0]

        marine_request = next(r for r in calls if r.url.host == "marine.test")
        assert marine_request.url.params["start_date"] == "2025-05-31"
        assert marine_request.url.params["end_date"] == "2025-06-02"
        assert "sea_level_height_msl" in marine_request.url.params["hourly"]

    def test_wind_failure_degrades(self):
        """Test a failing wind source leaves the marine channels usable."""
        client = make_client(make_handler([], wind_status=500))
        series = asyncio.run(client.fetch_hourly(32.1, -117.2, "2025-06-01", "2025-06-01"))

        assert "swell_wave_height" in series.channel_names
        assert "wind_speed_10m" not in series.channel_names

    def test_both_sources_fail(self):
        def handler(request):
            return httpx.Response(503)

        client = make_client(handler)
        assert asyncio.run(client.fetch_hourly(0, 0, "2025-06-01", "2025-06-01")) is None

    def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, content=b"not json")

        client = make_client(handler)
        assert asyncio.run(client.fetch_hourly(0, 0, "2025-06-01", "2025-06-01")) is None

    def test_cached_series_reused(self):
        calls = []
        client = make_client(make_handler(calls), cache=TTLCache(maxsize=8, ttl=60))

        first = asyncio.run(client.fetch_hourly(1, 2, "2025-06-01", "2025-06-01"))
        second = asyncio.run(client.fetch_hourly(1, 2, "2025-06-01", "2025-06-01"))

        assert first is second
        assert len(calls) == 2

    def test_expired_series_refetched(self):
        """Test a cached series is fetched again once its TTL has passed."""
        now = [0.0]
        calls = []
        cache = TTLCache(maxsize=8, ttl=60, timer=lambda: now[0])
        client = make_client(make_handler(calls), cache=cache)

        asyncio.run(client.fetch_hourly(1, 2, "2025-06-01", "2025-06-01"))
        now[0] = 30.0
        asyncio.run(client.fetch_hourly(1, 2, "2025-06-01", "2025-06-01"))
        assert len(calls) == 2

        now[0] = 120.0
        asyncio.run(client.fetch_hourly(1, 2, "2025-06-01", "2025-06-01"))
        assert len(calls) == 4

    def test_failed_fetch_not_cached(self):
        def handler(request):
            return httpx.Response(503)

        cache = TTLCache(maxsize=8, ttl=60)
        client = make_client(handler, cache=cache)
        asyncio.run(client.fetch_hourly(1, 2, "2025-06-01", "2025-06-01"))
        assert len(cache) == 0
