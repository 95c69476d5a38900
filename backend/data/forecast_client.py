"""Client for hourly marine and wind data from Open-Meteo."""
import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx
from cachetools import TTLCache

from backend.config import settings
from swell_recap.config import MARINE_CHANNELS, WIND_CHANNELS
from swell_recap.models.hourly import HourlySeries

logger = logging.getLogger(__name__)


class ForecastClient:
    """
    Fetches hourly marine and wind series for a point and date range.

    The marine and wind requests are issued concurrently. Either may fail
    without failing the other: the merged series simply lacks that
    source's channels.
    """

    def __init__(
        self,
        marine_url: str = None,
        forecast_url: str = None,
        timeout: float = None,
        cache: Optional[TTLCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client.

        Args:
            marine_url: Open-Meteo marine endpoint
            forecast_url: Open-Meteo weather forecast endpoint (wind)
            timeout: Per-request timeout in seconds
            cache: Optional cache of fetched series, keyed by request
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.marine_url = marine_url or settings.marine_base_url
        self.forecast_url = forecast_url or settings.forecast_base_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.cache = cache
        self.transport = transport

    @staticmethod
    def _params(
        lat: float,
        lon: float,
        start_date: str,
        end_date: str,
        channels: List[str],
    ) -> Dict[str, Any]:
        return {
            "latitude": lat,
            "longitude": lon,
            "start_date": start_date,
            "end_date": end_date,
            "hourly": ",".join(channels),
        }

    async def _fetch_hourly(
        self,
        client: httpx.AsyncClient,
        url: str,
        params: Dict[str, Any],
        source: str,
    ) -> Optional[HourlySeries]:
        """GET one source; None (logged) on any HTTP or payload failure."""
        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.warning("%s fetch failed: %s", source, e)
            return None
        except ValueError as e:
            logger.warning("%s returned invalid JSON: %s", source, e)
            return None

        series = HourlySeries.from_payload(
            payload.get("hourly") if isinstance(payload, dict) else None
        )
        if series is None:
            logger.warning("%s response has no hourly data", source)
        return series

    async def fetch_hourly(
        self,
        lat: float,
        lon: float,
        start_date: str,
        end_date: str,
    ) -> Optional[HourlySeries]:
        """
        Fetch and merge marine and wind data for [start_date, end_date].

        Returns:
            Merged HourlySeries, or None when both sources failed
        """
        cache_key = (lat, lon, start_date, end_date)
        if self.cache is not None:
            cached = self.cache.get(cache_key)
            if cached is not None:
                return cached

        logger.info("Fetching hourly data for %s,%s %s..%s", lat, lon, start_date, end_date)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            marine, wind = await asyncio.gather(
                self._fetch_hourly(
                    client,
                    self.marine_url,
                    self._params(lat, lon, start_date, end_date, MARINE_CHANNELS),
                    "marine",
                ),
                self._fetch_hourly(
                    client,
                    self.forecast_url,
                    self._params(lat, lon, start_date, end_date, WIND_CHANNELS),
                    "wind",
                ),
            )

        series = HourlySeries.concat([marine, wind])
        if series is not None and self.cache is not None:
            self.cache[cache_key] = series
        return series
