"""Service for reducing an hourly bundle to one day's summary."""
import logging
from typing import Any, Dict, Iterable, Optional, Union
import numpy as np

from swell_recap.config import (
    SEA_LEVEL,
    SWELL_TIERS,
    WATER_TEMPERATURE,
    WAVE_HEIGHT,
    WIND_DIRECTION,
    WIND_SPEED,
)
from swell_recap.models.hourly import HourlySeries
from swell_recap.models.summary import DailySummary, SwellComponent, SwellSet, Wind
from swell_recap.services.direction_binner import DirectionBinner
from swell_recap.services.numeric_series import NumericSeries
from swell_recap.services.tide_detector import TideExtremaDetector

logger = logging.getLogger(__name__)


class DailySummaryBuilder:
    """
    Builds a DailySummary for one calendar day from hourly data.

    Scalars are medians of the day's clean samples, directions are the
    histogram mode, and tides are detected on the full unsliced series so
    turning points near midnight see their true neighbours.
    """

    def __init__(
        self,
        numeric: NumericSeries = None,
        binner: DirectionBinner = None,
        tide_detector: TideExtremaDetector = None,
    ):
        self.numeric = numeric or NumericSeries()
        self.binner = binner or DirectionBinner()
        self.tide_detector = tide_detector or TideExtremaDetector()

    def _scalar(self, series: HourlySeries, name: str, idx: np.ndarray) -> Optional[float]:
        return self.numeric.summarize(series.channel(name)[idx])

    def _direction(self, series: HourlySeries, name: str, idx: np.ndarray) -> Optional[int]:
        return self.binner.most_common(series.channel(name)[idx])

    def _swell_component(
        self,
        series: HourlySeries,
        prefix: str,
        idx: np.ndarray,
    ) -> SwellComponent:
        return SwellComponent(
            height=self._scalar(series, f"{prefix}_height", idx),
            period=self._scalar(series, f"{prefix}_period", idx),
            direction=self._direction(series, f"{prefix}_direction", idx),
        )

    def _swell_set(self, series: HourlySeries, idx: np.ndarray) -> SwellSet:
        tiers: Dict[str, Optional[SwellComponent]] = {}
        for tier, prefix in SWELL_TIERS.items():
            component = self._swell_component(series, prefix, idx)
            # Primary is always reported; lesser tiers are absent when empty
            if tier != "primary" and component.is_empty():
                component = None
            tiers[tier] = component
        return SwellSet(**tiers)

    def build(
        self,
        hourly: Union[HourlySeries, Dict[str, Any], None],
        date: str,
    ) -> Optional[DailySummary]:
        """
        Build the summary for ``date``.

        Args:
            hourly: HourlySeries or raw ``hourly`` payload, possibly spanning
                several days (padding days improve tide detection)
            date: Target calendar date (YYYY-MM-DD)

        Returns:
            DailySummary, or None when the payload is structurally invalid or
            has no samples on the date
        """
        series = hourly if isinstance(hourly, HourlySeries) else HourlySeries.from_payload(hourly)
        if series is None:
            logger.debug("No usable hourly timestamps, no summary for %s", date)
            return None

        idx = series.day_indices(date)
        if idx.size == 0:
            logger.debug("No hourly samples on %s", date)
            return None

        return DailySummary(
            date=date,
            swell=self._swell_set(series, idx),
            wave_height=self._scalar(series, WAVE_HEIGHT, idx),
            wind=Wind(
                speed=self._scalar(series, WIND_SPEED, idx),
                direction=self._direction(series, WIND_DIRECTION, idx),
            ),
            water_temperature=self._scalar(series, WATER_TEMPERATURE, idx),
            tides=self.tide_detector.detect(series.time, series.channel(SEA_LEVEL), date),
        )

    def build_many(
        self,
        hourly: Union[HourlySeries, Dict[str, Any], None],
        dates: Iterable[str],
    ) -> Dict[str, Optional[DailySummary]]:
        """Build summaries for several dates from one (padded) bundle."""
        series = hourly if isinstance(hourly, HourlySeries) else HourlySeries.from_payload(hourly)
        return {date: self.build(series, date) for date in dates}
