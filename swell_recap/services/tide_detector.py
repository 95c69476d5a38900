"""Service for detecting high and low tides in an hourly sea-level series."""
import logging
from typing import List, Sequence, Tuple
import numpy as np
from scipy.signal import argrelextrema

from swell_recap.config import MAX_TIDE_EVENTS, MIN_TIDE_SAMPLES, VALUE_DECIMALS
from swell_recap.models.summary import TideBundle, TideEvent

logger = logging.getLogger(__name__)


class TideExtremaDetector:
    """
    Turning-point detector for sea level, restricted to one calendar day.

    The input series should be padded with the neighbouring days: a sample
    is only a turning point when it is strictly above (or below) both of its
    immediate neighbours, so a high at 00:00 can only be seen when the
    previous day's 23:00 sample is present.
    """

    def __init__(
        self,
        max_events: int = MAX_TIDE_EVENTS,
        min_samples: int = MIN_TIDE_SAMPLES,
        decimals: int = VALUE_DECIMALS,
    ):
        """
        Initialize detector.

        Args:
            max_events: Maximum highs (and lows) kept per day
            min_samples: Minimum date-matching samples needed for any event
            decimals: Rounding of returned heights
        """
        self.max_events = max_events
        self.min_samples = min_samples
        self.decimals = decimals

    @staticmethod
    def find_turning_points(heights: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Find interior local maxima and minima.

        Endpoints are never turning points, and NaN samples compare false,
        so a gap on either side disqualifies a candidate.

        Returns:
            Tuple of (maxima indices, minima indices)
        """
        h = np.asarray(heights, dtype=np.float64)
        if h.size < 3:
            empty = np.array([], dtype=np.int64)
            return empty, empty

        maxima = argrelextrema(h, np.greater)[0]
        minima = argrelextrema(h, np.less)[0]
        return maxima, minima

    def _event(self, times: Sequence[str], heights: np.ndarray, idx: int) -> TideEvent:
        return TideEvent(time=times[idx], height=round(float(heights[idx]), self.decimals))

    def _select(
        self,
        candidates: np.ndarray,
        heights: np.ndarray,
        highest: bool,
    ) -> List[int]:
        """Keep the most extreme candidates, returned in time order."""
        sign = -1.0 if highest else 1.0
        ranked = sorted(candidates.tolist(), key=lambda i: (sign * heights[i], i))
        return sorted(ranked[: self.max_events])

    def detect(
        self,
        times: Sequence[str],
        heights: np.ndarray,
        date: str,
    ) -> TideBundle:
        """
        Detect tide highs and lows on ``date``.

        Args:
            times: ISO timestamps of the full (padded) series, ascending
            heights: Sea level per timestamp (NaN = absent)
            date: Target calendar date (YYYY-MM-DD)

        Returns:
            TideBundle with at most ``max_events`` highs and lows. When no
            turning points of one kind fall on the date, a single global max
            and min of the date's samples is used instead.
        """
        h = np.asarray(heights, dtype=np.float64)
        prefix = date + "T"
        on_date = np.array(
            [str(t).startswith(prefix) for t in times], dtype=bool
        )
        if on_date.size != h.size:
            logger.debug("Sea level length %d != time length %d", h.size, on_date.size)
            return TideBundle.empty()

        day_idx = np.flatnonzero(on_date & np.isfinite(h))
        if day_idx.size < self.min_samples:
            return TideBundle.empty()

        maxima, minima = self.find_turning_points(h)
        maxima = maxima[on_date[maxima]]
        minima = minima[on_date[minima]]

        if maxima.size and minima.size:
            highs = self._select(maxima, h, highest=True)
            lows = self._select(minima, h, highest=False)
        else:
            # Flat or monotonic day: fall back to the day's extremes
            day_heights = h[day_idx]
            highs = [int(day_idx[np.argmax(day_heights)])]
            lows = [int(day_idx[np.argmin(day_heights)])]

        return TideBundle(
            highs=[self._event(times, h, i) for i in highs],
            lows=[self._event(times, h, i) for i in lows],
        )
