"""Service for daily swell recaps: snapshots, history and accuracy."""
import logging
from typing import Any, Dict, List, Optional

from backend.config import settings
from backend.data.forecast_client import ForecastClient
from backend.data.snapshot_repository import SnapshotRepository, round_coordinate
from swell_recap.models.summary import DailySummary
from swell_recap.services.accuracy_service import SummaryComparer
from swell_recap.services.reconciler import SummaryReconciler
from swell_recap.services.summary_builder import DailySummaryBuilder
from swell_recap.utils.date_utils import add_days, date_window
from swell_recap.utils.units import METRIC, convert_summary, with_cardinals

logger = logging.getLogger(__name__)


def _as_dict(summary: Optional[DailySummary], units: str) -> Optional[Dict[str, Any]]:
    if summary is None:
        return None
    return with_cardinals(convert_summary(summary.to_dict(), units))


class RecapService:
    """Orchestrates fetching, building, persisting and merging summaries."""

    def __init__(
        self,
        forecast_client: ForecastClient = None,
        snapshot_repo: SnapshotRepository = None,
        builder: DailySummaryBuilder = None,
        reconciler: SummaryReconciler = None,
        comparer: SummaryComparer = None,
        padding_days: int = None,
        history_radius: int = None,
        coordinate_decimals: int = None,
    ):
        self.forecast_client = forecast_client or ForecastClient()
        self.snapshot_repo = snapshot_repo or SnapshotRepository()
        self.builder = builder or DailySummaryBuilder()
        self.reconciler = reconciler or SummaryReconciler()
        self.comparer = comparer or SummaryComparer()
        self.padding_days = (
            padding_days if padding_days is not None else settings.tide_padding_days
        )
        self.history_radius = (
            history_radius if history_radius is not None else settings.history_radius_days
        )
        self.coordinate_decimals = (
            coordinate_decimals if coordinate_decimals is not None
            else settings.coordinate_decimals
        )

    def _round(self, lat: float, lon: float):
        return (
            round_coordinate(lat, self.coordinate_decimals),
            round_coordinate(lon, self.coordinate_decimals),
        )

    async def take_snapshot(self, lat: float, lon: float, date: str) -> Dict[str, Any]:
        """
        Fetch the day (plus padding), build its summary and persist both.

        Returns:
            The stored record {lat, lon, date, hourly, summary}, with
            cardinal labels added to the returned summary
        """
        rlat, rlon = self._round(lat, lon)
        series = await self.forecast_client.fetch_hourly(
            rlat, rlon,
            add_days(date, -self.padding_days),
            add_days(date, self.padding_days),
        )
        summary = self.builder.build(series, date)

        record = {
            "lat": rlat,
            "lon": rlon,
            "date": date,
            "hourly": series.to_payload() if series is not None else {"time": []},
            "summary": summary.to_dict() if summary is not None else None,
        }
        key = self.snapshot_repo.save_snapshot(record)
        logger.info("Stored snapshot %s", key)
        return dict(record, summary=_as_dict(summary, METRIC))

    async def _history_summaries(
        self,
        lat: float,
        lon: float,
        center_date: str,
    ) -> List[Dict[str, Any]]:
        """Per-day predicted and actual DailySummary objects."""
        dates = date_window(center_date, self.history_radius)
        persisted = self.snapshot_repo.load_snapshots(dates, lat, lon)

        series = await self.forecast_client.fetch_hourly(
            lat, lon,
            add_days(dates[0], -self.padding_days),
            add_days(dates[-1], self.padding_days),
        )
        predicted = self.builder.build_many(series, dates)

        rows = []
        for d in dates:
            # Without a stored snapshot there is no actual for the day
            actual = None
            if persisted[d] is not None:
                actual = self.reconciler.reconcile(persisted[d], predicted[d], d)
            rows.append({"date": d, "predicted": predicted[d], "actual": actual})
        return rows

    async def get_history(
        self,
        lat: float,
        lon: float,
        center_date: str,
        units: str = METRIC,
    ) -> Dict[str, Any]:
        """Center date +/- the history radius with actual and predicted summaries."""
        rlat, rlon = self._round(lat, lon)
        rows = await self._history_summaries(rlat, rlon, center_date)
        return {
            "lat": rlat,
            "lon": rlon,
            "centerDate": center_date,
            "days": [
                {
                    "date": row["date"],
                    "actual": _as_dict(row["actual"], units),
                    "predicted": _as_dict(row["predicted"], units),
                }
                for row in rows
            ],
        }

    async def get_accuracy(self, lat: float, lon: float, center_date: str) -> Dict[str, Any]:
        """Predicted-minus-actual deltas per day and MAE/bias per field."""
        rlat, rlon = self._round(lat, lon)
        rows = await self._history_summaries(rlat, rlon, center_date)
        triples = [(r["date"], r["predicted"], r["actual"]) for r in rows]
        return {
            "lat": rlat,
            "lon": rlon,
            "centerDate": center_date,
            "rows": [
                {"date": d, "deltas": self.comparer.diff(p, a)}
                for d, p, a in triples
            ],
            "summary": self.comparer.summarize(triples),
        }

    def list_snapshots(self, lat: float, lon: float) -> Dict[str, Any]:
        """Dates with a stored snapshot for a location."""
        rlat, rlon = self._round(lat, lon)
        return {
            "lat": rlat,
            "lon": rlon,
            "dates": self.snapshot_repo.list_dates(rlat, rlon),
        }
