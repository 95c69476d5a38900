"""Service for comparing predicted summaries against actual ones."""
from typing import Dict, Iterable, List, Optional, Tuple
import numpy as np
import pandas as pd

from swell_recap.config import VALUE_DECIMALS
from swell_recap.models.summary import DIRECTION_LEAVES, DailySummary


def circular_difference(a: float, b: float) -> float:
    """Signed shortest angular difference a - b in [-180, 180)."""
    return ((a - b + 180.0) % 360.0) - 180.0


class SummaryComparer:
    """Per-field deltas and error statistics between two summaries."""

    def __init__(self, decimals: int = VALUE_DECIMALS):
        self.decimals = decimals

    def diff(
        self,
        predicted: Optional[DailySummary],
        actual: Optional[DailySummary],
    ) -> Optional[Dict[str, Optional[float]]]:
        """
        Delta (predicted - actual) for every scalar leaf.

        Returns:
            {leaf: delta}, with None where either side is missing, or None
            when either summary is missing entirely
        """
        if predicted is None or actual is None:
            return None

        actual_leaves = actual.leaves()
        deltas: Dict[str, Optional[float]] = {}
        for leaf, p in predicted.leaves().items():
            a = actual_leaves.get(leaf)
            if p is None or a is None:
                deltas[leaf] = None
            elif leaf in DIRECTION_LEAVES:
                deltas[leaf] = round(circular_difference(p, a), self.decimals)
            else:
                deltas[leaf] = round(p - a, self.decimals)
        return deltas

    def summarize(
        self,
        rows: Iterable[Tuple[str, Optional[DailySummary], Optional[DailySummary]]],
    ) -> Dict[str, Dict[str, Optional[float]]]:
        """
        Mean absolute error and mean bias per field over several days.

        Args:
            rows: (date, predicted, actual) triples

        Returns:
            {"mae": {leaf: value}, "bias": {leaf: value}, "count": {leaf: n}}
            where a field with no comparable day reports None
        """
        records: List[Dict[str, Optional[float]]] = []
        dates: List[str] = []
        for date, predicted, actual in rows:
            deltas = self.diff(predicted, actual)
            if deltas is not None:
                records.append(deltas)
                dates.append(date)

        if not records:
            return {"mae": {}, "bias": {}, "count": {}}

        df = pd.DataFrame.from_records(records, index=dates).astype(np.float64)
        mae = df.abs().mean(skipna=True)
        bias = df.mean(skipna=True)
        count = df.count()

        def _clean(series: pd.Series) -> Dict[str, Optional[float]]:
            return {
                k: (None if pd.isna(v) else round(float(v), self.decimals))
                for k, v in series.items()
            }

        return {
            "mae": _clean(mae),
            "bias": _clean(bias),
            "count": {k: int(v) for k, v in count.items()},
        }
